"""HTTP relay forwarding notifications to Telegram and signups to beehiiv."""

__version__ = "1.0.0"
