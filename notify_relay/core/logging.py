"""
Custom logging filters.

Keeps credentials out of log output. httpx logs every request URL at
INFO level, and the Telegram URL carries the bot token in its path.
"""

from __future__ import annotations

import logging
from collections.abc import Iterable

REDACTED = "[REDACTED]"


class SecretRedactingFilter(logging.Filter):
    """Replace known secret values in log records with a placeholder."""

    def __init__(self, secrets: Iterable[str | None]) -> None:
        super().__init__()
        self._secrets = [s for s in secrets if s]

    def filter(self, record: logging.LogRecord) -> bool:
        """
        Redact secrets from the fully formatted message.

        Args:
            record: The log record to filter

        Returns:
            Always True; records are rewritten, never dropped
        """
        if not self._secrets:
            return True

        message = record.getMessage()
        redacted = message
        for secret in self._secrets:
            redacted = redacted.replace(secret, REDACTED)

        if redacted != message:
            record.msg = redacted
            record.args = None
        return True


def install_secret_filter(
    secrets: Iterable[str | None], logger_name: str = "httpx"
) -> SecretRedactingFilter:
    """
    Attach a SecretRedactingFilter to the named logger.

    Args:
        secrets: Values to hide; empty and None entries are skipped
        logger_name: Logger to attach to

    Returns:
        The installed filter, so callers can remove it again
    """
    log_filter = SecretRedactingFilter(secrets)
    logging.getLogger(logger_name).addFilter(log_filter)
    return log_filter
