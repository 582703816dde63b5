"""
Notifier Service - relays messages to a Telegram chat.

Posts each message to the Bot API sendMessage method using the
credentials loaded at startup.
"""

from __future__ import annotations

import logging

import httpx

from notify_relay.core.config import TelegramSettings
from notify_relay.models.errors import (
    empty_field_error,
    transport_error,
    unexpected_status_error,
)
from notify_relay.models.requests import OutboundNotification

logger = logging.getLogger(__name__)

TELEGRAM_API_BASE = "https://api.telegram.org"


class NotifierService:
    """Forwards notification text to the configured Telegram chat."""

    def __init__(self, settings: TelegramSettings, client: httpx.AsyncClient) -> None:
        """
        Initialize notifier service.

        Args:
            settings: Bot token and target chat
            client: Shared HTTP client for outbound calls
        """
        self._settings = settings
        self._client = client

    @property
    def send_message_url(self) -> str:
        return f"{TELEGRAM_API_BASE}/bot{self._settings.bot_token}/sendMessage"

    def build_notification(self, message: str) -> OutboundNotification:
        return OutboundNotification(chat_id=self._settings.chat_id, text=message)

    async def send(self, message: str) -> None:
        """
        Send one message to the chat.

        Exactly one outbound call is made per valid message; nothing is
        retried.

        Args:
            message: Notification text, sent with HTML parse mode

        Raises:
            RelayError: If the message is empty, the call fails, or
                Telegram answers with anything other than 200
        """
        if not message:
            raise empty_field_error("Message")

        notification = self.build_notification(message)

        try:
            response = await self._client.post(
                self.send_message_url,
                json=notification.model_dump(),
            )
        except httpx.HTTPError as e:
            logger.warning(f"Telegram request failed: {type(e).__name__}")
            raise transport_error("sending message", e) from e

        if response.status_code != httpx.codes.OK:
            logger.warning(f"Telegram returned status {response.status_code}")
            raise unexpected_status_error(response.status_code)

        logger.info("Message delivered to Telegram")
