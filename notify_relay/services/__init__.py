"""
Service Container and Lifecycle Management.

Provides a centralized container for the two forwarders and the HTTP
client they share, with startup/shutdown hooks for FastAPI.
"""

from __future__ import annotations

import logging
from contextlib import asynccontextmanager
from typing import AsyncIterator

import httpx
from fastapi import FastAPI

from notify_relay.core.config import (
    EnvironmentSecrets,
    SecretProvider,
    Settings,
    TelegramSettings,
    get_settings,
    load_telegram_settings,
)
from notify_relay.core.logging import SecretRedactingFilter, install_secret_filter
from notify_relay.services.notifier_service import NotifierService
from notify_relay.services.subscription_service import SubscriptionService

logger = logging.getLogger(__name__)


class ServiceContainer:
    """
    Dependency injection container for the forwarders.

    Telegram credentials are validated in startup(); a missing value
    aborts the application before it serves any request.
    """

    def __init__(
        self,
        settings: Settings | None = None,
        secrets: SecretProvider | None = None,
    ) -> None:
        """Initialize container with empty service references."""
        self._settings = settings or get_settings()
        self._secrets = secrets or EnvironmentSecrets()
        self._client: httpx.AsyncClient | None = None
        self._notifier: NotifierService | None = None
        self._subscription: SubscriptionService | None = None
        self._log_filter: SecretRedactingFilter | None = None

    @property
    def notifier(self) -> NotifierService:
        """Get notifier service instance."""
        if self._notifier is None:
            raise RuntimeError(
                "ServiceContainer not initialized - call startup() first"
            )
        return self._notifier

    @property
    def subscription(self) -> SubscriptionService:
        """Get subscription service instance."""
        if self._subscription is None:
            raise RuntimeError(
                "ServiceContainer not initialized - call startup() first"
            )
        return self._subscription

    async def startup(self, telegram: TelegramSettings | None = None) -> None:
        """
        Load credentials and create the forwarders.

        Args:
            telegram: Pre-built credentials; read from the environment
                when omitted

        Raises:
            ConfigurationError: If the Telegram credentials are missing
        """
        logger.info("Starting service container")

        telegram = telegram or load_telegram_settings()
        self._log_filter = install_secret_filter([telegram.bot_token])

        self._client = httpx.AsyncClient(
            timeout=httpx.Timeout(self._settings.outbound_timeout)
        )
        self._notifier = NotifierService(telegram, self._client)
        self._subscription = SubscriptionService(self._secrets, self._client)

        logger.info("Service container started")

    async def shutdown(self) -> None:
        """Close the shared HTTP client and drop service references."""
        logger.info("Shutting down service container")

        if self._client:
            await self._client.aclose()

        if self._log_filter:
            logging.getLogger("httpx").removeFilter(self._log_filter)

        self._client = None
        self._notifier = None
        self._subscription = None
        self._log_filter = None

        logger.info("Service container shutdown complete")


# Global service container instance
_services: ServiceContainer | None = None


def get_services() -> ServiceContainer:
    """
    Get the global service container instance.

    Returns:
        Global ServiceContainer singleton

    Raises:
        RuntimeError: If container hasn't been initialized
    """
    if _services is None:
        raise RuntimeError(
            "Services not initialized - ensure services_lifespan() is used"
        )
    return _services


@asynccontextmanager
async def services_lifespan(app: FastAPI) -> AsyncIterator[None]:
    """
    FastAPI lifespan context manager for service initialization.

    Args:
        app: FastAPI application instance

    Yields:
        None (context manager pattern)
    """
    global _services

    container = ServiceContainer()
    await container.startup()
    _services = container
    logger.info("FastAPI services initialized")

    try:
        yield
    finally:
        await container.shutdown()
        _services = None
        logger.info("FastAPI services cleaned up")


__all__ = [
    "ServiceContainer",
    "get_services",
    "services_lifespan",
    "NotifierService",
    "SubscriptionService",
]
