"""
Pytest configuration and fixtures for relay tests.
"""

from __future__ import annotations

import json
from typing import AsyncGenerator, Callable

import httpx
import pytest
import pytest_asyncio
from httpx import ASGITransport, AsyncClient

from notify_relay.core.config import TelegramSettings
from notify_relay.services import NotifierService, SubscriptionService

pytest_plugins = ("pytest_asyncio",)

BOT_TOKEN = "123456:test-bot-token"
CHAT_ID = "-1001234567890"
PUBLICATION_ID = "pub_00000000-0000-0000-0000-000000000000"
API_KEY = "beehiiv-test-key"


class RecordingUpstream:
    """Stand-in for a third-party API that records every request."""

    def __init__(self, status_code: int = 200) -> None:
        self.status_code = status_code
        self.error: Exception | None = None
        self.requests: list[httpx.Request] = []

    def __call__(self, request: httpx.Request) -> httpx.Response:
        self.requests.append(request)
        if self.error is not None:
            raise self.error
        return httpx.Response(self.status_code, json={"ok": True})

    @property
    def last_json(self) -> dict:
        assert self.requests, "no outbound request was made"
        return json.loads(self.requests[-1].content)


@pytest.fixture
def telegram_settings() -> TelegramSettings:
    """Fixed bot credentials."""
    return TelegramSettings(bot_token=BOT_TOKEN, chat_id=CHAT_ID)


@pytest.fixture
def beehiiv_secrets() -> dict[str, str]:
    """Secrets mapping used in place of the process environment."""
    return {"BEEHIIV_PUBLICATION_ID": PUBLICATION_ID, "BEEHIIV_API_KEY": API_KEY}


@pytest.fixture
def upstream() -> RecordingUpstream:
    """Outbound API answering 200 by default."""
    return RecordingUpstream()


@pytest_asyncio.fixture
async def outbound_client(
    upstream: RecordingUpstream,
) -> AsyncGenerator[httpx.AsyncClient, None]:
    """HTTP client whose requests never leave the process."""
    async with httpx.AsyncClient(transport=httpx.MockTransport(upstream)) as client:
        yield client


@pytest.fixture
def notifier(
    telegram_settings: TelegramSettings, outbound_client: httpx.AsyncClient
) -> NotifierService:
    return NotifierService(telegram_settings, outbound_client)


@pytest.fixture
def subscription_service(
    beehiiv_secrets: dict[str, str], outbound_client: httpx.AsyncClient
) -> SubscriptionService:
    from notify_relay.core.config import EnvironmentSecrets

    return SubscriptionService(EnvironmentSecrets(beehiiv_secrets), outbound_client)


@pytest_asyncio.fixture
async def async_client(
    notifier: NotifierService, subscription_service: SubscriptionService
) -> AsyncGenerator[AsyncClient, None]:
    """Async client for the app with both forwarders overridden."""
    from notify_relay.api.deps import get_notifier_service, get_subscription_service
    from notify_relay.main import app

    overrides: dict[Callable, Callable] = {
        get_notifier_service: lambda: notifier,
        get_subscription_service: lambda: subscription_service,
    }
    app.dependency_overrides.update(overrides)

    transport = ASGITransport(app=app)
    try:
        async with AsyncClient(transport=transport, base_url="http://test") as client:
            yield client
    finally:
        for dependency in overrides:
            app.dependency_overrides.pop(dependency, None)
