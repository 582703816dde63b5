"""
Subscription Service - relays newsletter signups to beehiiv.

Credentials are resolved from the secret provider on every call, so a
missing key is reported to the caller instead of failing startup.
"""

from __future__ import annotations

import logging

import httpx

from notify_relay.core.config import SecretProvider
from notify_relay.models.errors import (
    empty_field_error,
    missing_configuration_error,
    transport_error,
    unexpected_status_error,
)
from notify_relay.models.requests import SubscribeRequest

logger = logging.getLogger(__name__)

BEEHIIV_API_BASE = "https://api.beehiiv.com/v2"
PUBLICATION_ID_VAR = "BEEHIIV_PUBLICATION_ID"
API_KEY_VAR = "BEEHIIV_API_KEY"

# Statuses accepted from create-subscription; /send accepts 200 only
ACCEPTED_STATUSES = frozenset({httpx.codes.OK, httpx.codes.CREATED})


class SubscriptionService:
    """Creates beehiiv subscriptions from inbound signups."""

    def __init__(self, secrets: SecretProvider, client: httpx.AsyncClient) -> None:
        """
        Initialize subscription service.

        Args:
            secrets: Provider for the publication ID and API key
            client: Shared HTTP client for outbound calls
        """
        self._secrets = secrets
        self._client = client

    def _require(self, name: str) -> str:
        value = self._secrets.get(name)
        if not value:
            raise missing_configuration_error(name)
        return value

    async def subscribe(self, request: SubscribeRequest) -> None:
        """
        Create a subscription for the request's email.

        Args:
            request: Decoded signup with optional attribution fields

        Raises:
            RelayError: If the email is empty, a secret is missing, the
                call fails, or beehiiv answers with neither 200 nor 201
        """
        if not request.email:
            raise empty_field_error("Email")

        publication_id = self._require(PUBLICATION_ID_VAR)
        api_key = self._require(API_KEY_VAR)

        url = f"{BEEHIIV_API_BASE}/publications/{publication_id}/subscriptions"
        try:
            outbound = self._client.build_request(
                "POST",
                url,
                json=request.outbound_payload(),
                headers={"Authorization": f"Bearer {api_key}"},
            )
        except (httpx.InvalidURL, ValueError) as e:
            raise transport_error("creating request", e) from e

        try:
            response = await self._client.send(outbound)
        except httpx.HTTPError as e:
            logger.warning(f"beehiiv request failed: {type(e).__name__}")
            raise transport_error("sending request", e) from e

        if response.status_code not in ACCEPTED_STATUSES:
            logger.warning(f"beehiiv returned status {response.status_code}")
            raise unexpected_status_error(response.status_code)

        logger.info("Subscription created in beehiiv")
