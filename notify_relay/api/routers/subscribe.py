"""
Subscribe router - relays newsletter signups to beehiiv.
"""

from __future__ import annotations

from fastapi import APIRouter, Depends

from notify_relay.api.deps import get_subscription_service, subscribe_body
from notify_relay.models.api import SUBSCRIPTION_SUCCESSFUL, StatusResponse
from notify_relay.models.requests import SubscribeRequest
from notify_relay.services import SubscriptionService

router = APIRouter(tags=["subscribe"])


@router.post("/subscribe", response_model=StatusResponse)
async def subscribe(
    payload: SubscribeRequest = Depends(subscribe_body),
    subscriptions: SubscriptionService = Depends(get_subscription_service),
) -> StatusResponse:
    """Create a beehiiv subscription for the posted email."""
    await subscriptions.subscribe(payload)
    return StatusResponse(status=SUBSCRIPTION_SUCCESSFUL)
