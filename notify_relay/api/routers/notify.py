"""
Notify router - relays messages to the Telegram chat.
"""

from __future__ import annotations

from fastapi import APIRouter, Depends

from notify_relay.api.deps import get_notifier_service, notify_body
from notify_relay.models.api import MESSAGE_SENT, StatusResponse
from notify_relay.models.requests import NotifyRequest
from notify_relay.services import NotifierService

router = APIRouter(tags=["notify"])


@router.post("/send", response_model=StatusResponse)
async def send_message(
    payload: NotifyRequest = Depends(notify_body),
    notifier: NotifierService = Depends(get_notifier_service),
) -> StatusResponse:
    """
    Forward a message to Telegram.

    Args:
        payload: Body with the message text
        notifier: Injected notifier service

    Returns:
        StatusResponse on delivery; failures are rendered as the error
        envelope by the RelayError handler
    """
    await notifier.send(payload.message)
    return StatusResponse(status=MESSAGE_SENT)
