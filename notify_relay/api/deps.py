"""
Dependency injection providers for API endpoints.

Route handlers receive the forwarders and their decoded bodies through
these providers, which tests replace via app.dependency_overrides.
"""

from __future__ import annotations

from typing import TypeVar

from fastapi import Request
from pydantic import BaseModel, ValidationError

from notify_relay.models.errors import invalid_request_body_error
from notify_relay.models.requests import NotifyRequest, SubscribeRequest
from notify_relay.services import NotifierService, SubscriptionService, get_services

ModelT = TypeVar("ModelT", bound=BaseModel)


def get_notifier_service() -> NotifierService:
    """
    Dependency provider for NotifierService.

    Returns:
        NotifierService instance from the global container
    """
    return get_services().notifier


def get_subscription_service() -> SubscriptionService:
    """
    Dependency provider for SubscriptionService.

    Returns:
        SubscriptionService instance from the global container
    """
    return get_services().subscription


async def _decode_body(request: Request, model: type[ModelT]) -> ModelT:
    # Decoded as JSON whatever the Content-Type; browsers post text/plain
    body = await request.body()
    try:
        return model.model_validate_json(body)
    except ValidationError as e:
        raise invalid_request_body_error() from e


async def notify_body(request: Request) -> NotifyRequest:
    """
    Decode the /send body.

    Raises:
        RelayError: If the body is not a JSON object with string fields
    """
    return await _decode_body(request, NotifyRequest)


async def subscribe_body(request: Request) -> SubscribeRequest:
    """
    Decode the /subscribe body.

    Raises:
        RelayError: If the body is not a JSON object with string fields
    """
    return await _decode_body(request, SubscribeRequest)
