"""
Response models for API endpoints.

Defines the two shapes of the response envelope.
"""

from __future__ import annotations

from pydantic import BaseModel, Field

MESSAGE_SENT = "Message sent successfully"
SUBSCRIPTION_SUCCESSFUL = "Subscription successful"


class StatusResponse(BaseModel):
    """Success envelope."""

    status: str = Field(..., description="Fixed confirmation text per endpoint")


class ErrorResponse(BaseModel):
    """Failure envelope, returned with HTTP 200."""

    error: str = Field(..., description="Human-readable cause")
