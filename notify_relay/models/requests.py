"""
Request models for API endpoints.

Defines Pydantic models for the inbound bodies and the payloads sent
to the third-party APIs. Absent keys decode to empty strings (JSON null
included) so that emptiness is reported by the endpoint, not by body decoding.
"""

from __future__ import annotations

from typing import Literal

from pydantic import BaseModel, ConfigDict, Field, field_validator


class NotifyRequest(BaseModel):
    """Request model for /send."""

    model_config = ConfigDict(extra="ignore")

    message: str = Field(default="", description="Notification text (HTML allowed)")

    @field_validator("message", mode="before")
    @classmethod
    def null_as_empty(cls, v: object) -> object:
        """Treat JSON null as an empty string."""
        return "" if v is None else v


class SubscribeRequest(BaseModel):
    """Request model for /subscribe."""

    model_config = ConfigDict(extra="ignore")

    email: str = Field(default="", description="Subscriber email address")
    utm_source: str = ""
    utm_medium: str = ""
    referring_site: str = ""

    @field_validator(
        "email", "utm_source", "utm_medium", "referring_site", mode="before"
    )
    @classmethod
    def null_as_empty(cls, v: object) -> object:
        """Treat JSON null as an empty string."""
        return "" if v is None else v

    def outbound_payload(self) -> dict[str, str]:
        """
        Build the beehiiv create-subscription body.

        Optional attribution keys are omitted rather than sent empty.

        Returns:
            Dictionary with 'email' and any non-empty attribution fields
        """
        payload = {"email": self.email}
        for key in ("utm_source", "utm_medium", "referring_site"):
            value = getattr(self, key)
            if value:
                payload[key] = value
        return payload


class OutboundNotification(BaseModel):
    """Body of the Telegram sendMessage call."""

    chat_id: str
    text: str
    parse_mode: Literal["HTML"] = "HTML"
