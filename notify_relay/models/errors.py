"""
Error envelope for the relay endpoints.

Every failure past method routing is reported to the caller as
``{"error": "<message>"}``. The code is kept server-side for logging.
"""

from __future__ import annotations

from enum import Enum

from notify_relay.models.api import ErrorResponse


class ErrorCode(str, Enum):
    """Error categories surfaced by the relay."""

    METHOD_NOT_ALLOWED = "METHOD_NOT_ALLOWED"
    INVALID_REQUEST_BODY = "INVALID_REQUEST_BODY"
    VALIDATION_ERROR = "VALIDATION_ERROR"
    MISSING_CONFIGURATION = "MISSING_CONFIGURATION"
    UPSTREAM_ERROR = "UPSTREAM_ERROR"


class ConfigurationError(Exception):
    """Required startup configuration is missing."""


class RelayError(Exception):
    """
    A request that could not be relayed.

    Attributes:
        code: Error category from ErrorCode
        message: Text returned to the caller in the error envelope
    """

    def __init__(self, code: ErrorCode, message: str) -> None:
        super().__init__(message)
        self.code = code
        self.message = message

    def to_dict(self) -> dict[str, str]:
        """
        Convert error to the JSON envelope.

        Returns:
            Dictionary with a single 'error' key
        """
        return ErrorResponse(error=self.message).model_dump()


# ━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━
# Predefined Error Factories
# ━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━


def invalid_request_body_error() -> RelayError:
    """Create error for a body that cannot be decoded."""
    return RelayError(ErrorCode.INVALID_REQUEST_BODY, "Invalid request body")


def empty_field_error(field: str) -> RelayError:
    """Create error for a required field left empty."""
    return RelayError(ErrorCode.VALIDATION_ERROR, f"{field} cannot be empty")


def missing_configuration_error(variable: str) -> RelayError:
    """Create error for a secret absent at call time."""
    return RelayError(
        ErrorCode.MISSING_CONFIGURATION,
        f"{variable} environment variable is not set",
    )


def unexpected_status_error(status_code: int) -> RelayError:
    """Create error for an upstream response outside the accepted statuses."""
    return RelayError(
        ErrorCode.UPSTREAM_ERROR, f"unexpected status code: {status_code}"
    )


def transport_error(action: str, exc: Exception) -> RelayError:
    """Create error for a failure building, encoding or sending a request."""
    return RelayError(ErrorCode.UPSTREAM_ERROR, f"error {action}: {exc}")
