from __future__ import annotations

from typing import Optional


class GatewayError(Exception):
    """Base for every error the gateway reports back to its caller."""

    default_message = "Request failed"

    def __init__(self, message: Optional[str] = None):
        super().__init__(message or self.default_message)

    @property
    def message(self) -> str:
        return str(self)


class ConfigurationError(GatewayError):
    default_message = "LLM API key is not configured"


class ValidationError(GatewayError):
    default_message = "Invalid request"


class RateLimitError(GatewayError):
    default_message = "Rate limit exceeded. Please try again later."


class QuotaExhaustedError(GatewayError):
    default_message = "AI credits exhausted. Please add more credits."


class UpstreamError(GatewayError):
    default_message = "AI gateway error"


class ResponseFormatError(GatewayError):
    default_message = "AI response was not in the expected format"


# Single source of truth for error kind -> HTTP status.
STATUS_BY_ERROR: dict[type[GatewayError], int] = {
    ValidationError: 500,
    QuotaExhaustedError: 402,
    RateLimitError: 429,
    ConfigurationError: 500,
    UpstreamError: 500,
    ResponseFormatError: 500,
}


def status_for(exc: GatewayError) -> int:
    for cls in type(exc).__mro__:
        if cls in STATUS_BY_ERROR:
            return STATUS_BY_ERROR[cls]
    return 500


def error_for_upstream_status(status_code: int) -> GatewayError:
    """Map a non-success status from the LLM provider onto the taxonomy."""
    if status_code == 429:
        return RateLimitError()
    if status_code == 402:
        return QuotaExhaustedError()
    return UpstreamError(f"AI gateway error (status {status_code})")
