"""
Error taxonomy for the grid gateway and its mapping to HTTP responses.

Adapters raise these; routes stay thin and call grid_error_to_response.
Structural errors (bad config, failed upstream) abort the whole request.
Per-record data gaps never raise; they degrade to defaults inside the adapters.
"""
from __future__ import annotations

from typing import Any

from fastapi.responses import JSONResponse


class GridGatewayError(Exception):
    """Base class for every error raised by the gateway core."""


class InvalidDateError(GridGatewayError):
    """Start/end input could not be parsed as a calendar date."""


class MappingError(GridGatewayError):
    """Tenant mapping config points at a missing or wrong-shaped field."""


class UnknownProviderError(GridGatewayError):
    """No adapter is registered for the provider id."""


class TenantNotFoundError(GridGatewayError):
    """No tenant config for the given id."""


class IntegrationError(GridGatewayError):
    """Upstream fetch failed or a required setting is missing. Carries upstream detail when present."""

    def __init__(self, message: str, *, detail: Any = None) -> None:
        super().__init__(message)
        self.detail = detail


class HttpError(GridGatewayError):
    """Raised by the fetch capability on non-2xx responses and transport failures."""

    def __init__(self, message: str, *, status_code: int | None = None, body: Any = None) -> None:
        super().__init__(message)
        self.status_code = status_code
        self.body = body


# ---------------------------------------------------------------------------
# HTTP status codes for known error categories
# ---------------------------------------------------------------------------

STATUS_BAD_REQUEST = 400
STATUS_NOT_FOUND = 404
STATUS_UNPROCESSABLE = 422
STATUS_INTERNAL_ERROR = 500
STATUS_BAD_GATEWAY = 502


# List of (exception type, status_code). First match wins, so subclasses go first.
GRID_ERROR_RULES: list[tuple[type[Exception], int]] = [
    (InvalidDateError, STATUS_BAD_REQUEST),
    (TenantNotFoundError, STATUS_NOT_FOUND),
    (MappingError, STATUS_UNPROCESSABLE),
    (IntegrationError, STATUS_BAD_GATEWAY),
    (UnknownProviderError, STATUS_INTERNAL_ERROR),
]


def status_for(exc: Exception) -> int:
    for exc_type, status_code in GRID_ERROR_RULES:
        if isinstance(exc, exc_type):
            return status_code
    return STATUS_INTERNAL_ERROR


def grid_error_to_response(exc: Exception) -> JSONResponse:
    """
    Map an exception from the availability pipeline to a JSON error response.
    Body is {"error": message}; IntegrationError adds "detail" with the upstream payload.
    """
    body: dict[str, Any] = {"error": str(exc) or "Internal Server Error"}
    detail = getattr(exc, "detail", None)
    if detail is not None:
        body["detail"] = detail
    return JSONResponse(status_code=status_for(exc), content=body)
