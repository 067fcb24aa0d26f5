"""
Booking domain exceptions.

Services raise these; the REST routers turn them into HTTP errors and the
assistant tool dispatcher turns them into ``{"success": False, "error": ...}``
results that can be read back to the caller.
"""
from typing import Any, Dict, Sequence

from fastapi import HTTPException, status


class BookingServiceError(Exception):
    """Base exception for booking errors."""

    status_code = status.HTTP_500_INTERNAL_SERVER_ERROR

    def __init__(self, message: str):
        self.message = message
        super().__init__(message)

    def to_http_exception(self) -> HTTPException:
        return HTTPException(status_code=self.status_code, detail=self.message)


class ValidationError(BookingServiceError):
    """Raised when required fields are missing or malformed."""

    status_code = status.HTTP_400_BAD_REQUEST


class NotFoundError(BookingServiceError):
    """Raised for an unknown facility or booking id."""

    status_code = status.HTTP_404_NOT_FOUND


class ConflictError(BookingServiceError):
    """Raised when a slot is already held by a non-cancelled booking."""

    status_code = status.HTTP_409_CONFLICT


class StoreUnavailableError(BookingServiceError):
    """Raised when the database cannot be reached or times out."""


def describe_validation_errors(errors: Sequence[Dict[str, Any]]) -> str:
    """
    Turn pydantic error entries into one readable sentence.

    Missing fields are listed together; otherwise the first problem is
    reported.
    """
    missing = [str(e["loc"][-1]) for e in errors if e.get("type") == "missing" and e.get("loc")]
    if missing:
        return f"Missing required fields: {', '.join(missing)}"
    if not errors:
        return "Invalid request"

    first = errors[0]
    message = first.get("msg", "Invalid value").removeprefix("Value error, ")
    field = first["loc"][-1] if first.get("loc") else None
    if field is None or str(field) in message:
        return message
    return f"{field}: {message}"
