"""
Tool functions exposed to the hosted voice assistant.

Each function takes the raw argument mapping the assistant sends and returns
a JSON-ready dict. Business failures (bad input, unknown ids, taken slots)
come back as ``{"success": False, "error": ...}`` so the assistant can read
them to the caller. Store failures propagate.
"""
import json
import logging
from typing import Any, Awaitable, Callable, Dict, Optional

from pydantic import ValidationError as PydanticValidationError
from sqlalchemy.ext.asyncio import AsyncSession

from icetime.core.exceptions import (
    BookingServiceError,
    ConflictError,
    NotFoundError,
    ValidationError,
    describe_validation_errors,
)
from icetime.schemas.booking import BookingConfirmation, BookingCreate
from icetime.schemas.facility import FacilityListItem
from icetime.services.availability_service import availability_service
from icetime.services.booking_service import (
    CANCELLED_MESSAGE,
    booking_service,
    confirmation_message,
)
from icetime.services.facility_directory import facility_directory
from icetime.services.slot_catalog import parse_booking_date

logger = logging.getLogger(__name__)

UNKNOWN_FUNCTION = "Unknown function"

ToolHandler = Callable[[AsyncSession, Dict[str, Any]], Awaitable[Dict[str, Any]]]


def parse_arguments(raw: Any) -> Dict[str, Any]:
    """Accept arguments as a mapping, a JSON string, or nothing."""
    if raw is None or raw == "":
        return {}
    if isinstance(raw, dict):
        return raw
    if not isinstance(raw, str):
        raise ValidationError("Function arguments must be an object")
    try:
        parsed = json.loads(raw)
    except json.JSONDecodeError:
        raise ValidationError("Function arguments are not valid JSON")
    if not isinstance(parsed, dict):
        raise ValidationError("Function arguments must be an object")
    return parsed


def failure(error: BookingServiceError) -> Dict[str, Any]:
    return {"success": False, "error": error.message}


class AssistantTools:
    """Dispatches named assistant function calls onto the booking services."""

    def __init__(self):
        self.handlers: Dict[str, ToolHandler] = {
            "getFacilities": self.get_facilities,
            "checkAvailability": self.check_availability,
            "bookAppointment": self.book_appointment,
            "cancelAppointment": self.cancel_appointment,
        }

    async def dispatch(
        self,
        db: AsyncSession,
        name: Optional[str],
        raw_arguments: Any = None,
    ) -> Dict[str, Any]:
        """
        Run one named function and return its result payload.

        Unknown names produce an error result instead of raising, so the
        rest of a batch still runs.
        """
        handler = self.handlers.get(name)
        if handler is None:
            logger.warning(f"Assistant called unknown function '{name}'")
            return {"error": UNKNOWN_FUNCTION}

        try:
            arguments = parse_arguments(raw_arguments)
            return await handler(db, arguments)
        except (ValidationError, NotFoundError, ConflictError) as e:
            logger.info(f"{name} rejected: {e.message}")
            return failure(e)

    async def get_facilities(self, db: AsyncSession, arguments: Dict[str, Any]) -> Dict[str, Any]:
        facilities = await facility_directory.list_active(db)
        items = [
            FacilityListItem(
                number=number,
                id=facility.facility_id,
                name=facility.name,
                address=facility.full_address,
            ).model_dump()
            for number, facility in enumerate(facilities, start=1)
        ]
        return {"facilities": items}

    async def check_availability(self, db: AsyncSession, arguments: Dict[str, Any]) -> Dict[str, Any]:
        target_date = parse_booking_date(arguments.get("date"))
        facility_id = arguments.get("facilityId")
        facility_id = str(facility_id) if facility_id not in (None, "") else None

        response = await availability_service.check(db, target_date, facility_id)
        return response.model_dump(by_alias=True, mode="json")

    async def book_appointment(self, db: AsyncSession, arguments: Dict[str, Any]) -> Dict[str, Any]:
        try:
            data = BookingCreate.model_validate(arguments)
        except PydanticValidationError as e:
            raise ValidationError(describe_validation_errors(e.errors()))

        booking = await booking_service.book(db, data)
        confirmation = BookingConfirmation(
            id=booking.id,
            facility_name=booking.facility_name,
            date=booking.date,
            time_slot=booking.time_slot,
            confirmation_message=confirmation_message(booking),
        )
        return {
            "success": True,
            "booking": confirmation.model_dump(by_alias=True, mode="json"),
        }

    async def cancel_appointment(self, db: AsyncSession, arguments: Dict[str, Any]) -> Dict[str, Any]:
        booking_id = arguments.get("bookingId")
        if booking_id is None or booking_id == "":
            raise ValidationError("Missing required fields: bookingId")

        await booking_service.cancel(db, booking_id)
        return {"success": True, "message": CANCELLED_MESSAGE}


# Singleton instance
assistant_tools = AssistantTools()
