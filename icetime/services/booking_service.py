"""Booking writer, cancellation and ledger queries."""
import logging
from typing import List, Optional, Union
from datetime import date
from sqlalchemy import select
from sqlalchemy.exc import IntegrityError
from sqlalchemy.ext.asyncio import AsyncSession

from icetime.core.config import settings
from icetime.core.database import translate_store_errors
from icetime.core.exceptions import ConflictError, NotFoundError, ValidationError
from icetime.models.booking import (
    ACTIVE_STATUSES,
    DEFAULT_BOOKING_TYPE,
    Booking,
    BookingStatus,
    BookingType,
)
from icetime.schemas.booking import BookingCreate
from icetime.services.facility_directory import facility_directory
from icetime.services.slot_catalog import normalize_slot

logger = logging.getLogger(__name__)

FACILITY_NOT_FOUND = "Facility not found"
BOOKING_NOT_FOUND = "Booking not found"
SLOT_TAKEN = "This time slot is no longer available"
CANCELLED_MESSAGE = "Your booking has been cancelled successfully."

# Largest value of a 32-bit INTEGER primary key
MAX_BOOKING_ID = 2**31 - 1


def confirmation_message(booking: Booking) -> str:
    """Spoken confirmation for a new booking."""
    return (
        f"Your ice time at {booking.facility_name} on {booking.date.isoformat()} "
        f"at {booking.time_slot} has been confirmed. See you at the rink!"
    )


def resolve_booking_type(value: Optional[str]) -> str:
    """Return the booking type value, falling back to the default for unknown input."""
    if value:
        try:
            return BookingType(value.strip().lower()).value
        except ValueError:
            logger.info(f"Unknown booking type '{value}', using {DEFAULT_BOOKING_TYPE.value}")
    return DEFAULT_BOOKING_TYPE.value


class BookingService:
    """Service for writing and cancelling bookings."""

    @translate_store_errors
    async def book(self, db: AsyncSession, data: BookingCreate) -> Booking:
        """
        Create a confirmed booking for a free slot.

        Checks run in a fixed order: facility, then existing booking, then
        insert. The insert itself is guarded by the uq_bookings_active_slot
        index, so a concurrent booking that slips past the existence check is
        still rejected.

        Args:
            db: Database session
            data: Validated booking request

        Returns:
            The persisted booking

        Raises:
            ValidationError: If the time slot is not in the catalog
            NotFoundError: If the facility is unknown or inactive
            ConflictError: If the slot is already held
        """
        time_slot = normalize_slot(data.time_slot)
        if data.duration is not None and data.duration <= 0:
            raise ValidationError("Duration must be a positive number of minutes")

        facility = await facility_directory.find_by_id(db, data.facility_id)
        if not facility:
            raise NotFoundError(FACILITY_NOT_FOUND)
        # Rolling back a lost race expires facility, so keep plain values
        facility_id = facility.facility_id

        existing = await self._find_active_booking(db, facility_id, data.date, time_slot)
        if existing:
            logger.info(
                f"Rejected booking for {facility_id} on {data.date} at {time_slot}: "
                f"held by booking {existing.id}"
            )
            raise ConflictError(SLOT_TAKEN)

        booking = Booking(
            facility_id=facility_id,
            facility_name=facility.name,
            date=data.date,
            time_slot=time_slot,
            duration=data.duration or settings.DEFAULT_BOOKING_DURATION_MINUTES,
            customer_name=data.customer_name,
            customer_phone=data.customer_phone,
            customer_email=data.customer_email or None,
            booking_type=resolve_booking_type(data.booking_type),
            status=BookingStatus.CONFIRMED.value,
            notes=data.notes,
        )
        db.add(booking)

        try:
            await db.commit()
        except IntegrityError:
            await db.rollback()
            logger.info(
                f"Rejected booking for {facility_id} on {data.date} at {time_slot}: "
                "lost race for the slot"
            )
            raise ConflictError(SLOT_TAKEN)

        await db.refresh(booking)
        logger.info(
            f"Confirmed booking {booking.id} for {booking.facility_id} "
            f"on {booking.date} at {booking.time_slot}"
        )
        return booking

    @translate_store_errors
    async def cancel(self, db: AsyncSession, booking_id: Union[int, str]) -> Booking:
        """
        Cancel a booking, freeing its slot.

        Cancelling an already-cancelled booking succeeds without changes.

        Raises:
            NotFoundError: If no booking has this id
        """
        booking = await self._get(db, booking_id)
        if not booking:
            raise NotFoundError(BOOKING_NOT_FOUND)

        if booking.status != BookingStatus.CANCELLED.value:
            booking.status = BookingStatus.CANCELLED.value
            await db.commit()
            await db.refresh(booking)
            logger.info(f"Cancelled booking {booking.id}")
        else:
            logger.info(f"Booking {booking.id} already cancelled")

        return booking

    @translate_store_errors
    async def get_booking(self, db: AsyncSession, booking_id: Union[int, str]) -> Booking:
        booking = await self._get(db, booking_id)
        if not booking:
            raise NotFoundError(BOOKING_NOT_FOUND)
        return booking

    @translate_store_errors
    async def list_bookings(
        self,
        db: AsyncSession,
        target_date: Optional[date] = None,
        facility_id: Optional[str] = None,
    ) -> List[Booking]:
        """List bookings of any status, ordered by date then time slot."""
        query = select(Booking)
        if target_date:
            query = query.where(Booking.date == target_date)
        if facility_id:
            query = query.where(Booking.facility_id == facility_id)

        result = await db.execute(
            query.order_by(Booking.date, Booking.time_slot, Booking.id)
        )
        return list(result.scalars().all())

    async def _find_active_booking(
        self,
        db: AsyncSession,
        facility_id: str,
        target_date: date,
        time_slot: str,
    ) -> Optional[Booking]:
        result = await db.execute(
            select(Booking).where(
                Booking.facility_id == facility_id,
                Booking.date == target_date,
                Booking.time_slot == time_slot,
                Booking.status.in_(ACTIVE_STATUSES),
            )
        )
        return result.scalars().first()

    async def _get(self, db: AsyncSession, booking_id: Union[int, str]) -> Optional[Booking]:
        # The assistant passes ids back as strings
        try:
            key = int(booking_id)
        except (TypeError, ValueError):
            return None
        if not 1 <= key <= MAX_BOOKING_ID:
            return None
        return await db.get(Booking, key)


# Singleton instance
booking_service = BookingService()
