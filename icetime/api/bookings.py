"""Booking endpoints."""
from typing import Optional
from fastapi import APIRouter, Depends, Query
from sqlalchemy.ext.asyncio import AsyncSession

from icetime.core.database import get_db
from icetime.core.exceptions import ConflictError, NotFoundError, ValidationError
from icetime.schemas.booking import BookingCreate, BookingCreated, BookingInDB, BookingList
from icetime.services.booking_service import booking_service, confirmation_message
from icetime.services.slot_catalog import parse_booking_date

router = APIRouter(prefix="/bookings", tags=["bookings"])


@router.get("", response_model=BookingList)
async def list_bookings(
    date: Optional[str] = Query(default=None, description="Calendar day, YYYY-MM-DD"),
    facility_id: Optional[str] = Query(default=None, alias="facilityId"),
    db: AsyncSession = Depends(get_db),
):
    """
    List bookings, sorted by date then time slot.

    Cancelled bookings are included so the history stays visible.

    Args:
        date: Optional calendar day filter
        facility_id: Optional facility key filter
        db: Database session

    Returns:
        Matching bookings
    """
    try:
        target_date = parse_booking_date(date) if date else None
    except ValidationError as e:
        raise e.to_http_exception()

    bookings = await booking_service.list_bookings(db, target_date, facility_id)
    return BookingList(bookings=[BookingInDB.model_validate(b) for b in bookings])


@router.post("", response_model=BookingCreated, status_code=201)
async def create_booking(
    booking: BookingCreate,
    db: AsyncSession = Depends(get_db),
):
    """
    Book a slot at a facility.

    Responds 409 when the slot is already held and 404 when the facility is
    unknown or inactive.

    Args:
        booking: Booking request
        db: Database session

    Returns:
        Created booking with a confirmation message
    """
    try:
        created = await booking_service.book(db, booking)
    except (ValidationError, NotFoundError, ConflictError) as e:
        raise e.to_http_exception()

    return BookingCreated(
        booking=BookingInDB.model_validate(created),
        confirmation_message=confirmation_message(created),
    )


@router.get("/{booking_id}", response_model=BookingInDB)
async def get_booking(
    booking_id: int,
    db: AsyncSession = Depends(get_db),
):
    """Get a specific booking by ID."""
    try:
        return await booking_service.get_booking(db, booking_id)
    except NotFoundError as e:
        raise e.to_http_exception()


@router.post("/{booking_id}/cancel", response_model=BookingInDB)
async def cancel_booking(
    booking_id: int,
    db: AsyncSession = Depends(get_db),
):
    """
    Cancel a booking.

    Cancelling an already-cancelled booking returns it unchanged.

    Args:
        booking_id: Booking ID
        db: Database session

    Returns:
        The cancelled booking
    """
    try:
        return await booking_service.cancel(db, booking_id)
    except NotFoundError as e:
        raise e.to_http_exception()
