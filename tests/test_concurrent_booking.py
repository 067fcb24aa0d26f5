import asyncio
from datetime import date
from unittest.mock import AsyncMock

import pytest
from sqlalchemy import func, select

from icetime.core.exceptions import ConflictError
from icetime.models.booking import Booking, BookingStatus
from icetime.services.booking_service import booking_service


async def attempt(session_factory, request):
    async with session_factory() as session:
        try:
            booking = await booking_service.book(session, request)
            return booking.id
        except ConflictError as e:
            return e


async def active_count(session_factory):
    async with session_factory() as session:
        result = await session.execute(
            select(func.count(Booking.id)).where(
                Booking.facility_id == "rink-1",
                Booking.date == date(2025, 6, 10),
                Booking.time_slot == "14:00",
                Booking.status != BookingStatus.CANCELLED.value,
            )
        )
        return result.scalar_one()


async def test_racing_bookings_get_exactly_one_confirmation(
    session_factory, facilities, booking_request, monkeypatch
):
    # Both requests pass the existence check before either inserts
    monkeypatch.setattr(booking_service, "_find_active_booking", AsyncMock(return_value=None))

    results = await asyncio.gather(
        attempt(session_factory, booking_request(customerName="First Caller")),
        attempt(session_factory, booking_request(customerName="Second Caller")),
    )

    confirmed = [r for r in results if isinstance(r, int)]
    conflicts = [r for r in results if isinstance(r, ConflictError)]
    assert len(confirmed) == 1
    assert len(conflicts) == 1
    assert conflicts[0].message == "This time slot is no longer available"
    assert await active_count(session_factory) == 1


async def test_many_concurrent_bookings_hold_slot_once(session_factory, facilities, booking_request):
    results = await asyncio.gather(
        *[
            attempt(session_factory, booking_request(customerName=f"Caller {i}"))
            for i in range(5)
        ]
    )

    assert sum(1 for r in results if isinstance(r, int)) == 1
    assert await active_count(session_factory) == 1


async def test_losing_session_stays_usable(session_factory, facilities, booking_request, monkeypatch):
    monkeypatch.setattr(booking_service, "_find_active_booking", AsyncMock(return_value=None))

    async with session_factory() as session:
        await booking_service.book(session, booking_request())
        with pytest.raises(ConflictError):
            await booking_service.book(session, booking_request(customerName="Late"))

        other = await booking_service.book(session, booking_request(timeSlot="15:00"))
        assert other.status == "confirmed"
