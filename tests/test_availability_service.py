from datetime import date
from unittest.mock import AsyncMock

import pytest
from sqlalchemy.exc import OperationalError

from icetime.core.exceptions import StoreUnavailableError
from icetime.services.availability_service import availability_service
from icetime.services.booking_service import booking_service
from icetime.services.slot_catalog import all_slots

DAY = date(2025, 6, 10)


async def test_empty_day_shows_every_slot_at_every_active_facility(db):
    availability = await availability_service.resolve(db, DAY)

    assert [a.facility.id for a in availability] == ["rink-1", "rink-2", "rink-3"]
    for entry in availability:
        assert entry.available_slots == all_slots()


async def test_booked_slot_is_excluded_and_order_kept(db, booking_request):
    await booking_service.book(db, booking_request())

    availability = await availability_service.resolve(db, DAY, "rink-1")

    assert len(availability) == 1
    slots = availability[0].available_slots
    assert "14:00" not in slots
    assert len(slots) == 16
    assert slots == [s for s in all_slots() if s != "14:00"]


async def test_booking_only_affects_its_own_facility_and_day(db, booking_request):
    await booking_service.book(db, booking_request())

    availability = await availability_service.resolve(db, DAY)
    by_id = {a.facility.id: a.available_slots for a in availability}
    assert "14:00" not in by_id["rink-1"]
    assert by_id["rink-2"] == all_slots()

    next_day = await availability_service.resolve(db, date(2025, 6, 11), "rink-1")
    assert next_day[0].available_slots == all_slots()


async def test_cancelled_booking_frees_slot(db, booking_request):
    booking = await booking_service.book(db, booking_request())
    await booking_service.cancel(db, booking.id)

    availability = await availability_service.resolve(db, DAY, "rink-1")
    assert "14:00" in availability[0].available_slots


@pytest.mark.parametrize("facility_id", ["no-such-rink", "rink-closed"])
async def test_unknown_or_inactive_facility_resolves_empty(db, facility_id):
    assert await availability_service.resolve(db, DAY, facility_id) == []


async def test_check_wraps_date_and_facility_details(db):
    response = await availability_service.check(db, DAY, "rink-2")

    assert response.date == DAY
    facility = response.availability[0].facility
    assert facility.name == "Northside Ice Complex"
    assert facility.address == "456 North Ave, Ottawa, ON K1B 0B2"


async def test_store_failure_is_reported_as_unavailable(db, monkeypatch):
    monkeypatch.setattr(
        db,
        "execute",
        AsyncMock(side_effect=OperationalError("SELECT 1", {}, Exception("connection refused"))),
    )

    with pytest.raises(StoreUnavailableError):
        await availability_service.resolve(db, DAY)
