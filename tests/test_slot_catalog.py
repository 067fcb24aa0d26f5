from datetime import date, datetime

import pytest

from icetime.core.exceptions import ValidationError
from icetime.services.slot_catalog import (
    all_slots,
    is_valid_slot,
    normalize_slot,
    parse_booking_date,
)


def test_catalog_is_hourly_from_six_to_twenty_two():
    slots = all_slots()
    assert len(slots) == 17
    assert slots[0] == "06:00"
    assert slots[-1] == "22:00"
    assert slots == sorted(slots)


def test_is_valid_slot():
    assert is_valid_slot("14:00")
    assert not is_valid_slot("14:30")
    assert not is_valid_slot("05:00")
    assert not is_valid_slot("23:00")


@pytest.mark.parametrize("raw", ["9:00", "09:00", "09:00:00", " 09:00 "])
def test_normalize_slot_accepts_common_spellings(raw):
    assert normalize_slot(raw) == "09:00"


@pytest.mark.parametrize("raw", ["", "noon", "09:30", "23:00", None])
def test_normalize_slot_rejects_values_outside_catalog(raw):
    with pytest.raises(ValidationError):
        normalize_slot(raw)


def test_parse_booking_date_keeps_calendar_day():
    assert parse_booking_date("2025-06-10") == date(2025, 6, 10)
    assert parse_booking_date(date(2025, 6, 10)) == date(2025, 6, 10)
    assert parse_booking_date(datetime(2025, 6, 10, 23, 30)) == date(2025, 6, 10)


def test_parse_booking_date_never_converts_timezones():
    # Late evening with an offset stays on its own calendar day
    assert parse_booking_date("2025-06-10T23:30:00-05:00") == date(2025, 6, 10)
    assert parse_booking_date("2025-06-10T00:15:00Z") == date(2025, 6, 10)


@pytest.mark.parametrize("raw", ["", "tomorrow", "2025-13-01", "10/06/2025", None])
def test_parse_booking_date_rejects_malformed_input(raw):
    with pytest.raises(ValidationError):
        parse_booking_date(raw)


@pytest.mark.parametrize("raw", ["14:00:59", "14:-0", "-14:00", "14:00:00:00", "14:+0"])
def test_normalize_slot_rejects_trailing_or_signed_parts(raw):
    with pytest.raises(ValidationError):
        normalize_slot(raw)
