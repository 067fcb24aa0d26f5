"""Fixed hourly slot catalog and date parsing shared by all facilities."""
from datetime import date, datetime
from typing import List, Union

from icetime.core.config import settings
from icetime.core.exceptions import ValidationError


def all_slots() -> List[str]:
    """
    Return every bookable slot in time-of-day order.

    Slots are hourly from SLOT_START_HOUR through SLOT_END_HOUR inclusive,
    formatted as "HH:MM".
    """
    return [
        f"{hour:02d}:00"
        for hour in range(settings.SLOT_START_HOUR, settings.SLOT_END_HOUR + 1)
    ]


def is_valid_slot(value: str) -> bool:
    return value in all_slots()


def normalize_slot(value: str) -> str:
    """
    Return the canonical form of a slot string.

    Accepts "9:00", "09:00" and "09:00:00".

    Raises:
        ValidationError: If the value is not a catalog slot
    """
    if not isinstance(value, str) or not value.strip():
        raise ValidationError("Time slot is required")

    parts = value.strip().split(":")
    if len(parts) > 3 or not all(part.isdigit() for part in parts):
        raise ValidationError(f"Invalid time slot '{value}'")

    hour = int(parts[0])
    minute = int(parts[1]) if len(parts) > 1 else 0
    if len(parts) == 3 and int(parts[2]) != 0:
        raise ValidationError(f"Invalid time slot '{value}'")

    slot = f"{hour:02d}:{minute:02d}"
    if not is_valid_slot(slot):
        slots = all_slots()
        raise ValidationError(
            f"Invalid time slot '{value}'. Bookable slots run hourly from {slots[0]} to {slots[-1]}"
        )
    return slot


def parse_booking_date(value: Union[str, date, datetime]) -> date:
    """
    Reduce a date value to its calendar day.

    Dates are timezone-naive calendar days. A datetime (or ISO datetime
    string) keeps its own calendar date, with no timezone conversion.

    Raises:
        ValidationError: If the value is missing or malformed
    """
    if isinstance(value, datetime):
        return value.date()
    if isinstance(value, date):
        return value
    if not isinstance(value, str) or not value.strip():
        raise ValidationError("Date is required")

    raw = value.strip()
    try:
        if len(raw) > 10:
            return datetime.fromisoformat(raw.replace("Z", "+00:00")).date()
        return date.fromisoformat(raw)
    except ValueError:
        raise ValidationError(f"Invalid date '{value}'. Expected YYYY-MM-DD")
