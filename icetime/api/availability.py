"""Availability endpoints."""
from typing import Optional
from fastapi import APIRouter, Depends, Query
from sqlalchemy.ext.asyncio import AsyncSession

from icetime.core.database import get_db
from icetime.core.exceptions import ValidationError
from icetime.schemas.availability import AvailabilityResponse
from icetime.services.availability_service import availability_service
from icetime.services.slot_catalog import parse_booking_date

router = APIRouter(prefix="/availability", tags=["availability"])


@router.get("", response_model=AvailabilityResponse)
async def check_availability(
    date: str = Query(..., description="Calendar day, YYYY-MM-DD"),
    facility_id: Optional[str] = Query(default=None, alias="facilityId"),
    db: AsyncSession = Depends(get_db),
):
    """
    Get free slots for a day.

    Returns every active facility, or only the requested one, with the slots
    that are not held by a pending or confirmed booking.

    Args:
        date: Calendar day
        facility_id: Optional facility key
        db: Database session

    Returns:
        Availability per facility
    """
    try:
        target_date = parse_booking_date(date)
    except ValidationError as e:
        raise e.to_http_exception()

    return await availability_service.check(db, target_date, facility_id)
