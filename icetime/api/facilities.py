"""Facility endpoints."""
from typing import List
from fastapi import APIRouter, Depends, HTTPException
from sqlalchemy.ext.asyncio import AsyncSession

from icetime.core.database import get_db
from icetime.schemas.facility import FacilityInDB
from icetime.services.facility_directory import facility_directory

router = APIRouter(prefix="/facilities", tags=["facilities"])


@router.get("", response_model=List[FacilityInDB])
async def list_facilities(
    db: AsyncSession = Depends(get_db),
):
    """
    List active facilities, ordered by name.

    Args:
        db: Database session

    Returns:
        List of facilities
    """
    return await facility_directory.list_active(db)


@router.get("/{facility_id}", response_model=FacilityInDB)
async def get_facility(
    facility_id: str,
    db: AsyncSession = Depends(get_db),
):
    """
    Get a specific active facility by its key.

    Args:
        facility_id: Facility key, e.g. "bell-sensplex"
        db: Database session

    Returns:
        Facility details
    """
    facility = await facility_directory.find_by_id(db, facility_id)

    if not facility:
        raise HTTPException(status_code=404, detail="Facility not found")

    return facility
