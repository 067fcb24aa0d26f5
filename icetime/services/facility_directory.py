"""Facility directory backed by the facilities table."""
import logging
from typing import List, Optional
from sqlalchemy import select
from sqlalchemy.ext.asyncio import AsyncSession

from icetime.core.database import translate_store_errors
from icetime.models.facility import Facility
from icetime.schemas.facility import FacilityCreate

logger = logging.getLogger(__name__)


class FacilityDirectory:
    """Read access to bookable facilities, plus upsert for seeding."""

    @translate_store_errors
    async def list_active(self, db: AsyncSession) -> List[Facility]:
        """Return active facilities sorted by name."""
        result = await db.execute(
            select(Facility)
            .where(Facility.is_active.is_(True))
            .order_by(Facility.name)
        )
        return list(result.scalars().all())

    @translate_store_errors
    async def find_by_id(self, db: AsyncSession, facility_id: str) -> Optional[Facility]:
        """
        Look up an active facility by its string key.

        Returns None when the facility does not exist or is inactive.
        """
        result = await db.execute(
            select(Facility).where(
                Facility.facility_id == facility_id,
                Facility.is_active.is_(True),
            )
        )
        return result.scalar_one_or_none()

    @translate_store_errors
    async def upsert(self, db: AsyncSession, data: FacilityCreate) -> Facility:
        """Insert a facility or update the existing one with the same key."""
        result = await db.execute(
            select(Facility).where(Facility.facility_id == data.facility_id)
        )
        facility = result.scalar_one_or_none()

        if facility:
            for field, value in data.model_dump().items():
                setattr(facility, field, value)
            logger.info(f"Updated facility {data.facility_id}")
        else:
            facility = Facility(**data.model_dump())
            db.add(facility)
            logger.info(f"Created facility {data.facility_id}")

        await db.commit()
        await db.refresh(facility)
        return facility


# Singleton instance
facility_directory = FacilityDirectory()
