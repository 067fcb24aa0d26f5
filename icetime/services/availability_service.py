"""Availability resolution for facilities on a calendar day."""
import logging
from collections import defaultdict
from typing import Dict, List, Optional, Set
from datetime import date
from sqlalchemy import select
from sqlalchemy.ext.asyncio import AsyncSession

from icetime.core.database import translate_store_errors
from icetime.models.booking import Booking, BookingStatus
from icetime.schemas.availability import AvailabilityResponse, FacilityAvailability
from icetime.schemas.facility import FacilityRef
from icetime.services.facility_directory import facility_directory
from icetime.services.slot_catalog import all_slots

logger = logging.getLogger(__name__)


class AvailabilityService:
    """Computes free slots by subtracting held bookings from the slot catalog."""

    @translate_store_errors
    async def resolve(
        self,
        db: AsyncSession,
        target_date: date,
        facility_id: Optional[str] = None,
    ) -> List[FacilityAvailability]:
        """
        Resolve free slots for every active facility, or a single one.

        An unknown or inactive facility_id resolves to an empty list.

        Args:
            db: Database session
            target_date: Calendar day to check
            facility_id: Optional facility key to restrict the result to

        Returns:
            Facilities in name order with their free slots in catalog order
        """
        booked = await self._booked_slots(db, target_date, facility_id)

        if facility_id:
            facility = await facility_directory.find_by_id(db, facility_id)
            facilities = [facility] if facility else []
        else:
            facilities = await facility_directory.list_active(db)

        slots = all_slots()
        availability = []
        for facility in facilities:
            taken = booked.get(facility.facility_id, set())
            availability.append(
                FacilityAvailability(
                    facility=FacilityRef.from_facility(facility),
                    available_slots=[slot for slot in slots if slot not in taken],
                )
            )

        logger.debug(
            f"Resolved availability for {target_date} across {len(availability)} facilities"
        )
        return availability

    async def check(
        self,
        db: AsyncSession,
        target_date: date,
        facility_id: Optional[str] = None,
    ) -> AvailabilityResponse:
        """Resolve availability and wrap it with the requested date."""
        availability = await self.resolve(db, target_date, facility_id)
        return AvailabilityResponse(date=target_date, availability=availability)

    async def _booked_slots(
        self,
        db: AsyncSession,
        target_date: date,
        facility_id: Optional[str],
    ) -> Dict[str, Set[str]]:
        """Map facility key to the slots held on target_date."""
        query = select(Booking.facility_id, Booking.time_slot).where(
            Booking.date == target_date,
            Booking.status != BookingStatus.CANCELLED.value,
        )
        if facility_id:
            query = query.where(Booking.facility_id == facility_id)

        result = await db.execute(query)

        booked = defaultdict(set)
        for booked_facility_id, time_slot in result.all():
            booked[booked_facility_id].add(time_slot)
        return booked


# Singleton instance
availability_service = AvailabilityService()
