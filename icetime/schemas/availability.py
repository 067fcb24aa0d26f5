"""Availability schemas."""
from pydantic import BaseModel, ConfigDict
from pydantic.alias_generators import to_camel
from typing import List
from datetime import date

from icetime.schemas.facility import FacilityRef


class FacilityAvailability(BaseModel):
    """Free slots of one facility on one day."""

    model_config = ConfigDict(alias_generator=to_camel, populate_by_name=True)

    facility: FacilityRef
    available_slots: List[str]


class AvailabilityResponse(BaseModel):
    """Schema for availability response."""

    date: date
    availability: List[FacilityAvailability]
