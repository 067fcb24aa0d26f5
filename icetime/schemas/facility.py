"""Facility schemas."""
from pydantic import BaseModel, ConfigDict
from pydantic.alias_generators import to_camel
from typing import Optional
from datetime import datetime


class FacilityBase(BaseModel):
    """Base facility schema."""

    model_config = ConfigDict(alias_generator=to_camel, populate_by_name=True)

    facility_id: str
    name: str
    address: str
    city: str
    province: str
    postal_code: str
    phone: Optional[str] = None
    is_active: bool = True


class FacilityCreate(FacilityBase):
    """Schema for seeding or updating a facility."""

    pass


class FacilityInDB(FacilityBase):
    """Schema for facility from database."""

    id: int
    created_at: Optional[datetime] = None
    updated_at: Optional[datetime] = None

    model_config = ConfigDict(
        alias_generator=to_camel, populate_by_name=True, from_attributes=True
    )


class FacilityRef(BaseModel):
    """Short facility description used in availability and assistant results."""

    id: str
    name: str
    address: str

    @classmethod
    def from_facility(cls, facility) -> "FacilityRef":
        return cls(id=facility.facility_id, name=facility.name, address=facility.full_address)


class FacilityListItem(FacilityRef):
    """Numbered facility entry so the assistant can say "option 2"."""

    number: int
