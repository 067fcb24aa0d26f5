"""API schemas."""
from icetime.schemas.facility import (
    FacilityCreate,
    FacilityInDB,
    FacilityRef,
    FacilityListItem,
)
from icetime.schemas.availability import (
    FacilityAvailability,
    AvailabilityResponse,
)
from icetime.schemas.booking import (
    BookingCreate,
    BookingInDB,
    BookingCreated,
    BookingList,
    BookingConfirmation,
)

__all__ = [
    "FacilityCreate",
    "FacilityInDB",
    "FacilityRef",
    "FacilityListItem",
    "FacilityAvailability",
    "AvailabilityResponse",
    "BookingCreate",
    "BookingInDB",
    "BookingCreated",
    "BookingList",
    "BookingConfirmation",
]
