"""Database models."""
from icetime.models.facility import Facility
from icetime.models.booking import Booking, BookingStatus, BookingType

__all__ = ["Facility", "Booking", "BookingStatus", "BookingType"]
