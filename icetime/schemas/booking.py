"""Booking schemas."""
from pydantic import BaseModel, ConfigDict, Field, field_validator
from pydantic.alias_generators import to_camel
from typing import Optional, List
from datetime import datetime, date

from icetime.core.exceptions import ValidationError
from icetime.services.slot_catalog import normalize_slot, parse_booking_date


class BookingCreate(BaseModel):
    """Schema for creating a booking (REST body or assistant arguments)."""

    model_config = ConfigDict(alias_generator=to_camel, populate_by_name=True)

    facility_id: str = Field(min_length=1)
    date: date
    time_slot: str
    customer_name: str = Field(min_length=1)
    customer_phone: str = Field(min_length=1)
    customer_email: Optional[str] = None
    booking_type: Optional[str] = None
    duration: Optional[int] = Field(default=None, gt=0)
    notes: Optional[str] = None

    @field_validator("date", mode="before")
    @classmethod
    def parse_date(cls, value):
        try:
            return parse_booking_date(value)
        except ValidationError as e:
            raise ValueError(e.message)

    @field_validator("time_slot", mode="before")
    @classmethod
    def parse_time_slot(cls, value):
        try:
            return normalize_slot(value)
        except ValidationError as e:
            raise ValueError(e.message)

    @field_validator("customer_name", "customer_phone", mode="before")
    @classmethod
    def strip_text(cls, value):
        return value.strip() if isinstance(value, str) else value


class BookingInDB(BaseModel):
    """Schema for booking from database."""

    id: int
    facility_id: str
    facility_name: str
    date: date
    time_slot: str
    duration: int
    customer_name: str
    customer_phone: str
    customer_email: Optional[str] = None
    booking_type: str
    status: str
    notes: Optional[str] = None
    created_at: Optional[datetime] = None
    updated_at: Optional[datetime] = None

    model_config = ConfigDict(
        alias_generator=to_camel, populate_by_name=True, from_attributes=True
    )


class BookingCreated(BaseModel):
    """Schema for a newly confirmed booking."""

    model_config = ConfigDict(alias_generator=to_camel, populate_by_name=True)

    booking: BookingInDB
    confirmation_message: str


class BookingList(BaseModel):
    """Schema for booking listing."""

    bookings: List[BookingInDB]


class BookingConfirmation(BaseModel):
    """Booking summary returned to the voice assistant."""

    model_config = ConfigDict(alias_generator=to_camel, populate_by_name=True)

    id: int
    facility_name: str
    date: date
    time_slot: str
    confirmation_message: str
