"""Booking model."""
import enum

from sqlalchemy import Column, Integer, String, Text, DateTime, Date, Index, CheckConstraint, text
from sqlalchemy.sql import func
from icetime.core.database import Base


class BookingStatus(str, enum.Enum):
    PENDING = "pending"
    CONFIRMED = "confirmed"
    CANCELLED = "cancelled"


class BookingType(str, enum.Enum):
    ICE_TIME = "ice_time"
    LESSON = "lesson"
    TEAM_EVENT = "team_event"
    PRACTICE = "practice"
    GAME = "game"


DEFAULT_BOOKING_TYPE = BookingType.ICE_TIME

# Bookings in these states hold their slot
ACTIVE_STATUSES = (BookingStatus.PENDING.value, BookingStatus.CONFIRMED.value)


class Booking(Base):
    """Represents one booking of a facility slot on a calendar day."""

    __tablename__ = "bookings"

    id = Column(Integer, primary_key=True, index=True)
    facility_id = Column(String, nullable=False, index=True)  # Facility.facility_id, by value
    facility_name = Column(String, nullable=False)
    date = Column(Date, nullable=False)  # Timezone-naive calendar day
    time_slot = Column(String(5), nullable=False)  # "06:00" ... "22:00"
    duration = Column(Integer, nullable=False, default=60)  # Minutes
    customer_name = Column(String, nullable=False)
    customer_phone = Column(String, nullable=False)
    customer_email = Column(String, nullable=True)
    booking_type = Column(String, nullable=False, default=DEFAULT_BOOKING_TYPE.value)
    status = Column(String, nullable=False, default=BookingStatus.PENDING.value)
    notes = Column(Text, nullable=True)
    created_at = Column(DateTime(timezone=True), server_default=func.now())
    updated_at = Column(DateTime(timezone=True), onupdate=func.now())

    __table_args__ = (
        Index("ix_bookings_date_facility_slot", "date", "facility_id", "time_slot"),
        # At most one slot-holding booking per facility, day and slot
        Index(
            "uq_bookings_active_slot",
            "facility_id",
            "date",
            "time_slot",
            unique=True,
            postgresql_where=text("status != 'cancelled'"),
            sqlite_where=text("status != 'cancelled'"),
        ),
        CheckConstraint(
            "status IN ('pending', 'confirmed', 'cancelled')",
            name="ck_bookings_status",
        ),
        CheckConstraint("duration > 0", name="ck_bookings_duration_positive"),
    )

    def __repr__(self) -> str:
        return (
            f"<Booking(id={self.id}, facility={self.facility_id}, date={self.date}, "
            f"slot={self.time_slot}, status={self.status})>"
        )
