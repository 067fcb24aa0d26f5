"""Facility model."""
from sqlalchemy import Column, Integer, String, Boolean, DateTime
from sqlalchemy.sql import func
from icetime.core.database import Base


class Facility(Base):
    """Represents a bookable ice rink."""

    __tablename__ = "facilities"

    id = Column(Integer, primary_key=True, index=True)
    facility_id = Column(String, unique=True, nullable=False, index=True)  # e.g. "bell-sensplex"
    name = Column(String, nullable=False)
    address = Column(String, nullable=False)
    city = Column(String, nullable=False)
    province = Column(String, nullable=False)
    postal_code = Column(String, nullable=False)
    phone = Column(String, nullable=True)
    is_active = Column(Boolean, default=True, nullable=False)
    created_at = Column(DateTime(timezone=True), server_default=func.now())
    updated_at = Column(DateTime(timezone=True), onupdate=func.now())

    @property
    def full_address(self) -> str:
        """Single-line postal address."""
        return f"{self.address}, {self.city}, {self.province} {self.postal_code}"
