"""SQLAlchemy ORM models for vehicle listings."""

from datetime import datetime, timezone

from sqlalchemy import JSON, Boolean, Column, DateTime, Integer, String, Text
from sqlalchemy.orm import declarative_base

Base = declarative_base()


class VehicleListingModel(Base):
    """SQLAlchemy model for vehicle_listings table."""

    __tablename__ = "vehicle_listings"

    id = Column(String, primary_key=True, index=True)
    posted_by = Column(String, nullable=True)
    title = Column(String, nullable=False)
    make = Column(String, nullable=False)
    model = Column(String, nullable=False)
    year = Column(Integer, nullable=False)
    price = Column(Integer, nullable=False)
    mileage = Column(Integer, nullable=True)
    fuel_type = Column(String, nullable=True)
    transmission = Column(String, nullable=True)
    location = Column(String, nullable=True)
    images = Column(JSON, nullable=True)
    description = Column(Text, nullable=True)
    status = Column(String, nullable=False, default="pending")  # pending, active, sold, hidden
    vehicle_type = Column(String, nullable=False)  # car or bike
    premium = Column(Boolean, nullable=False, default=False)
    created_at = Column(
        DateTime(timezone=True), nullable=False, default=lambda: datetime.now(timezone.utc)
    )
    updated_at = Column(
        DateTime(timezone=True),
        nullable=False,
        default=lambda: datetime.now(timezone.utc),
        onupdate=lambda: datetime.now(timezone.utc),
    )
