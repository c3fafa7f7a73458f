"""Garden and planting models."""

from sqlalchemy import Column, Date, ForeignKey, Integer, String
from sqlalchemy.orm import relationship

from src.database import Base
from src.models.mixins import TimestampMixin

DEFAULT_GARDEN_NAME = "Garden"


class Garden(Base, TimestampMixin):
    """A collection of plantings owned by a member."""

    __tablename__ = "gardens"

    id = Column(Integer, primary_key=True, index=True)
    owner_id = Column(Integer, ForeignKey("members.id"), nullable=False, index=True)
    name = Column(String(255), nullable=False, default=DEFAULT_GARDEN_NAME)
    description = Column(String, nullable=True)

    # Relationships
    owner = relationship("Member", back_populates="gardens")
    plantings = relationship("Planting", back_populates="garden", cascade="all, delete-orphan")


class Planting(Base, TimestampMixin):
    """Something grown in a garden."""

    __tablename__ = "plantings"

    id = Column(Integer, primary_key=True, index=True)
    garden_id = Column(Integer, ForeignKey("gardens.id"), nullable=False, index=True)
    crop_name = Column(String(255), nullable=False)
    quantity = Column(Integer, nullable=True)
    planted_at = Column(Date, nullable=True)
    description = Column(String, nullable=True)

    # Relationships
    garden = relationship("Garden", back_populates="plantings")
