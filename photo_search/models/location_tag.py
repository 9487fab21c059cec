"""Location tag model."""
from sqlalchemy import Column, Float, Integer, String

from photo_search.db.base import Base
from .base import TimestampMixin


class LocationTagRecord(Base, TimestampMixin):
    """Named circular area on the map."""

    __tablename__ = 'location_tags'

    id = Column(Integer, primary_key=True, autoincrement=True)
    name = Column(String(255), nullable=False)
    latitude = Column(Float, nullable=False)
    longitude = Column(Float, nullable=False)
    radius_km = Column(Float, nullable=False)

    def __repr__(self) -> str:
        return f'<LocationTagRecord(id={self.id}, name={self.name}, radius_km={self.radius_km})>'
