"""Collection (album) model."""
from sqlalchemy import Boolean, Column, ForeignKey, Integer, String
from sqlalchemy.orm import relationship

from photo_search.db.base import Base
from .base import TimestampMixin, SoftDeleteMixin


class Collection(Base, TimestampMixin, SoftDeleteMixin):
    """Album holding files."""

    __tablename__ = 'collections'

    id = Column(Integer, primary_key=True, index=True)
    owner_id = Column(Integer, ForeignKey('users.id', ondelete='CASCADE'), nullable=True, index=True)
    name = Column(String(255), nullable=False)

    # Visibility
    is_archived = Column(Boolean, default=False, nullable=False)
    is_hidden = Column(Boolean, default=False, nullable=False)

    # Relationships
    memberships = relationship('CollectionFile', back_populates='collection', cascade='all, delete-orphan')

    def __repr__(self) -> str:
        return f'<Collection(id={self.id}, name={self.name})>'
