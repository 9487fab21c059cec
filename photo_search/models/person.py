"""Person model for named face clusters."""
from sqlalchemy import Boolean, Column, String

from photo_search.db.base import Base
from .base import TimestampMixin


class Person(Base, TimestampMixin):
    """User-confirmed identity bound to one or more clusters."""

    __tablename__ = 'persons'

    id = Column(String(64), primary_key=True, index=True)
    name = Column(String(255), nullable=False, default="")
    is_ignored = Column(Boolean, default=False, nullable=False)

    def __repr__(self) -> str:
        return f'<Person(id={self.id}, name={self.name})>'
