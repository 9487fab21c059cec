"""User model."""
from sqlalchemy import Column, Integer, String

from photo_search.db.base import Base
from .base import TimestampMixin


class User(Base, TimestampMixin):
    """Library owner or a contact sharing files."""

    __tablename__ = 'users'

    id = Column(Integer, primary_key=True, index=True)
    email = Column(String(255), nullable=False, unique=True, index=True)
    name = Column(String(255), nullable=True)

    def __repr__(self) -> str:
        return f'<User(id={self.id}, email={self.email})>'
