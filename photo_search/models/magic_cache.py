"""Pre-computed smart groupings ("magic" sections)."""
from sqlalchemy import JSON, Column, Integer, String

from photo_search.db.base import Base
from .base import TimestampMixin


class MagicCacheEntry(Base, TimestampMixin):
    """A smart grouping and the uploaded files it contains."""

    __tablename__ = 'magic_caches'

    id = Column(Integer, primary_key=True, autoincrement=True)
    title = Column(String(255), nullable=False)
    file_uploaded_ids = Column(JSON, nullable=False, default=list)

    def __repr__(self) -> str:
        return f'<MagicCacheEntry(id={self.id}, title={self.title})>'
