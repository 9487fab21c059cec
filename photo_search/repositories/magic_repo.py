"""Magic cache repository."""
from typing import List

from sqlalchemy.orm import Session

from photo_search.models.magic_cache import MagicCacheEntry
from photo_search.schemas.magic import MagicCache


class MagicCacheRepository:
    """Stored smart groupings."""

    def __init__(self, db: Session):
        self.db = db

    async def get_magic_cache(self) -> List[MagicCache]:
        entries = self.db.query(MagicCacheEntry).order_by(MagicCacheEntry.id).all()
        return [
            MagicCache(title=entry.title, file_uploaded_ids=list(entry.file_uploaded_ids or []))
            for entry in entries
        ]
