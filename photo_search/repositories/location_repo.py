"""Location tag repository."""
import logging
from typing import Dict, Iterable, List

from sqlalchemy.orm import Session

from photo_search.models.location_tag import LocationTagRecord
from photo_search.schemas.file import FileRecord
from photo_search.schemas.location import LocationTag

logger = logging.getLogger(__name__)


class LocationRepository:
    """Location tags and the files inside them."""

    def __init__(self, db: Session):
        self.db = db

    def get_location_tags(self) -> List[LocationTag]:
        return [
            LocationTag(
                name=record.name,
                latitude=record.latitude,
                longitude=record.longitude,
                radius_km=record.radius_km,
            )
            for record in self.db.query(LocationTagRecord).order_by(LocationTagRecord.id).all()
        ]

    async def get_location_tags_to_occurrence(
        self, files: Iterable[FileRecord]
    ) -> Dict[LocationTag, int]:
        """Count uploaded files inside each tag; tags without files are left out."""
        located = [f for f in files if f.is_uploaded and f.has_location]
        tag_to_occurrence: Dict[LocationTag, int] = {}
        for tag in self.get_location_tags():
            count = sum(1 for f in located if tag.contains(f.latitude, f.longitude))
            if count > 0:
                tag_to_occurrence[tag] = count
        return tag_to_occurrence
