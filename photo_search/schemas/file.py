"""File schemas."""
from datetime import datetime
from typing import FrozenSet, Optional

from pydantic import BaseModel, ConfigDict, Field

from photo_search.models.enums import FileType


class FileRecord(BaseModel):
    """A file as seen by the search engine."""

    model_config = ConfigDict(frozen=True)

    uploaded_file_id: Optional[int] = Field(None, description="None or -1 until uploaded")
    owner_id: Optional[int] = None
    file_type: FileType = FileType.image
    collection_ids: FrozenSet[int] = Field(default_factory=frozenset)
    title: Optional[str] = None
    creation_time: Optional[datetime] = None
    latitude: Optional[float] = None
    longitude: Optional[float] = None

    @property
    def is_uploaded(self) -> bool:
        return self.uploaded_file_id is not None and self.uploaded_file_id != -1

    @property
    def has_location(self) -> bool:
        return self.latitude is not None and self.longitude is not None
