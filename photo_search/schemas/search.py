"""Search result schemas."""
from typing import List, Optional

from pydantic import BaseModel, Field

from .file import FileRecord


class FilteredFilesResult(BaseModel):
    """Files matching the applied filters.

    ``error`` is set when the search itself failed, so callers can tell a
    failed search apart from one that matched nothing.
    """

    files: List[FileRecord] = Field(default_factory=list)
    error: Optional[str] = None

    @property
    def ok(self) -> bool:
        return self.error is None
