"""Magic cache schema."""
from typing import List

from pydantic import BaseModel, Field


class MagicCache(BaseModel):
    """Smart grouping computed outside of search."""

    title: str
    file_uploaded_ids: List[int] = Field(default_factory=list)
