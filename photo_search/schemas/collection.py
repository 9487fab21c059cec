"""Collection and user schemas."""
from typing import Optional

from pydantic import BaseModel, ConfigDict


class CollectionInfo(BaseModel):
    """Minimal collection info needed for album filters."""

    model_config = ConfigDict(frozen=True, from_attributes=True)

    id: int
    name: str
    owner_id: Optional[int] = None
    is_archived: bool = False
    is_hidden: bool = False

    @property
    def display_name(self) -> str:
        return self.name or f"Album {self.id}"


class UserInfo(BaseModel):
    """Owner of shared files."""

    model_config = ConfigDict(frozen=True, from_attributes=True)

    id: int
    email: str = ""
    name: Optional[str] = None

    @property
    def display_name(self) -> str:
        if self.name:
            return self.name
        if self.email:
            return self.email
        return f"User {self.id}"
