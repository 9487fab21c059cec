"""Person schemas for face search."""
from pydantic import BaseModel, ConfigDict, Field


class PersonEntity(BaseModel):
    """User-confirmed identity."""

    model_config = ConfigDict(frozen=True)

    remote_id: str = Field(..., description="Person ID")
    name: str = ""
    is_ignored: bool = Field(False, description="Hidden by the user from people views")
