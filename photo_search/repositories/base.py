"""Base repository with common query helpers."""
from typing import Any, Generic, Optional, Type, TypeVar

from sqlalchemy.orm import Session

from photo_search.db.base import Base

ModelType = TypeVar("ModelType", bound=Base)


class BaseRepository(Generic[ModelType]):
    """Base repository with common database operations."""

    def __init__(self, model: Type[ModelType], db: Session):
        """
        Initialize repository.

        Args:
            model: SQLAlchemy model class
            db: Database session
        """
        self.model = model
        self.db = db

    def _query(self, include_deleted: bool = False):
        query = self.db.query(self.model)
        # Handle soft delete if model has deleted_at column
        if hasattr(self.model, 'deleted_at') and not include_deleted:
            query = query.filter(self.model.deleted_at.is_(None))
        return query

    def get(self, id: Any, include_deleted: bool = False) -> Optional[ModelType]:
        """
        Get record by primary key.

        Args:
            id: Record ID
            include_deleted: Whether to include soft-deleted records

        Returns:
            Model instance or None if not found
        """
        return self._query(include_deleted).filter(self.model.id == id).first()
