"""Collection repository."""
import logging
from typing import Any, Optional, Set

from sqlalchemy import or_
from sqlalchemy.orm import Session

from photo_search.models.collection import Collection
from photo_search.models.user import User
from photo_search.repositories.base import BaseRepository
from photo_search.schemas.collection import CollectionInfo, UserInfo

logger = logging.getLogger(__name__)


class CollectionRepository(BaseRepository[Collection]):
    """Collections and the users owning shared files."""

    def __init__(self, db: Session):
        super().__init__(Collection, db)

    async def archived_or_hidden_collection_ids(self) -> Set[int]:
        rows = (
            self.db.query(Collection.id)
            .filter(or_(Collection.is_archived.is_(True), Collection.is_hidden.is_(True)))
            .all()
        )
        return {collection_id for (collection_id,) in rows}

    async def get_collection_by_id(self, collection_id: int) -> Optional[CollectionInfo]:
        collection = self.get(collection_id)
        if collection is None:
            return None
        return CollectionInfo.model_validate(collection)

    async def get_file_owner(self, owner_id: int, context: Any = None) -> UserInfo:
        """Owner of a shared file; only the ID is known for unknown users."""
        user = self.db.query(User).filter(User.id == owner_id).first()
        if user is None:
            logger.debug(f"Owner {owner_id} not found, using minimal identity")
            return UserInfo(id=owner_id)
        return UserInfo.model_validate(user)
