"""Interfaces of the stores and services the search engine reads from."""
from dataclasses import dataclass, field
from typing import Any, Dict, Iterable, List, Optional, Protocol, Sequence, Set

from sqlalchemy.orm import Session

from photo_search.app.config import Settings, settings as default_settings
from photo_search.schemas.collection import CollectionInfo, UserInfo
from photo_search.schemas.file import FileRecord
from photo_search.schemas.location import LocationTag
from photo_search.schemas.magic import MagicCache
from photo_search.schemas.person import PersonEntity
from .localization import Localizer


class FileStore(Protocol):
    async def get_all_files_for_hierarchical_search(self) -> List[FileRecord]: ...

    async def get_files_from_ids(
        self,
        uploaded_ids: Sequence[int],
        dedupe_by_upload_id: bool = True,
        collections_to_ignore: Optional[Set[int]] = None,
    ) -> List[FileRecord]: ...

    async def get_all_collection_ids_of_files(self, uploaded_ids: Sequence[int]) -> List[int]: ...


class CollectionsStore(Protocol):
    async def archived_or_hidden_collection_ids(self) -> Set[int]: ...

    async def get_collection_by_id(self, collection_id: int) -> Optional[CollectionInfo]: ...

    async def get_file_owner(self, owner_id: int, context: Any = None) -> UserInfo: ...


class FaceStore(Protocol):
    async def get_file_ids_of_person_id(self, person_id: str) -> Set[int]: ...

    async def get_file_ids_of_cluster_id(self, cluster_id: str) -> Set[int]: ...

    async def get_file_id_to_cluster_ids(self) -> Dict[int, Set[str]]: ...

    async def get_cluster_id_to_person_id(self) -> Dict[str, str]: ...

    async def get_persons_map(self) -> Dict[str, PersonEntity]: ...


class LocationService(Protocol):
    async def get_location_tags_to_occurrence(
        self, files: Iterable[FileRecord]
    ) -> Dict[LocationTag, int]: ...


class MagicCacheService(Protocol):
    async def get_magic_cache(self) -> List[MagicCache]: ...


@dataclass
class SearchContext:
    """Everything a search pass needs besides the session state."""

    file_store: FileStore
    collections: CollectionsStore
    face_store: FaceStore
    location_service: LocationService
    magic_cache_service: MagicCacheService
    current_user_id: Optional[int] = None
    localizer: Localizer = field(default_factory=Localizer)
    settings: Settings = field(default_factory=lambda: default_settings)

    @classmethod
    def from_session(
        cls,
        db: Session,
        current_user_id: Optional[int] = None,
        locale: str = "en",
        settings: Optional[Settings] = None,
    ) -> "SearchContext":
        """Wire the SQLAlchemy-backed repositories."""
        from photo_search.repositories import (
            CollectionRepository,
            FaceRepository,
            FileRepository,
            LocationRepository,
            MagicCacheRepository,
        )

        return cls(
            file_store=FileRepository(db),
            collections=CollectionRepository(db),
            face_store=FaceRepository(db),
            location_service=LocationRepository(db),
            magic_cache_service=MagicCacheRepository(db),
            current_user_id=current_user_id,
            localizer=Localizer(locale),
            settings=settings or default_settings,
        )
