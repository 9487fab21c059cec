"""File repository for search queries."""
import logging
from collections import defaultdict
from typing import Dict, List, Optional, Sequence, Set

from sqlalchemy import asc, desc
from sqlalchemy.orm import Session

from photo_search.models.file import CollectionFile, File
from photo_search.repositories.base import BaseRepository
from photo_search.schemas.file import FileRecord

logger = logging.getLogger(__name__)


class FileRepository(BaseRepository[File]):
    """Reads files and their collection membership."""

    def __init__(self, db: Session):
        super().__init__(File, db)

    def _collection_ids_by_file(self, file_ids: Sequence[int]) -> Dict[int, Set[int]]:
        memberships: Dict[int, Set[int]] = defaultdict(set)
        if not file_ids:
            return memberships
        rows = (
            self.db.query(CollectionFile.file_id, CollectionFile.collection_id)
            .filter(CollectionFile.file_id.in_(list(file_ids)))
            .all()
        )
        for file_id, collection_id in rows:
            memberships[file_id].add(collection_id)
        return memberships

    @staticmethod
    def to_record(file: File, collection_ids: Set[int]) -> FileRecord:
        return FileRecord(
            uploaded_file_id=file.uploaded_file_id,
            owner_id=file.owner_id,
            file_type=file.file_type,
            collection_ids=frozenset(collection_ids),
            title=file.title,
            creation_time=file.creation_time,
            latitude=file.latitude,
            longitude=file.longitude,
        )

    def _ordered(self, query):
        return query.order_by(desc(File.creation_time), asc(File.id))

    async def get_all_files_for_hierarchical_search(self) -> List[FileRecord]:
        """All live files, newest first."""
        files = self._ordered(self._query()).all()
        memberships = self._collection_ids_by_file([f.id for f in files])
        return [self.to_record(f, memberships.get(f.id, set())) for f in files]

    async def get_files_from_ids(
        self,
        uploaded_ids: Sequence[int],
        dedupe_by_upload_id: bool = True,
        collections_to_ignore: Optional[Set[int]] = None,
    ) -> List[FileRecord]:
        """
        Load files by uploaded ID.

        Args:
            uploaded_ids: Uploaded file IDs
            dedupe_by_upload_id: Return one record per file instead of one per collection
            collections_to_ignore: Collections (archived, hidden) whose copies are skipped

        Returns:
            Matching files, newest first
        """
        if not uploaded_ids:
            return []
        ignored = collections_to_ignore or set()
        files = self._ordered(
            self._query().filter(File.uploaded_file_id.in_(list(uploaded_ids)))
        ).all()
        memberships = self._collection_ids_by_file([f.id for f in files])

        records = []
        for f in files:
            collection_ids = memberships.get(f.id, set())
            visible = collection_ids - ignored
            if collection_ids and not visible:
                continue
            if dedupe_by_upload_id or not visible:
                records.append(self.to_record(f, collection_ids))
            else:
                records.extend(self.to_record(f, {cid}) for cid in sorted(visible))
        return records

    async def get_all_collection_ids_of_files(self, uploaded_ids: Sequence[int]) -> List[int]:
        """One collection ID per (file, collection) membership."""
        if not uploaded_ids:
            return []
        rows = (
            self.db.query(CollectionFile.collection_id)
            .join(File, File.id == CollectionFile.file_id)
            .filter(
                File.uploaded_file_id.in_(list(uploaded_ids)),
                File.deleted_at.is_(None),
            )
            .all()
        )
        return [collection_id for (collection_id,) in rows]
