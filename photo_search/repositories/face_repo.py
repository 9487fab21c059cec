"""Face index repository: clusters, persons and the files they appear in."""
import logging
from collections import defaultdict
from typing import Dict, Set

from sqlalchemy.orm import Session

from photo_search.models.face_cluster import ClusterPerson, FileCluster
from photo_search.models.person import Person
from photo_search.schemas.person import PersonEntity

logger = logging.getLogger(__name__)


class FaceRepository:
    """Repository for face recognition results."""

    def __init__(self, db: Session):
        self.db = db

    async def get_file_ids_of_person_id(self, person_id: str) -> Set[int]:
        """Uploaded file IDs of every cluster assigned to the person."""
        rows = (
            self.db.query(FileCluster.uploaded_file_id)
            .join(ClusterPerson, ClusterPerson.cluster_id == FileCluster.cluster_id)
            .filter(ClusterPerson.person_id == person_id)
            .distinct()
            .all()
        )
        return {file_id for (file_id,) in rows}

    async def get_file_ids_of_cluster_id(self, cluster_id: str) -> Set[int]:
        rows = (
            self.db.query(FileCluster.uploaded_file_id)
            .filter(FileCluster.cluster_id == cluster_id)
            .all()
        )
        return {file_id for (file_id,) in rows}

    async def get_file_id_to_cluster_ids(self) -> Dict[int, Set[str]]:
        mapping: Dict[int, Set[str]] = defaultdict(set)
        for file_id, cluster_id in self.db.query(FileCluster.uploaded_file_id, FileCluster.cluster_id):
            mapping[file_id].add(cluster_id)
        return dict(mapping)

    async def get_cluster_id_to_person_id(self) -> Dict[str, str]:
        return {
            cluster_id: person_id
            for cluster_id, person_id in self.db.query(ClusterPerson.cluster_id, ClusterPerson.person_id)
        }

    async def get_persons_map(self) -> Dict[str, PersonEntity]:
        return {
            person.id: PersonEntity(remote_id=person.id, name=person.name, is_ignored=person.is_ignored)
            for person in self.db.query(Person).all()
        }
