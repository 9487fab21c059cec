"""Face cluster index: which files a cluster appears in and which person owns it."""
from sqlalchemy import Column, ForeignKey, Integer, String

from photo_search.db.base import Base
from .base import TimestampMixin


class FileCluster(Base):
    """A face of `cluster_id` detected in an uploaded file."""

    __tablename__ = 'file_clusters'

    uploaded_file_id = Column(Integer, primary_key=True, index=True)
    cluster_id = Column(String(64), primary_key=True, index=True)

    def __repr__(self) -> str:
        return f'<FileCluster(file={self.uploaded_file_id}, cluster={self.cluster_id})>'


class ClusterPerson(Base, TimestampMixin):
    """Assignment of a recognition cluster to a person."""

    __tablename__ = 'cluster_persons'

    cluster_id = Column(String(64), primary_key=True, index=True)
    # No FK: the person may have been deleted while the mapping survives
    person_id = Column(String(64), nullable=False, index=True)

    def __repr__(self) -> str:
        return f'<ClusterPerson(cluster={self.cluster_id}, person={self.person_id})>'
