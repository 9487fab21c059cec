"""File model and collection membership."""
from sqlalchemy import Column, DateTime, Enum as SQLEnum, Float, ForeignKey, Integer, String
from sqlalchemy.orm import relationship

from photo_search.db.base import Base
from .base import TimestampMixin, SoftDeleteMixin
from .enums import FileType


class File(Base, TimestampMixin, SoftDeleteMixin):
    """Photo or video in the library."""

    __tablename__ = 'files'

    id = Column(Integer, primary_key=True, autoincrement=True)
    # Null until the upload completes
    uploaded_file_id = Column(Integer, nullable=True, unique=True, index=True)
    owner_id = Column(Integer, ForeignKey('users.id', ondelete='SET NULL'), nullable=True, index=True)

    title = Column(String(255), nullable=True)
    file_type = Column(SQLEnum(FileType), default=FileType.image, nullable=False, index=True)
    creation_time = Column(DateTime, nullable=True)

    # Location
    latitude = Column(Float, nullable=True)
    longitude = Column(Float, nullable=True)

    # Relationships
    memberships = relationship('CollectionFile', back_populates='file', cascade='all, delete-orphan')

    def __repr__(self) -> str:
        return f'<File(id={self.id}, uploaded_file_id={self.uploaded_file_id}, type={self.file_type})>'


class CollectionFile(Base, TimestampMixin):
    """A file belonging to a collection."""

    __tablename__ = 'collection_files'

    collection_id = Column(Integer, ForeignKey('collections.id', ondelete='CASCADE'), primary_key=True)
    file_id = Column(Integer, ForeignKey('files.id', ondelete='CASCADE'), primary_key=True)

    collection = relationship('Collection', back_populates='memberships')
    file = relationship('File', back_populates='memberships')

    def __repr__(self) -> str:
        return f'<CollectionFile(collection_id={self.collection_id}, file_id={self.file_id})>'
