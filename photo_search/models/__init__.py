"""Import all models so the metadata is complete."""
from .base import TimestampMixin, SoftDeleteMixin
from .enums import FileType, FilterType
from .user import User
from .collection import Collection
from .file import File, CollectionFile
from .person import Person
from .face_cluster import FileCluster, ClusterPerson
from .location_tag import LocationTagRecord
from .magic_cache import MagicCacheEntry

__all__ = [
    "TimestampMixin",
    "SoftDeleteMixin",
    "FileType",
    "FilterType",
    "User",
    "Collection",
    "File",
    "CollectionFile",
    "Person",
    "FileCluster",
    "ClusterPerson",
    "LocationTagRecord",
    "MagicCacheEntry",
]
