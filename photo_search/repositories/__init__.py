from .base import BaseRepository
from .file_repo import FileRepository
from .collection_repo import CollectionRepository
from .face_repo import FaceRepository
from .location_repo import LocationRepository
from .magic_repo import MagicCacheRepository

__all__ = [
    "BaseRepository",
    "FileRepository",
    "CollectionRepository",
    "FaceRepository",
    "LocationRepository",
    "MagicCacheRepository",
]
