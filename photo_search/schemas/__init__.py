from .file import FileRecord
from .collection import CollectionInfo, UserInfo
from .person import PersonEntity
from .location import LocationTag
from .magic import MagicCache
from .filters import (
    HierarchicalSearchFilter,
    AlbumFilter,
    FileTypeFilter,
    LocationFilter,
    ContactsFilter,
    FaceFilter,
    OnlyThemFilter,
    MagicFilter,
    TopLevelGenericFilter,
    AnyFilter,
)
from .search import FilteredFilesResult

__all__ = [
    "FileRecord",
    "CollectionInfo",
    "UserInfo",
    "PersonEntity",
    "LocationTag",
    "MagicCache",
    "HierarchicalSearchFilter",
    "AlbumFilter",
    "FileTypeFilter",
    "LocationFilter",
    "ContactsFilter",
    "FaceFilter",
    "OnlyThemFilter",
    "MagicFilter",
    "TopLevelGenericFilter",
    "AnyFilter",
    "FilteredFilesResult",
]
