"""Hierarchical search filter schemas.

Every filter carries an ``occurrence`` (number of files it matched when it was
curated, used for ranking) and optionally a pre-computed
``matched_uploaded_ids`` set. Filters whose set is not known up front are
resolved lazily, either by predicate (``is_match``) or through an index
lookup, and the result is cached by ``identity()`` in the search session.
"""
from typing import Annotated, ClassVar, FrozenSet, Literal, Optional, Tuple, Union

from pydantic import BaseModel, ConfigDict, Field, model_validator

from photo_search.app.exceptions import InvalidFilterError
from photo_search.models.enums import FileType, FilterType
from .collection import UserInfo
from .file import FileRecord
from .location import LocationTag


class HierarchicalSearchFilter(BaseModel):
    """Base filter."""

    model_config = ConfigDict(frozen=True)

    # Filters matched by a per-file predicate rather than an index lookup
    resolves_by_predicate: ClassVar[bool] = False

    kind: FilterType
    occurrence: int = Field(0, ge=0)
    matched_uploaded_ids: FrozenSet[int] = Field(default_factory=frozenset)

    def name(self) -> str:
        raise NotImplementedError

    def is_match(self, file: FileRecord) -> bool:
        return False

    def identity(self) -> Tuple:
        raise NotImplementedError

    def cache_key(self) -> Tuple:
        """Key of the resolved match set; filters resolving differently must differ here."""
        return self.identity()

    def is_same_filter(self, other: "HierarchicalSearchFilter") -> bool:
        if not isinstance(other, HierarchicalSearchFilter):
            return False
        return self.identity() == other.identity()

    def __str__(self) -> str:
        return f"{self.kind.value}:{self.name()}"


class AlbumFilter(HierarchicalSearchFilter):
    resolves_by_predicate: ClassVar[bool] = True

    kind: Literal[FilterType.album] = FilterType.album
    collection_id: int
    album_name: str

    def name(self) -> str:
        return self.album_name

    def is_match(self, file: FileRecord) -> bool:
        return self.collection_id in file.collection_ids

    def identity(self) -> Tuple:
        return (self.kind, self.collection_id)


class FileTypeFilter(HierarchicalSearchFilter):
    resolves_by_predicate: ClassVar[bool] = True

    kind: Literal[FilterType.file_type] = FilterType.file_type
    file_type: FileType
    type_name: str

    def name(self) -> str:
        return self.type_name

    def is_match(self, file: FileRecord) -> bool:
        return file.file_type == self.file_type

    def identity(self) -> Tuple:
        return (self.kind, self.file_type)


class LocationFilter(HierarchicalSearchFilter):
    resolves_by_predicate: ClassVar[bool] = True

    kind: Literal[FilterType.location] = FilterType.location
    location_tag: LocationTag

    def name(self) -> str:
        return self.location_tag.name

    def is_match(self, file: FileRecord) -> bool:
        if not file.has_location:
            return False
        return self.location_tag.contains(file.latitude, file.longitude)

    def identity(self) -> Tuple:
        return (self.kind, self.location_tag)


class ContactsFilter(HierarchicalSearchFilter):
    resolves_by_predicate: ClassVar[bool] = True

    kind: Literal[FilterType.contacts] = FilterType.contacts
    user: UserInfo

    def name(self) -> str:
        return self.user.display_name

    def is_match(self, file: FileRecord) -> bool:
        return file.owner_id == self.user.id

    def identity(self) -> Tuple:
        return (self.kind, self.user.id)


class FaceFilter(HierarchicalSearchFilter):
    """Files showing a named person or an unnamed cluster."""

    kind: Literal[FilterType.face] = FilterType.face
    person_id: Optional[str] = None
    cluster_id: Optional[str] = None
    face_name: Optional[str] = None
    cover_file: Optional[FileRecord] = None

    @model_validator(mode="after")
    def check_person_or_cluster(self):
        if (self.person_id is None) == (self.cluster_id is None):
            raise InvalidFilterError("exactly one of person_id or cluster_id must be set")
        return self

    @property
    def face_key(self) -> Tuple[str, str]:
        if self.person_id is not None:
            return ("person", self.person_id)
        return ("cluster", self.cluster_id)

    def name(self) -> str:
        if self.face_name:
            return self.face_name
        return self.person_id or self.cluster_id

    def identity(self) -> Tuple:
        return (self.kind,) + self.face_key


class OnlyThemFilter(HierarchicalSearchFilter):
    """Files showing the applied faces and none of the other recommended ones."""

    kind: Literal[FilterType.only_them] = FilterType.only_them
    face_filters: Tuple[FaceFilter, ...]
    face_filters_to_avoid: Tuple[FaceFilter, ...] = ()

    def name(self) -> str:
        names = [f.name() for f in self.face_filters]
        if len(names) == 1:
            return f"{names[0]} only"
        return ", ".join(names[:-1]) + f" & {names[-1]} only"

    def identity(self) -> Tuple:
        return (self.kind, tuple(sorted(f.face_key for f in self.face_filters)))

    def cache_key(self) -> Tuple:
        # The avoid list changes with every curation pass
        return self.identity() + (tuple(sorted(f.face_key for f in self.face_filters_to_avoid)),)


class MagicFilter(HierarchicalSearchFilter):
    kind: Literal[FilterType.magic] = FilterType.magic
    filter_name: str

    def name(self) -> str:
        return self.filter_name

    def identity(self) -> Tuple:
        return (self.kind, self.filter_name)


class TopLevelGenericFilter(HierarchicalSearchFilter):
    """Result of the search that opened the gallery, e.g. a text query."""

    kind: Literal[FilterType.top_level_generic] = FilterType.top_level_generic
    filter_name: str
    result_type: Optional[str] = None

    def name(self) -> str:
        return self.filter_name

    def identity(self) -> Tuple:
        return (self.kind, self.result_type, self.filter_name)


AnyFilter = Annotated[
    Union[
        AlbumFilter,
        FileTypeFilter,
        LocationFilter,
        ContactsFilter,
        FaceFilter,
        OnlyThemFilter,
        MagicFilter,
        TopLevelGenericFilter,
    ],
    Field(discriminator="kind"),
]
