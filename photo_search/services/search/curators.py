"""Recommendation curators, one per filter category.

Each curator reads the current file collection plus one index and returns
fresh filters ranked by ``occurrence``. Curators keep their accumulators
local so they can run concurrently.
"""
import logging
from collections import defaultdict
from typing import Dict, List, Sequence, Set

from photo_search.app.exceptions import CurationError
from photo_search.models.enums import FileType
from photo_search.schemas.file import FileRecord
from photo_search.schemas.filters import (
    AlbumFilter,
    ContactsFilter,
    FaceFilter,
    FileTypeFilter,
    LocationFilter,
    MagicFilter,
    OnlyThemFilter,
)
from .collaborators import SearchContext
from .occurrence import count_occurrences, uploaded_ids_of
from .session import SearchFilterSession

logger = logging.getLogger(__name__)


async def curate_album_filters(
    files: Sequence[FileRecord],
    context: SearchContext,
) -> List[AlbumFilter]:
    uploaded_ids = [f.uploaded_file_id for f in files if f.is_uploaded]
    collection_ids = await context.file_store.get_all_collection_ids_of_files(uploaded_ids)

    id_to_occurrence: Dict[int, int] = defaultdict(int)
    for collection_id in collection_ids:
        id_to_occurrence[collection_id] += 1

    album_filters = []
    for collection_id, occurrence in id_to_occurrence.items():
        collection = await context.collections.get_collection_by_id(collection_id)
        if collection is None:
            logger.debug(f"Skipping album filter, collection {collection_id} no longer exists")
            continue
        album_filters.append(
            AlbumFilter(
                collection_id=collection_id,
                album_name=collection.display_name,
                occurrence=occurrence,
            )
        )
    return album_filters


def curate_file_type_filters(
    files: Sequence[FileRecord],
    context: SearchContext,
) -> List[FileTypeFilter]:
    counts = count_occurrences(files, lambda f: f.file_type)
    localizer = context.localizer
    buckets = [
        (FileType.image, localizer.photos()),
        (FileType.video, localizer.videos()),
        (FileType.live_photo, localizer.live_photos()),
    ]

    return [
        FileTypeFilter(file_type=file_type, type_name=type_name, occurrence=counts[file_type])
        for file_type, type_name in buckets
        if counts.get(file_type, 0) > 0
    ]


async def curate_location_filters(
    files: Sequence[FileRecord],
    context: SearchContext,
) -> List[LocationFilter]:
    tag_to_occurrence = await context.location_service.get_location_tags_to_occurrence(files)
    return [
        LocationFilter(location_tag=tag, occurrence=occurrence)
        for tag, occurrence in tag_to_occurrence.items()
    ]


async def curate_contacts_filters(
    files: Sequence[FileRecord],
    context: SearchContext,
) -> List[ContactsFilter]:
    current_user_id = context.current_user_id
    owner_to_occurrence = count_occurrences(
        files,
        lambda f: None if f.owner_id == current_user_id else f.owner_id,
    )

    contacts_filters = []
    for owner_id, occurrence in owner_to_occurrence.items():
        user = await context.collections.get_file_owner(owner_id, None)
        contacts_filters.append(ContactsFilter(user=user, occurrence=occurrence))
    return contacts_filters


async def curate_face_filters(
    files: Sequence[FileRecord],
    context: SearchContext,
) -> List[FaceFilter]:
    """
    Build person and cluster filters.

    A cluster assigned to a known person counts towards that person, so it
    never surfaces on its own. Clusters of ignored persons are dropped with
    the person. Unassigned clusters are only recommended once they reach
    ``MIN_CLUSTER_SIZE`` files.
    """
    try:
        face_store = context.face_store
        file_id_to_cluster_ids = await face_store.get_file_id_to_cluster_ids()
        person_id_to_person = await face_store.get_persons_map()
        cluster_id_to_person_id = await face_store.get_cluster_id_to_person_id()

        # Insertion-ordered so the first file found becomes the cover
        person_id_to_files: Dict[str, Dict[int, FileRecord]] = defaultdict(dict)
        cluster_id_to_files: Dict[str, Dict[int, FileRecord]] = defaultdict(dict)

        for file in files:
            if not file.is_uploaded:
                continue
            cluster_ids = file_id_to_cluster_ids.get(file.uploaded_file_id)
            if not cluster_ids:
                continue
            for cluster_id in sorted(cluster_ids):
                person = person_id_to_person.get(cluster_id_to_person_id.get(cluster_id, ""))
                if person is not None:
                    person_id_to_files[person.remote_id].setdefault(file.uploaded_file_id, file)
                else:
                    cluster_id_to_files[cluster_id].setdefault(file.uploaded_file_id, file)

        face_filters = []
        for person_id, person_files in person_id_to_files.items():
            person = person_id_to_person[person_id]
            if person.is_ignored:
                continue
            face_filters.append(
                FaceFilter(
                    person_id=person_id,
                    face_name=person.name,
                    cover_file=next(iter(person_files.values())),
                    occurrence=len(person_files),
                )
            )

        min_cluster_size = context.settings.MIN_CLUSTER_SIZE
        for cluster_id, cluster_files in cluster_id_to_files.items():
            assigned_person_id = cluster_id_to_person_id.get(cluster_id)
            if assigned_person_id is not None:
                # Mapped to a person missing from the registry
                logger.error(
                    f"Cluster {cluster_id} should not have person id {assigned_person_id}, skipping"
                )
                continue
            if len(cluster_files) < min_cluster_size:
                continue
            face_filters.append(
                FaceFilter(
                    cluster_id=cluster_id,
                    cover_file=next(iter(cluster_files.values())),
                    occurrence=len(cluster_files),
                )
            )

        return face_filters
    except Exception as e:
        logger.error("Error in curating face filters", exc_info=True)
        raise CurationError(f"Face curation failed: {e}") from e


async def curate_magic_filters(
    files: Sequence[FileRecord],
    context: SearchContext,
) -> List[MagicFilter]:
    magic_caches = await context.magic_cache_service.get_magic_cache()
    file_ids: Set[int] = uploaded_ids_of(files)
    min_matches = context.settings.MAGIC_MIN_MATCHES

    magic_filters = []
    for magic_cache in magic_caches:
        group_ids = frozenset(magic_cache.file_uploaded_ids)
        intersection = group_ids & file_ids
        if len(intersection) > min_matches:
            magic_filters.append(
                MagicFilter(
                    filter_name=magic_cache.title,
                    occurrence=len(intersection),
                    matched_uploaded_ids=group_ids,
                )
            )
    return magic_filters


def get_only_them_filter(
    session: SearchFilterSession,
    recommended_face_filters: Sequence[FaceFilter],
    context: SearchContext,
) -> List[OnlyThemFilter]:
    applied_face_filters = session.applied_filters_of_type(FaceFilter)
    if not applied_face_filters or len(applied_face_filters) > context.settings.ONLY_THEM_MAX_FACES:
        return []

    return [
        OnlyThemFilter(
            face_filters=tuple(applied_face_filters),
            face_filters_to_avoid=tuple(recommended_face_filters),
            occurrence=context.settings.MOST_RELEVANT_FILTER_OCCURRENCE,
        )
    ]
