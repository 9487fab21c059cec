"""Compute the files matching a set of applied filters."""
import logging
import time
from typing import Dict, FrozenSet, List, Optional, Sequence, Set

from photo_search.app.exceptions import FilterResolutionError
from photo_search.schemas.file import FileRecord
from photo_search.schemas.filters import FaceFilter, HierarchicalSearchFilter, OnlyThemFilter
from photo_search.schemas.search import FilteredFilesResult
from .collaborators import FaceStore, SearchContext
from .occurrence import uploaded_ids_of
from .session import MatchCache

logger = logging.getLogger(__name__)


async def _fetch_face_filter_ids(face_store: FaceStore, face_filter: FaceFilter) -> Set[int]:
    try:
        if face_filter.person_id is not None:
            logger.info(f"Fetching files for never fetched person {face_filter.person_id}")
            return set(await face_store.get_file_ids_of_person_id(face_filter.person_id))
        logger.info(f"Fetching files for never fetched cluster {face_filter.cluster_id}")
        return set(await face_store.get_file_ids_of_cluster_id(face_filter.cluster_id))
    except Exception as e:
        raise FilterResolutionError(face_filter.name(), str(e)) from e


async def _face_keys_by_file(face_store: FaceStore) -> Dict[int, Set[tuple]]:
    """Map each uploaded file to the faces (person or cluster) it shows."""
    file_id_to_cluster_ids = await face_store.get_file_id_to_cluster_ids()
    cluster_id_to_person_id = await face_store.get_cluster_id_to_person_id()

    faces_by_file: Dict[int, Set[tuple]] = {}
    for file_id, cluster_ids in file_id_to_cluster_ids.items():
        keys = set()
        for cluster_id in cluster_ids:
            person_id = cluster_id_to_person_id.get(cluster_id)
            keys.add(("person", person_id) if person_id is not None else ("cluster", cluster_id))
        faces_by_file[file_id] = keys
    return faces_by_file


async def _resolve_only_them(face_store: FaceStore, only_them: OnlyThemFilter) -> Set[int]:
    wanted = {f.face_key for f in only_them.face_filters}
    avoided = {f.face_key for f in only_them.face_filters_to_avoid} - wanted
    faces_by_file = await _face_keys_by_file(face_store)
    return {
        file_id
        for file_id, keys in faces_by_file.items()
        if wanted <= keys and not (avoided & keys)
    }


def combine_matches(match_sets: Sequence[FrozenSet[int]]) -> Set[int]:
    """AND the match sets together, seeded by the first one."""
    result: Set[int] = set()
    for i, matches in enumerate(match_sets):
        if i == 0:
            result = result | matches
        else:
            result = result & matches
    return result


async def resolve_filters(
    filters: Sequence[HierarchicalSearchFilter],
    files: Sequence[FileRecord],
    context: SearchContext,
    match_cache: MatchCache,
):
    """
    Populate ``match_cache`` for every filter not resolved yet.

    Face filters are looked up in the face index; a failed lookup is logged
    and leaves the filter unresolved. Predicate filters are resolved together
    in a single pass over ``files``.
    """
    pending_predicates: List[HierarchicalSearchFilter] = []

    for search_filter in filters:
        if match_cache.is_resolved(search_filter):
            continue
        if isinstance(search_filter, FaceFilter):
            try:
                started = time.perf_counter()
                ids = await _fetch_face_filter_ids(context.face_store, search_filter)
                match_cache.set(search_filter, ids)
                logger.debug(
                    f"Resolved {search_filter} to {len(ids)} files in "
                    f"{(time.perf_counter() - started) * 1000:.1f}ms"
                )
            except FilterResolutionError as e:
                logger.warning(f"Error in face filter: {e}")
        elif isinstance(search_filter, OnlyThemFilter):
            match_cache.set(search_filter, await _resolve_only_them(context.face_store, search_filter))
        elif search_filter.resolves_by_predicate:
            pending_predicates.append(search_filter)
        else:
            # Index-driven filters arrive with their ids; nothing to compute
            match_cache.set(search_filter, ())

    if not pending_predicates:
        return

    matches: Dict[int, Set[int]] = {i: set() for i in range(len(pending_predicates))}
    for file in files:
        if not file.is_uploaded:
            continue
        for i, search_filter in enumerate(pending_predicates):
            if search_filter.is_match(file):
                matches[i].add(file.uploaded_file_id)

    for i, search_filter in enumerate(pending_predicates):
        match_cache.set(search_filter, matches[i])


async def get_filtered_files(
    filters: Sequence[HierarchicalSearchFilter],
    context: SearchContext,
    match_cache: Optional[MatchCache] = None,
) -> FilteredFilesResult:
    """
    Return the files matching every filter in ``filters``.

    With no filters every uploaded file is returned. Files in archived or
    hidden collections are left out. Failures are logged and reported in the
    result's ``error`` rather than raised.
    """
    if match_cache is None:
        match_cache = MatchCache()

    logger.info(f"Getting filtered files for filters: {[str(f) for f in filters]}")
    try:
        files = await context.file_store.get_all_files_for_hierarchical_search()
        ignored_collections = await context.collections.archived_or_hidden_collection_ids()

        if filters:
            await resolve_filters(filters, files, context, match_cache)
            filtered_ids = combine_matches([match_cache.get(f) for f in filters])
        else:
            filtered_ids = uploaded_ids_of(files)

        filtered_files = await context.file_store.get_files_from_ids(
            sorted(filtered_ids),
            dedupe_by_upload_id=True,
            collections_to_ignore=ignored_collections,
        )
        return FilteredFilesResult(files=filtered_files)
    except Exception as e:
        logger.error(f"Failed to get filtered files: {e}", exc_info=True)
        return FilteredFilesResult(files=[], error=str(e))
