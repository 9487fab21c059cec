"""Curate recommended filters and lay them out for the app bar and bottom sheet."""
import asyncio
import logging
from typing import Dict, List, Optional, Sequence, Type

from photo_search.app.config import settings
from photo_search.schemas.file import FileRecord
from photo_search.schemas.filters import (
    AlbumFilter,
    ContactsFilter,
    FaceFilter,
    FileTypeFilter,
    HierarchicalSearchFilter,
    LocationFilter,
    MagicFilter,
    OnlyThemFilter,
    TopLevelGenericFilter,
)
from .collaborators import SearchContext
from .curators import (
    curate_album_filters,
    curate_contacts_filters,
    curate_face_filters,
    curate_file_type_filters,
    curate_location_filters,
    curate_magic_filters,
    get_only_them_filter,
)
from .session import SearchFilterSession

logger = logging.getLogger(__name__)

# Output order of the app bar
APP_BAR_ORDER: List[Type[HierarchicalSearchFilter]] = [
    OnlyThemFilter,
    FaceFilter,
    MagicFilter,
    LocationFilter,
    ContactsFilter,
    AlbumFilter,
    FileTypeFilter,
]

# Bottom sheet sections: (key, filter class, include recommendations)
BOTTOM_SHEET_SECTIONS = [
    ("only_them_filters", OnlyThemFilter, True),
    ("face_filters", FaceFilter, True),
    ("magic_filters", MagicFilter, True),
    ("location_filters", LocationFilter, True),
    ("contacts_filters", ContactsFilter, True),
    ("album_filters", AlbumFilter, True),
    ("file_type_filters", FileTypeFilter, True),
    ("top_level_generic_filters", TopLevelGenericFilter, False),
]


async def curate_filters(
    session: SearchFilterSession,
    files: Sequence[FileRecord],
    context: SearchContext,
) -> bool:
    """
    Recompute the session's recommendations for ``files``.

    Recommendations are replaced in one go, ordered OnlyThem, Magic, Face,
    FileType, Contacts, Album, Location. If a newer pass started meanwhile,
    or any curator fails, the current recommendations are left as they are.

    The curators are gathered on the event loop. The SQLAlchemy-backed stores
    query a synchronous session, so with them the curators run one after
    another; they only interleave with stores that actually await I/O.

    Returns:
        True if the recommendations were replaced
    """
    generation = session.begin_curation()
    try:
        (
            album_filters,
            location_filters,
            contacts_filters,
            face_filters,
            magic_filters,
        ) = await asyncio.gather(
            curate_album_filters(files, context),
            curate_location_filters(files, context),
            curate_contacts_filters(files, context),
            curate_face_filters(files, context),
            curate_magic_filters(files, context),
        )
        file_type_filters = curate_file_type_filters(files, context)
        only_them_filters = get_only_them_filter(session, face_filters, context)

        if not session.is_current(generation):
            logger.info(f"Discarding stale recommendations from curation pass {generation}")
            return False

        session.clear_and_add_recommendations(
            [
                *only_them_filters,
                *magic_filters,
                *face_filters,
                *file_type_filters,
                *contacts_filters,
                *album_filters,
                *location_filters,
            ]
        )
        logger.debug(f"Curated {len(session.recommendations)} recommendations")
        return True
    except Exception:
        logger.error("Failed to curate filters", exc_info=True)
        return False


def get_recommended_filters_for_app_bar(
    session: SearchFilterSession,
    max_filters: Optional[int] = None,
    scan_fraction: Optional[float] = None,
) -> List[HierarchicalSearchFilter]:
    """
    Pick at most ``max_filters`` recommendations, preferring one of each kind.

    The most relevant filter of every category found in the first part of
    the recommendations is taken first; the remaining slots are topped up in
    recommendation order.
    """
    if max_filters is None:
        max_filters = settings.MAX_APPBAR_FILTERS
    if scan_fraction is None:
        scan_fraction = settings.RECOMMENDATION_SCAN_FRACTION

    recommendations = session.recommendations
    total = len(recommendations)

    most_relevant_of_each_type: List[HierarchicalSearchFilter] = []
    for index, search_filter in enumerate(recommendations):
        if all(chosen.kind != search_filter.kind for chosen in most_relevant_of_each_type):
            most_relevant_of_each_type.append(search_filter)
        if len(most_relevant_of_each_type) == len(APP_BAR_ORDER) or (index + 1) / total > scan_fraction:
            break

    curated = most_relevant_of_each_type[:max_filters]
    for recommendation in recommendations:
        if len(curated) >= max_filters:
            break
        if all(not chosen.is_same_filter(recommendation) for chosen in most_relevant_of_each_type):
            curated.append(recommendation)

    buckets: Dict[Type[HierarchicalSearchFilter], List[HierarchicalSearchFilter]] = {
        filter_cls: [] for filter_cls in APP_BAR_ORDER
    }
    for recommendation in curated:
        for filter_cls in APP_BAR_ORDER:
            if isinstance(recommendation, filter_cls):
                buckets[filter_cls].append(recommendation)
                break

    return [f for filter_cls in APP_BAR_ORDER for f in buckets[filter_cls]]


def get_filters_for_bottom_sheet(
    session: SearchFilterSession,
) -> Dict[str, List[HierarchicalSearchFilter]]:
    """Applied filters followed by recommendations, grouped by category."""
    sections: Dict[str, List[HierarchicalSearchFilter]] = {}
    for key, filter_cls, include_recommendations in BOTTOM_SHEET_SECTIONS:
        section = list(session.applied_filters_of_type(filter_cls))
        if include_recommendations:
            section.extend(session.recommendations_of_type(filter_cls))
        sections[key] = section
    return sections
