"""Hierarchical search: filter curation, resolution and layout."""
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
from .filtering import combine_matches, get_filtered_files, resolve_filters
from .localization import Localizer
from .occurrence import count_occurrences, uploaded_ids_of
from .recommendations import (
    curate_filters,
    get_filters_for_bottom_sheet,
    get_recommended_filters_for_app_bar,
)
from .session import MatchCache, SearchFilterSession

__all__ = [
    "SearchContext",
    "Localizer",
    "MatchCache",
    "SearchFilterSession",
    "count_occurrences",
    "uploaded_ids_of",
    "curate_album_filters",
    "curate_contacts_filters",
    "curate_face_filters",
    "curate_file_type_filters",
    "curate_location_filters",
    "curate_magic_filters",
    "get_only_them_filter",
    "combine_matches",
    "resolve_filters",
    "get_filtered_files",
    "curate_filters",
    "get_recommended_filters_for_app_bar",
    "get_filters_for_bottom_sheet",
]
