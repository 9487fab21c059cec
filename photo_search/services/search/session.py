"""Per-session search state: applied filters, recommendations and resolved matches."""
import logging
from typing import Dict, FrozenSet, Hashable, Iterable, List, Optional, Sequence, Tuple, Type, TypeVar

from photo_search.schemas.filters import HierarchicalSearchFilter

logger = logging.getLogger(__name__)

F = TypeVar("F", bound=HierarchicalSearchFilter)


class MatchCache:
    """Resolved matched-file-id sets keyed by ``cache_key()``.

    A filter is resolved at most once per session. Call ``clear()`` when the
    underlying indexes change.
    """

    def __init__(self):
        self._matches: Dict[Hashable, FrozenSet[int]] = {}

    def get(self, search_filter: HierarchicalSearchFilter) -> FrozenSet[int]:
        if search_filter.matched_uploaded_ids:
            return search_filter.matched_uploaded_ids
        return self._matches.get(search_filter.cache_key(), frozenset())

    def is_resolved(self, search_filter: HierarchicalSearchFilter) -> bool:
        if search_filter.matched_uploaded_ids:
            return True
        return search_filter.cache_key() in self._matches

    def set(self, search_filter: HierarchicalSearchFilter, uploaded_ids: Iterable[int]):
        self._matches[search_filter.cache_key()] = frozenset(uploaded_ids)

    def clear(self):
        self._matches.clear()

    def __len__(self) -> int:
        return len(self._matches)


class SearchFilterSession:
    """State shared between curation, filtering and the UI for one search.

    All writes replace a whole collection so observers never see a partial
    update.
    """

    def __init__(
        self,
        applied_filters: Optional[Sequence[HierarchicalSearchFilter]] = None,
        match_cache: Optional[MatchCache] = None,
    ):
        self._applied: Tuple[HierarchicalSearchFilter, ...] = tuple(applied_filters or ())
        self._recommendations: Tuple[HierarchicalSearchFilter, ...] = ()
        self.match_cache = match_cache or MatchCache()
        self._generation = 0

    @property
    def applied_filters(self) -> Tuple[HierarchicalSearchFilter, ...]:
        return self._applied

    @property
    def recommendations(self) -> Tuple[HierarchicalSearchFilter, ...]:
        return self._recommendations

    @property
    def generation(self) -> int:
        return self._generation

    def applied_filters_of_type(self, filter_cls: Type[F]) -> List[F]:
        return [f for f in self._applied if isinstance(f, filter_cls)]

    def recommendations_of_type(self, filter_cls: Type[F]) -> List[F]:
        return [f for f in self._recommendations if isinstance(f, filter_cls)]

    def apply_filters(self, filters: Sequence[HierarchicalSearchFilter]):
        """Append filters to the applied list and drop them from recommendations."""
        new_filters = [
            f for f in filters
            if not any(f.is_same_filter(applied) for applied in self._applied)
        ]
        self._applied = self._applied + tuple(new_filters)
        self._recommendations = tuple(
            r for r in self._recommendations
            if not any(r.is_same_filter(f) for f in new_filters)
        )
        logger.debug("Applied filters: %s", [str(f) for f in self._applied])

    def remove_applied_filters(self, filters: Sequence[HierarchicalSearchFilter]):
        self._applied = tuple(
            a for a in self._applied
            if not any(a.is_same_filter(f) for f in filters)
        )
        logger.debug("Applied filters: %s", [str(f) for f in self._applied])

    def clear_and_add_recommendations(self, recommendations: Sequence[HierarchicalSearchFilter]):
        self._recommendations = tuple(recommendations)

    def begin_curation(self) -> int:
        """Start a curation pass; results of older passes become stale."""
        self._generation += 1
        return self._generation

    def is_current(self, generation: int) -> bool:
        return generation == self._generation
