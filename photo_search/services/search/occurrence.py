"""Occurrence counting over file collections."""
from collections import Counter
from typing import Callable, Dict, Hashable, Iterable, Optional, Set, TypeVar

from photo_search.schemas.file import FileRecord

K = TypeVar("K", bound=Hashable)


def count_occurrences(
    files: Iterable[FileRecord],
    key_fn: Callable[[FileRecord], Optional[K]],
) -> Dict[K, int]:
    """
    Count files per key.

    Files that are not uploaded yet, or for which ``key_fn`` returns None,
    are skipped.
    """
    counts: Counter = Counter()
    for file in files:
        if not file.is_uploaded:
            continue
        key = key_fn(file)
        if key is None:
            continue
        counts[key] += 1
    return dict(counts)


def uploaded_ids_of(files: Iterable[FileRecord]) -> Set[int]:
    return {f.uploaded_file_id for f in files if f.is_uploaded}
