"""Exceptions raised by the search filter engine."""


class PhotoSearchError(Exception):
    """Base class for search errors."""


class InvalidFilterError(PhotoSearchError, ValueError):
    """A filter was built with inconsistent fields."""


class FilterResolutionError(PhotoSearchError):
    """Matched files of a filter could not be looked up."""

    def __init__(self, filter_name: str, reason: str):
        self.filter_name = filter_name
        self.reason = reason
        super().__init__(f"Could not resolve filter '{filter_name}': {reason}")


class CurationError(PhotoSearchError):
    """A recommendation curator failed."""
