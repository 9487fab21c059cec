"""
Unit test fixtures: in-memory collaborators for the search engine.
"""
import pytest

from photo_search.app.config import Settings
from photo_search.services.search import SearchContext, SearchFilterSession

from fakes import (
    CURRENT_USER_ID,
    FakeCollections,
    FakeFaceStore,
    FakeFileStore,
    FakeLocationService,
    FakeMagicCacheService,
)


@pytest.fixture
def test_settings():
    return Settings(MIN_CLUSTER_SIZE=2, MAX_APPBAR_FILTERS=7)


@pytest.fixture
def build_context(test_settings):
    """Factory for a SearchContext over fake collaborators."""
    def _build(
        files=(),
        collections: FakeCollections = None,
        face_store: FakeFaceStore = None,
        location_service: FakeLocationService = None,
        magic_cache_service: FakeMagicCacheService = None,
        **overrides,
    ):
        return SearchContext(
            file_store=FakeFileStore(list(files)),
            collections=collections or FakeCollections(),
            face_store=face_store or FakeFaceStore(),
            location_service=location_service or FakeLocationService(),
            magic_cache_service=magic_cache_service or FakeMagicCacheService(),
            current_user_id=CURRENT_USER_ID,
            settings=overrides.pop("settings", test_settings),
            **overrides,
        )
    return _build


@pytest.fixture
def session():
    return SearchFilterSession()
