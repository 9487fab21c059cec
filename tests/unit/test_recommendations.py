import asyncio

import pytest

from photo_search.models.enums import FileType
from photo_search.schemas import (
    AlbumFilter,
    CollectionInfo,
    ContactsFilter,
    FaceFilter,
    FileTypeFilter,
    LocationFilter,
    LocationTag,
    MagicCache,
    MagicFilter,
    OnlyThemFilter,
    PersonEntity,
    TopLevelGenericFilter,
    UserInfo,
)
from photo_search.services.search import (
    SearchFilterSession,
    curate_filters,
    get_filters_for_bottom_sheet,
    get_recommended_filters_for_app_bar,
)

from fakes import (
    FakeCollections,
    FakeFaceStore,
    FakeLocationService,
    FakeMagicCacheService,
    make_file,
)

PARIS = LocationTag(name="Paris", latitude=48.8566, longitude=2.3522, radius_km=10)


def run(coro):
    return asyncio.run(coro)


@pytest.fixture
def library(build_context):
    files = [
        make_file(i, owner_id=1 if i <= 4 else 42, collection_ids={10},
                  file_type=FileType.video if i == 6 else FileType.image,
                  latitude=48.86, longitude=2.35)
        for i in range(1, 7)
    ]
    context = build_context(
        files,
        collections=FakeCollections(
            {10: CollectionInfo(id=10, name="Trip")},
            users={42: UserInfo(id=42, email="bob@example.com")},
        ),
        face_store=FakeFaceStore(
            file_clusters={1: {"c1"}, 2: {"c1"}, 3: {"c2"}, 4: {"c2"}},
            cluster_persons={"c1": "alice"},
            persons={"alice": PersonEntity(remote_id="alice", name="Alice")},
        ),
        location_service=FakeLocationService([PARIS]),
        magic_cache_service=FakeMagicCacheService([MagicCache(title="Sunsets", file_uploaded_ids=[1, 2, 3, 4])]),
    )
    return files, context


def kinds(filters):
    return [type(f).__name__ for f in filters]


# ============================================================================
# curate_filters
# ============================================================================

def test_curate_filters_orders_categories(library, session):
    files, context = library
    session.apply_filters([FaceFilter(person_id="alice")])

    assert run(curate_filters(session, files, context)) is True

    assert kinds(session.recommendations) == [
        "OnlyThemFilter",
        "MagicFilter",
        "FaceFilter",
        "FaceFilter",
        "FileTypeFilter",
        "FileTypeFilter",
        "ContactsFilter",
        "AlbumFilter",
        "LocationFilter",
    ]


def test_curate_filters_without_applied_faces_has_no_only_them(library, session):
    files, context = library

    run(curate_filters(session, files, context))

    assert not session.recommendations_of_type(OnlyThemFilter)
    assert session.recommendations[0].is_same_filter(MagicFilter(filter_name="Sunsets"))


def test_curate_filters_failure_keeps_previous_recommendations(library, session, mocker):
    files, context = library
    previous = [AlbumFilter(collection_id=1, album_name="Old")]
    session.clear_and_add_recommendations(previous)
    mocker.patch.object(context.face_store, "get_file_id_to_cluster_ids", side_effect=RuntimeError("boom"))

    assert run(curate_filters(session, files, context)) is False

    assert list(session.recommendations) == previous


def test_stale_curation_pass_is_discarded(library, session):
    files, context = library

    async def two_passes():
        return await asyncio.gather(
            curate_filters(session, files[:1], context),
            curate_filters(session, files, context),
        )

    first, second = run(two_passes())

    assert (first, second) == (False, True)
    # Recommendations come from the second (full) pass
    album = session.recommendations_of_type(AlbumFilter)[0]
    assert album.occurrence == 6


# ============================================================================
# App bar
# ============================================================================

def _one_of_each():
    return [
        OnlyThemFilter(face_filters=(FaceFilter(person_id="a"),)),
        MagicFilter(filter_name="m"),
        FaceFilter(person_id="p"),
        FileTypeFilter(file_type=FileType.image, type_name="Photos"),
        ContactsFilter(user=UserInfo(id=2)),
        AlbumFilter(collection_id=1, album_name="a"),
        LocationFilter(location_tag=PARIS),
    ]


def test_app_bar_takes_one_of_each_category_in_fixed_order():
    session = SearchFilterSession()
    extra_albums = [AlbumFilter(collection_id=i, album_name=str(i)) for i in range(100, 110)]
    session.clear_and_add_recommendations(_one_of_each() + extra_albums)

    selected = get_recommended_filters_for_app_bar(session, max_filters=7)

    assert kinds(selected) == [
        "OnlyThemFilter",
        "FaceFilter",
        "MagicFilter",
        "LocationFilter",
        "ContactsFilter",
        "AlbumFilter",
        "FileTypeFilter",
    ]


def test_app_bar_never_exceeds_budget():
    session = SearchFilterSession()
    session.clear_and_add_recommendations(
        [AlbumFilter(collection_id=i, album_name=str(i)) for i in range(20)] + _one_of_each()
    )

    for budget in (1, 3, 7, 10):
        assert len(get_recommended_filters_for_app_bar(session, max_filters=budget)) <= budget


def test_app_bar_tops_up_without_duplicates():
    session = SearchFilterSession()
    faces = [FaceFilter(person_id=f"p{i}") for i in range(4)]
    albums = [AlbumFilter(collection_id=i, album_name=str(i)) for i in range(4)]
    session.clear_and_add_recommendations(faces + albums)

    selected = get_recommended_filters_for_app_bar(session, max_filters=5)

    # a0 is the first album within the scanned half, so it gets a slot
    assert [f.person_id for f in selected if isinstance(f, FaceFilter)] == ["p0", "p1", "p2", "p3"]
    assert [f.collection_id for f in selected if isinstance(f, AlbumFilter)] == [0]
    assert len({f.identity() for f in selected}) == len(selected)


def test_app_bar_scan_stops_at_half():
    session = SearchFilterSession()
    faces = [FaceFilter(person_id=f"p{i}") for i in range(6)]
    session.clear_and_add_recommendations(faces + [AlbumFilter(collection_id=1, album_name="late")])

    selected = get_recommended_filters_for_app_bar(session, max_filters=3)

    assert kinds(selected) == ["FaceFilter"] * 3


def test_app_bar_scan_stops_once_every_category_is_seen(mocker):
    session = SearchFilterSession()
    trailing = mocker.Mock()
    type(trailing).kind = mocker.PropertyMock(side_effect=AssertionError("scanned past all categories"))
    session.clear_and_add_recommendations(_one_of_each() + [trailing])

    selected = get_recommended_filters_for_app_bar(session, max_filters=7, scan_fraction=1.0)

    assert len(selected) == 7


def test_app_bar_empty():
    assert get_recommended_filters_for_app_bar(SearchFilterSession(), max_filters=7) == []


# ============================================================================
# Bottom sheet
# ============================================================================

def test_bottom_sheet_lists_applied_before_recommended():
    applied_album = AlbumFilter(collection_id=1, album_name="Applied")
    generic = TopLevelGenericFilter(filter_name="beach", matched_uploaded_ids=frozenset({1}))
    session = SearchFilterSession(applied_filters=[generic, applied_album])
    recommended_album = AlbumFilter(collection_id=2, album_name="Recommended")
    session.clear_and_add_recommendations([recommended_album, FaceFilter(cluster_id="c1")])

    sheet = get_filters_for_bottom_sheet(session)

    assert sheet["album_filters"] == [applied_album, recommended_album]
    assert sheet["face_filters"] == [FaceFilter(cluster_id="c1")]
    assert sheet["top_level_generic_filters"] == [generic]
    assert sheet["magic_filters"] == []
    assert list(sheet) == [
        "only_them_filters",
        "face_filters",
        "magic_filters",
        "location_filters",
        "contacts_filters",
        "album_filters",
        "file_type_filters",
        "top_level_generic_filters",
    ]
