"""
Integration test configuration: a seeded in-memory SQLite library.
"""
from datetime import datetime, timedelta

import pytest
from sqlalchemy import create_engine
from sqlalchemy.orm import sessionmaker

from photo_search.app.config import Settings
from photo_search.db.base import Base
from photo_search.models import (
    ClusterPerson,
    Collection,
    CollectionFile,
    File,
    FileCluster,
    FileType,
    LocationTagRecord,
    MagicCacheEntry,
    Person,
    User,
)
from photo_search.services.search import SearchContext

from sample_library import CAMERA_ID, FRIEND_ID, HIDDEN_ID, OWNER_ID, TRIP_ID


@pytest.fixture
def db_session():
    """Create test database session."""
    engine = create_engine("sqlite:///:memory:")
    Base.metadata.create_all(engine)
    Session = sessionmaker(bind=engine)
    session = Session()
    yield session
    session.close()


@pytest.fixture
def library(db_session):
    """
    Ten uploaded files: 101-106 in "Trip", 107-110 in "Camera".
    Alice appears in 101-104, all of them images.
    """
    db_session.add_all([
        User(id=OWNER_ID, email="me@example.com", name="Me"),
        User(id=FRIEND_ID, email="friend@example.com"),
        Collection(id=TRIP_ID, owner_id=OWNER_ID, name="Trip"),
        Collection(id=CAMERA_ID, owner_id=OWNER_ID, name="Camera"),
    ])
    start = datetime(2024, 6, 1)
    for i, uploaded_id in enumerate(range(101, 111)):
        db_session.add(File(
            id=uploaded_id,
            uploaded_file_id=uploaded_id,
            owner_id=OWNER_ID,
            file_type=FileType.image,
            creation_time=start + timedelta(hours=i),
        ))
        db_session.add(CollectionFile(
            collection_id=TRIP_ID if uploaded_id <= 106 else CAMERA_ID,
            file_id=uploaded_id,
        ))
    db_session.add(Person(id="alice", name="Alice"))
    db_session.add(ClusterPerson(cluster_id="c_alice", person_id="alice"))
    db_session.add_all([FileCluster(uploaded_file_id=i, cluster_id="c_alice") for i in range(101, 105)])
    db_session.commit()
    return db_session


@pytest.fixture
def extended_library(library):
    """Adds a shared video, a hidden album, an unnamed cluster, a place and a magic group."""
    db = library
    db.add(Collection(id=HIDDEN_ID, owner_id=OWNER_ID, name="Private", is_hidden=True))
    db.add(File(id=111, uploaded_file_id=111, owner_id=FRIEND_ID, file_type=FileType.video,
                latitude=48.86, longitude=2.35))
    db.add(CollectionFile(collection_id=TRIP_ID, file_id=111))
    db.add(File(id=112, uploaded_file_id=112, owner_id=OWNER_ID, file_type=FileType.image))
    db.add(CollectionFile(collection_id=HIDDEN_ID, file_id=112))
    # Still uploading
    db.add(File(id=113, uploaded_file_id=None, owner_id=OWNER_ID, file_type=FileType.image))
    db.add(CollectionFile(collection_id=TRIP_ID, file_id=113))
    db.add_all([FileCluster(uploaded_file_id=i, cluster_id="c_unknown") for i in (105, 106, 107)])
    db.add(FileCluster(uploaded_file_id=104, cluster_id="c_alice_2"))
    db.add(ClusterPerson(cluster_id="c_alice_2", person_id="alice"))
    db.add(LocationTagRecord(name="Paris", latitude=48.8566, longitude=2.3522, radius_km=5))
    db.add(MagicCacheEntry(title="Sunsets", file_uploaded_ids=[101, 102, 103, 104, 999]))
    db.add(MagicCacheEntry(title="Tiny", file_uploaded_ids=[101, 102, 103]))
    db.commit()
    return db


@pytest.fixture
def context_for():
    def _build(db):
        return SearchContext.from_session(
            db,
            current_user_id=OWNER_ID,
            settings=Settings(MIN_CLUSTER_SIZE=2, MAX_APPBAR_FILTERS=7),
        )
    return _build
