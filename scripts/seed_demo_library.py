import asyncio
from datetime import datetime, timedelta

from sqlalchemy.orm import Session

from photo_search.app.logging_config import setup_logging
from photo_search.db.base import Base, SessionLocal, engine
from photo_search.models import ClusterPerson, Collection, CollectionFile, File, FileCluster, Person, User
from photo_search.services.search import (
    SearchContext,
    SearchFilterSession,
    curate_filters,
    get_filtered_files,
    get_recommended_filters_for_app_bar,
)


OWNER_ID = 1

COLLECTIONS = [
    {"id": 10, "name": "Trip", "files": range(101, 107)},
    {"id": 11, "name": "Camera", "files": range(107, 111)},
]

# Alice shows up in the first four trip photos
ALICE_FILES = range(101, 105)


def seed_library(db: Session):
    if db.query(User).filter(User.id == OWNER_ID).first():
        print("✔ Demo library already exists")
        return

    db.add(User(id=OWNER_ID, email="demo@example.com", name="Demo"))
    start = datetime(2024, 6, 1)
    for collection_data in COLLECTIONS:
        db.add(Collection(id=collection_data["id"], owner_id=OWNER_ID, name=collection_data["name"]))
        for uploaded_id in collection_data["files"]:
            db.add(File(
                id=uploaded_id,
                uploaded_file_id=uploaded_id,
                owner_id=OWNER_ID,
                creation_time=start + timedelta(hours=uploaded_id - 100),
            ))
            db.add(CollectionFile(collection_id=collection_data["id"], file_id=uploaded_id))
        print(f"➕ Created album: {collection_data['name']}")

    db.add(Person(id="alice", name="Alice"))
    db.add(ClusterPerson(cluster_id="c_alice", person_id="alice"))
    db.add_all([FileCluster(uploaded_file_id=i, cluster_id="c_alice") for i in ALICE_FILES])
    db.commit()


async def show_recommendations(db: Session):
    context = SearchContext.from_session(db, current_user_id=OWNER_ID)
    session = SearchFilterSession()

    result = await get_filtered_files([], context)
    await curate_filters(session, result.files, context)
    for search_filter in get_recommended_filters_for_app_bar(session):
        print(f"{search_filter.kind.value:<10} {search_filter.name():<20} {search_filter.occurrence}")


if __name__ == "__main__":
    setup_logging()
    Base.metadata.create_all(engine)
    db: Session = SessionLocal()
    try:
        seed_library(db)
        asyncio.run(show_recommendations(db))
    finally:
        db.close()
