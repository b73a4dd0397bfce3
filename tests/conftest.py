"""
Pytest fixtures shared by the repository and route tests.

Every test gets a fresh in-memory SQLite database bound into the app's
session_maker, so repository functions run unchanged against it.
"""

import os

os.environ["PSQL_URL"] = "sqlite://"

from datetime import datetime

import pytest
from sqlalchemy import create_engine, event
from sqlalchemy.orm import sessionmaker
from sqlalchemy.pool import StaticPool

from app.db.psql.database import session_maker
from app.db.psql.models import Base, City, CityTranslation
from app.main import app as flask_app


# ==============================================================================
# DATABASE FIXTURES
# ==============================================================================

@pytest.fixture
def db_engine():
    """In-memory SQLite database shared by every connection of the test."""
    engine = create_engine(
        "sqlite://",
        connect_args={"check_same_thread": False},
        poolclass=StaticPool,
    )

    @event.listens_for(engine, "connect")
    def set_sqlite_pragma(dbapi_conn, connection_record):
        cursor = dbapi_conn.cursor()
        cursor.execute("PRAGMA foreign_keys=ON")
        cursor.close()

    Base.metadata.create_all(bind=engine)
    original_bind = session_maker.kw["bind"]
    session_maker.configure(bind=engine)

    yield engine

    session_maker.configure(bind=original_bind)
    Base.metadata.drop_all(bind=engine)
    engine.dispose()


@pytest.fixture
def db_session(db_engine):
    """Session for arranging data and checking results outside the app."""
    session = sessionmaker(bind=db_engine)()
    try:
        yield session
    finally:
        session.close()


@pytest.fixture
def client(db_engine):
    flask_app.config.update(TESTING=True)
    with flask_app.test_client() as test_client:
        yield test_client


# ==============================================================================
# TEST DATA
# ==============================================================================

SEED_CITIES = [
    # (id, hex, deleted, [(translation id, language, name), ...])
    (1, "c0ffee", False, [(1, "EN", "Springfield"), (2, "FR", "Champ-de-Printemps")]),
    (2, "be71e0", False, [(3, "EN", "Berlin"), (4, "FR", "Berlin-sur-Spree")]),
    (3, "5a11e7", False, [(5, "EN", "Spring Valley"), (6, "DE", "Fruehlingstal")]),
    (4, "9a7150", False, [(7, "EN", "Paris"), (8, "FR", "Paris")]),
    (5, "e3e3e3", False, []),
    (6, "dead00", True, [(9, "EN", "Springtown")]),
]


@pytest.fixture
def seeded(db_session):
    """Six cities: four with translations, one without any, one soft-deleted."""
    now = datetime(2024, 1, 1, 12, 0, 0)
    for city_id, hex_key, deleted, translations in SEED_CITIES:
        db_session.add(City(
            id=city_id,
            hex=hex_key,
            updated_at=now,
            deleted_at=now if deleted else None,
        ))
        for translation_id, language, name in translations:
            db_session.add(CityTranslation(
                id=translation_id, city_id=city_id, language=language, name=name
            ))
        db_session.flush()
    db_session.commit()
    return SEED_CITIES
