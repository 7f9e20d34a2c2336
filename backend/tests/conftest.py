"""Shared DB fixtures

In-memory SQLite per test. StaticPool keeps a single connection so the
TestClient worker thread sees the same tables.
"""

from __future__ import annotations

from datetime import datetime, timedelta, timezone

import pytest
from sqlalchemy import create_engine
from sqlalchemy.orm import Session, sessionmaker
from sqlalchemy.pool import StaticPool

from listings.models.db import Base, EventORM, RaceORM

NOW = datetime.now(timezone.utc)
FUTURE = NOW + timedelta(hours=24)
PAST = NOW - timedelta(hours=24)


@pytest.fixture(scope="function")
def db_engine():
    engine = create_engine(
        "sqlite://",
        connect_args={"check_same_thread": False},
        poolclass=StaticPool,
    )
    Base.metadata.create_all(engine)
    try:
        yield engine
    finally:
        Base.metadata.drop_all(engine)
        engine.dispose()


@pytest.fixture(scope="function")
def db_session(db_engine) -> Session:
    """Fresh DB session (new DB per test)"""
    session = sessionmaker(bind=db_engine)()
    try:
        yield session
    finally:
        session.close()


@pytest.fixture()
def seeded_session(db_session) -> Session:
    """Three races and three events with known values"""
    db_session.add_all([
        RaceORM(id=1, meeting_id=1, name="Flemington Cup", number=3, visible=True, advertised_start_time=FUTURE),
        RaceORM(id=2, meeting_id=2, name="Randwick Plate", number=1, visible=False, advertised_start_time=PAST),
        RaceORM(id=3, meeting_id=3, name="Ascot Sprint", number=7, visible=True, advertised_start_time=PAST),
        EventORM(id=1, home_team="Bulls", away_team="Heat", venue_location="Illinois",
                 visible=True, advertised_start_time=FUTURE),
        EventORM(id=2, home_team="Lions", away_team="Bulls", venue_location="Ohio",
                 visible=False, advertised_start_time=PAST),
        EventORM(id=3, home_team="Bulls", away_team="Kings", venue_location="Illinois",
                 visible=True, advertised_start_time=None),
    ])
    db_session.commit()
    return db_session
