"""Demo data seeding tests"""

from datetime import datetime, timedelta, timezone

from faker import Faker
from sqlalchemy import create_engine, func, select
from sqlalchemy.orm import Session
from sqlalchemy.pool import StaticPool

from listings.models.db import EventORM, RaceORM
from listings.services.listing import ListingRepository
from listings.services.racing import RACES
from listings.services.seed import TableSeeder, _event_row, _race_row, event_seeder, race_seeder
from listings.services.sports import EVENTS


def _empty_engine():
    # no tables yet; the seeder must create them
    return create_engine("sqlite://", connect_args={"check_same_thread": False}, poolclass=StaticPool)


def _count(engine, model) -> int:
    with engine.connect() as conn:
        return conn.execute(select(func.count()).select_from(model)).scalar_one()


class TestTableSeeder:
    def test_creates_table_and_rows(self):
        engine = _empty_engine()
        seeder = TableSeeder(RaceORM, _race_row)
        assert seeder.init(engine, 25, Faker()) is True
        assert _count(engine, RaceORM) == 25

    def test_runs_once(self):
        engine = _empty_engine()
        seeder = TableSeeder(EventORM, _event_row)
        assert seeder.init(engine, 10) is True
        assert seeder.init(engine, 50) is False
        assert seeder.done is True
        assert _count(engine, EventORM) == 10

    def test_existing_rows_kept(self):
        engine = _empty_engine()
        TableSeeder(RaceORM, _race_row).init(engine, 5)
        with engine.connect() as conn:
            before = conn.exec_driver_sql("SELECT name FROM races ORDER BY id").scalars().all()

        # a second process seeding the same database
        TableSeeder(RaceORM, _race_row).init(engine, 8)
        with engine.connect() as conn:
            after = conn.exec_driver_sql("SELECT name FROM races ORDER BY id").scalars().all()
        assert after[:5] == before
        assert len(after) == 8

    def test_zero_rows(self):
        engine = _empty_engine()
        TableSeeder(RaceORM, _race_row).init(engine, 0)
        assert _count(engine, RaceORM) == 0

    def test_module_seeders_are_distinct(self):
        assert race_seeder is not event_seeder


class TestRowFactories:
    def setup_method(self):
        Faker.seed(1234)
        self.fake = Faker()
        self.now = datetime(2026, 10, 19, 12, tzinfo=timezone.utc)

    def test_race_row(self):
        row = _race_row(self.fake, 7, self.now)
        assert row["id"] == 7
        assert 1 <= row["meeting_id"] <= 10
        assert 1 <= row["number"] <= 12
        assert isinstance(row["visible"], bool)
        assert row["name"]
        assert self.now - timedelta(days=1) <= row["advertised_start_time"] <= self.now + timedelta(days=2)

    def test_event_row(self):
        row = _event_row(self.fake, 3, self.now)
        assert row["id"] == 3
        assert row["home_team"] and row["away_team"] and row["venue_location"]
        assert "status" not in row
        assert "name" not in row
        assert self.now - timedelta(days=1) <= row["advertised_start_time"] <= self.now + timedelta(days=2)


class TestSeededListing:
    """Seeded rows go through the real listing path"""

    def test_races_listable(self):
        engine = _empty_engine()
        TableSeeder(RaceORM, _race_row).init(engine, 30)
        with Session(engine) as session:
            races = ListingRepository(session, RACES).list()
        assert len(races) == 30
        assert {r.status for r in races} <= {"OPEN", "CLOSED"}

    def test_events_listable(self):
        engine = _empty_engine()
        TableSeeder(EventORM, _event_row).init(engine, 12)
        with Session(engine) as session:
            events = ListingRepository(session, EVENTS).list()
        assert len(events) == 12
        assert all(" vs " in e.name for e in events)
