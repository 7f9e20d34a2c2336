"""Demo data bootstrap

Creates the races/events tables when absent and fills them with fake rows.
Each table is seeded at most once per process; later calls are no-ops.
Rows use fixed ids 1..N with INSERT OR IGNORE, so restarting against an
existing database keeps the old rows.
"""

from __future__ import annotations

import logging
import threading
from collections.abc import Callable
from datetime import datetime, timedelta, timezone
from typing import Any

from faker import Faker
from sqlalchemy import insert
from sqlalchemy.engine import Engine

from listings.models.db import Base, EventORM, RaceORM

logger = logging.getLogger(__name__)

_MASCOTS = (
    "Bulls", "Heat", "Kings", "Lions", "Tigers", "Hawks", "Sharks", "Storm",
    "Giants", "Rangers", "Rovers", "United", "Wolves", "Eagles", "Knights",
)

_RACE_SUFFIXES = ("Cup", "Stakes", "Handicap", "Plate", "Classic", "Derby", "Sprint", "Mile")

RowFactory = Callable[[Faker, int, datetime], dict[str, Any]]


def _start_time(fake: Faker, now: datetime) -> datetime:
    # between yesterday and two days out
    return fake.date_time_between(
        start_date=now - timedelta(days=1),
        end_date=now + timedelta(days=2),
        tzinfo=timezone.utc,
    )


def _race_row(fake: Faker, row_id: int, now: datetime) -> dict[str, Any]:
    return {
        "id": row_id,
        "meeting_id": fake.random_int(min=1, max=10),
        "name": f"{fake.city()} {fake.random_element(_RACE_SUFFIXES)}",
        "number": fake.random_int(min=1, max=12),
        "visible": fake.boolean(),
        "advertised_start_time": _start_time(fake, now),
    }


def _team(fake: Faker) -> str:
    return f"{fake.city()} {fake.random_element(_MASCOTS)}"


def _event_row(fake: Faker, row_id: int, now: datetime) -> dict[str, Any]:
    return {
        "id": row_id,
        "home_team": _team(fake),
        "away_team": _team(fake),
        "venue_location": fake.state(),
        "visible": fake.boolean(),
        "advertised_start_time": _start_time(fake, now),
    }


class TableSeeder:
    """Once-per-process seeding of one table"""

    def __init__(self, model: type[Base], row_factory: RowFactory) -> None:
        self._model = model
        self._row_factory = row_factory
        self._lock = threading.Lock()
        self._done = False

    @property
    def done(self) -> bool:
        return self._done

    def init(self, engine: Engine, count: int, faker: Faker | None = None) -> bool:
        """Seed on the first call only

        Returns:
            True if this call did the seeding
        """
        with self._lock:
            if self._done:
                return False
            # a failed first attempt is not retried
            self._done = True
            self._seed(engine, count, faker or Faker())
            return True

    def _seed(self, engine: Engine, count: int, fake: Faker) -> None:
        table = self._model.__table__
        Base.metadata.create_all(engine, tables=[table])

        now = datetime.now(timezone.utc)
        rows = [self._row_factory(fake, i, now) for i in range(1, count + 1)]
        if not rows:
            return

        with engine.begin() as conn:
            conn.execute(insert(self._model).prefix_with("OR IGNORE"), rows)
        logger.info("seeded %s: %d rows", table.name, len(rows))


race_seeder = TableSeeder(RaceORM, _race_row)
event_seeder = TableSeeder(EventORM, _event_row)


def seed_all(engine: Engine, count: int) -> None:
    """Seed races and events (each at most once per process)"""
    race_seeder.init(engine, count)
    event_seeder.init(engine, count)
