"""Derived-field annotator

Fills read-time fields on freshly scanned entities. Nothing computed here
is persisted.

- status: "" without a start time, "OPEN" if the start time is strictly
  after now, otherwise "CLOSED" (a start time equal to now is CLOSED)
- name (events): "<away_team> vs <home_team>", recomputed on every call
"""

from __future__ import annotations

from collections.abc import Callable, Sequence
from datetime import datetime, timezone
from typing import Any, TypeVar

T = TypeVar("T")

STATUS_OPEN = "OPEN"
STATUS_CLOSED = "CLOSED"

# (entity, now) -> None; mutates entity in place
DerivedFieldRule = Callable[[Any, datetime], None]


def utc_now() -> datetime:
    return datetime.now(timezone.utc)


def _as_utc(value: datetime) -> datetime:
    # naive timestamps are stored as UTC
    if value.tzinfo is None:
        return value.replace(tzinfo=timezone.utc)
    return value


def status_for(start: datetime | None, now: datetime) -> str:
    if start is None:
        return ""
    if _as_utc(start) > _as_utc(now):
        return STATUS_OPEN
    return STATUS_CLOSED


def status_rule(entity: Any, now: datetime) -> None:
    start = entity.advertised_start_time
    if start is None:
        return
    entity.status = status_for(start, now)


def matchup_name_rule(entity: Any, now: datetime) -> None:
    entity.name = f"{entity.away_team} vs {entity.home_team}"


class Annotator:
    """Applies derived-field rules to a batch of entities"""

    def __init__(
        self,
        rules: Sequence[DerivedFieldRule],
        clock: Callable[[], datetime] = utc_now,
    ) -> None:
        self._rules = tuple(rules)
        self._clock = clock

    def annotate(self, entities: list[T] | None) -> list[T] | None:
        """Mutate and return the same list; None stays None"""
        if entities is None:
            return None

        # one evaluation instant per batch
        now = self._clock()
        for entity in entities:
            for rule in self._rules:
                rule(entity, now)
        return entities
