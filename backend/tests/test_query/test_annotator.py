"""Derived-field annotator tests

status from advertised_start_time; matchup name for events.
"""

from datetime import datetime, timedelta, timezone

import pytest

from listings.models.racing import Race
from listings.models.sports import Event
from listings.services.query.annotator import (
    Annotator,
    matchup_name_rule,
    status_for,
    status_rule,
)
from listings.services.racing import RACES
from listings.services.sports import EVENTS

NOW = datetime(2026, 10, 19, 12, 0, tzinfo=timezone.utc)
FUTURE = NOW + timedelta(hours=24)
PAST = NOW - timedelta(hours=24)


def _race_annotator() -> Annotator:
    return Annotator(RACES.derived_rules, clock=lambda: NOW)


def _event_annotator() -> Annotator:
    return Annotator(EVENTS.derived_rules, clock=lambda: NOW)


# === TestStatusFor ===


class TestStatusFor:
    def test_absent(self):
        assert status_for(None, NOW) == ""

    def test_future(self):
        assert status_for(FUTURE, NOW) == "OPEN"

    def test_past(self):
        assert status_for(PAST, NOW) == "CLOSED"

    def test_exactly_now_is_closed(self):
        assert status_for(NOW, NOW) == "CLOSED"

    def test_one_microsecond_ahead_is_open(self):
        assert status_for(NOW + timedelta(microseconds=1), NOW) == "OPEN"

    def test_naive_is_treated_as_utc(self):
        naive_future = FUTURE.replace(tzinfo=None)
        assert status_for(naive_future, NOW) == "OPEN"

    def test_other_timezone(self):
        # 12:30 at +01:00 is 11:30 UTC
        start = datetime(2026, 10, 19, 12, 30, tzinfo=timezone(timedelta(hours=1)))
        assert status_for(start, NOW) == "CLOSED"


# === TestRaceAnnotation ===


class TestRaceAnnotation:
    def test_no_input(self):
        assert _race_annotator().annotate(None) is None

    def test_empty(self):
        assert _race_annotator().annotate([]) == []

    def test_future_race(self):
        races = _race_annotator().annotate([Race(advertised_start_time=FUTURE)])
        assert races == [Race(advertised_start_time=FUTURE, status="OPEN")]

    def test_past_race(self):
        races = _race_annotator().annotate([Race(advertised_start_time=PAST)])
        assert races == [Race(advertised_start_time=PAST, status="CLOSED")]

    def test_missing_start_time(self):
        races = _race_annotator().annotate([Race(advertised_start_time=None)])
        assert races == [Race(advertised_start_time=None, status="")]

    def test_mixed_batch(self):
        races = _race_annotator().annotate([
            Race(advertised_start_time=FUTURE),
            Race(advertised_start_time=PAST),
            Race(advertised_start_time=None),
            Race(advertised_start_time=FUTURE),
        ])
        assert [r.status for r in races] == ["OPEN", "CLOSED", "", "OPEN"]

    def test_mutates_and_returns_same_list(self):
        races = [Race(advertised_start_time=FUTURE)]
        result = _race_annotator().annotate(races)
        assert result is races
        assert races[0].status == "OPEN"

    def test_races_get_no_derived_name(self):
        races = _race_annotator().annotate([Race(name="Flemington Cup", advertised_start_time=PAST)])
        assert races[0].name == "Flemington Cup"

    def test_clock_read_once_per_batch(self):
        calls = []

        def clock():
            calls.append(1)
            return NOW

        Annotator(RACES.derived_rules, clock=clock).annotate(
            [Race(advertised_start_time=FUTURE) for _ in range(5)]
        )
        assert len(calls) == 1

    def test_default_clock_uses_current_time(self):
        real_now = datetime.now(timezone.utc)
        races = Annotator(RACES.derived_rules).annotate([
            Race(advertised_start_time=real_now + timedelta(hours=24)),
            Race(advertised_start_time=real_now - timedelta(hours=24)),
        ])
        assert [r.status for r in races] == ["OPEN", "CLOSED"]


# === TestEventAnnotation ===


class TestEventAnnotation:
    def test_name_from_teams(self):
        events = _event_annotator().annotate([Event(home_team="Bulls", away_team="Heat")])
        assert events[0].name == "Heat vs Bulls"

    def test_name_without_start_time(self):
        events = _event_annotator().annotate([Event(home_team="Bulls", away_team="Heat")])
        assert events[0].status == ""
        assert events[0].name == "Heat vs Bulls"

    def test_name_overwrites_stale_value(self):
        events = _event_annotator().annotate([Event(name="old", home_team="Lions", away_team="Kings")])
        assert events[0].name == "Kings vs Lions"

    def test_empty_teams(self):
        events = _event_annotator().annotate([Event()])
        assert events[0].name == " vs "

    @pytest.mark.parametrize("start,status", [(FUTURE, "OPEN"), (PAST, "CLOSED"), (None, "")])
    def test_status(self, start, status):
        events = _event_annotator().annotate([Event(home_team="A", away_team="B", advertised_start_time=start)])
        assert events[0].status == status
        assert events[0].name == "B vs A"


class TestRules:
    def test_status_rule_leaves_unset_start_alone(self):
        race = Race(status="")
        status_rule(race, NOW)
        assert race.status == ""

    def test_matchup_name_rule(self):
        event = Event(home_team="Bulls", away_team="Heat")
        matchup_name_rule(event, NOW)
        assert event.name == "Heat vs Bulls"
