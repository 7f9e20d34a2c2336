"""Race / event listing CLI

Seeds the configured database (once) and prints the listing for a filter
and order, the same way the API would return it.

Usage:
    python scripts/list_entities.py races --meeting-id 1 --meeting-id 2 --visible
    python scripts/list_entities.py races --order-field meeting_id --direction desc
    python scripts/list_entities.py events --id 7
    python scripts/list_entities.py events --home-team "Boston Heat" --direction asc
"""

import argparse
import os
import sys

sys.path.insert(0, os.path.join(os.path.dirname(__file__), "..", "backend"))

from listings.config import settings
from listings.database import SessionLocal, engine
from listings.models.racing import ListRacesRequest, ListRacesRequestFilter, ListRacesRequestOrder
from listings.models.sports import ListEventsRequest, ListEventsRequestFilter, ListEventsRequestOrder
from listings.services.listing import ListingRepository
from listings.services.racing import RACES, RacingService
from listings.services.seed import seed_all
from listings.services.sports import EVENTS, SportsService


def _visible(args: argparse.Namespace) -> bool | None:
    if args.visible:
        return True
    if args.hidden:
        return False
    return None


def _order(args: argparse.Namespace, order_cls):
    if args.order_field is None and args.direction is None:
        return None
    return order_cls(field=args.order_field, direction=args.direction)


def main() -> None:
    parser = argparse.ArgumentParser(description="List races or sporting events")
    parser.add_argument("kind", choices=["races", "events"])
    parser.add_argument("--meeting-id", type=int, action="append", default=[], dest="meeting_ids",
                        help="race meeting id (repeatable)")
    parser.add_argument("--id", type=int, default=None, dest="entity_id", help="single race or event id")
    parser.add_argument("--home-team", default=None)
    parser.add_argument("--away-team", default=None)
    parser.add_argument("--venue", default=None, help="event venue location")
    visibility = parser.add_mutually_exclusive_group()
    visibility.add_argument("--visible", action="store_true", help="visible only")
    visibility.add_argument("--hidden", action="store_true", help="hidden only")
    parser.add_argument("--order-field", default=None, help="column to sort on")
    parser.add_argument("--direction", default=None, help="asc | desc")
    args = parser.parse_args()

    seed_all(engine, settings.SEED_ROW_COUNT)

    with SessionLocal() as session:
        if args.kind == "races":
            service = RacingService(ListingRepository(session, RACES, order_policy=settings.ORDER_WITHOUT_FIELD))
            response = service.list_races(ListRacesRequest(
                filter=ListRacesRequestFilter(
                    meeting_ids=args.meeting_ids,
                    visible=_visible(args),
                    id=args.entity_id,
                ),
                order=_order(args, ListRacesRequestOrder),
            ))
            for race in response.races:
                print(f"  [{race.id:>3}] meeting {race.meeting_id:>2} #{race.number:<2} "
                      f"{race.name:<30} {race.advertised_start_time}  {race.status}")
            print(f"\n  {len(response.races)} races")
        else:
            service = SportsService(ListingRepository(session, EVENTS, order_policy=settings.ORDER_WITHOUT_FIELD))
            response = service.list_events(ListEventsRequest(
                filter=ListEventsRequestFilter(
                    home_team=args.home_team,
                    away_team=args.away_team,
                    venue_location=args.venue,
                    visible=_visible(args),
                    id=args.entity_id,
                ),
                order=_order(args, ListEventsRequestOrder),
            ))
            for event in response.events:
                print(f"  [{event.id:>3}] {event.name:<50} {event.venue_location:<16} "
                      f"{event.advertised_start_time}  {event.status}")
            print(f"\n  {len(response.events)} events")


if __name__ == "__main__":
    main()
