"""Sports service

ListEvents / GetEvent over the events table. Events carry a derived
matchup name on top of status.
"""

from __future__ import annotations

import logging

from listings.models.sports import (
    Event,
    GetEventRequest,
    ListEventsRequest,
    ListEventsRequestFilter,
    ListEventsResponse,
)
from listings.services.listing import EntityDefinition, ListingRepository
from listings.services.query.annotator import matchup_name_rule, status_rule
from listings.services.query.filter_compiler import FilterField, FilterKind

logger = logging.getLogger(__name__)

EVENTS = EntityDefinition(
    name="event",
    table="events",
    columns=("id", "home_team", "away_team", "venue_location", "visible", "advertised_start_time"),
    # string equality → boolean → id
    filter_fields=(
        FilterField("home_team", "home_team", FilterKind.EQUALITY),
        FilterField("away_team", "away_team", FilterKind.EQUALITY),
        FilterField("venue_location", "venue_location", FilterKind.EQUALITY),
        FilterField("visible", "visible", FilterKind.BOOLEAN),
        FilterField("id", "id", FilterKind.EQUALITY),
    ),
    default_order_field="advertised_start_time",
    entity_model=Event,
    filter_model=ListEventsRequestFilter,
    derived_rules=(matchup_name_rule, status_rule),
)


class SportsService:
    """Sporting event listing RPCs"""

    def __init__(self, repo: ListingRepository) -> None:
        self._repo = repo

    def list_events(self, request: ListEventsRequest) -> ListEventsResponse:
        events = self._repo.list(request.filter, request.order)
        logger.debug("list_events: %d events", len(events))
        return ListEventsResponse(events=events)

    def get_event(self, request: GetEventRequest) -> Event:
        """Single event by id (NotFoundError when missing)"""
        return self._repo.get_by_id(request.id)
