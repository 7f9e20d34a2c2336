"""Racing service

ListRaces / GetRace over the races table.
"""

from __future__ import annotations

import logging

from listings.models.racing import (
    GetRaceRequest,
    ListRacesRequest,
    ListRacesRequestFilter,
    ListRacesResponse,
    Race,
)
from listings.services.listing import EntityDefinition, ListingRepository
from listings.services.query.annotator import status_rule
from listings.services.query.filter_compiler import FilterField, FilterKind

logger = logging.getLogger(__name__)

RACES = EntityDefinition(
    name="race",
    table="races",
    columns=("id", "meeting_id", "name", "number", "visible", "advertised_start_time"),
    # membership → boolean → id
    filter_fields=(
        FilterField("meeting_ids", "meeting_id", FilterKind.MEMBERSHIP),
        FilterField("visible", "visible", FilterKind.BOOLEAN),
        FilterField("id", "id", FilterKind.EQUALITY),
    ),
    default_order_field="advertised_start_time",
    entity_model=Race,
    filter_model=ListRacesRequestFilter,
    derived_rules=(status_rule,),
)


class RacingService:
    """Race listing RPCs"""

    def __init__(self, repo: ListingRepository) -> None:
        self._repo = repo

    def list_races(self, request: ListRacesRequest) -> ListRacesResponse:
        races = self._repo.list(request.filter, request.order)
        logger.debug("list_races: %d races", len(races))
        return ListRacesResponse(races=races)

    def get_race(self, request: GetRaceRequest) -> Race:
        """Single race by id (NotFoundError when missing)"""
        return self._repo.get_by_id(request.id)
