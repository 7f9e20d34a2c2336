"""Sports request/response records

Pydantic value objects exchanged between the gateway and SportsService.
"""

from __future__ import annotations

from datetime import datetime

from pydantic import BaseModel, Field

from listings.models.types import Int64


class Event(BaseModel):
    """A sporting event as returned to clients"""

    id: Int64 = 0
    name: str = ""  # derived: "<away_team> vs <home_team>"
    home_team: str = ""
    away_team: str = ""
    venue_location: str = ""
    visible: bool = False
    advertised_start_time: datetime | None = None
    status: str = ""  # derived: "OPEN" | "CLOSED" | ""


class ListEventsRequestFilter(BaseModel):
    """Conjunctive equality constraints; an unset field means no constraint"""

    home_team: str | None = None
    away_team: str | None = None
    venue_location: str | None = None
    visible: bool | None = None
    id: Int64 | None = None


class ListEventsRequestOrder(BaseModel):
    field: str | None = None
    direction: str | None = None


class ListEventsRequest(BaseModel):
    filter: ListEventsRequestFilter | None = None
    order: ListEventsRequestOrder | None = None


class ListEventsResponse(BaseModel):
    events: list[Event] = Field(default_factory=list)


class GetEventRequest(BaseModel):
    id: Int64
