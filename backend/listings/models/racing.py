"""Racing request/response records

Pydantic value objects exchanged between the gateway and RacingService.
ORM tables live in listings.models.db.
"""

from __future__ import annotations

from datetime import datetime

from pydantic import BaseModel, Field

from listings.models.types import Int64


class Race(BaseModel):
    """A race as returned to clients"""

    id: Int64 = 0
    meeting_id: Int64 = 0
    name: str = ""
    number: int = 0
    visible: bool = False
    advertised_start_time: datetime | None = None
    status: str = ""  # derived: "OPEN" | "CLOSED" | ""


class ListRacesRequestFilter(BaseModel):
    """Conjunctive constraints; an unset field means no constraint"""

    meeting_ids: list[Int64] = Field(default_factory=list)  # membership
    visible: bool | None = None
    id: Int64 | None = None


class ListRacesRequestOrder(BaseModel):
    """Sort field (validated against the live table) and ASC/DESC"""

    field: str | None = None
    direction: str | None = None


class ListRacesRequest(BaseModel):
    filter: ListRacesRequestFilter | None = None
    order: ListRacesRequestOrder | None = None


class ListRacesResponse(BaseModel):
    races: list[Race] = Field(default_factory=list)


class GetRaceRequest(BaseModel):
    id: Int64
