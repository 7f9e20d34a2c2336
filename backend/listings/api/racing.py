"""Racing API router

Endpoints:
- POST /v1/list-races  — filtered/ordered race listing
- GET  /v1/races/{id}  — single race
"""

import logging

from fastapi import APIRouter, Depends, HTTPException, Path

from listings.api.dependencies import get_racing_service
from listings.models.racing import GetRaceRequest, ListRacesRequest, ListRacesResponse, Race
from listings.models.types import INT64_MAX, INT64_MIN
from listings.services.listing import NotFoundError, StoreExecutionError
from listings.services.racing import RacingService

logger = logging.getLogger(__name__)

router = APIRouter(prefix="/v1", tags=["racing"])


@router.post("/list-races", response_model=ListRacesResponse)
def list_races(
    request: ListRacesRequest,
    service: RacingService = Depends(get_racing_service),
) -> ListRacesResponse:
    """Races matching the filter, ordered when the order field is valid"""
    try:
        return service.list_races(request)
    except StoreExecutionError as e:
        logger.error("list_races failed: %s", e)
        raise HTTPException(status_code=500, detail="failed to list races") from e


@router.get("/races/{race_id}", response_model=Race)
def get_race(
    race_id: int = Path(..., ge=INT64_MIN, le=INT64_MAX),
    service: RacingService = Depends(get_racing_service),
) -> Race:
    try:
        return service.get_race(GetRaceRequest(id=race_id))
    except NotFoundError as e:
        raise HTTPException(status_code=404, detail=str(e)) from e
    except StoreExecutionError as e:
        logger.error("get_race %d failed: %s", race_id, e)
        raise HTTPException(status_code=500, detail="failed to get race") from e
