"""Sports API router

Endpoints:
- POST /v1/list-events  — filtered/ordered event listing
- GET  /v1/events/{id}  — single event
"""

import logging

from fastapi import APIRouter, Depends, HTTPException, Path

from listings.api.dependencies import get_sports_service
from listings.models.sports import Event, GetEventRequest, ListEventsRequest, ListEventsResponse
from listings.models.types import INT64_MAX, INT64_MIN
from listings.services.listing import NotFoundError, StoreExecutionError
from listings.services.sports import SportsService

logger = logging.getLogger(__name__)

router = APIRouter(prefix="/v1", tags=["sports"])


@router.post("/list-events", response_model=ListEventsResponse)
def list_events(
    request: ListEventsRequest,
    service: SportsService = Depends(get_sports_service),
) -> ListEventsResponse:
    """Events matching the filter, ordered when the order field is valid"""
    try:
        return service.list_events(request)
    except StoreExecutionError as e:
        logger.error("list_events failed: %s", e)
        raise HTTPException(status_code=500, detail="failed to list events") from e


@router.get("/events/{event_id}", response_model=Event)
def get_event(
    event_id: int = Path(..., ge=INT64_MIN, le=INT64_MAX),
    service: SportsService = Depends(get_sports_service),
) -> Event:
    try:
        return service.get_event(GetEventRequest(id=event_id))
    except NotFoundError as e:
        raise HTTPException(status_code=404, detail=str(e)) from e
    except StoreExecutionError as e:
        logger.error("get_event %d failed: %s", event_id, e)
        raise HTTPException(status_code=500, detail="failed to get event") from e
