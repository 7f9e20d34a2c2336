"""FastAPI dependencies

Services are built per request around the request's DB session.
"""

from collections.abc import Generator

from fastapi import Depends
from sqlalchemy.orm import Session

from listings.config import settings
from listings.database import get_db as _get_db
from listings.services.listing import ListingRepository
from listings.services.racing import RACES, RacingService
from listings.services.sports import EVENTS, SportsService


def get_db() -> Generator[Session, None, None]:
    """DB session for FastAPI Depends"""
    yield from _get_db()


def get_racing_service(db: Session = Depends(get_db)) -> RacingService:
    repo = ListingRepository(db, RACES, order_policy=settings.ORDER_WITHOUT_FIELD)
    return RacingService(repo)


def get_sports_service(db: Session = Depends(get_db)) -> SportsService:
    repo = ListingRepository(db, EVENTS, order_policy=settings.ORDER_WITHOUT_FIELD)
    return SportsService(repo)
