"""Database engine and session management

Sync only. The store must be SQLite: listing queries use qmark (`?`)
placeholders through the raw driver and seeding uses INSERT OR IGNORE, so
other database URLs are not supported.
"""

from __future__ import annotations

from collections.abc import Generator

from sqlalchemy import create_engine
from sqlalchemy.orm import Session, sessionmaker

from listings.config import settings

engine = create_engine(
    settings.DATABASE_URL,
    echo=settings.DB_ECHO,
    # FastAPI runs sync endpoints in a threadpool
    connect_args={"check_same_thread": False},
)

SessionLocal = sessionmaker(bind=engine, autocommit=False, autoflush=False)


def get_db() -> Generator[Session, None, None]:
    """Session factory for FastAPI Depends"""
    db = SessionLocal()
    try:
        yield db
    finally:
        db.close()
