"""Sporting event ORM model

Persisted columns only. name ("<away> vs <home>") and status are derived at
read time and never stored.
"""

from __future__ import annotations

from datetime import datetime

from sqlalchemy import Boolean, DateTime, Index, Integer, Text
from sqlalchemy.orm import Mapped, mapped_column

from listings.models.db.base import Base


class EventORM(Base):
    """A sporting fixture between two teams"""

    __tablename__ = "events"

    id: Mapped[int] = mapped_column(Integer, primary_key=True)
    home_team: Mapped[str] = mapped_column(Text, nullable=False, default="")
    away_team: Mapped[str] = mapped_column(Text, nullable=False, default="")
    venue_location: Mapped[str] = mapped_column(Text, nullable=False, default="")
    visible: Mapped[bool] = mapped_column(Boolean, nullable=False, default=False)
    advertised_start_time: Mapped[datetime | None] = mapped_column(DateTime(timezone=True), nullable=True)

    __table_args__ = (
        Index("ix_events_advertised_start_time", "advertised_start_time"),
    )

    def __repr__(self) -> str:
        return f"<Event {self.id} {self.away_team} @ {self.home_team}>"
