"""Race ORM model

Persisted columns only. status is derived at read time and never stored.
"""

from __future__ import annotations

from datetime import datetime

from sqlalchemy import Boolean, DateTime, Index, Integer, Text
from sqlalchemy.orm import Mapped, mapped_column

from listings.models.db.base import Base


class RaceORM(Base):
    """A race on a meeting's card"""

    __tablename__ = "races"

    id: Mapped[int] = mapped_column(Integer, primary_key=True)
    meeting_id: Mapped[int] = mapped_column(Integer, nullable=False, default=0)
    name: Mapped[str] = mapped_column(Text, nullable=False, default="")
    number: Mapped[int] = mapped_column(Integer, nullable=False, default=0)
    visible: Mapped[bool] = mapped_column(Boolean, nullable=False, default=False)
    advertised_start_time: Mapped[datetime | None] = mapped_column(DateTime(timezone=True), nullable=True)

    __table_args__ = (
        Index("ix_races_meeting_id", "meeting_id"),
        Index("ix_races_advertised_start_time", "advertised_start_time"),
    )

    def __repr__(self) -> str:
        return f"<Race {self.id} meeting={self.meeting_id} #{self.number}>"
