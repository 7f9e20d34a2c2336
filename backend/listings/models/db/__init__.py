"""ORM model package

Re-exports every ORM class so Base.metadata sees all tables after
`from listings.models.db import Base`.
"""

from listings.models.db.base import Base
from listings.models.db.event import EventORM
from listings.models.db.race import RaceORM

__all__ = [
    "Base",
    "EventORM",
    "RaceORM",
]
