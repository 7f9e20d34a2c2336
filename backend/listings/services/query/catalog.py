"""Live column catalog lookup

Reads the column names of a table from the store's own metadata on every
call. Nothing is cached, so a column added or dropped at runtime is seen by
the next request.
"""

from __future__ import annotations

import logging
from typing import Protocol

from sqlalchemy import inspect
from sqlalchemy.engine import Connection
from sqlalchemy.exc import SQLAlchemyError
from sqlalchemy.orm import Session

logger = logging.getLogger(__name__)


class MetadataUnavailableError(Exception):
    """Column catalog could not be fetched or parsed"""


class ColumnCatalog(Protocol):
    def columns(self, table: str) -> frozenset[str]:
        ...


class InspectorColumnCatalog:
    """ColumnCatalog backed by SQLAlchemy schema inspection"""

    def __init__(self, bind: Session | Connection) -> None:
        self._bind = bind

    def columns(self, table: str) -> frozenset[str]:
        """Current column names of table

        Raises:
            MetadataUnavailableError: query failed, table missing, or a
                catalog entry had no usable name
        """
        try:
            connection = self._bind.connection() if isinstance(self._bind, Session) else self._bind
            # fresh Inspector per call; Inspector memoizes reflection
            entries = inspect(connection).get_columns(table)
        except SQLAlchemyError as e:
            raise MetadataUnavailableError(f"cannot read columns of {table}: {e}") from e

        names: set[str] = set()
        for entry in entries:
            name = entry.get("name")
            if not isinstance(name, str) or not name:
                raise MetadataUnavailableError(f"malformed column entry for {table}: {entry!r}")
            names.add(name)

        logger.debug("column catalog %s: %s", table, sorted(names))
        return frozenset(names)
