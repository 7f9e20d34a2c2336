"""Generic listing repository

One implementation shared by races and events, parameterized by an
EntityDefinition.

Flow per request:
  1. base SELECT for the table
  2. compile_filter() → WHERE + positional args
  3. OrderCompiler → validated ORDER BY (live column catalog)
  4. execute on the session's connection
  5. scan rows → entity models
  6. Annotator → derived fields
"""

from __future__ import annotations

import logging
from collections.abc import Sequence
from dataclasses import dataclass
from datetime import datetime, timezone
from typing import Any, Callable

from pydantic import BaseModel
from sqlalchemy.exc import SQLAlchemyError
from sqlalchemy.orm import Session

from listings.services.query.annotator import Annotator, DerivedFieldRule, utc_now
from listings.services.query.catalog import ColumnCatalog, InspectorColumnCatalog
from listings.services.query.filter_compiler import FilterField, compile_filter
from listings.services.query.order_compiler import (
    FieldlessOrderPolicy,
    OrderCompiler,
)

logger = logging.getLogger(__name__)


class NotFoundError(Exception):
    """No row matched the requested id"""


class StoreExecutionError(Exception):
    """Main listing query failed or returned an unreadable row"""


@dataclass(frozen=True)
class EntityDefinition:
    """Everything the repository needs to know about one listable table"""

    name: str
    table: str
    columns: tuple[str, ...]
    filter_fields: tuple[FilterField, ...]
    default_order_field: str
    entity_model: type[BaseModel]
    filter_model: type[BaseModel]
    derived_rules: tuple[DerivedFieldRule, ...] = ()
    timestamp_columns: tuple[str, ...] = ("advertised_start_time",)

    @property
    def base_query(self) -> str:
        return f"SELECT {', '.join(self.columns)} FROM {self.table}"


def parse_timestamp(value: Any) -> datetime | None:
    """Stored start time → aware UTC datetime

    SQLite hands back text; both "YYYY-MM-DD HH:MM:SS[.ffffff]" and RFC 3339
    (incl. trailing Z) are accepted. Naive values are UTC.
    """
    if value is None or value == "":
        return None
    if isinstance(value, datetime):
        parsed = value
    else:
        text = str(value).strip()
        if text.endswith("Z"):
            text = text[:-1] + "+00:00"
        parsed = datetime.fromisoformat(text)
    if parsed.tzinfo is None:
        parsed = parsed.replace(tzinfo=timezone.utc)
    return parsed


class ListingRepository:
    """Read-only access to one listable table"""

    def __init__(
        self,
        session: Session,
        definition: EntityDefinition,
        catalog: ColumnCatalog | None = None,
        clock: Callable[[], datetime] = utc_now,
        order_policy: FieldlessOrderPolicy | str = FieldlessOrderPolicy.DEFAULT,
    ) -> None:
        self._session = session
        self._definition = definition
        self._catalog = catalog if catalog is not None else InspectorColumnCatalog(session)
        self._order = OrderCompiler(
            catalog=self._catalog,
            table=definition.table,
            default_field=definition.default_order_field,
            policy=FieldlessOrderPolicy(order_policy),
        )
        self._annotator = Annotator(definition.derived_rules, clock=clock)

    @property
    def definition(self) -> EntityDefinition:
        return self._definition

    def build_query(self, filter_: Any = None, order: Any = None) -> tuple[str, list[Any]]:
        """Base SELECT + WHERE + ORDER BY, without executing"""
        query, args = compile_filter(self._definition.base_query, filter_, self._definition.filter_fields)
        query = self._order.compile(query, order)
        return query, args

    def list(self, filter_: Any = None, order: Any = None) -> list[Any]:
        """Entities matching filter_, ordered by order when valid

        Raises:
            StoreExecutionError: query execution or row scanning failed
        """
        query, args = self.build_query(filter_, order)
        rows = self._execute(query, args)
        return self._annotator.annotate(self._scan(rows))

    def get_by_id(self, entity_id: int) -> Any:
        """Single entity by id

        Raises:
            NotFoundError: no row with that id
            StoreExecutionError: query execution or row scanning failed
        """
        try:
            filter_ = self._definition.filter_model(id=entity_id)
        except ValueError as e:
            # outside the INTEGER range, so no row can carry it
            raise NotFoundError(f"unable to locate a {self._definition.name} with id {entity_id}") from e
        query, args = compile_filter(self._definition.base_query, filter_, self._definition.filter_fields)
        entities = self._annotator.annotate(self._scan(self._execute(query, args)))
        if not entities:
            raise NotFoundError(f"unable to locate a {self._definition.name} with id {entity_id}")
        return entities[0]

    # ── internals ────────────────────────────────────────────────

    def _execute(self, query: str, args: Sequence[Any]) -> list[Any]:
        logger.debug("%s query: %s args=%s", self._definition.name, query, list(args))
        try:
            result = self._session.connection().exec_driver_sql(query, tuple(args))
            return list(result.all())
        except (SQLAlchemyError, OverflowError) as e:
            # sqlite3 raises OverflowError unwrapped for ints beyond 64 bits
            raise StoreExecutionError(f"{self._definition.name} query failed: {e}") from e

    def _scan(self, rows: Sequence[Any]) -> list[Any]:
        entities = []
        for row in rows:
            values = dict(zip(self._definition.columns, row))
            try:
                for column in self._definition.timestamp_columns:
                    if column in values:
                        values[column] = parse_timestamp(values[column])
                entities.append(self._definition.entity_model(**values))
            except ValueError as e:
                raise StoreExecutionError(f"cannot scan {self._definition.name} row {tuple(row)!r}: {e}") from e
        return entities
