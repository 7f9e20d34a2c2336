"""ORDER BY clause compiler

Appends `ORDER BY <column> [ASC|DESC]` only when the column exists in the
table's live column catalog. Every failure degrades to returning the query
unchanged; nothing is raised to the caller.

Outcomes:
- APPLIED: ORDER BY appended
- ABSENT: no order requested (or no field under the "ignore" policy)
- SKIPPED_INVALID: field not in the catalog
- SKIPPED_UNAVAILABLE: catalog could not be read
"""

from __future__ import annotations

import logging
from dataclasses import dataclass
from enum import Enum
from typing import Any

from listings.services.query.catalog import ColumnCatalog, MetadataUnavailableError

logger = logging.getLogger(__name__)

DIRECTIONS = frozenset({"ASC", "DESC"})


class OrderOutcome(str, Enum):
    APPLIED = "applied"
    ABSENT = "absent"
    SKIPPED_INVALID = "skipped_invalid"
    SKIPPED_UNAVAILABLE = "skipped_unavailable"


class FieldlessOrderPolicy(str, Enum):
    """What to do with an order request that names no field"""

    DEFAULT = "default"  # sort on the default column
    IGNORE = "ignore"  # drop the whole order request


@dataclass(frozen=True)
class OrderResult:
    query: str
    outcome: OrderOutcome
    field: str | None = None
    direction: str | None = None


def parse_direction(direction: str | None) -> str | None:
    """Upper-cased ASC/DESC, or None for anything else"""
    if direction is None:
        return None
    token = direction.upper()
    if token in DIRECTIONS:
        return token
    return None


class OrderCompiler:
    """Validated ORDER BY for one table"""

    def __init__(
        self,
        catalog: ColumnCatalog,
        table: str,
        default_field: str,
        policy: FieldlessOrderPolicy = FieldlessOrderPolicy.DEFAULT,
    ) -> None:
        self._catalog = catalog
        self._table = table
        self._default_field = default_field
        self._policy = FieldlessOrderPolicy(policy)

    def resolve(self, query: str, order: Any) -> OrderResult:
        """Compile order onto query and report which branch was taken"""
        if order is None:
            return OrderResult(query, OrderOutcome.ABSENT)

        field = getattr(order, "field", None)
        if not field:
            if self._policy == FieldlessOrderPolicy.IGNORE:
                return OrderResult(query, OrderOutcome.ABSENT)
            field = self._default_field

        try:
            columns = self._catalog.columns(self._table)
        except MetadataUnavailableError as e:
            logger.warning("failed to get column names for %s, continuing without ordering: %s", self._table, e)
            return OrderResult(query, OrderOutcome.SKIPPED_UNAVAILABLE, field=field)

        if field not in columns:
            logger.debug("ignoring unknown sort field %r for %s", field, self._table)
            return OrderResult(query, OrderOutcome.SKIPPED_INVALID, field=field)

        query += " ORDER BY " + field

        raw_direction = getattr(order, "direction", None)
        direction = parse_direction(raw_direction)
        if direction is not None:
            query += " " + direction
        elif raw_direction is not None:
            logger.debug("ignoring unknown sort direction %r", raw_direction)

        return OrderResult(query, OrderOutcome.APPLIED, field=field, direction=direction)

    def compile(self, query: str, order: Any) -> str:
        return self.resolve(query, order).query
