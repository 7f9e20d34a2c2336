"""WHERE clause compiler

Turns a structured filter into a parameterized WHERE fragment.

- membership: `<column> IN (?,?,...)`, every value bound in the given order
- boolean:    `<column> = true|false`, inlined, never bound
- equality:   `<column> = ?`, one bound value

Fragments are emitted in the order the field descriptors are declared, so
the argument list always lines up with the placeholders left to right.
"""

from __future__ import annotations

from collections.abc import Sequence
from dataclasses import dataclass
from enum import Enum
from typing import Any


class FilterKind(str, Enum):
    MEMBERSHIP = "membership"
    BOOLEAN = "boolean"
    EQUALITY = "equality"


@dataclass(frozen=True)
class FilterField:
    """Maps one filter attribute onto one persisted column"""

    attr: str
    column: str
    kind: FilterKind


def _is_absent(value: Any) -> bool:
    if value is None:
        return True
    if isinstance(value, (list, tuple, set, frozenset)):
        return len(value) == 0
    return False


def _compile_field(field: FilterField, value: Any) -> tuple[str, list[Any]]:
    if field.kind == FilterKind.MEMBERSHIP:
        values = list(value)
        placeholders = ",".join("?" * len(values))
        return f"{field.column} IN ({placeholders})", values
    if field.kind == FilterKind.BOOLEAN:
        return f"{field.column} = {'true' if value else 'false'}", []
    return f"{field.column} = ?", [value]


def compile_filter(
    query: str,
    filter_: Any,
    fields: Sequence[FilterField],
) -> tuple[str, list[Any]]:
    """Append a WHERE clause for every set field of filter_

    Args:
        query: base SELECT without trailing clauses
        filter_: filter object (attributes named by fields) or None
        fields: descriptors in emission order

    Returns:
        (query, args). query is returned untouched when nothing is set.
    """
    clauses: list[str] = []
    args: list[Any] = []

    if filter_ is None:
        return query, args

    for field in fields:
        value = getattr(filter_, field.attr, None)
        if _is_absent(value):
            continue
        clause, bound = _compile_field(field, value)
        clauses.append(clause)
        args.extend(bound)

    if clauses:
        query += " WHERE " + " AND ".join(clauses)

    return query, args
