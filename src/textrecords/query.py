"""Find/update/remove over an ordered list of records.

All operations walk the list in order and stop after ``limit`` matches;
``limit == 0`` means every match. Field validation happens in the store before
any of these run.
"""

from __future__ import annotations

import dataclasses
from collections.abc import Callable
from typing import Any

Predicate = Callable[[Any], bool]

UNBOUNDED = 0


def check_limit(limit: int) -> int:
    if isinstance(limit, bool) or not isinstance(limit, int):
        raise TypeError(f"limit must be an int, got {type(limit).__name__}")
    if limit < 0:
        raise ValueError(f"limit must be >= 0, got {limit}")
    return limit


def field_equals(name: str, value: Any) -> Predicate:
    """Predicate matching records whose ``name`` attribute equals ``value``."""

    def predicate(record: Any) -> bool:
        return getattr(record, name) == value

    return predicate


def select(records: list, predicate: Predicate, limit: int = 1) -> list:
    """Return the first ``limit`` matching records, in order."""
    found = []
    for record in records:
        if limit and len(found) >= limit:
            break
        if predicate(record):
            found.append(record)
    return found


def replace_matching(records: list, predicate: Predicate, changes: dict[str, Any], limit: int = 1) -> int:
    """Replace matching records in place with updated copies. Returns the count.

    Stored records are swapped for new instances, so records handed out by an
    earlier query keep their old values.
    """
    updated = 0
    for i, record in enumerate(records):
        if limit and updated >= limit:
            break
        if predicate(record):
            records[i] = dataclasses.replace(record, **changes)
            updated += 1
    return updated


def remove_matching(records: list, predicate: Predicate, limit: int = 1) -> int:
    """Delete matching records, keeping the order of the rest. Returns the count."""
    kept = []
    removed = 0
    for record in records:
        if (not limit or removed < limit) and predicate(record):
            removed += 1
            continue
        kept.append(record)
    records[:] = kept
    return removed
