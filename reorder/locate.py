"""Read-only scans that find where a positional operation has to start."""

from __future__ import annotations

from typing import Any, Callable, Optional

from .sequences import as_collection

Predicate = Callable[[Any], bool]


def first_index(c: Any, predicate: Predicate) -> Optional[Any]:
    c = as_collection(c)
    for p in c.positions():
        if predicate(c[p]):
            return p
    return None


def index_before_first(c: Any, predicate: Predicate) -> Optional[Any]:
    """Returns the position before the first one whose element satisfies `predicate`.

    Elements already at the start are skipped: the result is the first
    position whose successor exists and satisfies `predicate`.

    - Complexity: O(n) where n is the length of the collection.
    """
    c = as_collection(c)
    end = c.end
    for p in c.positions():
        successor = c.index_after(p)
        if successor != end and predicate(c[successor]):
            return p
    return None


def index_after_last(c: Any, predicate: Predicate) -> Optional[Any]:
    """Returns the position after the last one whose element satisfies `predicate`.

    Scans backward for the last position whose predecessor exists, is not the
    start position, and satisfies `predicate`.

    - Complexity: O(n) where n is the length of the collection.
    """
    c = as_collection(c)
    start = c.start
    for p in c.positions_reversed():
        if p == start:
            break
        predecessor = c.index_before(p)
        if predecessor != start and predicate(c[predecessor]):
            return p
    return None
