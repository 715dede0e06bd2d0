"""Positional operations on selected elements.

Every operation is one or two stable partitions over a subrange picked by
the boundary locators, so non-moved elements always keep their order and no
position is invalidated while the operation runs.

All of them accept a `Collection` or a plain list, mutate it in place and
return a boundary position.
"""

from __future__ import annotations

from typing import Any, Callable, Optional

from .locate import index_after_last, index_before_first
from .partition import stable_partition
from .sequences import as_collection

Predicate = Callable[[Any], bool]


def _negate(predicate: Predicate) -> Predicate:
    return lambda e: not predicate(e)


def send_to_back(c: Any, predicate: Predicate) -> Any:
    """Moves the elements satisfying `predicate` to the back, maintaining their relative order.

    Returns the position of the first moved element.

    - Complexity: O(n log n) where n is the length of the collection.
    """
    return stable_partition(as_collection(c), predicate)


def bring_to_front(c: Any, predicate: Predicate) -> Any:
    """Moves the elements satisfying `predicate` to the front, maintaining their relative order.

    Returns the position of the first element that was not moved.

    - Complexity: O(n log n) where n is the length of the collection.
    """
    return stable_partition(as_collection(c), _negate(predicate))


def bring_forward(c: Any, predicate: Predicate) -> Optional[Any]:
    """Gathers the elements satisfying `predicate` at the position preceding
    the first element satisfying `predicate`.

    Returns None when there is nothing to move.
    """
    c = as_collection(c)
    predecessor = index_before_first(c, predicate)
    if predecessor is None:
        return None
    return stable_partition(c.slice(predecessor, c.end), _negate(predicate))


def send_backward(c: Any, predicate: Predicate) -> Optional[Any]:
    """Gathers the elements satisfying `predicate` from the position following
    the last element satisfying `predicate`.

    Returns None when there is nothing to move.
    """
    c = as_collection(c)
    successor = index_after_last(c, predicate)
    if successor is None:
        return None
    return stable_partition(c.slice(c.start, c.index_after(successor)), predicate)


def gather(c: Any, target: Any, predicate: Predicate) -> Any:
    """Gathers elements satisfying `predicate` at `target`, preserving their relative order.

    Selected elements before `target` end up just before it, selected
    elements from `target` on end up starting at it. Returns the position of
    the first gathered element.

    Raises IndexError when `target` is not in `[start, end]`.

    - Complexity: O(n log n) where n is the number of elements.
    """
    c = as_collection(c)
    c.check_position(target)
    first = stable_partition(c.slice(c.start, target), predicate)
    stable_partition(c.slice(target, c.end), _negate(predicate))
    return first
