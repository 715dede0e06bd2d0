"""Partition primitives.

Both partitions move the elements for which `is_suffix` holds into a
contiguous suffix and return the position where that suffix starts.

- `half_stable_partition`: one pass, O(n). Elements outside the suffix keep
  their relative order; the suffix itself may come out shuffled.
- `stable_partition`: divide and conquer over `rotate`, O(n log n). Both
  classes keep their relative order.
"""

from __future__ import annotations

from dataclasses import dataclass
from typing import Any, Callable, List, Optional, Tuple

from .config import load_settings
from .rotate import rotate
from .sequences import Collection, as_collection

Predicate = Callable[[Any], bool]


@dataclass(frozen=True)
class PartitionStep:
    """One scan step of the half-stable partition."""

    step: int
    scan: Any  # position being inspected (j)
    boundary: Any  # current start of the suffix (i), before the swap
    swapped: bool
    snapshot: List[Any]

    def describe(self) -> str:
        if self.swapped:
            return f"step={self.step}, j={self.scan}, swapped for {self.boundary}: {self.snapshot}"
        return f"step={self.step}, j={self.scan}, no swap: {self.snapshot}"


def half_stable_partition(
    c: Any,
    is_suffix: Predicate,
    trace: Optional[Callable[[PartitionStep], None]] = None,
) -> Any:
    """Move elements satisfying `is_suffix` to the back in a single pass.

    `trace`, when given, receives a PartitionStep for every scanned position.

    - Complexity: O(n) where n is the number of elements.
    """
    c = as_collection(c)
    end = c.end

    i = c.start
    while i != end and not is_suffix(c[i]):
        i = c.index_after(i)
    if i == end:
        return end

    step = 0
    j = c.index_after(i)
    while j != end:
        if not is_suffix(c[j]):
            c.swap_at(i, j)
            if trace is not None:
                trace(PartitionStep(step, j, i, True, c.to_list()))
            i = c.index_after(i)
        elif trace is not None:
            trace(PartitionStep(step, j, i, False, c.to_list()))
        j = c.index_after(j)
        step += 1
    return i


def _stable_partition(c: Collection, n: int, is_suffix: Predicate) -> Any:
    if n == 0:
        return c.start
    if n == 1:
        return c.start if is_suffix(c[c.start]) else c.end

    h = n // 2
    i = c.index_offset(c.start, h)
    j = _stable_partition(c.slice(c.start, i), h, is_suffix)
    k = _stable_partition(c.slice(i, c.end), n - h, is_suffix)
    return rotate(c.slice(j, k), i)


def stable_partition_iterative(c: Any, is_suffix: Predicate, count: Optional[int] = None) -> Any:
    """Same result as `stable_partition`, driven by an explicit work stack.

    Each split pushes a merge task under its two halves; halves leave their
    boundaries on `results`, and the merge pops them to rotate `[j, k)`.
    """
    c = as_collection(c)
    n = c.count if count is None else count

    # ("split", lower, upper, n) | ("merge", middle, None, None)
    tasks: List[Tuple[str, Any, Any, Any]] = [("split", c.start, c.end, n)]
    results: List[Any] = []
    while tasks:
        kind, a, b, size = tasks.pop()
        if kind == "merge":
            k = results.pop()
            j = results.pop()
            results.append(rotate(c.slice(j, k), a))
            continue

        lower, upper = a, b
        if size == 0:
            results.append(lower)
        elif size == 1:
            results.append(lower if is_suffix(c[lower]) else upper)
        else:
            h = size // 2
            middle = c.index_offset(lower, h)
            tasks.append(("merge", middle, None, None))
            tasks.append(("split", middle, upper, size - h))
            tasks.append(("split", lower, middle, h))

    return results.pop()


def stable_partition(
    c: Any,
    is_suffix: Predicate,
    count: Optional[int] = None,
    iterative_threshold: Optional[int] = None,
) -> Any:
    """Move elements satisfying `is_suffix` to the back, keeping both classes in order.

    Ranges longer than `iterative_threshold` (default from the environment,
    see `reorder.config`) use the explicit-stack variant.

    - Complexity: O(n log n) where n is the number of elements.
    """
    c = as_collection(c)
    n = c.count if count is None else count
    if iterative_threshold is None:
        iterative_threshold = load_settings().iterative_threshold
    if iterative_threshold and n > iterative_threshold:
        return stable_partition_iterative(c, is_suffix, n)
    return _stable_partition(c, n, is_suffix)


def remove_all(c: Any, should_remove: Predicate) -> int:
    """Remove every element satisfying `should_remove`; returns how many went.

    The remaining elements keep their order. Needs a collection that can
    shrink (a list, ArrayCollection or LinkedCollection).
    """
    c = as_collection(c)
    if not c.can_truncate:
        raise TypeError(f"{type(c).__name__} does not support removing elements")
    before = c.count
    suffix_start = half_stable_partition(c, should_remove)
    c.truncate(suffix_start)
    return before - c.count
