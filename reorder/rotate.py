"""In-place rotation built only from swaps.

Rotation is the merge step of the stable partition: after both halves of a
range are partitioned, the two blocks in the middle trade places.
"""

from __future__ import annotations

from typing import Any, Tuple

from .sequences import Collection, as_collection


def swap_nonempty_subrange_prefixes(
    c: Collection, lhs: Tuple[Any, Any], rhs: Tuple[Any, Any]
) -> Tuple[Any, Any]:
    """Swap `lhs` and `rhs` element by element until one of them runs out.

    `lhs` must end at or before `rhs` begins and both must be non-empty.
    Returns the positions reached in each range; at least one of them equals
    its range's upper bound.
    """
    p, lhs_upper = lhs
    q, rhs_upper = rhs
    if p == lhs_upper or q == rhs_upper:
        raise ValueError("both subranges must be non-empty")

    while True:
        c.swap_at(p, q)
        p = c.index_after(p)
        q = c.index_after(q)
        if p == lhs_upper or q == rhs_upper:
            break
    return p, q


def rotate(c: Any, middle: Any) -> Any:
    """Rotate `c` so that the element at `middle` becomes the first one.

    `[start, middle)` ends up after `[middle, end)`. Returns the new position
    of the element that was first, i.e. where the old prefix now begins.
    Rotating by `start` returns `end`, rotating by `end` returns `start`; both
    leave the collection untouched.

    O(n) swaps, O(1) extra space, whatever the rotation amount.
    """
    c = as_collection(c)
    s = c.start
    m = middle
    e = c.end
    if s == m:
        return e
    if m == e:
        return s

    ret = e
    while True:
        s1, m1 = swap_nonempty_subrange_prefixes(c, (s, m), (m, e))
        if m1 == e:
            # Right side consumed: the old prefix now starts at s1.
            if ret == e:
                ret = s1
            if s1 == m:
                break
        s = s1
        if s == m:
            m = m1
    return ret
