"""Quadratic remove/insert versions of the positional operations.

These are the straightforward index-shifting loops: each `pop`/`insert`
is O(n) inside an O(n) loop. They only work on Python lists and are kept as
reference results for the partition-based operations.

Note that `naive_bring_forward` and `naive_send_backward` stop as soon as the
first (last) selected element sits at the edge of the list, while the
partition-based versions skip such elements and keep going.
"""

from __future__ import annotations

from typing import Any, Callable, List

Predicate = Callable[[Any], bool]


def naive_bring_to_front(a: List[Any], predicate: Predicate) -> None:
    i = 0
    j = 0
    while i < len(a):
        if predicate(a[i]):
            a.insert(j, a.pop(i))
            j += 1
        i += 1


def naive_send_to_back(a: List[Any], predicate: Predicate) -> None:
    i = 0
    j = len(a)
    while i < j:
        if predicate(a[i]):
            a.append(a.pop(i))
            j -= 1
        else:
            i += 1


def naive_send_backward(a: List[Any], predicate: Predicate) -> None:
    i = len(a) - 1
    while i >= 0:
        if predicate(a[i]):
            insertion_point = i + 1
            if insertion_point == len(a):
                return
            j = i
            while j >= 0:
                if predicate(a[j]):
                    a.insert(insertion_point, a.pop(j))
                    insertion_point -= 1
                j -= 1
            return
        i -= 1


def naive_bring_forward(a: List[Any], predicate: Predicate) -> None:
    n = len(a)
    i = 0
    while i < n:
        if predicate(a[i]):
            if i == 0:
                return
            insertion_point = i - 1
            j = i
            while j < n:
                if predicate(a[j]):
                    a.insert(insertion_point, a.pop(j))
                    insertion_point += 1
                j += 1
            return
        i += 1


def naive_gather(a: List[Any], target: int, predicate: Predicate) -> None:
    if target < 0 or target > len(a):
        raise IndexError(f"target {target} out of range [0, {len(a)}]")

    to_insert: List[Any] = []
    insertion_point = target
    i = 0

    # Pull selected elements out of the part before the target
    while i < insertion_point:
        if predicate(a[i]):
            to_insert.append(a.pop(i))
            insertion_point -= 1
        else:
            i += 1

    # ... and out of the rest
    while i < len(a):
        if predicate(a[i]):
            to_insert.append(a.pop(i))
        else:
            i += 1

    a[insertion_point:insertion_point] = to_insert


def naive_delete(a: List[Any], predicate: Predicate) -> None:
    # Only advance when nothing was removed, otherwise adjacent matches get skipped.
    i = 0
    while i < len(a):
        if predicate(a[i]):
            a.pop(i)
        else:
            i += 1
