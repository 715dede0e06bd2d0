"""Result validators for the reordering operations.

Each validator rebuilds the expected arrangement directly from the input
list with plain list comprehensions (no partitioning, no rotation) and
compares it with what an operation produced.
"""

from __future__ import annotations

from collections import Counter
from typing import Any, Callable, Dict, List, Optional

Predicate = Callable[[Any], bool]


class ValidationError(Exception):
    pass


def _split(items: List[Any], predicate: Predicate):
    return [x for x in items if not predicate(x)], [x for x in items if predicate(x)]


def _counter(items: List[Any]) -> Counter:
    # Elements need not be hashable; count their reprs instead.
    return Counter(repr(x) for x in items)


def check_same_multiset(before: List[Any], after: List[Any]) -> None:
    if len(before) != len(after):
        raise ValidationError(f"length changed: {len(before)} -> {len(after)}")
    if _counter(before) != _counter(after):
        raise ValidationError(
            "elements changed, not only their order.\n"
            f"before={before}\nafter ={after}"
        )


def check_partitioned(items: List[Any], boundary: int, is_suffix: Predicate) -> None:
    for i, x in enumerate(items):
        if (i >= boundary) != bool(is_suffix(x)):
            raise ValidationError(f"element {x!r} at {i} is on the wrong side of boundary {boundary}")


def check_stable(before: List[Any], after: List[Any], is_suffix: Predicate) -> None:
    check_same_multiset(before, after)
    prefix, suffix = _split(before, is_suffix)
    if after != prefix + suffix:
        raise ValidationError(
            "not a stable partition.\n"
            f"expected={prefix + suffix}\ngot     ={after}"
        )


def check_half_stable(before: List[Any], after: List[Any], boundary: int, is_suffix: Predicate) -> None:
    """Partitioned at `boundary`, and the non-suffix class kept its order."""
    check_same_multiset(before, after)
    check_partitioned(after, boundary, is_suffix)
    prefix, _ = _split(before, is_suffix)
    if after[:boundary] != prefix:
        raise ValidationError(
            "prefix lost its relative order.\n"
            f"expected={prefix}\ngot     ={after[:boundary]}"
        )


def check_rotation(before: List[Any], after: List[Any], lower: int, middle: int, upper: int) -> None:
    expected = before[:lower] + before[middle:upper] + before[lower:middle] + before[upper:]
    if after != expected:
        raise ValidationError(f"bad rotation.\nexpected={expected}\ngot     ={after}")


# ---------------------------------------------------------------------------
# Expected arrangements per operation
# ---------------------------------------------------------------------------


def _index_before_first(items: List[Any], predicate: Predicate) -> Optional[int]:
    for i in range(len(items) - 1):
        if predicate(items[i + 1]):
            return i
    return None


def _index_after_last(items: List[Any], predicate: Predicate) -> Optional[int]:
    for i in range(len(items) - 1, 0, -1):
        if i - 1 != 0 and predicate(items[i - 1]):
            return i
    return None


def expect_send_to_back(items: List[Any], predicate: Predicate, target: Optional[int] = None) -> List[Any]:
    rest, selected = _split(items, predicate)
    return rest + selected


def expect_bring_to_front(items: List[Any], predicate: Predicate, target: Optional[int] = None) -> List[Any]:
    rest, selected = _split(items, predicate)
    return selected + rest


def expect_bring_forward(items: List[Any], predicate: Predicate, target: Optional[int] = None) -> List[Any]:
    p = _index_before_first(items, predicate)
    if p is None:
        return list(items)
    rest, selected = _split(items[p:], predicate)
    return items[:p] + selected + rest


def expect_send_backward(items: List[Any], predicate: Predicate, target: Optional[int] = None) -> List[Any]:
    s = _index_after_last(items, predicate)
    if s is None:
        return list(items)
    rest, selected = _split(items[: s + 1], predicate)
    return rest + selected + items[s + 1 :]


def expect_gather(items: List[Any], predicate: Predicate, target: Optional[int] = None) -> List[Any]:
    if target is None or target < 0 or target > len(items):
        raise ValidationError(f"gather needs a target in [0, {len(items)}], got {target!r}")
    left_rest, left_selected = _split(items[:target], predicate)
    right_rest, right_selected = _split(items[target:], predicate)
    return left_rest + left_selected + right_selected + right_rest


def expect_remove(items: List[Any], predicate: Predicate, target: Optional[int] = None) -> List[Any]:
    rest, _ = _split(items, predicate)
    return rest


VALIDATORS: Dict[str, Callable[..., List[Any]]] = {
    "send-to-back": expect_send_to_back,
    "bring-to-front": expect_bring_to_front,
    "bring-forward": expect_bring_forward,
    "send-backward": expect_send_backward,
    "gather": expect_gather,
    "remove-selected": expect_remove,
}


def validate_operation(
    name: str,
    before: List[Any],
    after: List[Any],
    predicate: Predicate,
    target: Optional[int] = None,
) -> Dict[str, Any]:
    """Compare `after` with the expected result of operation `name` on `before`."""
    expect = VALIDATORS.get(name)
    if expect is None:
        raise ValidationError(f"Unknown operation: {name!r}. Known: {', '.join(sorted(VALIDATORS))}")

    expected = expect(before, predicate, target)
    if name != "remove-selected":
        check_same_multiset(before, after)
    if after != expected:
        raise ValidationError(
            f"{name}: result does not match the expected arrangement.\n"
            f"expected={expected}\ngot     ={after}"
        )

    moved = sum(1 for x, y in zip(before, after) if x is not y and x != y)
    return {
        "ok": True,
        "operation": name,
        "moved": moved,
        "final": [str(x) for x in after],
    }
