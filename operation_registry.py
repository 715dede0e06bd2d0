"""Operation registry.

Each reordering operation is registered once under a canonical key
(case-insensitive) with a few aliases, the function that runs it over a
collection, its quadratic reference version, and a smoke selection used by
`reorder_cli.py selftest`.
"""

from __future__ import annotations

from dataclasses import dataclass, field
from pathlib import Path
from typing import Any, Callable, Dict, List, Optional

from reorder import naive, positional
from reorder.partition import remove_all

ROOT = Path(__file__).resolve().parent

# (collection, predicate, target) -> boundary
Runner = Callable[[Any, Callable[[Any], bool], Optional[Any]], Any]
# (list, predicate, target) -> None
NaiveRunner = Callable[[List[Any], Callable[[Any], bool], Optional[int]], None]


@dataclass(frozen=True)
class OperationSpec:
    # Canonical key, also the key in reorder.verify.VALIDATORS
    key: str

    description: str

    run: Runner

    # Quadratic remove/insert version over a plain list
    naive: Optional[NaiveRunner] = None

    # Whether the operation takes a target position
    needs_target: bool = False

    aliases: List[str] = field(default_factory=list)

    # Selection and target for smoke-validation on the sample canvas
    smoke_selected: List[int] = field(default_factory=lambda: [2, 3, 6, 7])
    smoke_target: Optional[int] = None


def _norm(s: str) -> str:
    return s.strip().lower().replace("_", "-")


_OPERATIONS: List[OperationSpec] = [
    OperationSpec(
        key="send-to-back",
        description="Move selected elements to the back, keeping order",
        run=lambda c, pred, target: positional.send_to_back(c, pred),
        naive=lambda a, pred, target: naive.naive_send_to_back(a, pred),
        aliases=["sendToBack", "back"],
    ),
    OperationSpec(
        key="bring-to-front",
        description="Move selected elements to the front, keeping order",
        run=lambda c, pred, target: positional.bring_to_front(c, pred),
        naive=lambda a, pred, target: naive.naive_bring_to_front(a, pred),
        aliases=["bringToFront", "front"],
    ),
    OperationSpec(
        key="bring-forward",
        description="Gather selected elements just before the first selected one",
        run=lambda c, pred, target: positional.bring_forward(c, pred),
        naive=lambda a, pred, target: naive.naive_bring_forward(a, pred),
        aliases=["bringForward", "forward"],
    ),
    OperationSpec(
        key="send-backward",
        description="Gather selected elements just after the last selected one",
        run=lambda c, pred, target: positional.send_backward(c, pred),
        naive=lambda a, pred, target: naive.naive_send_backward(a, pred),
        aliases=["sendBackward", "backward"],
        smoke_selected=[1, 3, 4],
    ),
    OperationSpec(
        key="gather",
        description="Gather selected elements at a target position",
        run=lambda c, pred, target: positional.gather(c, target, pred),
        naive=lambda a, pred, target: naive.naive_gather(a, target, pred),
        needs_target=True,
        aliases=["gatherSelected", "gather-at"],
        smoke_selected=[2, 3, 6, 7],
        smoke_target=5,
    ),
    OperationSpec(
        key="remove-selected",
        description="Delete selected elements, keeping the order of the rest",
        run=lambda c, pred, target: remove_all(c, pred),
        naive=lambda a, pred, target: naive.naive_delete(a, pred),
        aliases=["deleteSelection", "remove-all", "delete"],
        smoke_selected=[7, 8],
    ),
]


# Build lookup with aliases
_REGISTRY: Dict[str, OperationSpec] = {}
for spec in _OPERATIONS:
    _REGISTRY[_norm(spec.key)] = spec
    for alias in spec.aliases:
        _REGISTRY[_norm(alias)] = spec


def get_operation(key_or_alias: str) -> Optional[OperationSpec]:
    return _REGISTRY.get(_norm(key_or_alias))


def list_operations() -> List[OperationSpec]:
    return list(_OPERATIONS)
