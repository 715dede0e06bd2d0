"""Shared fixtures: tagged elements and collection factories."""

import random
from dataclasses import dataclass
from typing import List

import pytest

from reorder.sequences import ArrayCollection, LinkedCollection


@dataclass(frozen=True)
class Item:
    tag: int
    selected: bool = False

    def __str__(self):
        return f"{self.tag}*" if self.selected else str(self.tag)


def is_sel(item: Item) -> bool:
    return item.selected


def items_from_marks(marks: str) -> List[Item]:
    """'..**.*' -> items tagged 0..n-1, selected where '*'."""
    return [Item(i, m == "*") for i, m in enumerate(marks)]


def random_items(rng: random.Random, n: int, p: float = 0.4) -> List[Item]:
    return [Item(i, rng.random() < p) for i in range(n)]


def letters(marked: str) -> List[Item]:
    """'ABC*D' style: a trailing '*' marks the preceding letter as selected."""
    out = []
    for ch in marked:
        if ch == "*":
            out[-1] = Item(out[-1].tag, True)
        else:
            out.append(Item(ord(ch) - ord("A"), False))
    return out


def tags(items) -> List[int]:
    return [x.tag for x in items]


@pytest.fixture(params=["array", "linked"])
def make_collection(request):
    """Factory building an ArrayCollection or a LinkedCollection from a list."""

    def make(values):
        if request.param == "array":
            return ArrayCollection(list(values))
        return LinkedCollection(values)

    make.kind = request.param
    return make


@pytest.fixture
def rng():
    return random.Random(20240611)
