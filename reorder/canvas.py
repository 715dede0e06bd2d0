"""Sample shapes for demos and scenarios.

The algorithms only see `is_selected` through a predicate; the glyphs are
here so before/after states are easy to read on a terminal.
"""

from __future__ import annotations

from dataclasses import dataclass, field
from enum import Enum
from typing import Iterable, List, Sequence


class Form(Enum):
    STAR = "*️⃣"
    POUND = "#️⃣"
    DOUBLE_ARROW = "⏩"
    ARROW_RIGHT = "➡️"
    TRIANGLE1 = "🔼"
    TRIANGLE2 = "▶️"
    TRIANGLE_OVER_LINE = "⏏️"
    SQUARE = "⏹"
    CIRCLE = "⏺"
    REVOLVING_ARROWS = "🔄"


@dataclass
class Shape:
    glyph: str
    is_selected: bool = False

    @classmethod
    def from_form(cls, form: Form, is_selected: bool = False) -> "Shape":
        return cls(glyph=form.value, is_selected=is_selected)

    def __str__(self) -> str:
        if not self.is_selected:
            return self.glyph
        return f"({self.glyph})"


@dataclass
class Canvas:
    shapes: List[Shape] = field(default_factory=list)

    def __str__(self) -> str:
        return "[" + ", ".join(str(s) for s in self.shapes) + "]"


def is_selected(shape: Shape) -> bool:
    return shape.is_selected


def sample_canvas(selected: Iterable[int] = ()) -> Canvas:
    """The ten-glyph demo canvas with shapes at `selected` marked."""
    marked = set(selected)
    return Canvas(shapes=[Shape.from_form(form, idx in marked) for idx, form in enumerate(Form)])


def canvas_from_labels(labels: Sequence[object], selected: Iterable[int] = ()) -> Canvas:
    marked = set(selected)
    return Canvas(shapes=[Shape(glyph=str(label), is_selected=idx in marked) for idx, label in enumerate(labels)])


def labels(shapes: Iterable[Shape]) -> List[str]:
    return [s.glyph for s in shapes]
