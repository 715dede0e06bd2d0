#!/usr/bin/env python3
# -*- coding: utf-8 -*-
"""validate_reorder_output.py

Validates a reordering result against the expected arrangement.

Either runs the registered operation itself on --vector / --selected, or
checks a result given as --solution-json '{"final": [...]}'. Prints a JSON
report; exits with 2 when validation fails.

    python validate_reorder_output.py --operation send-to-back \
        --vector '["A","B","C","D","E","F","G","H"]' --selected '[2,3,6,7]'
"""

import argparse
import json
import sys
from typing import Any, List, Optional

from operation_registry import get_operation, list_operations
from reorder.canvas import canvas_from_labels, is_selected, labels
from reorder.sequences import LinkedCollection
from reorder.verify import ValidationError, validate_operation


def parse_vector(s: str) -> List[Any]:
    try:
        v = json.loads(s)
    except json.JSONDecodeError as e:
        raise ValidationError(f"Failed to parse vector JSON: {e}")
    if not isinstance(v, list):
        raise ValidationError("Vector must be a JSON list")
    return v


def parse_selected(s: str) -> List[int]:
    v = parse_vector(s)
    if not all(isinstance(x, int) and not isinstance(x, bool) for x in v):
        raise ValidationError("Selected must be a JSON list of integers")
    return v


def parse_solution_json(s: str) -> List[str]:
    try:
        obj = json.loads(s)
    except json.JSONDecodeError as e:
        raise ValidationError(f"Failed to parse solution JSON: {e}")
    if not isinstance(obj, dict):
        raise ValidationError("Solution must be a JSON object with key 'final'")
    final = obj.get("final")
    if not isinstance(final, list):
        raise ValidationError("Solution field 'final' must be a list")
    return [str(x) for x in final]


def run_and_validate(
    operation: str,
    vector: List[Any],
    selected: List[int],
    target: Optional[int] = None,
    linked: bool = False,
    solution: Optional[List[str]] = None,
) -> dict:
    spec = get_operation(operation)
    if spec is None:
        raise ValidationError(f"Unknown operation: {operation!r}")
    if spec.needs_target and target is None:
        raise ValidationError(f"{spec.key} needs --target")

    before = canvas_from_labels(vector, selected).shapes
    if solution is None:
        shapes = [s for s in before]
        if linked:
            c = LinkedCollection(shapes)
            spec.run(c, is_selected, None if target is None else c.index_offset(c.start, target))
            shapes = list(c)
        else:
            spec.run(shapes, is_selected, target)
        after = shapes
    else:
        by_label = {s.glyph: s for s in before}
        missing = [x for x in solution if x not in by_label]
        if missing:
            raise ValidationError(f"Solution mentions unknown elements: {missing}")
        after = [by_label[x] for x in solution]

    report = validate_operation(spec.key, before, after, is_selected, target)
    report["final"] = labels(after)
    return report


def main(argv: Optional[List[str]] = None) -> None:
    ap = argparse.ArgumentParser(description="Validate a reordering result for the selected operation.")
    ap.add_argument("--operation", required=True, help="Operation key, e.g. send-to-back")
    ap.add_argument("--vector", default='["A","B","C","D","E","F","G","H"]', help="Input elements as JSON list")
    ap.add_argument("--selected", default="[]", help="Selected indices as JSON list")
    ap.add_argument("--target", type=int, default=None, help="Target index for gather")
    ap.add_argument("--linked", action="store_true", help="Run over a linked list instead of a Python list")
    ap.add_argument("--solution-json", default=None, help='JSON object string with key "final"')
    args = ap.parse_args(argv)

    if get_operation(args.operation) is None:
        raise SystemExit(
            "Unknown operation. Supported:\n"
            + "\n".join(sorted(spec.key for spec in list_operations()))
        )

    try:
        vector = parse_vector(args.vector)
        selected = parse_selected(args.selected)
        solution = parse_solution_json(args.solution_json) if args.solution_json else None
        report = run_and_validate(args.operation, vector, selected, args.target, args.linked, solution)
        print(json.dumps(report, ensure_ascii=False, indent=2))
    except (ValidationError, IndexError, ValueError) as e:
        err = {"ok": False, "error": str(e)}
        print(json.dumps(err, ensure_ascii=False, indent=2))
        sys.exit(2)


if __name__ == "__main__":
    main()
