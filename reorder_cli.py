#!/usr/bin/env python3
"""Reorder CLI

Runs the reordering operations on the sample canvas, on YAML scenario files
and on CSV batches, and validates their results.

Examples
--------

# List supported operations
python reorder_cli.py list-operations

# Send shapes 2,3,6,7 to the back of the sample canvas
python reorder_cli.py run --operation send-to-back --selected 2,3,6,7

# Same, over a linked list, compared with the quadratic version
python reorder_cli.py run --operation send-to-back --selected 2,3,6,7 --linked --naive

# Gather at index 2
python reorder_cli.py run --operation gather --selected 2,3,6,7 --target 2

# Run and check every scenario in a YAML file
python reorder_cli.py scenarios --file scenarios/default.yaml

# Reorder every row of a CSV
python reorder_cli.py batch --operation bring-to-front --input rows.csv --output out.csv

"""

from __future__ import annotations

import argparse
import csv
import json
import subprocess
import sys
from pathlib import Path
from typing import Any, List, Optional, Sequence

from operation_registry import OperationSpec, get_operation, list_operations
from reorder.batch import reorder_csv
from reorder.canvas import Canvas, canvas_from_labels, is_selected, labels, sample_canvas
from reorder.config import ConfigError, Scenario, load_scenarios, load_settings
from reorder.partition import PartitionStep, half_stable_partition
from reorder.sequences import LinkedCollection


ROOT = Path(__file__).resolve().parent
PYTHON = sys.executable
VALIDATOR = ROOT / "validate_reorder_output.py"


# ---------------------------------------------------------------------------
# Helpers
# ---------------------------------------------------------------------------


def _parse_int_list(s: Optional[str]) -> List[int]:
    """Parse a list of ints from either JSON '[1,2,3]' or CSV '1,2,3'."""
    s = (s or "").strip()
    if not s:
        return []

    if s[0] in "[(":
        try:
            obj = json.loads(s)
            if isinstance(obj, list):
                return [int(x) for x in obj]
        except json.JSONDecodeError:
            # fall back to CSV parsing
            pass

    parts = [p.strip() for p in s.strip("[]()").split(",") if p.strip() != ""]
    return [int(p) for p in parts]


def _require_operation(name: str) -> OperationSpec:
    spec = get_operation(name)
    if spec is None:
        raise SystemExit(
            f"Unknown operation '{name}'. Run `python reorder_cli.py list-operations`."
        )
    return spec


def _apply(spec: OperationSpec, shapes: List[Any], target: Optional[int], linked: bool) -> Any:
    """Run `spec` on `shapes` in place; returns the boundary as an index."""
    if spec.needs_target and target is None:
        raise ValueError(f"{spec.key} needs a target")

    if not linked:
        return spec.run(shapes, is_selected, target)

    c = LinkedCollection(shapes)
    pos = None
    if target is not None:
        if target < 0:
            raise IndexError(f"target {target} is out of range")
        pos = c.index_offset(c.start, target)
    boundary = spec.run(c, is_selected, pos)
    shapes[:] = list(c)
    if boundary is None or isinstance(boundary, int):
        return boundary
    return c.distance(c.start, boundary)


def _print_step(step: PartitionStep) -> None:
    print(f"[trace] {step.describe()}")


def _validate(spec: OperationSpec, vector: Sequence[Any], selected: Sequence[int], target: Optional[int]) -> None:
    print(f"[validate] {spec.key} ...")
    cmd = [
        PYTHON,
        str(VALIDATOR),
        "--operation",
        spec.key,
        "--vector",
        json.dumps(list(vector)),
        "--selected",
        json.dumps(list(selected)),
    ]
    if target is not None:
        cmd.extend(["--target", str(target)])
    subprocess.check_call(cmd, cwd=str(ROOT))


# ---------------------------------------------------------------------------
# CLI
# ---------------------------------------------------------------------------


def cmd_list_operations(_: argparse.Namespace) -> None:
    print("Available operations:")
    for spec in list_operations():
        target = " (needs --target)" if spec.needs_target else ""
        print(f"- {spec.key:16s}  {spec.description}{target}")
        if spec.aliases:
            print(f"  {'':16s}  aliases: {', '.join(spec.aliases)}")


def cmd_run(args: argparse.Namespace) -> None:
    spec = _require_operation(args.operation)
    try:
        settings = load_settings()
    except ConfigError as e:
        raise SystemExit(f"[!] {e}")
    selected = _parse_int_list(args.selected) if args.selected is not None else list(spec.smoke_selected)

    canvas = sample_canvas(selected)
    print(f"[run] {spec.key}")
    print(f"      before: {canvas}")

    if args.trace or settings.trace:
        if spec.key != "remove-selected":
            print("[!] --trace only applies to remove-selected; ignoring", file=sys.stderr)
        else:
            boundary = half_stable_partition(canvas.shapes, is_selected, trace=_print_step)
            print(f"[run] start position of the suffix partition={boundary}")
            del canvas.shapes[boundary:]
            print(f"      after : {canvas}")
            return

    if args.naive and spec.naive is None:
        raise SystemExit(f"{spec.key} has no naive version")

    naive_result = None
    try:
        boundary = _apply(spec, canvas.shapes, args.target, args.linked)
        if args.naive:
            naive_shapes = list(sample_canvas(selected).shapes)
            spec.naive(naive_shapes, is_selected, args.target)
            naive_result = Canvas(shapes=naive_shapes)
    except (IndexError, ValueError) as e:
        raise SystemExit(f"[!] {spec.key}: {e}")
    print(f"      after : {canvas}")
    print(f"      boundary: {boundary}")

    if naive_result is not None:
        print(f"      naive : {naive_result}")
        same = labels(naive_result.shapes) == labels(canvas.shapes)
        print(f"[run] naive version {'agrees' if same else 'DIFFERS'}")


def _run_scenario(sc: Scenario) -> bool:
    spec = get_operation(sc.operation)
    if spec is None:
        print(f"[!] {sc.name}: unknown operation {sc.operation!r}", file=sys.stderr)
        return False

    shapes = canvas_from_labels(sc.items, sc.selected).shapes
    try:
        _apply(spec, shapes, sc.target, sc.linked)
    except (IndexError, ValueError) as e:
        print(f"[!] {sc.name}: {e}", file=sys.stderr)
        return False
    got = labels(shapes)
    if sc.expected is not None and got != sc.expected:
        print(f"[!] {sc.name}: expected {sc.expected}, got {got}", file=sys.stderr)
        return False

    print(f"[scenario] OK {sc.name}: {got}")
    return True


def cmd_scenarios(args: argparse.Namespace) -> None:
    path = Path(args.file) if args.file else ROOT / "scenarios" / "default.yaml"
    try:
        scenarios = load_scenarios(path)
    except (ConfigError, OSError) as e:
        raise SystemExit(f"[!] {e}")

    failed = [sc.name for sc in scenarios if not _run_scenario(sc)]
    print(f"[scenario] {len(scenarios) - len(failed)}/{len(scenarios)} passed")
    if failed:
        raise SystemExit(1)


def cmd_validate(args: argparse.Namespace) -> None:
    spec = _require_operation(args.operation)
    if args.vector is None:
        vector = labels(sample_canvas().shapes)
    else:
        try:
            vector = json.loads(args.vector)
        except json.JSONDecodeError as e:
            raise SystemExit(f"[!] --vector is not valid JSON: {e}")
        if not isinstance(vector, list):
            raise SystemExit("[!] --vector must be a JSON list")
    selected = _parse_int_list(args.selected) if args.selected is not None else list(spec.smoke_selected)
    target = args.target if args.target is not None else spec.smoke_target

    _validate(spec, vector, selected, target)


def cmd_batch(args: argparse.Namespace) -> None:
    spec = _require_operation(args.operation)

    def row_operation(shapes: List[Any], pred: Any, target: Optional[int]) -> Any:
        return _apply(spec, shapes, target, args.linked)

    print(f"[batch] {spec.key}")
    print(f"        input={args.input}")
    print(f"        output={args.output}")
    try:
        n = reorder_csv(
            input_csv=args.input,
            output_csv=args.output,
            operation=row_operation,
            operation_name=spec.key,
            joiner=args.joiner,
            max_rows=args.max_rows,
            progress=args.progress,
        )
    except (IndexError, ValueError) as e:
        raise SystemExit(f"[!] {spec.key}: {e}")
    print(f"[batch] wrote {n} rows")


def cmd_selftest(args: argparse.Namespace) -> None:
    """Offline smoke tests over every registered operation."""
    vector = labels(sample_canvas().shapes)
    for spec in list_operations():
        print(f"\n[selftest] operation={spec.key}")
        _validate(spec, vector, spec.smoke_selected, spec.smoke_target)

    tmp = Path(args.workdir) if args.workdir else ROOT / "_selftest"
    tmp.mkdir(parents=True, exist_ok=True)
    rows_csv = tmp / "rows.csv"
    out_csv = tmp / "out.csv"
    with rows_csv.open("w", newline="") as f:
        w = csv.DictWriter(f, fieldnames=["id", "vector", "selected"])
        w.writeheader()
        w.writerow({"id": "0", "vector": "A,B,C,D,E,F,G,H", "selected": "[2,3,6,7]"})
    reorder_csv(str(rows_csv), str(out_csv), lambda s, p, t: _apply(get_operation("send-to-back"), s, t, False), "send-to-back")
    print(f"[selftest] wrote {out_csv}")

    print("\n[selftest] All OK")


def build_parser() -> argparse.ArgumentParser:
    p = argparse.ArgumentParser(description="In-place reordering of selected elements")
    sub = p.add_subparsers(dest="cmd", required=True)

    sp = sub.add_parser("list-operations", help="List registered operations")
    sp.set_defaults(func=cmd_list_operations)

    sp = sub.add_parser("run", help="Run an operation on the sample canvas")
    sp.add_argument("--operation", required=True, help="Operation key or alias")
    sp.add_argument("--selected", default=None, help="Selected indices, e.g. 2,3,6,7 (default: smoke selection)")
    sp.add_argument("--target", type=int, default=None, help="Target index for gather")
    sp.add_argument("--linked", action="store_true", help="Run over a linked list")
    sp.add_argument("--naive", action="store_true", help="Also run the quadratic version and compare")
    sp.add_argument("--trace", action="store_true", help="Print half-stable partition steps (remove-selected)")
    sp.set_defaults(func=cmd_run)

    sp = sub.add_parser("scenarios", help="Run scenarios from a YAML file")
    sp.add_argument("--file", default=None, help="Scenario YAML (default: scenarios/default.yaml)")
    sp.set_defaults(func=cmd_scenarios)

    sp = sub.add_parser("validate", help="Validate an operation with validate_reorder_output.py")
    sp.add_argument("--operation", required=True, help="Operation key or alias")
    sp.add_argument("--vector", default=None, help="JSON list of elements (default: sample canvas)")
    sp.add_argument("--selected", default=None, help="Selected indices (default: smoke selection)")
    sp.add_argument("--target", type=int, default=None)
    sp.set_defaults(func=cmd_validate)

    sp = sub.add_parser("batch", help="Reorder every row of a CSV file")
    sp.add_argument("--operation", required=True, help="Operation key or alias")
    sp.add_argument("--input", required=True, help="CSV with id, vector, selected[, target]")
    sp.add_argument("--output", required=True, help="Output CSV")
    sp.add_argument("--joiner", default=",", help="Separator for the result column")
    sp.add_argument("--linked", action="store_true")
    sp.add_argument("--max-rows", type=int, default=None)
    sp.add_argument("--progress", action="store_true")
    sp.set_defaults(func=cmd_batch)

    sp = sub.add_parser("selftest", help="Offline smoke tests")
    sp.add_argument("--workdir", default=None, help="Scratch directory (default: ./_selftest)")
    sp.set_defaults(func=cmd_selftest)

    return p


def main(argv: Optional[List[str]] = None) -> None:
    parser = build_parser()
    args = parser.parse_args(argv)
    args.func(args)


if __name__ == "__main__":
    main()
