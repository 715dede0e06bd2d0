from __future__ import annotations

import csv
import json
import os
import sys
from typing import Any, Callable, Dict, List, Optional

from .canvas import canvas_from_labels, is_selected, labels

# (shapes, predicate, target) -> boundary
RowOperation = Callable[[List[Any], Callable[[Any], bool], Optional[int]], Any]


def _parse_list(s: str) -> List[Any]:
    """Parse either JSON '[1,2,3]' or CSV '1,2,3'."""
    s = (s or "").strip()
    if not s:
        return []
    if s[0] == "[":
        try:
            obj = json.loads(s)
            if isinstance(obj, list):
                return obj
        except json.JSONDecodeError:
            # fall back to CSV parsing
            pass
    return [p.strip() for p in s.split(",") if p.strip() != ""]


def _parse_target(s: Optional[str]) -> Optional[int]:
    if s is None or s.strip() == "":
        return None
    return int(s)


def _report_rows(done: int, total: int, operation_name: str) -> None:
    """Redraw the `[batch]` row counter on stderr, e.g. `[####....] 12/40 rows gather`."""
    if total <= 0:
        return
    width = 20
    filled = done * width // total
    sys.stderr.write(f"\r[{'#' * filled}{'.' * (width - filled)}] {done}/{total} rows {operation_name}")
    sys.stderr.flush()


def reorder_row(row: Dict[str, str], operation: RowOperation) -> List[str]:
    """Apply `operation` to the vector of one CSV row and return the new labels."""
    vector = _parse_list(row.get("vector", ""))
    selected = [int(x) for x in _parse_list(row.get("selected", ""))]
    target = _parse_target(row.get("target"))

    shapes = canvas_from_labels(vector, selected).shapes
    operation(shapes, is_selected, target)
    return labels(shapes)


def reorder_csv(
    input_csv: str,
    output_csv: str,
    operation: RowOperation,
    operation_name: str,
    id_field: str = "id",
    joiner: str = ",",
    max_rows: Optional[int] = None,
    progress: bool = False,
) -> int:
    """Reorder every row of `input_csv` and write `id,operation,result` rows.

    Input columns: `id`, `vector` (JSON list or comma separated), `selected`
    (indices, same formats) and optionally `target`. Returns the row count.
    """
    with open(input_csv, newline="") as f:
        reader = csv.DictReader(f)
        if reader.fieldnames is None or id_field not in reader.fieldnames:
            raise ValueError(f"'{id_field}' column not found in {input_csv}. Fields: {reader.fieldnames}")
        if "vector" not in reader.fieldnames:
            raise ValueError(f"'vector' column not found in {input_csv}. Fields: {reader.fieldnames}")
        rows = list(reader)

    if max_rows is not None:
        rows = rows[:max_rows]

    os.makedirs(os.path.dirname(output_csv) or ".", exist_ok=True)
    with open(output_csv, "w", newline="") as w:
        writer = csv.writer(w)
        writer.writerow([id_field, "operation", "result"])

        total = len(rows)
        step = max(1, total // 200)

        for i, row in enumerate(rows, 1):
            if progress and (i == 1 or i == total or i % step == 0):
                _report_rows(i, total, operation_name)

            result = reorder_row(row, operation)
            writer.writerow([row[id_field], operation_name, joiner.join(result)])

        if progress:
            sys.stderr.write("\n")
            sys.stderr.flush()

    return len(rows)
