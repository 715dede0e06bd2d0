"""Settings and scenario files.

Settings come from the environment:

- REORDER_ITERATIVE_THRESHOLD: ranges longer than this are stable-partitioned
  with an explicit work stack instead of recursion (0 = always recurse)
- REORDER_TRACE: "1"/"true" makes the CLI print half-stable partition steps

Scenario files are YAML:

    scenarios:
      - name: send selected to back
        operation: send-to-back
        items: [A, B, C, D, E, F, G, H]
        selected: [2, 3, 6, 7]
        expected: [A, B, E, F, C, D, G, H]
"""

from __future__ import annotations

import os
from dataclasses import dataclass, field
from pathlib import Path
from typing import Any, Dict, List, Optional, Union

import yaml


class ConfigError(ValueError):
    pass


def _env_bool(name: str, default: bool = False) -> bool:
    raw = os.getenv(name, "").strip().lower()
    if not raw:
        return default
    return raw in ("1", "true", "yes", "on")


def _env_int(name: str, default: int) -> int:
    raw = os.getenv(name, "").strip()
    if not raw:
        return default
    try:
        return int(raw)
    except ValueError:
        raise ConfigError(f"{name} must be an integer, got {raw!r}")


@dataclass(frozen=True)
class Settings:
    # 0 disables the explicit-stack partition
    iterative_threshold: int = 0
    trace: bool = False


def load_settings() -> Settings:
    return Settings(
        iterative_threshold=_env_int("REORDER_ITERATIVE_THRESHOLD", 0),
        trace=_env_bool("REORDER_TRACE", False),
    )


@dataclass
class Scenario:
    name: str
    operation: str
    items: List[str]
    selected: List[int] = field(default_factory=list)
    target: Optional[int] = None
    expected: Optional[List[str]] = None
    linked: bool = False


def _as_bool(v: Any) -> bool:
    if isinstance(v, str):
        return v.strip().lower() == "true"
    return bool(v)


def _parse_scenario(idx: int, raw: Any) -> Scenario:
    if not isinstance(raw, dict):
        raise ConfigError(f"scenario #{idx} must be a mapping, got {type(raw).__name__}")

    operation = raw.get("operation")
    if not operation or not isinstance(operation, str):
        raise ConfigError(f"scenario #{idx} is missing 'operation'")

    items = raw.get("items")
    if not isinstance(items, list):
        raise ConfigError(f"scenario #{idx} ({operation}): 'items' must be a list")

    selected = raw.get("selected", [])
    if not isinstance(selected, list) or not all(isinstance(i, int) for i in selected):
        raise ConfigError(f"scenario #{idx} ({operation}): 'selected' must be a list of ints")

    target = raw.get("target")
    if target is not None and not isinstance(target, int):
        raise ConfigError(f"scenario #{idx} ({operation}): 'target' must be an int")

    expected = raw.get("expected")
    if expected is not None:
        if not isinstance(expected, list):
            raise ConfigError(f"scenario #{idx} ({operation}): 'expected' must be a list")
        expected = [str(x) for x in expected]

    return Scenario(
        name=str(raw.get("name") or f"{operation} #{idx}"),
        operation=operation,
        items=[str(x) for x in items],
        selected=list(selected),
        target=target,
        expected=expected,
        linked=_as_bool(raw.get("linked", False)),
    )


def parse_yaml(path: Union[str, Path]) -> Dict[str, Any]:
    with open(path, "r", encoding="utf-8") as f:
        try:
            data = yaml.safe_load(f)
        except yaml.YAMLError as e:
            raise ConfigError(f"{path}: invalid YAML: {e}") from e
    if data is None:
        return {}
    if not isinstance(data, dict):
        raise ConfigError(f"{path}: top level must be a mapping")
    return data


def load_scenarios(path: Union[str, Path]) -> List[Scenario]:
    data = parse_yaml(path)
    raw = data.get("scenarios", [])
    if not isinstance(raw, list):
        raise ConfigError(f"{path}: 'scenarios' must be a list")
    return [_parse_scenario(i, s) for i, s in enumerate(raw)]
