import os
import subprocess
import sys
from pathlib import Path

import pytest

from reorder.config import ConfigError, Settings, load_scenarios, load_settings, parse_yaml

ROOT = Path(__file__).resolve().parents[1]


def write(tmp_path, text):
    p = tmp_path / "scenarios.yaml"
    p.write_text(text, encoding="utf-8")
    return p


def test_load_scenarios(tmp_path):
    p = write(
        tmp_path,
        """
scenarios:
  - name: gather in the middle
    operation: gather
    items: [A, B, C, D]
    selected: [0, 3]
    target: 2
    expected: [B, A, D, C]
    linked: true
  - operation: send_to_back
    items: [1, 2, 3]
""",
    )
    scenarios = load_scenarios(p)
    assert len(scenarios) == 2

    first, second = scenarios
    assert first.name == "gather in the middle"
    assert first.target == 2
    assert first.linked is True
    assert first.expected == ["B", "A", "D", "C"]

    assert second.name == "send_to_back #1"
    assert second.items == ["1", "2", "3"]
    assert second.selected == []
    assert second.expected is None
    assert second.linked is False


def test_empty_file_has_no_scenarios(tmp_path):
    assert load_scenarios(write(tmp_path, "")) == []
    assert parse_yaml(write(tmp_path, "")) == {}


@pytest.mark.parametrize(
    "text, message",
    [
        ("scenarios: {a: 1}", "must be a list"),
        ("- 1\n- 2", "top level must be a mapping"),
        ("scenarios:\n  - 3", "must be a mapping"),
        ("scenarios:\n  - items: [A]", "missing 'operation'"),
        ("scenarios:\n  - {operation: gather, items: A}", "'items' must be a list"),
        ("scenarios:\n  - {operation: gather, items: [A], selected: [x]}", "'selected'"),
        ("scenarios:\n  - {operation: gather, items: [A], target: x}", "'target'"),
        ("scenarios:\n  - {operation: gather, items: [A], expected: A}", "'expected'"),
        ("scenarios: [unclosed", "invalid YAML"),
    ],
)
def test_bad_scenario_files(tmp_path, text, message):
    with pytest.raises(ConfigError, match=message):
        load_scenarios(write(tmp_path, text))


def test_bundled_scenarios_load():
    scenarios = load_scenarios(ROOT / "scenarios" / "default.yaml")
    assert scenarios
    assert all(s.expected is not None for s in scenarios)


def test_settings_defaults(monkeypatch):
    monkeypatch.delenv("REORDER_ITERATIVE_THRESHOLD", raising=False)
    monkeypatch.delenv("REORDER_TRACE", raising=False)
    assert load_settings() == Settings(iterative_threshold=0, trace=False)


def test_settings_from_environment(monkeypatch):
    monkeypatch.setenv("REORDER_ITERATIVE_THRESHOLD", "64")
    monkeypatch.setenv("REORDER_TRACE", "yes")
    assert load_settings() == Settings(iterative_threshold=64, trace=True)


def test_settings_reject_bad_threshold(monkeypatch):
    monkeypatch.setenv("REORDER_ITERATIVE_THRESHOLD", "many")
    with pytest.raises(ConfigError):
        load_settings()


def test_bad_threshold_does_not_break_import():
    env = dict(os.environ, REORDER_ITERATIVE_THRESHOLD="many")
    proc = subprocess.run(
        [sys.executable, "-c", "import reorder; a = [3, 1, 2]; reorder.stable_partition(a, lambda x: x > 1, iterative_threshold=0); print(a)"],
        cwd=str(ROOT),
        env=env,
        capture_output=True,
        text=True,
    )
    assert proc.returncode == 0, proc.stderr
    assert proc.stdout.strip() == "[1, 3, 2]"


def test_bad_threshold_fails_when_it_is_used(monkeypatch):
    from reorder.partition import stable_partition

    monkeypatch.setenv("REORDER_ITERATIVE_THRESHOLD", "many")
    with pytest.raises(ConfigError):
        stable_partition([3, 1, 2], lambda x: x > 1)
