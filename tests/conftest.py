from __future__ import annotations

import json
from collections.abc import Callable, Mapping
from pathlib import Path
from typing import Any

import pytest
from click.testing import CliRunner

MetricSpec = Mapping[str, Any]


@pytest.fixture
def cli_runner() -> CliRunner:
    """Return a Click CLI runner for invoking the command-line interface."""
    return CliRunner()


def _toml_value(value: object) -> str:
    if value is None:
        return '""'
    if isinstance(value, bool):
        return "true" if value else "false"
    return json.dumps(value, ensure_ascii=False)


def _toml_metric(metric: MetricSpec) -> str:
    lines = ["[[metrics]]"]
    lines.extend(f"{key} = {_toml_value(value)}" for key, value in metric.items() if key != "variables")
    for var in metric.get("variables", []):
        lines.append("[[metrics.variables]]")
        lines.extend(f"{key} = {_toml_value(value)}" for key, value in var.items())
    return "\n".join(lines)


@pytest.fixture
def metric_file(tmp_path: Path) -> Callable[..., Path]:
    """Write metric definitions as ``{"metrics": [...]}`` in JSON or TOML."""

    def write(metrics: list[MetricSpec], *, filename: str = "metrics.json") -> Path:
        path = tmp_path / filename
        if path.suffix == ".toml":
            path.write_text("\n\n".join(_toml_metric(m) for m in metrics) + "\n", encoding="utf-8")
        else:
            path.write_text(json.dumps({"metrics": list(metrics)}), encoding="utf-8")
        return path

    return write


@pytest.fixture
def valid_metric() -> dict[str, Any]:
    return {
        "name": "Failed logins per window",
        "code": "SEC-1",
        "description": "Failed login attempts counted over a fixed time window.",
        "formula": "A/B",
        "desired_threshold": "0/1min",
        "worst_case": ">=10/3min",
        "variables": [
            {"symbol": "A", "description": "failed logins"},
            {"symbol": "B", "description": "window length"},
        ],
    }
