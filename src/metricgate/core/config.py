"""Central configuration and constants for ``metricgate``."""

from __future__ import annotations

import json
import tomllib
from dataclasses import dataclass
from functools import cache
from importlib import resources
from typing import TYPE_CHECKING

from metricgate._meta import logger
from metricgate.core.types import Operator, Unit
from metricgate.errors import ConfigError

if TYPE_CHECKING:
    from pathlib import Path

# Default logging format used by the CLI entry point.
LOG_FORMAT = "%(levelname)s: %(message)s"

# Operators in scan order; two-character tokens first so ">=" is never split.
OPERATOR_SCAN_ORDER: tuple[Operator, ...] = (
    Operator.GTE,
    Operator.LTE,
    Operator.GT,
    Operator.LT,
    Operator.EQ,
)

# Unit suffixes in scan order; longer tokens first so "ms" wins over "s".
UNIT_SCAN_ORDER: tuple[Unit, ...] = (
    Unit.MINUTES,
    Unit.SECONDS_LONG,
    Unit.MILLISECONDS,
    Unit.SECONDS,
    Unit.HOURS,
    Unit.PERCENT,
)

# Operator typos rejected with the token the user most likely meant.
OPERATOR_TYPOS: dict[str, Operator] = {
    "=>": Operator.GTE,
    "=<": Operator.LTE,
}

# Characters a formula may contain besides whitespace.
FORMULA_ALLOWED_CHARS = frozenset("ABCDEFGHIJKLMNOPQRSTUVWXYZ0123456789+-*/()._")
FORMULA_ALLOWED_DISPLAY = "A-Z, 0-9, +, -, *, /, (, ), ., _"


_SCHEMA_FILES: dict[str, str] = {
    "metric": "metric.schema.json",
    "report": "report.schema.json",
}


@cache
def get_schema(name: str = "metric") -> dict[str, object]:
    """Load and cache a packaged JSON schema."""
    try:
        filename = _SCHEMA_FILES[name]
    except KeyError as exc:
        choices = ", ".join(sorted(_SCHEMA_FILES))
        msg = f"Unsupported schema: {name!r}. Available schemas: {choices}"
        raise ValueError(msg) from exc
    return json.loads(resources.files("metricgate.data").joinpath(filename).read_text(encoding="utf-8"))


@dataclass(frozen=True, slots=True)
class Settings:
    """Project-level settings read from ``[tool.metricgate]``.

    Fields
    ------
    formula_required:
        Whether a metric without a formula fails validation.
    desired_label:
        Field label used in messages about the desired threshold.
    worst_label:
        Field label used in messages about the worst-case threshold.
    """

    formula_required: bool = True
    desired_label: str = "desired threshold"
    worst_label: str = "worst case"


_SETTING_TYPES: dict[str, type] = {
    "formula_required": bool,
    "desired_label": str,
    "worst_label": str,
}


def settings_from_mapping(table: dict[str, object]) -> Settings:
    """Build :class:`Settings` from a ``[tool.metricgate]`` table."""
    values: dict[str, object] = {}
    for key, raw in table.items():
        name = key.replace("-", "_")
        expected = _SETTING_TYPES.get(name)
        if expected is None:
            msg = f"unknown metricgate setting: {key!r}"
            raise ConfigError(msg)
        if not isinstance(raw, expected):
            msg = f"setting {key!r} must be of type {expected.__name__}, got {type(raw).__name__}"
            raise ConfigError(msg)
        values[name] = raw
    return Settings(**values)  # type: ignore[arg-type]


def load_settings(pyproject: Path) -> Settings:
    """Read settings from *pyproject*, falling back to defaults when unreadable."""
    if not pyproject.exists():
        return Settings()
    try:
        with pyproject.open("rb") as f:
            data = tomllib.load(f)
    except (OSError, tomllib.TOMLDecodeError) as e:
        logger.warning("Failed to parse %s: %s", pyproject, e)
        return Settings()

    table = data.get("tool", {}).get("metricgate", {})
    if not isinstance(table, dict):
        msg = f"[tool.metricgate] in {pyproject} must be a table"
        raise ConfigError(msg)
    if table:
        logger.debug("using metricgate settings from %s", pyproject)
    return settings_from_mapping(table)


__all__ = [
    "FORMULA_ALLOWED_CHARS",
    "FORMULA_ALLOWED_DISPLAY",
    "LOG_FORMAT",
    "OPERATOR_SCAN_ORDER",
    "OPERATOR_TYPOS",
    "UNIT_SCAN_ORDER",
    "Settings",
    "get_schema",
    "load_settings",
    "settings_from_mapping",
]
