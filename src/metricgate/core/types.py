"""Shared type aliases and enumerations used across metricgate."""

from __future__ import annotations

from enum import StrEnum
from typing import Literal, TypeAlias

# ---------------------------------------------------------------------------
# Common type aliases
# ---------------------------------------------------------------------------

FormulaVariableSet: TypeAlias = tuple[str, ...]
"""Distinct variable symbols of a formula, sorted lexicographically."""

MessageKind: TypeAlias = Literal["error", "warning", "success"]
"""Severity of the message carried by a validation result."""


# ---------------------------------------------------------------------------
# Enumerations
# ---------------------------------------------------------------------------


class Operator(StrEnum):
    """Comparison operators accepted at the start of a threshold."""

    GTE = ">="
    LTE = "<="
    GT = ">"
    LT = "<"
    EQ = "="


class Unit(StrEnum):
    """Unit tokens recognized at the end of a threshold."""

    MINUTES = "min"
    SECONDS_LONG = "seg"
    SECONDS = "s"
    MILLISECONDS = "ms"
    HOURS = "h"
    PERCENT = "%"


class OutputFormat(StrEnum):
    """Supported output formats of the ``check`` command."""

    HUMAN = "human"
    JSON = "json"


__all__ = [
    "FormulaVariableSet",
    "MessageKind",
    "Operator",
    "OutputFormat",
    "Unit",
]
