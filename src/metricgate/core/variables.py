from __future__ import annotations

from typing import TYPE_CHECKING

from metricgate.core.formula import extract_variables
from metricgate.core.model.validation import DeclaredVariable, ValidationResult

if TYPE_CHECKING:
    from collections.abc import Iterable

    from metricgate.core.types import FormulaVariableSet


def declared_symbols(declared: Iterable[DeclaredVariable]) -> FormulaVariableSet:
    """Trimmed, de-duplicated and sorted symbols of *declared*, blanks dropped."""
    return tuple(sorted({v.symbol.strip() for v in declared if v.symbol.strip()}))


def check_variables(formula: str | None, declared: Iterable[DeclaredVariable]) -> ValidationResult:
    """Check that the declared variables match the ones the formula uses.

    Missing declarations are reported before unused ones; only the first
    problem found is returned.
    """
    declared = list(declared)
    trimmed = (formula or "").strip()

    if not trimmed:
        if declared:
            return ValidationResult.fail("Cannot declare variables without a formula")
        return ValidationResult.ok()

    required = extract_variables(trimmed)
    defined = declared_symbols(declared)

    missing = [s for s in required if s not in defined]
    if missing:
        return ValidationResult.fail(f"Missing variable declarations: {', '.join(missing)}")

    extra = [s for s in defined if s not in required]
    if extra:
        return ValidationResult.fail(
            f"Variables not used in the formula: {', '.join(extra)}. Remove them or use them in the formula."
        )

    assert len(required) == len(defined), "variable sets differ after missing/extra checks"

    count = len(required)
    return ValidationResult.ok(
        success=f"✓ All {count} variable{'' if count == 1 else 's'} correctly declared"
    )


def to_declared(symbols: Iterable[str]) -> list[DeclaredVariable]:
    """Wrap bare symbols as declarations with empty descriptions."""
    return [DeclaredVariable(symbol=s) for s in symbols]


__all__ = ["check_variables", "declared_symbols", "to_declared"]
