from __future__ import annotations

import math
from typing import TYPE_CHECKING

from metricgate.core.formula import TokenKind, extract_variables, significant_tokens
from metricgate.core.model.validation import ValidationResult

if TYPE_CHECKING:
    from collections.abc import Iterable

    from metricgate.core.types import FormulaVariableSet


def _denominator_symbols(formula: str | None) -> set[str]:
    """Variables written directly after ``/`` or inside the group following it."""
    tokens = significant_tokens(formula)
    found: set[str] = set()
    for i, tok in enumerate(tokens):
        if tok.text != "/" or i + 1 >= len(tokens):
            continue
        nxt = tokens[i + 1]
        if nxt.kind is TokenKind.VARIABLE:
            found.add(nxt.text)
        elif nxt.kind is TokenKind.LPAREN:
            depth = 0
            for inner in tokens[i + 1 :]:
                if inner.kind is TokenKind.LPAREN:
                    depth += 1
                elif inner.kind is TokenKind.RPAREN:
                    depth -= 1
                    if depth == 0:
                        break
                elif inner.kind is TokenKind.VARIABLE:
                    found.add(inner.text)
    return found


def is_denominator_variable(symbol: str, formula: str | None) -> bool:
    """Return True if *symbol* appears in a denominator of *formula*.

    ``A/B`` -> ``B``; ``(X+Y)/B`` -> ``B``; ``A/(B+C)`` -> ``B`` and ``C``.
    """
    if not symbol or not formula:
        return False
    return symbol in _denominator_symbols(formula)


def get_denominator_variables(formula: str | None, symbols: Iterable[str] | None = None) -> FormulaVariableSet:
    """Denominator variables of *formula*, restricted to *symbols* when given."""
    candidates = extract_variables(formula) if symbols is None else tuple(symbols)
    denominators = _denominator_symbols(formula)
    return tuple(s for s in candidates if s in denominators)


def validate_no_division_by_zero(value: float | str, symbol: str, formula: str | None) -> ValidationResult:
    """Reject a zero entered for a variable that divides in *formula*."""
    try:
        number = float(value)
    except (TypeError, ValueError):
        return ValidationResult.fail(f"Value {value!r} for {symbol} is not a number")
    if math.isnan(number):
        return ValidationResult.fail(f"Value {value!r} for {symbol} is not a number")

    if number == 0 and is_denominator_variable(symbol, formula):
        return ValidationResult.fail(f"0 cannot be used for {symbol}: it is the denominator of a division")
    return ValidationResult.ok()


__all__ = ["get_denominator_variables", "is_denominator_variable", "validate_no_division_by_zero"]
