"""Inference of formula variables that are constants implied by thresholds.

A threshold such as ``">=10/3min"`` against the formula ``A/B`` says the
metric counts ``A`` per 3 minutes, so ``B`` is not user input but the
constant 3. Inference is deliberately narrow: it only fires for a direct
single-letter division and for minute-denominated or ratio thresholds.
"""

from __future__ import annotations

from metricgate._meta import logger
from metricgate.core.formula import find_single_letter_division
from metricgate.core.model.threshold import Ratio, format_number
from metricgate.core.model.validation import FixedVariableAssignment
from metricgate.core.threshold import parse_threshold
from metricgate.core.types import Unit


def infer_fixed_variables(
    formula: str | None,
    desired: str | None,
    worst: str | None,
) -> list[FixedVariableAssignment]:
    """Return the variables of *formula* whose value is fixed by the thresholds.

    At most one assignment is produced; the list leaves room for more.
    """
    if not formula or not formula.strip():
        return []

    desired_text = (desired or "").strip()
    worst_text = (worst or "").strip()
    desired_expr = parse_threshold(desired_text)
    worst_expr = parse_threshold(worst_text)

    has_time_unit = any(e is not None and e.unit is Unit.MINUTES for e in (desired_expr, worst_expr))
    desired_ratio = desired_expr.magnitude if desired_expr and isinstance(desired_expr.magnitude, Ratio) else None
    worst_ratio = worst_expr.magnitude if worst_expr and isinstance(worst_expr.magnitude, Ratio) else None

    if not has_time_unit and desired_ratio is None and worst_ratio is None:
        return []

    division = find_single_letter_division(formula)
    if division is None:
        return []
    _, denominator_var = division

    if desired_ratio is not None and has_time_unit:
        assignment = FixedVariableAssignment(
            symbol=denominator_var,
            fixed_value=desired_ratio.denominator,
            reason=f"fixed denominator from desired threshold ({desired_text})",
        )
    elif worst_ratio is not None and has_time_unit:
        assignment = FixedVariableAssignment(
            symbol=denominator_var,
            fixed_value=worst_ratio.denominator,
            reason=f"fixed denominator from worst-case threshold ({worst_text})",
        )
    elif (
        desired_ratio is not None
        and worst_ratio is not None
        and desired_ratio.numerator == 0
        and desired_ratio.denominator == worst_ratio.denominator
    ):
        assignment = FixedVariableAssignment(
            symbol=denominator_var,
            fixed_value=desired_ratio.denominator,
            reason=f"shared denominator across thresholds ({format_number(desired_ratio.denominator)})",
        )
    else:
        return []

    logger.debug("variable %s fixed to %s: %s", assignment.symbol, assignment.fixed_value, assignment.reason)
    return [assignment]


def find_fixed_variable(
    symbol: str,
    formula: str | None,
    desired: str | None,
    worst: str | None,
) -> FixedVariableAssignment | None:
    return next((a for a in infer_fixed_variables(formula, desired, worst) if a.symbol == symbol), None)


def is_variable_fixed(symbol: str, formula: str | None, desired: str | None, worst: str | None) -> bool:
    return find_fixed_variable(symbol, formula, desired, worst) is not None


def get_fixed_value(symbol: str, formula: str | None, desired: str | None, worst: str | None) -> float | None:
    found = find_fixed_variable(symbol, formula, desired, worst)
    return found.fixed_value if found else None


__all__ = [
    "find_fixed_variable",
    "get_fixed_value",
    "infer_fixed_variables",
    "is_variable_fixed",
]
