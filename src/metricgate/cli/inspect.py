from __future__ import annotations

from typing import Annotated

import typer

from metricgate.cli.exit_codes import EXIT_INVALID, EXIT_OK
from metricgate.core.denominators import is_denominator_variable
from metricgate.core.fixed import infer_fixed_variables
from metricgate.core.formula import extract_variables, validate_formula
from metricgate.core.model.threshold import Ratio, ThresholdExpression, format_number
from metricgate.core.threshold import parse_threshold
from metricgate.core.threshold_format import validate_threshold_format


def _describe(expr: ThresholdExpression) -> str:
    op = expr.operator.value if expr.operator else "none"
    if isinstance(expr.magnitude, Ratio):
        magnitude = f"ratio {format_number(expr.magnitude.numerator)}/{format_number(expr.magnitude.denominator)}"
    else:
        magnitude = f"scalar {format_number(expr.magnitude.value)}"
    unit = expr.unit.value if expr.unit else "none"
    return f"operator={op} magnitude={magnitude} unit={unit}"


def threshold_cmd(
    texts: Annotated[
        list[str],
        typer.Argument(help="Threshold expression(s), e.g. '>=10/3min' or '0%'."),
    ],
    label: Annotated[
        str,
        typer.Option("--label", help="Field label used in messages."),
    ] = "threshold",
) -> None:
    """Parse and validate threshold expressions."""
    failed = False
    for text in texts:
        result = validate_threshold_format(text, label)
        if not result.valid:
            failed = True
            typer.echo(f"{text!r}: {result.error}")
            continue
        parsed = parse_threshold(text)
        detail = _describe(parsed) if parsed is not None else "empty"
        typer.echo(f"{text!r}: {detail}")
    raise typer.Exit(code=EXIT_INVALID if failed else EXIT_OK)


def variables_cmd(
    formula: Annotated[
        str,
        typer.Argument(help="Metric formula, e.g. '(A/B)*100'."),
    ],
    desired: Annotated[
        str | None,
        typer.Option("--desired", help="Desired threshold."),
    ] = None,
    worst: Annotated[
        str | None,
        typer.Option("--worst", help="Worst-case threshold."),
    ] = None,
) -> None:
    """List the variables of a formula and which ones are fixed by the thresholds."""
    result = validate_formula(formula)
    if not result.valid:
        typer.echo(f"ERROR: {result.error}", err=True)
        raise typer.Exit(code=EXIT_INVALID)

    fixed = {a.symbol: a for a in infer_fixed_variables(formula, desired, worst)}
    for symbol in extract_variables(formula):
        flags: list[str] = []
        if is_denominator_variable(symbol, formula):
            flags.append("denominator")
        if symbol in fixed:
            flags.append(f"fixed={format_number(fixed[symbol].fixed_value)}")
        suffix = f" ({', '.join(flags)})" if flags else ""
        typer.echo(f"{symbol}{suffix}")
    raise typer.Exit(code=EXIT_OK)


def register(app: typer.Typer) -> None:
    app.command("threshold")(threshold_cmd)
    app.command("variables")(variables_cmd)


__all__ = ["register"]
