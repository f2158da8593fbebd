"""End-to-end checking of one metric definition.

The raw strings of a metric go through the gates in a fixed order:
field validators, formula and threshold formats, declared-vs-formula
variables, and finally fixed-variable inference and case classification
for definitions that passed the format gates.
"""

from __future__ import annotations

from dataclasses import dataclass, field

from metricgate._meta import logger
from metricgate.core.cases import ThresholdCase, classify_thresholds
from metricgate.core.config import Settings
from metricgate.core.denominators import get_denominator_variables
from metricgate.core.fields import (
    validate_description,
    validate_metric_code,
    validate_metric_name,
    validate_variable_description,
    validate_variable_symbol,
)
from metricgate.core.fixed import infer_fixed_variables
from metricgate.core.formula import extract_variables, validate_formula
from metricgate.core.model.validation import DeclaredVariable, FixedVariableAssignment, ValidationResult
from metricgate.core.threshold_format import validate_threshold_format
from metricgate.core.types import FormulaVariableSet
from metricgate.core.variables import check_variables


@dataclass(frozen=True, slots=True)
class MetricDefinition:
    """The raw strings an administrator enters for one metric."""

    name: str
    formula: str = ""
    desired_threshold: str | None = None
    worst_case: str | None = None
    variables: tuple[DeclaredVariable, ...] = ()
    code: str = ""
    description: str = ""


@dataclass(frozen=True, slots=True)
class MetricReport:
    """Validation outcome of a :class:`MetricDefinition`.

    ``results`` maps a field name (``"formula"``, ``"variables.B"`` ...)
    to its result, in the order the gates ran.
    """

    definition: MetricDefinition
    results: dict[str, ValidationResult]
    variables: FormulaVariableSet = ()
    denominators: FormulaVariableSet = ()
    fixed_variables: tuple[FixedVariableAssignment, ...] = ()
    case: ThresholdCase | None = None
    notes: list[str] = field(default_factory=list)

    @property
    def valid(self) -> bool:
        return all(r.valid for r in self.results.values())

    def errors(self) -> list[tuple[str, str]]:
        return [(name, r.error) for name, r in self.results.items() if r.error is not None]

    def warnings(self) -> list[tuple[str, str]]:
        return [(name, r.warning) for name, r in self.results.items() if r.warning is not None]


def check_metric(definition: MetricDefinition, settings: Settings | None = None) -> MetricReport:
    settings = settings or Settings()
    results: dict[str, ValidationResult] = {
        "name": validate_metric_name(definition.name),
        "code": validate_metric_code(definition.code),
        "description": validate_description(definition.description),
        "formula": validate_formula(definition.formula, required=settings.formula_required),
        "desired_threshold": validate_threshold_format(definition.desired_threshold, settings.desired_label),
        "worst_case": validate_threshold_format(definition.worst_case, settings.worst_label),
    }
    for var in definition.variables:
        key = f"variables.{var.symbol.strip() or '?'}"
        symbol_result = validate_variable_symbol(var.symbol)
        result = symbol_result if not symbol_result.valid else validate_variable_description(var.description)
        # A repeated symbol keeps its first failing result.
        if key not in results or results[key].valid:
            results[key] = result
    results["variables"] = check_variables(definition.formula, definition.variables)

    gates_passed = all(results[k].valid for k in ("formula", "desired_threshold", "worst_case"))
    if not gates_passed:
        logger.debug("metric %r failed format gates; skipping inference", definition.name)
        return MetricReport(definition=definition, results=results)

    variables = extract_variables(definition.formula)
    fixed = tuple(infer_fixed_variables(definition.formula, definition.desired_threshold, definition.worst_case))
    case = None
    if definition.desired_threshold:
        case = classify_thresholds(definition.desired_threshold, definition.worst_case)

    notes = [f"{a.symbol} is fixed to {a.fixed_value:g} ({a.reason})" for a in fixed]
    return MetricReport(
        definition=definition,
        results=results,
        variables=variables,
        denominators=get_denominator_variables(definition.formula),
        fixed_variables=fixed,
        case=case,
        notes=notes,
    )


def check_metrics(definitions: list[MetricDefinition], settings: Settings | None = None) -> list[MetricReport]:
    return [check_metric(d, settings) for d in definitions]


__all__ = ["MetricDefinition", "MetricReport", "check_metric", "check_metrics"]
