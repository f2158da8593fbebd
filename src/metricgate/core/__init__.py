from metricgate.core.cases import ThresholdCase, ThresholdCaseType, classify_thresholds
from metricgate.core.config import LOG_FORMAT, Settings, get_schema, load_settings
from metricgate.core.denominators import (
    get_denominator_variables,
    is_denominator_variable,
    validate_no_division_by_zero,
)
from metricgate.core.fields import (
    validate_description,
    validate_metric_code,
    validate_metric_name,
    validate_variable_description,
    validate_variable_symbol,
)
from metricgate.core.fixed import (
    find_fixed_variable,
    get_fixed_value,
    infer_fixed_variables,
    is_variable_fixed,
)
from metricgate.core.formula import (
    Token,
    TokenKind,
    extract_variables,
    find_single_letter_division,
    tokenize_formula,
    validate_formula,
)
from metricgate.core.model import (
    DeclaredVariable,
    FixedVariableAssignment,
    Ratio,
    Scalar,
    ThresholdExpression,
    ValidationResult,
)
from metricgate.core.pipeline import MetricDefinition, MetricReport, check_metric, check_metrics
from metricgate.core.threshold import ThresholdScan, parse_threshold, scan_threshold
from metricgate.core.threshold_format import validate_threshold_format
from metricgate.core.types import FormulaVariableSet, Operator, OutputFormat, Unit
from metricgate.core.variables import check_variables

__all__ = [
    "LOG_FORMAT",
    "DeclaredVariable",
    "FixedVariableAssignment",
    "FormulaVariableSet",
    "MetricDefinition",
    "MetricReport",
    "Operator",
    "OutputFormat",
    "Ratio",
    "Scalar",
    "Settings",
    "ThresholdCase",
    "ThresholdCaseType",
    "ThresholdExpression",
    "ThresholdScan",
    "Token",
    "TokenKind",
    "Unit",
    "ValidationResult",
    "check_metric",
    "check_metrics",
    "check_variables",
    "classify_thresholds",
    "extract_variables",
    "find_fixed_variable",
    "find_single_letter_division",
    "get_denominator_variables",
    "get_fixed_value",
    "get_schema",
    "infer_fixed_variables",
    "is_denominator_variable",
    "is_variable_fixed",
    "load_settings",
    "parse_threshold",
    "scan_threshold",
    "tokenize_formula",
    "validate_description",
    "validate_formula",
    "validate_metric_code",
    "validate_metric_name",
    "validate_no_division_by_zero",
    "validate_threshold_format",
    "validate_variable_description",
    "validate_variable_symbol",
]
