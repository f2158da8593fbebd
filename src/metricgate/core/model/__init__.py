from metricgate.core.model.threshold import Magnitude, Ratio, Scalar, ThresholdExpression, format_number
from metricgate.core.model.validation import DeclaredVariable, FixedVariableAssignment, ValidationResult

__all__ = [
    "DeclaredVariable",
    "FixedVariableAssignment",
    "Magnitude",
    "Ratio",
    "Scalar",
    "ThresholdExpression",
    "ValidationResult",
    "format_number",
]
