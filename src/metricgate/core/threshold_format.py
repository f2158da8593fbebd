from __future__ import annotations

from metricgate.core.config import OPERATOR_TYPOS
from metricgate.core.model.validation import ValidationResult
from metricgate.core.threshold import is_complete_ratio, parse_threshold, scan_threshold


def validate_threshold_format(text: str | None, field_label: str = "threshold") -> ValidationResult:
    """Validate a threshold typed into a form field.

    Blank input is valid with a warning. Operator typos and incomplete
    ratios are reported before the generic numeric error.
    """
    scan = scan_threshold(text)
    if not scan.text:
        return ValidationResult.ok(warning=f"The {field_label} is optional but recommended for evaluations")

    if scan.typo is not None:
        correct = OPERATOR_TYPOS[scan.typo].value
        return ValidationResult.fail(
            f'Invalid operator "{scan.typo}" in {field_label}. Use "{correct}" instead (e.g. "{correct}10/1min")'
        )

    if scan.unit is not None and scan.has_slash and not is_complete_ratio(scan.body):
        unit = scan.unit.value
        return ValidationResult.fail(
            f'Invalid format "{scan.fragment}" in {field_label}. '
            f'A ratio with a unit needs both numbers, e.g. "10/1{unit}"'
        )

    if scan.unit is None and scan.has_slash and not is_complete_ratio(scan.body):
        return ValidationResult.fail(
            f'Invalid ratio format "{scan.fragment}" in {field_label}. Use "<number>/<number>", e.g. "10/20"'
        )

    parsed = parse_threshold(scan.text)
    if parsed is None:
        return ValidationResult.fail(f'Invalid numeric value "{scan.fragment}" in {field_label}')

    if parsed.operator is not None:
        if parsed.is_ratio:
            return ValidationResult.ok(success="✓ Valid threshold with ratio and operator")
        return ValidationResult.ok(success="✓ Valid threshold with operator")
    if parsed.is_ratio:
        return ValidationResult.ok(success="✓ Valid threshold with ratio")
    if parsed.unit is not None:
        return ValidationResult.ok(success="✓ Valid threshold with unit")
    return ValidationResult.ok(success="✓ Valid threshold")


__all__ = ["validate_threshold_format"]
