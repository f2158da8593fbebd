"""Validators for the plain text fields of a metric definition."""

from __future__ import annotations

import re

from metricgate.core.model.validation import ValidationResult

_METRIC_CODE_CHARS = re.compile(r"^[A-Za-z0-9._-]+$")
_STANDARD_CODE = re.compile(r"^[A-Z]+-\d+$")
_SYMBOL = re.compile(r"^[A-Z][A-Z0-9_]*$")

METRIC_NAME_MIN = 3
METRIC_NAME_MAX = 150
METRIC_CODE_MAX = 20
SYMBOL_MAX = 30
VARIABLE_DESCRIPTION_MIN = 3
VARIABLE_DESCRIPTION_MAX = 200
DESCRIPTION_MAX = 500
DESCRIPTION_SHORT = 10
DESCRIPTION_COMPLETE = 50


def validate_metric_name(name: str) -> ValidationResult:
    trimmed = name.strip()
    if not trimmed:
        return ValidationResult.fail("The metric name is required")
    if len(trimmed) < METRIC_NAME_MIN:
        return ValidationResult.fail(f"The name must be at least {METRIC_NAME_MIN} characters long")
    if len(trimmed) > METRIC_NAME_MAX:
        return ValidationResult.fail(f"The name cannot exceed {METRIC_NAME_MAX} characters")
    return ValidationResult.ok(success="✓ Valid name")


def validate_metric_code(code: str) -> ValidationResult:
    """Codes are optional; ``PO-1`` style codes get a dedicated advisory."""
    trimmed = code.strip()
    if not trimmed:
        return ValidationResult.ok(warning="The code is optional but recommended for organization")
    if len(trimmed) > METRIC_CODE_MAX:
        return ValidationResult.fail(f"The code cannot exceed {METRIC_CODE_MAX} characters")
    if not _METRIC_CODE_CHARS.match(trimmed):
        return ValidationResult.fail("The code may only contain letters, digits, hyphens, underscores and dots")
    if _STANDARD_CODE.match(trimmed):
        return ValidationResult.ok(success="✓ Code in standard format (e.g. PO-1)")
    return ValidationResult.ok(success="✓ Valid code")


def validate_variable_symbol(symbol: str) -> ValidationResult:
    trimmed = symbol.strip()
    if not trimmed:
        return ValidationResult.fail("The variable symbol is required")
    if not _SYMBOL.match(trimmed):
        return ValidationResult.fail(
            "The symbol must start with an uppercase letter and use only uppercase letters, "
            "digits and underscores (e.g. VAR_A)"
        )
    if len(trimmed) > SYMBOL_MAX:
        return ValidationResult.fail(f"The symbol cannot exceed {SYMBOL_MAX} characters")
    return ValidationResult.ok(success="✓ Valid symbol")


def validate_variable_description(description: str) -> ValidationResult:
    trimmed = description.strip()
    if not trimmed:
        return ValidationResult.fail("The variable description is required")
    if len(trimmed) < VARIABLE_DESCRIPTION_MIN:
        return ValidationResult.fail(
            f"The description must be at least {VARIABLE_DESCRIPTION_MIN} characters long"
        )
    if len(trimmed) > VARIABLE_DESCRIPTION_MAX:
        return ValidationResult.fail(f"The description cannot exceed {VARIABLE_DESCRIPTION_MAX} characters")
    return ValidationResult.ok(success="✓ Valid description")


def validate_description(description: str, max_length: int = DESCRIPTION_MAX) -> ValidationResult:
    trimmed = description.strip()
    if len(trimmed) > max_length:
        return ValidationResult.fail(
            f"The description cannot exceed {max_length} characters (current: {len(trimmed)})"
        )
    if not trimmed:
        return ValidationResult.ok(warning="Adding a description is recommended for clarity")
    if len(trimmed) < DESCRIPTION_SHORT:
        return ValidationResult.ok(warning="Very short description. Consider adding more detail")
    if len(trimmed) >= DESCRIPTION_COMPLETE:
        return ValidationResult.ok(success="✓ Complete description")
    return ValidationResult.ok(success="✓ Valid description")


__all__ = [
    "validate_description",
    "validate_metric_code",
    "validate_metric_name",
    "validate_variable_description",
    "validate_variable_symbol",
]
