import pytest

from metricgate.core.fields import (
    validate_description,
    validate_metric_code,
    validate_metric_name,
    validate_variable_description,
    validate_variable_symbol,
)


@pytest.mark.parametrize(
    ("name", "fragment"),
    [("", "required"), ("ab", "at least 3"), ("x" * 151, "cannot exceed 150")],
)
def test_invalid_metric_names(name: str, fragment: str) -> None:
    result = validate_metric_name(name)
    assert not result.valid
    assert fragment in result.error


def test_valid_metric_name() -> None:
    assert validate_metric_name("  Availability  ").valid


def test_metric_code_is_optional() -> None:
    result = validate_metric_code("")
    assert result.valid
    assert result.kind == "warning"


@pytest.mark.parametrize(
    ("code", "valid", "fragment"),
    [
        ("PO-1", True, "standard format"),
        ("metric.v2", True, "Valid code"),
        ("bad code", False, "may only contain"),
        ("X" * 21, False, "cannot exceed 20"),
    ],
)
def test_metric_codes(code: str, *, valid: bool, fragment: str) -> None:
    result = validate_metric_code(code)
    assert result.valid is valid
    assert fragment in result.message


@pytest.mark.parametrize(
    ("symbol", "valid"),
    [("A", True), ("VAR_A", True), ("N2", True), ("a", False), ("1A", False), ("", False), ("A" * 31, False)],
)
def test_variable_symbols(symbol: str, *, valid: bool) -> None:
    assert validate_variable_symbol(symbol).valid is valid


@pytest.mark.parametrize(
    ("description", "valid"),
    [("", False), ("ab", False), ("total requests", True), ("x" * 201, False)],
)
def test_variable_descriptions(description: str, *, valid: bool) -> None:
    assert validate_variable_description(description).valid is valid


@pytest.mark.parametrize(
    ("description", "kind", "fragment"),
    [
        ("", "warning", "recommended"),
        ("short", "warning", "Very short"),
        ("A reasonable description", "success", "Valid description"),
        ("x" * 60, "success", "Complete description"),
        ("x" * 501, "error", "current: 501"),
    ],
)
def test_descriptions(description: str, kind: str, fragment: str) -> None:
    result = validate_description(description)
    assert result.kind == kind
    assert fragment in result.message
