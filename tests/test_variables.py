import pytest

from metricgate.core.formula import extract_variables
from metricgate.core.model import DeclaredVariable
from metricgate.core.variables import check_variables, declared_symbols, to_declared


def _declare(*symbols: str) -> list[DeclaredVariable]:
    return [DeclaredVariable(symbol=s, description=f"Variable {s}") for s in symbols]


def test_exact_match_is_valid() -> None:
    result = check_variables("A/B", _declare("A", "B"))
    assert result.valid
    assert "All 2 variables correctly declared" in result.success


def test_order_does_not_matter() -> None:
    assert check_variables("A/B", _declare("B", "A")).valid


def test_missing_variable() -> None:
    result = check_variables("A/B", _declare("A"))
    assert not result.valid
    assert "Missing" in result.error
    assert "B" in result.error


def test_all_missing_variables_are_listed() -> None:
    result = check_variables("A + B + C", _declare("A"))
    assert "B, C" in result.error


def test_extra_variable() -> None:
    result = check_variables("A/B", _declare("A", "B", "C"))
    assert not result.valid
    assert "not used" in result.error
    assert "C" in result.error


def test_missing_is_reported_before_extra() -> None:
    result = check_variables("A/B", _declare("A", "C"))
    assert "Missing" in result.error
    assert "B" in result.error
    assert "C" not in result.error


def test_blank_and_duplicate_symbols_are_ignored() -> None:
    declared = [DeclaredVariable(" A "), DeclaredVariable("A"), DeclaredVariable("  "), DeclaredVariable("B")]
    assert declared_symbols(declared) == ("A", "B")
    assert check_variables("A/B", declared).valid


def test_blank_formula_without_variables_is_valid() -> None:
    result = check_variables("  ", [])
    assert result.valid
    assert result.message is None


def test_blank_formula_with_variables_fails() -> None:
    result = check_variables("", _declare("A"))
    assert not result.valid
    assert "without a formula" in result.error


def test_single_variable_message_is_singular() -> None:
    assert "All 1 variable correctly declared" in check_variables("A * 100", _declare("A")).success


@pytest.mark.parametrize(
    "formula",
    ["A/B", "1-(A/B)", "(N_OK / N_TOTAL) * 100", "A + A + B", "X1 * Y_2 - Z"],
)
def test_extracted_variables_always_satisfy_the_check(formula: str) -> None:
    assert check_variables(formula, to_declared(extract_variables(formula))).valid
