import pytest

from metricgate.core.model import ValidationResult


@pytest.mark.parametrize(
    "kwargs",
    [
        {"valid": False},
        {"valid": True, "error": "x"},
        {"valid": False, "warning": "w"},
    ],
)
def test_error_must_match_validity(kwargs: dict[str, object]) -> None:
    with pytest.raises(ValueError, match="error must be set exactly when valid is False"):
        ValidationResult(**kwargs)  # type: ignore[arg-type]


def test_ok_and_fail_constructors() -> None:
    ok = ValidationResult.ok(success="fine", warning="careful")
    assert ok.valid
    assert ok.error is None

    failed = ValidationResult.fail("broken")
    assert not failed.valid
    assert failed.error == "broken"
    assert failed.warning is None
    assert failed.success is None


def test_bare_ok_has_no_message() -> None:
    result = ValidationResult.ok()
    assert result.message is None
    assert result.kind is None


@pytest.mark.parametrize(
    ("result", "message", "kind"),
    [
        (ValidationResult.fail("broken"), "broken", "error"),
        (ValidationResult.ok(success="fine", warning="careful"), "careful", "warning"),
        (ValidationResult.ok(success="fine"), "fine", "success"),
    ],
)
def test_message_priority(result: ValidationResult, message: str, kind: str) -> None:
    assert result.message == message
    assert result.kind == kind


def test_error_outranks_advisories() -> None:
    result = ValidationResult(valid=False, error="broken", warning="careful", success="fine")
    assert result.message == "broken"
    assert result.kind == "error"
