import logging

import pytest

from metricgate.core.cases import ThresholdCaseType, classify_thresholds


@pytest.mark.parametrize(
    ("desired", "worst", "expected"),
    [
        ("1", None, ThresholdCaseType.SIMPLE_BINARY),
        ("0", None, ThresholdCaseType.SIMPLE_BINARY),
        (">=10/20min", "0/20min", ThresholdCaseType.RATIO_WITH_MIN_THRESHOLD),
        ("0/1min", ">=10/1min", ThresholdCaseType.INVERSE_RATIO_WITH_MAX),
        ("20min", ">20 min", ThresholdCaseType.TIME_THRESHOLD),
        ("0seg", ">=15 seg", ThresholdCaseType.ZERO_WITH_MAX_THRESHOLD),
        ("0 %", ">=10%", ThresholdCaseType.PERCENTAGE_WITH_MAX),
        ("0/5seg", ">=15 seg", ThresholdCaseType.ZERO_WITH_MAX_THRESHOLD),
        ("0/5%", ">=10%", ThresholdCaseType.PERCENTAGE_WITH_MAX),
        ("4", "0/5", ThresholdCaseType.NUMERIC_WITH_MIN),
        ("1", ">=4", ThresholdCaseType.NUMERIC_WITH_MAX),
        ("4", "0", ThresholdCaseType.NUMERIC_WITH_MIN),
    ],
)
def test_classify_thresholds(desired: str, worst: str | None, expected: ThresholdCaseType) -> None:
    case = classify_thresholds(desired, worst)
    assert case.case_type is expected
    assert case.desired is not None


def test_unmatched_pair_falls_back_to_simple_binary(caplog: pytest.LogCaptureFixture) -> None:
    with caplog.at_level(logging.WARNING, logger="metricgate"):
        case = classify_thresholds("5 h", "<2 h")
    assert case.case_type is ThresholdCaseType.SIMPLE_BINARY
    assert case.worst is None
    assert "no threshold case matched" in caplog.text


def test_unparseable_desired_falls_back() -> None:
    case = classify_thresholds("abc", None)
    assert case.case_type is ThresholdCaseType.SIMPLE_BINARY
    assert case.desired is None
