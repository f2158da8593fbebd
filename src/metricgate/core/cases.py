"""Classification of (desired, worst-case) threshold pairs.

Scoring code downstream handles a small number of threshold shapes; this
module names the shape of a pair without looking at any submitted data.
"""

from __future__ import annotations

from dataclasses import dataclass
from enum import StrEnum

from metricgate._meta import logger
from metricgate.core.model.threshold import Ratio, ThresholdExpression
from metricgate.core.threshold import parse_threshold
from metricgate.core.types import Operator, Unit


class ThresholdCaseType(StrEnum):
    SIMPLE_BINARY = "simple_binary"  # desired "1", no worst case
    RATIO_WITH_MIN_THRESHOLD = "ratio_with_min_threshold"  # ">=10/20min" / "0/20min"
    INVERSE_RATIO_WITH_MAX = "inverse_ratio_with_max"  # "0/1min" / ">=10/1min"
    TIME_THRESHOLD = "time_threshold"  # "20min" / ">20 min"
    ZERO_WITH_MAX_THRESHOLD = "zero_with_max_threshold"  # "0seg" / ">=15 seg"
    PERCENTAGE_WITH_MAX = "percentage_with_max"  # "0 %" / ">=10%"
    NUMERIC_WITH_MAX = "numeric_with_max"  # "1" / ">=4"
    NUMERIC_WITH_MIN = "numeric_with_min"  # "4" / "0"


@dataclass(frozen=True, slots=True)
class ThresholdCase:
    case_type: ThresholdCaseType
    desired: ThresholdExpression | None
    worst: ThresholdExpression | None


def classify_thresholds(desired: str | None, worst: str | None) -> ThresholdCase:
    """Classify a threshold pair; unrecognized pairs fall back to SIMPLE_BINARY."""
    d = parse_threshold(desired)
    w = parse_threshold(worst)
    case_type = _classify(d, w)
    if case_type is None:
        logger.warning("no threshold case matched desired=%r worst=%r; using simple binary", desired, worst)
        return ThresholdCase(ThresholdCaseType.SIMPLE_BINARY, desired=d, worst=None)
    return ThresholdCase(case_type, desired=d, worst=w)


def _classify(d: ThresholdExpression | None, w: ThresholdExpression | None) -> ThresholdCaseType | None:
    if d is not None and w is None and d.unit is None and d.value in {0.0, 1.0}:
        return ThresholdCaseType.SIMPLE_BINARY
    if d is None or w is None:
        return None

    d_ratio = d.magnitude if isinstance(d.magnitude, Ratio) else None
    w_ratio = w.magnitude if isinstance(w.magnitude, Ratio) else None

    if (
        d.operator is Operator.GTE
        and d_ratio is not None
        and d_ratio.numerator
        and d_ratio.denominator
        and d.unit is not None
        and w_ratio is not None
        and w_ratio.numerator == 0
    ):
        return ThresholdCaseType.RATIO_WITH_MIN_THRESHOLD

    if (
        d_ratio is not None
        and d_ratio.numerator == 0
        and d_ratio.denominator
        and w.operator is Operator.GTE
        and w_ratio is not None
        and w_ratio.numerator
    ):
        return ThresholdCaseType.INVERSE_RATIO_WITH_MAX

    if d.operator is None and d.unit is Unit.MINUTES and w.operator is not None and w.unit is Unit.MINUTES:
        return ThresholdCaseType.TIME_THRESHOLD

    if d.value == 0 and w.operator is Operator.GTE:
        if d.unit is Unit.SECONDS_LONG and w.unit is Unit.SECONDS_LONG:
            return ThresholdCaseType.ZERO_WITH_MAX_THRESHOLD
        if d.unit is Unit.PERCENT and w.unit is Unit.PERCENT:
            return ThresholdCaseType.PERCENTAGE_WITH_MAX

    if d.operator is None and d.unit is None and w.unit is None:
        if w.operator is Operator.GTE:
            return ThresholdCaseType.NUMERIC_WITH_MAX
        if w.value == 0:
            return ThresholdCaseType.NUMERIC_WITH_MIN

    return None


__all__ = ["ThresholdCase", "ThresholdCaseType", "classify_thresholds"]
