from __future__ import annotations

from dataclasses import dataclass

from metricgate.core.types import Operator, Unit


@dataclass(frozen=True, slots=True)
class Scalar:
    """A single numeric threshold value."""

    value: float


@dataclass(frozen=True, slots=True)
class Ratio:
    """A ``numerator/denominator`` threshold, e.g. successes per time window.

    Both sides are always present. A zero denominator is representable;
    deciding what it means is left to whoever evaluates the metric.
    """

    numerator: float
    denominator: float

    @property
    def value(self) -> float | None:
        if self.denominator == 0:
            return None
        return self.numerator / self.denominator


Magnitude = Scalar | Ratio


@dataclass(frozen=True, slots=True)
class ThresholdExpression:
    """Structured form of one threshold string such as ``">=10/3min"``.

    Fields
    ------
    operator:
        Leading comparison operator, or ``None`` for a bare magnitude
        (implicit equality for downstream consumers).
    magnitude:
        :class:`Scalar` or :class:`Ratio`.
    unit:
        Trailing unit token, or ``None`` when the string carries none.
    """

    operator: Operator | None
    magnitude: Magnitude
    unit: Unit | None = None

    @property
    def is_ratio(self) -> bool:
        return isinstance(self.magnitude, Ratio)

    @property
    def value(self) -> float | None:
        """Numeric value of the magnitude (ratio quotient for ratios)."""
        return self.magnitude.value

    def __str__(self) -> str:
        op = self.operator.value if self.operator else ""
        if isinstance(self.magnitude, Ratio):
            body = f"{format_number(self.magnitude.numerator)}/{format_number(self.magnitude.denominator)}"
        else:
            body = format_number(self.magnitude.value)
        unit = self.unit.value if self.unit else ""
        return f"{op}{body}{unit}"


def format_number(number: float) -> str:
    """Render *number* without a trailing ``.0`` for whole values."""
    return str(int(number)) if number.is_integer() else str(number)


__all__ = ["Magnitude", "Ratio", "Scalar", "ThresholdExpression", "format_number"]
