"""Threshold string scanning and parsing.

A threshold is read in three fixed stages: operator prefix, unit suffix,
then the numeric body. Each stage is a plain left-to-right scan, so
parsing is linear in the input length.
"""

from __future__ import annotations

import math
from dataclasses import dataclass

from metricgate._meta import logger
from metricgate.core.config import OPERATOR_SCAN_ORDER, OPERATOR_TYPOS, UNIT_SCAN_ORDER
from metricgate.core.model.threshold import Magnitude, Ratio, Scalar, ThresholdExpression
from metricgate.core.types import Operator, Unit

_DIGITS = frozenset("0123456789")
_SCALAR_CHARS = _DIGITS | frozenset("+-.eE")


@dataclass(frozen=True, slots=True)
class ThresholdScan:
    """Intermediate result of scanning a threshold string.

    Fields
    ------
    text:
        The trimmed input.
    operator:
        Recognized leading operator, if any.
    typo:
        A rejected operator typo (``"=>"`` or ``"=<"``) found at the start.
    fragment:
        Everything after the operator, trimmed; used to echo user input.
    unit:
        Recognized trailing unit, if any.
    body:
        The numeric remainder with all whitespace removed.
    """

    text: str
    operator: Operator | None
    typo: str | None
    fragment: str
    unit: Unit | None
    body: str

    @property
    def has_slash(self) -> bool:
        return "/" in self.body


def scan_threshold(text: str | None) -> ThresholdScan:
    """Split *text* into operator, unit and numeric body without judging the body."""
    trimmed = (text or "").strip()

    typo = next((t for t in OPERATOR_TYPOS if trimmed.startswith(t)), None)
    operator: Operator | None = None
    rest = trimmed
    if typo is None:
        for candidate in OPERATOR_SCAN_ORDER:
            if trimmed.startswith(candidate.value):
                operator = candidate
                rest = trimmed[len(candidate.value) :].strip()
                break
    else:
        rest = trimmed[len(typo) :].strip()

    unit, remainder = _split_unit(rest)
    body = "".join(remainder.split())
    return ThresholdScan(
        text=trimmed,
        operator=operator,
        typo=typo,
        fragment=rest,
        unit=unit,
        body=body,
    )


def parse_threshold(text: str | None) -> ThresholdExpression | None:
    """Parse a threshold like ``">=10/3min"``, ``"0%"`` or ``"20 min"``.

    Returns ``None`` for anything unparseable; never raises.
    """
    scan = scan_threshold(text)
    if not scan.text or scan.typo is not None:
        return None
    magnitude = parse_magnitude(scan.body)
    if magnitude is None:
        logger.debug("unparseable threshold: %r", scan.text)
        return None
    return ThresholdExpression(operator=scan.operator, magnitude=magnitude, unit=scan.unit)


def parse_magnitude(body: str) -> Magnitude | None:
    """Parse a whitespace-free numeric body as a ratio or a scalar."""
    if not body:
        return None
    if "/" in body:
        left, _, right = body.partition("/")
        if not (is_unsigned_number(left) and is_unsigned_number(right)):
            return None
        numerator, denominator = float(left), float(right)
        if not (math.isfinite(numerator) and math.isfinite(denominator)):
            return None
        return Ratio(numerator=numerator, denominator=denominator)

    # Underscores and letters other than an exponent marker are rejected before float().
    if not set(body) <= _SCALAR_CHARS or not any(ch in _DIGITS for ch in body):
        return None
    try:
        value = float(body)
    except ValueError:
        return None
    if not math.isfinite(value):
        return None
    return Scalar(value=value)


def is_unsigned_number(text: str) -> bool:
    """Return True for digits with an optional fractional part, e.g. ``10`` or ``2.5``."""
    return bool(text) and _number_end(text, 0) == len(text)


def is_complete_ratio(body: str) -> bool:
    """Return True when *body* is exactly ``<number>/<number>``."""
    return isinstance(parse_magnitude(body), Ratio)


def _number_end(text: str, start: int) -> int | None:
    n = len(text)
    i = start
    while i < n and text[i] in _DIGITS:
        i += 1
    if i == start:
        return None
    if i < n and text[i] == ".":
        j = i + 1
        while j < n and text[j] in _DIGITS:
            j += 1
        if j == i + 1:
            return None
        i = j
    return i


def _split_unit(rest: str) -> tuple[Unit | None, str]:
    for unit in UNIT_SCAN_ORDER:
        if rest.endswith(unit.value):
            return unit, rest[: -len(unit.value)].rstrip()
    return None, rest


__all__ = [
    "ThresholdScan",
    "is_complete_ratio",
    "is_unsigned_number",
    "parse_magnitude",
    "parse_threshold",
    "scan_threshold",
]
