from __future__ import annotations

from dataclasses import dataclass
from typing import TYPE_CHECKING

if TYPE_CHECKING:
    from metricgate.core.types import MessageKind


@dataclass(frozen=True, slots=True)
class ValidationResult:
    """Outcome of a validating function.

    ``error`` is set if and only if ``valid`` is False. ``warning`` and
    ``success`` are advisory texts for the form layer and never affect
    ``valid``.
    """

    valid: bool
    error: str | None = None
    warning: str | None = None
    success: str | None = None

    def __post_init__(self) -> None:
        if self.valid == (self.error is not None):
            msg = "ValidationResult.error must be set exactly when valid is False"
            raise ValueError(msg)

    @classmethod
    def ok(cls, *, success: str | None = None, warning: str | None = None) -> ValidationResult:
        return cls(valid=True, success=success, warning=warning)

    @classmethod
    def fail(cls, error: str) -> ValidationResult:
        return cls(valid=False, error=error)

    @property
    def kind(self) -> MessageKind | None:
        """Severity of the message to show, if any."""
        if self.error:
            return "error"
        if self.warning:
            return "warning"
        if self.success:
            return "success"
        return None

    @property
    def message(self) -> str | None:
        """The one message a form should display for this result."""
        return self.error or self.warning or self.success or None


@dataclass(frozen=True, slots=True)
class DeclaredVariable:
    """A variable symbol and description registered alongside a formula."""

    symbol: str
    description: str = ""


@dataclass(frozen=True, slots=True)
class FixedVariableAssignment:
    """A formula variable replaced by a constant implied by a threshold."""

    symbol: str
    fixed_value: float
    reason: str


__all__ = ["DeclaredVariable", "FixedVariableAssignment", "ValidationResult"]
