"""Formula tokenizing, variable extraction and syntax validation.

Formulas are arithmetic expressions over uppercase variable symbols such
as ``(N_OK / N_TOTAL) * 100``. Only their shape is inspected here; they
are never evaluated.
"""

from __future__ import annotations

from dataclasses import dataclass
from enum import StrEnum

from metricgate.core.config import FORMULA_ALLOWED_CHARS, FORMULA_ALLOWED_DISPLAY
from metricgate.core.model.validation import ValidationResult
from metricgate.core.types import FormulaVariableSet

_UPPER = frozenset("ABCDEFGHIJKLMNOPQRSTUVWXYZ")
_DIGITS = frozenset("0123456789")
_VARIABLE_TAIL = _UPPER | _DIGITS | {"_"}
_OPERATORS = frozenset("+-*/")


class TokenKind(StrEnum):
    VARIABLE = "variable"
    NUMBER = "number"
    OPERATOR = "operator"
    LPAREN = "lparen"
    RPAREN = "rparen"
    WHITESPACE = "whitespace"
    OTHER = "other"


@dataclass(frozen=True, slots=True)
class Token:
    kind: TokenKind
    text: str
    start: int


def tokenize_formula(formula: str | None) -> list[Token]:
    """Split *formula* into tokens in a single pass.

    Never fails: characters with no meaning in a formula (lowercase
    letters, ``@``, a lone ``_`` ...) become ``OTHER`` tokens.
    """
    text = formula or ""
    tokens: list[Token] = []
    n = len(text)
    i = 0
    while i < n:
        ch = text[i]
        start = i
        if ch in _UPPER:
            i += 1
            while i < n and text[i] in _VARIABLE_TAIL:
                i += 1
            kind = TokenKind.VARIABLE
        elif ch in _DIGITS:
            i += 1
            while i < n and (text[i] in _DIGITS or text[i] == "."):
                i += 1
            kind = TokenKind.NUMBER
        elif ch in _OPERATORS:
            i += 1
            kind = TokenKind.OPERATOR
        elif ch == "(":
            i += 1
            kind = TokenKind.LPAREN
        elif ch == ")":
            i += 1
            kind = TokenKind.RPAREN
        elif ch.isspace():
            i += 1
            while i < n and text[i].isspace():
                i += 1
            kind = TokenKind.WHITESPACE
        else:
            i += 1
            kind = TokenKind.OTHER
        tokens.append(Token(kind=kind, text=text[start:i], start=start))
    return tokens


def significant_tokens(formula: str | None) -> list[Token]:
    """Tokens of *formula* without whitespace."""
    return [t for t in tokenize_formula(formula) if t.kind is not TokenKind.WHITESPACE]


def extract_variables(formula: str | None) -> FormulaVariableSet:
    """Return the distinct variable symbols of *formula*, sorted.

    Example: ``"1-(A/B)"`` -> ``("A", "B")``.
    """
    symbols = {t.text for t in tokenize_formula(formula) if t.kind is TokenKind.VARIABLE}
    return tuple(sorted(symbols))


def find_single_letter_division(formula: str | None) -> tuple[str, str] | None:
    """Return ``(numerator, denominator)`` of the first ``X / Y`` division.

    Both operands must be single-letter variables written directly around
    the slash; ``(A+B)/C`` or ``AB/C`` do not qualify.
    """
    tokens = significant_tokens(formula)
    for left, op, right in zip(tokens, tokens[1:], tokens[2:], strict=False):
        if (
            op.text == "/"
            and left.kind is TokenKind.VARIABLE
            and right.kind is TokenKind.VARIABLE
            and len(left.text) == 1
            and len(right.text) == 1
        ):
            return left.text, right.text
    return None


def validate_formula(formula: str | None, required: bool = True) -> ValidationResult:  # noqa: FBT001, FBT002
    """Validate the syntax of a metric formula.

    The parenthesis check compares totals only; it does not verify that
    every ``)`` closes an earlier ``(``.
    """
    trimmed = (formula or "").strip()

    if not trimmed:
        if required:
            return ValidationResult.fail("The formula is mandatory for metrics")
        return ValidationResult.ok(warning="The formula is optional, but it enables automatic calculations")

    if not any(ch in _UPPER for ch in trimmed):
        return ValidationResult.fail(
            "The formula must contain at least one variable (uppercase letters: A, B, C, ...)"
        )

    if trimmed.count("(") != trimmed.count(")"):
        return ValidationResult.fail("Unbalanced parentheses in the formula")

    if any(ch not in FORMULA_ALLOWED_CHARS and not ch.isspace() for ch in trimmed):
        return ValidationResult.fail(
            f"The formula contains forbidden characters. Use: {FORMULA_ALLOWED_DISPLAY}"
        )

    variables = extract_variables(trimmed)
    summary = _variables_summary(variables)

    if "*" in trimmed and "100" in trimmed:
        return ValidationResult.ok(success=f"✓ Percentage formula detected ({summary})")
    if "/" in trimmed:
        return ValidationResult.ok(success=f"✓ Division formula detected ({summary})")
    return ValidationResult.ok(success=f"✓ Valid formula ({summary})")


def _variables_summary(variables: FormulaVariableSet) -> str:
    count = len(variables)
    noun = "variable" if count == 1 else "variables"
    return f"{count} {noun}: {', '.join(variables)}"


__all__ = [
    "Token",
    "TokenKind",
    "extract_variables",
    "find_single_letter_division",
    "significant_tokens",
    "tokenize_formula",
    "validate_formula",
]
