"""Sparse polynomial model and the one-side expression parser."""

"""
A side of an equation such as ``"5 * X^2 + 2"`` is scanned term by term
with a single regular expression.  Each matched term is folded into an
exponent → coefficient mapping, and the matched spans must cover the whole
side. Any character the term grammar cannot account for makes the side
invalid instead of being silently dropped.
"""

import logging
import re
from enum import Enum
from functools import lru_cache

from sympy import Float, S

from polysolver.formatter import format_polynomial

logger = logging.getLogger(__name__)

# Largest exponent literal accepted (unsigned 32-bit).
MAX_EXPONENT = 2 ** 32 - 1

DEFAULT_VARIABLE = "X"


class ErrorKind(Enum):
    INVALID_SYNTAX = "invalid_syntax"
    EXPONENT_OVERFLOW = "exponent_overflow"
    DEGREE_TOO_HIGH = "degree_too_high"


ERROR_MESSAGES = {
    ErrorKind.INVALID_SYNTAX: "Invalid input",
    ErrorKind.EXPONENT_OVERFLOW: (
        "The value of an exponent is greater than the maximal u32 value"
    ),
    ErrorKind.DEGREE_TOO_HIGH: (
        "The polynomial degree is strictly greater than 2, I can't solve."
    ),
}


class ParseError(ValueError):
    """Raised when a side (or the whole equation) cannot be read.

    ``kind`` is the :class:`ErrorKind` tag; ``str(err)`` is the message.
    """

    def __init__(self, kind: ErrorKind, message: str = None):
        self.kind = kind
        super().__init__(message or ERROR_MESSAGES[kind])


class Polynomial:
    """Immutable mapping exponent → non-zero coefficient.

    The empty mapping is the zero polynomial (degree 0).
    """

    __slots__ = ("_coefficients",)

    def __init__(self, coefficients=None):
        items = dict(coefficients or {})
        for exp in items:
            if not isinstance(exp, int) or exp < 0:
                raise ValueError(f"Exponent must be a non-negative integer, got {exp!r}")
        self._coefficients = _pruned(items)

    # ── construction ────────────────────────────────────────────────────

    @classmethod
    def parse(cls, text: str, variable: str = DEFAULT_VARIABLE) -> "Polynomial":
        return parse_side(text, variable)

    # ── queries ─────────────────────────────────────────────────────────

    def degree(self) -> int:
        return max(self._coefficients, default=0)

    def coefficient(self, exponent: int) -> float:
        return self._coefficients.get(exponent, 0.0)

    def terms(self) -> list:
        """``(exponent, coefficient)`` pairs, lowest exponent first."""
        return sorted(self._coefficients.items())

    def as_dict(self) -> dict:
        return dict(self._coefficients)

    def is_zero(self) -> bool:
        return not self._coefficients

    # ── combination ─────────────────────────────────────────────────────

    def combine(self, other: "Polynomial", subtract: bool = True) -> "Polynomial":
        """Return ``self - other`` (or ``self + other``) as a new polynomial."""
        sign = -1.0 if subtract else 1.0
        merged = dict(self._coefficients)
        for exp, value in other._coefficients.items():
            merged[exp] = merged.get(exp, 0.0) + sign * value
        return Polynomial(merged)

    def __sub__(self, other):
        if not isinstance(other, Polynomial):
            return NotImplemented
        return self.combine(other, subtract=True)

    def __add__(self, other):
        if not isinstance(other, Polynomial):
            return NotImplemented
        return self.combine(other, subtract=False)

    def prune(self) -> "Polynomial":
        return Polynomial(self._coefficients)

    def to_sympy(self, symbol):
        """Build the SymPy expression ``Σ c·symbol**e``."""
        expr = S.Zero
        for exp, coeff in self.terms():
            expr += Float(coeff) * symbol ** exp
        return expr

    # ── dunder ──────────────────────────────────────────────────────────

    def __eq__(self, other):
        if not isinstance(other, Polynomial):
            return NotImplemented
        return self._coefficients == other._coefficients

    def __hash__(self):
        return hash(frozenset(self._coefficients.items()))

    def __repr__(self):
        body = ", ".join(f"{exp}: {coeff!r}" for exp, coeff in self.terms())
        return f"Polynomial({{{body}}})"

    def __str__(self):
        return format_polynomial(self)

    def format(self, variable: str = DEFAULT_VARIABLE) -> str:
        return format_polynomial(self, variable)


def _pruned(coefficients: dict) -> dict:
    return {exp: float(c) for exp, c in coefficients.items() if c != 0}


# ── Parsing ─────────────────────────────────────────────────────────────

_NUMBER = r"-?\d+(?:\.\d+)?"
_OPTIONAL_NUMBER = r"-?(?:\d+(?:\.\d+)?)?"


@lru_cache(maxsize=None)
def _term_regex(variable: str):
    """Compile the term pattern for one variable letter.

    Alternatives are tried in order: explicit ``a * X^n`` first, then
    ``aX^n``, then a bare constant. Hence ``2 * X`` is never read as the
    constant ``2`` followed by garbage.
    """
    var = f"[{variable.upper()}{variable.lower()}]"
    pattern = (
        r"(?:^|(?P<operator>[+-]))"
        r"(?:"
        rf"(?: *(?P<a1>{_NUMBER}) *\* *(?P<a2>{_OPTIONAL_NUMBER})?{var}(?:\^(?P<b1>\d+))? *)"
        rf"|(?: *(?P<a3>{_OPTIONAL_NUMBER})?{var}(?:\^(?P<b2>\d+))? *)"
        rf"|(?: *(?P<a4>{_NUMBER}) *)"
        r")"
    )
    return re.compile(pattern, re.ASCII)


def _check_variable(variable: str) -> str:
    if not (isinstance(variable, str) and len(variable) == 1
            and variable.isascii() and variable.isalpha()):
        raise ValueError(f"Variable must be a single letter, got {variable!r}")
    return variable


def _parse_coefficient(text) -> float:
    """A missing or empty coefficient is 1; a bare ``-`` is -1."""
    if text is None or text == "":
        return 1.0
    if text == "-":
        return -1.0
    return float(text)


def _term_exponent(match) -> int:
    raw = match.group("b1") or match.group("b2")
    if raw is None:
        return 0 if match.group("a4") is not None else 1
    # Length check first: int() refuses literals past the interpreter's digit limit.
    digits = raw.lstrip("0")
    if len(digits) > len(str(MAX_EXPONENT)) or (digits and int(digits) > MAX_EXPONENT):
        raise ParseError(ErrorKind.EXPONENT_OVERFLOW)
    return int(digits or "0")


def parse_side(text: str, variable: str = DEFAULT_VARIABLE) -> Polynomial:
    """Parse one side of an equation into a :class:`Polynomial`.

    Raises :class:`ParseError` with ``INVALID_SYNTAX`` when the terms do
    not cover *text* exactly, or ``EXPONENT_OVERFLOW`` for an exponent
    above 2**32 - 1.
    """
    regex = _term_regex(_check_variable(variable))
    acc = {}
    matched = 0
    for match in regex.finditer(text):
        matched += len(match.group(0))
        coeff = 1.0
        for name in ("a1", "a2", "a3", "a4"):
            coeff *= _parse_coefficient(match.group(name))
        if match.group("operator") == "-":
            coeff = -coeff
        exp = _term_exponent(match)
        acc[exp] = acc.get(exp, 0.0) + coeff

    if matched == 0 or matched != len(text):
        logger.debug("Unmatched input in side %r (%d of %d chars matched)",
                     text, matched, len(text))
        raise ParseError(ErrorKind.INVALID_SYNTAX)

    return Polynomial(acc)
