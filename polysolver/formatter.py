"""Canonical text rendering for polynomials and complex roots."""

"""
A term list is an ordered sequence of ``(coefficient, symbol)`` pairs.
The symbol is ``""`` for a constant, ``"X"`` / ``"X^2"`` for a power of
the variable, or ``"i"`` for the imaginary part of a complex root.
The order is kept exactly as given; nothing is sorted here.
"""

import numpy as np

from polysolver.numeric import absolute

_ZERO = "0"


def _fmt_num(value: float) -> str:
    """Format a float in its natural positional form.

    - Integral values print without a fractional part (``7`` not ``7.0``).
    - Everything else uses the shortest digits that round-trip, never
      scientific notation (``0.00001`` not ``1e-05``), so the parser can
      read the result back.
    """
    return np.format_float_positional(float(value), trim="-")


def _power_symbol(exponent: int, variable: str = "X") -> str:
    if exponent == 0:
        return ""
    if exponent == 1:
        return variable
    return f"{variable}^{exponent}"


def format_terms(pairs) -> str:
    """Join ``(coefficient, symbol)`` pairs into ``"a + bX - cX^2"`` form.

    Zero coefficients are skipped; a unit coefficient in front of a
    symbol is not printed; an all-zero list renders as ``"0"``.
    """
    out = _ZERO
    for value, symbol in pairs:
        if value == 0:
            continue
        magnitude = absolute(value)
        if magnitude == 1 and symbol != "":
            printed = ""
        else:
            printed = _fmt_num(magnitude)
        if out == _ZERO:
            sign = "-" if value < 0 else ""
            out = f"{sign}{printed}{symbol}"
        else:
            sign = "-" if value < 0 else "+"
            out = f"{out} {sign} {printed}{symbol}"
    return out


def format_polynomial(poly, variable: str = "X") -> str:
    """Render *poly* with ascending exponents."""
    return format_terms(
        (coeff, _power_symbol(exp, variable)) for exp, coeff in poly.terms()
    )


def format_complex(real: float, imag: float) -> str:
    """Render ``real + imag·i`` through the same term rules."""
    return format_terms([(real, ""), (imag, "i")])
