"""PolySolver — parse, reduce and solve polynomial equations of degree ≤ 2."""

from polysolver.engine import report_lines, solve_equation
from polysolver.formatter import format_polynomial, format_terms
from polysolver.polynomial import ErrorKind, ParseError, Polynomial, parse_side

__all__ = [
    "ErrorKind",
    "ParseError",
    "Polynomial",
    "format_polynomial",
    "format_terms",
    "parse_side",
    "report_lines",
    "solve_equation",
]
