"""Substitution check of computed roots against the original equation.

Each root is substituted into both original sides, built as SymPy
expressions, and the two evaluated values are compared, producing one
explained step per root.
"""

import logging

from sympy import I, Symbol

from polysolver.formatter import _fmt_num, format_complex

logger = logging.getLogger(__name__)

REL_TOL = 1e-9


def _display(value: complex) -> str:
    if value.imag == 0:
        return _fmt_num(value.real)
    return format_complex(value.real, value.imag)


def _to_sympy_number(root):
    if isinstance(root, complex):
        return root.real + root.imag * I
    return root


def _evaluate(expr, symbol, root) -> complex:
    return complex(expr.subs(symbol, _to_sympy_number(root)).evalf())


def _agrees(left: complex, right: complex) -> bool:
    scale = max(1.0, abs(left), abs(right))
    return abs(left - right) <= REL_TOL * scale


def verify_roots(lhs, rhs, roots, variable: str = "X") -> tuple[list[dict], bool]:
    """Substitute every root into ``lhs = rhs``.

    *lhs* and *rhs* are the parsed :class:`Polynomial` sides.  Returns
    ``(steps, all_ok)``; with no roots the step list is empty and
    ``all_ok`` is ``True``.
    """
    sym = Symbol(variable)
    lhs_expr = lhs.to_sympy(sym)
    rhs_expr = rhs.to_sympy(sym)

    steps = []
    all_ok = True
    for root in roots:
        left = _evaluate(lhs_expr, sym, root)
        right = _evaluate(rhs_expr, sym, root)
        ok = _agrees(left, right)
        all_ok = all_ok and ok
        root_str = _display(complex(root))
        verdict = "✓ both sides agree" if ok else "✗ sides differ"
        steps.append({
            "description": f"Substitute {variable} = {root_str}",
            "expression": f"{_display(left)} = {_display(right)}",
            "explanation": (
                f"Replacing {variable} with {root_str} in the original equation, "
                f"the left side evaluates to {_display(left)} and the right side "
                f"to {_display(right)} — {verdict}."
            ),
            "passed": ok,
        })
        if not ok:
            logger.warning("Root %s does not satisfy the equation (%s != %s)",
                           root_str, left, right)
    return steps, all_ok
