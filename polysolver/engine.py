"""Step-by-step polynomial equation solver (degree ≤ 2)."""

"""
Parses an equation such as ``"5 * X^2 + 2 = 6 * X^2 + 1 * X^1"``, reduces
it to ``P(X) = 0``, classifies it by degree and produces the roots together
with human-readable steps in the trail format:

    given, method, steps, reduced_form, degree, case, discriminant,
    solutions, roots, final_answer, verification_steps, summary, error
"""

import logging
import time
from datetime import datetime

import numpy as np
import sympy

from polysolver.formatter import _fmt_num, format_complex
from polysolver.numeric import absolute, sqrt
from polysolver.numerical import roots_for_case
from polysolver.polynomial import (
    DEFAULT_VARIABLE,
    ERROR_MESSAGES,
    ErrorKind,
    ParseError,
    parse_side,
)
from polysolver.verification import verify_roots

logger = logging.getLogger(__name__)

MODES = ("formula", "numerical")
DEFAULT_MODE = "formula"

_DEGREE_NAMES = {0: "constant", 1: "linear", 2: "quadratic"}

_CASE_LABELS = {
    "all_reals": "Every number is a solution",
    "no_solution": "There is no solution",
    "one_real": "One real solution",
    "two_real": "Two real solutions",
    "complex_pair": "Two complex solutions",
    "degree_too_high": "Degree too high",
}


def _degree_name(degree: int) -> str:
    return _DEGREE_NAMES.get(degree, f"degree-{degree} polynomial")


def _fmt_root(value) -> str:
    if isinstance(value, complex):
        return format_complex(value.real, value.imag)
    # Fold -0.0 into 0.0 so a zero root never prints as "-0".
    return _fmt_num(value + 0.0)


def split_equation(equation_str: str) -> tuple[str, str]:
    """Split on ``=``; anything but exactly two sides is invalid."""
    parts = equation_str.split("=")
    if len(parts) != 2:
        raise ParseError(ErrorKind.INVALID_SYNTAX)
    return parts[0], parts[1]


# ── Classification ──────────────────────────────────────────────────────

def _formula_roots(case: str, a: float, b: float, discriminant: float) -> list:
    if case == "two_real":
        root_d = sqrt(discriminant)
        return [(-b + root_d) / (2 * a), (-b - root_d) / (2 * a)]
    if case == "one_real":
        return [-b / (2 * a)]
    real = -b / (2 * a)
    imag = sqrt(absolute(discriminant)) / (2 * a)
    return [complex(real, imag), complex(real, -imag)]


def _classify(reduced, mode: str) -> dict:
    """Decide the solution case of ``reduced = 0`` and compute its roots."""
    degree = reduced.degree()
    out = {"case": None, "discriminant": None, "roots": []}

    if degree == 0:
        out["case"] = "all_reals" if reduced.coefficient(0) == 0 else "no_solution"
        return out

    if degree == 1:
        out["case"] = "one_real"
        if mode == "numerical":
            out["roots"] = roots_for_case(reduced, "one_real")
        else:
            out["roots"] = [-reduced.coefficient(0) / reduced.coefficient(1)]
        return out

    if degree == 2:
        a = reduced.coefficient(2)
        b = reduced.coefficient(1)
        c = reduced.coefficient(0)
        discriminant = b * b - 4 * a * c
        out["discriminant"] = discriminant
        if discriminant > 0:
            out["case"] = "two_real"
        elif discriminant < 0:
            out["case"] = "complex_pair"
        else:
            out["case"] = "one_real"
        if mode == "numerical":
            out["roots"] = roots_for_case(reduced, out["case"])
        else:
            out["roots"] = _formula_roots(out["case"], a, b, discriminant)
        return out

    out["case"] = "degree_too_high"
    return out


def _final_answer(case: str, solutions: list) -> str:
    if case == "degree_too_high":
        return ERROR_MESSAGES[ErrorKind.DEGREE_TOO_HIGH]
    if not solutions:
        return _CASE_LABELS[case]
    return "\n".join(solutions)


# ── Steps ───────────────────────────────────────────────────────────────

def _build_steps(lhs_raw, rhs_raw, lhs, rhs, reduced, variable, info) -> list:
    degree = reduced.degree()
    v = variable
    steps = [
        {
            "description": "Starting with the original equation",
            "expression": f"{lhs_raw.strip()} = {rhs_raw.strip()}",
            "explanation": (
                f"We are given {lhs_raw.strip()} = {rhs_raw.strip()}. "
                f"Our goal is to find every value of {v} that makes both sides equal."
            ),
        },
        {
            "description": "Combine like terms on each side",
            "expression": f"{lhs.format(v)} = {rhs.format(v)}",
            "explanation": (
                "Terms with the same power of the variable are added together "
                "and written from the lowest power to the highest."
            ),
        },
        {
            "description": "Move every term to the left side",
            "expression": f"{reduced.format(v)} = 0",
            "explanation": (
                f"Subtracting {rhs.format(v)} from both sides gives the reduced form. "
                f"Its degree is {degree} ({_degree_name(degree)})."
            ),
        },
    ]

    case = info["case"]
    if case == "degree_too_high":
        steps.append({
            "description": "Check the degree",
            "expression": f"degree = {degree}",
            "explanation": (
                f"The highest power of {v} is {degree}. Only equations up to "
                f"degree 2 can be solved, so no roots are computed."
            ),
        })
    elif degree == 0:
        const = _fmt_num(reduced.coefficient(0))
        if case == "all_reals":
            steps.append({
                "description": "The variable cancels — identity",
                "expression": "0 = 0",
                "explanation": (
                    f"After reduction nothing is left: 0 = 0 holds for every {v}, "
                    f"so every real number is a solution."
                ),
            })
        else:
            steps.append({
                "description": "The variable cancels — contradiction",
                "expression": f"{const} = 0",
                "explanation": (
                    f"After reduction we are left with {const} = 0, which is never "
                    f"true, so no value of {v} satisfies the equation."
                ),
            })
    elif degree == 1:
        b = _fmt_num(reduced.coefficient(1))
        c = _fmt_num(reduced.coefficient(0))
        steps.append({
            "description": f"Isolate {v}",
            "expression": f"{v} = -({c}) / {b}",
            "explanation": (
                f"For b{v} + c = 0 the unique solution is {v} = -c / b "
                f"with b = {b} and c = {c}."
            ),
        })
    else:
        a = _fmt_num(reduced.coefficient(2))
        b = _fmt_num(reduced.coefficient(1))
        c = _fmt_num(reduced.coefficient(0))
        d = _fmt_num(info["discriminant"])
        steps.append({
            "description": "Compute the discriminant",
            "expression": f"Δ = b² - 4ac = {d}",
            "explanation": f"With a = {a}, b = {b}, c = {c}, the discriminant is {d}.",
        })
        if case == "two_real":
            formula = f"{v} = (-b ± √Δ) / 2a"
            why = "The discriminant is positive, so there are two distinct real roots."
        elif case == "one_real":
            formula = f"{v} = -b / 2a"
            why = "The discriminant is zero, so there is one (double) real root."
        else:
            formula = f"{v} = (-b ± i√(-Δ)) / 2a"
            why = "The discriminant is negative, so the roots are a complex conjugate pair."
        steps.append({
            "description": "Apply the quadratic formula",
            "expression": formula,
            "explanation": why,
        })

    if info["solutions"]:
        steps.append({
            "description": "Solution" if len(info["solutions"]) == 1 else "Solutions",
            "expression": "\n".join(f"{v} = {s}" for s in info["solutions"]),
            "explanation": _CASE_LABELS[case] + ".",
        })

    for i, step in enumerate(steps, start=1):
        step["step_number"] = i
    return steps


# ── Main public entry point ─────────────────────────────────────────────

def solve_equation(equation_str: str, variable: str = None, mode: str = None) -> dict:
    """
    Solve a polynomial equation of degree at most 2.

    Raises :class:`ParseError` (a ``ValueError``) when the equation cannot
    be parsed.  A reduced degree above 2 is not raised: the result carries
    ``case == "degree_too_high"`` and ``error == "degree_too_high"``.
    """
    t_start = time.perf_counter()
    variable = variable or DEFAULT_VARIABLE
    mode = mode or DEFAULT_MODE
    if mode not in MODES:
        raise ValueError(f"Unknown mode {mode!r}. Choose one of: {', '.join(MODES)}")

    lhs_raw, rhs_raw = split_equation(equation_str)
    try:
        lhs = parse_side(lhs_raw, variable)
        rhs = parse_side(rhs_raw, variable)
    except ParseError as e:
        logger.debug("Could not parse %r: %s", equation_str, e)
        raise

    reduced = lhs - rhs
    degree = reduced.degree()
    info = _classify(reduced, mode)
    info["solutions"] = [_fmt_root(r) for r in info["roots"]]
    case = info["case"]

    error = None
    if case == "degree_too_high":
        error = ErrorKind.DEGREE_TOO_HIGH.value
        logger.warning("Reduced form of %r has degree %d", equation_str, degree)
    else:
        logger.info("Solved %r: %s %s", equation_str, case, info["solutions"])

    verification_steps, all_ok = verify_roots(lhs, rhs, info["roots"], variable)
    if case == "degree_too_high":
        validation_status = "fail"
    elif not info["roots"]:
        validation_status = "skipped"
    else:
        validation_status = "pass" if all_ok else "fail"

    steps = _build_steps(lhs_raw, rhs_raw, lhs, rhs, reduced, variable, info)
    runtime_ms = round((time.perf_counter() - t_start) * 1000, 2)

    if mode == "numerical":
        library = f"NumPy {np.__version__}"
        method_name = "Numerical roots (companion matrix)"
    else:
        library = "Closed-form formula (Newton square root)"
        method_name = "Quadratic formula"

    return {
        "equation": equation_str,
        "given": {
            "problem": f"Solve the equation: {equation_str.strip()}",
            "inputs": {
                "equation": equation_str.strip(),
                "left_side": lhs_raw.strip(),
                "right_side": rhs_raw.strip(),
                "variable": variable,
            },
        },
        "method": {
            "name": method_name,
            "description": (
                "Parse both sides into coefficient maps, subtract the right "
                "side from the left, then solve by degree."
            ),
            "parameters": {
                "equation_type": _degree_name(degree).capitalize(),
                "variable": variable,
                "mode": mode,
            },
        },
        "steps": steps,
        "lhs": lhs,
        "rhs": rhs,
        "reduced": reduced,
        "reduced_form": f"{reduced.format(variable)} = 0",
        "degree": degree,
        "case": case,
        "discriminant": info["discriminant"],
        "roots": info["roots"],
        "solutions": info["solutions"],
        "final_answer": _final_answer(case, info["solutions"]),
        "verification_steps": verification_steps,
        "error": error,
        "summary": {
            "runtime_ms": runtime_ms,
            "total_steps": len(steps),
            "verification_steps": len(verification_steps),
            "timestamp": datetime.now().strftime("%Y-%m-%d %H:%M:%S"),
            "library": library,
            "verifier": f"SymPy {sympy.__version__}",
            "validation_status": validation_status,
        },
    }


def report_lines(result: dict) -> list[str]:
    """The plain-text report printed by the command line."""
    lines = [
        f"Reduced form: {result['reduced_form']}",
        f"Polynomial degree: {result['degree']}",
    ]
    case = result["case"]
    solutions = result["solutions"]
    if case == "all_reals":
        lines.append("Every number is a solution")
    elif case == "no_solution":
        lines.append("There is no solution")
    elif case == "degree_too_high":
        lines.append(ERROR_MESSAGES[ErrorKind.DEGREE_TOO_HIGH])
    elif result["degree"] == 1:
        lines.append(f"{solutions[0]} is a solution")
    else:
        lines.append(f"Discriminant: {_fmt_num(result['discriminant'])}")
        if case == "two_real":
            lines.append("Positive discriminant, there are 2 real solutions:")
        elif case == "complex_pair":
            lines.append("Negative discriminant, there are 2 complex solutions:")
        else:
            lines.append("Discriminant is 0, there is 1 real solution:")
        lines.extend(solutions)
    return lines


if __name__ == "__main__":
    # Quick test
    test_equations = [
        "5 * X^0 + 4 * X^1 - 9.3 * X^2 = 1 * X^0",
        "5 * X^0 + 4 * X^1 = 4 * X^0",
        "8 * X^0 - 6 * X^1 + 0 * X^2 - 5.6 * X^3 = 3 * X^0",
        "5 + 4 * X + X^2= X^2",
        "X^2 + 1 = 0",
    ]
    for eq in test_equations:
        print(f"\n{'='*50}")
        print(f"Solving: {eq}")
        print('='*50)
        for line in report_lines(solve_equation(eq)):
            print(f"  {line}")
