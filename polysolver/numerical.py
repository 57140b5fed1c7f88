"""Numerical root finding for reduced polynomials using NumPy."""

"""
Used by the solver's ``numerical`` mode as a cross-check of the closed-form
formula: the reduced coefficients are handed to ``numpy.roots`` and the
raw eigenvalue roots are mapped back onto the solver's case, which is
always decided from the exact discriminant.
"""

import numpy as np


def coefficient_vector(reduced) -> list:
    """Coefficients from the highest exponent down to the constant."""
    degree = reduced.degree()
    return [reduced.coefficient(exp) for exp in range(degree, -1, -1)]


def numeric_roots(reduced) -> list:
    """All complex roots of a degree-1 or degree-2 polynomial.

    Sorted by imaginary part then real part, both descending.
    """
    degree = reduced.degree()
    if degree not in (1, 2):
        raise ValueError(f"numeric_roots expects degree 1 or 2, got {degree}")
    raw = np.roots(np.array(coefficient_vector(reduced), dtype=float))
    return sorted((complex(r) for r in raw),
                  key=lambda z: (z.imag, z.real), reverse=True)


def roots_for_case(reduced, case: str) -> list:
    """Project ``numpy.roots`` output onto the solver's root conventions.

    - ``one_real``    → ``[x]`` (a repeated root averaged into one)
    - ``two_real``    → ``[x1, x2]`` as floats, ``(-b + √Δ) / 2a`` first
    - ``complex_pair``→ ``[z, conj(z)]``, ``z`` with the sign of ``a`` on its
      imaginary part

    The order follows the closed-form formula, so it flips when ``a < 0``.
    """
    roots = numeric_roots(reduced)
    leading_positive = reduced.coefficient(reduced.degree()) > 0
    if case == "one_real":
        return [float(np.mean([z.real for z in roots]))]
    if case == "two_real":
        return sorted((float(z.real) for z in roots), reverse=leading_positive)
    if case == "complex_pair":
        top = roots[0]
        imag = abs(top.imag) if leading_positive else -abs(top.imag)
        return [complex(top.real, imag), complex(top.real, -imag)]
    raise ValueError(f"No numeric roots for case {case!r}")
