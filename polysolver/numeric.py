"""Small numeric helpers shared by the solver and the formatter."""

NEWTON_ITERATIONS = 100


def absolute(x: float) -> float:
    """Return ``x`` when it is non-negative, ``-x`` otherwise."""
    if x < 0:
        return -x
    return x


def sqrt(x: float) -> float:
    """Square root of a non-negative *x* by Newton's method.

    Always runs exactly ``NEWTON_ITERATIONS`` steps from an initial guess
    of 1.0; there is no convergence check.  The result is meaningless
    for negative input; callers take the absolute value first.
    """
    guess = 1.0
    for _ in range(NEWTON_ITERATIONS):
        guess -= (guess * guess - x) / (2.0 * guess)
    return guess
