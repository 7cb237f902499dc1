"""
Utilities for establishing and checking intervals that bracket a root
of a scalar function, i.e. where `f(x_lo)` and `f(x_hi)` have opposite
signs or either is exactly zero.
"""
from __future__ import annotations

from collections.abc import Callable

import numpy as np

from pyzero.solve.base import AllowedSolution, BracketedUnivariateSolver
from pyzero.solve.exception import NoBracketingError

# Effectively unlimited iteration / evaluation count.
_MAX_COUNT = 2 ** 31 - 1


# Written by Eric J. Whitney, October 2026.

# ======================================================================

def midpoint(a, b):
    """
    Returns the midpoint of `a` and `b`.

    Examples
    --------
    >>> midpoint(1.0, 2.0)
    1.5
    """
    return (a + b) / 2


def is_bracketing(f: Callable[[float], float], x_lo: float,
                  x_hi: float) -> bool:
    """
    Returns ``True`` if `f(x_lo)` and `f(x_hi)` have opposite signs, or
    if either is exactly zero.

    Examples
    --------
    >>> is_bracketing(lambda x: x - 1, 0, 2)
    True
    >>> is_bracketing(lambda x: x - 1, 2, 3)
    False
    """
    if f is None or not callable(f):
        raise TypeError("Objective function 'f' must be callable.")

    return _values_bracket(f(x_lo), f(x_hi))


def _values_bracket(f_lo, f_hi) -> bool:
    return (f_lo >= 0 and f_hi <= 0) or (f_lo <= 0 and f_hi >= 0)


def verify_interval(x_lo, x_hi):
    """
    Raises
    ------
    ValueError
        If ``x_lo >= x_hi``.
    """
    if x_lo >= x_hi:
        raise ValueError(f"Endpoints do not specify an interval: "
                         f"[{x_lo}, {x_hi}].")


def verify_sequence(x_lo, x_mid, x_hi):
    """
    Raises
    ------
    ValueError
        Unless ``x_lo < x_mid < x_hi``.
    """
    verify_interval(x_lo, x_mid)
    verify_interval(x_mid, x_hi)


def verify_bracketing(f: Callable[[float], float], x_lo: float,
                      x_hi: float):
    """
    Check that [`x_lo`, `x_hi`] is an interval that brackets a root of
    `f`.

    Raises
    ------
    ValueError
        If ``x_lo >= x_hi``.
    NoBracketingError
        If `f(x_lo)` and `f(x_hi)` have the same sign (and neither is
        zero).
    """
    verify_interval(x_lo, x_hi)
    f_lo, f_hi = f(x_lo), f(x_hi)
    if not _values_bracket(f_lo, f_hi):
        raise NoBracketingError(x_lo, x_hi, f_lo, f_hi)


def check_bracketing(x_lo, x_hi, f_lo, f_hi):
    """
    Like `verify_bracketing` but using function values that have already
    been computed.
    """
    if not _values_bracket(f_lo, f_hi):
        raise NoBracketingError(x_lo, x_hi, f_lo, f_hi)


# ======================================================================

def bracket(f: Callable[[float], float], initial: float,
            lower_bound: float, upper_bound: float, q: float = 1.0,
            r: float = 1.0, max_iter: int = _MAX_COUNT
            ) -> tuple[float, float]:
    r"""
    Expand an interval around `initial` until a root of `f` is bracketed
    or the limits are reached.

    At step `k` the interval is :math:`[\max(x_0 - \delta_k, lower),
    \min(x_0 + \delta_k, upper)]` where :math:`\delta_0 = 0` and
    :math:`\delta_{k+1} = r \delta_k + q`.  With ``r = 1`` the interval
    grows arithmetically, with ``r > 1`` it grows geometrically.

    Parameters
    ----------
    f : Callable[[float], float]
        Scalar function to bracket root.
    initial : float
        Centre of the expanding interval.
    lower_bound, upper_bound : float
        Limits for the interval; may be infinite.
    q : float, default = 1.0
        Additive coefficient of the growth recurrence, `q` > 0.
    r : float, default = 1.0
        Multiplicative coefficient of the growth recurrence, `r` >= 1.
    max_iter : int, default = 2**31 - 1
        Maximum number of expansion steps.

    Returns
    -------
    x_lo, x_hi : float, float
        `x`-values bracketing the root.

    Raises
    ------
    ValueError
        Illegal starting conditions.
    NoBracketingError
        If the limits or `max_iter` are reached without finding a
        bracket.  The error holds the last interval examined.

    Notes
    -----
    - On each step after the first, only the newly added segments
      :math:`[a_k, a_{k-1}]` and :math:`[b_{k-1}, b_k]` are tested, so
      the bracket returned may be much tighter than the whole span
      searched.  The left segment is tested first; as a result the
      bracket found may not be the one nearest to `initial`.

    Examples
    --------
    >>> bracket(lambda x: 1 - x, 4, -np.inf, np.inf, q=2, r=1)
    (0.0, 2.0)
    """
    if q <= 0:
        raise ValueError(f"Require q > 0, got q = {q}.")
    if max_iter <= 0:
        raise ValueError(f"Require max_iter > 0, got {max_iter}.")

    verify_sequence(lower_bound, initial, upper_bound)

    a, b = initial, initial
    f_a, f_b = np.nan, np.nan
    delta = 0.0

    its = 0
    while its < max_iter and (a > lower_bound or b < upper_bound):
        a_prev, f_a_prev = a, f_a
        b_prev, f_b_prev = b, f_b
        delta = r * delta + q
        a = max(initial - delta, lower_bound)
        b = min(initial + delta, upper_bound)
        f_a, f_b = f(a), f(b)

        if its == 0:
            if f_a * f_b <= 0:
                return a, b

        elif f_a * f_a_prev <= 0:
            return a, a_prev

        elif f_b * f_b_prev <= 0:
            return b_prev, b

        its += 1

    raise NoBracketingError(a, b, f_a, f_b,
                            "bracket() failed to find a sign change:",
                            details=("Reached max_iter." if its >= max_iter
                                     else "Reached bounds."),
                            steps=its)


# ----------------------------------------------------------------------

def force_side(max_eval: int, f: Callable[[float], float],
               bracketing: BracketedUnivariateSolver, base_root: float,
               x_min: float, x_max: float,
               allowed: AllowedSolution) -> float:
    """
    Force a root found by a non-bracketing solver to lie on a specified
    side, as if the solver were a bracketing one.

    A small interval around `base_root` is stepped outwards (towards the
    side on which the function moves away from zero) until it brackets
    the root, which is then refined by `bracketing` with the allowed
    solution requested.

    Parameters
    ----------
    max_eval : int
        Maximum number of function evaluations, including those used by
        `bracketing`.
    f : Callable[[float], float]
        Function to solve.
    bracketing : BracketedUnivariateSolver
        Solver used to refine the root.  Its absolute and relative
        accuracies also set the size of the steps taken.
    base_root : float
        Original root found by a previous non-bracketing solver.
    x_min, x_max : float
        Limits of the interval searched.
    allowed : AllowedSolution
        Side of the root required.

    Returns
    -------
    float
        Root on the requested side.

    Raises
    ------
    NoBracketingError
        If the root cannot be bracketed within `max_eval` evaluations.
    """
    allowed = AllowedSolution(allowed)
    if allowed == AllowedSolution.ANY_SIDE:
        return base_root

    step = max(bracketing.absolute_accuracy,
               abs(base_root * bracketing.relative_accuracy))
    x_lo = max(x_min, base_root - step)
    f_lo = f(x_lo)
    x_hi = min(x_max, base_root + step)
    f_hi = f(x_hi)
    remaining = max_eval - 2

    while remaining > 0:
        if _values_bracket(f_lo, f_hi):
            x_start = base_root if x_lo < base_root < x_hi else None
            return bracketing.solve(remaining, f, x_lo, x_hi, x_start,
                                    allowed)

        # Move the side/s on which the function is heading away from
        # zero.
        change_lo, change_hi = False, False
        if f_lo < f_hi:
            if f_lo >= 0:
                change_lo = True
            else:
                change_hi = True
        elif f_lo > f_hi:
            if f_lo <= 0:
                change_lo = True
            else:
                change_hi = True
        else:
            change_lo, change_hi = True, True

        if change_lo:
            x_lo = max(x_min, x_lo - step)
            f_lo = f(x_lo)
            remaining -= 1

        if change_hi:
            x_hi = min(x_max, x_hi + step)
            f_hi = f(x_hi)
            remaining -= 1

    raise NoBracketingError(x_lo, x_hi, f_lo, f_hi,
                            "force_side() failed to bracket root:",
                            details="Reached max_eval.",
                            max_eval=max_eval)


# ----------------------------------------------------------------------

def find_root(f: Callable[[float], float], x0: float, x1: float,
              absolute_accuracy: float = 1e-6) -> float:
    """
    Convenience method to find a zero of `f` in [`x0`, `x1`] using a
    `BrentSolver` with an effectively unlimited number of evaluations.

    Examples
    --------
    >>> round(find_root(lambda x: x ** 2 - 2, 0.0, 2.0, 1e-10), 6)
    1.414214
    """
    from pyzero.solve.brent import BrentSolver

    return BrentSolver(absolute_accuracy).solve(_MAX_COUNT, f, x0, x1)

