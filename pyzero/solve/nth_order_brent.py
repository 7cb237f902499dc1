"""
Bracketing Nth-order Brent method.

This is a variant of Brent's method where the inverse quadratic
interpolation is replaced by inverse polynomial interpolation of up to
`maximal_order` using all the points retained from earlier iterations.
The root stays bracketed at all times, so the side of the root returned
can be chosen.  An aging mechanism detects when one side of the bracket
has not moved for several iterations and deliberately aims beyond the
root to rebalance it.

The algorithm only uses the operations ``+ - * / abs < ==``, so it works
unchanged with exact numeric types such as `fractions.Fraction` or
`decimal.Decimal` (see `FieldBracketingNthOrderBrentSolver`).

References
----------
.. [1] Brent, R. P., *Algorithms for Minimization without Derivatives*,
       Prentice-Hall, 1973, chapter 4.
"""
from __future__ import annotations

from collections.abc import Callable
from typing import Any

import numpy as np

from pyzero.numeric.polynomial import newton_poly
from pyzero.solve.base import (AllowedSolution, BracketedUnivariateSolver,
                               Problem)
from pyzero.solve.exception import NoBracketingError

# Number of iterations a bracket side may stay fixed before the target
# is offset to pull the other side in.
_MAXIMAL_AGING = 2

# Denominator of the reduction applied to the opposite side's value
# when offsetting the target.
_REDUCTION_DIVISOR = 16


# Written by Eric J. Whitney, August 2026.

# ======================================================================

class _InterpolationBuffer:
    """
    Fixed capacity buffer of the first `n` `(x, y)` points, ordered by
    `x`.  The points either side of index `sign_change`, i.e.
    ``y[sign_change - 1]`` and ``y[sign_change]``, have opposite signs
    and form the current bracket.
    """

    def __init__(self, capacity: int):
        self.x: list = [None] * capacity
        self.y: list = [None] * capacity
        self.n = 0
        self.sign_change = 0

    @property
    def capacity(self) -> int:
        return len(self.x)

    def keep_window(self, start: int, end: int):
        """Retain only points `start` ... `end - 1`."""
        n = end - start
        self.x[:n] = self.x[start:end]
        self.y[:n] = self.y[start:end]
        self.n = n
        self.sign_change -= start

    def insert(self, x, y):
        """Insert the point at the sign change index."""
        i, n = self.sign_change, self.n
        self.x[i + 1:n + 1] = self.x[i:n]
        self.y[i + 1:n + 1] = self.y[i:n]
        self.x[i], self.y[i] = x, y
        self.n += 1


# ----------------------------------------------------------------------

def _guess_x(target_y, x: list, y: list, start: int, end: int):
    """
    Inverse polynomial interpolation of points `start` ... `end - 1`,
    i.e. find `x` such that the Newton polynomial through the points
    (with `y` as the abscissa) gives `target_y`.  Returns `None` (or
    `NaN`) if the interpolation breaks down.  NumPy scalars are returned
    as the equivalent Python type.
    """
    try:
        with np.errstate(divide='ignore', invalid='ignore'):
            guess = newton_poly(y[start:end], x[start:end], target_y)
    except ZeroDivisionError:
        return None  # Repeated y values with an exact numeric type.

    return guess.item() if isinstance(guess, np.generic) else guess


def nth_order_brent(problem: Problem, *, absolute_accuracy: Any,
                    relative_accuracy: Any, function_value_accuracy: Any,
                    maximal_order: int):
    """
    Run the bracketing Nth-order Brent algorithm on `problem`.

    Parameters
    ----------
    problem : Problem
        Problem to solve.  The start value must lie strictly inside the
        interval.
    absolute_accuracy, relative_accuracy, function_value_accuracy :
        Accuracies in the same numeric type as the problem.
    maximal_order : int
        Maximal order of the inverse interpolating polynomial (>= 2).

    Returns
    -------
    Root of the problem's function, on the allowed side.

    Raises
    ------
    NoBracketingError
        If neither part of the interval either side of the start value
        brackets a root.
    """
    buf = _InterpolationBuffer(maximal_order + 1)
    x, y = buf.x, buf.y

    # Evaluate initial guess, then the endpoints as required.
    x[0], x[1], x[2] = problem.x_min, problem.x_start, problem.x_max

    y[1] = problem(x[1])
    if y[1] == 0:
        return x[1]

    y[0] = problem(x[0])
    if y[0] == 0:
        return x[0]

    if y[0] * y[1] < 0:
        buf.n, buf.sign_change = 2, 1  # Reduce interval to [x0, x1].
    else:
        y[2] = problem(x[2])
        if y[2] == 0:
            return x[2]

        if y[1] * y[2] < 0:
            buf.n, buf.sign_change = 3, 2
        else:
            raise NoBracketingError(x[0], x[2], y[0], y[2])

    # Current bracket [xA, xB].
    i = buf.sign_change
    x_a, y_a, abs_y_a, aging_a = x[i - 1], y[i - 1], abs(y[i - 1]), 0
    x_b, y_b, abs_y_b, aging_b = x[i], y[i], abs(y[i]), 0

    abs_acc, rel_acc = absolute_accuracy, relative_accuracy
    f_tol = function_value_accuracy
    allowed = problem.allowed

    while True:
        # Check convergence of the bracket.
        x_tol = abs_acc + rel_acc * max(abs(x_a), abs(x_b))
        if (x_b - x_a) <= x_tol or max(abs_y_a, abs_y_b) < f_tol:
            return _select(allowed, x_a, y_a, abs_y_a, x_b, abs_y_b)

        # Target for the next evaluation.  Normally zero, but offset past
        # the root when one side has stopped moving.
        if aging_a >= _MAXIMAL_AGING:
            p = aging_a - _MAXIMAL_AGING
            weight_a, weight_b = (1 << p) - 1, p + 1
            target_y = ((weight_a * y_a -
                         weight_b * y_b / _REDUCTION_DIVISOR) /
                        (weight_a + weight_b))

        elif aging_b >= _MAXIMAL_AGING:
            p = aging_b - _MAXIMAL_AGING
            weight_a, weight_b = p + 1, (1 << p) - 1
            target_y = ((weight_b * y_b -
                         weight_a * y_a / _REDUCTION_DIVISOR) /
                        (weight_a + weight_b))

        else:
            target_y = 0 * y_a

        # Make a guess using inverse interpolation.  If it falls outside
        # the bracket, shrink the window away from the sign change and
        # try again.
        start, end = 0, buf.n
        next_x = None
        while next_x is None and end - start > 1:
            next_x = _guess_x(target_y, x, y, start, end)
            if next_x is None or not (x_a < next_x < x_b):
                if buf.sign_change - start >= end - buf.sign_change:
                    start += 1  # Drop the leftmost point.
                else:
                    end -= 1  # Drop the rightmost point.
                next_x = None

        if next_x is None:
            # Fall back to bisection.
            next_x = x_a + (x_b - x_a) / 2
            start, end = buf.sign_change - 1, buf.sign_change

        next_y = problem(next_x)
        if next_y == 0:
            return next_x

        if buf.n > 2 and end - start != buf.n:
            # Keep only the points used for a successful interpolation.
            buf.keep_window(start, end)

        elif buf.n == buf.capacity:
            # Buffer full; drop the point furthest from the sign change.
            buf.n -= 1
            if buf.sign_change >= (buf.capacity + 1) // 2:
                buf.keep_window(1, buf.n + 1)

        buf.insert(next_x, next_y)

        # Update the bracket.
        if next_y * y_a <= 0:
            x_b, y_b, abs_y_b = next_x, next_y, abs(next_y)
            aging_a += 1
            aging_b = 0
        else:
            x_a, y_a, abs_y_a = next_x, next_y, abs(next_y)
            aging_a = 0
            aging_b += 1
            buf.sign_change += 1


def _select(allowed: AllowedSolution, x_a, y_a, abs_y_a, x_b, abs_y_b):
    if allowed == AllowedSolution.ANY_SIDE:
        return x_a if abs_y_a < abs_y_b else x_b
    elif allowed == AllowedSolution.LEFT_SIDE:
        return x_a
    elif allowed == AllowedSolution.RIGHT_SIDE:
        return x_b
    elif allowed == AllowedSolution.BELOW_SIDE:
        return x_a if y_a <= 0 else x_b
    elif allowed == AllowedSolution.ABOVE_SIDE:
        return x_b if y_a < 0 else x_a
    else:
        raise AssertionError(f"Unknown allowed solution: {allowed!r}")


# ======================================================================

class BracketingNthOrderBrentSolver(BracketedUnivariateSolver):
    """
    Find a zero using the bracketing Nth-order Brent method.  The start
    value must lie strictly inside the interval and either
    [`x_min`, `x_start`] or [`x_start`, `x_max`] must bracket the root.

    Examples
    --------
    >>> from math import exp
    >>> solver = BracketingNthOrderBrentSolver(1e-10)
    >>> abs(solver.solve(100, lambda x: exp(x) - 1, -50, 100)) < 1e-10
    True
    """

    def __init__(self, absolute_accuracy: float = None,
                 relative_accuracy: float = None,
                 function_value_accuracy: float = None,
                 maximal_order: int = 5, *, verbose: bool = False):
        """
        Parameters
        ----------
        absolute_accuracy, relative_accuracy, function_value_accuracy :
            See `UnivariateSolver`.
        maximal_order : int, default = 5
            Maximal order of the inverse interpolating polynomial.

        Raises
        ------
        ValueError
            If ``maximal_order < 2``.
        """
        if maximal_order < 2:
            raise ValueError(f"Require maximal_order >= 2, got "
                             f"{maximal_order}.")
        super().__init__(absolute_accuracy, relative_accuracy,
                         function_value_accuracy, verbose=verbose)
        self._maximal_order = maximal_order

    @property
    def maximal_order(self) -> int:
        return self._maximal_order

    def _iterate(self, problem: Problem):
        return nth_order_brent(
            problem, absolute_accuracy=self.absolute_accuracy,
            relative_accuracy=self.relative_accuracy,
            function_value_accuracy=self.function_value_accuracy,
            maximal_order=self._maximal_order)


# ----------------------------------------------------------------------

class FieldBracketingNthOrderBrentSolver(BracketingNthOrderBrentSolver):
    """
    Bracketing Nth-order Brent method for user numeric types, e.g.
    `fractions.Fraction` or `decimal.Decimal`.  The accuracies must be
    given explicitly in a type that combines with the interval values;
    no conversion to `float` is made at any point.

    Examples
    --------
    >>> from fractions import Fraction
    >>> solver = FieldBracketingNthOrderBrentSolver(
    ...     Fraction(1, 10**12), Fraction(0), Fraction(0))
    >>> solver.solve(100, lambda x: 3 * x - 1, Fraction(0), Fraction(1))
    Fraction(1, 3)
    """

    def __init__(self, absolute_accuracy: Any, relative_accuracy: Any,
                 function_value_accuracy: Any, maximal_order: int = 5, *,
                 verbose: bool = False):
        super().__init__(absolute_accuracy, relative_accuracy,
                         function_value_accuracy, maximal_order,
                         verbose=verbose)

    def solve(self, max_eval: int, f: Callable[[Any], Any], x_min: Any,
              x_max: Any, x_start: Any = None,
              allowed: AllowedSolution = AllowedSolution.ANY_SIDE) -> Any:
        """
        As for `BracketedUnivariateSolver.solve`, with all values in the
        user numeric type.
        """
        return super().solve(max_eval, f, x_min, x_max, x_start, allowed)
