"""
Ridders' method, which fits an exponential correction through the
midpoint of the bracket.

References
----------
.. [1] Ridders, C., "A new algorithm for computing a single root of a
       real continuous function", IEEE Transactions on Circuits and
       Systems 26 (11), 1979, pp. 979-980.
"""
from math import inf, sqrt

from pyzero.numeric.math_ext import sign
from pyzero.solve.base import Problem, UnivariateSolver
from pyzero.solve.bracket import check_bracketing


# Written by Eric J. Whitney, August 2026.

# ======================================================================

class RiddersSolver(UnivariateSolver):
    """
    Find a zero using Ridders' method.  The interval must bracket the
    root and every new estimate is guaranteed to lie strictly inside
    the current bracket.

    Iteration stops when successive estimates differ by no more than
    ``max(rel_acc * |x|, abs_acc)``, or when ``|f(x)|`` is within the
    function value accuracy.

    Examples
    --------
    >>> round(RiddersSolver(1e-10).solve(100, lambda x: x ** 2 - 2, 0, 2), 6)
    1.414214
    """

    def _iterate(self, problem: Problem) -> float:
        x1, x2 = problem.x_min, problem.x_max
        y1 = problem(x1)
        if y1 == 0:
            return x1
        y2 = problem(x2)
        if y2 == 0:
            return x2
        check_bracketing(x1, x2, y1, y2)

        abs_acc, rel_acc = self.absolute_accuracy, self.relative_accuracy
        f_tol = self.function_value_accuracy
        x_old = inf

        while True:
            # Evaluate at the midpoint.
            x3 = 0.5 * (x1 + x2)
            y3 = problem(x3)
            if abs(y3) <= f_tol:
                return x3

            # Exponential correction; delta >= 1 while bracketed.
            delta = 1 - (y1 * y2) / (y3 * y3)
            correction = (sign(y2) * sign(y3)) * (x3 - x1) / sqrt(delta)
            x = x3 - correction
            y = problem(x)

            tolerance = max(rel_acc * abs(x), abs_acc)
            if abs(x - x_old) <= tolerance:
                return x
            if abs(y) <= f_tol:
                return x

            # Choose the sub-bracket that still holds the sign change.
            if correction > 0:  # x1 < x < x3.
                if sign(y1) + sign(y) == 0:
                    x2, y2 = x, y
                else:
                    x1, x2 = x, x3
                    y1, y2 = y, y3
            else:  # x3 < x < x2.
                if sign(y2) + sign(y) == 0:
                    x1, y1 = x, y
                else:
                    x1, x2 = x3, x
                    y1, y2 = y3, y

            x_old = x
