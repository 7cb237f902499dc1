"""
Muller's method, which fits a quadratic through the three most recent
points and takes the nearest root of the quadratic as the next estimate.

`MullerSolver` keeps the root bracketed and falls back to bisection when
the quadratic step is poor.  `MullerSolver2` uses the classic form of
the method which only needs the initial interval to bracket the root.

References
----------
.. [1] Atkinson, K. E., *An Introduction to Numerical Analysis*, 2nd
       ed., Wiley, 1989, chapter 2.
.. [2] Press, W. H.; Flannery, B. P.; Teukolsky, S. A.; and
       Vetterling, W. T. *Numerical Recipes: The Art of Scientific
       Computing*, 3rd ed. Cambridge, England: Cambridge University
       Press, 2007. Section 9.5.
"""
from __future__ import annotations

from math import inf, nan, sqrt, ulp

import numpy as np

from pyzero.numeric.math_ext import is_sequence, sign
from pyzero.solve.base import Problem, UnivariateSolver
from pyzero.solve.bracket import check_bracketing
from pyzero.solve.exception import NoBracketingError


# Written by Eric J. Whitney, September 2026.

# ======================================================================

class MullerSolver(UnivariateSolver):
    """
    Find a zero using Muller's method, keeping the root bracketed.  The
    next estimate is the root of the interpolating quadratic lying inside
    the bracket:

        :math:`x = x_1 - 2 y_1 / (c_1 \\pm \\sqrt{\\Delta})`

    If the new point would land on the middle point, or leave one of the
    sub-intervals holding more than 95% of the bracket, a bisection step
    is taken instead and the three-point window is re-centred.

    Notes
    -----
    - The start value and both endpoints return immediately if their
      function value is within the function value accuracy.
    - Muller's method usually converges faster than the secant method but
      is not guaranteed to outperform it in every case.

    Examples
    --------
    >>> round(MullerSolver(1e-10).solve(100, lambda x: x ** 3 - 2, 0, 2), 6)
    1.259921
    """

    def _iterate(self, problem: Problem) -> float:
        x_min, x_max = problem.x_min, problem.x_max
        x_init = problem.x_start
        f_tol = self.function_value_accuracy

        f_min = problem(x_min)
        if abs(f_min) <= f_tol:
            return x_min
        f_max = problem(x_max)
        if abs(f_max) <= f_tol:
            return x_max
        f_init = problem(x_init)
        if abs(f_init) <= f_tol:
            return x_init

        check_bracketing(x_min, x_max, f_min, f_max)

        if (f_min >= 0 >= f_init) or (f_min <= 0 <= f_init):
            return self._muller(problem, x_min, x_init, f_min, f_init)
        else:
            return self._muller(problem, x_init, x_max, f_init, f_max)

    def _muller(self, problem: Problem, x_min: float, x_max: float,
                f_min: float, f_max: float) -> float:
        rel_acc, abs_acc = self.relative_accuracy, self.absolute_accuracy
        f_tol = self.function_value_accuracy

        # x0 < x1 < x2 always holds.
        x0, y0 = x_min, f_min
        x2, y2 = x_max, f_max
        x1 = 0.5 * (x0 + x2)
        y1 = problem(x1)

        x_old = inf
        while True:
            # Divided differences of the quadratic through the points.
            d01 = (y1 - y0) / (x1 - x0)
            d12 = (y2 - y1) / (x2 - x1)
            d012 = (d12 - d01) / (x2 - x0)
            c1 = d01 + (x1 - x0) * d012

            # The discriminant is non-negative while the root is
            # bracketed; clamp any rounding below zero.
            delta = c1 * c1 - 4 * y1 * d012
            sqrt_delta = sqrt(max(delta, 0.0))

            # A zero denominator (linear function) gives no candidate.
            d_plus, d_minus = c1 + sqrt_delta, c1 - sqrt_delta
            x_plus = x1 + (-2.0 * y1) / d_plus if d_plus != 0 else nan
            x_minus = x1 + (-2.0 * y1) / d_minus if d_minus != 0 else nan

            # Take the root lying inside the bracket.
            x = x_plus if is_sequence(x0, x_plus, x2) else x_minus
            y = problem(x)

            tolerance = max(rel_acc * abs(x), abs_acc)
            if abs(x - x_old) <= tolerance or abs(y) <= f_tol:
                return x

            bisect = ((x < x1 and (x1 - x0) > 0.95 * (x2 - x0)) or
                      (x > x1 and (x2 - x1) > 0.95 * (x2 - x0)) or
                      (x == x1))

            if not bisect:
                # Keep the three points bracketing around x.
                if x < x1:
                    x2, y2 = x1, y1
                else:
                    x0, y0 = x1, y1
                x1, y1 = x, y
                x_old = x

            else:
                x_m = 0.5 * (x0 + x2)
                y_m = problem(x_m)
                if sign(y0) + sign(y_m) == 0:
                    x2, y2 = x_m, y_m
                else:
                    x0, y0 = x_m, y_m
                x1 = 0.5 * (x0 + x2)
                y1 = problem(x1)
                x_old = inf


# ======================================================================

class MullerSolver2(UnivariateSolver):
    """
    Find a zero using the classic form of Muller's method.  Only the
    initial interval needs to bracket the root; thereafter the three
    most recent points are used whether or not they bracket it.

    Notes
    -----
    - A negative discriminant means the quadratic has complex roots. In
      that case the modulus :math:`\\sqrt{b^2 - \\Delta}` of the complex
      denominator is used in its place, keeping the iteration real.
    - If the step would land on one of the existing points, it is nudged
      by the absolute accuracy (or one ulp, if larger).
    - In the very rare event the denominator is exactly zero, iteration
      restarts from a point drawn uniformly in [`x_min`, `x_max`].  The
      generator is seeded afresh on every `solve()` with `seed`, so
      results are reproducible.
    """

    def __init__(self, absolute_accuracy: float = None,
                 relative_accuracy: float = None,
                 function_value_accuracy: float = None, *,
                 seed: int | None = 0, verbose: bool = False):
        """
        Parameters
        ----------
        absolute_accuracy, relative_accuracy, function_value_accuracy :
            See `UnivariateSolver`.
        seed : int or None, default = 0
            Seed for the generator used in degenerate restarts.  Use
            `None` for a non-reproducible seed.
        verbose : bool, default = False
            If `True`, print progress statements.
        """
        super().__init__(absolute_accuracy, relative_accuracy,
                         function_value_accuracy, verbose=verbose)
        self._seed = seed

    def _iterate(self, problem: Problem) -> float:
        x_min, x_max = problem.x_min, problem.x_max
        rel_acc, abs_acc = self.relative_accuracy, self.absolute_accuracy
        f_tol = self.function_value_accuracy
        rng = np.random.default_rng(self._seed)

        x0 = x_min
        y0 = problem(x0)
        if abs(y0) <= f_tol:
            return x0
        x1 = x_max
        y1 = problem(x1)
        if abs(y1) <= f_tol:
            return x1

        if y0 * y1 > 0:
            raise NoBracketingError(x0, x1, y0, y1)

        x2 = 0.5 * (x0 + x1)
        y2 = problem(x2)

        x_old = inf
        while True:
            q = (x2 - x1) / (x1 - x0)
            a = q * (y2 - (1 + q) * y1 + q * y0)
            b = (2 * q + 1) * y2 - (1 + q) * (1 + q) * y1 + q * q * y0
            c = (1 + q) * y2
            delta = b * b - 4 * a * c

            if delta >= 0:
                # Choose the denominator giving the smaller step.
                d_plus = b + sqrt(delta)
                d_minus = b - sqrt(delta)
                denominator = d_plus if abs(d_plus) > abs(d_minus) else d_minus
            else:
                # Complex roots; use the modulus of the denominator.
                denominator = sqrt(b * b - delta)

            if denominator != 0:
                x = x2 - 2.0 * c * (x2 - x1) / denominator
                # Avoid repeating an existing point.
                while x == x1 or x == x2:
                    x += max(abs_acc, ulp(x))
            else:
                x = x_min + rng.random() * (x_max - x_min)
                x_old = inf
                if problem.verbose:
                    print(f"... Degenerate step, restarting from x = {x}")

            y = problem(x)

            tolerance = max(rel_acc * abs(x), abs_acc)
            if abs(x - x_old) <= tolerance or abs(y) <= f_tol:
                return x

            x0, y0 = x1, y1
            x1, y1 = x2, y2
            x2, y2 = x, y
            x_old = x
