"""
Brent's method, combining bisection, the secant method and inverse
quadratic interpolation.

References
----------
.. [1] Brent, R. P., *Algorithms for Minimization without Derivatives*,
       Prentice-Hall, 1973, chapter 4.
"""
from pyzero.solve.base import Problem, UnivariateSolver
from pyzero.solve.exception import NoBracketingError


# Written by Eric J. Whitney, August 2026.

# ======================================================================

class BrentSolver(UnivariateSolver):
    """
    Find a zero using Brent's method.  The interval must bracket a root
    (either the whole interval or one of the two parts either side of
    the start value).

    Notes
    -----
    - The start value is evaluated first, then `x_min` and if required
      `x_max`.  Any of these returns immediately if its function value is
      within the function value accuracy.
    - Iteration stops when half the bracket width is no greater than
      ``2 * rel_acc * |b| + abs_acc``, where `b` is the best estimate,
      or when `f(b)` is exactly zero.

    Examples
    --------
    >>> round(BrentSolver(1e-10).solve(100, lambda x: x ** 2 - 2, 0, 2), 6)
    1.414214
    """

    def _iterate(self, problem: Problem) -> float:
        x_min, x_max = problem.x_min, problem.x_max
        x_init = problem.x_start
        f_tol = self.function_value_accuracy

        # Check the start value and the two endpoints.
        y_init = problem(x_init)
        if abs(y_init) <= f_tol:
            return x_init

        y_min = problem(x_min)
        if abs(y_min) <= f_tol:
            return x_min

        if y_init * y_min < 0:
            return self._brent(problem, x_min, x_init, y_min, y_init)

        y_max = problem(x_max)
        if abs(y_max) <= f_tol:
            return x_max

        if y_init * y_max < 0:
            return self._brent(problem, x_init, x_max, y_init, y_max)

        raise NoBracketingError(x_min, x_max, y_min, y_max)

    def _brent(self, problem: Problem, lo: float, hi: float, f_lo: float,
               f_hi: float) -> float:
        a, fa = lo, f_lo
        b, fb = hi, f_hi
        c, fc = a, fa
        d = b - a
        e = d

        t = self.absolute_accuracy
        eps = self.relative_accuracy

        while True:
            # Ensure 'b' is the best estimate with |f(b)| <= |f(c)|.
            if abs(fc) < abs(fb):
                a, b, c = b, c, b
                fa, fb, fc = fb, fc, fb

            tol = 2 * eps * abs(b) + t
            m = 0.5 * (c - b)

            if abs(m) <= tol or fb == 0:
                return b

            if abs(e) < tol or abs(fa) <= abs(fb):
                # Force bisection.
                d = m
                e = d
            else:
                s = fb / fa
                if a == c:
                    # Linear interpolation.
                    p = 2 * m * s
                    q = 1 - s
                else:
                    # Inverse quadratic interpolation.
                    q = fa / fc
                    r = fb / fc
                    p = s * (2 * m * q * (q - r) - (b - a) * (r - 1))
                    q = (q - 1) * (r - 1) * (s - 1)

                if p > 0:
                    q = -q
                else:
                    p = -p

                s = e
                e = d
                if p >= 1.5 * m * q - abs(tol * q) or p >= abs(0.5 * s * q):
                    # Interpolation rejected; fall back to bisection.
                    d = m
                    e = d
                else:
                    d = p / q

            a, fa = b, fb

            # Step at least 'tol' towards the root.
            if abs(d) > tol:
                b += d
            elif m > 0:
                b += tol
            else:
                b -= tol

            fb = problem(b)
            if (fb > 0 and fc > 0) or (fb <= 0 and fc <= 0):
                c, fc = a, fa
                d = b - a
                e = d
