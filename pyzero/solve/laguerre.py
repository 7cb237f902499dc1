"""
Laguerre's method for finding the (real or complex) roots of a
polynomial with real coefficients.

References
----------
.. [1] Press, W. H.; Flannery, B. P.; Teukolsky, S. A.; and
       Vetterling, W. T. *Numerical Recipes: The Art of Scientific
       Computing*, 3rd ed. Cambridge, England: Cambridge University
       Press, 2007. Section 9.5.3: "Laguerre's Method".
"""
from __future__ import annotations

import cmath
from collections.abc import Sequence
from math import inf

import numpy as np
import numpy.typing as npt
from numpy.polynomial import Polynomial

from pyzero.numeric.math_ext import is_sequence
from pyzero.numeric.polynomial import deflate, poly_eval_derivs
from pyzero.solve.base import Problem, UnivariateSolver, setup_problem
from pyzero.solve.exception import NoBracketingError, SolverError

# Effectively unlimited evaluation count.
_MAX_COUNT = 2 ** 31 - 1

_Coefficients = npt.ArrayLike | Polynomial


# Written by Eric J. Whitney, September 2026.

# ======================================================================

class LaguerreSolver(UnivariateSolver):
    """
    Find the roots of a polynomial using Laguerre's method.  Iteration is
    carried out in the complex plane so that complex roots are found as
    well as real ones.

    Polynomials are given by their coefficients in order of increasing
    degree (``c[0] + c[1]*x + ...``), either as a sequence or as a
    ``numpy.polynomial.Polynomial``.

    Each Laguerre iteration counts as one evaluation against the
    budget.

    Examples
    --------
    Roots of :math:`z^3 - 1`:
    >>> roots = LaguerreSolver().solve_all_complex([-1, 0, 0, 1], 0)
    >>> sorted(round(z.real, 6) for z in roots)
    [-0.5, -0.5, 1.0]
    """

    # -- Public Methods ------------------------------------------------

    def solve(self, max_eval: int, f: _Coefficients, x_min: float,
              x_max: float, x_start: float = None) -> float:
        """
        Find a real root of the polynomial in [`x_min`, `x_max`].

        Either [`x_min`, `x_start`] or [`x_start`, `x_max`] must bracket
        a root.  The complex iteration is started from the midpoint of
        the sub-interval holding the sign change.  A complex root `z` is
        accepted when its real part lies inside the sub-interval and
        either ``|imag(z)| <= max(rel_acc * |z|, abs_acc)`` or ``|z|`` is
        within the function value accuracy.  If the first root found is
        not accepted, all roots are searched.

        Parameters
        ----------
        max_eval : int
            Maximum number of evaluations.
        f : array_like or Polynomial
            Polynomial coefficients, by increasing degree.
        x_min, x_max, x_start : float
            See `UnivariateSolver.solve`.

        Returns
        -------
        float
            Real root of the polynomial.

        Raises
        ------
        NoBracketingError
            If no sub-interval brackets a root.
        SolverError
            If no root found meets the above conditions.
        """
        return super().solve(max_eval, _as_polynomial(f), x_min, x_max,
                             x_start)

    def solve_complex(self, coefficients: _Coefficients, initial: complex,
                      max_eval: int = _MAX_COUNT) -> complex:
        """
        Find one complex root of the polynomial, starting the search at
        `initial`.

        Parameters
        ----------
        coefficients : array_like or Polynomial
            Polynomial coefficients, by increasing degree.
        initial : complex
            Start value.
        max_eval : int, optional
            Maximum number of iterations.

        Returns
        -------
        complex
            Root of the polynomial.

        Raises
        ------
        ValueError
            If the polynomial has degree zero.
        TooManyEvaluationsError
            If `max_eval` is exceeded.
        """
        problem = self._complex_problem(coefficients, initial, max_eval)
        try:
            return self._laguerre_root(problem, _complex_coeffs(problem.f),
                                       complex(initial))
        finally:
            self._evaluations = problem.budget.count

    def solve_all_complex(self, coefficients: _Coefficients,
                          initial: complex,
                          max_eval: int = _MAX_COUNT) -> list[complex]:
        """
        Find all complex roots of the polynomial, starting each search at
        `initial`.  After each root is found the polynomial is deflated
        by it before searching for the next.

        Parameters
        ----------
        coefficients : array_like or Polynomial
            Polynomial coefficients, by increasing degree.
        initial : complex
            Start value.
        max_eval : int, optional
            Maximum number of iterations over all roots.

        Returns
        -------
        list[complex]
            All `n` roots of a polynomial of degree `n`, in the order
            found.

        Raises
        ------
        ValueError
            If the polynomial has degree zero.
        TooManyEvaluationsError
            If `max_eval` is exceeded.
        """
        problem = self._complex_problem(coefficients, initial, max_eval)
        try:
            return self._laguerre_all(problem, _complex_coeffs(problem.f),
                                      complex(initial))
        finally:
            self._evaluations = problem.budget.count

    # -- Private Methods -----------------------------------------------

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
            return self._laguerre_real(problem, x_min, x_init)

        y_max = problem(x_max)
        if abs(y_max) <= f_tol:
            return x_max

        if y_init * y_max < 0:
            return self._laguerre_real(problem, x_init, x_max)

        raise NoBracketingError(x_min, x_max, y_min, y_max)

    def _laguerre_real(self, problem: Problem, lo: float,
                       hi: float) -> float:
        coeffs = _complex_coeffs(problem.f)
        initial = complex(0.5 * (lo + hi), 0.0)

        z = self._laguerre_root(problem, coeffs, initial)
        if self._is_root(lo, hi, z):
            return z.real

        for z in self._laguerre_all(problem, coeffs, initial):
            if self._is_root(lo, hi, z):
                return z.real

        raise SolverError("No real root found in interval:", flag=4,
                          details=f"Interval [{lo}, {hi}].", x_lo=lo,
                          x_hi=hi)

    def _is_root(self, lo: float, hi: float, z: complex) -> bool:
        """
        Returns ``True`` if `z` is real (within tolerance) and its real
        part lies strictly between `lo` and `hi`.
        """
        if is_sequence(lo, z.real, hi):
            tolerance = max(self.relative_accuracy * abs(z),
                            self.absolute_accuracy)
            return (abs(z.imag) <= tolerance or
                    abs(z) <= self.function_value_accuracy)
        return False

    def _laguerre_all(self, problem: Problem, coeffs: list[complex],
                      initial: complex) -> list[complex]:
        n = len(coeffs) - 1
        if n < 1:
            raise ValueError("Polynomial degree must be >= 1.")

        roots = []
        work = list(coeffs)
        for _ in range(n):
            root = self._laguerre_root(problem, work, initial)
            roots.append(root)
            if len(work) > 2:
                work = deflate(work, root)

        return roots

    def _laguerre_root(self, problem: Problem, coeffs: Sequence[complex],
                       initial: complex) -> complex:
        n = len(coeffs) - 1
        if n < 1:
            raise ValueError("Polynomial degree must be >= 1.")

        abs_acc, rel_acc = self.absolute_accuracy, self.relative_accuracy
        f_tol = self.function_value_accuracy
        n_c, n1_c = complex(n), complex(n - 1)

        z = initial
        z_old = complex(inf, inf)
        while True:
            pv, dv, d2v = poly_eval_derivs(coeffs, z)

            tolerance = max(rel_acc * abs(z), abs_acc)
            if abs(z - z_old) <= tolerance:
                return z
            if abs(pv) <= f_tol:
                return z

            # Laguerre step.
            g = dv / pv
            g2 = g * g
            h = g2 - d2v / pv
            delta = n1_c * (n_c * h - g2)
            delta_sqrt = cmath.sqrt(delta)
            d_plus, d_minus = g + delta_sqrt, g - delta_sqrt
            denominator = d_plus if abs(d_plus) > abs(d_minus) else d_minus

            if denominator == 0:
                # Perturb the current estimate and restart convergence
                # tracking.
                z += complex(abs_acc, abs_acc)
                z_old = complex(inf, inf)
            else:
                z_old = z
                z -= n_c / denominator

            problem.budget.increment()
            if problem.verbose:
                print(f"... Iteration {problem.budget.count}: z = {z}")

    def _complex_problem(self, coefficients: _Coefficients,
                         initial: complex, max_eval: int) -> Problem:
        self._evaluations = 0
        return setup_problem(max_eval, _as_polynomial(coefficients), -inf,
                             inf, initial, check_sequence=False,
                             verbose=self._verbose)


# ----------------------------------------------------------------------

def _as_polynomial(coefficients: _Coefficients) -> Polynomial:
    if coefficients is None:
        raise TypeError("Polynomial coefficients must be given.")

    if isinstance(coefficients, Polynomial):
        poly = coefficients.convert()  # Default domain and window.
    else:
        poly = Polynomial(np.asarray(coefficients, dtype=float))

    # Drop zero high order terms.
    coef = np.trim_zeros(np.asarray(poly.coef, dtype=float), 'b')
    if len(coef) < 2:
        raise ValueError("Polynomial degree must be >= 1.")

    return Polynomial(coef)


def _complex_coeffs(poly: Polynomial) -> list[complex]:
    return [complex(c) for c in poly.coef]
