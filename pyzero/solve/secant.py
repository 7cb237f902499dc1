"""
Secant-type solvers.  `SecantSolver` is the plain secant method, which
does not keep the root bracketed.  `RegulaFalsiSolver`,
`IllinoisSolver` and `PegasusSolver` are bracketing variants that differ
only in how they treat the endpoint that is retained when the sign
change stays on the same side.

References
----------
.. [1] Ford, J. A., "Improved Algorithms of Illinois-Type for the
       Numerical Solution of Nonlinear Equations", University of Essex
       Department of Computer Science Report CSM-257, 1995.
.. [2] Dowell, M. and Jarratt, P., "The 'Pegasus' method for computing
       the root of an equation", BIT Numerical Mathematics 12, 1972,
       pp. 503-508.
"""
from __future__ import annotations

from enum import Enum

from pyzero.solve.base import (AllowedSolution, BracketedUnivariateSolver,
                               Problem, UnivariateSolver)
from pyzero.solve.bracket import check_bracketing
from pyzero.solve.exception import ConvergenceError


# Written by Eric J. Whitney, September 2026.

# ======================================================================

class SecantMethod(Enum):
    """
    Bracketing secant variants.  Each member knows how to damp the
    function value of the retained endpoint (`f0`) when the new point
    `x` replaces the other endpoint without changing the side of the
    sign change.
    """
    REGULA_FALSI = 'regula_falsi'
    ILLINOIS = 'illinois'
    PEGASUS = 'pegasus'

    def damp(self, f0: float, f1: float, fx: float) -> float:
        """
        Returns the damped value of `f0`, given the function values at
        the other (replaced) endpoint `f1` and at the new point `fx`.
        """
        if self is SecantMethod.REGULA_FALSI:
            return f0  # Unmodified.
        elif self is SecantMethod.ILLINOIS:
            return f0 * 0.5
        elif self is SecantMethod.PEGASUS:
            return f0 * f1 / (f1 + fx)
        else:
            raise AssertionError(f"Unknown secant method: {self!r}")


# ======================================================================

class SecantSolver(UnivariateSolver):
    """
    Find a zero using the secant method.  The interval only needs to
    bracket the root initially; the method does not keep the root
    bracketed and so may fail to converge for some functions.  See the
    bracketing variants (e.g. `IllinoisSolver`) for a more robust
    alternative.

    Iteration stops when the function value at the latest point is
    no greater than the function value accuracy, or when successive
    estimates differ by less than ``max(rel_acc * |x|, abs_acc)``.
    A `ConvergenceError` is raised if the two latest points have equal
    function values, as the secant line then has no zero.
    """

    def _iterate(self, problem: Problem) -> float:
        x0, x1 = problem.x_min, problem.x_max
        f0 = problem(x0)
        if f0 == 0:
            return x0
        f1 = problem(x1)
        if f1 == 0:
            return x1
        check_bracketing(x0, x1, f0, f1)

        f_tol = self.function_value_accuracy
        abs_acc, rel_acc = self.absolute_accuracy, self.relative_accuracy

        while True:
            if f1 == f0:
                raise ConvergenceError(
                    "Secant method failed, equal function values:",
                    details="Secant line is flat.", x0=x0, x1=x1, f0=f0)

            x = x1 - ((f1 * (x1 - x0)) / (f1 - f0))
            fx = problem(x)
            if fx == 0:
                return x

            x0, f0 = x1, f1
            x1, f1 = x, fx

            if abs(f1) <= f_tol:
                return x1

            if abs(x1 - x0) < max(rel_acc * abs(x1), abs_acc):
                return x1


# ======================================================================

class BaseSecantSolver(BracketedUnivariateSolver):
    """
    Bracketing secant-based solver.  The bracket is kept on every
    iteration so that convergence is guaranteed (given an initial
    bracket) and the side of the root reported can be chosen via
    `AllowedSolution`.

    Each iteration places the secant point `x` between the endpoints
    `(x0, f0)` and `(x1, f1)`.  If the sign change moves to the side just
    replaced the bracket shifts normally; otherwise `f0` is damped
    according to `method`.
    """

    def __init__(self, absolute_accuracy: float = None,
                 relative_accuracy: float = None,
                 function_value_accuracy: float = None, *,
                 method: SecantMethod | str, verbose: bool = False):
        """
        Parameters
        ----------
        absolute_accuracy, relative_accuracy, function_value_accuracy :
            See `UnivariateSolver`.
        method : SecantMethod or str
            Bracketing secant variant.
        verbose : bool, default = False
            If `True`, print progress statements.
        """
        super().__init__(absolute_accuracy, relative_accuracy,
                         function_value_accuracy, verbose=verbose)
        self._method = SecantMethod(method)

    @property
    def method(self) -> SecantMethod:
        return self._method

    def _iterate(self, problem: Problem) -> float:
        x0, x1 = problem.x_min, problem.x_max
        f0 = problem(x0)
        if f0 == 0:
            return x0
        f1 = problem(x1)
        if f1 == 0:
            return x1
        check_bracketing(x0, x1, f0, f1)

        f_tol = self.function_value_accuracy
        abs_acc, rel_acc = self.absolute_accuracy, self.relative_accuracy
        allowed = problem.allowed

        # 'inverted' is True when x0 is the right endpoint.
        inverted = False

        while True:
            x = x1 - ((f1 * (x1 - x0)) / (f1 - f0))
            fx = problem(x)
            if fx == 0:
                return x

            if f1 * fx < 0:
                # Sign change between x1 and x; x1 becomes the retained
                # endpoint.
                x0, f0 = x1, f1
                inverted = not inverted
            else:
                if self._method is SecantMethod.REGULA_FALSI and x == x1:
                    raise ConvergenceError(
                        "Regula Falsi failed to shrink the bracket:",
                        details="Update gave no change.", x0=x0, x1=x1,
                        f0=f0, f1=f1)
                f0 = self._method.damp(f0, f1, fx)

            x1, f1 = x, fx

            # Function value small enough; accept x1 if on the allowed
            # side.
            if abs(f1) <= f_tol:
                if allowed == AllowedSolution.ANY_SIDE:
                    return x1
                elif allowed == AllowedSolution.LEFT_SIDE:
                    if inverted:
                        return x1
                elif allowed == AllowedSolution.RIGHT_SIDE:
                    if not inverted:
                        return x1
                elif allowed == AllowedSolution.BELOW_SIDE:
                    if f1 <= 0:
                        return x1
                elif allowed == AllowedSolution.ABOVE_SIDE:
                    if f1 >= 0:
                        return x1
                else:
                    raise AssertionError(f"Unknown allowed solution: "
                                         f"{allowed!r}")

            # Bracket small enough; return the endpoint on the allowed
            # side.
            if abs(x1 - x0) < max(rel_acc * abs(x1), abs_acc):
                if allowed == AllowedSolution.ANY_SIDE:
                    return x1
                elif allowed == AllowedSolution.LEFT_SIDE:
                    return x1 if inverted else x0
                elif allowed == AllowedSolution.RIGHT_SIDE:
                    return x0 if inverted else x1
                elif allowed == AllowedSolution.BELOW_SIDE:
                    return x1 if f1 <= 0 else x0
                elif allowed == AllowedSolution.ABOVE_SIDE:
                    return x1 if f1 >= 0 else x0
                else:
                    raise AssertionError(f"Unknown allowed solution: "
                                         f"{allowed!r}")


# ----------------------------------------------------------------------

class RegulaFalsiSolver(BaseSecantSolver):
    """
    Regula Falsi (false position) method.  The bracket is retained but
    convergence can be very slow when one endpoint stagnates; a
    `ConvergenceError` is raised if the bracket stops shrinking
    altogether.  `IllinoisSolver` or `PegasusSolver` are usually
    preferable.
    """

    def __init__(self, absolute_accuracy: float = None,
                 relative_accuracy: float = None,
                 function_value_accuracy: float = None, *,
                 verbose: bool = False):
        super().__init__(absolute_accuracy, relative_accuracy,
                         function_value_accuracy,
                         method=SecantMethod.REGULA_FALSI, verbose=verbose)


class IllinoisSolver(BaseSecantSolver):
    """
    Illinois method: as for Regula Falsi, but the retained endpoint's
    function value is halved each time it is retained [1]_.

    Examples
    --------
    >>> IllinoisSolver().solve(100, lambda x: x - 1, -10, 10)
    1.0
    """

    def __init__(self, absolute_accuracy: float = None,
                 relative_accuracy: float = None,
                 function_value_accuracy: float = None, *,
                 verbose: bool = False):
        super().__init__(absolute_accuracy, relative_accuracy,
                         function_value_accuracy,
                         method=SecantMethod.ILLINOIS, verbose=verbose)


class PegasusSolver(BaseSecantSolver):
    """
    Pegasus method: as for Regula Falsi, but the retained endpoint's
    function value is scaled by `f1 / (f1 + fx)` each time it is
    retained [2]_.  Usually converges slightly faster than the Illinois
    method.
    """

    def __init__(self, absolute_accuracy: float = None,
                 relative_accuracy: float = None,
                 function_value_accuracy: float = None, *,
                 verbose: bool = False):
        super().__init__(absolute_accuracy, relative_accuracy,
                         function_value_accuracy,
                         method=SecantMethod.PEGASUS, verbose=verbose)
