"""
Newton-Raphson method for functions that can supply their own first
derivative.
"""
from __future__ import annotations

from collections.abc import Callable
from math import inf

from pyzero.solve.base import Problem, UnivariateSolver


# Written by Eric J. Whitney, October 2026.

# ======================================================================

class NewtonRaphsonSolver(UnivariateSolver):
    r"""
    Find a zero using the Newton-Raphson method:

        :math:`x_{n+1} = x_n - f(x_n) / f'(x_n)`

    Iteration stops when :math:`|x_{n+1} - x_n|` is no greater than the
    absolute accuracy.

    The function is called once per iteration and must return both the
    value and first derivative as a tuple ``(f(x), f'(x))``, unless a
    separate derivative function `fprime` is passed to `solve()` (in
    which case both calls together count as one evaluation).

    Notes
    -----
    - The interval is only used to check and set the start value; the
      iterates themselves are not bounded.
    - There is no protection against divergence or a zero derivative.
      Supply a good start value, or use a bracketing method.

    Examples
    --------
    >>> def f(x):
    ...     return x ** 2 - 2, 2 * x
    >>> round(NewtonRaphsonSolver().solve_near(100, f, 1.0), 10)
    1.4142135624
    """

    def __init__(self, absolute_accuracy: float = None, *,
                 verbose: bool = False):
        super().__init__(absolute_accuracy, verbose=verbose)

    def solve(self, max_eval: int, f: Callable, x_min: float,
              x_max: float, x_start: float = None,
              fprime: Callable[[float], float] = None) -> float:
        """
        Find a zero near `x_start` (default: the interval midpoint).

        Parameters
        ----------
        max_eval, x_min, x_max, x_start :
            See `UnivariateSolver.solve`.
        f : Callable
            Function returning ``(value, derivative)``, or only the value
            if `fprime` is given.
        fprime : Callable[[float], float], optional
            Derivative of `f`.

        Returns
        -------
        float
            Value where the function is zero.
        """
        if fprime is not None:
            if not callable(fprime):
                raise TypeError("'fprime' must be callable.")
            func = f

            def f(x):
                return func(x), fprime(x)

        return super().solve(max_eval, f, x_min, x_max, x_start)

    def solve_near(self, max_eval: int, f: Callable, x_start: float,
                   fprime: Callable[[float], float] = None) -> float:
        """
        Find a zero near `x_start` with no restriction on the interval.
        Parameters are as for `solve()`.
        """
        return self.solve(max_eval, f, -inf, inf, x_start, fprime=fprime)

    def _iterate(self, problem: Problem) -> float:
        abs_acc = self.absolute_accuracy
        x0 = problem.x_start

        while True:
            y0, dy0 = problem(x0)
            x1 = x0 - y0 / dy0
            if abs(x1 - x0) <= abs_acc:
                return x1

            x0 = x1
