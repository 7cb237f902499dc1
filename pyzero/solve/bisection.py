"""
Find a zero of a scalar function by repeatedly halving an interval that
brackets it.
"""
from pyzero.solve.base import Problem, UnivariateSolver
from pyzero.solve.bracket import check_bracketing, midpoint


# Written by Eric J. Whitney, September 2026.

# ======================================================================

class BisectionSolver(UnivariateSolver):
    # noinspection PyUnresolvedReferences
    r"""
    Approximate solution of :math:`f(x) = 0` on interval :math:`x \in
    [x_{min}, x_{max}]` by the bisection method.  For bisection to work
    :math:`f(x)` must change sign across the interval.

    The interval is halved on each iteration and the solver stops once
    its width is no greater than `absolute_accuracy`, returning the
    midpoint.  The relative and function value accuracies are not used.
    Convergence is guaranteed (linear) once a bracket is given.

    Examples
    --------
    >>> solver = BisectionSolver(absolute_accuracy=1e-9)
    >>> round(solver.solve(100, lambda x: x**2 - x - 1, 1, 2), 8)
    1.61803399
    """

    def _iterate(self, problem: Problem) -> float:
        x_min, x_max = problem.x_min, problem.x_max
        f_min = problem(x_min)
        if f_min == 0:
            return x_min
        f_max = problem(x_max)
        if f_max == 0:
            return x_max
        check_bracketing(x_min, x_max, f_min, f_max)

        abs_acc = self.absolute_accuracy
        while True:
            x_m = midpoint(x_min, x_max)
            f_m = problem(x_m)

            # Check which side root is on, narrow interval.
            if f_m * f_min > 0:
                x_min, f_min = x_m, f_m
            else:
                x_max = x_m

            if abs(x_max - x_min) <= abs_acc:
                return midpoint(x_min, x_max)
