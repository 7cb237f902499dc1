"""
Shared machinery for all univariate solvers: the allowed-solution
policy, the per-call `Problem` record and the solver driver.
"""
from __future__ import annotations

from abc import ABC, abstractmethod
from collections.abc import Callable
from dataclasses import dataclass
from enum import Enum
from typing import Any

from pyzero.solve.accuracy import Accuracy, get_default_accuracy
from pyzero.solve.budget import EvaluationBudget


# Written by Eric J. Whitney, September 2026.

# ======================================================================

class AllowedSolution(Enum):
    """
    Selects which side of the final bracket is reported once a
    bracketing solver has converged.

    - ``ANY_SIDE``: No preference; the best estimate is returned.
    - ``LEFT_SIDE``: Only solutions `x <= root` are accepted.
    - ``RIGHT_SIDE``: Only solutions `x >= root` are accepted.
    - ``BELOW_SIDE``: Only solutions with `f(x) <= 0` are accepted.
    - ``ABOVE_SIDE``: Only solutions with `f(x) >= 0` are accepted.
    """
    ANY_SIDE = 'any'
    LEFT_SIDE = 'left'
    RIGHT_SIDE = 'right'
    BELOW_SIDE = 'below'
    ABOVE_SIDE = 'above'


# ----------------------------------------------------------------------

@dataclass
class Problem:
    """
    The state of a single `solve` call: objective function, search
    interval, start value, allowed solution and evaluation budget.
    Calling the problem evaluates the objective function and counts the
    evaluation against the budget.
    """
    f: Callable[[Any], Any]
    x_min: Any
    x_max: Any
    x_start: Any
    budget: EvaluationBudget
    allowed: AllowedSolution = AllowedSolution.ANY_SIDE
    verbose: bool = False

    def __call__(self, x):
        self.budget.increment()
        fx = self.f(x)
        if self.verbose:
            print(f"... Evaluation {self.budget.count}: x = {x}, "
                  f"f(x) = {fx}")
        return fx


# ======================================================================

def setup_problem(max_eval: int, f: Callable, x_min, x_max, x_start=None,
                  *, allowed: AllowedSolution = AllowedSolution.ANY_SIDE,
                  check_sequence: bool = True,
                  verbose: bool = False) -> Problem:
    """
    Validate the inputs of a solve request and build the `Problem`.

    Parameters
    ----------
    max_eval : int
        Maximum number of function evaluations.
    f : Callable
        Objective function.
    x_min, x_max :
        Search interval.
    x_start : optional
        Starting value.  If `None` the interval midpoint is used.
    allowed : AllowedSolution, default = ANY_SIDE
        Allowed solution carried by the problem.
    check_sequence : bool, default = True
        If `True` the interval (and the start value, when given) are
        checked for ``x_min < x_start < x_max``.
    verbose : bool, default = False
        If `True`, each evaluation is printed.

    Returns
    -------
    Problem

    Raises
    ------
    TypeError
        If `f` is not callable.
    ValueError
        Illegal interval, start value or `max_eval`.
    """
    from pyzero.solve.bracket import (midpoint, verify_interval,
                                      verify_sequence)

    if f is None or not callable(f):
        raise TypeError("Objective function 'f' must be callable.")

    budget = EvaluationBudget(max_eval)

    if check_sequence:
        if x_start is None:
            verify_interval(x_min, x_max)
        else:
            verify_sequence(x_min, x_start, x_max)

    if x_start is None:
        x_start = midpoint(x_min, x_max)

    return Problem(f, x_min, x_max, x_start, budget, allowed=allowed,
                   verbose=verbose)


def drive(iterate: Callable[[Problem], Any], problem: Problem, *,
          name: str = 'Solver'):
    """
    Run the algorithm-specific `iterate` function on `problem` and
    return the root it finds.  Errors raised by `iterate` (including
    budget exhaustion) propagate unchanged.
    """
    if problem.verbose:
        print(f"{name}: Solving on [{problem.x_min}, {problem.x_max}], "
              f"start = {problem.x_start}:")

    root = iterate(problem)

    if problem.verbose:
        print(f"... Converged: x = {root} after {problem.budget.count} "
              f"evaluations.")
    return root


# ======================================================================

class UnivariateSolver(ABC):
    """
    Abstract definition of a solver for :math:`f(x) = 0` where `f` is a
    scalar function of one variable.

    Concrete solvers supply `_iterate()`, which is handed a fresh
    `Problem` on each call to `solve()`.  Solvers hold only their
    accuracies and options, plus the evaluation count of the most recent
    call, so distinct instances may be used in parallel.
    """

    def __init__(self, absolute_accuracy: float = None,
                 relative_accuracy: float = None,
                 function_value_accuracy: float = None, *,
                 verbose: bool = False):
        """
        Parameters
        ----------
        absolute_accuracy : float, optional
            Absolute accuracy.  Default from `get_default_accuracy()`.
        relative_accuracy : float, optional
            Relative accuracy.  Default from `get_default_accuracy()`.
        function_value_accuracy : float, optional
            Function value accuracy.  Default from
            `get_default_accuracy()`.
        verbose : bool, default = False
            If `True`, print progress statements.

        Raises
        ------
        ValueError
            If any accuracy is negative.
        """
        defaults = get_default_accuracy()
        self._accuracy = Accuracy(
            absolute=(defaults.absolute if absolute_accuracy is None
                      else absolute_accuracy),
            relative=(defaults.relative if relative_accuracy is None
                      else relative_accuracy),
            function_value=(defaults.function_value
                            if function_value_accuracy is None
                            else function_value_accuracy))
        self._verbose = verbose
        self._evaluations = 0

    def __repr__(self):
        return (f"{type(self).__name__}("
                f"absolute_accuracy={self.absolute_accuracy}, "
                f"relative_accuracy={self.relative_accuracy}, "
                f"function_value_accuracy={self.function_value_accuracy})")

    # -- Public Methods ------------------------------------------------

    @property
    def absolute_accuracy(self):
        return self._accuracy.absolute

    @property
    def relative_accuracy(self):
        return self._accuracy.relative

    @property
    def function_value_accuracy(self):
        return self._accuracy.function_value

    @property
    def evaluations(self) -> int:
        """Number of function evaluations used by the last `solve()`."""
        return self._evaluations

    def solve(self, max_eval: int, f: Callable[[float], float],
              x_min: float, x_max: float, x_start: float = None) -> float:
        """
        Find a zero of `f` in the interval [`x_min`, `x_max`].

        Parameters
        ----------
        max_eval : int
            Maximum number of function evaluations.
        f : Callable[[float], float]
            Function to solve.
        x_min, x_max : float
            Lower and upper bounds of the search interval.
        x_start : float, optional
            Start value.  Defaults to the midpoint of the interval.

        Returns
        -------
        float
            Value where the function is zero.

        Raises
        ------
        ValueError
            Illegal interval, start value or `max_eval`.
        NoBracketingError
            If the solver requires a bracket and the interval does not
            bracket a root.
        TooManyEvaluationsError
            If `max_eval` is exceeded.
        """
        return self._solve(max_eval, f, x_min, x_max, x_start,
                           AllowedSolution.ANY_SIDE)

    # -- Private Methods -----------------------------------------------

    def _solve(self, max_eval, f, x_min, x_max, x_start,
               allowed: AllowedSolution, *, check_sequence: bool = True):
        self._evaluations = 0
        problem = setup_problem(max_eval, f, x_min, x_max, x_start,
                                allowed=allowed,
                                check_sequence=check_sequence,
                                verbose=self._verbose)
        try:
            return drive(self._iterate, problem, name=type(self).__name__)
        finally:
            self._evaluations = problem.budget.count

    @abstractmethod
    def _iterate(self, problem: Problem):
        """
        Run the algorithm on `problem`, returning the root.  All function
        evaluations must be made by calling `problem`.
        """
        raise NotImplementedError


# ----------------------------------------------------------------------

class BracketedUnivariateSolver(UnivariateSolver, ABC):
    """
    A solver which maintains a bracket around the root at all times, so
    that the side of the root on which the solution lies can be chosen.
    """

    def solve(self, max_eval: int, f: Callable[[float], float],
              x_min: float, x_max: float, x_start: float = None,
              allowed: AllowedSolution = AllowedSolution.ANY_SIDE
              ) -> float:
        """
        Find a zero of `f` in the interval [`x_min`, `x_max`].

        Parameters
        ----------
        max_eval, f, x_min, x_max, x_start :
            See `UnivariateSolver.solve`.
        allowed : AllowedSolution, default = ANY_SIDE
            Which side of the final bracket may be returned.

        Returns
        -------
        float
            Value where the function is zero, on the requested side.
        """
        return self._solve(max_eval, f, x_min, x_max, x_start,
                           AllowedSolution(allowed))
