"""
=====================================
Solvers (:mod:`pyzero.solve`)
=====================================

.. currentmodule:: pyzero.solve

Solvers for finding a zero of a scalar function of one variable within
a given interval, plus utilities for finding and checking brackets.

Solvers are constructed with their accuracies and options, then called
using ``solve(max_eval, f, x_min, x_max, [x_start])``.

Bracketing Solvers
------------------

These keep the root bracketed and accept an `AllowedSolution` to pick
which side of the root is returned.

.. autosummary::
    :toctree:

    BracketingNthOrderBrentSolver
    FieldBracketingNthOrderBrentSolver
    IllinoisSolver
    PegasusSolver
    RegulaFalsiSolver

Other Solvers
-------------

.. autosummary::
    :toctree:

    BisectionSolver
    BrentSolver
    LaguerreSolver
    MullerSolver
    MullerSolver2
    NewtonRaphsonSolver
    RiddersSolver
    SecantSolver

Functions
---------

.. autosummary::
    :toctree:

    bracket
    find_root
    force_side
    is_bracketing
    midpoint
    verify_bracketing
    verify_interval
    verify_sequence
    get_default_accuracy
    set_default_accuracy

Exceptions
----------

.. autosummary::
    :toctree:

    SolverError
    ConvergenceError
    NoBracketingError
    TooManyEvaluationsError

"""

from .exception import (SolverError, ConvergenceError, NoBracketingError,
                        TooManyEvaluationsError)
from .accuracy import (Accuracy, get_default_accuracy, set_default_accuracy,
                       reset_default_accuracy)
from .budget import EvaluationBudget
from .base import (AllowedSolution, BracketedUnivariateSolver, Problem,
                   UnivariateSolver)
from .bracket import (bracket, find_root, force_side, is_bracketing,
                      midpoint, verify_bracketing, verify_interval,
                      verify_sequence)
from .bisection import BisectionSolver
from .brent import BrentSolver
from .laguerre import LaguerreSolver
from .muller import MullerSolver, MullerSolver2
from .newton import NewtonRaphsonSolver
from .nth_order_brent import (BracketingNthOrderBrentSolver,
                              FieldBracketingNthOrderBrentSolver)
from .ridders import RiddersSolver
from .secant import (BaseSecantSolver, IllinoisSolver, PegasusSolver,
                     RegulaFalsiSolver, SecantMethod, SecantSolver)
