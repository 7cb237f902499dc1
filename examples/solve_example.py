#!usr/bin/env python3

# Examples of finding the zeros of scalar functions.

from fractions import Fraction
from math import cos, exp, sin

import numpy as np

from pyzero.solve import (AllowedSolution, BisectionSolver,
                          BracketingNthOrderBrentSolver, BrentSolver,
                          FieldBracketingNthOrderBrentSolver, IllinoisSolver,
                          LaguerreSolver, MullerSolver, MullerSolver2,
                          NewtonRaphsonSolver, PegasusSolver, RiddersSolver,
                          SecantSolver, bracket, force_side)


def kepler(e, m):
    """Kepler's equation E - e sin(E) = M, with derivative."""
    def f(x):
        return x - e * sin(x) - m, 1 - e * cos(x)
    return f


def value_only(f_df):
    return lambda x: f_df(x)[0]


# Compare the number of evaluations required by each solver.
f_df = kepler(e=0.8, m=0.5)
f = value_only(f_df)
x_lo, x_hi = bracket(f, 0.5, 0.0, np.pi)
print(f"Bracket: [{x_lo}, {x_hi}]\n")

solvers = [BisectionSolver(1e-12), IllinoisSolver(1e-12),
           PegasusSolver(1e-12), SecantSolver(1e-12), BrentSolver(1e-12),
           RiddersSolver(1e-12), MullerSolver(1e-12), MullerSolver2(1e-12),
           BracketingNthOrderBrentSolver(1e-12)]
for solver in solvers:
    x = solver.solve(200, f, x_lo, x_hi)
    print(f"{type(solver).__name__:>30s}: x = {x:.15f}, "
          f"evaluations = {solver.evaluations}")

newton = NewtonRaphsonSolver(1e-12)
x_newton = newton.solve(200, f_df, x_lo, x_hi)
print(f"{'NewtonRaphsonSolver':>30s}: x = {x_newton:.15f}, "
      f"evaluations = {newton.evaluations}")

# Force the Newton result onto each side of the root.
print()
for allowed in AllowedSolution:
    x = force_side(100, f, PegasusSolver(1e-12), x_newton, x_lo, x_hi,
                   allowed)
    print(f"{allowed.name:>12s}: x = {x!r}, f(x) = {f(x):+.3e}")

# Exact arithmetic.
print()
solver = FieldBracketingNthOrderBrentSolver(Fraction(1, 10 ** 12),
                                            Fraction(0), Fraction(0))
x = solver.solve(100, lambda x: 7 * x - 3, Fraction(0), Fraction(1))
print(f"Root of 7x - 3 = {x}")

# Roots of a polynomial: x^4 - 10x^2 + 9 = (x^2 - 1)(x^2 - 9).
print()
laguerre = LaguerreSolver(1e-12)
coeffs = [9, 0, -10, 0, 1]
print(f"Real root in [2, 4]: {laguerre.solve(100, coeffs, 2.0, 4.0)}")
roots = laguerre.solve_all_complex(coeffs, 0.0)
print("All roots: " + ", ".join(f"{z.real:+.6f}{z.imag:+.6f}j"
                               for z in sorted(roots, key=lambda z: z.real)))

# Progress output.
print()
BrentSolver(1e-8, verbose=True).solve(50, lambda x: exp(x) - 2, 0.0, 2.0)
