from unittest import TestCase

from .scalar_tst_functions import (
    F_EXACT, PI, df_dx, f, f_df, sin_cos)


# ======================================================================

class TestNewtonRaphson(TestCase):
    def test_solve(self):
        from pyzero.solve import NewtonRaphsonSolver

        solver = NewtonRaphsonSolver()
        self.assertAlmostEqual(solver.solve(100, f_df, 1.0, 2.0), F_EXACT,
                               places=10)
        n_eval = solver.evaluations

        # Separate derivative function counts once per iteration.
        self.assertAlmostEqual(solver.solve(100, f, 1.0, 2.0, fprime=df_dx),
                               F_EXACT, places=10)
        self.assertEqual(solver.evaluations, n_eval)

    def test_solve_near(self):
        from pyzero.solve import NewtonRaphsonSolver

        solver = NewtonRaphsonSolver(1e-12)
        self.assertAlmostEqual(solver.solve_near(100, sin_cos, 3.0), PI,
                               places=12)

    def test_errors(self):
        from pyzero.solve import NewtonRaphsonSolver, TooManyEvaluationsError

        solver = NewtonRaphsonSolver()
        with self.assertRaises(TooManyEvaluationsError):
            solver.solve(3, f_df, 1.0, 2.0)
        self.assertEqual(solver.evaluations, 3)

        with self.assertRaises(TypeError):
            solver.solve(100, f, 1.0, 2.0, fprime=1.0)
        with self.assertRaises(ValueError):
            solver.solve(100, f_df, 1.0, 2.0, 2.5)
