from unittest import TestCase

from .scalar_tst_functions import (
    F_EXACT, PI, SQRT2, f, sin_fn, sqrt2_fn)


# ======================================================================

class TestBrent(TestCase):
    def test_sqrt2(self):
        from pyzero.solve import BrentSolver

        solver = BrentSolver()
        x = solver.solve(100, sqrt2_fn, 0.0, 2.0)
        self.assertAlmostEqual(x, SQRT2, delta=3e-6)
        self.assertTrue(solver.evaluations < 15)

        # Rounded to the sixth decimal place.
        solver = BrentSolver(1e-10)
        self.assertEqual(round(solver.solve(100, sqrt2_fn, 0.0, 2.0), 6),
                         1.414214)

    def test_accurate(self):
        from pyzero.solve import BrentSolver

        solver = BrentSolver(1e-14)
        self.assertAlmostEqual(solver.solve(100, f, 1.0, 2.0), F_EXACT,
                               delta=1e-13)
        self.assertAlmostEqual(solver.solve(100, sin_fn, 3.0, 4.0), PI,
                               delta=1e-12)

    def test_start_value(self):
        from pyzero.solve import BrentSolver

        solver = BrentSolver()

        # Exact root at the start value.
        self.assertEqual(solver.solve(100, lambda x: x - 1, 0.0, 3.0, 1.0),
                         1.0)
        self.assertEqual(solver.evaluations, 1)

        # Root between x_min and the start value; a single secant step
        # is exact for a linear function.
        self.assertEqual(solver.solve(100, lambda x: x - 1, 0.0, 3.0, 2.5),
                         1.0)
        self.assertEqual(solver.evaluations, 3)

        # Root between the start value and x_max.
        x = solver.solve(100, f, 0.0, 2.0, 1.0)
        self.assertAlmostEqual(x, F_EXACT, delta=3e-6)
