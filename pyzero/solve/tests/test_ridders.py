from unittest import TestCase

from .scalar_tst_functions import (
    CUBE_ROOT2, PI, cube_root2_fn, exp_m1, sin_fn)


# ======================================================================

class TestRidders(TestCase):
    def test_ridders(self):
        from pyzero.solve import RiddersSolver

        solver = RiddersSolver(1e-12)
        self.assertAlmostEqual(solver.solve(100, sin_fn, 3.0, 4.0), PI,
                               delta=1e-10)
        self.assertAlmostEqual(solver.solve(100, cube_root2_fn, 0.0, 2.0),
                               CUBE_ROOT2, delta=1e-10)
        self.assertAlmostEqual(solver.solve(100, exp_m1, -3.0, 5.0), 0.0,
                               delta=1e-10)

    def test_function_value_accuracy(self):
        from pyzero.solve import RiddersSolver

        # Stops as soon as |f(x)| is small enough.
        loose = RiddersSolver(1e-12, function_value_accuracy=1e-2)
        tight = RiddersSolver(1e-12)
        x = loose.solve(100, cube_root2_fn, 0.0, 2.0)
        tight.solve(100, cube_root2_fn, 0.0, 2.0)

        self.assertTrue(abs(cube_root2_fn(x)) <= 1e-2)
        self.assertTrue(loose.evaluations < tight.evaluations)
