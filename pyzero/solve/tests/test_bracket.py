from unittest import TestCase

import numpy as np

from .scalar_tst_functions import f, f_df, F_EXACT


# ======================================================================

class TestBracket(TestCase):
    def test_arithmetic(self):
        from pyzero.solve import bracket

        # Steps: [3, 5], [2, 6], [1, 7], [0, 8]; sign change in [0, 1].
        x_lo, x_hi = bracket(lambda x: 0.5 - x, 4, -np.inf, np.inf)
        self.assertEqual((x_lo, x_hi), (0.0, 1.0))

        # First step brackets directly.
        self.assertEqual(bracket(lambda x: x - 4.5, 4, -10, 10), (3, 5))

        # Larger steps; [2, 6] then [0, 8].
        self.assertEqual(bracket(lambda x: 1 - x, 4, -np.inf, np.inf, q=2),
                         (0.0, 2.0))

    def test_geometric(self):
        from pyzero.solve import bracket

        # Deltas 1, 3, 7, 15, 31, 63, 127.
        x_lo, x_hi = bracket(lambda x: x - 100, 0, -np.inf, np.inf, q=1,
                             r=2)
        self.assertEqual((x_lo, x_hi), (63.0, 127.0))

    def test_exact_zero(self):
        from pyzero.solve import bracket

        x_lo, x_hi = bracket(lambda x: x - 2, 0, -10, 10)
        self.assertTrue(x_lo <= 2 <= x_hi)

    def test_failure(self):
        from pyzero.solve import NoBracketingError, bracket

        def no_root(x):
            return x ** 2 + 1

        # Reaches bounds.
        with self.assertRaises(NoBracketingError) as cm:
            bracket(no_root, 0, -10, 10)
        self.assertEqual((cm.exception.x_lo, cm.exception.x_hi),
                         (-10, 10))
        self.assertEqual(cm.exception.details, "Reached bounds.")

        # Reaches max_iter.
        with self.assertRaises(NoBracketingError) as cm:
            bracket(no_root, 0, -np.inf, np.inf, max_iter=5)
        self.assertEqual(cm.exception.details, "Reached max_iter.")
        self.assertEqual(cm.exception.steps, 5)

    def test_invalid(self):
        from pyzero.solve import bracket

        with self.assertRaises(ValueError):
            bracket(f, 1.5, 1, 2, q=0)
        with self.assertRaises(ValueError):
            bracket(f, 1.5, 1, 2, max_iter=0)
        with self.assertRaises(ValueError):
            bracket(f, 3, 1, 2)
        with self.assertRaises(ValueError):
            bracket(f, 1, 1, 2)


# ======================================================================

class TestChecks(TestCase):
    def test_is_bracketing(self):
        from pyzero.solve import is_bracketing

        self.assertTrue(is_bracketing(f, 1, 2))
        self.assertTrue(is_bracketing(f, 2, 1))
        self.assertFalse(is_bracketing(f, 2, 3))
        self.assertTrue(is_bracketing(lambda x: x, 0, 3))  # Zero endpoint.

        with self.assertRaises(TypeError):
            is_bracketing(None, 1, 2)

    def test_verify(self):
        from pyzero.solve import (NoBracketingError, verify_bracketing,
                                  verify_interval, verify_sequence)

        verify_interval(1, 2)
        verify_sequence(1, 1.5, 2)
        verify_bracketing(f, 1, 2)

        with self.assertRaises(ValueError):
            verify_interval(2, 2)
        with self.assertRaises(ValueError):
            verify_sequence(1, 2, 2)
        with self.assertRaises(ValueError):
            verify_sequence(1, 0.5, 2)
        with self.assertRaises(ValueError):
            verify_bracketing(f, 2, 1)
        with self.assertRaises(NoBracketingError):
            verify_bracketing(f, 2, 3)

    def test_midpoint(self):
        from fractions import Fraction
        from pyzero.solve import midpoint

        self.assertEqual(midpoint(1.0, 2.0), 1.5)
        self.assertEqual(midpoint(Fraction(1, 3), Fraction(2, 3)),
                         Fraction(1, 2))


# ======================================================================

class TestForceSide(TestCase):
    def test_force_side(self):
        from pyzero.solve import (AllowedSolution, IllinoisSolver,
                                  NewtonRaphsonSolver, force_side)

        base_root = NewtonRaphsonSolver().solve(100, f_df, 1, 2)
        solver = IllinoisSolver(1e-10)

        x = force_side(100, f, solver, base_root, 1, 2,
                       AllowedSolution.ANY_SIDE)
        self.assertEqual(x, base_root)

        # f is increasing near the root.
        for allowed, check in (
                (AllowedSolution.LEFT_SIDE, lambda fx: fx <= 0),
                (AllowedSolution.RIGHT_SIDE, lambda fx: fx >= 0),
                (AllowedSolution.BELOW_SIDE, lambda fx: fx <= 0),
                (AllowedSolution.ABOVE_SIDE, lambda fx: fx >= 0)):
            x = force_side(100, f, solver, base_root, 1, 2, allowed)
            self.assertTrue(check(f(x)), msg=f"{allowed}: x = {x}")
            self.assertAlmostEqual(x, F_EXACT, delta=1e-9)

    def test_failure(self):
        from pyzero.solve import (AllowedSolution, IllinoisSolver,
                                  NoBracketingError, force_side)

        # Touching root with no sign change.
        with self.assertRaises(NoBracketingError):
            force_side(10, lambda x: (x - 1) ** 2, IllinoisSolver(), 1.0,
                       0.0, 2.0, AllowedSolution.LEFT_SIDE)


# ======================================================================

class TestFindRoot(TestCase):
    def test_find_root(self):
        from pyzero.solve import find_root

        self.assertAlmostEqual(find_root(f, 1, 2), F_EXACT, delta=1e-5)
        self.assertAlmostEqual(find_root(f, 1, 2, 1e-12), F_EXACT,
                               delta=1e-11)
        self.assertEqual(round(find_root(lambda x: x ** 2 - 2, 0.0, 2.0,
                                         1e-10), 6), 1.414214)
