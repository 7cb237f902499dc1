from unittest import TestCase

from .scalar_tst_functions import (
    BRACKETED_CASES, F_EXACT, exp_m1, f)


# ======================================================================

class TestBracketingNthOrderBrent(TestCase):
    def test_exp(self):
        from pyzero.solve import BracketingNthOrderBrentSolver, BrentSolver

        nth, brent = BracketingNthOrderBrentSolver(), BrentSolver()
        x = nth.solve(200, exp_m1, -50, 100)
        brent.solve(200, exp_m1, -50, 100)

        self.assertAlmostEqual(x, 0.0, delta=2e-6)
        self.assertTrue(nth.evaluations <= brent.evaluations + 5)

    def test_orders(self):
        from pyzero.solve import BracketingNthOrderBrentSolver

        for order in (2, 3, 5, 8):
            solver = BracketingNthOrderBrentSolver(1e-12, maximal_order=order)
            self.assertEqual(solver.maximal_order, order)
            for fn, x_min, x_max, root in BRACKETED_CASES:
                with self.subTest(order=order, fn=fn.__name__):
                    self.assertAlmostEqual(solver.solve(200, fn, x_min, x_max),
                                           root, delta=1e-10)

        with self.assertRaises(ValueError):
            BracketingNthOrderBrentSolver(maximal_order=1)

    def test_start_value(self):
        from pyzero.solve import BracketingNthOrderBrentSolver

        solver = BracketingNthOrderBrentSolver()
        self.assertEqual(solver.solve(100, lambda x: x - 1, 0.0, 2.0, 1.0),
                         1.0)
        self.assertEqual(solver.evaluations, 1)

        # Root between the start value and x_max.
        x = solver.solve(100, f, 0.0, 3.0, 0.5)
        self.assertAlmostEqual(x, F_EXACT, delta=2e-6)

    def test_function_value_accuracy(self):
        from pyzero.solve import BracketingNthOrderBrentSolver

        solver = BracketingNthOrderBrentSolver(
            1e-12, function_value_accuracy=1e-3)
        x = solver.solve(100, f, 1.0, 2.0)
        self.assertTrue(abs(f(x)) < 1e-3)

    def test_float_result(self):
        from pyzero.solve import BracketingNthOrderBrentSolver

        x = BracketingNthOrderBrentSolver().solve(100, f, 1.0, 2.0)
        self.assertIs(type(x), float)


# ----------------------------------------------------------------------

class TestFieldBracketingNthOrderBrent(TestCase):
    def test_fraction(self):
        from fractions import Fraction
        from pyzero.solve import FieldBracketingNthOrderBrentSolver

        solver = FieldBracketingNthOrderBrentSolver(
            Fraction(1, 10 ** 12), Fraction(0), Fraction(0))

        # Inverse linear interpolation is exact.
        x = solver.solve(100, lambda x: 3 * x - 1, Fraction(0), Fraction(1))
        self.assertEqual(x, Fraction(1, 3))
        self.assertEqual(solver.evaluations, 3)

    def test_decimal(self):
        from decimal import Decimal
        from pyzero.solve import (AllowedSolution,
                                  FieldBracketingNthOrderBrentSolver)

        solver = FieldBracketingNthOrderBrentSolver(
            Decimal('1e-20'), Decimal(0), Decimal(0))
        root = Decimal(2).sqrt()

        for allowed in AllowedSolution:
            with self.subTest(allowed=allowed):
                x = solver.solve(100, lambda x: x * x - 2, Decimal(0),
                                 Decimal(2), allowed=allowed)
                self.assertIsInstance(x, Decimal)
                self.assertTrue(abs(x - root) < Decimal('1e-19'))

                if allowed in (AllowedSolution.LEFT_SIDE,
                               AllowedSolution.BELOW_SIDE):
                    self.assertTrue(x * x - 2 <= 0)
                elif allowed in (AllowedSolution.RIGHT_SIDE,
                                 AllowedSolution.ABOVE_SIDE):
                    self.assertTrue(x * x - 2 >= 0)


# ----------------------------------------------------------------------

class TestInterpolationBuffer(TestCase):
    def test_buffer(self):
        from pyzero.solve.nth_order_brent import _InterpolationBuffer

        buf = _InterpolationBuffer(4)
        self.assertEqual(buf.capacity, 4)
        buf.x[:2], buf.y[:2] = [0.0, 2.0], [-1.0, 1.0]
        buf.n, buf.sign_change = 2, 1

        buf.insert(1.0, 0.5)
        self.assertEqual(buf.x[:buf.n], [0.0, 1.0, 2.0])
        self.assertEqual(buf.y[:buf.n], [-1.0, 0.5, 1.0])
        self.assertEqual(buf.sign_change, 1)

        buf.keep_window(0, 2)
        self.assertEqual(buf.x[:buf.n], [0.0, 1.0])
        self.assertEqual(buf.sign_change, 1)

        buf.insert(0.5, -0.25)
        buf.sign_change += 1  # New point on the left of the root.
        buf.keep_window(1, 3)
        self.assertEqual(buf.x[:buf.n], [0.5, 1.0])
        self.assertEqual(buf.y[:buf.n], [-0.25, 0.5])
        self.assertEqual(buf.sign_change, 1)
