from unittest import TestCase

from .scalar_tst_functions import (
    BRACKETED_CASES, SQRT2, sqrt2_fn)


def _bracketing_solvers(**kwargs):
    from pyzero.solve import (BisectionSolver, BracketingNthOrderBrentSolver,
                              BrentSolver, IllinoisSolver, MullerSolver,
                              PegasusSolver, RiddersSolver)
    return [BisectionSolver(**kwargs), IllinoisSolver(**kwargs),
            PegasusSolver(**kwargs), BrentSolver(**kwargs),
            RiddersSolver(**kwargs), MullerSolver(**kwargs),
            BracketingNthOrderBrentSolver(**kwargs)]


def _all_solvers():
    from pyzero.solve import MullerSolver2, RegulaFalsiSolver, SecantSolver
    # Regula Falsi stagnates on convex functions; it needs a function value
    # accuracy to finish.
    return _bracketing_solvers() + [
        RegulaFalsiSolver(function_value_accuracy=1e-10), SecantSolver(),
        MullerSolver2()]


# ======================================================================

class TestAllSolvers(TestCase):
    """Properties common to every interval solver."""

    def test_sqrt2(self):
        for solver in _all_solvers():
            with self.subTest(solver=solver):
                x = solver.solve(100, sqrt2_fn, 0.0, 2.0)
                self.assertAlmostEqual(x, SQRT2, delta=1e-5)
                self.assertTrue(0 < solver.evaluations <= 100)

    def test_convergence(self):
        for solver in _bracketing_solvers(absolute_accuracy=1e-10):
            for fn, x_min, x_max, root in BRACKETED_CASES:
                with self.subTest(solver=solver, fn=fn.__name__):
                    x = solver.solve(200, fn, x_min, x_max)
                    self.assertTrue(x_min <= x <= x_max)
                    self.assertAlmostEqual(x, root, delta=1e-8)

    def test_exact_endpoint(self):
        # An exact zero at either endpoint is returned unchanged.
        for solver in _all_solvers():
            with self.subTest(solver=solver):
                self.assertEqual(solver.solve(100, lambda x: x, 0.0, 2.0),
                                 0.0)
                self.assertEqual(
                    solver.solve(100, lambda x: x - 2.0, 0.0, 2.0), 2.0)

    def test_budget(self):
        from pyzero.solve import TooManyEvaluationsError

        for solver in _all_solvers():
            with self.subTest(solver=solver):
                with self.assertRaises(TooManyEvaluationsError):
                    solver.solve(1, sqrt2_fn, 0.0, 2.0)
                self.assertEqual(solver.evaluations, 1)

                # The counter restarts on every call.
                solver.solve(100, sqrt2_fn, 0.0, 2.0)
                self.assertTrue(solver.evaluations > 1)

    def test_no_bracket(self):
        from pyzero.solve import NoBracketingError

        for solver in _all_solvers():
            with self.subTest(solver=solver):
                with self.assertRaises(NoBracketingError):
                    solver.solve(100, lambda x: x ** 2 + 1, -1.0, 2.0)

    def test_invalid(self):
        for solver in _all_solvers():
            with self.subTest(solver=solver):
                with self.assertRaises(ValueError):
                    solver.solve(100, sqrt2_fn, 2.0, 0.0)
                with self.assertRaises(ValueError):
                    solver.solve(100, sqrt2_fn, 0.0, 2.0, 3.0)
                with self.assertRaises(ValueError):
                    solver.solve(0, sqrt2_fn, 0.0, 2.0)
                with self.assertRaises(TypeError):
                    solver.solve(100, None, 0.0, 2.0)


# ======================================================================

class TestBracketedSolvers(TestCase):
    def test_allowed_solution(self):
        from pyzero.solve import (AllowedSolution, BaseSecantSolver,
                                  BracketingNthOrderBrentSolver)

        solvers = [s for s in _bracketing_solvers()
                   if isinstance(s, (BaseSecantSolver,
                                     BracketingNthOrderBrentSolver))]
        self.assertEqual(len(solvers), 3)

        # Increasing and decreasing functions, root at sqrt(2).
        functions = (sqrt2_fn, lambda x: 2 - x * x)

        for solver in solvers:
            for fn in functions:
                for allowed in AllowedSolution:
                    with self.subTest(solver=solver, allowed=allowed):
                        x = solver.solve(100, fn, 0.0, 2.0, allowed=allowed)
                        self.assertAlmostEqual(x, SQRT2, delta=2e-6)
                        fx = fn(x)
                        if allowed == AllowedSolution.LEFT_SIDE:
                            self.assertTrue(x * x <= 2)
                        elif allowed == AllowedSolution.RIGHT_SIDE:
                            self.assertTrue(x * x >= 2)
                        elif allowed == AllowedSolution.BELOW_SIDE:
                            self.assertTrue(fx <= 0)
                        elif allowed == AllowedSolution.ABOVE_SIDE:
                            self.assertTrue(fx >= 0)

    def test_allowed_by_name(self):
        from pyzero.solve import PegasusSolver

        x = PegasusSolver().solve(100, sqrt2_fn, 0.0, 2.0, allowed='right')
        self.assertTrue(x * x >= 2)

        with self.assertRaises(ValueError):
            PegasusSolver().solve(100, sqrt2_fn, 0.0, 2.0, allowed='middle')

    def test_verbose(self):
        import io
        from contextlib import redirect_stdout
        from pyzero.solve import IllinoisSolver

        buf = io.StringIO()
        with redirect_stdout(buf):
            IllinoisSolver(verbose=True).solve(100, sqrt2_fn, 0.0, 2.0)
        output = buf.getvalue()
        self.assertIn("IllinoisSolver: Solving on [0.0, 2.0]", output)
        self.assertIn("... Evaluation 1:", output)
        self.assertIn("... Converged", output)

    def test_stays_in_interval(self):
        from pyzero.solve import MullerSolver

        # Every evaluation of a bracketing solver lies in the interval.
        for solver in _bracketing_solvers(absolute_accuracy=1e-10):
            if isinstance(solver, MullerSolver):
                continue
            for fn, x_min, x_max, _ in BRACKETED_CASES:
                points = []

                def fn_logged(x):
                    points.append(x)
                    return fn(x)

                with self.subTest(solver=solver, fn=fn.__name__):
                    solver.solve(200, fn_logged, x_min, x_max)
                    self.assertEqual(len(points), solver.evaluations)
                    self.assertTrue(all(x_min <= x <= x_max
                                        for x in points))
