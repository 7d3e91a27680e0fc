import math
import unittest

from incbeta.configuration import config_context, RuntimeConfigurationAction
from incbeta.lib.exceptions import NonConvergenceError
from incbeta.library_functions.summation import series, cont_frac, iter_series, iter_cont_frac

__author__ = 'Robbert Harms'
__date__ = "2018-05-07"
__maintainer__ = "Robbert Harms"
__email__ = "robbert.harms@maastrichtuniversity.nl"


class test_series(unittest.TestCase):

    def __init__(self, *args, **kwargs):
        super().__init__(*args, **kwargs)

    def test_fixed_number_of_terms(self):
        self.assertEqual(series(lambda i, v: i, stop=51), 1275)
        self.assertEqual(series(lambda i, v: 1, stop=1), 1)

    def test_no_terms(self):
        self.assertEqual(series(lambda i, v: 1, stop=0), 0)
        self.assertEqual(series(lambda i, v: 1, stop=-3), 0)

    def test_exponential(self):
        value = series(lambda i, v: 1 if i == 0 else v / i)
        self.assertAlmostEqual(value, math.e, places=14)

    def test_previous_term(self):
        seen = []

        def term(i, previous):
            seen.append(previous)
            return 2 ** -i

        series(term, stop=4)
        self.assertEqual(seen, [None, 1, 0.5, 0.25])

    def test_partial_sums(self):
        partials = iter_series(lambda i, v: i)
        self.assertEqual([next(partials) for _ in range(4)], [0, 1, 3, 6])

    def test_tolerance(self):
        value = series(lambda i, v: 1 if i == 0 else v / 10, tolerance=1e-6)
        self.assertAlmostEqual(value, 10 / 9, places=5)
        self.assertNotEqual(value, series(lambda i, v: 1 if i == 0 else v / 10))

    def test_nan(self):
        self.assertTrue(math.isnan(series(lambda i, v: float('nan'))))
        self.assertTrue(math.isnan(series(lambda i, v: 1 if i < 3 else float('nan'))))

    def test_non_convergence(self):
        with self.assertRaises(NonConvergenceError) as context:
            series(lambda i, v: 1, max_iterations=10)
        self.assertEqual(context.exception.max_iterations, 10)

    def test_non_convergence_configured(self):
        with config_context(RuntimeConfigurationAction(max_iterations=10)):
            self.assertRaises(NonConvergenceError, series, lambda i, v: i)


class test_cont_frac(unittest.TestCase):

    def __init__(self, *args, **kwargs):
        super().__init__(*args, **kwargs)

    def test_golden_ratio(self):
        self.assertAlmostEqual(cont_frac(lambda i, v: 1, lambda i, v: 1), (1 + math.sqrt(5)) / 2, places=14)

    def test_fixed_number_of_terms(self):
        self.assertEqual(cont_frac(lambda i, v: 1, lambda i, v: 1, stop=5), 8 / 5)

    def test_convergents(self):
        convergents = iter_cont_frac(lambda i, v: 1, lambda i, v: 1)
        self.assertEqual([next(convergents) for _ in range(4)], [1, 2, 1.5, 5 / 3])

    def test_square_root_of_two(self):
        value = cont_frac(lambda i, v: 1 if i == 0 else 2, lambda i, v: 1)
        self.assertAlmostEqual(value, math.sqrt(2), places=14)

    def test_pi(self):
        # 4 / pi = 1 + 1 / (3 + 4 / (5 + 9 / (7 + ...)))
        value = cont_frac(lambda i, v: 2 * i + 1, lambda i, v: i * i)
        self.assertAlmostEqual(4 / value, math.pi, places=14)

    def test_nan(self):
        self.assertTrue(math.isnan(cont_frac(lambda i, v: float('nan'), lambda i, v: 1)))

    def test_non_convergence(self):
        with self.assertRaises(NonConvergenceError):
            cont_frac(lambda i, v: 1 if i % 2 else -1, lambda i, v: 1, max_iterations=10)
