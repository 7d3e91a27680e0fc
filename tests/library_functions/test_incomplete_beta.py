import math
import unittest
from unittest import mock

import numpy as np
from numpy.testing import assert_allclose
from scipy.special import betainc, betaln, gammaln

import incbeta
from incbeta.lib.utils import cartesian
from incbeta.library_functions import IncompleteBetaRatio
from incbeta.library_functions import incomplete_beta
from incbeta.library_functions.incomplete_beta import bratio, bratio_log, pbeta, select_regime, LogTailPair, \
    bgrat_coefficients, basym_coefficients, bcorr, algdiv, brcomp, bup
from incbeta.library_functions.stirling import stirlerr

__author__ = 'Robbert Harms'
__date__ = "2018-05-21"
__maintainer__ = "Robbert Harms"
__email__ = "robbert.harms@maastrichtuniversity.nl"


"""Points inside every region of the method selection, with the expected case and number of recurrence steps."""
regime_points = [
    ((0.5, 0.8, 0.3), '12a', False, 0),
    ((0.1, 0.5, 0.3), '12b', False, 0),
    ((0.1, 0.5, 0.4), '13a', False, 0),
    ((0.05, 0.5, 0.2), '15c', False, 20),
    ((2, 0.5, 0.3), '12c', False, 0),
    ((0.5, 2, 0.4), '13b', False, 0),
    ((0.5, 2, 0.05), '12d', False, 0),
    ((0.5, 20, 0.2), '14', False, 0),
    ((0.5, 5, 0.2), '15', False, 20),
    ((0.5, 2, 0.8), '12c', True, 0),
    ((3, 5, 0.1), '16a', False, 0),
    ((10, 5.5, 0.3), '17a', False, 5),
    ((30, 5.5, 0.75), '18a', False, 5),
    ((12, 2.5, 0.75), '19a', False, 2),
    ((12, 3, 0.75), '19a', False, 2),
    ((50, 60, 0.4), '20a', False, 0),
    ((150, 200, 0.3), '20b', False, 0),
    ((150, 200, 0.42), '21a', False, 0),
    ((80, 50, 0.5), '20c', False, 0),
    ((300, 200, 0.5), '20d', False, 0),
    ((300, 200, 0.595), '21c', False, 0),
    ((5, 3, 0.9), '16a', True, 0),
    ((2000, 30, 0.5), '17a', False, 29),
]


class test_IncompleteBetaRatio(unittest.TestCase):

    def __init__(self, *args, **kwargs):
        super().__init__(*args, **kwargs)
        shapes = np.array([0.05, 0.5, 1, 2.5, 7, 30, 120, 500])
        xs = np.array([0.001, 0.01, 0.1, 0.25, 0.4, 0.5, 0.6, 0.75, 0.9, 0.99])
        self.test_params = cartesian([shapes, shapes, xs]).astype(np.float64)

    def test_lower(self):
        results = IncompleteBetaRatio().evaluate({'a': self.test_params[:, 0],
                                                  'b': self.test_params[:, 1],
                                                  'x': self.test_params[:, 2]}, self.test_params.shape[0])
        assert_allclose(results, betainc(self.test_params[:, 0], self.test_params[:, 1], self.test_params[:, 2]),
                        rtol=1e-9, atol=1e-300)

    def test_upper(self):
        results = np.array([bratio(a, b, x, lower_tail=False) for a, b, x in self.test_params])
        assert_allclose(results, betainc(self.test_params[:, 1], self.test_params[:, 0], 1 - self.test_params[:, 2]),
                        rtol=1e-9, atol=1e-300)

    def test_log_scale(self):
        for a, b, x in [(2.5, 7, 0.01), (30, 120, 0.1), (500, 500, 0.4)]:
            self.assertAlmostEqual(bratio(a, b, x, log_p=True) / math.log(betainc(a, b, x)), 1, places=10)

    def test_deep_tail(self):
        # far below the underflow of the tail itself
        log_lower = bratio_log(500, 500, 0.01).lower
        self.assertTrue(np.isfinite(log_lower))
        self.assertLess(log_lower, -1500)
        self.assertEqual(bratio(500, 500, 0.01), 0)

    def test_complement(self):
        for a, b, x in self.test_params:
            self.assertAlmostEqual(bratio(a, b, x) + bratio(a, b, x, lower_tail=False), 1, places=13)

    def test_symmetry(self):
        for a, b, x in self.test_params:
            self.assertAlmostEqual(bratio(a, b, x), bratio(b, a, 1 - x, lower_tail=False), places=13)

    def test_monotone(self):
        xs = np.linspace(0.001, 0.999, 250)
        for a, b in [(0.05, 0.5), (0.5, 20), (3, 5), (12, 2.5), (50, 60), (150, 200), (300, 200)]:
            results = np.array([bratio(a, b, x) for x in xs])
            self.assertTrue(np.all(np.diff(results) >= -1e-12 * results[1:]))

    def test_uniform(self):
        for x in [0.001, 0.2, 0.5, 0.9]:
            self.assertAlmostEqual(bratio(1, 1, x), x, places=15)

    def test_closed_form(self):
        for x in [0.1, 0.4, 0.7]:
            self.assertAlmostEqual(bratio(2, 3, x), 6 * x ** 2 - 8 * x ** 3 + 3 * x ** 4, places=14)

        self.assertAlmostEqual(bratio(2, 3, 0.4), 0.5248, places=14)
        self.assertAlmostEqual(bratio(2, 3, 0.4, lower_tail=False), 0.4752, places=14)

    def test_regime_values(self):
        for (a, b, x), case, _, _ in regime_points:
            assert_allclose(bratio(a, b, x), betainc(a, b, x), rtol=1e-9, atol=1e-300, err_msg=case)
            assert_allclose(bratio(a, b, x, lower_tail=False), betainc(b, a, 1 - x), rtol=1e-9, atol=1e-300,
                            err_msg=case)

    def test_boundaries(self):
        self.assertEqual(bratio_log(2, 3, 0), (float('-inf'), 0))
        self.assertEqual(bratio_log(2, 3, 1), (0, float('-inf')))
        self.assertEqual(bratio_log(0, 3, 0.5), (0, float('-inf')))
        self.assertEqual(bratio_log(2, 0, 0.5), (float('-inf'), 0))
        self.assertEqual(bratio_log(float('inf'), 3, 0.5), (float('-inf'), 0))
        self.assertEqual(bratio_log(2, float('inf'), 0.5), (0, float('-inf')))
        self.assertEqual(bratio_log(float('inf'), float('inf'), 0.3), (float('-inf'), 0))
        self.assertEqual(bratio_log(float('inf'), float('inf'), 0.7), (0, float('-inf')))

    def test_invalid(self):
        for a, b, x in [(-1, 2, 0.5), (2, -1, 0.5), (2, 3, -0.1), (2, 3, 1.1), (0, 0, 0.5),
                        (float('nan'), 2, 0.5), (2, float('nan'), 0.5), (2, 3, float('nan'))]:
            self.assertTrue(all(math.isnan(v) for v in bratio_log(a, b, x)))
            self.assertTrue(math.isnan(bratio(a, b, x)))

    def test_complement_argument(self):
        # the complement of the position can be given explicitly
        x = 1e-10
        self.assertAlmostEqual(bratio_log(5, 3, 1 - x, x).upper / bratio_log(3, 5, x).lower, 1, places=14)

    def test_tail_pair(self):
        pair = LogTailPair.from_lower(math.log(0.25))
        self.assertAlmostEqual(pair.upper, math.log(0.75), places=15)
        self.assertEqual(pair.flipped(), (pair.upper, pair.lower))
        self.assertEqual(LogTailPair.from_upper(1e-17).upper, 0)


class test_pbeta(unittest.TestCase):

    def test_values(self):
        self.assertAlmostEqual(pbeta(2, 3)(0.4), 0.5248, places=14)
        self.assertAlmostEqual(pbeta(2, 3, lower_tail=False)(0.4), 0.4752, places=14)
        self.assertAlmostEqual(pbeta(2, 3, log_p=True)(0.4), math.log(0.5248), places=14)

    def test_outside_support(self):
        self.assertEqual(pbeta(2, 3)(-1), 0)
        self.assertEqual(pbeta(2, 3)(2), 1)
        self.assertEqual(pbeta(2, 3, lower_tail=False)(-1), 1)
        self.assertEqual(pbeta(2, 3, log_p=True)(-1), float('-inf'))

    def test_point_masses(self):
        self.assertEqual(pbeta(0, 0)(0.3), 0.5)
        self.assertEqual(pbeta(0, 2)(0.3), 1)
        self.assertEqual(pbeta(2, 0)(0.3), 0)
        self.assertEqual(pbeta(float('inf'), 2)(0.3), 0)
        self.assertEqual(pbeta(2, float('inf'))(0.3), 1)
        self.assertEqual(pbeta(float('inf'), float('inf'))(0.3), 0)
        self.assertEqual(pbeta(float('inf'), float('inf'))(0.7), 1)

    def test_invalid(self):
        self.assertTrue(math.isnan(pbeta(-1, 2)(0.5)))
        self.assertTrue(math.isnan(pbeta(2, 3)(float('nan'))))


class test_select_regime(unittest.TestCase):

    def test_cases(self):
        for (a, b, x), case, flip, n in regime_points:
            regime = select_regime(a, b, x)
            self.assertEqual(regime.case, case, msg=(a, b, x))
            self.assertEqual(regime.flip, flip, msg=(a, b, x))
            self.assertEqual(regime.n, n, msg=(a, b, x))

    def test_recursion_depth(self):
        for (a, b, x), _, flip, _ in regime_points:
            with mock.patch.object(incomplete_beta, 'bratio_log', wraps=incomplete_beta.bratio_log) as wrapped:
                bratio(a, b, x)
                self.assertEqual(wrapped.call_count, 2 if flip else 1)

    def test_flipped_never_flips(self):
        for (a, b, x), _, flip, _ in regime_points:
            if flip:
                self.assertFalse(select_regime(b, a, 1 - x).flip)


class test_expansion_coefficients(unittest.TestCase):

    def test_bgrat_prefix(self):
        short = bgrat_coefficients(0.3, 5)
        long = bgrat_coefficients(0.3, 12)
        self.assertEqual(short[0], long[0][:6])
        self.assertEqual(short[1], long[1][:6])

    def test_bgrat_values(self):
        cs, ps = bgrat_coefficients(0.3, 8)
        for k, c in enumerate(cs):
            self.assertAlmostEqual(c * math.factorial(2 * k + 1), 1, places=14)
        self.assertEqual(ps[0], 1)
        self.assertAlmostEqual(ps[1], (0.3 - 1) / 6, places=15)

    def test_bgrat_unit_shape(self):
        cs, ps = bgrat_coefficients(1, 10)
        self.assertEqual(ps[0], 1)
        self.assertTrue(all(p == 0 for p in ps[1:]))

    def test_basym_prefix(self):
        short = basym_coefficients(150, 200, 4)
        long = basym_coefficients(150, 200, 9)
        for s, l in zip(short, long):
            self.assertEqual(s, l[:5])

    def test_basym_values(self):
        a_s, c_s, d_s = basym_coefficients(100, 200, 3)
        self.assertEqual((a_s[0], c_s[0], d_s[0]), (0, 0, 1))
        self.assertAlmostEqual(a_s[1], 1 / 3, places=15)
        self.assertAlmostEqual(d_s[1], -c_s[1], places=15)


class test_helpers(unittest.TestCase):

    def test_bcorr(self):
        for a, b in [(8, 8), (8, 30), (15.5, 200), (100, 1e4)]:
            expected = stirlerr(a) + stirlerr(b) - stirlerr(a + b)
            self.assertAlmostEqual(bcorr(a, b) / expected, 1, places=9)
            self.assertEqual(bcorr(a, b), bcorr(b, a))

    def test_algdiv(self):
        a = np.array([0.5, 1, 3, 10, 100, 0.01])
        b = np.array([8, 10, 25, 8, 1e3, 20])
        results = np.array([algdiv(x, y) for x, y in zip(a, b)])
        assert_allclose(results, gammaln(b) - gammaln(a + b), rtol=1e-10)

    def test_brcomp(self):
        for a, b, x in [(2, 3, 0.4), (0.5, 7, 0.9), (5, 3, 0.1), (50, 60, 0.4), (150, 200, 0.3), (8, 8, 0.6)]:
            expected = a * math.log(x) + b * math.log1p(-x) - betaln(a, b)
            self.assertAlmostEqual(brcomp(a, b, x, 1 - x), expected, places=10)

    def test_bup(self):
        for a, b, x, n in [(2.5, 3, 0.4, 5), (0.5, 10, 0.2, 20), (1, 5.5, 0.7, 3)]:
            expected = math.log(betainc(a, b, x) - betainc(a + n, b, x))
            self.assertAlmostEqual(bup(a, b, x, 1 - x, n) / expected, 1, places=10)


class test_public_interface(unittest.TestCase):

    def test_incomplete_beta(self):
        result = incbeta.incomplete_beta(2, 3, 0.4)
        self.assertIsInstance(result, LogTailPair)
        self.assertAlmostEqual(math.exp(result.lower), 0.5248, places=14)
        self.assertAlmostEqual(math.exp(result.upper), 0.4752, places=14)

    def test_incomplete_beta_ratio(self):
        self.assertAlmostEqual(incbeta.incomplete_beta_ratio(2, 3, 0.4), 0.5248, places=14)
        self.assertAlmostEqual(incbeta.incomplete_beta_ratio(2, 3, 0.4, lower_tail=False), 0.4752, places=14)
        self.assertAlmostEqual(incbeta.incomplete_beta_ratio(2, 3, 0.4, log_scale=True), math.log(0.5248),
                               places=14)

    def test_gamma_and_error_functions(self):
        self.assertAlmostEqual(incbeta.incomplete_gamma_p(1)(2), 1 - math.exp(-2), places=14)
        self.assertAlmostEqual(incbeta.incomplete_gamma_q(1)(2), math.exp(-2), places=14)
        self.assertAlmostEqual(incbeta.error_function(0.5), math.erf(0.5), places=15)
        self.assertAlmostEqual(incbeta.complementary_error_function(3), math.erfc(3), places=15)
        self.assertAlmostEqual(incbeta.log_gamma(10), math.log(362880), places=12)
