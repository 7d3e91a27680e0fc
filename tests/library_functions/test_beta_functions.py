import math
import unittest

import numpy as np
from numpy.testing import assert_allclose
from scipy.special import betaln, beta, gammaln, comb, binom as binom_coefficient
from scipy.stats import binom, poisson

from incbeta.configuration import config_context, RuntimeConfigurationAction
from incbeta.lib.exceptions import NonConvergenceError
from incbeta.lib.utils import cartesian
from incbeta.library_functions import LogBeta, Beta, StirlingError, BinomialDeviance, LogChoose, Choose, \
    LogBinomialDensity, LogPoissonDensity
from incbeta.library_functions import beta_functions, stirling, densities

__author__ = 'Robbert Harms'
__date__ = "2018-05-14"
__maintainer__ = "Robbert Harms"
__email__ = "robbert.harms@maastrichtuniversity.nl"


class test_LogBeta(unittest.TestCase):

    def __init__(self, *args, **kwargs):
        super().__init__(*args, **kwargs)

    def test_grid(self):
        shapes = np.array([0.1, 0.5, 1, 3, 9.5, 12, 50, 300, 1e4])
        test_params = cartesian([shapes, shapes]).astype(np.float64)

        results = LogBeta().evaluate({'a': test_params[:, 0], 'b': test_params[:, 1]}, test_params.shape[0])
        assert_allclose(results, betaln(test_params[:, 0], test_params[:, 1]), rtol=1e-11, atol=1e-14)

    def test_beta(self):
        a = np.array([0.5, 1, 2, 5.5, 20])
        b = np.array([0.5, 3, 2, 1.5, 30])
        assert_allclose(Beta().evaluate([a, b], a.shape[0]), beta(a, b), rtol=1e-11)

    def test_symmetric(self):
        self.assertEqual(beta_functions.lbeta(2.5, 40), beta_functions.lbeta(40, 2.5))

    def test_special_values(self):
        self.assertEqual(beta_functions.lbeta(0, 2), float('inf'))
        self.assertEqual(beta_functions.lbeta(2, float('inf')), float('-inf'))
        self.assertTrue(math.isnan(beta_functions.lbeta(-1, 2)))
        self.assertTrue(math.isnan(beta_functions.lbeta(float('nan'), 2)))


class test_StirlingError(unittest.TestCase):

    def __init__(self, *args, **kwargs):
        super().__init__(*args, **kwargs)

    def test_values(self):
        n = np.array([0.3, 1, 2.5, 7, 10.3, 15, 15.5, 20, 36, 50, 81, 100])
        expected = gammaln(n + 1) - (n + 0.5) * np.log(n) + n - 0.5 * np.log(2 * np.pi)

        results = StirlingError().evaluate({'n': n}, n.shape[0])
        assert_allclose(results, expected, rtol=1e-9)

    def test_table(self):
        self.assertAlmostEqual(stirling.stirlerr(1), 1 - 0.5 * math.log(2 * math.pi), places=15)
        self.assertEqual(stirling.stirlerr(0), 0)

    def test_large(self):
        for n in [600, 1e4, 1e8]:
            self.assertAlmostEqual(stirling.stirlerr(n) * 12 * n, 1, places=6)

    def test_invalid(self):
        self.assertTrue(math.isnan(stirling.stirlerr(-1)))


class test_BinomialDeviance(unittest.TestCase):

    def __init__(self, *args, **kwargs):
        super().__init__(*args, **kwargs)

    def test_values(self):
        x = np.array([10, 10, 3, 100, 1e4, 5])
        expected_value = np.array([10.5, 9.7, 20, 99, 1.001e4, 0.5])
        expected = x * np.log(x / expected_value) + expected_value - x

        results = BinomialDeviance().evaluate({'x': x, 'np': expected_value}, x.shape[0])
        assert_allclose(results, expected, rtol=1e-9)

    def test_special_values(self):
        self.assertEqual(stirling.bd0(0, 2.5), 2.5)
        self.assertEqual(stirling.bd0(2, 0), float('inf'))
        self.assertEqual(stirling.bd0(7, 7), 0)

    def test_non_convergence(self):
        with config_context(RuntimeConfigurationAction(max_iterations=1)):
            self.assertRaises(NonConvergenceError, stirling.bd0, 10, 10.5)


class test_Choose(unittest.TestCase):

    def __init__(self, *args, **kwargs):
        super().__init__(*args, **kwargs)

    def test_integers(self):
        n = np.array([5, 10, 50, 50, 100, 100, 1000])
        k = np.array([2, 0, 25, 48, 35, 99, 500])

        assert_allclose(Choose().evaluate({'n': n, 'k': k}, n.shape[0]), comb(n, k), rtol=1e-12)
        assert_allclose(LogChoose().evaluate({'n': n, 'k': k}, n.shape[0]), np.log(comb(n, k)), rtol=1e-12)

    def test_exact(self):
        self.assertEqual(beta_functions.choose(5, 2), 10)
        self.assertEqual(beta_functions.choose(20, 10), 184756)
        self.assertEqual(beta_functions.choose(4, 7), 0)

    def test_negative_and_real(self):
        self.assertEqual(beta_functions.choose(-3, 2), 6)
        self.assertEqual(beta_functions.choose(-3, 3), -10)
        self.assertAlmostEqual(beta_functions.choose(2.5, 2), 1.875, places=14)
        self.assertAlmostEqual(beta_functions.lchoose(-3, 3), math.log(10), places=14)

    def test_real_n_below_k(self):
        n = np.array([2.5, 0.5, 10.3, 0.5, 2.5, 7.25])
        k = np.array([35, 40, 50, 5, 10, 31])
        expected = binom_coefficient(n, k)

        assert_allclose(Choose().evaluate({'n': n, 'k': k}, n.shape[0]), expected, rtol=1e-9)
        assert_allclose(LogChoose().evaluate({'n': n, 'k': k}, n.shape[0]), np.log(np.abs(expected)), rtol=1e-10)

        self.assertGreater(beta_functions.choose(2.5, 35), 0)
        self.assertLess(beta_functions.choose(0.5, 40), 0)
        self.assertLess(beta_functions.choose(10.3, 50), 0)

    def test_rounding_of_k(self):
        self.assertEqual(beta_functions.choose(10, 2.2), beta_functions.choose(10, 2))
        self.assertEqual(beta_functions.choose(10, -1), 0)
        self.assertEqual(beta_functions.lchoose(10, -1), float('-inf'))


class test_Densities(unittest.TestCase):

    def __init__(self, *args, **kwargs):
        super().__init__(*args, **kwargs)

    def test_binomial(self):
        xs = np.arange(0, 21, dtype=np.float64)
        sizes = np.array([20.])
        ps = np.array([0.05, 0.3, 0.5, 0.99])
        test_params = cartesian([xs, sizes, ps])

        results = LogBinomialDensity().evaluate({
            'x': test_params[:, 0],
            'size': test_params[:, 1],
            'p': test_params[:, 2]}, test_params.shape[0])
        assert_allclose(results, binom.logpmf(test_params[:, 0], test_params[:, 1], test_params[:, 2]),
                        rtol=1e-10)

    def test_binomial_edges(self):
        self.assertEqual(densities.dbinom_log(10, 0)(0), 0)
        self.assertEqual(densities.dbinom_log(10, 0)(1), float('-inf'))
        self.assertEqual(densities.dbinom_log(10, 1)(10), 0)
        self.assertEqual(densities.dbinom_log(10, 0.5)(11), float('-inf'))

    def test_poisson(self):
        xs = np.array([0, 1, 3, 10, 50, 200], dtype=np.float64)
        rates = np.array([0.1, 4.5, 50, 1000])
        test_params = cartesian([xs, rates])

        results = LogPoissonDensity().evaluate({'x': test_params[:, 0], 'lam': test_params[:, 1]},
                                               test_params.shape[0])
        assert_allclose(results, poisson.logpmf(test_params[:, 0], test_params[:, 1]), rtol=1e-10)

    def test_poisson_edges(self):
        self.assertEqual(densities.lpoisson(0)(0), 0)
        self.assertEqual(densities.lpoisson(0)(2), float('-inf'))
        self.assertEqual(densities.lpoisson(2.5)(-1), float('-inf'))
        self.assertEqual(densities.lpoisson(2.5)(0), -2.5)
