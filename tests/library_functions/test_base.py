import math
import unittest

import numpy as np
from numpy.testing import assert_allclose, assert_array_equal

from incbeta.configuration import config_context, RuntimeConfigurationAction
from incbeta.library_functions import SimpleLibraryFunction, IncompleteBetaRatio, LogBeta, ErrorFunction, \
    BinomialDeviance
from incbeta.library_functions.beta_functions import lbeta
from incbeta.library_functions.incomplete_beta import bratio

__author__ = 'Robbert Harms'
__date__ = "2018-05-21"
__maintainer__ = "Robbert Harms"
__email__ = "robbert.harms@maastrichtuniversity.nl"


class test_SimpleLibraryFunction(unittest.TestCase):

    def __init__(self, *args, **kwargs):
        super().__init__(*args, **kwargs)
        self.a = np.array([0.5, 2, 7.5, 30])
        self.b = np.array([1.5, 3, 0.5, 40])
        self.x = np.array([0.2, 0.4, 0.9, 0.45])
        self.expected = np.array([bratio(*args) for args in zip(self.a, self.b, self.x)])

    def test_mapping(self):
        results = IncompleteBetaRatio().evaluate({'a': self.a, 'b': self.b, 'x': self.x}, 4)
        assert_array_equal(results, self.expected)

    def test_sequence(self):
        results = IncompleteBetaRatio().evaluate([self.a, self.b, self.x], 4)
        assert_array_equal(results, self.expected)

    def test_scalar_broadcast(self):
        results = IncompleteBetaRatio().evaluate({'a': 2, 'b': 3, 'x': self.x}, 4)
        assert_allclose(results, [6 * x ** 2 - 8 * x ** 3 + 3 * x ** 4 for x in self.x], rtol=1e-13)

    def test_result_type(self):
        results = ErrorFunction().evaluate({'x': [0, 1]}, 2)
        self.assertEqual(results.dtype, np.float64)
        self.assertEqual(results.shape, (2,))

    def test_missing_input(self):
        self.assertRaises(ValueError, IncompleteBetaRatio().evaluate, {'a': self.a, 'b': self.b}, 4)

    def test_wrong_number_of_inputs(self):
        self.assertRaises(ValueError, IncompleteBetaRatio().evaluate, [self.a, self.b], 4)

    def test_wrong_length(self):
        self.assertRaises(ValueError, IncompleteBetaRatio().evaluate, {'a': self.a, 'b': self.b, 'x': [0.5]}, 4)

    def test_multiprocessing(self):
        with config_context(RuntimeConfigurationAction(use_multiprocessing=True, max_batch_size=3)):
            results = IncompleteBetaRatio().evaluate({'a': self.a, 'b': self.b, 'x': self.x}, 4)
        assert_array_equal(results, self.expected)

    def test_call(self):
        self.assertEqual(IncompleteBetaRatio()(2, 3, 0.4), bratio(2, 3, 0.4))
        self.assertTrue(math.isnan(IncompleteBetaRatio()(2, 3, 1.5)))

    def test_description(self):
        function = IncompleteBetaRatio()
        self.assertEqual(function.get_name(), 'bratio')
        self.assertEqual(function.get_parameters(), ['a', 'b', 'x'])
        self.assertIn('lbeta', [dependency.get_name() for dependency in function.get_dependencies()])
        self.assertEqual(str(function), 'bratio(a, b, x)')

    def test_parameters_from_signature(self):
        self.assertEqual(LogBeta().get_parameters(), ['a', 'b'])
        self.assertEqual(BinomialDeviance().get_parameters(), ['x', 'np'])

    def test_wrapping(self):
        function = SimpleLibraryFunction(lbeta)
        self.assertEqual(function.get_name(), 'lbeta')
        self.assertEqual(function.get_dependencies(), [])
        assert_allclose(function.evaluate([[1, 2], 1], 2), [0, -math.log(2)], atol=1e-15)
