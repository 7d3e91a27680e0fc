"""The error function and its complements.

These use the rational Chebyshev approximations from:

    W. J. Cody, "Rational Chebyshev approximations for the error function", Math. Comp. 23 (1969), 631-637.

There are three domains in :math:`|x|`, below 0.5, between 0.5 and 4, and above 4.
"""
import math
from incbeta.library_functions.polynomials import Rational
from incbeta.library_functions.unity import safe_exp

__author__ = 'Robbert Harms'
__date__ = '2018-05-07'
__maintainer__ = 'Robbert Harms'
__email__ = 'robbert.harms@maastrichtuniversity.nl'
__licence__ = 'LGPL v3'


_ONE_OVER_SQRT_PI = 1 / math.sqrt(math.pi)

# Cody's R_lm with l = m = 4, for |x| < 0.5
_r4_small = Rational(
    [0.1857777061846031526730, 3.161123743870565596947, 113.8641541510501556495,
     377.4852376853020208137, 3209.377589138469472562],
    [1, 23.60129095234412093499, 244.0246379344441733056,
     1282.616526077372275645, 2844.236833439170622273])

# l = m = 8, for 0.5 <= x <= 4
_r8_medium = Rational(
    [2.15311535474403846343e-8, 0.564188496988670089180, 8.88314979438837594118,
     66.1191906371416294775, 298.635138197400131132, 881.952221241769090411,
     1712.04761263407058314, 2051.07837782607146532, 1230.33935479799725272],
    [1, 15.7449261107098347253, 117.693950891312499305,
     537.181101862009857509, 1621.38957456669018874, 3290.79923573345962678,
     4362.61909014324715820, 3439.36767414372163696, 1230.33935480374942043])

# l = m = 5 in 1/x^2, for x > 4
_r5_large = Rational(
    [-0.0163153871373020978498, -0.305326634961232344035, -0.360344899949804439429,
     -0.125781726111229246204, -0.0160837851487422766278, -6.58749161529837803157e-4],
    [1, 2.56852019228982242072, 1.87295284992346047209,
     0.527905102951428412248, 0.0605183413124413191178, 0.00233520497626869185443])


def erf(x):
    """The error function :math:`\\frac{2}{\\sqrt{\\pi}}\\int_0^x e^{-t^2} dt`.

    Args:
        x (float): the position to evaluate

    Returns:
        float: the error function at x
    """
    if math.isnan(x):
        return x
    if x < -0.5:
        return -erf(-x)
    if x < 0.5:
        return x * _r4_small(x * x)
    return 1 - erfc(x)


def erfc(x):
    """The complementary error function, :math:`1 - \\text{erf}(x)`.

    For positive x this is computed without cancellation, for x below -0.5 we use :math:`2 - \\text{erfc}(-x)`.

    Args:
        x (float): the position to evaluate

    Returns:
        float: the complementary error function at x
    """
    if math.isnan(x):
        return x
    if x < -0.5:
        return 2 - erfc(-x)
    if x < 0.5:
        return 1 - erf(x)
    if x == float('inf'):
        return 0.0
    return math.exp(-x * x) * erfcx(x)


def erfcx(x):
    """The scaled complementary error function, :math:`e^{x^2} \\text{erfc}(x)`.

    For :math:`x \\geq 0.5` the exponential factor is never formed, so this is finite for all positive x and behaves
    as :math:`1 / (x \\sqrt{\\pi})` for large x.

    Args:
        x (float): the position to evaluate

    Returns:
        float: the scaled complementary error function at x
    """
    if math.isnan(x):
        return x
    if x < 0.5:
        return safe_exp(x * x) * erfc(x)
    if x <= 4:
        return _r8_medium(x)
    if x == float('inf'):
        return 0.0
    x2inv = 1 / (x * x)
    return (_ONE_OVER_SQRT_PI + x2inv * _r5_large(x2inv)) / x
