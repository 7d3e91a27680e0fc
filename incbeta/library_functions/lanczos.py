"""The log gamma function and the gamma function.

For positive arguments not near the zeros at 1 and 2 we use a 9 term Lanczos approximation with :math:`g = 7`
(shifted argument :math:`z + 7.5`).
Within 0.05 of 1 and 2 we use the (2,2) Pade approximations with a fifth order correction from the GNU Scientific Library
(``specfunc/gamma.c``), which vanish exactly at the zeros. Negative arguments use the reflection formula.
"""
import math
from incbeta.library_functions.polynomials import Polynomial

__author__ = 'Robbert Harms'
__date__ = '2018-05-14'
__maintainer__ = 'Robbert Harms'
__email__ = 'robbert.harms@maastrichtuniversity.nl'
__licence__ = 'LGPL v3'


LOG_SQRT_2PI = 0.5 * math.log(2 * math.pi)

"""Half width of the bands around 1 and 2 in which the Pade approximations are used."""
PADE_HALF_WIDTH = 0.05

_lanczos_coefficients = (
    0.99999999999980993227684700473478,
    676.520368121885098567009190444019,
    -1259.13921672240287047156078755283,
    771.3234287776530788486528258894,
    -176.61502916214059906584551354,
    12.507343278686904814458936853,
    -0.13857109526572011689554707,
    9.984369578019570859563e-6,
    1.50563273514931155834e-7
)


def _lgamma_lanczos(z):
    """The Lanczos approximation of the log gamma function, for positive z."""
    t = z + 7.5
    t -= (z + 0.5) * math.log(t)
    ser = _lanczos_coefficients[0]
    for i in range(1, len(_lanczos_coefficients)):
        ser += _lanczos_coefficients[i] / (z + i)
    return -t + LOG_SQRT_2PI + math.log(ser) - math.log(z)


class _Pade22:

    def __init__(self, n1, n2, d1, d2, c, correction):
        """Pade (2,2) approximation of the log gamma function near one of its zeros.

        This computes :math:`\\epsilon (c (\\epsilon + n_1)(\\epsilon + n_2) / ((\\epsilon + d_1)(\\epsilon + d_2))
        + \\epsilon^5 p(\\epsilon))` with :math:`p` the correction polynomial.
        """
        self._n1 = n1
        self._n2 = n2
        self._d1 = d1
        self._d2 = d2
        self._c = c
        self._correction = Polynomial(correction)

    def __call__(self, eps):
        pade = self._c * (eps + self._n1) * (eps + self._n2) / ((eps + self._d1) * (eps + self._d2))
        return eps * (pade + eps ** 5 * self._correction(eps))


_near_one = _Pade22(
    -1.0017419282349508699871138440,
    1.7364839209922879823280541733,
    1.2433006018858751556055436011,
    5.0456274100274010152489597514,
    2.0816265188662692474880210318,
    [0.03141928755021455, -0.02594027398725020, 0.01931961413960498, -0.01192457083645441, 0.004785324257581753])

_near_two = _Pade22(
    1.000895834786669227164446568,
    4.209376735287755081642901277,
    2.618851904903217274682578255,
    10.85766559900983515322922936,
    2.85337998765781918463568869,
    [0.0000407220927867950, -0.0000693271800931282, 0.0001067287169183665, -0.0001365435269792533,
     0.0001139406357036744])


def lgamma(x):
    """The natural logarithm of the absolute value of the gamma function.

    The Pade forms are only used within 0.05 of the zeros at 1 and 2, not on all of [0.8, 2.25], since further out they
    lose accuracy and the Lanczos sum is better.

    Args:
        x (float): the position to evaluate

    Returns:
        float: :math:`\\ln|\\Gamma(x)|`, ``inf`` at the poles (zero and the negative integers)
    """
    if math.isnan(x):
        return x
    if math.isinf(x):
        return float('inf')
    if x <= 0:
        if x == math.floor(x):
            return float('inf')
        return _lgamma_reflection(x)
    if x == 1 or x == 2:
        return 0.0
    if abs(x - 1) < PADE_HALF_WIDTH:
        return _near_one(x - 1)
    if abs(x - 2) < PADE_HALF_WIDTH:
        return _near_two(x - 2)
    return _lgamma_lanczos(x)


def _lgamma_reflection(x):
    """Log gamma for negative non-integer x, using :math:`\\Gamma(x)\\Gamma(1-x) = \\pi / \\sin(\\pi x)`."""
    sin_pix = abs(math.sin(math.pi * (x - math.floor(x))))
    return math.log(math.pi) - math.log(sin_pix) - lgamma(1 - x)


def gamma(x):
    """The gamma function.

    Args:
        x (float): the position to evaluate

    Returns:
        float: :math:`\\Gamma(x)`, ``inf`` on overflow, ``nan`` at the poles
    """
    if math.isnan(x) or x == float('-inf'):
        return float('nan')
    if x <= 0 and x == math.floor(x):
        return float('nan')

    log_value = lgamma(x)
    sign = -1 if x < 0 and math.floor(x) % 2 == 1 else 1
    if log_value > 709.782712893384:
        return sign * float('inf')
    return sign * math.exp(log_value)
