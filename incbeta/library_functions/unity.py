"""Functions that are accurate near their zero at unity, or near zero.

The rational approximations in this module are from DiDonato and Morris, Algorithm 708 (ACM TOMS 18, 1992).
"""
import math
from incbeta.library_functions.lanczos import gamma
from incbeta.library_functions.polynomials import Rational

__author__ = 'Robbert Harms'
__date__ = '2018-05-07'
__maintainer__ = 'Robbert Harms'
__email__ = 'robbert.harms@maastrichtuniversity.nl'
__licence__ = 'LGPL v3'


"""Largest argument for which ``math.exp`` does not overflow."""
MAX_EXP_ARG = 709.782712893384


def safe_exp(x):
    """The exponential function, returning ``inf`` instead of raising on overflow."""
    if x > MAX_EXP_ARG:
        return float('inf')
    return math.exp(x)


def safe_log(x):
    """The natural logarithm, returning ``-inf`` at zero and ``nan`` for negative arguments."""
    if x > 0:
        return math.log(x)
    if x == 0:
        return float('-inf')
    return float('nan')


_log1p_rational = Rational([-0.0178874546012214, 0.405303492862024, -1.29418923021993, 1],
                           [-0.0845104217945565, 0.747811014037616, -1.62752256355323, 1])


def log1p(x):
    """Computes :math:`\\ln(1 + x)`, accurate for small x.

    For :math:`|x| \\leq 0.375` this uses a rational approximation in :math:`t = x / (x + 2)`, outside this range
    the direct formula.
    """
    if abs(x) > 0.375:
        return safe_log(1 + x)
    t = x / (x + 2)
    return 2 * t * _log1p_rational(t * t)


_expm1_rational = Rational([0.0238082361044469, 0.914041914819518e-9, 1],
                           [0.595130811860248e-3, -0.0119041179760821, 0.107141568980644, -0.499999999085958, 1])


def expm1(x):
    """Computes :math:`e^x - 1`, accurate for small x."""
    if x < -0.15:
        return math.exp(x) - 1
    if x > 0.15:
        w = safe_exp(x)
        return w * (0.5 + (0.5 - 1 / w))
    return x * _expm1_rational(x)


_phi_rational = Rational([0.00620886815375787, -0.224696413112536, 0.333333333333333],
                         [0.354508718369557, -1.27408923933623, 1])


def phi(x):
    """Computes :math:`x - 1 - \\ln(x)`.

    This function is zero at :math:`x = 1` with a double root. Near unity we write it in terms of
    :math:`r = (x - 1) / (x + 1)`, for which :math:`\\phi(x) = 2r^2 (1 / (1 - r) - r w(r^2))` with :math:`w` a rational
    correction, after shifting the argument in the two outer bands to keep :math:`r` small.

    Returns:
        float: the value of phi, ``nan`` for negative x and ``inf`` at zero
    """
    if x < 0 or math.isnan(x):
        return float('nan')
    if x == 0:
        return float('inf')
    if x < 0.61 or x > 1.57:
        return x - 0.5 - 0.5 - math.log(x)

    if x < 0.82:
        u = (x - 0.7) / 0.7
        w1 = 0.0566749439387324 - u * 0.3
    elif x > 1.18:
        u = x * 0.75 - 1
        w1 = 0.0456512608815524 + u / 3
    else:
        u = x - 0.5 - 0.5
        w1 = 0

    r = u / (u + 2)
    t = r * r
    w = _phi_rational(t)
    return 2 * t * (1 / (1 - r) - r * w) + w1


_gam1_w = Rational([-0.132674909766242e-3, 0.266505979058923e-3, 0.00223047661158249, -0.0118290993445146,
                    0.930357293360349e-3, 0.118378989872749, -0.244757765222226, -0.771330383816272,
                    -0.422784335098468],
                   [0.0559398236957378, 0.273076135303957, 1])

_gam1_w1 = Rational([0.589597428611429e-3, -0.00514889771323592, 0.00766968181649490, 0.0597275330452234,
                     -0.230975380857675, -0.409078193005776, 0.577215664901533],
                    [0.00423244297896961, 0.0261132021441447, 0.158451672430138, 0.427569613095214, 1])


def gam1(x):
    """Computes :math:`1 / \\Gamma(x + 1) - 1`.

    Rational approximations are used for :math:`-0.5 \\leq x \\leq 1.5`, the direct formula outside this band.

    Returns:
        float: the value of the function, ``nan`` for :math:`x \\leq -1`
    """
    if x <= -1 or math.isnan(x):
        return float('nan')
    if x < -0.5 or x > 1.5:
        return 1 / gamma(x + 1) - 1
    if x <= 0:
        return x * (1 + _gam1_w(x))
    if x <= 0.5:
        return x * _gam1_w1(x)
    if x <= 1:
        return (x - 1) / x * _gam1_w(x - 1)
    return (x - 1) / x * (_gam1_w1(x - 1) - 1)
