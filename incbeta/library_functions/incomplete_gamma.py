"""The regularized incomplete gamma function ratios and their inverse.

The ratios are:

.. math::

    P(a, x) = \\frac{1}{\\Gamma(a)} \\int_0^x e^{-t} t^{a-1} dt, \\quad Q(a, x) = 1 - P(a, x)

for :math:`a > 0` and :math:`x \\geq 0`.

This follows: A. R. DiDonato and A. H. Morris, "Computation of the Incomplete Gamma Function Ratios and their
Inverse", ACM Transactions on Mathematical Software, Vol. 12, No. 4, December 1986, Pages 377-393. The equation
numbers in the comments refer to this paper.

For every set of arguments only one of the two ratios is computed directly, the other is its complement. Which one
is computed directly depends on the region of :math:`(a, x)`, such that the direct computation never suffers from
cancellation.
"""
import math
import numpy as np
from incbeta.library_functions.error_functions import erf, erfc, erfcx
from incbeta.library_functions.lanczos import lgamma, gamma
from incbeta.library_functions.polynomials import Polynomial, Rational
from incbeta.library_functions.stirling import stirlerr
from incbeta.library_functions.summation import series, cont_frac
from incbeta.library_functions.unity import gam1, phi, expm1, log1p, safe_exp, safe_log

__author__ = 'Robbert Harms'
__date__ = '2018-05-07'
__maintainer__ = 'Robbert Harms'
__email__ = 'robbert.harms@maastrichtuniversity.nl'
__licence__ = 'LGPL v3'


# Table 7 of the paper
BIG = 20
X0 = 31
E0 = 0.25e-3

LOGROOT = math.log(math.sqrt(0.765))
EULER_GAMMA = 0.5772156649015329

_EPSILON = np.finfo(np.float64).eps

"""Relative tolerance at which the asymptotic expansion of equation 16 is truncated."""
_ASYMPTOTIC_TOLERANCE = 5e-15


"""The polynomials D_0 up to D_6 in z of equation 18, highest degree first."""
_t_coefficients = (
    Polynomial([
        -0.438203601845335318655297462245e-8, 0.102618097842403080425739573227e-7,
        0.670785354340149858036939710030e-8, -0.176659527368260793043600542457e-6,
        0.829671134095308600501624213166e-6, -0.185406221071515996070179883623e-5,
        -0.218544851067999216147364295512e-5, 0.391926317852243778169704095630e-4,
        -0.178755144032921810699588477366e-3, 0.352733686067019400352733686067e-3,
        0.115740740740740740740740740741e-2, -0.148148148148148148148148148148e-1,
        0.833333333333333333333333333333e-1, -0.333333333333333333333333333333]),
    Polynomial([
        0.119516285997781473243076536700e-7, -0.575254560351770496402194531835e-7,
        0.137863344691572095931187533077e-6, 0.464712780280743434226135033939e-8,
        -0.161209008945634460037752218822e-5, 0.764916091608111008463742149809e-5,
        -0.180985503344899778370285914868e-4, -0.401877572016460905349794238683e-6,
        0.205761316872427983539094650206e-3, -0.990226337448559670781893004115e-3,
        0.264550264550264550264550264550e-2, -0.347222222222222222222222222222e-2,
        -0.185185185185185185185185185185e-2]),
    Polynomial([
        0.142806142060642417915846008823e-6, -0.629899213838005502290672234278e-6,
        0.137219573090629332055943852926e-5, 0.342357873409613807419020039047e-7,
        -0.127606351886187277133779191392e-4, 0.529234488291201254164217127180e-4,
        -0.107366532263651605215391223622e-3, 0.200938786008230452674897119342e-5,
        0.771604938271604938271604938272e-3, -0.268132716049382716049382716049e-2,
        0.413359788359788359788359788360e-2]),
    Polynomial([
        0.142309007324358839145518944706e-5, -0.567495282699159656749963105702e-5,
        0.110826541153473023614770299727e-4, -0.239650511386729665193314027333e-6,
        -0.756180167188397641072538191880e-4, 0.267720632062838852962309752433e-3,
        -0.469189494395255712128140111679e-3, 0.229472093621399176954732510288e-3,
        0.649434156378600823045267489712e-3]),
    Polynomial([
        0.113757269706784190980552042886e-4, -0.396836504717943466443123507595e-4,
        0.664149821546512218665853782452e-4, -0.146384525788434181781232535691e-5,
        -0.299072480303190179733389609933e-3, 0.784039221720066627474034881442e-3,
        -0.861888290916711698604702719929e-3]),
    Polynomial([
        0.679778047793720783881640176604e-4, -0.199325705161888477003360405281e-3,
        0.277275324495939207873364251965e-3, -0.697281375836585777429398828576e-4,
        -0.336798553366358150308767592718e-3]),
    Polynomial([
        0.270878209671804482771279183488e-3, -0.592166437353693882864836225604e-3,
        0.531307936463992223165748542978e-3])
)


def gratio(a):
    """The regularized lower incomplete gamma function :math:`P(a, x)`.

    Args:
        a (float): the shape parameter

    Returns:
        Callable[[float], float]: the function :math:`x \\mapsto P(a, x)`, returning ``nan`` for invalid arguments
    """
    def incomplete_gamma_p(x):
        return gamma_ratios(a, x)[0]
    return incomplete_gamma_p


def gratioc(a):
    """The regularized upper incomplete gamma function :math:`Q(a, x) = 1 - P(a, x)`.

    Args:
        a (float): the shape parameter

    Returns:
        Callable[[float], float]: the function :math:`x \\mapsto Q(a, x)`, returning ``nan`` for invalid arguments
    """
    def incomplete_gamma_q(x):
        return gamma_ratios(a, x)[1]
    return incomplete_gamma_q


def gamma_ratios(a, x):
    """Compute both incomplete gamma function ratios.

    Args:
        a (float): the shape parameter, positive
        x (float): the position, non-negative

    Returns:
        tuple: the lower and upper ratios :math:`(P(a, x), Q(a, x))`
    """
    if math.isnan(a) or math.isnan(x) or a <= 0 or x < 0:
        return float('nan'), float('nan')
    if x == 0:
        return 0.0, 1.0
    if x == float('inf'):
        return 1.0, 0.0
    if a == float('inf'):
        return 0.0, 1.0
    if a == 0.5:
        return erf(math.sqrt(x)), erfc(math.sqrt(x))
    if a < 1:
        return _small_a(a, x)
    if a < BIG:
        return _medium_a(a, x)
    return _big_a(a, x)


def grat_r(a, x, log_r):
    """The scaled upper incomplete gamma ratio :math:`Q(a, x) / r` for :math:`a \\leq 1`.

    Here :math:`r = e^{-x} x^a / \\Gamma(a)` is given through its logarithm by the caller, who has typically computed
    it in a more stable way than we could.

    Args:
        a (float): the shape parameter, at most 1
        x (float): the position
        log_r (float): the natural logarithm of r

    Returns:
        float: the scaled upper ratio
    """
    if a * x == 0:
        if x <= a:
            return safe_exp(-log_r)
        return 0.0
    if a == 0.5:
        if x < 0.25:
            return (1 - erf(math.sqrt(x))) * safe_exp(-log_r)
        return erfcx(math.sqrt(x)) / math.sqrt(x) * math.sqrt(math.pi)

    if x < 1.1:
        j = _j(a, x)
        z = a * math.log(x)
        h = gam1(a)
        g = h + 1
        if (x >= 0.25 and a < x / 2.59) or z > -0.13394:
            l = expm1(z)
            return max(0.0, ((l + 1) * j - l) * g - h) * safe_exp(-log_r)
        return (1 - math.exp(z) * g * (1 - j)) * safe_exp(-log_r)
    return _cf(a, x)


def log_r(a, x):
    """The natural logarithm of :math:`r(a, x) = e^{-x} x^a / \\Gamma(a)` (equation 3).

    For large a this uses the Stirling error of a and :math:`\\phi(x / a)`, which avoids the cancellation between the
    large terms.
    """
    if a <= BIG:
        return -x + a * safe_log(x) - lgamma(a)
    return 0.5 * math.log(a / (2 * math.pi)) - a * phi(x / a) - stirlerr(a)


def _r(a, x):
    return safe_exp(log_r(a, x))


def _from_lower(p):
    return p, 0.5 - p + 0.5


def _from_upper(q):
    return 0.5 - q + 0.5, q


def _small_a(a, x):
    """The ratios for :math:`a < 1`, equations 9 to 11."""
    if x < 1.1:
        alpha = LOGROOT / math.log(x) if x < 0.5 else x / 2.59
        j = _j(a, x)
        h = gam1(a)
        if a >= alpha:
            return _from_lower(math.exp(a * math.log(x)) * (1 - j) * (1 + h))  # 9
        z = a * math.log(x)
        return _from_upper((math.exp(z) * j - expm1(z)) * (1 + h) - h)  # 10
    return _from_upper(_r(a, x) * _cf(a, x))  # 11


def _medium_a(a, x):
    """The ratios for :math:`1 \\leq a < 20`, equations 14 to 16 and 11."""
    if 2 * a == math.floor(2 * a) and a <= x < X0:
        # 14
        if a == math.floor(a):
            return _from_upper(math.exp(-x) * series(lambda i, v: 1 if i == 0 else v * x / i, int(a)))

        def half_integer_term(i, v):
            if i == 0:
                return 0
            if i == 1:
                return x / 0.5
            return v * x / (i - 0.5)

        return _from_upper(erfc(math.sqrt(x)) + math.exp(-x) / math.sqrt(math.pi * x)
                           * series(half_integer_term, int(a + 0.5)))
    return _series_or_fraction(a, x)


def _big_a(a, x):
    """The ratios for :math:`a \\geq 20`, using the uniform asymptotic expansion near the transition point."""
    lam = x / a
    sigma = abs(1 - lam)
    y = a * phi(lam)

    if sigma <= E0 / math.sqrt(a):
        # 19
        correction = (1 - y) / math.sqrt(2 * math.pi * a) * _t(a, lam)
        if lam <= 1:
            return _from_lower(_e(y) - correction)
        return _from_upper(_e(y) + correction)

    if sigma <= 0.4:
        # 17
        leading = 0.5 * erfc(math.sqrt(y))
        correction = safe_exp(-y) / math.sqrt(2 * math.pi * a) * _t(a, lam)
        if lam <= 1:
            return _from_lower(leading - correction)
        return _from_upper(leading + correction)

    return _series_or_fraction(a, x)


def _series_or_fraction(a, x):
    """The ratios for moderate and large a away from the transition point."""
    if x <= max(a, math.log(10)):
        # 15
        return _from_lower(_r(a, x) / a * series(lambda n, v: 1 if n == 0 else v * x / (a + n)))
    if x < X0:
        # 11
        return _from_upper(_r(a, x) * _cf(a, x))
    # 16
    return _from_upper(_r(a, x) / x * series(lambda n, v: 1 if n == 0 else v * (a - n) / x,
                                             tolerance=_ASYMPTOTIC_TOLERANCE))


def _t(a, lam):
    """The sum :math:`T(a, \\lambda) = \\sum_{k=0}^{6} D_k(z) a^{-k}` of equation 18."""
    z = (1 if lam >= 1 else -1) * math.sqrt(2 * phi(lam))
    total = 0
    a_power = 1
    for polynomial in _t_coefficients:
        total += polynomial(z) * a_power
        a_power /= a
    return total


def _e(y):
    return 0.5 - (1 - y / 3) * math.sqrt(y / math.pi)


def _j(a, x):
    """The sum :math:`J = -a \\sum_{n=1}^{\\infty} (-x)^n / ((a + n) n!)` of equations 9 and 10."""
    def term(k, previous):
        if k == 0:
            return -x / (a + 1)
        return previous * -x / (k + 1) * (a + k) / (a + k + 1)
    return -a * series(term)


def _cf(a, x):
    """The continued fraction of equation 11, equal to :math:`Q(a, x) / r(a, x)`."""
    def partial_denominators(i, previous):
        if i == 0:
            return 0
        return x if i % 2 == 1 else 1

    def partial_numerators(i, previous):
        if i % 2 == 1:
            return 1 if i == 1 else (i - 1) / 2
        return i / 2 - a

    return cont_frac(partial_denominators, partial_numerators, tolerance=_EPSILON)


def gaminv(a):
    """The inverse of the incomplete gamma ratio.

    The initial approximation follows equations 21 to 36 of the paper (as also used in the Cephes ``igami``
    routine), which is then refined using Halley's method.

    Args:
        a (float): the shape parameter

    Returns:
        Callable[[float, boolean], float]: the function ``(p, lower_tail=True) -> x`` returning the x such that
            :math:`P(a, x) = p`, or :math:`Q(a, x) = p` if ``lower_tail`` is False.
    """
    def inverse(p, lower_tail=True):
        if math.isnan(a) or math.isnan(p) or a <= 0 or p < 0 or p > 1:
            return float('nan')
        if lower_tail:
            p, q = p, 0.5 - p + 0.5
        else:
            p, q = 0.5 - p + 0.5, p

        if p == 0:
            return 0.0
        if q == 0:
            return float('inf')

        x = _find_inverse_gamma(a, p, q)
        if a == 1:
            return x
        return _halley_refinement(a, p, q, x)
    return inverse


def _halley_refinement(a, p, q, x, max_steps=10):
    """Refine the initial estimate of the inverse gamma using Halley's method.

    When p is the larger of the two tail probabilities we iterate on the upper tail instead of the lower.
    """
    use_upper = p > 0.9
    for _ in range(max_steps):
        factor = _r(a, x)
        if factor == 0 or x == 0:
            return x

        lower, upper = gamma_ratios(a, x)
        if use_upper:
            f_fp = (upper - q) * x / -factor
        else:
            f_fp = (lower - p) * x / factor

        fpp_fp = -1.0 + (a - 1) / x
        if math.isinf(fpp_fp):
            # Newton's method in the case of overflow
            x_new = x - f_fp
        else:
            x_new = x - f_fp / (1.0 - 0.5 * f_fp * fpp_fp)

        if x_new <= 0:
            x_new = x / 2
        if abs(x_new - x) <= 2 * _EPSILON * x_new:
            return x_new
        x = x_new
    return x


_inverse_s_rational = Rational([0.213623493715853, 4.28342155967104, 11.6616720288968, 3.31125922108741],
                               [0.0361170810188420, 1.27364489782223, 6.40691597760039, 6.61053765625462, 1])


def _find_inverse_s(p, q):
    """The normal deviate s of equation 32."""
    t = math.sqrt(-2 * math.log(p if p < 0.5 else q))
    s = t - _inverse_s_rational(t)
    return -s if p < 0.5 else s


def _didonato_sn(a, x, nmr_terms, tolerance):
    """The partial sum of equation 34, stopping early when the terms drop below the tolerance."""
    total = 1.0
    if nmr_terms >= 1:
        partial = x / (a + 1)
        total += partial
        for i in range(2, nmr_terms + 1):
            partial *= x / (a + i)
            total += partial
            if partial < tolerance:
                break
    return total


def _tiny_b(a, y):
    """Equation 25, for very small values of :math:`q\\Gamma(a)`, with :math:`y = -\\ln(q\\Gamma(a))`."""
    c1 = (a - 1) * math.log(y)
    c2 = (a - 1) * (1 + c1)
    c3 = (a - 1) * Polynomial([-0.5, a - 2, (3 * a - 5) / 2])(c1)
    c4 = (a - 1) * Polynomial([1 / 3, -(3 * a - 5) / 2, a * a - 6 * a + 7, (11 * a * a - 46 * a + 47) / 6])(c1)
    c5 = (a - 1) * Polynomial([-0.25, (11 * a - 17) / 6, -3 * a * a + 13 * a - 13,
                               (2 * a ** 3 - 25 * a * a + 72 * a - 61) / 2,
                               (25 * a ** 3 - 195 * a * a + 477 * a - 379) / 12])(c1)
    return y + c1 + Polynomial([c5, c4, c3, c2, 0])(1 / y)


def _find_inverse_gamma(a, p, q):
    """The initial estimate of the inverse incomplete gamma ratio."""
    if a == 1:
        if q > 0.9:
            return -log1p(-p)
        return -math.log(q)

    if a < 1:
        g = gamma(a)
        b = q * g

        if b > 0.6 or (b >= 0.45 and a >= 0.3):
            # 21, using the second form when p is close to one
            if b * q > 1e-8 and q > 1e-5:
                u = math.pow(p * g * a, 1 / a)
            else:
                u = math.exp(-q / a - EULER_GAMMA)
            return u / (1 - u / (a + 1))
        if a < 0.3 and b >= 0.35:
            # 22
            t = math.exp(-EULER_GAMMA - b)
            u = t * math.exp(t)
            return t * math.exp(u)

        y = -math.log(b)
        if b > 0.15 or a >= 0.3:
            # 23
            u = y - (1 - a) * math.log(y)
            return y - (1 - a) * math.log(u) - math.log(1 + (1 - a) / (1 + u))
        if b > 0.1:
            # 24
            u = y - (1 - a) * math.log(y)
            return y - (1 - a) * math.log(u) - math.log((u * u + 2 * (3 - a) * u + (2 - a) * (3 - a))
                                                        / (u * u + (5 - a) * u + 2))
        return _tiny_b(a, y)

    # 31
    s = _find_inverse_s(p, q)
    ra = math.sqrt(a)
    w = (a + s * ra + (s * s - 1) / 3
         + (s ** 3 - 7 * s) / (36 * ra)
         - (3 * s ** 4 + 7 * s * s - 16) / (810 * a)
         + (9 * s ** 5 + 256 * s ** 3 - 433 * s) / (38880 * a * ra))

    if a >= 500 and abs(1 - w / a) < 1e-6:
        return w

    if p > 0.5:
        if w < 3 * a:
            return w
        d = max(2.0, a * (a - 1))
        lb = math.log(q) + lgamma(a)
        if lb < -d * 2.3:
            return _tiny_b(a, -lb)
        # 33
        u = -lb + (a - 1) * math.log(w) - math.log(1 + (1 - a) / (1 + w))
        return -lb + (a - 1) * math.log(u) - math.log(1 + (1 - a) / (1 + u))

    z = w
    ap1 = a + 1
    ap2 = a + 2
    v = math.log(p) + lgamma(ap1)
    if w < 0.15 * ap1:
        # 35
        z = math.exp((v + w) / a)
        s = log1p(z / ap1 * (1 + z / ap2))
        z = math.exp((v + z - s) / a)
        s = log1p(z / ap1 * (1 + z / ap2))
        z = math.exp((v + z - s) / a)
        s = log1p(z / ap1 * (1 + z / ap2 * (1 + z / (a + 3))))
        z = math.exp((v + z - s) / a)

    if z <= 0.01 * ap1 or z > 0.7 * ap1:
        return z

    # 36
    ls = math.log(_didonato_sn(a, z, 100, 1e-4))
    z = math.exp((v + z - ls) / a)
    return z * (1 - (a * math.log(z) - z - v + ls) / (a - z))
