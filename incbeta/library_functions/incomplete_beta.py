"""The regularized incomplete beta function ratio.

.. math::

    I_x(a, b) = \\frac{1}{B(a, b)} \\int_0^x t^{a-1} (1 - t)^{b-1} dt

for :math:`a, b \\geq 0` and :math:`0 \\leq x \\leq 1`.

This follows: A. R. DiDonato and A. H. Morris, "Algorithm 708: Significant Digit Computation of the Incomplete Beta
Function Ratios", ACM Transactions on Mathematical Software, Vol. 18, No. 3, September 1992, Pages 360-373. The
equation and case numbers in the comments refer to this paper.

Everything is computed on the logarithms of the tail probabilities. For every set of arguments, :func:`select_regime`
decides which tail is computed directly and by which method (or sum of methods), the other tail is its complement.
The decision is returned as data, such that it can be inspected and tested independently of the arithmetic.
"""
import itertools
import logging
import math
from collections import namedtuple
import numpy as np
from incbeta.library_functions.beta_functions import lbeta
from incbeta.library_functions.error_functions import erfcx
from incbeta.library_functions.incomplete_gamma import grat_r
from incbeta.library_functions.lanczos import LOG_SQRT_2PI
from incbeta.library_functions.logspace import logspace_add, log1mexp, adjust_lower
from incbeta.library_functions.stirling import stirlerr
from incbeta.library_functions.summation import series, cont_frac
from incbeta.library_functions.unity import gam1, phi, log1p, safe_exp, safe_log

__author__ = 'Robbert Harms'
__date__ = '2018-05-21'
__maintainer__ = 'Robbert Harms'
__email__ = 'robbert.harms@maastrichtuniversity.nl'
__licence__ = 'LGPL v3'


logger = logging.getLogger(__name__)

_EPSILON = np.finfo(np.float64).eps

"""Relative truncation tolerances of the continued fraction and the asymptotic expansions."""
_BFRAC_TOLERANCE = 15 * _EPSILON
_BGRAT_TOLERANCE = 15 * _EPSILON
_BASYM_TOLERANCE = 100 * _EPSILON

"""The maximum number of terms of the asymptotic expansions, these are truncated and never raise."""
BGRAT_MAX_TERMS = 30
BASYM_MAX_TERMS = 100

"""The number of upward recurrence steps used to shift a shape parameter into the range of BGRAT."""
BUP_STEPS = 20

_LOG_TWO_OVER_SQRT_PI = math.log(2 / math.sqrt(math.pi))
_TWO_POW_MINUS_THREE_HALVES = 2 ** -1.5

"""The coefficients of the series for :math:`\\Delta(b) - \\Delta(a + b)`, with :math:`\\Delta` the Stirling error."""
_delta_difference_coefficients = (0.0833333333333333, -0.00277777777760991, 0.793650666825390e-3,
                                  -0.595202931351870e-3, 0.837308034031215e-3, -0.165322962780713e-2)


class LogTailPair(namedtuple('LogTailPair', ['lower', 'upper'])):
    """The natural logarithms of the lower tail :math:`I_x(a, b)` and the upper tail :math:`1 - I_x(a, b)`."""
    __slots__ = ()

    @classmethod
    def from_lower(cls, log_lower):
        """Construct the pair from the log of the lower tail, clipped at zero."""
        log_lower = min(log_lower, 0.0)
        return cls(log_lower, log1mexp(log_lower))

    @classmethod
    def from_upper(cls, log_upper):
        """Construct the pair from the log of the upper tail, clipped at zero."""
        log_upper = min(log_upper, 0.0)
        return cls(log1mexp(log_upper), log_upper)

    def flipped(self):
        """Swap the two tails, following :math:`I_x(a, b) = 1 - I_{1-x}(b, a)`."""
        return LogTailPair(self.upper, self.lower)


"""The method selected for a set of arguments.

Attributes:
    method (str): one of ``bpser``, ``bup_bpser``, ``bup_bgrat``, ``bup_bup_bgrat``, ``bgrat``, ``bfrac`` or
        ``basym``
    tail (str): ``lower`` or ``upper``, the tail computed directly by the method
    case (str): the case number in the paper
    flip (boolean): if the method applies to the flipped arguments :math:`(b, a, 1 - x)`
    n (int): the number of upward recurrence steps, zero if the method does not use :func:`bup`
"""
Regime = namedtuple('Regime', ['method', 'tail', 'case', 'flip', 'n'])


def bratio(a, b, x, lower_tail=True, log_p=False):
    """The regularized incomplete beta function ratio.

    Args:
        a (float): the first shape parameter
        b (float): the second shape parameter
        x (float): the position, in [0, 1]
        lower_tail (boolean): if True we return :math:`I_x(a, b)`, else :math:`1 - I_x(a, b)`
        log_p (boolean): if True we return the natural logarithm of the probability

    Returns:
        float: the requested tail probability
    """
    result = bratio_log(a, b, x)
    value = result.lower if lower_tail else result.upper
    if log_p:
        return value
    return safe_exp(value)


def pbeta(a, b, lower_tail=True, log_p=False):
    """The cumulative distribution function of the beta distribution.

    Next to :func:`bratio` this handles the limiting point mass distributions of zero and infinite shapes and
    positions outside of [0, 1].

    Args:
        a (float): the first shape parameter
        b (float): the second shape parameter
        lower_tail (boolean): if True we return :math:`P(X \\leq x)`, else :math:`P(X > x)`
        log_p (boolean): if True we return the natural logarithm of the probability

    Returns:
        Callable[[float], float]: the cumulative distribution function
    """
    def beta_cdf(x):
        if math.isnan(x) or math.isnan(a) or math.isnan(b) or a < 0 or b < 0:
            return float('nan')
        if x <= 0:
            return adjust_lower(0.0, lower_tail, log_p)
        if x >= 1:
            return adjust_lower(1.0, lower_tail, log_p)

        if a == 0 and b == 0:
            return math.log(0.5) if log_p else 0.5
        if math.isinf(a) and math.isinf(b):
            return adjust_lower(0.0 if x < 0.5 else 1.0, lower_tail, log_p)
        if a == 0 or math.isinf(b):
            return adjust_lower(1.0, lower_tail, log_p)
        if b == 0 or math.isinf(a):
            return adjust_lower(0.0, lower_tail, log_p)
        return bratio(a, b, x, lower_tail=lower_tail, log_p=log_p)
    return beta_cdf


def bratio_log(a, b, x, y=None):
    """The natural logarithms of both tails of the incomplete beta ratio.

    Args:
        a (float): the first shape parameter
        b (float): the second shape parameter
        x (float): the position, in [0, 1]
        y (float): the complement :math:`1 - x`, computed from x if not given. Callers that know y more precisely
            than :math:`1 - x` can pass it here.

    Returns:
        LogTailPair: the log of the lower and the upper tail, both ``nan`` for invalid arguments
    """
    if y is None:
        y = 0.5 - x + 0.5

    if math.isnan(a) or math.isnan(b) or math.isnan(x) or a < 0 or b < 0 or x < 0 or x > 1:
        return LogTailPair(float('nan'), float('nan'))
    if a == 0 and b == 0:
        return LogTailPair(float('nan'), float('nan'))

    # with 0 < x < 1, a zero a puts all mass at zero, a zero b all mass at one
    if a == 0:
        return LogTailPair(0.0, float('-inf'))
    if b == 0:
        return LogTailPair(float('-inf'), 0.0)
    if x == 0:
        return LogTailPair(float('-inf'), 0.0)
    if x == 1 or y == 0:
        return LogTailPair(0.0, float('-inf'))

    if math.isinf(a) and math.isinf(b):
        if x < 0.5:
            return LogTailPair(float('-inf'), 0.0)
        return LogTailPair(0.0, float('-inf'))
    if math.isinf(a):
        return LogTailPair(float('-inf'), 0.0)
    if math.isinf(b):
        return LogTailPair(0.0, float('-inf'))

    regime = select_regime(a, b, x, y)
    if regime.flip:
        return bratio_log(b, a, y, x).flipped()

    logger.debug('Incomplete beta ratio at a=%s, b=%s, x=%s using %s (case %s).',
                 a, b, x, regime.method, regime.case)
    return _evaluate_regime(regime, a, b, x, y)


def select_regime(a, b, x, y=None):
    """Select the method used to compute the incomplete beta ratio.

    This follows the decision tree on pages 368 and 369 of the paper. The flipped arguments :math:`(b, a, 1 - x)`
    are used when x lies above 0.5 (for :math:`\\min(a, b) \\leq 1`) or above the mean :math:`a / (a + b)`
    (otherwise). The returned regime is then the one selected for the flipped arguments, marked as flipped.
    A flipped selection never flips again.

    Args:
        a (float): the first shape parameter, positive and finite
        b (float): the second shape parameter, positive and finite
        x (float): the position, in (0, 1)
        y (float): the complement :math:`1 - x`, computed from x if not given

    Returns:
        Regime: the selected method
    """
    if y is None:
        y = 0.5 - x + 0.5

    if min(a, b) <= 1:
        if x > 0.5 and y <= 0.5:
            return select_regime(b, a, y, x)._replace(flip=True)
        return _select_small_shape_regime(a, b, x)

    p = a / (a + b)
    q = b / (a + b)
    if x > p and y <= q:
        return select_regime(b, a, y, x)._replace(flip=True)
    return _select_large_shape_regime(a, b, x, y, p, q)


def _select_small_shape_regime(a, b, x):
    """The regimes for :math:`\\min(a, b) \\leq 1` and :math:`x \\leq 0.5`."""
    if max(a, b) > 1:
        if b <= 1:
            return Regime('bpser', 'lower', '12c', False, 0)
        if x >= 0.3:
            return Regime('bpser', 'upper', '13b', False, 0)
        if x < 0.1 and safe_exp(a * safe_log(x * b)) <= 0.7:
            return Regime('bpser', 'lower', '12d', False, 0)
        if b > 15:
            return Regime('bgrat', 'upper', '14', False, 0)
        return Regime('bup_bgrat', 'upper', '15', False, BUP_STEPS)

    if a >= min(0.2, b):
        return Regime('bpser', 'lower', '12a', False, 0)
    if safe_exp(a * safe_log(x)) <= 0.9:
        return Regime('bpser', 'lower', '12b', False, 0)
    if x >= 0.3:
        return Regime('bpser', 'upper', '13a', False, 0)
    return Regime('bup_bgrat', 'upper', '15c', False, BUP_STEPS)


def _select_large_shape_regime(a, b, x, y, p, q):
    """The regimes for :math:`\\min(a, b) > 1` and :math:`x \\leq a / (a + b)`.

    The power series is only used for :math:`bx \\leq 0.7`, also far below the mean (large :math:`\\lambda`), where
    it loses most digits to cancellation.
    """
    if b < 40:
        if b * x <= 0.7:
            return Regime('bpser', 'lower', '16a', False, 0)
        n = _split_shape(b)[0]
        if x <= 0.7:
            return Regime('bup_bpser', 'lower', '17a', False, n)
        if a > 15:
            return Regime('bup_bgrat', 'lower', '18a', False, n)
        return Regime('bup_bup_bgrat', 'lower', '19a', False, n)

    if a <= b:
        if a <= 100:
            return Regime('bfrac', 'lower', '20a', False, 0)
        if x < 0.97 * p:
            return Regime('bfrac', 'lower', '20b', False, 0)
        return Regime('basym', 'lower', '21a', False, 0)

    if b <= 100:
        return Regime('bfrac', 'lower', '20c', False, 0)
    if y > 1.03 * q:
        return Regime('bfrac', 'lower', '20d', False, 0)
    return Regime('basym', 'lower', '21c', False, 0)


def _split_shape(b):
    """Split b into a number of recurrence steps n and a remainder in (0, 1].

    Returns:
        tuple: ``(n, b_bar)`` with ``b = n + b_bar``. For integer b this gives ``b_bar = 1``.
    """
    n = int(math.floor(b))
    b_bar = b - n
    if b_bar == 0:
        n -= 1
        b_bar = 1.0
    return n, b_bar


def _lambda(a, b, x, y):
    """The distance :math:`\\lambda = a - (a + b) x` from the mean, computed through y when :math:`a > b`."""
    if a > b:
        return (a + b) * y - b
    return a - (a + b) * x


def _evaluate_regime(regime, a, b, x, y):
    """Compute the log tails using the method of the given (unflipped) regime."""
    method = regime.method

    if method == 'bpser':
        if regime.tail == 'lower':
            return LogTailPair.from_lower(bpser(a, b, x))
        return LogTailPair.from_upper(bpser(b, a, y))
    if method == 'bgrat':
        return LogTailPair.from_upper(bgrat(b, a, y, x))
    if method == 'bfrac':
        return LogTailPair.from_lower(bfrac(a, b, x, y))
    if method == 'basym':
        return LogTailPair.from_lower(basym(a, b, x, y))

    if regime.tail == 'upper':
        # 15, shift b upwards and use BGRAT on the shifted upper tail
        return LogTailPair.from_upper(logspace_add(bup(b, a, y, x, regime.n),
                                                   bgrat(b + regime.n, a, y, x)))

    b_bar = b - regime.n
    log_lower = bup(b_bar, a, y, x, regime.n)
    if method == 'bup_bpser':
        return LogTailPair.from_lower(logspace_add(log_lower, bpser(a, b_bar, x)))
    if method == 'bup_bgrat':
        return LogTailPair.from_lower(logspace_add(log_lower, bgrat(a, b_bar, x, y)))

    log_lower = logspace_add(log_lower, bup(a, b_bar, x, y, BUP_STEPS))
    return LogTailPair.from_lower(logspace_add(log_lower, bgrat(a + BUP_STEPS, b_bar, x, y)))


def bpser(a, b, x):
    """The log of :math:`I_x(a, b)` using the power series of equation 2.

    This converges for all x in [0, 1), but is only efficient when x is small or when b is small.

    Returns:
        float: the log of the lower tail
    """
    def term(i, previous):
        if i == 0:
            return 0.0
        if i == 1:
            return (1 - b) * x / (a + 1)
        return previous * (i - b) * x * (1 - 1 / (a + i)) / i

    return -lbeta(a, b) + a * math.log(x) - math.log(a) + log1p(a * series(term))


def bup(a, b, x, y, n):
    """The log of the difference :math:`I_x(a, b) - I_x(a + n, b)`, a sum of n terms (equation 13).

    Args:
        a (float): the first shape parameter
        b (float): the second shape parameter
        x (float): the position
        y (float): the complement of the position
        n (int): the number of steps of the upward recurrence

    Returns:
        float: the log of the difference
    """
    def term(i, previous):
        if i == 0:
            return 1.0
        return previous * x * (a + b + i - 1) / (a + i)

    return brcomp(a, b, x, y) - math.log(a) + safe_log(series(term, stop=n))


def bgrat(a, b, x, y):
    """The log of :math:`I_x(a, b)` using the asymptotic expansion for large a and :math:`b \\leq 1` (equation 9).

    The expansion is truncated once the terms drop below a relative tolerance, or after
    :data:`BGRAT_MAX_TERMS` terms.

    Args:
        a (float): the first shape parameter, large (at least 15)
        b (float): the second shape parameter, at most 1
        x (float): the position
        y (float): the complement of the position

    Returns:
        float: the log of the lower tail
    """
    lnx = math.log(x) if y > 0.375 else log1p(-y)
    t = a + (b - 1) / 2
    u = -t * lnx

    log_h = math.log(b) + log1p(gam1(b)) + b * math.log(u) - u
    log_m = log_h - (algdiv(b, a) + b * math.log(t))

    j = grat_r(b, u, log_h)
    v = 1 / (4 * t * t)
    l2 = lnx * lnx / 4
    l_power = 1.0

    coefficients = _iter_bgrat_coefficients(b)
    next(coefficients)

    total = j
    for n in range(1, BGRAT_MAX_TERMS + 1):
        b_2n = b + 2 * (n - 1)
        j = (b_2n * (b_2n + 1) * j + (u + b_2n + 1) * l_power) * v
        l_power *= l2

        term = next(coefficients)[1] * j
        total += term
        if abs(term) <= _BGRAT_TOLERANCE * total:
            break
    return log_m + safe_log(total)


def bgrat_coefficients(b, n):
    """The coefficient arrays of the BGRAT expansion.

    These are :math:`c_k = 1 / (2k + 1)!` and

    .. math::

        p_k = (b - 1) c_k + \\frac{1}{k} \\sum_{m=1}^{k-1} (mb - k) c_m p_{k-m}

    with :math:`p_0 = 1`, such that :math:`p_k` only depends on the earlier entries.

    Args:
        b (float): the second shape parameter
        n (int): the highest index

    Returns:
        tuple: the lists ``(cs, ps)``, each of length ``n + 1``
    """
    pairs = list(itertools.islice(_iter_bgrat_coefficients(b), n + 1))
    return [c for c, _ in pairs], [p for _, p in pairs]


def _iter_bgrat_coefficients(b):
    """Generates the pairs :math:`(c_k, p_k)` of :func:`bgrat_coefficients` for k = 0, 1, ..."""
    cs = [1.0]
    ps = [1.0]
    yield cs[0], ps[0]

    k = 0
    while True:
        k += 1
        cs.append(cs[k - 1] / (2 * k * (2 * k + 1)))
        s = sum((m * b - k) * cs[m] * ps[k - m] for m in range(1, k))
        ps.append((b - 1) * cs[k] + s / k)
        yield cs[k], ps[k]


def bfrac(a, b, x, y):
    """The log of :math:`I_x(a, b)` using the continued fraction expansion of equation 10.

    This is used for :math:`a, b \\geq 40` with x not too close to the mean.

    Returns:
        float: the log of the lower tail
    """
    lam = _lambda(a, b, x, y)

    def partial_denominators(i, previous):
        if i == 0:
            return 0.0
        n = i - 1
        return n + n * (b - n) * x / (a + 2 * n - 1) + (a + n) / (a + 2 * n + 1) * (lam + 1 + n * (1 + y))

    def partial_numerators(i, previous):
        if i == 1:
            return 1.0
        n = i - 1
        return (a + n - 1) * (a + b + n - 1) / (a + 2 * n - 1) ** 2 * n * (b - n) * x * x

    fraction = cont_frac(partial_denominators, partial_numerators, tolerance=_BFRAC_TOLERANCE)
    return brcomp(a, b, x, y) + safe_log(fraction)


def brcomp(a, b, x, y):
    """The log of :math:`x^a y^b / B(a, b)`.

    For :math:`\\min(a, b) \\geq 8` this is written in terms of :math:`\\phi` and :func:`bcorr`, which avoids
    the cancellation between the large terms.

    Args:
        a (float): the first shape parameter
        b (float): the second shape parameter
        x (float): the position
        y (float): the complement of the position

    Returns:
        float: the log of the prefactor
    """
    if min(a, b) < 8:
        if x <= 0.375:
            lnx, lny = math.log(x), log1p(-x)
        elif y > 0.375:
            lnx, lny = math.log(x), math.log(y)
        else:
            lnx, lny = log1p(-y), math.log(y)
        return a * lnx + b * lny - lbeta(a, b)

    lam = _lambda(a, b, x, y)
    return (0.5 * (math.log(a) + math.log(b) - math.log(a + b)) - LOG_SQRT_2PI
            - a * phi(1 - lam / a) - b * phi(1 + lam / b) - bcorr(a, b))


def basym(a, b, x, y):
    """The log of :math:`I_x(a, b)` using the asymptotic expansion for large a and b (equation 11).

    The expansion is truncated once two consecutive terms drop below a relative tolerance, or after
    :data:`BASYM_MAX_TERMS` terms.

    Args:
        a (float): the first shape parameter, large (above 100)
        b (float): the second shape parameter, large (above 100)
        x (float): the position, close to the mean
        y (float): the complement of the position

    Returns:
        float: the log of the lower tail
    """
    lam = _lambda(a, b, x, y)
    f = a * phi(1 - lam / a) + b * phi(1 + lam / b)
    z0 = math.sqrt(f)
    z = math.sqrt(2) * z0

    if a < b:
        w0 = 1 / math.sqrt(a * (1 + a / b))
    else:
        w0 = 1 / math.sqrt(b * (1 + b / a))

    ls = [math.sqrt(math.pi) / 4 * erfcx(z0), _TWO_POW_MINUS_THREE_HALVES]

    coefficients = _iter_basym_coefficients(a, b)
    next(coefficients)

    total = ls[0]
    w = 1.0
    z_power = 1.0
    previous_term = 0.0
    for k in range(1, BASYM_MAX_TERMS + 1):
        d_k = next(coefficients)[2]
        if k >= 2:
            z_power *= z
            ls.append(_TWO_POW_MINUS_THREE_HALVES * z_power + (k - 1) * ls[k - 2])

        w *= w0
        term = d_k * w * ls[k]
        total += term
        if k % 2 == 0 and abs(previous_term) + abs(term) <= _BASYM_TOLERANCE * total:
            break
        previous_term = term

    return _LOG_TWO_OVER_SQRT_PI - f - bcorr(a, b) + safe_log(total)


def basym_coefficients(a, b, n):
    """The coefficient arrays of the BASYM expansion.

    With :math:`h = \\min(a, b) / \\max(a, b)` these are

    .. math::

        a_k = \\frac{2}{k + 2} (1 - (-h)^{k+1}) \\cdot
            \\begin{cases} q & a \\leq b \\\\ (-1)^k p & a > b \\end{cases}

    For every k, a list :math:`b^{(k)}` is built for :math:`r = -(k + 1) / 2` as

    .. math::

        b_1 = r a_1, \\quad b_m = r a_m + \\frac{1}{m} \\sum_{j=1}^{m-1} (jr - (m - j)) a_j b_{m-j}

    after which :math:`c_k = b_k^{(k)} / (k + 1)` and :math:`d_k = -(c_k + \\sum_{j=1}^{k-1} d_{k-j} c_j)`
    with :math:`d_0 = 1`.

    Args:
        a (float): the first shape parameter
        b (float): the second shape parameter
        n (int): the highest index

    Returns:
        tuple: the lists ``(as, cs, ds)``, each of length ``n + 1``. Index zero holds
            :math:`a_0 = c_0 = 0` and :math:`d_0 = 1`.
    """
    triples = list(itertools.islice(_iter_basym_coefficients(a, b), n + 1))
    return [t[0] for t in triples], [t[1] for t in triples], [t[2] for t in triples]


def _iter_basym_coefficients(a, b):
    """Generates the triples :math:`(a_k, c_k, d_k)` of :func:`basym_coefficients` for k = 0, 1, ..."""
    if a < b:
        h = a / b
        r1 = (b - a) / b
    else:
        h = b / a
        r1 = (b - a) / a
    r0 = 1 / (1 + h)

    a_s = [0.0]
    c_s = [0.0]
    d_s = [1.0]
    yield a_s[0], c_s[0], d_s[0]

    # sum of the even powers of h, (1 - h^(k+1)) = (1 - h^2) * s for odd k
    s = 0.0
    k = 0
    while True:
        k += 1
        if k % 2 == 1:
            s += h ** (k - 1)
            a_s.append(2 * r1 * s / (k + 2))
        else:
            a_s.append(2 * r0 * (1 + h ** (k + 1)) / (k + 2))

        r = -(k + 1) / 2
        b_s = [0.0, r * a_s[1]]
        for m in range(2, k + 1):
            b_s.append(r * a_s[m] + sum((j * r - (m - j)) * a_s[j] * b_s[m - j] for j in range(1, m)) / m)

        c_s.append(b_s[k] / (k + 1))
        d_s.append(-(c_s[k] + sum(d_s[k - j] * c_s[j] for j in range(1, k))))
        yield a_s[k], c_s[k], d_s[k]


def bcorr(a, b):
    """The correction :math:`\\Delta(a) + \\Delta(b) - \\Delta(a + b)`, with :math:`\\Delta` the Stirling error.

    The arguments are ordered such that :math:`a \\leq b`, both should be at least 8.
    """
    if a > b:
        a, b = b, a
    return stirlerr(a) + _delta_difference(a, b)


def algdiv(a, b):
    """Computes :math:`\\ln(\\Gamma(b) / \\Gamma(a + b))` for :math:`b \\geq 8`."""
    d = a + b - 0.5
    u = d * log1p(a / b)
    v = a * (math.log(b) - 1)
    if u > v:
        return _delta_difference(a, b) - v - u
    return _delta_difference(a, b) - u - v


def _delta_difference(a, b):
    """The difference :math:`\\Delta(b) - \\Delta(a + b)` of Stirling errors, for :math:`b \\geq 8`.

    This uses :math:`s_n = 1 + q + \\ldots + q^{n-1}` with :math:`q = b / (a + b)`.
    """
    p = a / (a + b)
    q = b / (a + b)

    s = 1.0
    scale = 1.0
    total = 0.0
    for i, coefficient in enumerate(_delta_difference_coefficients):
        if i > 0:
            s += q ** (2 * i - 1) + q ** (2 * i)
            scale /= b * b
        total += coefficient * s * scale
    return total * p / b
