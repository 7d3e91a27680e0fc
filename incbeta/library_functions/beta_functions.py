"""The (log) beta function and the (log) binomial coefficients."""
import math
from incbeta.library_functions.lanczos import lgamma, LOG_SQRT_2PI
from incbeta.library_functions.stirling import stirlerr
from incbeta.library_functions.unity import log1p, safe_exp, safe_log

__author__ = 'Robbert Harms'
__date__ = '2018-05-14'
__maintainer__ = 'Robbert Harms'
__email__ = 'robbert.harms@maastrichtuniversity.nl'
__licence__ = 'LGPL v3'


"""Below this k, the binomial coefficient is computed as a direct product."""
K_SMALL_MAX = 30


def lbeta(a, b):
    """The natural logarithm of the beta function, :math:`\\ln(\\Gamma(a)\\Gamma(b) / \\Gamma(a + b))`.

    The arguments are ordered such that :math:`a \\leq b`. For large arguments we write the log gamma functions
    in terms of their Stirling errors, such that the large terms cancel analytically instead of numerically.

    Args:
        a (float): the first shape parameter
        b (float): the second shape parameter

    Returns:
        float: the log of the beta function, ``nan`` for negative arguments, ``inf`` if one of the arguments is zero
    """
    if math.isnan(a) or math.isnan(b):
        return float('nan')
    if a > b:
        a, b = b, a

    if a < 0:
        return float('nan')
    if a == 0:
        return float('inf')
    if b == float('inf'):
        return float('-inf')

    if a > 10:
        return (-0.5 * math.log(b) + LOG_SQRT_2PI
                + (stirlerr(a) + stirlerr(b) - stirlerr(a + b))
                + (a - 0.5) * math.log(a / (a + b))
                + b * log1p(-a / (a + b)))
    if b >= 10:
        return (lgamma(a) + (stirlerr(b) - stirlerr(a + b))
                + a - a * math.log(a + b)
                + (b - 0.5) * log1p(-a / (a + b)))
    return lgamma(a) + (lgamma(b) - lgamma(a + b))


def beta(a, b):
    """The beta function, :math:`\\Gamma(a)\\Gamma(b) / \\Gamma(a + b)`."""
    return safe_exp(lbeta(a, b))


def lchoose(n, k):
    """The log of the absolute value of the binomial coefficient.

    This is defined for real n, k is rounded to the nearest integer.

    Args:
        n (float): the number of elements
        k (float): the number of chosen elements

    Returns:
        float: :math:`\\ln|\\binom{n}{k}|`
    """
    if math.isnan(n) or math.isnan(k):
        return float('nan')
    k = _round(k)
    if k < 0:
        return float('-inf')
    if k == 0:
        return 0.0
    if k == 1:
        return safe_log(abs(n))
    if n < 0:
        return lchoose(-n + k - 1, k)
    if n == _round(n):
        if n < k:
            return float('-inf')
        if n - k < 2:
            return lchoose(n, n - k)
        return _lfastchoose(n, k)
    if n < k - 1:
        return _lfastchoose2(n, k)
    return _lfastchoose(n, k)


def choose(n, k):
    """The binomial coefficient, for real n and k rounded to the nearest integer.

    For small k this is computed as a direct product, for larger k through the log beta function. Integer n give
    integer results.

    Args:
        n (float): the number of elements
        k (float): the number of chosen elements

    Returns:
        float: :math:`\\binom{n}{k}`
    """
    if math.isnan(n) or math.isnan(k):
        return float('nan')
    k = _round(k)

    if k < K_SMALL_MAX:
        if n - k < k and n >= 0 and n == _round(n):
            k = n - k
        if k < 0:
            return 0.0
        if k == 0:
            return 1.0
        result = n
        for j in range(2, int(k) + 1):
            result *= (n - j + 1) / j
        return _round(result) if n == _round(n) else result

    if n < 0:
        result = choose(-n + k - 1, k)
        return -result if k % 2 == 1 else result
    if n == _round(n):
        if n < k:
            return 0.0
        if n - k < K_SMALL_MAX:
            return choose(n, n - k)
        return _round(safe_exp(_lfastchoose(n, k)))
    if n < k - 1:
        return _sign_gamma(n - k + 1) * safe_exp(_lfastchoose2(n, k))
    return safe_exp(_lfastchoose(n, k))


def _lfastchoose(n, k):
    return -math.log(n + 1) - lbeta(n - k + 1, k + 1)


def _lfastchoose2(n, k):
    return lgamma(n + 1) - lgamma(k + 1) - lgamma(n - k + 1)


def _sign_gamma(x):
    """The sign of the gamma function at x."""
    return -1 if x < 0 and math.floor(-x) % 2 == 0 else 1


def _round(x):
    """Round half up, keeping infinite values."""
    if math.isinf(x):
        return x
    return float(math.floor(x + 0.5))
