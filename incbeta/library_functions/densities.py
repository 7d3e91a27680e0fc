"""Log densities of the binomial and Poisson distributions.

These follow the saddle point expansions from C. Loader, "Fast and Accurate Computation of Binomial Probabilities"
(2000), which write the densities in terms of :func:`~incbeta.library_functions.stirling.stirlerr` and
:func:`~incbeta.library_functions.stirling.bd0`.
"""
import math
from incbeta.library_functions.stirling import stirlerr, bd0
from incbeta.library_functions.unity import log1p

__author__ = 'Robbert Harms'
__date__ = '2018-05-14'
__maintainer__ = 'Robbert Harms'
__email__ = 'robbert.harms@maastrichtuniversity.nl'
__licence__ = 'LGPL v3'


def dbinom_log(size, p):
    """The log of the binomial probability mass function.

    Args:
        size (float): the number of trials
        p (float): the success probability

    Returns:
        Callable[[float], float]: the log probability of x successes
    """
    if p == 0:
        return lambda x: 0.0 if x == 0 else float('-inf')
    if p == 1:
        return lambda x: 0.0 if x == size else float('-inf')

    def log_density(x):
        if x == 0:
            if size == 0:
                return 0.0
            return size * log1p(-p)
        if x == size:
            return size * math.log(p)
        if x < 0 or x > size:
            return float('-inf')
        return (stirlerr(size) - stirlerr(x) - stirlerr(size - x)
                - bd0(x, size * p) - bd0(size - x, size * (1 - p))
                + 0.5 * math.log(size / (2 * math.pi * x * (size - x))))
    return log_density


def lpoisson(lam):
    """The log of the Poisson probability mass function.

    Args:
        lam (float): the rate of the distribution

    Returns:
        Callable[[float], float]: the log probability of x events
    """
    def log_density(x):
        if lam == 0:
            return 0.0 if x == 0 else float('-inf')
        if math.isinf(lam) or math.isnan(lam):
            return float('-inf')
        if x < 0:
            return float('-inf')
        if x == 0:
            return -lam
        if x == float('inf'):
            return float('-inf')
        return -stirlerr(x) - bd0(x, lam) - 0.5 * math.log(2 * math.pi * x)
    return log_density
