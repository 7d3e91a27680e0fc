"""Arithmetic on probabilities carried as natural logarithms."""
import math
from incbeta.library_functions.unity import log1p, expm1, safe_exp, safe_log

__author__ = 'Robbert Harms'
__date__ = '2018-05-14'
__maintainer__ = 'Robbert Harms'
__email__ = 'robbert.harms@maastrichtuniversity.nl'
__licence__ = 'LGPL v3'


def logspace_add(lx, ly):
    """Computes :math:`\\ln(e^{lx} + e^{ly})` without leaving log space."""
    if lx == float('-inf'):
        return ly
    if ly == float('-inf'):
        return lx
    return max(lx, ly) + log1p(safe_exp(-abs(lx - ly)))


def logspace_sub(lx, ly):
    """Computes :math:`\\ln(e^{lx} - e^{ly})`, for :math:`lx \\geq ly`."""
    if ly == float('-inf'):
        return lx
    return lx + log1mexp(ly - lx)


def log1mexp(lx):
    """Computes :math:`\\ln(1 - e^{lx})` for :math:`lx \\leq 0`.

    This switches between ``log(-expm1(lx))`` and ``log1p(-exp(lx))`` at :math:`-\\ln(2)`, which keeps the full
    precision on both sides.

    Returns:
        float: the log of the complementary probability, ``nan`` for positive arguments
    """
    if math.isnan(lx) or lx > 0:
        return float('nan')
    if lx == 0:
        return float('-inf')
    if lx > -math.log(2):
        return safe_log(-expm1(lx))
    return log1p(-math.exp(lx))


def adjust_lower(p, lower_tail=True, log_p=False):
    """Convert a lower tail probability to the requested tail and scale.

    Args:
        p (float): the lower tail probability
        lower_tail (boolean): if we want the lower tail or the upper tail
        log_p (boolean): if we want the probability on the log scale

    Returns:
        float: the requested probability
    """
    if p == 1:
        p = 0
        lower_tail = not lower_tail
    if p == 0:
        if lower_tail:
            return float('-inf') if log_p else 0.0
        return 0.0 if log_p else 1.0
    if lower_tail:
        return safe_log(p) if log_p else p
    return log1p(-p) if log_p else 1 - p


def adjust_upper(q, lower_tail=True, log_p=False):
    """Convert an upper tail probability to the requested tail and scale.

    Args:
        q (float): the upper tail probability
        lower_tail (boolean): if we want the lower tail or the upper tail
        log_p (boolean): if we want the probability on the log scale

    Returns:
        float: the requested probability
    """
    if lower_tail:
        return log1p(-q) if log_p else 1 - q
    return safe_log(q) if log_p else q
