"""Correction terms for saddle point expansions.

See: C. Loader, "Fast and Accurate Computation of Binomial Probabilities" (2000).
"""
import math
from incbeta.configuration import get_max_iterations
from incbeta.lib.exceptions import NonConvergenceError
from incbeta.library_functions.lanczos import lgamma, LOG_SQRT_2PI

__author__ = 'Robbert Harms'
__date__ = '2018-05-14'
__maintainer__ = 'Robbert Harms'
__email__ = 'robbert.harms@maastrichtuniversity.nl'
__licence__ = 'LGPL v3'


_stirling_series = (1 / 12., 1 / 360., 1 / 1260., 1 / 1680., 1 / 1188.)

"""The Stirling error at the half integers, indexed by ``2 * n``."""
_stirlerr_table = (
    0.0,
    0.1534264097200273452913848,
    0.0810614667953272582196702,
    0.0548141210519176538961390,
    0.0413406959554092940938221,
    0.03316287351993628748511048,
    0.02767792568499833914878929,
    0.02374616365629749597132920,
    0.02079067210376509311152277,
    0.01848845053267318523077934,
    0.01664469118982119216319487,
    0.01513497322191737887351255,
    0.01387612882307074799874573,
    0.01281046524292022692424986,
    0.01189670994589177009505572,
    0.01110455975820691732662991,
    0.010411265261972096497478567,
    0.009799416126158803298389475,
    0.009255462182712732917728637,
    0.008768700134139385462952823,
    0.008330563433362871256469318,
    0.007934114564314020547248100,
    0.007573675487951840794972024,
    0.007244554301320383179543912,
    0.006942840107209529865664152,
    0.006665247032707682442354394,
    0.006408994188004207068439631,
    0.006171712263039457647532867,
    0.005951370112758847735624416,
    0.005746216513010115682023589,
    0.005554733551962801371038690
)


def stirlerr(n):
    """The error term of Stirling's approximation, :math:`\\ln(n!) - \\ln(\\sqrt{2\\pi n}(n/e)^n)`.

    For :math:`n \\leq 15` we use tabulated values at the half integers and the log gamma function elsewhere. Above
    15 we use the asymptotic series :math:`1/(12n) - 1/(360n^3) + 1/(1260n^5) - 1/(1680n^7) + 1/(1188n^9)`, with
    fewer terms for larger n (above 35, 80 and 500).

    Args:
        n (float): the (non-negative) position

    Returns:
        float: the Stirling error at n
    """
    if n < 0 or math.isnan(n):
        return float('nan')
    if n <= 15:
        if 2 * n == math.floor(2 * n):
            return _stirlerr_table[int(2 * n)]
        return lgamma(n + 1) - (n + 0.5) * math.log(n) + n - LOG_SQRT_2PI

    c0, c1, c2, c3, c4 = _stirling_series
    nsq = n * n
    if n > 500:
        return (c0 - c1 / nsq) / n
    if n > 80:
        return (c0 - (c1 - c2 / nsq) / nsq) / n
    if n > 35:
        return (c0 - (c1 - (c2 - c3 / nsq) / nsq) / nsq) / n
    return (c0 - (c1 - (c2 - (c3 - c4 / nsq) / nsq) / nsq) / nsq) / n


def bd0(x, np):
    """The deviance term :math:`x \\ln(x / np) + np - x`.

    When x and np are relatively close this is computed with a series in :math:`v = (x - np) / (x + np)`, which
    avoids the cancellation of the direct formula.

    Args:
        x (float): the observed value
        np (float): the expected value

    Returns:
        float: the deviance

    Raises:
        NonConvergenceError: if the series did not converge within the maximum number of iterations
    """
    if x == 0:
        return np
    if np == 0:
        return float('inf')
    if abs(x - np) < 0.1 * (x + np):
        v = (x - np) / (x + np)
        s = (x - np) * v
        ej = 2 * x * v
        max_iterations = get_max_iterations()
        for j in range(1, max_iterations):
            ej *= v * v
            s_new = s + ej / (2 * j + 1)
            if s_new == s:
                return s_new
            s = s_new
        raise NonConvergenceError(max_iterations, s, routine='bd0')
    return x * math.log(x / np) + np - x
