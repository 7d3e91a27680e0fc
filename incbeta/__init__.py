import logging
from logging import NullHandler
from .__version__ import VERSION, VERSION_STATUS, __version__
from incbeta.library_functions.error_functions import erf, erfc
from incbeta.library_functions.incomplete_beta import bratio, bratio_log, LogTailPair
from incbeta.library_functions.incomplete_gamma import gratio, gratioc
from incbeta.library_functions.lanczos import lgamma

logging.getLogger(__name__).addHandler(NullHandler())


def incomplete_beta(a, b, x):
    """The natural logarithms of both tails of the regularized incomplete beta function ratio.

    Args:
        a (float): the first shape parameter, non-negative
        b (float): the second shape parameter, non-negative
        x (float): the position, in [0, 1]

    Returns:
        LogTailPair: the log of :math:`I_x(a, b)` and of :math:`1 - I_x(a, b)`
    """
    return bratio_log(a, b, x)


def incomplete_beta_ratio(a, b, x, lower_tail=True, log_scale=False):
    """The regularized incomplete beta function ratio :math:`I_x(a, b)`.

    Args:
        a (float): the first shape parameter, non-negative
        b (float): the second shape parameter, non-negative
        x (float): the position, in [0, 1]
        lower_tail (boolean): if False we return the upper tail :math:`1 - I_x(a, b)`
        log_scale (boolean): if True we return the natural logarithm of the tail probability

    Returns:
        float: the requested tail probability, ``nan`` for invalid arguments
    """
    return bratio(a, b, x, lower_tail=lower_tail, log_p=log_scale)


def incomplete_gamma_p(a):
    """The regularized lower incomplete gamma function, curried on the shape.

    Returns:
        Callable[[float], float]: the function :math:`x \\mapsto P(a, x)`
    """
    return gratio(a)


def incomplete_gamma_q(a):
    """The regularized upper incomplete gamma function, curried on the shape.

    Returns:
        Callable[[float], float]: the function :math:`x \\mapsto Q(a, x)`
    """
    return gratioc(a)


def error_function(x):
    """The error function."""
    return erf(x)


def complementary_error_function(x):
    """The complementary error function, :math:`1 - \\text{erf}(x)` without cancellation for large x."""
    return erfc(x)


def log_gamma(x):
    """The log of the absolute value of the gamma function."""
    return lgamma(x)
