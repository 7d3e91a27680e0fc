"""Generic series and continued fraction evaluation.

Both engines are driven by term callbacks of the form ``term(i, previous)``, where ``previous`` is the value the
callback returned for index ``i - 1`` (``None`` for the first index). This allows ratio based recurrences like
``lambda i, v: 1 if i == 0 else v * x / i``.

The stopping rule is either a fixed number of terms, or, if no number of terms is given, iteration until the partial
value reaches a fixed point in floating point arithmetic. Not reaching a fixed point within the configured maximum
number of iterations raises a :class:`~incbeta.lib.exceptions.NonConvergenceError`.
"""
import math
from incbeta.configuration import get_max_iterations
from incbeta.lib.exceptions import NonConvergenceError

__author__ = 'Robbert Harms'
__date__ = '2018-05-07'
__maintainer__ = 'Robbert Harms'
__email__ = 'robbert.harms@maastrichtuniversity.nl'
__licence__ = 'LGPL v3'


_RESCALE_UP = 2.0 ** 256
_RESCALE_DOWN = 2.0 ** -256


def iter_series(term):
    """Generate the partial sums of the series defined by the given term function.

    Args:
        term (Callable[[int, float], float]): computes term ``i`` given the previous term

    Yields:
        float: the partial sums, the first being ``term(0, None)``
    """
    current = term(0, None)
    total = current
    yield total

    i = 0
    while True:
        i += 1
        current = term(i, current)
        total += current
        yield total


def iter_cont_frac(a, b):
    """Generate the convergents of the continued fraction ``a0 + b1 / (a1 + b2 / (a2 + ...))``.

    This uses the forward three term recurrence on the numerators and denominators of the convergents. Both are
    rescaled by an exact power of two whenever they grow too large or too small, which leaves the convergents
    themselves unchanged.

    Args:
        a (Callable[[int, float], float]): the partial denominators, called as ``a(i, previous_a)``
        b (Callable[[int, float], float]): the partial numerators, called as ``b(i, previous_b)`` from ``i = 1`` on

    Yields:
        float: the successive convergents, the first being ``a(0, None)``
    """
    an = a(0, None)
    bn = 1.0
    numerator, numerator_prev = an, 1.0
    denominator, denominator_prev = 1.0, 0.0
    yield numerator / denominator

    i = 0
    while True:
        i += 1
        an = a(i, an)
        bn = b(i, bn)

        numerator, numerator_prev = numerator * an + numerator_prev * bn, numerator
        denominator, denominator_prev = denominator * an + denominator_prev * bn, denominator

        scale = max(abs(numerator), abs(denominator))
        if scale > _RESCALE_UP:
            numerator *= _RESCALE_DOWN
            numerator_prev *= _RESCALE_DOWN
            denominator *= _RESCALE_DOWN
            denominator_prev *= _RESCALE_DOWN
        elif 0 < scale < _RESCALE_DOWN:
            numerator *= _RESCALE_UP
            numerator_prev *= _RESCALE_UP
            denominator *= _RESCALE_UP
            denominator_prev *= _RESCALE_UP

        if denominator == 0:
            yield math.copysign(float('inf'), numerator) if numerator else float('nan')
        else:
            yield numerator / denominator


def series(term, stop=None, max_iterations=None, tolerance=None):
    """Sum the series defined by the given term function.

    Args:
        term (Callable[[int, float], float]): computes term ``i`` given the previous term (``None`` for ``i = 0``)
        stop (int): if given, sum exactly this many terms (indices ``0`` up to ``stop - 1``). If not given, sum
            until the partial sum no longer changes.
        max_iterations (int): the iteration cap when summing to convergence, defaults to the configured value
        tolerance (float): if given, also stop when two successive partial sums are relatively within this
            tolerance of each other. Asymptotic expansions need this, since their terms do not decrease forever.

    Returns:
        float: the (partial) sum of the series

    Raises:
        NonConvergenceError: if the partial sums did not converge within the maximum number of iterations
    """
    return _limit(iter_series(term), stop, max_iterations, tolerance, 'series')


def cont_frac(a, b, stop=None, max_iterations=None, tolerance=None):
    """Evaluate the generalized continued fraction ``a0 + b1 / (a1 + b2 / (a2 + ...))``.

    Examples:
        The golden ratio: ``cont_frac(lambda i, v: 1, lambda i, v: 1)``.

    Args:
        a (Callable[[int, float], float]): the partial denominators, called as ``a(i, previous_a)``
        b (Callable[[int, float], float]): the partial numerators, called as ``b(i, previous_b)``
        stop (int): if given, use exactly this many partial denominators (``a0`` up to ``a_{stop - 1}``)
        max_iterations (int): the iteration cap when iterating to convergence, defaults to the configured value
        tolerance (float): if given, also stop when two successive convergents are relatively within this
            tolerance of each other

    Returns:
        float: the value of the continued fraction

    Raises:
        NonConvergenceError: if the convergents did not settle within the maximum number of iterations
    """
    return _limit(iter_cont_frac(a, b), stop, max_iterations, tolerance, 'continued fraction')


def _limit(partials, stop, max_iterations, tolerance, routine):
    """Take the limit of a sequence of partial values.

    With a fixed number of terms, this returns the partial value after that many terms. Otherwise, this iterates
    until the value no longer changes, or, if a tolerance is given, changes by less than that relative tolerance.
    A ``nan`` partial value ends the iteration.
    """
    if stop is not None:
        if stop <= 0:
            return 0.0
        for ind, value in enumerate(partials, 1):
            if ind >= stop or math.isnan(value):
                return value

    if max_iterations is None:
        max_iterations = get_max_iterations()

    previous = next(partials)
    if math.isnan(previous):
        return previous

    for _ in range(max_iterations):
        value = next(partials)
        if math.isnan(value) or value == previous:
            return value
        if tolerance is not None and abs(value - previous) <= tolerance * abs(value):
            return value
        previous = value

    raise NonConvergenceError(max_iterations, previous, routine=routine)
