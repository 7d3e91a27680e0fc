from incbeta.library_functions.base import LibraryFunction, SimpleLibraryFunction
from incbeta.library_functions.beta_functions import lbeta, beta, lchoose, choose
from incbeta.library_functions.densities import dbinom_log, lpoisson
from incbeta.library_functions.error_functions import erf, erfc, erfcx
from incbeta.library_functions.incomplete_beta import bratio
from incbeta.library_functions.incomplete_gamma import gratio, gratioc, gaminv
from incbeta.library_functions.lanczos import lgamma, gamma
from incbeta.library_functions.stirling import stirlerr, bd0
from incbeta.library_functions.unity import gam1, phi, log1p, expm1


__author__ = 'Robbert Harms'
__date__ = '2018-05-07'
__maintainer__ = 'Robbert Harms'
__email__ = 'robbert@xkls.nl'
__licence__ = 'LGPL v3'


class ErrorFunction(SimpleLibraryFunction):
    def __init__(self):
        """The error function, :math:`\\text{erf}(x) = \\frac{2}{\\sqrt{\\pi}} \\int_0^x e^{-t^2} dt`."""
        super().__init__(erf, name='erf')


class ComplementaryErrorFunction(SimpleLibraryFunction):
    def __init__(self):
        """The complementary error function, :math:`\\text{erfc}(x) = 1 - \\text{erf}(x)`."""
        super().__init__(erfc, name='erfc')


class ScaledComplementaryErrorFunction(SimpleLibraryFunction):
    def __init__(self):
        """The scaled complementary error function :math:`e^{x^2} \\text{erfc}(x)`.

        For large x this does not overflow, since it never forms the exponential and the complementary error
        function separately.
        """
        super().__init__(erfcx, name='erfcx')


class LogGamma(SimpleLibraryFunction):
    def __init__(self):
        """The log of the absolute value of the gamma function."""
        super().__init__(lgamma, name='lgamma')


class Gamma(SimpleLibraryFunction):
    def __init__(self):
        """The gamma function, signed for negative arguments."""
        super().__init__(gamma, name='gamma', dependencies=[LogGamma()])


class LogBeta(SimpleLibraryFunction):
    def __init__(self):
        """The log of the beta function, :math:`\\ln(\\Gamma(a)\\Gamma(b) / \\Gamma(a + b))`."""
        super().__init__(lbeta, name='lbeta', dependencies=[LogGamma(), StirlingError()])


class Beta(SimpleLibraryFunction):
    def __init__(self):
        super().__init__(beta, name='beta', dependencies=[LogBeta()])


class StirlingError(SimpleLibraryFunction):
    def __init__(self):
        """The error of Stirling's approximation, :math:`\\ln(n!) - \\ln(\\sqrt{2\\pi n}(n/e)^n)`."""
        super().__init__(stirlerr, name='stirlerr', dependencies=[LogGamma()])


class BinomialDeviance(SimpleLibraryFunction):
    def __init__(self):
        """The deviance term :math:`x \\ln(x / np) + np - x` of the saddle point expansions."""
        super().__init__(bd0, name='bd0')


class Gam1(SimpleLibraryFunction):
    def __init__(self):
        """Computes :math:`1 / \\Gamma(x + 1) - 1`, accurate for small x."""
        super().__init__(gam1, name='gam1', dependencies=[Gamma()])


class Phi(SimpleLibraryFunction):
    def __init__(self):
        """Computes :math:`x - 1 - \\ln(x)`, accurate near one."""
        super().__init__(phi, name='phi')


class Log1p(SimpleLibraryFunction):
    def __init__(self):
        super().__init__(log1p, name='log1p')


class Expm1(SimpleLibraryFunction):
    def __init__(self):
        super().__init__(expm1, name='expm1')


class IncompleteGammaP(SimpleLibraryFunction):
    def __init__(self):
        """The regularized lower incomplete gamma function :math:`P(a, x)`."""
        super().__init__(_incomplete_gamma_p, parameters=['a', 'x'], name='gratio',
                         dependencies=[ErrorFunction(), ComplementaryErrorFunction(),
                                       ScaledComplementaryErrorFunction(), LogGamma(), Gam1(), Phi(),
                                       StirlingError()])


class IncompleteGammaQ(SimpleLibraryFunction):
    def __init__(self):
        """The regularized upper incomplete gamma function :math:`Q(a, x) = 1 - P(a, x)`."""
        super().__init__(_incomplete_gamma_q, parameters=['a', 'x'], name='gratioc',
                         dependencies=[ErrorFunction(), ComplementaryErrorFunction(),
                                       ScaledComplementaryErrorFunction(), LogGamma(), Gam1(), Phi(),
                                       StirlingError()])


class IncompleteGammaInverse(SimpleLibraryFunction):
    def __init__(self):
        """The inverse of the lower incomplete gamma ratio, the x for which :math:`P(a, x) = p`."""
        super().__init__(_incomplete_gamma_inverse, parameters=['a', 'p'], name='gaminv',
                         dependencies=[IncompleteGammaP(), Gamma(), LogGamma()])


class IncompleteBetaRatio(SimpleLibraryFunction):
    def __init__(self):
        """The regularized incomplete beta function ratio :math:`I_x(a, b)`.

        This is the cumulative distribution function of the beta distribution, computed using Algorithm 708 of
        DiDonato and Morris.
        """
        super().__init__(bratio, parameters=['a', 'b', 'x'], name='bratio',
                         dependencies=[LogBeta(), Phi(), Gam1(), StirlingError(),
                                       ScaledComplementaryErrorFunction(), IncompleteGammaQ()])


class LogBinomialDensity(SimpleLibraryFunction):
    def __init__(self):
        """The log of the binomial probability of x successes in ``size`` trials with success probability p."""
        super().__init__(_log_binomial_density, parameters=['x', 'size', 'p'], name='dbinom_log',
                         dependencies=[StirlingError(), BinomialDeviance()])


class LogPoissonDensity(SimpleLibraryFunction):
    def __init__(self):
        """The log of the Poisson probability of x events at rate ``lam``."""
        super().__init__(_log_poisson_density, parameters=['x', 'lam'], name='lpoisson',
                         dependencies=[StirlingError(), BinomialDeviance()])


class LogChoose(SimpleLibraryFunction):
    def __init__(self):
        """The log of the absolute value of the binomial coefficient, k is rounded to the nearest integer."""
        super().__init__(lchoose, name='lchoose', dependencies=[LogBeta(), LogGamma()])


class Choose(SimpleLibraryFunction):
    def __init__(self):
        super().__init__(choose, name='choose', dependencies=[LogBeta(), LogGamma()])


def _incomplete_gamma_p(a, x):
    return gratio(a)(x)


def _incomplete_gamma_q(a, x):
    return gratioc(a)(x)


def _incomplete_gamma_inverse(a, p):
    return gaminv(a)(p)


def _log_binomial_density(x, size, p):
    return dbinom_log(size, p)(x)


def _log_poisson_density(x, lam):
    return lpoisson(lam)(x)
