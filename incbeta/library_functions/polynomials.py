__author__ = 'Robbert Harms'
__date__ = '2018-05-07'
__maintainer__ = 'Robbert Harms'
__email__ = 'robbert.harms@maastrichtuniversity.nl'
__licence__ = 'LGPL v3'


class Polynomial:

    def __init__(self, coefficients):
        """Polynomial with a fixed table of coefficients.

        The coefficients are stored with the highest degree first, that is, for :math:`ax^3 + bx^2 + cx + d` the
        coefficients are ``[a, b, c, d]``. This is the same order as the Cephes ``polevl`` routine uses::

            coef[0] = C  , ..., coef[N] = C  .
                       N                   0

        An empty table evaluates to zero.

        Args:
            coefficients (Iterable[float]): the coefficients, highest degree first
        """
        if isinstance(coefficients, Polynomial):
            coefficients = coefficients.coefficients
        self._coefficients = tuple(float(c) for c in coefficients)

    @property
    def coefficients(self):
        return self._coefficients

    @property
    def degree(self):
        return len(self._coefficients) - 1

    def evaluate(self, x):
        """Evaluate this polynomial at the given position using Horner's method.

        Args:
            x (float): the position to evaluate the polynomial at

        Returns:
            float: the value of the polynomial at x
        """
        result = 0.0
        for coefficient in self._coefficients:
            result = result * x + coefficient
        return result

    def __call__(self, x):
        return self.evaluate(x)

    def __repr__(self):
        return '{}({!r})'.format(self.__class__.__name__, list(self._coefficients))


class Rational:

    def __init__(self, numerator, denominator):
        """Rational function, the quotient of two polynomials.

        Common factors between the numerator and the denominator are not eliminated. Evaluating at a root of the
        denominator is not checked for, the coefficient tables are supposed to avoid this on their domain.

        Args:
            numerator (Polynomial or Iterable[float]): the numerator polynomial or its coefficients
            denominator (Polynomial or Iterable[float]): the denominator polynomial or its coefficients
        """
        self._numerator = Polynomial(numerator)
        self._denominator = Polynomial(denominator)

    @property
    def numerator(self):
        return self._numerator

    @property
    def denominator(self):
        return self._denominator

    def evaluate(self, x):
        """Evaluate this rational function at the given position.

        Args:
            x (float): the position to evaluate the function at

        Returns:
            float: the numerator divided by the denominator, ``nan`` or ``inf`` at a root of the denominator
        """
        numerator = self._numerator.evaluate(x)
        denominator = self._denominator.evaluate(x)
        if denominator == 0:
            if numerator == 0:
                return float('nan')
            return float('inf') if numerator > 0 else float('-inf')
        return numerator / denominator

    def __call__(self, x):
        return self.evaluate(x)

    def __repr__(self):
        return '{}({!r}, {!r})'.format(self.__class__.__name__, list(self._numerator.coefficients),
                                       list(self._denominator.coefficients))
