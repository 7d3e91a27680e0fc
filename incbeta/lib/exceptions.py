__author__ = 'Robbert Harms'
__date__ = '2026-03-02'
__maintainer__ = 'Robbert Harms'
__email__ = 'robbert@xkls.nl'
__licence__ = 'LGPL v3'


class NumericalError(Exception):
    """Base class for the fatal numerical errors of this package.

    These are raised when an algorithm was used outside the region it was designed for. Domain errors, like a
    negative shape parameter, never raise but return NaN.
    """


class NonConvergenceError(NumericalError):

    def __init__(self, max_iterations, last_value, routine=None):
        """Raised when an iterative evaluation did not converge within its iteration cap.

        Args:
            max_iterations (int): the iteration cap that was reached
            last_value (float): the last partial value before giving up
            routine (str): optional name of the routine that failed
        """
        self.max_iterations = max_iterations
        self.last_value = last_value
        self.routine = routine
        super().__init__('{}did not converge within {} iterations, last value was {}.'.format(
            '{} '.format(routine) if routine else '', max_iterations, last_value))
