import inspect
import itertools
import logging
from collections.abc import Mapping
import numpy as np
from incbeta.configuration import use_multiprocessing, get_max_batch_size
from incbeta.lib.utils import is_scalar, split_in_batches, multiprocess_mapping

__author__ = 'Robbert Harms'
__date__ = "2016-10-03"
__maintainer__ = "Robbert Harms"
__email__ = "robbert.harms@maastrichtuniversity.nl"


logger = logging.getLogger(__name__)


class LibraryFunction:
    """Interface for the numerical library functions."""

    def get_name(self):
        """Return the name of the implemented function.

        Returns:
            str: The name of this function
        """
        raise NotImplementedError()

    def get_parameters(self):
        """Return the names of the parameters of this function.

        Returns:
            list of str: the parameter names, in the order in which the function takes them
        """
        raise NotImplementedError()

    def get_dependencies(self):
        """Get the list of library functions this function depends on.

        Returns:
            list[LibraryFunction]: the list of dependencies for this function.
        """
        raise NotImplementedError()

    def evaluate(self, inputs, nmr_instances):
        """Evaluate this function for each set of given parameters.

        Args:
            inputs (Iterable[Union(ndarray, float)] or Mapping[str: Union(ndarray, float)]): for each parameter the
                input data. Each of these input datasets must either be a scalar or be of length ``nmr_instances``
                in the first dimension. Scalars are broadcast to all instances. You can provide either an iterable
                with one value per parameter, or a mapping with for every parameter a corresponding value.
            nmr_instances (int): the number of instances to evaluate

        Returns:
            ndarray: the return values of the function, as a double array of length ``nmr_instances``
        """
        raise NotImplementedError()

    def __call__(self, *args):
        """Evaluate this function for a single set of scalar arguments."""
        raise NotImplementedError()


class SimpleLibraryFunction(LibraryFunction):

    def __init__(self, function, parameters=None, name=None, dependencies=None):
        """A library function wrapping a scalar Python function.

        Args:
            function (Callable): the scalar function. For evaluation with multiprocessing this needs to be
                picklable, that is, a module level function.
            parameters (list of str): the names of the parameters, if not given these are taken from the signature
                of the function
            name (str): the name of this function, defaults to the name of the Python function
            dependencies (Iterable[LibraryFunction]): the library functions this function relies on
        """
        self._function = function
        self._parameters = list(parameters or inspect.signature(function).parameters)
        self._name = name or function.__name__
        self._dependencies = list(dependencies or [])

    def get_name(self):
        return self._name

    def get_parameters(self):
        return self._parameters

    def get_dependencies(self):
        return self._dependencies

    def evaluate(self, inputs, nmr_instances):
        rows = list(zip(*_resolve_inputs(inputs, self.get_parameters(), nmr_instances)))

        if use_multiprocessing() and nmr_instances > 1:
            logger.debug('Evaluating {} on {} instances using multiprocessing.'.format(self._name, nmr_instances))
            batches = [rows[start:end] for start, end in split_in_batches(nmr_instances, get_max_batch_size())]
            results = itertools.chain.from_iterable(multiprocess_mapping(_BatchEvaluator(self._function), batches))
        else:
            logger.debug('Evaluating {} on {} instances.'.format(self._name, nmr_instances))
            results = (self._function(*row) for row in rows)

        return np.fromiter(results, dtype=np.float64, count=nmr_instances)

    def __call__(self, *args):
        return self._function(*args)

    def __str__(self):
        return '{}({})'.format(self._name, ', '.join(self._parameters))


class _BatchEvaluator:

    def __init__(self, function):
        """Evaluates a function on a batch of argument rows, used as the worker in multiprocessing."""
        self._function = function

    def __call__(self, rows):
        return [self._function(*row) for row in rows]


def _resolve_inputs(inputs, parameters, nmr_instances):
    """Convert the inputs to one list of Python floats per parameter.

    Args:
        inputs (Iterable or Mapping): the input data, see :meth:`LibraryFunction.evaluate`
        parameters (list of str): the names of the parameters
        nmr_instances (int): the number of instances

    Returns:
        list of list: per parameter the list of values, one per instance

    Raises:
        ValueError: if the number of inputs does not match the parameters, or if an input has the wrong length
    """
    if isinstance(inputs, Mapping):
        missing = [name for name in parameters if name not in inputs]
        if missing:
            raise ValueError('Missing inputs for the parameters {}.'.format(missing))
        inputs = [inputs[name] for name in parameters]
    else:
        inputs = list(inputs)

    if len(inputs) != len(parameters):
        raise ValueError('Expected {} inputs, got {}.'.format(len(parameters), len(inputs)))

    columns = []
    for name, value in zip(parameters, inputs):
        if is_scalar(value):
            columns.append(np.full(nmr_instances, value, dtype=np.float64).tolist())
        else:
            value = np.asarray(value, dtype=np.float64).ravel()
            if value.shape[0] != nmr_instances:
                raise ValueError('The input for parameter "{}" has length {}, expected {}.'.format(
                    name, value.shape[0], nmr_instances))
            columns.append(value.tolist())
    return columns
