import logging
import math
import multiprocessing
import os
from contextlib import contextmanager
import numpy as np

__author__ = 'Robbert Harms'
__date__ = "2014-05-13"
__license__ = "LGPL v3"
__maintainer__ = "Robbert Harms"
__email__ = "robbert.harms@maastrichtuniversity.nl"


"""Below this precision, :func:`relatively_close_to` considers two numbers equal."""
DEFAULT_PRECISION = 1e-10


def is_scalar(value):
    """Test if the given value is a scalar.

    This function also works with memory mapped array values, in contrast to the numpy is_scalar method.

    Args:
        value: the value to test for being a scalar value

    Returns:
        boolean: if the given value is a scalar or not
    """
    return np.isscalar(value) or (isinstance(value, np.ndarray) and (len(np.squeeze(value).shape) == 0))


def is_essentially_zero(value):
    """Check if the given value is smaller than 1e-100 in absolute value."""
    return abs(value) < 1e-100


def relatively_close_to(value, reference, precision=None):
    """Check if the value is within a relative distance of the reference value.

    Both values being NaN counts as close, infinities are only close to themselves. If one of the two values is
    exactly zero, the other needs to be essentially zero (see :func:`is_essentially_zero`).

    Args:
        value (float): the value to test
        reference (float): the value to compare against
        precision (float): the relative precision, defaults to ``1e-10``

    Returns:
        boolean: if the two values are relatively close to each other
    """
    precision = precision or DEFAULT_PRECISION
    abs_max = max(abs(value), abs(reference))

    if math.isnan(value) or math.isnan(reference):
        return math.isnan(value) and math.isnan(reference)
    if math.isinf(abs_max):
        return value == reference
    if abs_max == 0:
        return True
    if value == 0:
        return is_essentially_zero(reference)
    if reference == 0:
        return is_essentially_zero(value)
    return abs(value - reference) / abs_max < precision


@contextmanager
def all_logging_disabled(highest_level=logging.CRITICAL):
    """Disable all logging temporarily.

    A context manager that will prevent any logging messages triggered during the body from being processed.

    Args:
        highest_level: the maximum logging level that is being blocked
    """
    previous_level = logging.root.manager.disable
    logging.disable(highest_level)
    try:
        yield
    finally:
        logging.disable(previous_level)


def cartesian(arrays, out=None):
    """Generate a cartesian product of input arrays.

    Args:
        arrays (list of array-like): 1-D arrays to form the cartesian product of.
        out (ndarray): Array to place the cartesian product in.

    Returns:
        ndarray: 2-D array of shape (M, len(arrays)) containing cartesian products formed of input arrays.

    Examples:
        >>> cartesian(([1, 2, 3], [4, 5]))
        array([[1, 4],
               [1, 5],
               [2, 4],
               [2, 5],
               [3, 4],
               [3, 5]])
    """
    arrays = [np.asarray(x) for x in arrays]
    dtype = arrays[0].dtype

    nmr_elements = np.prod([x.size for x in arrays])
    if out is None:
        out = np.zeros([nmr_elements, len(arrays)], dtype=dtype)

    m = nmr_elements // arrays[0].size
    out[:, 0] = np.repeat(arrays[0], m)
    if arrays[1:]:
        cartesian(arrays[1:], out=out[0:m, 1:])
        for j in range(1, arrays[0].size):
            out[j*m:(j+1)*m, 1:] = out[0:m, 1:]
    return out


def split_in_batches(nmr_elements, max_batch_size):
    """Split the total number of elements into batches of the specified maximum size.

    Examples::
        split_in_batches(30, 8) -> [(0, 8), (8, 16), (16, 24), (24, 30)]

        for batch_start, batch_end in split_in_batches(2000, 100):
            array[batch_start:batch_end]

    Yields:
        tuple: the start and end point of the next batch
    """
    offset = 0
    elements_left = nmr_elements
    while elements_left > 0:
        batch_size = min(elements_left, max_batch_size)
        yield offset, offset + batch_size

        elements_left -= batch_size
        offset += batch_size


def multiprocess_mapping(func, iterable):
    """Multiprocess mapping the given function on the given iterable.

    This only works in Linux and Mac systems since Windows has no forking capability. On Windows we fall back on
    single processing. Also, if we reach memory limits we fall back on single cpu processing.

    Args:
        func (func): the function to apply, this needs to be picklable
        iterable (iterable): the iterable with the elements we want to apply the function on

    Returns:
        list: the function results, in the order of the iterable
    """
    if os.name == 'nt':  # In Windows there is no fork.
        return list(map(func, iterable))
    try:
        with multiprocessing.Pool() as p:
            return_data = list(p.imap(func, iterable))
            p.close()
            p.join()
        return return_data
    except OSError:
        return list(map(func, iterable))
