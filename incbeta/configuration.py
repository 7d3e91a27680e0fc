"""Contains the runtime configuration of incbeta.

This consists of two parts, functions to get the current runtime settings and configuration actions to update these
settings. To set a new configuration, create a new :py:class:`ConfigAction` and use this within a context environment
using :py:func:`config_context`. Example:

.. code-block:: python

    from incbeta.configuration import RuntimeConfigurationAction, config_context

    with config_context(RuntimeConfigurationAction(max_iterations=500)):
        ...

"""
from contextlib import contextmanager

__author__ = 'Robbert Harms'
__date__ = "2015-07-22"
__maintainer__ = "Robbert Harms"
__email__ = "robbert.harms@maastrichtuniversity.nl"


"""The runtime configuration, this can be overwritten at run time.

For the iterative routines it holds that if no explicit iteration cap is given we use the one provided by this
module. This entire module acts as a singleton containing the current runtime configuration.
"""
_config = {
    'max_iterations': 10000,
    'use_multiprocessing': False,
    'max_batch_size': 1000
}


def get_max_iterations():
    """Get the hard iteration cap of the series, continued fraction and deviance loops.

    Returns:
        int: the maximum number of iterations before an iterative routine is considered failed
    """
    return _config['max_iterations']


def set_max_iterations(max_iterations):
    """Set the hard iteration cap of the iterative routines.

    Please note that this will change the global configuration, i.e. this is a persistent change. If you do not want
    a persistent state change, consider using :func:`~incbeta.configuration.config_context` instead.

    Args:
        max_iterations (int): the new iteration cap

    Raises:
        ValueError: if the given cap is not strictly positive
    """
    if max_iterations < 1:
        raise ValueError('The maximum number of iterations should be at least 1, {} given.'.format(max_iterations))
    _config['max_iterations'] = int(max_iterations)


def use_multiprocessing():
    """Check if the batch evaluation of library functions is spread over multiple processes.

    Returns:
        boolean: if we use a process pool for evaluating library functions
    """
    return _config['use_multiprocessing']


def set_use_multiprocessing(enabled):
    """Set the use of multiprocessing in the batch evaluation.

    Args:
        enabled (boolean): if we use a process pool or not
    """
    _config['use_multiprocessing'] = bool(enabled)


def get_max_batch_size():
    """Get the number of instances sent to a single worker when using multiprocessing.

    Returns:
        int: the maximum batch size
    """
    return _config['max_batch_size']


def set_max_batch_size(max_batch_size):
    """Set the number of instances sent to a single worker when using multiprocessing.

    Args:
        max_batch_size (int): the new maximum batch size
    """
    if max_batch_size < 1:
        raise ValueError('The maximum batch size should be at least 1, {} given.'.format(max_batch_size))
    _config['max_batch_size'] = int(max_batch_size)


@contextmanager
def config_context(config_action):
    """Creates a context in which the config action is applied and unapplies the configuration after execution.

    Args:
        config_action (ConfigAction): the configuration action to use
    """
    config_action.apply()
    try:
        yield
    finally:
        config_action.unapply()


class ConfigAction:

    def __init__(self):
        """Defines a configuration action for use in a configuration context.

        This should define an apply and unapply function that sets and unsets the configuration options.

        The applying action needs to remember the state before the application of the action.
        """

    def apply(self):
        """Apply the current action to the current runtime configuration."""

    def unapply(self):
        """Reset the current configuration to the previous state."""


class SimpleConfigAction(ConfigAction):

    def __init__(self):
        """Defines a default implementation of a configuration action.

        This simple config implements a default ``apply()`` method that saves the current state and a default
        ``unapply()`` that restores the previous state.

        For developers, it is easiest to implement ``_apply()`` such that you do not manually need to store the old
        configuration.
        """
        super().__init__()
        self._old_config = {}

    def apply(self):
        """Apply the current action to the current runtime configuration."""
        self._old_config = {k: v for k, v in _config.items()}
        self._apply()

    def unapply(self):
        """Reset the current configuration to the previous state."""
        for key, value in self._old_config.items():
            _config[key] = value

    def _apply(self):
        """Implement this function add apply() logic after this class saves the current config."""


class RuntimeConfigurationAction(SimpleConfigAction):

    def __init__(self, max_iterations=None, use_multiprocessing=None, max_batch_size=None):
        """Updates the runtime settings.

        Args:
            max_iterations (int): the iteration cap of the iterative routines
            use_multiprocessing (boolean): if the batch evaluation uses a process pool
            max_batch_size (int): the number of instances per worker batch
        """
        super().__init__()
        self._max_iterations = max_iterations
        self._use_multiprocessing = use_multiprocessing
        self._max_batch_size = max_batch_size

    def _apply(self):
        if self._max_iterations is not None:
            set_max_iterations(self._max_iterations)

        if self._use_multiprocessing is not None:
            set_use_multiprocessing(self._use_multiprocessing)

        if self._max_batch_size is not None:
            set_max_batch_size(self._max_batch_size)


class VoidConfigurationAction(ConfigAction):

    def __init__(self):
        """Does nothing, useful as a default config action.
        """
        super().__init__()
