""" Exceptions raised by the sampling and integration methods.

All errors are local to one run (or one step of a chain) and are never
retried: resampling past an undefined state cannot fix it.
"""


class SimulationError(Exception):
    """ Base class of all errors raised by mcengine. """


class ConfigurationError(SimulationError, ValueError):
    """ Invalid hyperparameters, sample sizes, bounds or dimensions. """


class DomainError(SimulationError, ArithmeticError):
    """ Operation undefined for the current state.

    Examples are the standard error of an estimator without observations or
    a Metropolis ratio whose current state has zero density.
    """


class ComputationError(SimulationError, RuntimeError):
    """ A user supplied function raised or returned an invalid value.

    :ivar x: The point at which the evaluation failed (None if unknown).
    """

    def __init__(self, message, x=None):
        super().__init__(message)
        self.x = x
