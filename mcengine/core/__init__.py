""" Module for Monte Carlo integration and Markov chain sampling.

Integration methods are wrapped in classes. To create an integrator, create
an object specifying general settings such as the dimensionality and the
integration box. The object is callable with a function (integrand) and the
number of function evaluations and returns an IntegrationSample holding the
integral estimate, its standard error and a confidence interval.

Example:
    >>> mc = PlainMC(sample_range=(0, 1), variates=0)
    >>> sample = mc(lambda x: x**2, 10000)
    >>> est, err = sample.integral, sample.integral_err

Importance sampling draws from a Distribution instead of the uniform box
and averages the weights fn(x) / pdf(x).

Example:
    >>> dist = densities.Cauchy(variates=0)
    >>> mc_imp = ImportanceMC(dist)
    >>> sample = mc_imp(lambda x: np.exp(-x**2 / 2), 10000)  # ~sqrt(2 pi)

Markov chains are generated by update objects. Their next_state method is
the transition of one step; sample runs a fixed number of transitions.

Example:
    >>> met = DefaultMetropolis(1, lambda x: np.exp(-x**2 / 2),
    ...                         proposal=proposals.Gaussian(1, .5, 1),
    ...                         bounds=(-3, 3), variates=1)
    >>> sample = met.sample(1000, 0., log_every=0)
    >>> sample.data.shape
    (1000, 1)

The integrand passed to a ndim-dimensional method must take ndim arguments, all
of which are 1d numpy arrays of some size N, and return a numpy array of
the same length N. Functions that only work with floats are evaluated point
by point (which is slower but otherwise equivalent).

All randomness is drawn through Variates objects. Every method accepts
a Variates object or a seed, and runs with equal seeds give identical
results. Independent runs must not share a Variates object.
"""
import numpy as np

from . import proposals
from . import densities
from . import util

from .errors import (SimulationError, ConfigurationError, DomainError,
                     ComputationError)
from .variates import *
from .estimator import RunningEstimator
from .integration import *
from .markov import *

from .sampling import Sample
from .density import Proposal, Density, Distribution
