""" Random variates and density evaluators.

All randomness used by the integrators and samplers is drawn through a
Variates object, which wraps a single numpy Generator. Two runs started
from the same seed draw identical variates; independent runs should use
independent sources (see Variates.spawn) and never share one.

Example:
    >>> var = Variates(42)
    >>> xs = var.normal(1000, mean=1, sd=2)
    >>> xs.shape
    (1000,)

The density evaluators (dnorm, dcauchy, ...) return the density or
probability mass at a point given the distribution parameters and are used
to build priors, likelihoods and importance weights.
"""

import numpy as np
from scipy import stats

from .errors import ConfigurationError
from .util import check_count

__all__ = ['Variates', 'as_variates', 'dunif', 'dnorm', 'dcauchy', 'dpois',
           'dbeta', 'dgamma']


def _positive(name, value):
    if np.any(np.asanyarray(value) <= 0):
        raise ConfigurationError("%s must be positive, got %r." % (name, value))


def _probability(name, value):
    value = np.asanyarray(value)
    if np.any((value < 0) | (value > 1)) or np.any(np.isnan(value)):
        raise ConfigurationError(
            "%s must lie in [0, 1], got %r." % (name, value))


class Variates(object):

    def __init__(self, seed=None):
        """ Seedable source of independent random variates.

        :param seed: Anything accepted by numpy.random.default_rng
            (None, an int, a SeedSequence or a Generator).
        """
        self.rng = np.random.default_rng(seed)

    def spawn(self, count):
        """ Independent child sources, e.g. for parallel replications. """
        return [Variates(child) for child in self.rng.spawn(count)]

    def rand(self, n=None):
        """ Standard uniforms on [0, 1); a float if n is None. """
        if n is None:
            return self.rng.random()
        return self.rng.random(check_count(n, 'n', 0))

    def uniform(self, n, lo=0., hi=1.):
        if np.any(np.asanyarray(lo) >= np.asanyarray(hi)):
            raise ConfigurationError(
                "Need lo < hi for uniform draws, got %r, %r." % (lo, hi))
        return self.rng.uniform(lo, hi, check_count(n, 'n', 0))

    def normal(self, n, mean=0., sd=1.):
        _positive('sd', sd)
        return self.rng.normal(mean, sd, check_count(n, 'n', 0))

    def cauchy(self, n, location=0., scale=1.):
        _positive('scale', scale)
        n = check_count(n, 'n', 0)
        return location + scale * self.rng.standard_cauchy(n)

    def poisson(self, n, lam):
        if np.any(np.asanyarray(lam) < 0):
            raise ConfigurationError("lam must be >= 0, got %r." % (lam,))
        return self.rng.poisson(lam, check_count(n, 'n', 0))

    def bernoulli(self, n, p):
        """ n Bernoulli draws (0 or 1).

        :param p: Success probability, either a float or an array of length
            n giving the probability of each draw.
        """
        _probability('p', p)
        n = check_count(n, 'n', 0)
        return (self.rng.random(n) < p).astype(int)

    def beta(self, n, alpha, beta):
        _positive('alpha', alpha)
        _positive('beta', beta)
        return self.rng.beta(alpha, beta, check_count(n, 'n', 0))

    def gamma(self, n, shape, rate):
        """ Gamma draws parameterized by shape and rate (mean shape/rate). """
        _positive('shape', shape)
        _positive('rate', rate)
        return self.rng.gamma(shape, 1 / rate, check_count(n, 'n', 0))

    def __repr__(self):
        return type(self).__name__ + "(%r)" % self.rng


def as_variates(variates):
    """ Interpret a seed, Generator or Variates as a Variates object. """
    if isinstance(variates, Variates):
        return variates
    return Variates(variates)


# DENSITY EVALUATORS
def dunif(x, lo=0., hi=1.):
    return stats.uniform.pdf(x, loc=lo, scale=hi - lo)


def dnorm(x, mean=0., sd=1.):
    return stats.norm.pdf(x, loc=mean, scale=sd)


def dcauchy(x, location=0., scale=1.):
    return stats.cauchy.pdf(x, loc=location, scale=scale)


def dpois(k, lam):
    return stats.poisson.pmf(k, lam)


def dbeta(x, alpha, beta):
    return stats.beta.pdf(x, alpha, beta)


def dgamma(x, shape, rate):
    return stats.gamma.pdf(x, shape, scale=1 / rate)
