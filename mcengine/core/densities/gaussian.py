import numpy as np
from scipy.stats import multivariate_normal as multi_norm

from ..density import Distribution
from ..errors import ConfigurationError
from ..util import interpret_array


class Gaussian(Distribution):
    """ Normal distribution with diagonal covariance. """

    def __init__(self, ndim, mu=0, scale=1, variates=None):
        super().__init__(ndim, False, variates)

        self._mean = None
        self.mean = mu

        scale = np.broadcast_to(np.asanyarray(scale, dtype=float), (ndim,))
        if np.any(scale <= 0):
            raise ConfigurationError("scale must be positive, got %s." % scale)
        self.scale = np.array(scale)
        self.cov = np.diag(self.scale ** 2)

    def pdf(self, xs):
        xs = interpret_array(xs, self.ndim)
        prob = multi_norm.pdf(xs, self.mean, self.cov)
        return np.atleast_1d(prob).reshape(-1)

    def rvs(self, sample_size):
        sample = self.variates.normal(sample_size * self.ndim)
        return self.mean + self.scale * sample.reshape(sample_size, self.ndim)

    @property
    def mean(self):
        return self._mean

    @mean.setter
    def mean(self, value):
        if np.isscalar(value):
            self._mean = np.full(self.ndim, value, dtype=float)
        else:
            self._mean = np.atleast_1d(np.asanyarray(value, dtype=float))

    @property
    def variance(self):
        return self.scale ** 2

    def __repr__(self):
        return type(self).__name__ + "(ndim=%s, mu=%s, scale=%s)" % (
            self.ndim, self.mean, self.scale)
