import numpy as np

from ..density import Distribution
from ..util import interpret_array, check_bounds


class Uniform(Distribution):

    def __init__(self, ndim, sample_range=(0, 1), variates=None):
        super().__init__(ndim, True, variates)
        self.low, self.high = check_bounds(*sample_range, ndim=ndim)
        self.vol = np.prod(self.high - self.low)

    def pdf(self, xs):
        xs = interpret_array(xs, self.ndim)
        density = (np.all(xs >= self.low, axis=1) *
                   np.all(xs <= self.high, axis=1) / self.vol)
        return density

    def rvs(self, sample_size):
        sample = self.variates.uniform(sample_size * self.ndim)
        return self.low + (self.high - self.low) * sample.reshape(
            sample_size, self.ndim)

    def __repr__(self):
        return type(self).__name__ + "(ndim=%s, sample_range=%s)" % (
            self.ndim, (self.low, self.high))
