import numpy as np

from ..density import Distribution
from ..errors import ConfigurationError
from ..util import interpret_array
from ..variates import dcauchy


class Cauchy(Distribution):
    """ One dimensional Cauchy distribution.

    Its heavy tails make it a safe importance sampling proposal for
    integrands on the whole real line.
    """

    def __init__(self, location=0., scale=1., variates=None):
        super().__init__(1, False, variates)
        if scale <= 0:
            raise ConfigurationError("scale must be positive, got %r." % scale)
        self.location = location
        self.scale = scale

    def pdf(self, xs):
        xs = interpret_array(xs, 1)
        return dcauchy(xs[:, 0], self.location, self.scale)

    def rvs(self, sample_size):
        sample = self.variates.cauchy(sample_size, self.location, self.scale)
        return sample[:, np.newaxis]

    def __repr__(self):
        return type(self).__name__ + "(location=%s, scale=%s)" % (
            self.location, self.scale)
