import numpy as np

from ..density import Distribution
from ..errors import ConfigurationError
from ..util import interpret_array, check_count
from ..variates import dpois


class ZeroInflatedPoisson(Distribution):
    """ Count distribution x = r * y with y ~ Poisson(lam), r ~ Bernoulli(p).

    With probability 1 - p the count is a structural zero, otherwise it is a
    Poisson count (which may also be zero).
    """

    def __init__(self, lam, p, variates=None):
        super().__init__(1, False, variates)
        if lam <= 0:
            raise ConfigurationError("lam must be positive, got %r." % lam)
        if not 0 <= p <= 1:
            raise ConfigurationError("p must lie in [0, 1], got %r." % p)
        self.lam = lam
        self.p = p

    def pdf(self, xs):
        """ Probability mass of the counts xs. """
        xs = interpret_array(xs, 1)[:, 0]
        pmf = self.p * dpois(xs, self.lam)
        return np.where(xs == 0, 1 - self.p + pmf, pmf)

    def simulate(self, count):
        """ Draw count observations as a one dimensional integer array. """
        count = check_count(count, 'count', 0)
        counts = self.variates.poisson(count, self.lam)
        gates = self.variates.bernoulli(count, self.p)
        return gates * counts

    def rvs(self, sample_size):
        return self.simulate(sample_size)[:, np.newaxis].astype(float)

    @property
    def mean(self):
        return self.p * self.lam

    @property
    def variance(self):
        return self.p * self.lam * (1 + (1 - self.p) * self.lam)

    def __repr__(self):
        return type(self).__name__ + "(lam=%s, p=%s)" % (self.lam, self.p)
