import numpy as np

from ..density import Density
from ..errors import ComputationError
from ..util import interpret_array


class Posterior(Density):
    """ Unnormalized posterior: prior times the joint likelihood of the data.

    The value at a parameter theta is

        prior(theta) * prod_i likelihood(data_i, theta)

    The product is accumulated in log space. For large data sets pdf
    underflows to zero while log_pdf stays finite, so samplers work
    with log_pdf.

    Example:
        >>> from mcengine.core.variates import dgamma, dpois
        >>> post = Posterior(lambda lam: dgamma(lam, 2, 1),
        ...                  lambda x, lam: dpois(x, lam), data=[1, 3, 2])
        >>> post.pdf(0)
        array([0.])

    :param prior: Function of theta returning the prior density.
    :param likelihood: Function (data, theta) returning the density of every
        observation (an array of the same length as data) given theta.
    :param data: Observations, any array like.
    :param ndim: Dimension of the parameter theta. For ndim == 1 the prior
        and likelihood receive theta as float, otherwise as array.
    """

    def __init__(self, prior, likelihood, data, ndim=1):
        super().__init__(ndim, False)
        self.prior = prior
        self.likelihood = likelihood
        self.data = np.asanyarray(data)

    def _log_value(self, theta):
        prior = float(np.squeeze(self.prior(theta)))
        if prior == 0:
            return -np.inf
        lik = np.atleast_1d(np.asanyarray(self.likelihood(self.data, theta),
                                          dtype=float))
        if prior < 0 or np.any(lik < 0) or np.any(np.isnan(lik)):
            raise ComputationError(
                "Prior and likelihood must be non-negative at theta=%s."
                % (theta,), x=theta)
        if np.any(lik == 0):
            return -np.inf
        return np.log(prior) + np.sum(np.log(lik))

    def _thetas(self, xs):
        xs = interpret_array(xs, self.ndim)
        if self.ndim == 1:
            return xs[:, 0]
        return xs

    def log_pdf(self, xs):
        return np.array([self._log_value(theta) for theta in self._thetas(xs)])

    def pdf(self, xs):
        return np.exp(self.log_pdf(xs))

    def __repr__(self):
        return type(self).__name__ + "(ndim=%s, observations=%d)" % (
            self.ndim, self.data.size)
