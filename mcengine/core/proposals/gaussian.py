import numpy as np

from ..density import Proposal
from ..errors import ConfigurationError
from ..variates import dnorm


class Gaussian(Proposal):
    """ Symmetric random walk proposal Normal(state, scale^2).

    :param ndim: Dimension of the states.
    :param scale: Standard deviation, a float or an array of length ndim.
    :param variates: Variates object or seed used to draw the candidates.
    """

    def __init__(self, ndim=1, scale=1., variates=None):
        super().__init__(ndim, True, variates)
        self._scale = None
        self.scale = scale

    def proposal(self, state):
        step = self.variates.normal(self.ndim)
        return np.asanyarray(state, dtype=float) + self._scale * step

    def proposal_pdf(self, state, candidate):
        # symmetric
        return np.prod(dnorm(np.asanyarray(candidate) - state, 0, self._scale))

    @property
    def scale(self):
        return self._scale

    @scale.setter
    def scale(self, scale):
        if np.ndim(scale) == 0:
            scale = np.ones(self.ndim) * scale
        elif len(scale) != self.ndim:
            raise ConfigurationError('scale must be a float or an array of '
                                     'length ndim.')
        scale = np.array(scale, dtype=float)
        if np.any(scale <= 0):
            raise ConfigurationError("scale must be positive, got %s." % scale)
        self._scale = scale

    def __repr__(self):
        return type(self).__name__ + "(ndim=%s, scale=%s)" % (
            self.ndim, self._scale)
