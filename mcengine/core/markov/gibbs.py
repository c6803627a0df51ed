import numpy as np

from ..errors import ConfigurationError
from ..variates import as_variates
from .base import MarkovUpdate


class ZeroInflatedPoissonGibbs(MarkovUpdate):
    """ Gibbs sampler for the zero-inflated Poisson model.

    Each observation is x_i = r_i * y_i with y_i ~ Poisson(lam) and the gate
    r_i ~ Bernoulli(p). The priors are lam ~ Gamma(a, b) (shape, rate) and
    p ~ Uniform(0, 1). The state of the chain is the vector [lam, p]; the
    gates r are redrawn in every sweep and not part of the state.

    One sweep draws from the full conditionals in the fixed order

        r_i | lam, p, x   = 1 if x_i > 0, otherwise
                            Bernoulli(p e^-lam / (p e^-lam + 1 - p))
        lam | p, r, x     ~ Gamma(a + sum(x), b + sum(r))
        p | lam, r, x     ~ Beta(1 + sum(r), n - sum(r) + 1)

    each draw using the values just drawn before it.

    Example:
        >>> from mcengine.core.densities import ZeroInflatedPoisson
        >>> data = ZeroInflatedPoisson(2, .3, variates=1).simulate(1000)
        >>> gibbs = ZeroInflatedPoissonGibbs(data, a=1, b=1, variates=2)
        >>> sample = gibbs.sample(500, [.5, .5], log_every=0)
        >>> lam, p = sample.burn(100).mean

    :param data: Observed counts (non-negative integers), may be empty.
    :param a: Shape of the gamma prior of lam, must be positive.
    :param b: Rate of the gamma prior of lam, must be positive.
    :param variates: Variates object or seed.
    """

    def __init__(self, data, a=1., b=1., variates=None):
        super().__init__(2)
        if a <= 0 or b <= 0:
            raise ConfigurationError(
                "Gamma prior needs a > 0 and b > 0, got a=%r, b=%r." % (a, b))
        data = np.asanyarray(data).reshape(-1)
        if data.size and (np.any(data < 0) or np.any(data != np.round(data))):
            raise ConfigurationError("data must be non-negative counts.")

        self.a = a
        self.b = b
        self.data = data.astype(int)
        self.variates = as_variates(variates)

        self.count = self.data.size
        self.data_sum = int(np.sum(self.data))
        self.zeros = self.data == 0

        # gates of the most recent sweep, for inspection only
        self.last_indicators = None

    def init_state(self, state):
        lam, p = state
        if lam <= 0 or not 0 <= p <= 1:
            raise ConfigurationError(
                "Initial state needs lam > 0 and 0 <= p <= 1, got %s." % state)
        return state

    @staticmethod
    def indicator_probability(lam, p):
        """ Probability of an open gate (r = 1) for an observed zero. """
        weight = p * np.exp(-lam)
        norm = weight + (1 - p)
        if norm == 0:
            # p == 1 and e^-lam underflows, all gates are open
            return 1.
        return weight / norm

    def draw_indicators(self, lam, p):
        prob = self.indicator_probability(lam, p)
        return self.variates.bernoulli(
            self.count, np.where(self.zeros, prob, 1.))

    def draw_lam(self, indicator_sum):
        return self.variates.gamma(
            1, self.a + self.data_sum, self.b + indicator_sum)[0]

    def draw_p(self, indicator_sum):
        return self.variates.beta(
            1, 1 + indicator_sum, self.count - indicator_sum + 1)[0]

    def next_state(self, state, iteration):
        lam, p = state
        indicators = self.draw_indicators(lam, p)
        indicator_sum = int(np.sum(indicators))
        lam = self.draw_lam(indicator_sum)
        p = self.draw_p(indicator_sum)

        self.last_indicators = indicators
        return np.array([lam, p])

    def __repr__(self):
        return type(self).__name__ + "(observations=%d, a=%s, b=%s)" % (
            self.count, self.a, self.b)
