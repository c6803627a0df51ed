import numpy as np

from ..density import Distribution
from ..errors import ComputationError, DomainError
from ..util import evaluate, interpret_array, check_count
from .integration import IntegrationSample


class ImportanceMC(object):

    def __init__(self, dist, name="MC Importance"):
        """ Importance sampling Monte Carlo integration.

        Importance sampling replaces the uniform sample distribution of plain
        Monte Carlo with a custom pdf. The terms averaged are the weights
        fn(x) / pdf(x) at points x drawn from dist.

        The support of dist must contain every point where fn is non-zero.
        This is not (and cannot be) checked; if it is violated, the estimate
        is silently biased. Inspect max_weight_share of the result and plot
        the weights to spot proposals that are too narrow.

        Example:
            >>> from mcengine.core.variates import Variates
            >>> var = Variates(0)
            >>> dist = Distribution.make(
            ...     lambda x: 2*x, ndim=1, rvs=lambda n: var.rand(n) ** .5)
            >>> mc_imp = ImportanceMC(dist)
            >>> sample = mc_imp(lambda x: x, 1000)
            >>> sample.integral == 0.5 and sample.integral_err == 0  # fn/pdf = 1/2
            True

        :param dist: Distribution to use for sampling, exposing pdf and rvs.
        :param name: Name of the method that can be used as label in
            plotting routines (can be changed to name parameters).
        """
        self.method_name = name

        self.dist = dist
        self.ndim = dist.ndim

    def __call__(self, fn, eval_count):
        """ Approximate the integral of fn.

        :param fn: Integrand, taking ndim numpy arrays and returning a number.
        :param eval_count: Total number of function evaluations.
        :return: IntegrationSample.
        """
        eval_count = check_count(eval_count, 'eval_count', 0)
        if eval_count == 0:
            raise DomainError("Cannot estimate an integral from 0 samples.")

        xs = interpret_array(self.dist.rvs(eval_count), self.ndim)
        ys = evaluate(fn, xs)
        weights = np.asanyarray(self.dist.pdf(xs), dtype=float).reshape(-1)
        invalid = np.logical_not(np.isfinite(weights) & (weights > 0))
        if np.any(invalid):
            bad = xs[np.argmax(invalid)]
            raise ComputationError(
                "Sampling density must be positive at its own samples, "
                "got %s at x=%s." % (weights[np.argmax(invalid)], bad), x=bad)

        return IntegrationSample.from_values(
            ys / weights, data=xs, function_values=ys, weights=weights,
            target=fn)

    def __repr__(self):
        return type(self).__name__ + "(%r)" % (self.dist,)


def estimate_integral_importance(fn, g_density, g_sampler, eval_count):
    """ Importance sampling estimate of the integral of a 1D function.

    :param fn: Integrand, or an unnormalized target density such as a
        Posterior (then the result is its normalization constant).
    :param g_density: Density of the proposal, a function of x.
    :param g_sampler: Function taking a count n and returning n draws
        from g_density.
    :param eval_count: Number of draws.
    :return: IntegrationSample.
    """
    dist = Distribution.make(
        pdf=lambda xs: evaluate(g_density, interpret_array(xs, 1)),
        ndim=1, rvs=g_sampler)
    return ImportanceMC(dist)(fn, eval_count)
