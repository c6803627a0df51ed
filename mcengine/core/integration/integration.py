import numpy as np

from ..errors import DomainError
from ..estimator import RunningEstimator
from ..sampling import Sample
from ..util import evaluate, check_bounds, check_count
from ..variates import as_variates


class IntegrationSample(Sample):

    def __init__(self, **kwargs):
        self.function_values = None

        # computed by the integration methods
        self.integral = None
        self.integral_err = None
        self.estimator = None
        self._terms = None

        super().__init__(**kwargs)

        self._sample_info.append(('integral', 'integral', '%s'))
        self._sample_info.append(('integral_err', 'error', '%s'))

    @classmethod
    def from_values(cls, values, **kwargs):
        """ Build a sample from the (weighted) function values.

        :param values: Terms whose mean is the integral estimate.
        """
        estimator = RunningEstimator()
        estimator.observe_all(values)
        sample = cls(**kwargs)
        sample.estimator = estimator
        sample.integral = estimator.estimate()
        sample.integral_err = estimator.standard_error()
        sample._terms = np.asanyarray(values)
        return sample

    def confidence_interval(self, z=1.96):
        """ Normal approximation interval, 95% for the default z. """
        return (self.integral - z * self.integral_err,
                self.integral + z * self.integral_err)

    @property
    def ci_lower(self):
        return self.confidence_interval()[0]

    @property
    def ci_upper(self):
        return self.confidence_interval()[1]

    @property
    def max_weight_share(self):
        """ Share of the largest single term in the sum of absolute terms.

        Close to one if a single (importance) weight dominates the estimate,
        a sign that the proposal has lighter tails than the integrand or
        misses part of its support. The estimate is not corrected for this.
        """
        terms = self._terms
        if terms is None:
            terms = self.function_values
        terms = np.abs(terms)
        total = np.sum(terms)
        if total == 0:
            return 0.
        return np.max(terms) / total

    def summary(self):
        lower, upper = self.confidence_interval()
        return {'estimate': self.integral,
                'standard_error': self.integral_err,
                'ci_lower': lower,
                'ci_upper': upper}


class PlainMC(object):
    """ Plain Monte Carlo integration method.

    Approximate the integral as the mean of the integrand over a randomly
    selected sample (uniform probability distribution over the box
    [low, high]^ndim), multiplied by the volume of the box.

    Example:
        >>> mc = PlainMC(sample_range=(0, 1), variates=1)
        >>> sample = mc(lambda x: x**2, 10000)
        >>> abs(sample.integral - 1/3) < 0.02
        True
    """
    def __init__(self, ndim=1, sample_range=(0, 1), variates=None,
                 name="MC Plain"):
        self.method_name = name
        self.ndim = check_count(ndim, 'ndim')
        self.low, self.high = check_bounds(*sample_range, ndim=self.ndim)
        self.volume = np.prod(self.high - self.low)
        self.variates = as_variates(variates)

    def __call__(self, fn, eval_count):
        """ Compute Monte Carlo estimate of ndim-dimensional integral of fn.

        :param fn: A function accepting self.ndim numpy arrays,
            returning an array of the same length with the function values.
            Functions that only accept floats are evaluated point by point.
        :param eval_count: Total number of function evaluations used to
            approximate the integral.
        :return: IntegrationSample where the integral_err is based on the
            sample variance of the function, computed on the same sample as
            the integral. According to the central limit theorem,
            integral_err approximates the standard deviation of the
            statistical (normal) distribution of the integral estimates.
        """
        eval_count = check_count(eval_count, 'eval_count', 0)
        if eval_count == 0:
            raise DomainError("Cannot estimate an integral from 0 samples.")

        uniform = self.variates.uniform(eval_count * self.ndim)
        xs = self.low + (self.high - self.low) * uniform.reshape(
            eval_count, self.ndim)
        values = evaluate(fn, xs)
        # divide by the sampling density 1 / volume
        return IntegrationSample.from_values(
            values * self.volume, data=xs, function_values=values)

    def __repr__(self):
        return type(self).__name__ + "(ndim=%s, sample_range=%s)" % (
            self.ndim, (self.low, self.high))


def estimate_integral(fn, a, b, eval_count, variates=None):
    """ Integral of a one dimensional function over [a, b].

    :return: IntegrationSample; summary() gives the estimate, the standard
        error and the 95% confidence interval.
    """
    return PlainMC(1, (a, b), variates)(fn, eval_count)


def convergence(method, fn, sizes):
    """ Independent integral estimates for increasing sample sizes.

    The estimates converge to the integral and the errors shrink
    like 1/sqrt(size).

    :param method: Integration method, callable (fn, eval_count).
    :param sizes: Iterable of numbers of function evaluations.
    :return: List of IntegrationSample objects, one for each size.
    """
    return [method(fn, size) for size in sizes]
