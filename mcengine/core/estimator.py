import numpy as np

from .errors import ComputationError, DomainError

__all__ = ['RunningEstimator']


class RunningEstimator(object):
    """ Accumulate a stream of values into a mean and its standard error.

    The standard error sqrt((Q/n - mean^2) / n), with Q the sum of squares,
    is the natural estimate of the standard deviation of the mean if the
    values are n i.i.d. draws with finite second moment. If the second
    moment is infinite (for example importance weights from a proposal with
    too light tails), the estimate is unreliable and nothing here detects
    it.

    The accumulation keeps the running mean and the sum of squared
    deviations from it, which is the same quantity but does not lose
    precision to cancellation (so the variance is never negative).

    Example:
        >>> est = RunningEstimator()
        >>> for value in [1., 2., 3.]:
        ...     est.observe(value)
        >>> est.estimate()
        2.0
    """

    def __init__(self):
        self.count = 0
        self._mean = 0.
        self._m2 = 0.  # sum of squared deviations from the mean

    def observe(self, value):
        """ Add a single value in O(1). """
        value = float(value)
        if not np.isfinite(value):
            raise ComputationError("Cannot observe non-finite value %r."
                                   % value, x=value)
        self.count += 1
        delta = value - self._mean
        self._mean += delta / self.count
        self._m2 += delta * (value - self._mean)

    def observe_all(self, values):
        """ Add a batch of values at once. """
        values = np.asanyarray(values, dtype=float).reshape(-1)
        if values.size == 0:
            return
        if not np.all(np.isfinite(values)):
            bad = values[np.argmin(np.isfinite(values))]
            raise ComputationError("Cannot observe non-finite value %r."
                                   % bad, x=bad)
        mean = np.mean(values)
        self._combine(values.size, mean, np.sum((values - mean) ** 2))

    def merge(self, other):
        """ Combine with the values observed by another (independent) run.

        The other estimator is left unchanged.
        """
        if other.count:
            self._combine(other.count, other._mean, other._m2)

    def _combine(self, count, mean, m2):
        total = self.count + count
        delta = mean - self._mean
        self._m2 += m2 + delta ** 2 * self.count * count / total
        self._mean += delta * count / total
        self.count = total

    # STATE
    @property
    def total(self):
        """ Sum S of all observed values. """
        return self._mean * self.count

    @property
    def sum_squares(self):
        """ Sum Q of all squared observed values. """
        return self._m2 + self.count * self._mean ** 2

    # RESULTS
    def _require_values(self, what):
        if self.count == 0:
            raise DomainError("%s is undefined without observations." % what)

    def estimate(self):
        self._require_values('The estimate')
        return self._mean

    def variance(self):
        """ Second central moment Q/n - (S/n)^2 of the observed values. """
        self._require_values('The variance')
        return self._m2 / self.count

    def standard_error(self):
        self._require_values('The standard error')
        return np.sqrt(self.variance() / self.count)

    def confidence_interval(self, z=1.96):
        """ Normal approximation interval [estimate -/+ z * standard error].

        :param z: Quantile of the standard normal, 1.96 gives 95%.
        :return: Tuple (lower, upper).
        """
        est = self.estimate()
        err = self.standard_error()
        return est - z * err, est + z * err

    def __repr__(self):
        if self.count == 0:
            return type(self).__name__ + "(count=0)"
        return type(self).__name__ + "(count=%d, estimate=%g, err=%g)" % (
            self.count, self.estimate(), self.standard_error())
