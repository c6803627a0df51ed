import numpy as np

from ..errors import ComputationError, ConfigurationError

__all__ = ['interpret_array', 'evaluate', 'check_count', 'check_bounds']


def interpret_array(array, ndim=None):
    """ Interpret array as a list of points of dimension ndim.

    :return: Array of shape (N, ndim).
    """
    array = np.atleast_1d(np.asanyarray(array, dtype=float))
    if array.ndim == 2:
        if ndim and ndim != array.shape[1]:
            raise ConfigurationError(
                "Unexpected dimension of entries in array.")
        return array

    if ndim is None:
        # can't distinguish 1D vs ND cases. Treat as 1D case
        return array[:, np.newaxis]

    if array.ndim == 1:
        if ndim == 1:
            # many 1D entries
            return array[:, np.newaxis]
        elif array.size == ndim:
            # one ndim-dim entry
            return array[np.newaxis, :]

    raise ConfigurationError("Bad array shape.")


def _evaluate_pointwise(fn, xs):
    values = np.empty(xs.shape[0])
    for i, x in enumerate(xs):
        try:
            values[i] = fn(*x)
        except Exception as err:
            raise ComputationError(
                "Function raised at x=%s: %r" % (_point(x), err),
                x=_point(x)) from err
    return values


def _point(x):
    return x[0] if x.size == 1 else x


def evaluate(fn, xs):
    """ Evaluate an integrand or weight function on a list of points.

    The function is first called with ndim numpy arrays (one per dimension).
    If that fails, for example because fn only handles floats, it is
    called point by point, which also identifies the offending point if
    the function itself raises.

    :param fn: Callable taking ndim arguments.
    :param xs: Array of shape (N, ndim).
    :return: Array of N finite function values.
    """
    if not callable(fn):
        raise ComputationError("Function %r is not callable." % (fn,))

    try:
        with np.errstate(all='ignore'):
            values = np.asanyarray(fn(*xs.transpose()), dtype=float)
        if values.ndim == 0:
            values = np.full(xs.shape[0], float(values))
        values = values.reshape(-1)
        if values.size != xs.shape[0]:
            raise ValueError("wrong number of function values")
    except Exception:
        with np.errstate(all='ignore'):
            values = _evaluate_pointwise(fn, xs)

    finite = np.isfinite(values)
    if not np.all(finite):
        bad = xs[np.argmin(finite)]
        raise ComputationError(
            "Function returned non-finite value at x=%s." % (_point(bad),),
            x=_point(bad))
    return values


def check_count(count, name='sample_size', minimum=1):
    """ Validate a number of samples or iterations. """
    if int(count) != count or count < minimum:
        raise ConfigurationError(
            "%s must be an integer >= %d, got %r." % (name, minimum, count))
    return int(count)


def check_bounds(low, high, ndim=None):
    """ Validate (low, high) bounds, scalars or arrays of length ndim.

    :return: Tuple of two float arrays.
    """
    low = np.atleast_1d(np.asanyarray(low, dtype=float))
    high = np.atleast_1d(np.asanyarray(high, dtype=float))
    if ndim is not None:
        low = np.broadcast_to(low, (ndim,)) if low.size == 1 else low
        high = np.broadcast_to(high, (ndim,)) if high.size == 1 else high
        if low.shape != (ndim,) or high.shape != (ndim,):
            raise ConfigurationError('bounds must be floats or arrays of '
                                     'length ndim.')
    if np.any(np.isnan(low)) or np.any(np.isnan(high)) or np.any(low >= high):
        raise ConfigurationError(
            "Malformed bounds: need low < high, got %s, %s." % (low, high))
    return low, high
