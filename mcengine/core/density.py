import numpy as np

from .errors import ConfigurationError
from .util import interpret_array
from .variates import as_variates


class _AnyDensity(object):
    # make Proposal and Density have the same __init__
    def __init__(self, ndim, is_symmetric=False, variates=None):
        self.ndim = ndim
        self.is_symmetric = is_symmetric
        self.variates = as_variates(variates)


class Proposal(_AnyDensity):
    """ Generate candidate states given the current state of a chain. """

    def proposal(self, state):
        raise NotImplementedError()

    def proposal_pdf(self, state, candidate):
        return None  # may return None if is_symmetric == True

    @classmethod
    def make(cls, proposal, ndim=None, proposal_pdf=None, symmetric=None):
        if isinstance(proposal, Proposal):
            return proposal
        if ndim is None:
            raise ConfigurationError(
                "If proposal is a function, ndim must be given.")
        if symmetric is None:
            symmetric = proposal_pdf is None
        obj = cls(ndim, symmetric)
        obj.proposal = proposal
        if proposal_pdf is not None:
            obj.proposal_pdf = proposal_pdf
        return obj


class Density(_AnyDensity):
    """ A non-negative function, possibly known only up to a constant.

    Subclasses implement pdf, accepting an array of shape (N, ndim) (or
    anything interpret_array understands) and returning N values.
    Calling the object directly takes one argument per dimension.
    """

    def __call__(self, *xs):
        if np.isscalar(xs[0]):
            # xs are numbers
            return self.pdf(np.stack(xs, axis=0))
        else:
            shape = np.asanyarray(xs[0]).shape
            xs = [np.asanyarray(x).flatten() for x in xs]
            return self.pdf(np.stack(xs, axis=1)).reshape(shape)

    def log_pdf(self, xs):
        """ Natural log of pdf, -inf where the density vanishes. """
        with np.errstate(divide='ignore'):
            return np.log(self.pdf(xs))

    def pdf(self, xs):
        raise NotImplementedError()

    @classmethod
    def make(cls, pdf=None, ndim=None, pdf_vect=None, is_symmetric=False):
        if isinstance(pdf, Density):
            obj = pdf
        else:
            if ndim is None:
                raise ConfigurationError("If first argument is not a Density, "
                                         "ndim must be specified.")
            obj = cls(ndim, is_symmetric)

            if pdf is not None:
                obj.pdf = lambda xs: np.atleast_1d(pdf(xs)).flatten()
            elif pdf_vect is not None:
                obj.pdf = lambda xs: np.atleast_1d(pdf_vect(
                    *interpret_array(xs, ndim).transpose())).flatten()

        return obj


class Distribution(Density, Proposal):
    """ A normalized density that can also generate samples (rvs). """

    def pdf(self, xs):
        raise NotImplementedError()

    def rvs(self, sample_count):
        raise NotImplementedError()

    def proposal(self, state=None):
        return self.rvs(1)[0]

    def proposal_pdf(self, state, candidate):
        return float(self.pdf(candidate)[0])

    @classmethod
    def make(cls, pdf=None, ndim=None, rvs=None, **kwargs):
        if rvs is None:
            raise ConfigurationError("A Distribution needs a sampling "
                                     "function rvs.")
        obj = super().make(pdf=pdf, ndim=ndim, **kwargs)

        obj.rvs = lambda count: interpret_array(rvs(count), ndim)
        return obj
