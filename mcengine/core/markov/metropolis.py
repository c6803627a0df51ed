import numpy as np

from ..density import Density, Proposal
from ..errors import (ComputationError, ConfigurationError, DomainError,
                      SimulationError)
from ..proposals import Gaussian
from ..util import check_bounds
from ..variates import as_variates
from .base import MarkovUpdate


class MetropolisState(np.ndarray):
    def __new__(cls, input_array, log_pdf=None):
        obj = np.atleast_1d(np.asanyarray(input_array, dtype=float)).view(cls)
        if log_pdf is not None:
            obj.log_pdf = log_pdf
        return obj

    def __array_finalize__(self, obj):
        if obj is None:
            return  # was called from the __new__ above
        self.log_pdf = getattr(obj, 'log_pdf', None)


def log_acceptance_probability(state_log_pdf, candidate_log_pdf,
                               correction=1.):
    """ Acceptance probability min(1, exp(candidate - state) * correction).

    Works on log densities, so targets whose values underflow (such as
    posteriors of large data sets) keep a well defined ratio.

    :param state_log_pdf: Log of the unnormalized target at the current state.
    :param candidate_log_pdf: Log of the unnormalized target at the candidate.
    :param correction: Ratio of proposal densities q(state|candidate) /
        q(candidate|state), one for symmetric proposals.
    :return: Float in [0, 1].
    """
    if state_log_pdf == -np.inf:
        raise DomainError("Acceptance ratio is undefined if the current "
                          "state has zero density.")
    with np.errstate(divide='ignore'):
        log_ratio = candidate_log_pdf - state_log_pdf + np.log(correction)
    return 1. if log_ratio >= 0 else float(np.exp(log_ratio))


def acceptance_probability(state_pdf, candidate_pdf, correction=1.):
    """ Metropolis(-Hastings) acceptance probability min(1, ratio).

    :param state_pdf: Unnormalized target density at the current state.
    :param candidate_pdf: Unnormalized target density at the candidate.
    :param correction: Ratio of proposal densities q(state|candidate) /
        q(candidate|state), one for symmetric proposals.
    :return: Float in [0, 1], exactly 1 if candidate_pdf >= state_pdf for a
        symmetric proposal.
    """
    with np.errstate(divide='ignore'):
        return log_acceptance_probability(
            np.log(state_pdf), np.log(candidate_pdf), correction)


# METROPOLIS (HASTING) UPDATE
class MetropolisUpdate(MarkovUpdate):

    def __init__(self, ndim, target, bounds=None, hasting=False,
                 variates=None):
        """ Generic abstract class to represent a single Metropolis-like update.

        Density targets are evaluated through their log_pdf, plain
        functions through their value.

        :param bounds: Tuple (low, high) of floats or arrays of length ndim.
            Candidates outside [low, high] are rejected without evaluating
            the target (the chain stays where it is for that step).
        """
        super().__init__(ndim, target=target)
        if isinstance(target, Density):
            self.pdf = target.pdf
            self.log_pdf = target.log_pdf
        else:
            self.pdf = target
            self.log_pdf = None
        if not callable(self.pdf):
            raise ComputationError("Target %r is not callable." % (target,))
        self.is_hasting = hasting
        self.variates = as_variates(variates)

        if bounds is None:
            self.low = self.high = None
        else:
            self.low, self.high = check_bounds(*bounds, ndim=ndim)

    def in_bounds(self, state):
        if self.low is None:
            return True
        return bool(np.all(state >= self.low) and np.all(state <= self.high))

    def target_log_pdf(self, state):
        """ Evaluate the log target at a single state, checking the value. """
        x = np.asarray(state)
        fn = self.pdf if self.log_pdf is None else self.log_pdf
        try:
            value = np.asanyarray(fn(x), dtype=float)
        except SimulationError:
            raise
        except Exception as err:
            raise ComputationError("Target raised at %s: %r" % (x, err),
                                   x=x) from err

        if value.size != 1:
            raise ComputationError("Target must return a single value, got "
                                   "%s." % (value,), x=x)
        value = float(value.reshape(-1)[0])
        if self.log_pdf is not None:
            if np.isnan(value) or value == np.inf:
                raise ComputationError(
                    "Log target must be below infinity, got %s at %s." % (
                        value, x), x=x)
            return value

        if not np.isfinite(value) or value < 0:
            raise ComputationError(
                "Target must be finite and non-negative, got %s at %s." % (
                    value, x), x=x)
        with np.errstate(divide='ignore'):
            return float(np.log(value))

    def accept(self, state, candidate):
        """ Default accept implementation for Metropolis/Hasting update.

        :param state: Previous state in the Markov chain.
        :param candidate: Candidate for next state.
        :return: The acceptance probability of a candidate state given the
            previous state in the Markov chain.
        """
        correction = 1.
        if self.is_hasting:
            correction = (self.proposal_pdf(candidate, state) /
                          self.proposal_pdf(state, candidate))
        return log_acceptance_probability(state.log_pdf, candidate.log_pdf,
                                          correction)

    def proposal(self, state):
        """ A proposal generator.

        Generate candidate points in the sample space.
        These are used in the update mechanism and
        accepted with a probability self.accept(candidate) that depends
        on the used algorithm.

        :param state: The previous state in the Markov chain.
        :return: A candidate state of type MetropolisState.
        """
        raise NotImplementedError("MetropolisUpdate is abstract.")

    def proposal_pdf(self, state, candidate):
        pass  # Implement for Hasting update.

    def init_state(self, state):
        if not isinstance(state, MetropolisState):
            state = MetropolisState(state)
        if not self.in_bounds(state):
            raise ConfigurationError(
                "Initial state %s is outside of the bounds." % (state,))
        if state.log_pdf is None:
            state.log_pdf = self.target_log_pdf(state)
        if state.log_pdf == -np.inf:
            raise DomainError("Initial state %s has zero density." % (state,))

        return super().init_state(state)

    def next_state(self, state, iteration):
        candidate = self.proposal(state)
        if not self.in_bounds(candidate):
            # abstain, never clamp to the boundary
            return state

        candidate.log_pdf = self.target_log_pdf(candidate)
        accept = self.accept(state, candidate)

        if accept >= 1 or self.variates.rand() < accept:
            return candidate
        return state


class DefaultMetropolis(MetropolisUpdate):

    def __init__(self, ndim, target, proposal=None, bounds=None,
                 variates=None):
        """ Use the Metropolis algorithm to generate a sample.

        Example:
            >>> pdf = lambda x: np.exp(-x**2 / 2)
            >>> met = DefaultMetropolis(1, pdf, variates=1)  # 1 dimensional
            >>> sample = met.sample(1000, 0.1, log_every=0)  # 1000 samples

        :param ndim: Dimensionality of sample space.
        :param target: Desired (unnormalized) probability distribution.
            Either a function accepting a numpy array of shape (ndim,) or
            a Density object.
        :param proposal: A Proposal object. Defaults to a Gaussian random
            walk with unit scale drawing from the same variates.
        :param bounds: Admissible range (low, high) of the states.
        :param variates: Variates object or seed. Two samplers with equally
            seeded variates (and proposals) produce identical chains.
        """
        variates = as_variates(variates)
        if proposal is None:
            proposal = Gaussian(ndim, variates=variates)
        self._proposal = Proposal.make(proposal, ndim)

        super().__init__(ndim, target, bounds=bounds,
                         hasting=not self._proposal.is_symmetric,
                         variates=variates)

    def proposal(self, state):
        return MetropolisState(self._proposal.proposal(np.asarray(state)))

    def proposal_pdf(self, state, candidate):
        return self._proposal.proposal_pdf(np.asarray(state),
                                           np.asarray(candidate))
