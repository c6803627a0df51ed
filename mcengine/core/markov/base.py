import numpy as np

from ..errors import ConfigurationError
from ..sampling import Sample
from ..util import check_count


class MarkovSample(Sample):

    def __init__(self, **kwargs):
        self.accepted = 0

        super().__init__(**kwargs)

        self._sample_info.append(('accept_ratio', 'acceptance rate', '%f'))

    @property
    def accept_ratio(self):
        if not self.size:
            return None
        return self.accepted / self.size

    def burn(self, count):
        """ Discard the first count states of the chain (burn-in).

        :return: New MarkovSample with the remaining states.
        """
        count = check_count(count, 'count', 0)
        if count >= self.size:
            raise ConfigurationError(
                "Cannot discard %d of %d states." % (count, self.size))
        if count == 0:
            accepted = self.accepted
        else:
            # transitions into the kept states
            data = self.data[count - 1:]
            accepted = int(np.sum(np.any(data[1:] != data[:-1], axis=1)))
        return MarkovSample(data=self.data[count:], target=self.target,
                            accepted=accepted)


# MARKOV CHAIN
class MarkovUpdate(object):
    """ Basic update mechanism of a Markov chain.

    Subclasses implement next_state, the transition from one state to the
    next. Steps of one chain depend on each other and must run in order;
    independent chains (separate update objects with separate variates)
    can run in parallel.
    """

    def __init__(self, ndim, target=None):
        self.ndim = ndim
        self.target = target

    def init_state(self, state):
        return state  # may initialize other state attributes (such as pdf)

    def next_state(self, state, iteration):
        """ Get the next state in the Markov chain.

        :return: The next state.
        """
        raise NotImplementedError("MarkovUpdate is abstract.")

    def _initial(self, initial):
        state = np.atleast_1d(np.asanyarray(initial, dtype=float))
        if state.shape != (self.ndim,):
            raise ConfigurationError(
                'initial must have dimension ' + str(self.ndim))
        return self.init_state(state)

    def iterate(self, initial, count=None):
        """ Generate the states of the chain one at a time.

        Consumers may stop between any two states, e.g. to cancel a long
        run; the chain is the same as the one produced by sample.

        :param initial: Initial state (not yielded).
        :param count: Number of transitions, infinite if None.
        """
        state = self._initial(initial)
        iteration = 0
        while count is None or iteration < count:
            iteration += 1
            state = self.next_state(state, iteration)
            yield state

    def sample(self, sample_size, initial, log_every=5000):
        """ Generate a sample of given size.

        :param sample_size: Number of transitions, each contributing the
            resulting state to the sample.
        :param initial: Initial value of the Markov chain. Internally
            converted to numpy array. Not part of the returned chain.
        :param log_every: Print the number of generated samples. Do not log if
            value is <= 0. Log every sample for log_every=1.
        :return: MarkovSample with data of shape (sample_size, self.ndim).
        """
        sample_size = check_count(sample_size, 'sample_size')
        sample = MarkovSample()

        chain = np.empty((sample_size, self.ndim))
        previous = np.atleast_1d(np.asanyarray(initial, dtype=float))

        for i, state in enumerate(self.iterate(initial, sample_size)):
            if not np.array_equal(state, previous):
                sample.accepted += 1
            chain[i] = state
            previous = state

            if log_every > 0 and (i + 1) % log_every == 0:
                print("Generated %d samples." % (i + 1), flush=True)

        sample.data = chain
        sample.target = self.target
        return sample
