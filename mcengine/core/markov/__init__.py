from .base import MarkovUpdate, MarkovSample
from .metropolis import (MetropolisUpdate, DefaultMetropolis,
                         acceptance_probability, log_acceptance_probability)
from .gibbs import ZeroInflatedPoissonGibbs

__all__ = ['MarkovUpdate', 'MarkovSample', 'MetropolisUpdate',
           'DefaultMetropolis', 'acceptance_probability',
           'log_acceptance_probability', 'ZeroInflatedPoissonGibbs']
