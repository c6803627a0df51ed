from .gaussian import Gaussian
from .cauchy import Cauchy
from .uniform import Uniform
from .posterior import Posterior
from .zero_inflated import ZeroInflatedPoisson

__all__ = ['Gaussian', 'Cauchy', 'Uniform', 'Posterior',
           'ZeroInflatedPoisson']
