from .integration import (PlainMC, IntegrationSample, estimate_integral,
                          convergence)
from .importance import ImportanceMC, estimate_integral_importance

__all__ = ['PlainMC', 'ImportanceMC', 'IntegrationSample',
           'estimate_integral', 'estimate_integral_importance',
           'convergence']
