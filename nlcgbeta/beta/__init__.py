"""Beta-update strategies for Nonlinear Conjugate Gradient.

Example
-------
>>> import numpy as np
>>> from nlcgbeta.beta import create_beta_update
>>> strategy = create_beta_update("fletcher-reeves")
>>> float(strategy.update(np.array([1.0, 0.0]), np.array([0.0, 1.0]), np.array([1.0, 0.0])))
1.0
"""

from .core import BetaUpdate, register_beta_update
from .factory import BetaConfig, available_beta_updates, create_beta_update
from .methods import FletcherReeves, HestenesStiefel, PolakRibiere, PolakRibierePlus

__all__ = [
    "BetaConfig",
    "BetaUpdate",
    "FletcherReeves",
    "HestenesStiefel",
    "PolakRibiere",
    "PolakRibierePlus",
    "available_beta_updates",
    "create_beta_update",
    "register_beta_update",
]
