"""Textbook beta formulas for Nonlinear Conjugate Gradient.

Notation follows Nocedal & Wright, *Numerical Optimization* (2006), chapter
5.2: ``g0 = grad f(x_k)``, ``g1 = grad f(x_{k+1})``, ``p0 = p_k``.

Example
-------
>>> import numpy as np
>>> from nlcgbeta.beta import HestenesStiefel, PolakRibiere
>>> g0, g1, p0 = np.array([1.0, 0.0]), np.array([0.0, 1.0]), np.array([1.0, 0.0])
>>> float(PolakRibiere().update(g0, g1, p0))
1.0
>>> float(HestenesStiefel().update(g0, g1, p0))
-1.0
"""

from __future__ import annotations

from dataclasses import dataclass
from typing import Any

from nlcgbeta.math import divide, dot, fmax, norm, sub, zero_like

from .core import BetaUpdate, register_beta_update


@register_beta_update
@dataclass(frozen=True)
class FletcherReeves(BetaUpdate):
    """
    Fletcher–Reeves: ``beta = (g1 . g1) / (g0 . g0)``, eq. (5.41a).

    Only needs a dot product on gradients. Globally convergent under a strong
    Wolfe line search with ``c2 < 1/2``, but prone to tiny steps once a poor
    direction has been generated.
    """

    name = "FletcherReeves"
    aliases = ("fr", "fletcher-reeves")
    requires = ("dot",)

    def compute(self, grad_prev: Any, grad_new: Any, dir_prev: Any) -> Any:
        return divide(dot(grad_new, grad_new), dot(grad_prev, grad_prev))


@register_beta_update
@dataclass(frozen=True)
class PolakRibiere(BetaUpdate):
    """Polak–Ribière: ``beta = g1 . (g1 - g0) / ||g0||^2``, eq. (5.44)."""

    name = "PolakRibiere"
    aliases = ("pr", "polak-ribiere")
    requires = ("dot", "sub", "norm")

    def compute(self, grad_prev: Any, grad_new: Any, dir_prev: Any) -> Any:
        return _polak_ribiere(grad_prev, grad_new)


@register_beta_update
@dataclass(frozen=True)
class PolakRibierePlus(BetaUpdate):
    """
    Polak–Ribière-Plus: ``beta = max(0, beta_PR)``, eq. (5.45).

    A negative Polak–Ribière value is clamped to zero, which turns the next
    step into a steepest-descent restart. A NaN value is clamped to zero too.
    """

    name = "PolakRibierePlus"
    aliases = ("pr+", "prplus", "polak-ribiere-plus")
    requires = ("dot", "sub", "norm")

    def compute(self, grad_prev: Any, grad_new: Any, dir_prev: Any) -> Any:
        beta = _polak_ribiere(grad_prev, grad_new)
        return fmax(zero_like(beta), beta)


@register_beta_update
@dataclass(frozen=True)
class HestenesStiefel(BetaUpdate):
    """
    Hestenes–Stiefel: ``beta = g1 . y / (y . p0)`` with ``y = g1 - g0``,
    eq. (5.46).

    The denominator vanishes when ``p0`` is orthogonal to the gradient change.
    """

    name = "HestenesStiefel"
    aliases = ("hs", "hestenes-stiefel")
    requires = ("dot", "sub")

    def compute(self, grad_prev: Any, grad_new: Any, dir_prev: Any) -> Any:
        y = sub(grad_new, grad_prev)
        return divide(dot(grad_new, y), dot(y, dir_prev))


def _polak_ribiere(grad_prev: Any, grad_new: Any) -> Any:
    grad_prev_norm = norm(grad_prev)
    return divide(dot(grad_new, sub(grad_new, grad_prev)), grad_prev_norm**2)


__all__ = [
    "FletcherReeves",
    "HestenesStiefel",
    "PolakRibiere",
    "PolakRibierePlus",
]
