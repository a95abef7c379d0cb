"""Vector algebra capabilities used by the beta-update strategies.

Example
-------
>>> import numpy as np
>>> from nlcgbeta.math import dot, norm, sub
>>> float(dot(np.array([1.0, 2.0]), np.array([3.0, 4.0])))
11.0
>>> sub([1.0, 2.0], [1.0, 1.0])
[0.0, 1.0]
>>> float(norm(np.array([3.0, 4.0])))
5.0
"""

from .core import (
    CapabilityError,
    DimensionMismatchError,
    NlcgBetaError,
    SupportsDot,
    SupportsNorm,
    SupportsSub,
)
from .ops import dot, norm, sub
from .scalar import divide, fmax, is_finite, zero_like

__all__ = [
    "CapabilityError",
    "DimensionMismatchError",
    "NlcgBetaError",
    "SupportsDot",
    "SupportsNorm",
    "SupportsSub",
    "divide",
    "dot",
    "fmax",
    "is_finite",
    "norm",
    "sub",
    "zero_like",
]
