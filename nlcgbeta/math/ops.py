"""Vector capabilities consumed by the beta-update strategies.

Each function accepts NumPy arrays, torch tensors, Python lists/tuples of
reals, or objects implementing the corresponding protocol from
:mod:`nlcgbeta.math.core`. Operands are never modified.
"""

from __future__ import annotations

from typing import Any

import numpy as np
import torch

from .core import (
    SupportsDot,
    SupportsNorm,
    SupportsSub,
    as_array,
    check_same_shape,
    is_array_like,
    is_tensor,
    missing_capability,
    require_tensors,
)


def dot(a: Any, b: Any) -> Any:
    """Inner product ``sum_i a_i * b_i`` over all elements.

    Parameters
    ----------
    a, b:
        Vectors of identical shape.

    Returns
    -------
    Scalar
        NumPy scalar for arrays and sequences, 0-d tensor for tensors, or
        whatever ``a.dot(b)`` returns for protocol types.

    Raises
    ------
    DimensionMismatchError
        If the operand shapes differ.
    CapabilityError
        If ``a`` does not support a dot product with ``b``.
    """
    if is_tensor(a) or is_tensor(b):
        ta, tb = require_tensors(a, b, "dot")
        # torch.dot is limited to 1-D, flatten so matrices/fields work too
        return torch.sum(ta.reshape(-1) * tb.reshape(-1))
    if is_array_like(a) and is_array_like(b):
        xa, xb = as_array(a), as_array(b)
        check_same_shape(xa.shape, xb.shape, "dot")
        return np.dot(xa.ravel(), xb.ravel())
    if isinstance(a, SupportsDot):
        return a.dot(b)
    raise missing_capability("dot", a)


def sub(a: Any, b: Any) -> Any:
    """Elementwise difference ``a - b`` as a new vector.

    Lists and tuples give back the type of ``a`` when both operands are plain
    sequences; nested sequences come back as nested lists. Broadcasting is
    never applied: shapes must match exactly.
    """
    if is_tensor(a) or is_tensor(b):
        ta, tb = require_tensors(a, b, "sub")
        return ta - tb
    if is_array_like(a) and is_array_like(b):
        xa, xb = as_array(a), as_array(b)
        check_same_shape(xa.shape, xb.shape, "sub")
        diff = xa - xb
        if isinstance(a, (list, tuple)) and isinstance(b, (list, tuple)):
            if diff.ndim == 1:
                return type(a)(diff.tolist())
            return diff.tolist()
        return diff
    if isinstance(a, SupportsSub):
        return a.sub(b)
    raise missing_capability("sub", a)


def norm(a: Any) -> Any:
    """Euclidean norm of ``a``; zero for the zero vector.

    Integer tensors are promoted to the default floating dtype first, the same
    way ``np.linalg.norm`` promotes integer arrays.
    """
    if is_tensor(a):
        if not (a.is_floating_point() or a.is_complex()):
            a = a.to(torch.get_default_dtype())
        return torch.linalg.vector_norm(a)
    if is_array_like(a):
        return np.linalg.norm(as_array(a).ravel())
    if isinstance(a, SupportsNorm):
        return a.norm()
    raise missing_capability("norm", a)


__all__ = ["dot", "norm", "sub"]
