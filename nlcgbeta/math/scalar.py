"""Scalar helpers with IEEE-754 semantics for NumPy and torch scalars."""

from __future__ import annotations

from typing import Any

import numpy as np
import torch


def _as_tensor_like(x: Any, ref: torch.Tensor) -> torch.Tensor:
    if isinstance(x, torch.Tensor):
        return x
    return torch.as_tensor(x, dtype=ref.dtype, device=ref.device)


def divide(num: Any, den: Any) -> Any:
    """Divide two scalars without raising on a zero denominator.

    ``x / 0`` gives ``+inf``/``-inf`` and ``0 / 0`` gives ``nan``. Plain Python
    numbers are promoted to NumPy scalars so that ``ZeroDivisionError`` is
    never raised, and NumPy's divide-by-zero ``RuntimeWarning`` is suppressed.
    """
    if isinstance(num, torch.Tensor) or isinstance(den, torch.Tensor):
        ref = num if isinstance(num, torch.Tensor) else den
        return _as_tensor_like(num, ref) / _as_tensor_like(den, ref)
    with np.errstate(divide="ignore", invalid="ignore"):
        return np.true_divide(num, den)


def zero_like(x: Any) -> Any:
    """Return zero in the scalar type of ``x``."""
    if isinstance(x, torch.Tensor):
        return torch.zeros((), dtype=x.dtype, device=x.device)
    return np.asarray(x).dtype.type(0)


def fmax(a: Any, b: Any) -> Any:
    """Elementwise maximum that prefers the number when the other is NaN."""
    if isinstance(a, torch.Tensor) or isinstance(b, torch.Tensor):
        ref = a if isinstance(a, torch.Tensor) else b
        return torch.fmax(_as_tensor_like(a, ref), _as_tensor_like(b, ref))
    return np.fmax(a, b)


def is_finite(x: Any) -> bool:
    if isinstance(x, torch.Tensor):
        return bool(torch.isfinite(x).all())
    return bool(np.all(np.isfinite(x)))


__all__ = ["divide", "fmax", "is_finite", "zero_like"]
