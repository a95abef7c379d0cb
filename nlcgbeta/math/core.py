"""Capability protocols and errors shared by the vector algebra helpers.

A vector type takes part in beta computation by supporting some subset of
three capabilities: ``dot``, ``sub`` and ``norm``. NumPy arrays, torch
tensors and plain Python sequences of reals are handled natively. Any other
type opts in by implementing the matching protocol methods below; it only
needs the capabilities required by the strategy it is used with.
"""

from __future__ import annotations

from typing import Any, Protocol, Sequence, runtime_checkable

import numpy as np
import torch


class NlcgBetaError(Exception):
    """Base class for errors raised by nlcgbeta."""


class DimensionMismatchError(NlcgBetaError, ValueError):
    """Raised when two vector operands do not have the same shape."""


class CapabilityError(NlcgBetaError, TypeError):
    """Raised when an operand does not provide a required capability."""


@runtime_checkable
class SupportsDot(Protocol):
    """Vector type providing an inner product with ``other``."""

    def dot(self, other: Any) -> Any:
        ...


@runtime_checkable
class SupportsSub(Protocol):
    """Vector type providing elementwise subtraction returning a new vector."""

    def sub(self, other: Any) -> Any:
        ...


@runtime_checkable
class SupportsNorm(Protocol):
    """Vector type providing a non-negative (Euclidean) magnitude."""

    def norm(self) -> Any:
        ...


def is_tensor(x: Any) -> bool:
    return isinstance(x, torch.Tensor)


def is_array_like(x: Any) -> bool:
    """Return True for NumPy arrays and plain lists/tuples of numbers."""
    return isinstance(x, (np.ndarray, list, tuple))


def as_array(x: np.ndarray | Sequence[float]) -> np.ndarray:
    """View ``x`` as an ndarray without copying existing arrays."""
    if isinstance(x, np.ndarray):
        return x
    return np.asarray(x, dtype=float)


def check_same_shape(a_shape: tuple, b_shape: tuple, op: str) -> None:
    """Raise DimensionMismatchError unless both shapes are identical."""
    if tuple(a_shape) != tuple(b_shape):
        raise DimensionMismatchError(
            f"{op}: operand shapes {tuple(a_shape)} and {tuple(b_shape)} differ."
        )


def require_tensors(
    a: Any, b: Any, op: str
) -> tuple[torch.Tensor, torch.Tensor]:
    """Ensure both operands are tensors once one of them is."""
    if not (is_tensor(a) and is_tensor(b)):
        raise CapabilityError(
            f"{op}: cannot mix torch.Tensor with {type(b if is_tensor(a) else a).__name__}."
        )
    check_same_shape(a.shape, b.shape, op)
    return a, b


def missing_capability(op: str, operand: Any) -> CapabilityError:
    return CapabilityError(
        f"{type(operand).__name__} does not support '{op}'. Use a NumPy array, "
        f"torch.Tensor, list/tuple, or implement a '{op}' method."
    )


__all__ = [
    "CapabilityError",
    "DimensionMismatchError",
    "NlcgBetaError",
    "SupportsDot",
    "SupportsNorm",
    "SupportsSub",
    "as_array",
    "check_same_shape",
    "is_array_like",
    "is_tensor",
    "missing_capability",
    "require_tensors",
]
