import math

import numpy as np
import pytest
import torch

from nlcgbeta.math import (
    CapabilityError,
    DimensionMismatchError,
    SupportsDot,
    SupportsNorm,
    SupportsSub,
    dot,
    norm,
    sub,
)


class SparseVector:
    """Dictionary-backed vector implementing all three capabilities."""

    def __init__(self, entries: dict, size: int):
        self.entries = dict(entries)
        self.size = size

    def _check(self, other: "SparseVector") -> None:
        if other.size != self.size:
            raise DimensionMismatchError("sparse sizes differ")

    def dot(self, other: "SparseVector") -> float:
        self._check(other)
        return float(sum(v * other.entries.get(i, 0.0) for i, v in self.entries.items()))

    def sub(self, other: "SparseVector") -> "SparseVector":
        self._check(other)
        keys = set(self.entries) | set(other.entries)
        return SparseVector(
            {k: self.entries.get(k, 0.0) - other.entries.get(k, 0.0) for k in keys},
            self.size,
        )

    def norm(self) -> float:
        return math.sqrt(sum(v * v for v in self.entries.values()))


def test_dot_numpy_vectors():
    a = np.array([1.0, 2.0, 3.0])
    b = np.array([4.0, -5.0, 6.0])
    assert dot(a, b) == pytest.approx(12.0)


def test_dot_flattens_matrices():
    a = np.arange(4.0).reshape(2, 2)
    b = np.ones((2, 2))
    assert dot(a, b) == pytest.approx(6.0)


def test_dot_lists_and_mixed_with_numpy():
    assert dot([1.0, 2.0], [3.0, 4.0]) == pytest.approx(11.0)
    assert dot([1.0, 2.0], np.array([3.0, 4.0])) == pytest.approx(11.0)


def test_dot_torch_returns_zero_dim_tensor():
    a = torch.tensor([1.0, 2.0], dtype=torch.float64)
    b = torch.tensor([3.0, 4.0], dtype=torch.float64)
    result = dot(a, b)
    assert isinstance(result, torch.Tensor)
    assert result.dim() == 0
    assert result.dtype == torch.float64
    assert result.item() == pytest.approx(11.0)


def test_dimension_mismatch_is_reported():
    with pytest.raises(DimensionMismatchError):
        dot(np.ones(2), np.ones(3))
    with pytest.raises(DimensionMismatchError):
        dot([1.0], [1.0, 2.0])
    with pytest.raises(DimensionMismatchError):
        dot(torch.ones(2), torch.ones(3))


def test_sub_does_not_broadcast():
    with pytest.raises(DimensionMismatchError):
        sub(np.ones((2, 1)), np.ones(2))
    with pytest.raises(DimensionMismatchError):
        sub(torch.ones(3), torch.ones(1))


def test_dimension_mismatch_is_value_error():
    with pytest.raises(ValueError):
        sub(np.ones(2), np.ones(4))


def test_sub_keeps_representation():
    assert sub([3.0, 1.0], [1.0, 1.0]) == [2.0, 0.0]
    assert sub((3.0, 1.0), (1.0, 1.0)) == (2.0, 0.0)
    assert isinstance(sub([3.0, 1.0], np.array([1.0, 1.0])), np.ndarray)
    diff = sub(torch.tensor([3.0, 1.0]), torch.tensor([1.0, 1.0]))
    assert torch.equal(diff, torch.tensor([2.0, 0.0]))


def test_operations_do_not_mutate_inputs():
    a = np.array([1.0, -2.0, 3.0])
    b = np.array([0.5, 0.5, 0.5])
    a_copy, b_copy = a.copy(), b.copy()
    dot(a, b)
    diff = sub(a, b)
    norm(a)
    assert np.array_equal(a, a_copy)
    assert np.array_equal(b, b_copy)
    assert diff is not a


def test_norm_values():
    assert norm(np.array([3.0, 4.0])) == pytest.approx(5.0)
    assert norm([0.0, 0.0, 0.0]) == 0.0
    assert norm(torch.zeros(4)).item() == 0.0
    assert norm(torch.tensor([[3.0, 0.0], [0.0, 4.0]])).item() == pytest.approx(5.0)


def test_norm_is_finite_for_finite_input(rng):
    x = rng.normal(size=10) * 1e3
    value = norm(x)
    assert np.isfinite(value)
    assert value >= 0


def test_protocol_types_are_dispatched():
    a = SparseVector({0: 1.0, 3: 2.0}, 5)
    b = SparseVector({3: 4.0}, 5)
    assert isinstance(a, SupportsDot)
    assert isinstance(a, SupportsSub)
    assert isinstance(a, SupportsNorm)
    assert dot(a, b) == pytest.approx(8.0)
    assert sub(a, b).entries == {0: 1.0, 3: -2.0}
    assert norm(a) == pytest.approx(math.sqrt(5.0))


def test_missing_capability_raises():
    with pytest.raises(CapabilityError):
        dot(object(), object())
    with pytest.raises(CapabilityError):
        sub({"a": 1}, {"a": 2})
    with pytest.raises(TypeError):
        norm(3.0)


def test_mixing_torch_and_numpy_is_rejected():
    with pytest.raises(CapabilityError):
        dot(torch.ones(2), np.ones(2))
    with pytest.raises(CapabilityError):
        sub(np.ones(2), torch.ones(2))


def test_sub_nested_lists_keep_nesting():
    diff = sub([[1.0, 0.0], [0.0, 2.0]], [[0.0, 1.0], [0.0, 0.0]])
    assert diff == [[1.0, -1.0], [0.0, 2.0]]
    assert sub((3, 1), (1, 1)) == (2.0, 0.0)


def test_norm_integer_tensor_is_promoted():
    value = norm(torch.tensor([3, 4]))
    assert value.dtype == torch.get_default_dtype()
    assert value.item() == pytest.approx(5.0)
    assert norm(np.array([3, 4])) == pytest.approx(5.0)
