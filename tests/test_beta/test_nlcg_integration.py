"""Drive each strategy from a minimal NLCG loop with exact line search."""

import numpy as np
import pytest
import torch

from nlcgbeta.beta import create_beta_update


def run_nlcg(strategy, A, b, x0, maxiter=50, tol=1e-10):
    """Minimize 0.5 x^T A x - b^T x, restarting on non-finite beta."""
    x = x0.copy()
    grad = A @ x - b
    direction = -grad
    restarts = 0
    for nit in range(maxiter):
        if np.linalg.norm(grad) <= tol:
            return x, nit, restarts
        alpha = -(grad @ direction) / (direction @ (A @ direction))
        x = x + alpha * direction
        grad_new = A @ x - b
        beta = strategy.update(grad, grad_new, direction)
        if not np.isfinite(beta):
            restarts += 1
            direction = -grad_new
        else:
            direction = -grad_new + beta * direction
        grad = grad_new
    return x, maxiter, restarts


@pytest.fixture
def quadratic(rng):
    M = rng.normal(size=(5, 5))
    A = M @ M.T + 5 * np.eye(5)
    b = rng.normal(size=5)
    return A, b


@pytest.mark.parametrize("name", ["fr", "pr", "pr+", "hs"])
def test_converges_on_convex_quadratic(name, quadratic):
    A, b = quadratic
    x, nit, _ = run_nlcg(create_beta_update(name), A, b, np.zeros(5))
    assert np.allclose(x, np.linalg.solve(A, b), atol=1e-8)
    # Exact line search makes every formula reduce to linear CG
    assert nit <= 10


def test_loop_with_torch_tensors():
    A = torch.tensor([[4.0, 1.0], [1.0, 3.0]], dtype=torch.float64)
    b = torch.tensor([1.0, 2.0], dtype=torch.float64)
    strategy = create_beta_update("PolakRibierePlus")
    x = torch.zeros(2, dtype=torch.float64)
    grad = A @ x - b
    direction = -grad
    for _ in range(5):
        if torch.linalg.vector_norm(grad) < 1e-12:
            break
        alpha = -(grad @ direction) / (direction @ (A @ direction))
        x = x + alpha * direction
        grad_new = A @ x - b
        beta = strategy.update(grad, grad_new, direction)
        direction = -grad_new + beta * direction
        grad = grad_new
    expected = torch.linalg.solve(A, b)
    assert torch.allclose(x, expected, atol=1e-10)
