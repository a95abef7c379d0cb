"""
Example: Comparing NLCG beta-update strategies

Evaluates the four beta formulas on a small hand-checkable example, then
drives each of them through a minimal nonlinear CG loop on a convex quadratic
using an exact line search. The loop restarts along the steepest-descent
direction whenever a strategy returns a non-finite beta.
"""

import numpy as np

from nlcgbeta import available_beta_updates, create_beta_update


def example_single_update():
    """Example: beta for grad_prev=[1, 0], grad_new=[0, 1], dir_prev=[1, 0]."""
    print("=" * 60)
    print("Example 1: Single beta update")
    print("=" * 60)

    grad_prev = np.array([1.0, 0.0])
    grad_new = np.array([0.0, 1.0])
    dir_prev = np.array([1.0, 0.0])

    for name in available_beta_updates():
        beta = create_beta_update(name).update(grad_prev, grad_new, dir_prev)
        print(f"{name:>18}: beta = {float(beta):+.3f}")
    print()


def example_quadratic_minimization():
    """Example: NLCG on 0.5 x^T A x - b^T x with exact line search."""
    print("=" * 60)
    print("Example 2: NLCG on a convex quadratic")
    print("=" * 60)

    rng = np.random.default_rng(0)
    M = rng.normal(size=(6, 6))
    A = M @ M.T + 6 * np.eye(6)
    b = rng.normal(size=6)
    x_star = np.linalg.solve(A, b)

    for name in available_beta_updates():
        strategy = create_beta_update(name)
        x = np.zeros(6)
        grad = A @ x - b
        direction = -grad
        nit = 0
        while np.linalg.norm(grad) > 1e-10 and nit < 100:
            alpha = -(grad @ direction) / (direction @ (A @ direction))
            x = x + alpha * direction
            grad_new = A @ x - b
            beta = strategy.update(grad, grad_new, direction)
            if np.isfinite(beta):
                direction = -grad_new + beta * direction
            else:
                direction = -grad_new
            grad = grad_new
            nit += 1
        error = np.linalg.norm(x - x_star)
        print(f"{name:>18}: {nit:3d} iterations, |x - x*| = {error:.2e}")
    print()


if __name__ == "__main__":
    example_single_update()
    example_quadratic_minimization()
    print("All examples completed successfully.")
