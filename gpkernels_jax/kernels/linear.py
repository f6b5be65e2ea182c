# gpkernels_jax/kernels/linear.py
import jax.numpy as jnp
from .params import KernelParams
from .active_dims import select_pair


def linear_dot(X, Z, variances):
    """(X Λ) Zᵗ with Λ = diag(variances), batched over leading dims."""
    Z = X if Z is None else Z
    return (variances * X) @ jnp.swapaxes(Z, -1, -2)


def linear(X, Z, params: KernelParams, active_dims=None):
    """
    Linear kernel without centering:
        k(x, z) = Σ_q λ_q x_q z_q
    """
    X, Z = select_pair(X, Z, active_dims)
    return linear_dot(X, Z, params.variance)
