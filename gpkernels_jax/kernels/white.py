# gpkernels_jax/kernels/white.py
import jax.numpy as jnp
from .params import KernelParams


def white(X, Z, params: KernelParams, active_dims=None):
    """
    White noise kernel: σ^2 I for self-covariance (Z is None), zeros otherwise.

    "Self" is decided by the caller, not by comparing values: two distinct
    batches holding equal points still get zeros.
    """
    if Z is not None:
        batch = jnp.broadcast_shapes(X.shape[:-2], Z.shape[:-2])
        return jnp.zeros(batch + (X.shape[-2], Z.shape[-2]), dtype=X.dtype)
    n = X.shape[-2]
    K = params.variance * jnp.eye(n, dtype=X.dtype)
    return jnp.broadcast_to(K, X.shape[:-2] + (n, n))
