# gpkernels_jax/kernels/constant.py
import jax.numpy as jnp
from .params import KernelParams


def bias(X, Z, params: KernelParams, active_dims=None):
    """
    Bias (constant) kernel:
        k(x, z) = σ^2

    Only the shapes of X and Z are used.
    """
    Z = X if Z is None else Z
    batch = jnp.broadcast_shapes(X.shape[:-2], Z.shape[:-2])
    shape = batch + (X.shape[-2], Z.shape[-2])
    return jnp.broadcast_to(params.variance, shape).astype(X.dtype)
