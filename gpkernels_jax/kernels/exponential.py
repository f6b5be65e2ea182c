# gpkernels_jax/kernels/exponential.py
import jax.numpy as jnp
from .params import KernelParams
from .active_dims import select_pair
from .distance import absolute_distance


def exponential(X, Z, params: KernelParams, active_dims=None):
    """
    Exponential kernel:
        k(r) = σ^2 exp(-r / 2)
    where r = ||(x - z)/ℓ||.

    Note the factor 1/2; `matern12` is the same shape without it.
    """
    X, Z = select_pair(X, Z, active_dims)
    r = absolute_distance(X, Z, params.lengthscale)
    return params.variance * jnp.exp(-0.5 * r)
