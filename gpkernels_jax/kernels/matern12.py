# gpkernels_jax/kernels/matern12.py
import jax.numpy as jnp
from .params import KernelParams
from .active_dims import select_pair
from .distance import absolute_distance


def matern12(X, Z, params: KernelParams, active_dims=None):
    """
    Matérn ν=1/2:
        k(r) = σ^2 exp(-r)
    where r = ||(x - z)/ℓ||.
    """
    X, Z = select_pair(X, Z, active_dims)
    r = absolute_distance(X, Z, params.lengthscale)
    return params.variance * jnp.exp(-r)
