# gpkernels_jax/kernels/rbf.py
import jax.numpy as jnp
from .params import KernelParams
from .active_dims import select_pair
from .distance import squared_distance


def rbf(X, Z, params: KernelParams, active_dims=None):
    X, Z = select_pair(X, Z, active_dims)
    r2 = squared_distance(X, Z, params.lengthscale)
    return params.variance * jnp.exp(-r2 / 2.0)
