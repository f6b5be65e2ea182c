# gpkernels_jax/kernels/matern32.py
import jax.numpy as jnp
from .params import KernelParams
from .active_dims import select_pair
from .distance import absolute_distance


def matern32(X, Z, params: KernelParams, active_dims=None):
    X, Z = select_pair(X, Z, active_dims)
    r = absolute_distance(X, Z, params.lengthscale)
    sqrt3 = jnp.sqrt(jnp.asarray(3.0, dtype=r.dtype))
    return params.variance * (1.0 + sqrt3 * r) * jnp.exp(-sqrt3 * r)
