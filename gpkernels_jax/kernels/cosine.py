# gpkernels_jax/kernels/cosine.py
import jax.numpy as jnp
from .params import KernelParams
from .active_dims import select_pair
from .distance import absolute_distance


def cosine(X, Z, params: KernelParams, active_dims=None):
    X, Z = select_pair(X, Z, active_dims)
    r = absolute_distance(X, Z, params.lengthscale)
    return params.variance * jnp.cos(r)
