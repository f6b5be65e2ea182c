# gpkernels_jax/kernels/matern52.py
import jax.numpy as jnp
from .params import KernelParams
from .active_dims import select_pair
from .distance import absolute_distance


def matern52(X, Z, params: KernelParams, active_dims=None):
    """
    Matérn ν=5/2:
        k(r) = σ^2 (1 + √5 r + 5/3 r^2) exp(-√5 r)
    where r = ||(x - z)/ℓ||.
    """
    X, Z = select_pair(X, Z, active_dims)
    r = absolute_distance(X, Z, params.lengthscale)
    s5r = jnp.sqrt(jnp.asarray(5.0, dtype=r.dtype)) * r
    poly = 1.0 + s5r + (5.0 / 3.0) * jnp.square(r)
    return params.variance * poly * jnp.exp(-s5r)
