# gpkernels_jax/kernels/periodic.py
import jax.numpy as jnp
from .params import KernelParams
from .distance import absolute_distance


def periodic(X, Z, params: KernelParams, active_dims=None):
    """
    Periodic kernel:
        k(r) = σ^2 exp(-0.5 (sin(π r / p) / ℓ)^2)
    where r = ||x - z|| over all features, unscaled.

    Active dimensions are not applied: the distance always spans the full
    feature vector and ℓ acts on the sine, not on the inputs.
    """
    r = absolute_distance(X, Z)
    s = jnp.sin(jnp.pi * r / params.period) / params.lengthscale
    return params.variance * jnp.exp(-0.5 * jnp.square(s))
