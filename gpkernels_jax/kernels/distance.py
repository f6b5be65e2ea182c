# gpkernels_jax/kernels/distance.py
"""
Batched pairwise distances.

Inputs have shape (..., N, Q) and (..., M, Q); leading dimensions broadcast.
`Z=None` means Z is X, in which case the diagonal is pinned to the floor.
"""
import jax.numpy as jnp

from ..config import Precision


def _floor_for(dtype, floor):
    if floor is not None:
        return floor
    return Precision.from_dtype(dtype).distance_floor


def squared_distance(X, Z=None, lengthscales=None, floor=None):
    """
    Squared Euclidean distance, optionally ARD-scaled.

    Args:
        X: (..., N, Q) inputs
        Z: (..., M, Q) inputs, or None for Z = X
        lengthscales: scalar or (Q,), divides each feature before the distance
        floor: lower clamp; defaults to the precision's distance floor

    Returns:
        (..., N, M) squared distances, all >= floor
    """
    same = Z is None
    if same:
        Z = X
    if lengthscales is not None:
        X = X / lengthscales
        Z = X if same else Z / lengthscales

    x2 = jnp.sum(X * X, axis=-1)[..., :, None]
    z2 = jnp.sum(Z * Z, axis=-1)[..., None, :]
    r2 = x2 + z2 - 2.0 * (X @ jnp.swapaxes(Z, -1, -2))

    if same:
        n = X.shape[-2]
        r2 = jnp.where(jnp.eye(n, dtype=bool), jnp.zeros((), dtype=r2.dtype), r2)

    # cancellation in the norm identity can go slightly negative
    return jnp.maximum(r2, _floor_for(r2.dtype, floor))


def absolute_distance(X, Z=None, lengthscales=None, floor=None):
    """Euclidean distance: sqrt of the clamped squared distance."""
    return jnp.sqrt(squared_distance(X, Z, lengthscales, floor))
