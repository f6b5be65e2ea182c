# gpkernels_jax/kernels/active_dims.py
"""
Active dimensions: the feature columns a kernel consumes.

Validation is split in two. `normalize_active_dims` runs when a kernel is
built and only knows the indices; `check_active_dims` runs before evaluation
once the input feature count is known.
"""
from __future__ import annotations

import operator
from collections.abc import Iterable
from typing import Optional, Tuple

import numpy as np
import jax.numpy as jnp

from ..errors import InvalidActiveDimensions


def normalize_active_dims(active_dims) -> Optional[Tuple[int, ...]]:
    """Return active dims as a tuple of ints, or None for all features."""
    if active_dims is None:
        return None
    if isinstance(active_dims, (int, np.integer)) and not isinstance(active_dims, bool):
        active_dims = (active_dims,)
    elif getattr(active_dims, "ndim", None) == 0:
        # 0-d arrays are iterable by type but not by value
        active_dims = (active_dims.item(),)
    elif isinstance(active_dims, Iterable) and not isinstance(active_dims, (str, bytes)):
        active_dims = tuple(active_dims)
    else:
        raise InvalidActiveDimensions(
            f"active_dims must be an int or a sequence of ints, got {active_dims!r}."
        )

    if len(active_dims) == 0:
        raise InvalidActiveDimensions("active_dims must contain at least one dimension.")

    dims = []
    for d in active_dims:
        if isinstance(d, bool):
            raise InvalidActiveDimensions(f"Invalid active dimension {d!r}.")
        try:
            d = operator.index(d)
        except TypeError:
            raise InvalidActiveDimensions(f"Invalid active dimension {d!r}.") from None
        if d < 0:
            raise InvalidActiveDimensions(f"Active dimension {d} is negative.")
        dims.append(d)

    if len(set(dims)) != len(dims):
        raise InvalidActiveDimensions(f"Duplicate entries in active_dims {tuple(dims)}.")
    return tuple(dims)


def check_active_dims(active_dims, n_features: int):
    if active_dims is None:
        return
    bad = [d for d in active_dims if d >= n_features]
    if bad:
        raise InvalidActiveDimensions(
            f"Active dimensions {tuple(bad)} out of range for inputs with "
            f"{n_features} feature(s)."
        )


def n_active(active_dims, n_features: int) -> int:
    return n_features if active_dims is None else len(active_dims)


def select(X, active_dims):
    """
    Gather active feature columns, keeping the feature axis.

    (..., N, Q) -> (..., N, len(active_dims)); a single dimension gives
    (..., N, 1), never (..., N).
    """
    if active_dims is None:
        return X
    return jnp.take(X, jnp.asarray(active_dims), axis=-1)


def select_pair(X, Z, active_dims):
    """`select` applied to both inputs; Z=None (self-covariance) is kept."""
    X = select(X, active_dims)
    if Z is not None:
        Z = select(Z, active_dims)
    return X, Z
