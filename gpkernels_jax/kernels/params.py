# gpkernels_jax/kernels/params.py
from __future__ import annotations
from dataclasses import dataclass, fields
from typing import Optional

import jax.numpy as jnp
from jax.tree_util import register_pytree_node_class

from ..errors import ParameterShapeMismatch, PrecisionMismatch


@register_pytree_node_class
@dataclass(frozen=True)
class KernelParams:
    """
    Kernel hyperparameters as a pytree.

    Only a subset is used by each kernel; unused fields stay None. Values may
    be tracers, so nothing here looks at them beyond shape and dtype.
    """

    # Core
    variance: Optional[jnp.ndarray] = None      # scalar, or (Q,) for linear/polynomial
    lengthscale: Optional[jnp.ndarray] = None   # scalar or (Q,)

    # RQ / Periodic
    alpha: Optional[jnp.ndarray] = None
    period: Optional[jnp.ndarray] = None

    # Polynomial
    offset: Optional[jnp.ndarray] = None
    degree: Optional[jnp.ndarray] = None

    # ---- pytree protocol ----
    def tree_flatten(self):
        children = (
            self.variance,
            self.lengthscale,
            self.alpha,
            self.period,
            self.offset,
            self.degree,
        )
        return children, None

    @classmethod
    def tree_unflatten(cls, aux_data, children):
        return cls(*children)

    def names(self):
        """Names of the parameters that are set."""
        return tuple(f.name for f in fields(self) if getattr(self, f.name) is not None)


def as_parameter(value, precision, name: str):
    """
    Convert a parameter to the kernel precision.

    Arrays that already carry a different floating dtype are rejected rather
    than cast.
    """
    dtype = getattr(value, "dtype", None)
    if dtype is not None and jnp.issubdtype(dtype, jnp.floating) and dtype != precision.dtype:
        raise PrecisionMismatch(
            f"Parameter '{name}' has dtype {jnp.dtype(dtype).name}, "
            f"kernel precision is {precision.name}."
        )
    return jnp.asarray(value, dtype=precision.dtype)


def check_scalar(value, name: str):
    if jnp.ndim(value) != 0:
        raise ParameterShapeMismatch(
            f"Parameter '{name}' must be a scalar, got shape {jnp.shape(value)}."
        )


def check_per_feature(value, name: str, n_features: Optional[int]):
    """
    Check a scalar-or-(Q,) parameter.

    `n_features=None` only checks rank; the length is then checked at
    evaluation time against the input feature count.
    """
    ndim = jnp.ndim(value)
    if ndim == 0:
        return
    if ndim != 1:
        raise ParameterShapeMismatch(
            f"Parameter '{name}' must be a scalar or a vector, got shape {jnp.shape(value)}."
        )
    if n_features is not None and jnp.shape(value)[0] != n_features:
        raise ParameterShapeMismatch(
            f"Parameter '{name}' has length {jnp.shape(value)[0]}, "
            f"expected {n_features} (one per active dimension)."
        )
