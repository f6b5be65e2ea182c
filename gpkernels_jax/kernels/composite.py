# gpkernels_jax/kernels/composite.py
"""
Combinators on covariance tensors.

Sums and elementwise (Schur) products of PSD matrices are PSD, so these are
the only two ways kernels are combined.
"""
import jax.numpy as jnp

from ..errors import ShapeMismatch


def _check_same_shape(a, b, op):
    if jnp.shape(a) != jnp.shape(b):
        raise ShapeMismatch(
            f"Cannot {op} covariance tensors of shapes {jnp.shape(a)} and {jnp.shape(b)}."
        )


def add(a, b):
    _check_same_shape(a, b, "add")
    return a + b


def multiply(a, b):
    _check_same_shape(a, b, "multiply")
    return a * b
