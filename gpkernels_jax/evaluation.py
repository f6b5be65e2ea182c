# gpkernels_jax/evaluation.py
"""
Evaluate a kernel expression on two input batches.

All checks run on shapes and dtypes before any covariance is computed, so a
bad expression fails without doing numeric work and the whole function stays
traceable under `jax.jit`.
"""
from __future__ import annotations

from typing import Optional

import jax.numpy as jnp

from .config import get_logger
from .errors import (
    ShapeMismatch,
    PrecisionMismatch,
    ParameterShapeMismatch,
)
from .expression import Kernel, BaseKernel, Add, Prod
from .kernels import base as registry
from .kernels.active_dims import check_active_dims, n_active
from .kernels.composite import add, multiply


def _as_input(X, precision, name):
    dtype = getattr(X, "dtype", None)
    if dtype is not None and jnp.issubdtype(dtype, jnp.floating) and dtype != precision.dtype:
        raise PrecisionMismatch(
            f"{name} has dtype {jnp.dtype(dtype).name}, kernel precision is {precision.name}."
        )
    X = jnp.asarray(X, dtype=precision.dtype)
    if X.ndim < 2:
        raise ShapeMismatch(f"{name} must have shape (..., N, D), got {X.shape}.")
    return X


def _common_precision(expr: Kernel):
    leaves = list(expr.leaves())
    precision = leaves[0].precision
    for leaf in leaves[1:]:
        if leaf.precision != precision:
            raise PrecisionMismatch(
                f"Kernel expression mixes precisions {precision.name} and "
                f"{leaf.precision.name}."
            )
    return precision


def _check_shapes(X, Z):
    if X.shape[-1] != Z.shape[-1]:
        raise ShapeMismatch(
            f"Inputs have {X.shape[-1]} and {Z.shape[-1]} features."
        )
    try:
        jnp.broadcast_shapes(X.shape[:-2], Z.shape[:-2])
    except ValueError:
        raise ShapeMismatch(
            f"Batch dimensions {X.shape[:-2]} and {Z.shape[:-2]} do not broadcast."
        ) from None


def _check_leaves(expr: Kernel, n_features: int):
    for leaf in expr.leaves():
        check_active_dims(leaf.active_dims, n_features)
        n = n_active(leaf.active_dims, n_features)
        for name, value in leaf.per_feature_parameters():
            if jnp.ndim(value) == 1 and jnp.shape(value)[0] != n:
                raise ParameterShapeMismatch(
                    f"{leaf!r}: parameter '{name}' has length {jnp.shape(value)[0]}, "
                    f"expected {n}."
                )


def _evaluate(expr, X, Z):
    if isinstance(expr, BaseKernel):
        fn = registry.get(expr.kind)
        return fn(X, Z, expr.params, expr.active_dims)
    if isinstance(expr, Add):
        return add(_evaluate(expr.left, X, Z), _evaluate(expr.right, X, Z))
    if isinstance(expr, Prod):
        return multiply(_evaluate(expr.left, X, Z), _evaluate(expr.right, X, Z))
    raise TypeError(f"Not a kernel expression: {type(expr).__name__}.")


def evaluate(expr: Kernel, X, X_prime=None, *, self_covariance: Optional[bool] = None):
    """
    Covariance of `expr` between X and X_prime.

    Args:
        expr: kernel expression
        X: (..., N, D) inputs
        X_prime: (..., M, D) inputs; None means X
        self_covariance: overrides self-covariance detection. By default the
            call is a self-covariance when X_prime is None or is the same
            object as X (identity, not equality).

    Returns:
        (..., N, M) covariance; leading dims are the broadcast of the inputs'.

    Raises:
        InvalidActiveDimensions, ShapeMismatch, ParameterShapeMismatch,
        PrecisionMismatch
    """
    if not isinstance(expr, Kernel):
        raise TypeError(f"Not a kernel expression: {type(expr).__name__}.")

    if self_covariance is None:
        self_covariance = X_prime is None or X_prime is X

    precision = _common_precision(expr)
    X = _as_input(X, precision, "X")

    if self_covariance:
        if X_prime is not None and X_prime is not X:
            X_prime = _as_input(X_prime, precision, "X_prime")
            if X_prime.shape != X.shape:
                raise ShapeMismatch(
                    f"Self-covariance requested for inputs of shapes "
                    f"{X.shape} and {X_prime.shape}."
                )
        Z = None
    else:
        if X_prime is None:
            raise ValueError("self_covariance=False requires X_prime.")
        Z = _as_input(X_prime, precision, "X_prime")
        _check_shapes(X, Z)

    _check_leaves(expr, X.shape[-1])

    logger = get_logger()
    logger.debug(
        "evaluating %r on X%s, X'%s (self=%s)",
        expr, X.shape, X.shape if Z is None else Z.shape, self_covariance,
    )
    return _evaluate(expr, X, Z)


__all__ = ["evaluate"]
