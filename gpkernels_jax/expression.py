# gpkernels_jax/expression.py
"""
Kernel expressions.

An expression is an immutable binary tree: leaves are `BaseKernel`s (formula
tag + parameters + active dimensions + precision) and internal nodes are
`Add` / `Prod`. Expressions are pytrees, so parameters may be tracers and an
expression can be passed straight through `jax.jit` or `jax.grad`.

Build kernels with the constructors at the bottom of this module and combine
them with `+` and `*`:

    k = RBF(lengthscales=[1.0, 2.0], variance=1.0, active_dims=[0, 1]) \\
        + Periodic(period=1.0, lengthscale=0.5, variance=0.3)
    K = k(X, X_new)
"""
from __future__ import annotations

from dataclasses import dataclass
from typing import Iterator, Optional, Tuple

from jax.tree_util import register_pytree_node_class

from .config import Precision, get_precision
from .kernels.base import KernelKind
from .kernels.params import KernelParams, as_parameter, check_scalar, check_per_feature
from .kernels.active_dims import normalize_active_dims


# Parameters that may be one value per active dimension; all others are scalars.
_PER_FEATURE = {
    KernelKind.BIAS: (),
    KernelKind.WHITE: (),
    KernelKind.RBF: ("lengthscale",),
    KernelKind.RATIONAL_QUADRATIC: ("lengthscale",),
    KernelKind.LINEAR: ("variance",),
    KernelKind.POLYNOMIAL: ("variance",),
    KernelKind.EXPONENTIAL: ("lengthscale",),
    KernelKind.MATERN12: ("lengthscale",),
    KernelKind.MATERN32: ("lengthscale",),
    KernelKind.MATERN52: ("lengthscale",),
    KernelKind.COSINE: ("lengthscale",),
    KernelKind.PERIODIC: (),
}

_DISPLAY_NAMES = {
    KernelKind.BIAS: "Bias",
    KernelKind.WHITE: "White",
    KernelKind.RBF: "RBF",
    KernelKind.RATIONAL_QUADRATIC: "RationalQuadratic",
    KernelKind.LINEAR: "Linear",
    KernelKind.POLYNOMIAL: "Polynomial",
    KernelKind.EXPONENTIAL: "Exponential",
    KernelKind.MATERN12: "Matern12",
    KernelKind.MATERN32: "Matern32",
    KernelKind.MATERN52: "Matern52",
    KernelKind.COSINE: "Cosine",
    KernelKind.PERIODIC: "Periodic",
}


class Kernel:
    """Base class of every expression node."""

    def __add__(self, other):
        if not isinstance(other, Kernel):
            return NotImplemented
        return Add(self, other)

    def __mul__(self, other):
        if not isinstance(other, Kernel):
            return NotImplemented
        return Prod(self, other)

    def __call__(self, X, X_prime=None, *, self_covariance=None):
        from .evaluation import evaluate
        return evaluate(self, X, X_prime, self_covariance=self_covariance)

    def leaves(self) -> Iterator[BaseKernel]:
        """Base kernels, left to right."""
        raise NotImplementedError


@register_pytree_node_class
@dataclass(frozen=True, eq=False)
class BaseKernel(Kernel):
    kind: KernelKind
    params: KernelParams
    active_dims: Optional[Tuple[int, ...]]
    precision: Precision

    def leaves(self):
        yield self

    def per_feature_parameters(self):
        """(name, value) of the set parameters that may be per-feature vectors."""
        return [
            (name, getattr(self.params, name))
            for name in _PER_FEATURE[self.kind]
            if getattr(self.params, name) is not None
        ]

    def __repr__(self):
        dims = "all" if self.active_dims is None else list(self.active_dims)
        return (
            f"{_DISPLAY_NAMES[self.kind]}(params={list(self.params.names())}, "
            f"active_dims={dims}, precision={self.precision.name})"
        )

    # ---- pytree protocol ----
    def tree_flatten(self):
        return (self.params,), (self.kind, self.active_dims, self.precision)

    @classmethod
    def tree_unflatten(cls, aux_data, children):
        kind, active_dims, precision = aux_data
        return cls(kind, children[0], active_dims, precision)


@dataclass(frozen=True, eq=False)
class _Combination(Kernel):
    left: Kernel
    right: Kernel

    def __post_init__(self):
        for k in (self.left, self.right):
            if not isinstance(k, Kernel):
                raise TypeError(
                    f"{type(self).__name__} combines kernels, got {type(k).__name__}."
                )

    def leaves(self):
        yield from self.left.leaves()
        yield from self.right.leaves()

    def __repr__(self):
        return f"{type(self).__name__}({self.left!r}, {self.right!r})"

    def tree_flatten(self):
        return (self.left, self.right), None

    @classmethod
    def tree_unflatten(cls, aux_data, children):
        # bypass the type check: transformations may put placeholders in the leaves
        obj = object.__new__(cls)
        object.__setattr__(obj, "left", children[0])
        object.__setattr__(obj, "right", children[1])
        return obj


@register_pytree_node_class
class Add(_Combination):
    """Sum of two kernels."""


@register_pytree_node_class
class Prod(_Combination):
    """Elementwise product of two kernels."""


# --------------------------------------------------
# Constructors
# --------------------------------------------------

def _resolve_precision(precision) -> Precision:
    if precision is None:
        return get_precision()
    if isinstance(precision, Precision):
        return precision
    return Precision.from_dtype(precision)


def _base_kernel(kind, precision, active_dims=None, **values) -> BaseKernel:
    precision = _resolve_precision(precision)
    active_dims = normalize_active_dims(active_dims)
    n = None if active_dims is None else len(active_dims)

    params = {}
    for name, value in values.items():
        value = as_parameter(value, precision, name)
        if name in _PER_FEATURE[kind]:
            check_per_feature(value, name, n)
        else:
            check_scalar(value, name)
        params[name] = value

    return BaseKernel(kind, KernelParams(**params), active_dims, precision)


def Bias(variance, *, precision=None) -> BaseKernel:
    """Constant kernel k(x, z) = variance."""
    return _base_kernel(KernelKind.BIAS, precision, variance=variance)


def White(variance, *, precision=None) -> BaseKernel:
    """variance on the diagonal of a self-covariance, zero everywhere else."""
    return _base_kernel(KernelKind.WHITE, precision, variance=variance)


def RBF(lengthscales, variance, active_dims=None, *, precision=None) -> BaseKernel:
    return _base_kernel(
        KernelKind.RBF, precision, active_dims,
        variance=variance, lengthscale=lengthscales,
    )


def RationalQuadratic(lengthscales, variance, alpha, active_dims=None, *, precision=None) -> BaseKernel:
    return _base_kernel(
        KernelKind.RATIONAL_QUADRATIC, precision, active_dims,
        variance=variance, lengthscale=lengthscales, alpha=alpha,
    )


def Linear(variances, active_dims=None, *, precision=None) -> BaseKernel:
    """Linear kernel; `variances` is a scalar or one value per active dimension."""
    return _base_kernel(KernelKind.LINEAR, precision, active_dims, variance=variances)


def Polynomial(variances, offset, degree, active_dims=None, *, precision=None) -> BaseKernel:
    return _base_kernel(
        KernelKind.POLYNOMIAL, precision, active_dims,
        variance=variances, offset=offset, degree=degree,
    )


def Exponential(lengthscales, variance, active_dims=None, *, precision=None) -> BaseKernel:
    return _base_kernel(
        KernelKind.EXPONENTIAL, precision, active_dims,
        variance=variance, lengthscale=lengthscales,
    )


def Matern12(lengthscales, variance, active_dims=None, *, precision=None) -> BaseKernel:
    return _base_kernel(
        KernelKind.MATERN12, precision, active_dims,
        variance=variance, lengthscale=lengthscales,
    )


def Matern32(lengthscales, variance, active_dims=None, *, precision=None) -> BaseKernel:
    return _base_kernel(
        KernelKind.MATERN32, precision, active_dims,
        variance=variance, lengthscale=lengthscales,
    )


def Matern52(lengthscales, variance, active_dims=None, *, precision=None) -> BaseKernel:
    return _base_kernel(
        KernelKind.MATERN52, precision, active_dims,
        variance=variance, lengthscale=lengthscales,
    )


def Cosine(lengthscales, variance, active_dims=None, *, precision=None) -> BaseKernel:
    return _base_kernel(
        KernelKind.COSINE, precision, active_dims,
        variance=variance, lengthscale=lengthscales,
    )


def Periodic(period, lengthscale, variance, *, precision=None) -> BaseKernel:
    """
    Periodic kernel over the full feature vector.

    Takes no active dimensions; combine with other kernels for per-group
    structure.
    """
    return _base_kernel(
        KernelKind.PERIODIC, precision,
        variance=variance, lengthscale=lengthscale, period=period,
    )


__all__ = [
    "KernelKind",
    "Kernel",
    "BaseKernel",
    "Add",
    "Prod",
    "Bias",
    "White",
    "RBF",
    "RationalQuadratic",
    "Linear",
    "Polynomial",
    "Exponential",
    "Matern12",
    "Matern32",
    "Matern52",
    "Cosine",
    "Periodic",
]
