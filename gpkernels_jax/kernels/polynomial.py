# gpkernels_jax/kernels/polynomial.py
from .params import KernelParams
from .active_dims import select_pair
from .linear import linear_dot


def polynomial(X, Z, params: KernelParams, active_dims=None):
    X, Z = select_pair(X, Z, active_dims)
    return (linear_dot(X, Z, params.variance) + params.offset) ** params.degree
