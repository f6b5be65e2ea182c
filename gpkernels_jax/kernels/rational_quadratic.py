# gpkernels_jax/kernels/rational_quadratic.py
import jax.numpy as jnp
from .params import KernelParams
from .active_dims import select_pair
from .distance import squared_distance


def rational_quadratic(X, Z, params: KernelParams, active_dims=None):
    """
    Rational quadratic kernel:
        k(r) = σ^2 (1 + r^2 / (2α))^(-α)

    A scale mixture of RBFs; small α gives heavier tails.
    """
    X, Z = select_pair(X, Z, active_dims)
    alpha = params.alpha
    r2 = squared_distance(X, Z, params.lengthscale)
    return params.variance * (1.0 + r2 / (2.0 * alpha)) ** (-alpha)
