# gpkernels_jax/kernels/base.py
from enum import Enum


class KernelKind(str, Enum):
    """Closed set of base-kernel formulas."""
    BIAS = "bias"
    WHITE = "white"
    RBF = "rbf"
    RATIONAL_QUADRATIC = "rational_quadratic"
    LINEAR = "linear"
    POLYNOMIAL = "polynomial"
    EXPONENTIAL = "exponential"
    MATERN12 = "matern12"
    MATERN32 = "matern32"
    MATERN52 = "matern52"
    COSINE = "cosine"
    PERIODIC = "periodic"


_KERNEL_REGISTRY = {}


def register(kind, fn):
    kind = KernelKind(kind)
    if kind in _KERNEL_REGISTRY:
        raise KeyError(f"Kernel '{kind.value}' already registered.")
    _KERNEL_REGISTRY[kind] = fn


def get(kind):
    try:
        return _KERNEL_REGISTRY[KernelKind(kind)]
    except (KeyError, ValueError):
        raise KeyError(
            f"Unknown kernel '{kind}'. "
            f"Available: {[k.value for k in _KERNEL_REGISTRY]}"
        ) from None


def missing():
    """Kinds with no registered formula."""
    return [k for k in KernelKind if k not in _KERNEL_REGISTRY]
