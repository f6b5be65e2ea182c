# gpkernels_jax/kernels/__init__.py

from .base import KernelKind, register, get, missing

# base formulas
from .constant import bias
from .white import white
from .rbf import rbf
from .rational_quadratic import rational_quadratic
from .linear import linear
from .polynomial import polynomial
from .exponential import exponential
from .matern12 import matern12
from .matern32 import matern32
from .matern52 import matern52
from .cosine import cosine
from .periodic import periodic

# primitives
from .distance import squared_distance, absolute_distance
from .active_dims import select
from .params import KernelParams

# combinators (tensor level, DO NOT register)
from .composite import add, multiply

# --------------------------------------------------
# Registry
# --------------------------------------------------
register(KernelKind.BIAS, bias)
register(KernelKind.WHITE, white)
register(KernelKind.RBF, rbf)
register(KernelKind.RATIONAL_QUADRATIC, rational_quadratic)
register(KernelKind.LINEAR, linear)
register(KernelKind.POLYNOMIAL, polynomial)
register(KernelKind.EXPONENTIAL, exponential)
register(KernelKind.MATERN12, matern12)
register(KernelKind.MATERN32, matern32)
register(KernelKind.MATERN52, matern52)
register(KernelKind.COSINE, cosine)
register(KernelKind.PERIODIC, periodic)

if missing():
    raise ImportError(f"No formula registered for {[k.value for k in missing()]}.")

__all__ = [
    "KernelKind",
    "get",
    # formulas
    "bias",
    "white",
    "rbf",
    "rational_quadratic",
    "linear",
    "polynomial",
    "exponential",
    "matern12",
    "matern32",
    "matern52",
    "cosine",
    "periodic",
    # primitives
    "squared_distance",
    "absolute_distance",
    "select",
    "KernelParams",
    # combinators
    "add",
    "multiply",
]
