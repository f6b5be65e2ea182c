"""
gpkernels-jax - covariance functions for Gaussian processes in JAX.

Base kernels are built with constructors (`RBF`, `Matern52`, `Periodic`, ...),
combined with `+` and `*`, and evaluated on two input batches of shape
(..., N, D) and (..., M, D) to give a (..., N, M) covariance.
"""

__version__ = "0.1.0"

from . import config
from .config import Precision, get_precision, set_precision, get_logger, set_log_level

from .errors import (
    KernelError,
    InvalidActiveDimensions,
    ShapeMismatch,
    ParameterShapeMismatch,
    PrecisionMismatch,
)

from . import kernels
from .kernels import squared_distance, absolute_distance, select, KernelParams

from .expression import (
    KernelKind,
    Kernel,
    BaseKernel,
    Add,
    Prod,
    Bias,
    White,
    RBF,
    RationalQuadratic,
    Linear,
    Polynomial,
    Exponential,
    Matern12,
    Matern32,
    Matern52,
    Cosine,
    Periodic,
)
from .evaluation import evaluate

__all__ = [
    "__version__",
    # Config
    "Precision",
    "get_precision",
    "set_precision",
    "get_logger",
    "set_log_level",
    # Errors
    "KernelError",
    "InvalidActiveDimensions",
    "ShapeMismatch",
    "ParameterShapeMismatch",
    "PrecisionMismatch",
    # Primitives
    "squared_distance",
    "absolute_distance",
    "select",
    "KernelParams",
    # Expressions
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
    # Evaluation
    "evaluate",
]
