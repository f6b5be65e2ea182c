# gpkernels_jax/errors.py
"""
Error taxonomy.

All errors are raised eagerly, from shapes and dtypes only, before any
covariance is computed. Near-zero or negative squared distances are not
errors: they are clamped inside the distance primitives.
"""


class KernelError(ValueError):
    """Base class for kernel construction and evaluation errors."""


class InvalidActiveDimensions(KernelError):
    """Active-dimension set is empty, malformed, or out of range for the input."""


class ShapeMismatch(KernelError):
    """Input batches (or covariance tensors) have incompatible shapes."""


class ParameterShapeMismatch(KernelError):
    """A parameter does not have the shape its kernel requires."""


class PrecisionMismatch(KernelError):
    """Arrays of different floating-point precision met in one evaluation."""


__all__ = [
    "KernelError",
    "InvalidActiveDimensions",
    "ShapeMismatch",
    "ParameterShapeMismatch",
    "PrecisionMismatch",
]
