# gpkernels_jax/config.py
"""
Process-wide defaults: numeric precision and logging.

The default precision is only read when a kernel is constructed. Each kernel
carries its own `Precision`, so evaluation never consults this module.
"""
from __future__ import annotations

import os
import logging
from dataclasses import dataclass
from typing import Any, Optional

import jax
import jax.numpy as jnp

_SUPPORTED_DTYPES = ("float32", "float64")

# 1e-40 is subnormal in float32 and may be flushed to zero on some backends.
_DISTANCE_FLOOR = {
    "float64": 1e-40,
    "float32": float(jnp.finfo(jnp.float32).tiny),
}


@dataclass(frozen=True)
class Precision:
    """Floating-point precision used by one kernel expression."""
    dtype: Any
    distance_floor: float

    @classmethod
    def from_dtype(cls, dtype) -> Precision:
        name = jnp.dtype(dtype).name
        if name not in _SUPPORTED_DTYPES:
            raise ValueError(
                f"Unsupported precision '{name}'. Use one of {_SUPPORTED_DTYPES}."
            )
        return cls(dtype=jnp.dtype(name), distance_floor=_DISTANCE_FLOOR[name])

    @property
    def name(self) -> str:
        return self.dtype.name

    def __repr__(self):
        return f"Precision({self.name})"


class _KernelConfig:
    def __init__(self):
        self.precision: Optional[Precision] = None
        self.logger = logging.getLogger("gpkernels_jax")
        if not self.logger.handlers:
            h = logging.StreamHandler()
            h.setFormatter(logging.Formatter("[%(levelname)s] %(message)s"))
            self.logger.addHandler(h)
        self.logger.setLevel(logging.INFO)

    def __repr__(self):
        return f"<KernelConfig precision={self.precision!r}>"


_config = _KernelConfig()


def get_config():
    """Return the process-wide config object."""
    return _config


def set_precision(dtype):
    """
    Set the default precision captured by kernel constructors.

    Selecting float64 turns on `jax_enable_x64`; without it JAX silently
    downcasts every array to float32.
    """
    precision = Precision.from_dtype(dtype)
    if precision.name == "float64":
        jax.config.update("jax_enable_x64", True)
    _config.precision = precision
    _config.logger.debug("default precision set to %s", precision.name)
    return precision


def get_precision() -> Precision:
    """Return the default precision; follows JAX's x64 flag when unset."""
    if _config.precision is not None:
        return _config.precision
    return Precision.from_dtype(jax.dtypes.canonicalize_dtype(jnp.float64))


def get_logger():
    return _config.logger


def set_log_level(level):
    _config.logger.setLevel(level)


def load_env():
    """Seed the default precision from GPKERNELS_PRECISION, if set."""
    value = os.environ.get("GPKERNELS_PRECISION")
    if value in _SUPPORTED_DTYPES:
        set_precision(value)


load_env()
