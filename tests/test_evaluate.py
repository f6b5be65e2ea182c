"""Tests for expression evaluation: self-covariance, batching, errors."""

import importlib

import pytest
import jax.numpy as jnp

import gpkernels_jax as gpk
from gpkernels_jax import evaluate
from gpkernels_jax.errors import (
    KernelError,
    InvalidActiveDimensions,
    ShapeMismatch,
    ParameterShapeMismatch,
    PrecisionMismatch,
)

evaluation = importlib.import_module("gpkernels_jax.evaluation")


def test_evaluate_equals_call(sample_data_2d):
    X, Z = sample_data_2d
    k = gpk.Matern52(lengthscales=1.0, variance=1.0)
    assert jnp.allclose(evaluate(k, X, Z), k(X, Z))
    assert jnp.allclose(evaluate(k, X), k(X, X))


def test_self_covariance_flag(sample_data_2d):
    X, _ = sample_data_2d
    k = gpk.White(variance=2.0)
    X_copy = jnp.array(X, copy=True)

    assert jnp.allclose(evaluate(k, X, X_copy, self_covariance=True), 2.0 * jnp.eye(10))
    assert jnp.all(evaluate(k, X, X, self_covariance=False) == 0.0)


def test_self_covariance_flag_requires_same_shape(sample_data_2d):
    X, Z = sample_data_2d
    with pytest.raises(ShapeMismatch):
        evaluate(gpk.White(variance=1.0), X, Z, self_covariance=True)


def test_self_covariance_false_requires_second_batch(sample_data_2d):
    X, _ = sample_data_2d
    with pytest.raises(ValueError):
        evaluate(gpk.Bias(variance=1.0), X, self_covariance=False)


def test_list_inputs_are_converted():
    K = gpk.Linear(variances=1.0)([[2.0]], [[3.0]])
    assert jnp.allclose(K, 6.0)


def test_batched_inputs(batched_data):
    X, Z = batched_data
    k = gpk.RBF(lengthscales=1.0, variance=1.0) + gpk.Bias(variance=0.5)

    K = k(X, Z)
    assert K.shape == (2, 5, 4)
    for b in range(2):
        assert jnp.allclose(K[b], k(X[b], Z))


def test_batched_self_covariance(batched_data):
    X, _ = batched_data
    k = gpk.Matern12(lengthscales=1.0, variance=1.0) + gpk.White(variance=0.1)

    K = k(X)
    assert K.shape == (2, 5, 5)
    assert jnp.allclose(K, jnp.swapaxes(K, -1, -2))
    for b in range(2):
        assert jnp.allclose(K[b], k(X[b]))


def test_batch_dims_broadcast():
    X = jnp.ones((3, 1, 4, 2))
    Z = jnp.ones((2, 5, 2))
    K = gpk.Linear(variances=1.0)(X, Z)
    assert K.shape == (3, 2, 4, 5)
    assert gpk.Bias(variance=1.0)(X, Z).shape == (3, 2, 4, 5)
    assert gpk.White(variance=1.0)(X, Z).shape == (3, 2, 4, 5)


# ---- errors ----

def test_out_of_range_active_dims_fails_before_computing(monkeypatch):
    def boom(*args, **kwargs):
        raise AssertionError("covariance computed")

    monkeypatch.setattr(evaluation, "_evaluate", boom)
    k = gpk.RBF(lengthscales=1.0, variance=1.0, active_dims=[5])
    X = jnp.zeros((3, 2))
    with pytest.raises(InvalidActiveDimensions):
        k(X)


def test_out_of_range_active_dims_in_compound():
    k = gpk.Bias(variance=1.0) + gpk.Linear(variances=1.0, active_dims=[0, 2])
    with pytest.raises(InvalidActiveDimensions):
        k(jnp.zeros((3, 2)))


def test_empty_active_dims_at_construction():
    with pytest.raises(InvalidActiveDimensions):
        gpk.RBF(lengthscales=1.0, variance=1.0, active_dims=[])


def test_feature_count_mismatch():
    k = gpk.RBF(lengthscales=1.0, variance=1.0)
    with pytest.raises(ShapeMismatch):
        k(jnp.zeros((3, 2)), jnp.zeros((4, 3)))


def test_batch_dims_do_not_broadcast():
    k = gpk.RBF(lengthscales=1.0, variance=1.0)
    with pytest.raises(ShapeMismatch):
        k(jnp.zeros((2, 3, 2)), jnp.zeros((3, 4, 2)))


def test_rank_one_input():
    with pytest.raises(ShapeMismatch):
        gpk.RBF(lengthscales=1.0, variance=1.0)(jnp.zeros(3))


def test_parameter_length_at_construction():
    with pytest.raises(ParameterShapeMismatch):
        gpk.RBF(lengthscales=[1.0, 2.0, 3.0], variance=1.0, active_dims=[0, 1])
    with pytest.raises(ParameterShapeMismatch):
        gpk.Linear(variances=jnp.ones((2, 2)))


def test_parameter_length_at_evaluation():
    k = gpk.RBF(lengthscales=[1.0, 2.0], variance=1.0)
    with pytest.raises(ParameterShapeMismatch):
        k(jnp.zeros((3, 3)))


def test_scalar_parameters_must_be_scalars():
    with pytest.raises(ParameterShapeMismatch):
        gpk.RBF(lengthscales=1.0, variance=[1.0, 2.0])
    with pytest.raises(ParameterShapeMismatch):
        gpk.Periodic(period=1.0, lengthscale=[1.0, 2.0], variance=1.0)


def test_errors_are_value_errors():
    assert issubclass(KernelError, ValueError)
    for err in (InvalidActiveDimensions, ShapeMismatch, ParameterShapeMismatch, PrecisionMismatch):
        assert issubclass(err, KernelError)


# ---- precision ----

def test_default_precision_is_captured():
    k = gpk.RBF(lengthscales=1.0, variance=1.0)
    assert k.precision == gpk.get_precision()
    assert k.params.variance.dtype == jnp.float64


def test_explicit_precision(sample_data_2d):
    k = gpk.RBF(lengthscales=1.0, variance=1.0, precision="float32")
    assert k.params.lengthscale.dtype == jnp.float32
    K = k([[0.0], [1.0]])
    assert K.dtype == jnp.float32

    X, _ = sample_data_2d
    with pytest.raises(PrecisionMismatch):
        k(X)


def test_mixed_precision_expression():
    k = gpk.RBF(lengthscales=1.0, variance=1.0, precision="float32") + gpk.Bias(
        variance=1.0, precision="float64"
    )
    with pytest.raises(PrecisionMismatch):
        k(jnp.zeros((2, 1)))


def test_parameter_precision_mismatch():
    with pytest.raises(PrecisionMismatch):
        gpk.RBF(lengthscales=jnp.array(1.0, dtype=jnp.float32), variance=1.0, precision="float64")


def test_float32_floor_is_normal():
    p = gpk.Precision.from_dtype("float32")
    assert p.distance_floor == float(jnp.finfo(jnp.float32).tiny)
    assert gpk.Precision.from_dtype("float64").distance_floor == 1e-40
    with pytest.raises(ValueError):
        gpk.Precision.from_dtype("int32")


def test_numpy_float64_inputs_need_a_cast():
    import numpy as np

    k = gpk.RBF(lengthscales=1.0, variance=1.0, precision="float32")
    X = np.array([[0.0], [1.0]])
    with pytest.raises(PrecisionMismatch):
        k(X)
    assert k(X.astype(np.float32)).dtype == jnp.float32
