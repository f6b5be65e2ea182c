"""Shared fixtures for tests."""

import jax

# numeric checks (PSD, closed forms) run in float64
jax.config.update("jax_enable_x64", True)

import pytest
import jax.numpy as jnp
import jax.random as random


@pytest.fixture
def rng_key():
    """Random number generator key."""
    return random.PRNGKey(42)


@pytest.fixture
def sample_data_2d(rng_key):
    """Two input batches with 3 features."""
    key1, key2 = random.split(rng_key)
    X = random.normal(key1, (10, 3))
    Z = random.normal(key2, (7, 3))
    return X, Z


@pytest.fixture
def sample_data_1d(rng_key):
    """One-feature inputs, for kernels that are only PSD in one dimension."""
    return 3.0 * random.uniform(rng_key, (12, 1))


@pytest.fixture
def batched_data(rng_key):
    """A batch of 2 input sets of 5 points, and an unbatched set of 4 points."""
    key1, key2 = random.split(rng_key)
    X = random.normal(key1, (2, 5, 3))
    Z = random.normal(key2, (4, 3))
    return X, Z


