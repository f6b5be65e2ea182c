"""
Compose kernels over feature groups and plot rows of the resulting covariance.

Inputs have two features: a time coordinate (feature 0) and a covariate
(feature 1). The prior is a smooth trend in time, a periodic component, and a
linear effect of the covariate that decays over time.
"""
import jax
import jax.numpy as jnp
import matplotlib.pyplot as plt

import gpkernels_jax as gpk

gpk.set_precision("float64")


def make_kernel():
    trend = gpk.Matern52(lengthscales=3.0, variance=1.0, active_dims=[0])
    seasonal = gpk.Periodic(period=1.0, lengthscale=0.7, variance=0.5) * gpk.RBF(
        lengthscales=5.0, variance=1.0, active_dims=[0]
    )
    covariate = gpk.Linear(variances=0.2, active_dims=[1]) * gpk.Exponential(
        lengthscales=4.0, variance=1.0, active_dims=[0]
    )
    return trend + seasonal + covariate + gpk.White(variance=1e-6)


def main():
    t = jnp.linspace(0.0, 6.0, 200)
    # Periodic spans both features, so the covariate is held constant
    X = jnp.stack([t, jnp.ones_like(t)], axis=-1)

    k = make_kernel()
    print(k)

    K = k(X)
    L = jnp.linalg.cholesky(K)
    samples = L @ jax.random.normal(jax.random.PRNGKey(0), (X.shape[0], 3))

    fig, axes = plt.subplots(1, 2, figsize=(10, 4))
    for i in (0, 50, 100):
        axes[0].plot(t, K[i], label=f"k(t, {float(t[i]):.1f})")
    axes[0].set_title("Covariance rows")
    axes[0].legend()

    axes[1].plot(t, samples)
    axes[1].set_title("Prior samples")
    fig.tight_layout()
    plt.show()


if __name__ == "__main__":
    main()
