import jax
import jax.numpy as jnp
import optax

import gpkernels_jax as gpk
from gpkernels_jax import evaluate


def _kernel(log_ls, log_var):
    return gpk.Matern52(lengthscales=jnp.exp(log_ls), variance=jnp.exp(log_var)) + gpk.White(
        variance=1e-2
    )


def test_pytree_roundtrip():
    k = gpk.RBF(lengthscales=[1.0, 2.0], variance=1.0, active_dims=[0, 2]) * gpk.Bias(variance=2.0)

    leaves, treedef = jax.tree_util.tree_flatten(k)
    assert len(leaves) == 3

    k2 = jax.tree_util.tree_unflatten(treedef, leaves)
    assert isinstance(k2, gpk.Prod)
    assert k2.left.active_dims == (0, 2)

    # pytree map should work
    k3 = jax.tree_util.tree_map(lambda x: 2.0 * x, k)
    assert jnp.allclose(k3.right.params.variance, 4.0)


def test_jit_evaluate(sample_data_2d):
    X, Z = sample_data_2d
    k = gpk.RationalQuadratic(lengthscales=1.0, variance=1.0, alpha=0.5) + gpk.White(variance=0.1)

    f = jax.jit(lambda k, X: evaluate(k, X))
    assert jnp.allclose(f(k, X), k(X))

    g = jax.jit(lambda k, X, Z: evaluate(k, X, Z))
    assert jnp.allclose(g(k, X, Z), k(X, Z))


def test_grad_through_parameters(sample_data_2d):
    X, _ = sample_data_2d

    def loss(log_ls):
        return jnp.sum(_kernel(log_ls, 0.0)(X))

    g = jax.grad(loss)(0.0)
    assert jnp.isfinite(g)
    assert g > 0.0


def test_optax_step(sample_data_2d):
    X, _ = sample_data_2d
    y = jnp.sin(X[:, 0])

    def nll(params):
        K = _kernel(params["log_ls"], params["log_var"])(X)
        L = jnp.linalg.cholesky(K)
        alpha = jax.scipy.linalg.cho_solve((L, True), y)
        return 0.5 * y @ alpha + jnp.sum(jnp.log(jnp.diag(L)))

    params = {"log_ls": jnp.array(0.0), "log_var": jnp.array(0.0)}
    opt = optax.adam(1e-2)
    opt_state = opt.init(params)

    grads = jax.grad(nll)(params)
    updates, opt_state = opt.update(grads, opt_state)
    new_params = optax.apply_updates(params, updates)

    assert all(jnp.isfinite(v) for v in jax.tree_util.tree_leaves(new_params))
    assert not jnp.allclose(new_params["log_ls"], params["log_ls"])
