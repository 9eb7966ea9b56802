"""Sigma point generation for the augmented CTRV state.

The prediction step augments the 5-element state with two zero-mean
process noise components (longitudinal and yaw acceleration) and draws
``2 * 7 + 1 = 15`` sigma points from the augmented distribution:

- point 0 is the augmented mean,
- points ``1..n`` are ``mean + sqrt(lambda + n) * L[:, i]``,
- points ``n+1..2n`` are ``mean - sqrt(lambda + n) * L[:, i]``,

where ``L`` is the lower Cholesky factor of the augmented covariance and
``lambda = 3 - n``. With the matching weights from :func:`sigma_weights`
the weighted mean and covariance of the points reproduce the input
moments exactly, so no Jacobian of the motion model is ever required.
"""

from __future__ import annotations

import jax.numpy as jnp
from jax import Array
from jax.typing import ArrayLike

from ukftrack.config import get_dtype, get_regularization_epsilon
from ukftrack.constants import LAMBDA, N_AUG, N_X
from ukftrack.estimation._types import FilterState, ProcessNoise


def sigma_weights(n_aug: int = N_AUG, lam: float = LAMBDA) -> Array:
    """Compute the sigma point weights.

    The centre weight is ``lam / (lam + n_aug)`` and every other weight is
    ``0.5 / (lam + n_aug)``. The same weights are used for means and
    covariances, and they sum to one. For the default ``lam = -4`` the
    centre weight is negative.

    Args:
        n_aug: Dimension of the sampled distribution. Default: 7.
        lam: Spreading parameter. Default: ``3 - n_aug``.

    Returns:
        jax.Array: Weights of shape ``(2 * n_aug + 1,)``.

    Examples:
        ```python
        from ukftrack.estimation import sigma_weights
        w = sigma_weights()
        w[0]  # -4/3
        ```
    """
    dtype = get_dtype()
    w0 = jnp.array([lam / (lam + n_aug)], dtype=dtype)
    wi = jnp.full(2 * n_aug, 0.5 / (lam + n_aug), dtype=dtype)
    return jnp.concatenate([w0, wi])


def augment_state(
    filter_state: FilterState,
    process_noise: ProcessNoise,
) -> tuple[Array, Array]:
    """Append the process noise dimensions to the state.

    Args:
        filter_state: Current filter state ``(x, P)`` with ``x`` of shape
            ``(5,)``.
        process_noise: Acceleration and yaw acceleration noise standard
            deviations.

    Returns:
        A tuple ``(x_aug, P_aug)`` where ``x_aug`` has shape ``(7,)`` with
        zeros in the two noise slots, and ``P_aug`` has shape ``(7, 7)``
        with ``P`` in the top-left block, ``std_a**2`` and ``std_yawdd**2``
        on the last two diagonal entries and zeros elsewhere.
    """
    dtype = get_dtype()
    x = jnp.asarray(filter_state.x, dtype=dtype)
    P = jnp.asarray(filter_state.P, dtype=dtype)

    x_aug = jnp.concatenate([x, jnp.zeros(2, dtype=dtype)])

    noise_var = jnp.array(
        [process_noise.std_a**2, process_noise.std_yawdd**2], dtype=dtype
    )
    P_aug = jnp.zeros((N_AUG, N_AUG), dtype=dtype)
    P_aug = P_aug.at[:N_X, :N_X].set(P)
    P_aug = P_aug.at[N_X:, N_X:].set(jnp.diag(noise_var))

    return x_aug, P_aug


def generate_sigma_points(
    x: ArrayLike,
    P: ArrayLike,
    lam: float = LAMBDA,
) -> tuple[Array, Array]:
    """Generate ``2n + 1`` sigma points from a mean and covariance.

    Args:
        x: Mean of shape ``(n,)``.
        P: Covariance of shape ``(n, n)``.
        lam: Spreading parameter. Default: ``3 - 7``.

    Returns:
        A tuple ``(points, ok)`` where:

        - ``points``: Sigma points of shape ``(2n+1, n)``, one per row.
        - ``ok``: Boolean scalar, ``False`` when ``P`` is not positive
          definite and the Cholesky factor (hence ``points``) is NaN.

    Examples:
        ```python
        import jax.numpy as jnp
        from ukftrack.estimation import generate_sigma_points

        points, ok = generate_sigma_points(jnp.zeros(7), jnp.eye(7))
        points.shape  # (15, 7)
        ```
    """
    dtype = get_dtype()
    x = jnp.asarray(x, dtype=dtype)
    P = jnp.asarray(P, dtype=dtype)
    n = x.shape[0]

    eps = get_regularization_epsilon()
    L = jnp.linalg.cholesky(P + eps * jnp.eye(n, dtype=dtype))
    ok = jnp.all(jnp.isfinite(L))

    # Row i of spread is column i of L scaled by sqrt(lambda + n)
    spread = jnp.sqrt(jnp.asarray(lam + n, dtype=dtype)) * L.T
    points = jnp.concatenate(
        [x[None, :], x[None, :] + spread, x[None, :] - spread], axis=0
    )

    return points, ok
