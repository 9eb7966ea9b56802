"""Unscented Kalman Filter (UKF) predict and update functions for CTRV tracking.

Prediction augments the state with the two process noise components,
draws 15 sigma points, propagates each through the CTRV motion model via
``jax.vmap`` and recombines them into the predicted mean and covariance.

A measurement update does not draw new sigma points. It projects the
propagated sigma points returned by :func:`ukf_predict` into measurement
space, recombines them into the predicted measurement and innovation
covariance ``S``, and computes the Kalman gain from the state/measurement
cross-covariance. ``S`` is inverted through its Cholesky factor, which
also yields the normalized innovation squared (NIS) diagnostic.

Neither function raises on a singular covariance, so both stay
compatible with ``jax.jit`` and ``jax.lax.scan``. Instead they report the
failure in the ``factorization_ok`` / ``valid`` flag of their result,
and the caller decides how to surface it.
"""

from __future__ import annotations

from collections.abc import Callable

import jax
import jax.numpy as jnp
from jax.scipy.linalg import cho_factor, cho_solve
from jax import Array
from jax.typing import ArrayLike

from ukftrack.config import get_dtype
from ukftrack.constants import LAMBDA, N_AUG, YAW_INDEX
from ukftrack.estimation._types import (
    FilterResult,
    FilterState,
    PredictResult,
    ProcessNoise,
)
from ukftrack.estimation.sigma_points import (
    augment_state,
    generate_sigma_points,
    sigma_weights,
)
from ukftrack.estimation.unscented import cross_covariance, unscented_mean_covariance
from ukftrack.motion_models import ctrv_propagate
from ukftrack.utils import wrap_component

_DEFAULT_PROCESS_NOISE = ProcessNoise()


def ukf_predict(
    filter_state: FilterState,
    dt: ArrayLike,
    process_noise: ProcessNoise = _DEFAULT_PROCESS_NOISE,
    weights: ArrayLike | None = None,
    lam: float = LAMBDA,
) -> PredictResult:
    """Propagate the filter state forward by ``dt`` seconds.

    Args:
        filter_state: Current filter state ``(x, P)``.
        dt: Elapsed time since the last observation [s]. ``dt = 0`` is
            valid and leaves the mean unchanged.
        process_noise: Acceleration noise standard deviations.
            Default: ``ProcessNoise()``.
        weights: Sigma point weights of shape ``(15,)``. Computed from
            *lam* when omitted.
        lam: Sigma point spreading parameter. Default: ``-4``.

    Returns:
        PredictResult: Predicted state, the propagated sigma points of
            shape ``(15, 5)`` and the factorization flag.

    Examples:
        ```python
        import jax.numpy as jnp
        from ukftrack.estimation import FilterState, ukf_predict

        fs = FilterState(
            x=jnp.array([5.0, 3.0, 0.2, 0.0, 0.0]),
            P=jnp.diag(jnp.array([0.01, 0.01, 1.0, 1.0, 1.0])),
        )
        pred = ukf_predict(fs, 0.1)
        pred.state.x  # predicted mean
        ```
    """
    dtype = get_dtype()
    if weights is None:
        weights = sigma_weights(N_AUG, lam)
    weights = jnp.asarray(weights, dtype=dtype)

    x_aug, P_aug = augment_state(filter_state, process_noise)
    points, ok = generate_sigma_points(x_aug, P_aug, lam)

    propagated = ctrv_propagate(points, dt)

    x_pred, P_pred = unscented_mean_covariance(propagated, weights, YAW_INDEX)

    return PredictResult(
        state=FilterState(x=x_pred, P=P_pred),
        sigma_points=propagated,
        factorization_ok=ok,
    )


def ukf_update(
    filter_state: FilterState,
    sigma_points: ArrayLike,
    z: ArrayLike,
    measurement_fn: Callable[[Array], Array],
    R: ArrayLike,
    weights: ArrayLike | None = None,
    z_angle_index: int | None = None,
) -> FilterResult:
    """Incorporate a measurement into the predicted filter state.

    Args:
        filter_state: Predicted filter state ``(x_pred, P_pred)`` from
            :func:`ukf_predict`.
        sigma_points: Propagated sigma points of shape ``(15, 5)`` from
            the same :func:`ukf_predict` call.
        z: Measurement vector of shape ``(m,)``.
        measurement_fn: Measurement model ``h(x) -> z_pred`` applied to
            every sigma point via ``jax.vmap``.
        R: Measurement noise covariance of shape ``(m, m)``.
        weights: Sigma point weights of shape ``(15,)``. Default weights
            when omitted.
        z_angle_index: Measurement component holding an angle (the
            bearing), wrapped in every residual. ``None`` for purely
            Cartesian measurements.

    Returns:
        FilterResult: Updated state, innovation, innovation covariance,
            Kalman gain, NIS and the validity flag.

    Examples:
        ```python
        import jax.numpy as jnp
        from ukftrack.estimation import FilterState, ukf_predict, ukf_update
        from ukftrack.measurements import position_measurement, position_noise

        fs = FilterState(
            x=jnp.array([5.0, 3.0, 0.2, 0.0, 0.0]),
            P=jnp.diag(jnp.array([0.01, 0.01, 1.0, 1.0, 1.0])),
        )
        pred = ukf_predict(fs, 0.1)
        result = ukf_update(
            pred.state, pred.sigma_points, jnp.array([5.02, 3.01]),
            position_measurement, position_noise(),
        )
        ```
    """
    dtype = get_dtype()
    x = jnp.asarray(filter_state.x, dtype=dtype)
    P = jnp.asarray(filter_state.P, dtype=dtype)
    sigma_points = jnp.asarray(sigma_points, dtype=dtype)
    z = jnp.asarray(z, dtype=dtype)
    R = jnp.asarray(R, dtype=dtype)
    if weights is None:
        weights = sigma_weights()
    weights = jnp.asarray(weights, dtype=dtype)

    # Project sigma points into measurement space
    z_points = jax.vmap(measurement_fn)(sigma_points)

    # Predicted measurement and innovation covariance
    z_pred, S = unscented_mean_covariance(z_points, weights, z_angle_index)
    S = S + R

    # Cross-covariance between state and measurement
    T = cross_covariance(
        sigma_points, x, z_points, z_pred, weights, YAW_INDEX, z_angle_index
    )

    # Kalman gain K = T S^{-1} through the Cholesky factor of S
    S_factor = cho_factor(S, lower=True)
    valid = jnp.all(jnp.isfinite(S_factor[0]))
    K = cho_solve(S_factor, T.T).T

    innovation = wrap_component(z - z_pred, z_angle_index)

    x_upd = x + K @ innovation
    P_upd = P - K @ S @ K.T

    nis = innovation @ cho_solve(S_factor, innovation)

    return FilterResult(
        state=FilterState(x=x_upd, P=P_upd),
        innovation=innovation,
        innovation_covariance=S,
        kalman_gain=K,
        nis=nis,
        valid=valid,
    )
