"""Type definitions for the unscented tracking filter.

Provides the core data types used across the estimation functions:

- :class:`FilterState`: Current filter state containing the state estimate
  and covariance matrix.
- :class:`ProcessNoise`: Standard deviations of the two acceleration noise
  terms appended to the state during prediction.
- :class:`PredictResult`: Output of a prediction step, carrying the
  propagated sigma points that every measurement update reuses.
- :class:`FilterResult`: Output of a measurement update step, containing
  the updated state plus diagnostic information for filter tuning.

All types are :class:`~typing.NamedTuple` instances, which JAX treats as
pytrees automatically. This means they work seamlessly with ``jax.jit``,
``jax.vmap``, and ``jax.lax`` control flow primitives.
"""

from __future__ import annotations

from typing import NamedTuple

from jax import Array

from ukftrack.constants import STD_A, STD_YAWDD


class FilterState(NamedTuple):
    """State of the tracking filter.

    Attributes:
        x: CTRV state estimate ``[px, py, v, yaw, yaw_rate]`` of shape
            ``(5,)``.
        P: Error covariance matrix of shape ``(5, 5)``. Must be symmetric
            positive semi-definite.
    """

    x: Array
    P: Array


class ProcessNoise(NamedTuple):
    """Process noise of the CTRV motion model.

    Attributes:
        std_a: Longitudinal acceleration noise standard deviation
            [m/s^2]. Default: 1.0.
        std_yawdd: Yaw acceleration noise standard deviation
            [rad/s^2]. Default: 1.0.
    """

    std_a: float = STD_A
    std_yawdd: float = STD_YAWDD


class PredictResult(NamedTuple):
    """Result of a prediction step.

    Attributes:
        state: Predicted :class:`FilterState`.
        sigma_points: Propagated sigma points of shape ``(15, 5)``. A
            measurement update projects these into measurement space
            instead of drawing new ones.
        factorization_ok: Boolean scalar, ``False`` when the augmented
            covariance had no Cholesky factor. The other fields are then
            NaN and must not be used.
    """

    state: FilterState
    sigma_points: Array
    factorization_ok: Array


class FilterResult(NamedTuple):
    """Result of a filter measurement update step.

    Attributes:
        state: Updated :class:`FilterState` after incorporating the
            measurement.
        innovation: Measurement residual ``z - z_pred`` of shape ``(m,)``,
            with angular components wrapped into ``(-pi, pi]``.
        innovation_covariance: Innovation covariance ``S`` of shape
            ``(m, m)``, measurement noise included.
        kalman_gain: Kalman gain matrix ``K`` of shape ``(5, m)``.
        nis: Normalized innovation squared
            ``innovation.T @ S^{-1} @ innovation``. Follows a chi-squared
            distribution with ``m`` degrees of freedom for a consistent
            filter.
        valid: Boolean scalar, ``False`` when ``S`` is not positive
            definite. The other fields are then NaN and must not be used.
    """

    state: FilterState
    innovation: Array
    innovation_covariance: Array
    kalman_gain: Array
    nis: Array
    valid: Array
