"""Unscented Kalman filter building blocks for CTRV tracking.

Available components:

- :class:`FilterState` -- Filter state (estimate and covariance)
- :class:`ProcessNoise` -- Acceleration noise of the motion model
- :class:`PredictResult` -- Prediction result with propagated sigma points
- :class:`FilterResult` -- Update result with diagnostics
- :func:`sigma_weights` -- Sigma point weights
- :func:`augment_state` -- State augmentation with process noise
- :func:`generate_sigma_points` -- Cholesky-based sigma point generation
- :func:`unscented_mean_covariance` -- Weighted sigma point recombination
- :func:`cross_covariance` -- State/measurement cross-covariance
- :func:`ukf_predict` -- UKF prediction through the CTRV model
- :func:`ukf_update` -- UKF measurement update
- :func:`initialize_from_position` -- Track start from a position fix
- :func:`initialize_from_range_bearing` -- Track start from a radar return

All filter functions are compatible with ``jax.jit`` and ``jax.lax.scan``.
"""

from ukftrack.estimation._types import (
    FilterResult,
    FilterState,
    PredictResult,
    ProcessNoise,
)
from ukftrack.estimation.initialization import (
    initialize_from_position,
    initialize_from_range_bearing,
)
from ukftrack.estimation.sigma_points import (
    augment_state,
    generate_sigma_points,
    sigma_weights,
)
from ukftrack.estimation.ukf import ukf_predict, ukf_update
from ukftrack.estimation.unscented import (
    cross_covariance,
    sigma_deviations,
    unscented_mean_covariance,
)

__all__ = [
    "FilterState",
    "ProcessNoise",
    "PredictResult",
    "FilterResult",
    "sigma_weights",
    "augment_state",
    "generate_sigma_points",
    "sigma_deviations",
    "unscented_mean_covariance",
    "cross_covariance",
    "ukf_predict",
    "ukf_update",
    "initialize_from_position",
    "initialize_from_range_bearing",
]
