"""
ukftrack is a single-object unscented Kalman filter tracker implemented in JAX,
fusing position and range/bearing observations through a constant turn rate
and velocity motion model.
"""

from .config import set_dtype, get_dtype

from .exceptions import ConfigurationError, NumericalSingularityError

from .estimation import (
    FilterState,
    FilterResult,
    PredictResult,
    ProcessNoise,
    ukf_predict,
    ukf_update,
)

from .tracking import (
    Observation,
    SensorType,
    TrackerConfig,
    UnscentedTracker,
)

__all__ = [
    # Config
    "set_dtype",
    "get_dtype",
    # Exceptions
    "ConfigurationError",
    "NumericalSingularityError",
    # Estimation
    "FilterState",
    "FilterResult",
    "PredictResult",
    "ProcessNoise",
    "ukf_predict",
    "ukf_update",
    # Tracking
    "Observation",
    "SensorType",
    "TrackerConfig",
    "UnscentedTracker",
]
