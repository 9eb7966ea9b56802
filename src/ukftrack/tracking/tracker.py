"""Stateful tracker feeding timestamped observations through the UKF.

:class:`UnscentedTracker` owns the filter's belief (mean and covariance),
its fixed configuration and the time of the last accepted observation.
Each call to :meth:`UnscentedTracker.process_measurement` is one atomic
unit of work:

1. the first accepted observation initializes the track and returns;
2. every later one runs :func:`~ukftrack.estimation.ukf_predict` over the
   elapsed time, then :func:`~ukftrack.estimation.ukf_update` with the
   measurement model of the observation's sensor.

The new belief is committed only after both steps succeed, so a caller
never sees a prediction without its correction. Calls are serialized by
an internal lock.
"""

from __future__ import annotations

import logging
import threading
from collections import deque

import jax.numpy as jnp
from jax import Array

from ukftrack.config import get_dtype
from ukftrack.constants import BEARING_INDEX, LAMBDA, N_AUG
from ukftrack.estimation import (
    FilterResult,
    FilterState,
    initialize_from_position,
    initialize_from_range_bearing,
    sigma_weights,
    ukf_predict,
    ukf_update,
)
from ukftrack.exceptions import ConfigurationError, NumericalSingularityError
from ukftrack.measurements import position_measurement, range_bearing_measurement
from ukftrack.tracking._types import Observation, SensorType
from ukftrack.tracking.config import TrackerConfig

logger = logging.getLogger(__name__)

_INITIALIZERS = {
    SensorType.POSITION: initialize_from_position,
    SensorType.RANGE_BEARING: initialize_from_range_bearing,
}

_MEASUREMENT_MODELS = {
    SensorType.POSITION: (position_measurement, None),
    SensorType.RANGE_BEARING: (range_bearing_measurement, BEARING_INDEX),
}


class UnscentedTracker:
    """Single-object CTRV tracker fusing position and range/bearing sensors.

    Thread-safe via internal lock.

    Args:
        config: Tracker configuration. Default: ``TrackerConfig()``.

    Examples:
        ```python
        from ukftrack.tracking import Observation, SensorType, UnscentedTracker

        tracker = UnscentedTracker()
        tracker.process_measurement(Observation(SensorType.POSITION, 0, [5.0, 3.0]))
        result = tracker.process_measurement(
            Observation(SensorType.POSITION, 100_000, [5.02, 3.01])
        )
        tracker.x, result.nis
        ```
    """

    def __init__(self, config: TrackerConfig | None = None) -> None:
        self._config = config if config is not None else TrackerConfig()
        self._weights = sigma_weights(N_AUG, LAMBDA)
        self._process_noise = self._config.process_noise
        self._noise = {
            sensor: self._config.measurement_noise(sensor) for sensor in SensorType
        }
        self._state: FilterState | None = None
        self._last_timestamp: int | None = None
        self._last_result: FilterResult | None = None
        self._nis_history: dict[SensorType, deque[float]] = {
            sensor: deque(maxlen=self._config.nis_history_size) for sensor in SensorType
        }
        self._lock = threading.Lock()

    @property
    def config(self) -> TrackerConfig:
        """Configuration fixed at construction."""
        return self._config

    @property
    def weights(self) -> Array:
        """Sigma point weights, shape ``(15,)``."""
        return self._weights

    @property
    def is_initialized(self) -> bool:
        """Whether an observation has started the track."""
        return self._state is not None

    @property
    def last_timestamp(self) -> int | None:
        """Timestamp of the last accepted observation, ``None`` before initialization."""
        return self._last_timestamp

    @property
    def state(self) -> FilterState | None:
        """Current filter state, ``None`` before initialization."""
        return self._state

    @property
    def x(self) -> Array | None:
        """Current state mean ``[px, py, v, yaw, yaw_rate]``."""
        return None if self._state is None else self._state.x

    @property
    def P(self) -> Array | None:
        """Current state covariance, shape ``(5, 5)``."""
        return None if self._state is None else self._state.P

    @property
    def last_result(self) -> FilterResult | None:
        """Result of the most recent measurement update."""
        return self._last_result

    @property
    def nis(self) -> float | None:
        """Normalized innovation squared of the most recent update."""
        if self._last_result is None:
            return None
        return float(self._last_result.nis)

    def nis_history(self, sensor_type: SensorType) -> list[float]:
        """NIS values of the most recent updates from *sensor_type*, oldest first.

        At most ``config.nis_history_size`` values are kept per sensor.
        """
        return list(self._nis_history[SensorType(sensor_type)])

    def process_measurement(self, observation: Observation) -> FilterResult | None:
        """Fold one observation into the belief.

        Observations from a disabled sensor and observations older than
        the last accepted one are ignored.

        Args:
            observation: Timestamped measurement.

        Returns:
            FilterResult | None: The update result, or ``None`` when the
                observation initialized the track or was ignored.

        Raises:
            ConfigurationError: If the measurement length does not match
                the sensor type or a component is not finite.
            NumericalSingularityError: If the state covariance cannot be
                factored or the innovation covariance is not positive
                definite. The belief is left as it was before the call.
        """
        with self._lock:
            return self._process(observation)

    def _process(self, observation: Observation) -> FilterResult | None:
        sensor = SensorType(observation.sensor_type)

        if not self._config.is_enabled(sensor):
            logger.debug("Ignoring %s observation at %s: sensor disabled", sensor.name, observation.timestamp)
            return None

        z = self._validate_measurement(sensor, observation.z)

        if self._state is None:
            self._state = _INITIALIZERS[sensor](z)
            self._last_timestamp = observation.timestamp
            logger.info("Track initialized from %s observation at %s", sensor.name, observation.timestamp)
            return None

        if observation.timestamp < self._last_timestamp:
            logger.debug(
                "Ignoring %s observation at %s: older than last accepted %s",
                sensor.name,
                observation.timestamp,
                self._last_timestamp,
            )
            return None

        dt = (observation.timestamp - self._last_timestamp) * self._config.timestamp_scale

        prediction = ukf_predict(self._state, dt, self._process_noise, self._weights)
        if not bool(prediction.factorization_ok):
            raise NumericalSingularityError(
                f"State covariance is not positive definite at timestamp {observation.timestamp}"
            )

        measurement_fn, angle_index = _MEASUREMENT_MODELS[sensor]
        result = ukf_update(
            prediction.state,
            prediction.sigma_points,
            z,
            measurement_fn,
            self._noise[sensor],
            self._weights,
            angle_index,
        )
        if not bool(result.valid):
            raise NumericalSingularityError(
                f"Innovation covariance of {sensor.name} update is not positive definite "
                f"at timestamp {observation.timestamp}"
            )

        self._state = result.state
        self._last_timestamp = observation.timestamp
        self._last_result = result
        nis = float(result.nis)
        self._nis_history[sensor].append(nis)
        logger.debug("NIS %s = %.4f at %s", sensor.name, nis, observation.timestamp)

        return result

    @staticmethod
    def _validate_measurement(sensor: SensorType, z) -> Array:
        z = jnp.asarray(z, dtype=get_dtype())
        if z.shape != (sensor.measurement_size,):
            raise ConfigurationError(
                f"{sensor.name} measurement must have shape ({sensor.measurement_size},), got {z.shape}"
            )
        if not bool(jnp.all(jnp.isfinite(z))):
            raise ConfigurationError(f"{sensor.name} measurement must be finite, got {z.tolist()}")
        return z
