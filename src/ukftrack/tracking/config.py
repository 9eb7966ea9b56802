"""Tracker configuration.

:class:`TrackerConfig` is fixed at construction. It selects which
sensors feed the filter and holds the process and measurement noise. The
measurement noise values come from the sensor datasheets and are not
meant to be tuned; the process noise is the tuning knob.
"""

from __future__ import annotations

import math
from dataclasses import dataclass

from jax import Array

from ukftrack.constants import (
    NIS_HISTORY_SIZE,
    STD_A,
    STD_LASER_PX,
    STD_LASER_PY,
    STD_RADAR_BEARING,
    STD_RADAR_RANGE,
    STD_RADAR_RANGE_RATE,
    STD_YAWDD,
    US2S,
)
from ukftrack.estimation import ProcessNoise
from ukftrack.exceptions import ConfigurationError
from ukftrack.measurements import position_noise, range_bearing_noise
from ukftrack.tracking._types import SensorType


def _require_positive(name: str, value: float) -> None:
    if not (math.isfinite(value) and value > 0.0):
        raise ConfigurationError(f"{name} must be a positive finite number, got {value!r}")


def _require_non_negative(name: str, value: float) -> None:
    if not (math.isfinite(value) and value >= 0.0):
        raise ConfigurationError(f"{name} must be a non-negative finite number, got {value!r}")


@dataclass(frozen=True)
class TrackerConfig:
    """Configuration for :class:`~ukftrack.tracking.UnscentedTracker`.

    Args:
        use_position: Accept position sensor observations.
        use_range_bearing: Accept range/bearing sensor observations.
        std_a: Longitudinal acceleration noise std [m/s^2].
        std_yawdd: Yaw acceleration noise std [rad/s^2].
        std_px: Position sensor noise std along x [m].
        std_py: Position sensor noise std along y [m].
        std_range: Range noise std [m].
        std_bearing: Bearing noise std [rad].
        std_range_rate: Range-rate noise std [m/s].
        timestamp_scale: Seconds per timestamp unit. Default: ``1e-6``
            (microsecond timestamps).
        nis_history_size: Number of most recent NIS values kept per
            sensor. Default: 1000.

    Raises:
        ConfigurationError: If a noise value of an enabled sensor is not
            a positive finite number, a process noise value is negative or
            non-finite, *timestamp_scale* is not positive, or
            *nis_history_size* is not a positive integer.

    Examples:
        ```python
        from ukftrack.tracking import TrackerConfig
        config = TrackerConfig(std_a=2.0, std_yawdd=0.5)
        config.process_noise
        ```
    """

    use_position: bool = True
    use_range_bearing: bool = True

    # Process noise
    std_a: float = STD_A
    std_yawdd: float = STD_YAWDD

    # Position sensor noise
    std_px: float = STD_LASER_PX
    std_py: float = STD_LASER_PY

    # Range/bearing sensor noise
    std_range: float = STD_RADAR_RANGE
    std_bearing: float = STD_RADAR_BEARING
    std_range_rate: float = STD_RADAR_RANGE_RATE

    timestamp_scale: float = US2S
    nis_history_size: int = NIS_HISTORY_SIZE

    def __post_init__(self) -> None:
        _require_non_negative("std_a", self.std_a)
        _require_non_negative("std_yawdd", self.std_yawdd)
        _require_positive("timestamp_scale", self.timestamp_scale)
        if not (isinstance(self.nis_history_size, int) and self.nis_history_size > 0):
            raise ConfigurationError(
                f"nis_history_size must be a positive integer, got {self.nis_history_size!r}"
            )
        if self.use_position:
            _require_positive("std_px", self.std_px)
            _require_positive("std_py", self.std_py)
        if self.use_range_bearing:
            _require_positive("std_range", self.std_range)
            _require_positive("std_bearing", self.std_bearing)
            _require_positive("std_range_rate", self.std_range_rate)

    @property
    def process_noise(self) -> ProcessNoise:
        """Process noise of the CTRV model."""
        return ProcessNoise(std_a=self.std_a, std_yawdd=self.std_yawdd)

    def is_enabled(self, sensor_type: SensorType) -> bool:
        """Return whether observations from *sensor_type* are accepted."""
        if sensor_type is SensorType.POSITION:
            return self.use_position
        return self.use_range_bearing

    def measurement_noise(self, sensor_type: SensorType) -> Array:
        """Measurement noise covariance of *sensor_type*.

        Args:
            sensor_type: Sensor whose covariance to build.

        Returns:
            jax.Array: Diagonal covariance of shape ``(2, 2)`` or ``(3, 3)``.
        """
        if sensor_type is SensorType.POSITION:
            return position_noise(self.std_px, self.std_py)
        return range_bearing_noise(self.std_range, self.std_bearing, self.std_range_rate)

    @staticmethod
    def position_only() -> TrackerConfig:
        """Preset: only the position sensor feeds the filter.

        Returns:
            TrackerConfig: Configuration with the range/bearing sensor disabled.
        """
        return TrackerConfig(use_range_bearing=False)

    @staticmethod
    def range_bearing_only() -> TrackerConfig:
        """Preset: only the range/bearing sensor feeds the filter.

        Returns:
            TrackerConfig: Configuration with the position sensor disabled.
        """
        return TrackerConfig(use_position=False)
