"""Observation types consumed by the tracker.

- :class:`SensorType`: Which sensor produced an observation. The values
  are the one-letter tags used in sensor log files.
- :class:`Observation`: One timestamped measurement.
"""

from __future__ import annotations

import enum
from typing import NamedTuple

from jax.typing import ArrayLike

from ukftrack.constants import N_Z_POSITION, N_Z_RANGE_BEARING


class SensorType(enum.StrEnum):
    """Sensor that produced an observation."""

    POSITION = "L"
    RANGE_BEARING = "R"

    @property
    def measurement_size(self) -> int:
        """Number of components in a measurement from this sensor."""
        if self is SensorType.POSITION:
            return N_Z_POSITION
        return N_Z_RANGE_BEARING


class Observation(NamedTuple):
    """A single sensor observation.

    Attributes:
        sensor_type: Sensor that produced the measurement.
        timestamp: Integer timestamp in the caller's unit, converted to
            seconds with :attr:`TrackerConfig.timestamp_scale`.
        z: Measurement vector, ``[px, py]`` for
            :attr:`SensorType.POSITION` and ``[rho, phi, rho_dot]`` for
            :attr:`SensorType.RANGE_BEARING`.
    """

    sensor_type: SensorType
    timestamp: int
    z: ArrayLike
