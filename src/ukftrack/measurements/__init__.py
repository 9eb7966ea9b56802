"""Measurement models for the tracking filter.

Each sensor type is implemented in its own sub-module and provides a
measurement function mapping a CTRV state to the expected measurement and
a constructor for the sensor's noise covariance.

Available sensor models:

- :func:`position_measurement` -- Cartesian position sensor
- :func:`position_noise` -- Position sensor noise covariance
- :func:`range_bearing_measurement` -- Range, bearing and range-rate sensor
- :func:`range_bearing_noise` -- Range/bearing sensor noise covariance

All measurement functions are compatible with ``ukf_update`` from
:mod:`ukftrack.estimation`.
"""

from ukftrack.measurements.position import position_measurement, position_noise
from ukftrack.measurements.range_bearing import (
    range_bearing_measurement,
    range_bearing_noise,
)

__all__ = [
    "position_measurement",
    "position_noise",
    "range_bearing_measurement",
    "range_bearing_noise",
]
