"""Sequential single-object tracking.

Available components:

- :class:`SensorType` -- Position or range/bearing sensor tag
- :class:`Observation` -- One timestamped measurement
- :class:`TrackerConfig` -- Sensor selection and noise configuration
- :class:`UnscentedTracker` -- Stateful tracker running the UKF per observation
"""

from ukftrack.tracking._types import Observation, SensorType
from ukftrack.tracking.config import TrackerConfig
from ukftrack.tracking.tracker import UnscentedTracker

__all__ = [
    "SensorType",
    "Observation",
    "TrackerConfig",
    "UnscentedTracker",
]
