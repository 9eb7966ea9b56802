"""Sensor log datasets for ukftrack.

Provides Polars loading of tab-separated sensor fusion logs and
conversion into tracker observations and ground truth arrays.

Typical usage::

    from ukftrack.datasets import load_sensor_log, observations_from_dataframe
    from ukftrack.tracking import UnscentedTracker

    df = load_sensor_log("obj_pose-laser-radar-synthetic-input.txt")
    tracker = UnscentedTracker()
    for obs in observations_from_dataframe(df):
        tracker.process_measurement(obs)
"""

from ukftrack.datasets._sensor_log import (
    ground_truth_from_dataframe,
    has_ground_truth,
    load_sensor_log,
    observations_from_dataframe,
)

__all__ = [
    "ground_truth_from_dataframe",
    "has_ground_truth",
    "load_sensor_log",
    "observations_from_dataframe",
]
