# /// script
# requires-python = ">=3.11"
# dependencies = ["typer>=0.9.0", "ukftrack"]
#
# [tool.uv.sources]
# ukftrack = { path = ".." }
# ///
"""Replay a sensor fusion log through the unscented tracker.

Loads a tab-separated log of position (``L``) and range/bearing (``R``)
observations, feeds them to :class:`ukftrack.tracking.UnscentedTracker`
in file order and reports the NIS exceedance rate per sensor. When every
row of the log carries ground truth it also reports the RMSE of
``[px, py, vx, vy]``.

Requires ukftrack to be installed (``uv pip install -e .`` from the repo root).

Usage:
    uv run examples/replay_sensor_log.py LOG_FILE [OPTIONS]

Examples:
    # Fuse both sensors with the default process noise
    uv run examples/replay_sensor_log.py data/obj_pose-laser-radar-synthetic-input.txt

    # Position sensor only, tighter yaw acceleration noise
    uv run examples/replay_sensor_log.py data/log.txt --no-range-bearing --std-yawdd 0.5
"""

import logging
import sys
import time
from pathlib import Path
from typing import Annotated

import jax.numpy as jnp
import typer

from ukftrack import set_dtype
from ukftrack.constants import N_Z_POSITION, N_Z_RANGE_BEARING
from ukftrack.datasets import (
    ground_truth_from_dataframe,
    has_ground_truth,
    load_sensor_log,
    observations_from_dataframe,
)
from ukftrack.diagnostics import nis_exceedance_rate, rmse, state_to_cartesian
from ukftrack.tracking import SensorType, TrackerConfig, UnscentedTracker

set_dtype(jnp.float64)


def main(
    log_file: Annotated[Path, typer.Argument(help="Sensor log to replay")],
    position: Annotated[bool, typer.Option(help="Fuse position sensor observations")] = True,
    range_bearing: Annotated[
        bool, typer.Option(help="Fuse range/bearing sensor observations")
    ] = True,
    std_a: Annotated[float, typer.Option(help="Acceleration noise std [m/s^2]")] = 1.0,
    std_yawdd: Annotated[float, typer.Option(help="Yaw acceleration noise std [rad/s^2]")] = 1.0,
    verbose: Annotated[bool, typer.Option(help="Log every NIS value")] = False,
) -> None:
    """Replay LOG_FILE through the tracker and report accuracy and consistency."""
    logging.basicConfig(level=logging.DEBUG if verbose else logging.INFO)

    df = load_sensor_log(log_file)
    observations = observations_from_dataframe(df)
    truth = ground_truth_from_dataframe(df) if has_ground_truth(df) else None

    config = TrackerConfig(
        use_position=position,
        use_range_bearing=range_bearing,
        std_a=std_a,
        std_yawdd=std_yawdd,
    )
    tracker = UnscentedTracker(config)

    t0 = time.perf_counter()
    estimates = []
    truth_rows = []
    for i, obs in enumerate(observations):
        tracker.process_measurement(obs)
        if tracker.is_initialized and truth is not None:
            estimates.append(state_to_cartesian(tracker.x))
            truth_rows.append(truth[i])
    elapsed = time.perf_counter() - t0

    if not tracker.is_initialized:
        print("ERROR: No observation initialized the track. Exiting.")
        sys.exit(1)

    print(f"Processed {len(observations)} observations in {elapsed:.1f}s")

    if truth is None:
        print("No ground truth in log, skipping RMSE")
    else:
        error = rmse(jnp.stack(estimates), jnp.stack(truth_rows))
        print("RMSE [px, py, vx, vy]: " + ", ".join(f"{e:.4f}" for e in error.tolist()))

    for sensor, dof in (
        (SensorType.POSITION, N_Z_POSITION),
        (SensorType.RANGE_BEARING, N_Z_RANGE_BEARING),
    ):
        history = tracker.nis_history(sensor)
        rate = nis_exceedance_rate(jnp.asarray(history), dof)
        print(f"{sensor.name}: {len(history)} updates, {rate:.1%} NIS above 95% bound")


if __name__ == "__main__":
    typer.run(main)
