"""Parsing utilities for sensor fusion log files.

A sensor log is a tab- or whitespace-separated text file with one
observation per line. The first field tags the sensor:

- ``L px py timestamp gt_px gt_py gt_vx gt_vy [gt_yaw gt_yaw_rate]``
- ``R rho phi rho_dot timestamp gt_px gt_py gt_vx gt_vy [gt_yaw gt_yaw_rate]``

Timestamps are integers (microseconds in the reference logs). The
ground-truth columns are optional as a group; when present they are
carried into the DataFrame for accuracy evaluation.
"""

from __future__ import annotations

import logging
from pathlib import Path

import jax.numpy as jnp
import polars as pl
from jax import Array

from ukftrack.config import get_dtype
from ukftrack.tracking import Observation, SensorType

logger = logging.getLogger(__name__)

_GROUND_TRUTH_COLUMNS = ("gt_px", "gt_py", "gt_vx", "gt_vy")


def _parse_line(fields: list[str], line_number: int) -> dict:
    tag = fields[0]
    try:
        sensor = SensorType(tag)
    except ValueError:
        raise ValueError(f"Line {line_number}: unknown sensor tag {tag!r}") from None

    n_z = sensor.measurement_size
    if len(fields) < n_z + 2:
        raise ValueError(
            f"Line {line_number}: {sensor.name} record needs at least {n_z + 2} fields, got {len(fields)}"
        )

    try:
        z = [float(v) for v in fields[1 : n_z + 1]]
        timestamp = int(fields[n_z + 1])
        truth = [float(v) for v in fields[n_z + 2 : n_z + 6]]
    except ValueError as exc:
        raise ValueError(f"Line {line_number}: {exc}") from None

    if truth and len(truth) != len(_GROUND_TRUTH_COLUMNS):
        raise ValueError(f"Line {line_number}: incomplete ground truth columns")

    row = {
        "sensor": str(sensor),
        "timestamp": timestamp,
        "z0": z[0],
        "z1": z[1],
        "z2": z[2] if n_z > 2 else None,
    }
    for col, value in zip(_GROUND_TRUTH_COLUMNS, truth or [None] * 4):
        row[col] = value
    return row


def load_sensor_log(filepath: str | Path) -> pl.DataFrame:
    """Load a sensor log into a Polars DataFrame.

    Args:
        filepath: Path to the log file.

    Returns:
        Polars DataFrame with columns ``sensor`` (``"L"`` or ``"R"``),
        ``timestamp``, ``z0``, ``z1``, ``z2`` (null for position rows),
        ``gt_px``, ``gt_py``, ``gt_vx``, ``gt_vy`` (null when absent), in
        file order.

    Raises:
        FileNotFoundError: If the file does not exist.
        ValueError: If a line has an unknown sensor tag, too few fields or
            a non-numeric value.
    """
    filepath = Path(filepath)
    if not filepath.exists():
        raise FileNotFoundError(f"Sensor log not found: {filepath}")

    logger.info("Loading sensor log from %s", filepath)

    rows: dict[str, list] = {
        col: [] for col in ("sensor", "timestamp", "z0", "z1", "z2", *_GROUND_TRUTH_COLUMNS)
    }
    with filepath.open("r", encoding="utf-8") as f:
        for line_number, line in enumerate(f, start=1):
            fields = line.split()
            if not fields:
                continue
            for col, value in _parse_line(fields, line_number).items():
                rows[col].append(value)

    df = pl.DataFrame(
        {
            "sensor": pl.Series(rows["sensor"], dtype=pl.Utf8),
            "timestamp": pl.Series(rows["timestamp"], dtype=pl.Int64),
            "z0": pl.Series(rows["z0"], dtype=pl.Float64),
            "z1": pl.Series(rows["z1"], dtype=pl.Float64),
            "z2": pl.Series(rows["z2"], dtype=pl.Float64),
            **{col: pl.Series(rows[col], dtype=pl.Float64) for col in _GROUND_TRUTH_COLUMNS},
        }
    )

    logger.info(
        "Loaded %d observations (%d position, %d range/bearing)",
        len(df),
        df.filter(pl.col("sensor") == str(SensorType.POSITION)).height,
        df.filter(pl.col("sensor") == str(SensorType.RANGE_BEARING)).height,
    )
    return df


def observations_from_dataframe(df: pl.DataFrame) -> list[Observation]:
    """Convert a sensor log DataFrame into tracker observations.

    Args:
        df: DataFrame returned by :func:`load_sensor_log`.

    Returns:
        List of :class:`~ukftrack.tracking.Observation` in row order.
    """
    observations = []
    for row in df.iter_rows(named=True):
        sensor = SensorType(row["sensor"])
        z = [row["z0"], row["z1"]]
        if sensor is SensorType.RANGE_BEARING:
            z.append(row["z2"])
        observations.append(Observation(sensor, row["timestamp"], z))
    return observations


def has_ground_truth(df: pl.DataFrame) -> bool:
    """Return whether every row of a sensor log DataFrame carries ground truth."""
    return df.select(list(_GROUND_TRUTH_COLUMNS)).null_count().sum_horizontal().item() == 0


def ground_truth_from_dataframe(df: pl.DataFrame) -> Array:
    """Extract the ground truth ``[px, py, vx, vy]`` of every row.

    Args:
        df: DataFrame returned by :func:`load_sensor_log`.

    Returns:
        jax.Array: Ground truth of shape ``(n, 4)``.

    Raises:
        ValueError: If any row has no ground truth.
    """
    if not has_ground_truth(df):
        raise ValueError("Sensor log has rows without ground truth")
    truth = df.select(list(_GROUND_TRUTH_COLUMNS))
    return jnp.asarray(truth.to_numpy(), dtype=get_dtype())
