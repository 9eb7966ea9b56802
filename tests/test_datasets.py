"""Tests for the sensor log loader."""

import jax.numpy as jnp
import polars as pl
import pytest

from ukftrack.datasets import (
    ground_truth_from_dataframe,
    has_ground_truth,
    load_sensor_log,
    observations_from_dataframe,
)
from ukftrack.tracking import SensorType

_LOG = (
    "L\t3.122427e-01\t5.803398e-01\t1477010443000000\t6.000000e-01\t6.000000e-01\t5.199937e+00\t0\t0\t6.911322e-03\n"
    "R\t1.014892e+00\t5.543292e-01\t4.892807e+00\t1477010443050000\t8.599968e-01\t6.000449e-01\t5.199747e+00\t1.796856e-03\t3.455661e-04\t1.382155e-02\n"
    "\n"
    "L\t1.173848e+00\t4.810729e-01\t1477010443100000\t1.119984e+00\t6.002246e-01\t5.199429e+00\t5.389957e-03\n"
)


@pytest.fixture
def log_file(tmp_path):
    path = tmp_path / "obj_pose-laser-radar.txt"
    path.write_text(_LOG)
    return path


class TestLoadSensorLog:
    def test_columns(self, log_file):
        df = load_sensor_log(log_file)
        assert isinstance(df, pl.DataFrame)
        assert df.columns == [
            "sensor", "timestamp", "z0", "z1", "z2", "gt_px", "gt_py", "gt_vx", "gt_vy",
        ]
        assert len(df) == 3

    def test_values(self, log_file):
        df = load_sensor_log(log_file)
        assert df["sensor"].to_list() == ["L", "R", "L"]
        assert df["timestamp"].to_list() == [
            1477010443000000, 1477010443050000, 1477010443100000,
        ]
        assert df["z0"][1] == pytest.approx(1.014892)
        assert df["z2"][1] == pytest.approx(4.892807)
        assert df["z2"][0] is None
        assert df["gt_px"][1] == pytest.approx(0.8599968)

    def test_without_ground_truth(self, tmp_path):
        path = tmp_path / "log.txt"
        path.write_text("L 1.0 2.0 100\nR 5.0 0.1 1.0 200\n")
        df = load_sensor_log(path)
        assert df["gt_px"].null_count() == 2

    def test_logs_counts(self, log_file, caplog):
        with caplog.at_level("INFO", logger="ukftrack.datasets._sensor_log"):
            load_sensor_log(log_file)
        assert "2 position, 1 range/bearing" in caplog.text

    def test_missing_file(self, tmp_path):
        with pytest.raises(FileNotFoundError):
            load_sensor_log(tmp_path / "missing.txt")

    def test_unknown_tag(self, tmp_path):
        path = tmp_path / "log.txt"
        path.write_text("X 1.0 2.0 100\n")
        with pytest.raises(ValueError, match="unknown sensor tag"):
            load_sensor_log(path)

    def test_truncated_row(self, tmp_path):
        path = tmp_path / "log.txt"
        path.write_text("R 5.0 0.1 1.0\n")
        with pytest.raises(ValueError, match="Line 1"):
            load_sensor_log(path)

    def test_non_numeric(self, tmp_path):
        path = tmp_path / "log.txt"
        path.write_text("L 1.0 2.0 100\nL abc 2.0 200\n")
        with pytest.raises(ValueError, match="Line 2"):
            load_sensor_log(path)

    def test_partial_ground_truth(self, tmp_path):
        path = tmp_path / "log.txt"
        path.write_text("L 1.0 2.0 100 0.5\n")
        with pytest.raises(ValueError, match="ground truth"):
            load_sensor_log(path)


class TestConversions:
    def test_observations(self, log_file):
        obs = observations_from_dataframe(load_sensor_log(log_file))
        assert len(obs) == 3
        assert obs[0].sensor_type is SensorType.POSITION
        assert len(obs[0].z) == 2
        assert obs[1].sensor_type is SensorType.RANGE_BEARING
        assert len(obs[1].z) == 3
        assert obs[1].timestamp == 1477010443050000

    def test_ground_truth(self, log_file):
        truth = ground_truth_from_dataframe(load_sensor_log(log_file))
        assert truth.shape == (3, 4)
        assert float(truth[0, 2]) == pytest.approx(5.199937)
        assert jnp.all(jnp.isfinite(truth))

    def test_has_ground_truth(self, log_file, tmp_path):
        assert has_ground_truth(load_sensor_log(log_file))

        path = tmp_path / "log.txt"
        path.write_text("L 1.0 2.0 100 0.5 0.5 1.0 0.0\nR 5.0 0.1 1.0 200\n")
        assert not has_ground_truth(load_sensor_log(path))

    def test_ground_truth_missing(self, tmp_path):
        path = tmp_path / "log.txt"
        path.write_text("L 1.0 2.0 100\n")
        with pytest.raises(ValueError, match="without ground truth"):
            ground_truth_from_dataframe(load_sensor_log(path))
