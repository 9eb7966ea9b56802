"""Tests for the position and range/bearing measurement models."""

import jax
import jax.numpy as jnp
import pytest

from ukftrack.measurements import (
    position_measurement,
    position_noise,
    range_bearing_measurement,
    range_bearing_noise,
)


class TestPositionMeasurement:
    def test_projection(self):
        z = position_measurement(jnp.array([5.0, 3.0, 0.2, 1.0, 0.1]))
        assert jnp.array_equal(z, jnp.array([5.0, 3.0]))

    def test_default_noise(self):
        R = position_noise()
        assert R.shape == (2, 2)
        assert jnp.allclose(R, jnp.diag(jnp.array([0.0225, 0.0225])))

    def test_custom_noise(self):
        R = position_noise(0.5, 2.0)
        assert float(R[0, 0]) == pytest.approx(0.25)
        assert float(R[1, 1]) == pytest.approx(4.0)
        assert float(R[0, 1]) == 0.0


class TestRangeBearingMeasurement:
    def test_values(self):
        z = range_bearing_measurement(jnp.array([3.0, 4.0, 1.0, 0.0, 0.0]))
        assert float(z[0]) == pytest.approx(5.0)
        assert float(z[1]) == pytest.approx(float(jnp.arctan2(4.0, 3.0)))
        assert float(z[2]) == pytest.approx(0.6)

    def test_receding_object(self):
        """Moving straight away from the sensor, range rate equals speed."""
        z = range_bearing_measurement(jnp.array([0.0, 2.0, 3.0, jnp.pi / 2, 0.0]))
        assert float(z[1]) == pytest.approx(jnp.pi / 2)
        assert float(z[2]) == pytest.approx(3.0)

    def test_bearing_range(self):
        z = range_bearing_measurement(jnp.array([-1.0, 0.0, 1.0, 0.0, 0.0]))
        assert float(z[1]) == pytest.approx(jnp.pi)
        assert float(z[2]) == pytest.approx(-1.0)

    def test_origin_finite(self):
        """An object at the sensor gives a finite measurement."""
        z = range_bearing_measurement(jnp.array([0.0, 0.0, 5.0, 0.3, 0.0]))
        assert jnp.all(jnp.isfinite(z))
        assert float(z[0]) == 0.0
        assert float(z[2]) == 0.0

    def test_near_origin_bounded(self):
        z = range_bearing_measurement(jnp.array([1e-9, -1e-9, 2.0, 0.0, 0.0]))
        assert jnp.all(jnp.isfinite(z))
        assert abs(float(z[2])) <= 2.0

    def test_vmap(self):
        states = jnp.array(
            [[3.0, 4.0, 1.0, 0.0, 0.0], [0.0, 2.0, 3.0, jnp.pi / 2, 0.0]]
        )
        z = jax.vmap(range_bearing_measurement)(states)
        assert z.shape == (2, 3)
        assert jnp.allclose(z[:, 0], jnp.array([5.0, 2.0]))

    def test_default_noise(self):
        R = range_bearing_noise()
        assert R.shape == (3, 3)
        assert jnp.allclose(jnp.diag(R), jnp.array([0.09, 0.0009, 0.09]))
        assert float(jnp.sum(jnp.abs(R - jnp.diag(jnp.diag(R))))) == 0.0
