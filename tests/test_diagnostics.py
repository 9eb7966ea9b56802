"""Tests for ukftrack.diagnostics."""

import jax.numpy as jnp
import pytest

from ukftrack.diagnostics import (
    nis_exceedance_rate,
    nis_threshold,
    rmse,
    state_to_cartesian,
)


class TestNISThreshold:
    def test_known_values(self):
        assert nis_threshold(2) == pytest.approx(5.991)
        assert nis_threshold(3) == pytest.approx(7.815)

    @pytest.mark.parametrize("dof", [0, 6, -1])
    def test_untabulated_raises(self, dof):
        with pytest.raises(ValueError, match="degrees of freedom"):
            nis_threshold(dof)


class TestNISExceedanceRate:
    def test_rate(self):
        values = [1.0, 2.0, 6.5, 10.0]
        assert nis_exceedance_rate(values, 2) == pytest.approx(0.5)

    def test_dof_changes_bound(self):
        values = [6.5, 7.0, 8.0]
        assert nis_exceedance_rate(values, 3) == pytest.approx(1.0 / 3.0)

    def test_empty(self):
        assert nis_exceedance_rate([], 2) == 0.0


class TestStateToCartesian:
    def test_single(self):
        out = state_to_cartesian(jnp.array([1.0, 2.0, 2.0, jnp.pi / 2, 0.1]))
        assert jnp.allclose(out, jnp.array([1.0, 2.0, 0.0, 2.0]), atol=1e-12)

    def test_batch(self):
        x = jnp.array([[0.0, 0.0, 1.0, 0.0, 0.0], [1.0, 1.0, 2.0, jnp.pi, 0.0]])
        out = state_to_cartesian(x)
        assert out.shape == (2, 4)
        assert jnp.allclose(out[1], jnp.array([1.0, 1.0, -2.0, 0.0]), atol=1e-12)


class TestRMSE:
    def test_values(self):
        est = jnp.array([[1.0, 0.0], [3.0, 0.0]])
        truth = jnp.array([[0.0, 0.0], [0.0, 0.0]])
        out = rmse(est, truth)
        assert jnp.allclose(out, jnp.array([jnp.sqrt(5.0), 0.0]))

    def test_shape_mismatch(self):
        with pytest.raises(ValueError, match="does not match"):
            rmse(jnp.zeros((3, 4)), jnp.zeros((2, 4)))

    def test_empty(self):
        with pytest.raises(ValueError, match="empty"):
            rmse(jnp.zeros((0, 4)), jnp.zeros((0, 4)))
