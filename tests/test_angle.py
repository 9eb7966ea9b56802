"""Tests for the ukftrack.utils angle helpers."""

import jax
import jax.numpy as jnp
import pytest

from ukftrack.utils import angle_difference, wrap_angle, wrap_component


class TestWrapAngle:
    def test_inside_interval_unchanged(self):
        for a in (-3.0, -1.0, 0.0, 0.5, 3.0):
            assert float(wrap_angle(a)) == pytest.approx(a, abs=1e-12)

    def test_pi_stays_pi(self):
        assert float(wrap_angle(jnp.pi)) == pytest.approx(jnp.pi, abs=1e-12)

    def test_minus_pi_maps_to_pi(self):
        """The interval is (-pi, pi], so -pi wraps to +pi."""
        assert float(wrap_angle(-jnp.pi)) == pytest.approx(jnp.pi, abs=1e-12)

    def test_multiple_turns(self):
        assert float(wrap_angle(0.3 + 6.0 * jnp.pi)) == pytest.approx(0.3, abs=1e-9)
        assert float(wrap_angle(0.3 - 6.0 * jnp.pi)) == pytest.approx(0.3, abs=1e-9)

    def test_just_above_pi(self):
        assert float(wrap_angle(jnp.pi + 0.1)) == pytest.approx(-jnp.pi + 0.1, abs=1e-12)

    def test_array_range(self):
        angles = jnp.linspace(-20.0, 20.0, 401)
        wrapped = wrap_angle(angles)
        assert wrapped.shape == angles.shape
        assert jnp.all(wrapped > -jnp.pi)
        assert jnp.all(wrapped <= jnp.pi)
        # Same direction as the input
        assert jnp.allclose(jnp.cos(wrapped), jnp.cos(angles), atol=1e-9)
        assert jnp.allclose(jnp.sin(wrapped), jnp.sin(angles), atol=1e-9)

    def test_jit(self):
        wrapped = jax.jit(wrap_angle)(jnp.array([4.0, -4.0]))
        assert jnp.allclose(wrapped, jnp.array([4.0 - 2 * jnp.pi, -4.0 + 2 * jnp.pi]))


class TestAngleDifference:
    @pytest.mark.parametrize("eps", [1e-3, 0.01, 0.1])
    def test_bearings_across_branch_cut(self, eps):
        """Bearings pi - eps and -pi + eps are 2 eps apart, not 2 pi - 2 eps."""
        d = float(angle_difference(jnp.pi - eps, -jnp.pi + eps))
        assert abs(d) == pytest.approx(2 * eps, abs=1e-9)

        d_rev = float(angle_difference(-jnp.pi + eps, jnp.pi - eps))
        assert d_rev == pytest.approx(2 * eps, abs=1e-9)

    def test_plain_difference(self):
        assert float(angle_difference(0.5, 0.2)) == pytest.approx(0.3, abs=1e-12)


class TestWrapComponent:
    def test_none_is_identity(self):
        v = jnp.array([10.0, 10.0, 10.0])
        assert jnp.array_equal(wrap_component(v, None), v)

    def test_single_vector(self):
        v = jnp.array([10.0, 7.0, 10.0])
        out = wrap_component(v, 1)
        assert float(out[0]) == pytest.approx(10.0)
        assert float(out[1]) == pytest.approx(7.0 - 2 * jnp.pi)
        assert float(out[2]) == pytest.approx(10.0)

    def test_stack_of_vectors(self):
        v = jnp.array([[0.0, 4.0], [1.0, -4.0]])
        out = wrap_component(v, 1)
        assert jnp.allclose(out[:, 0], v[:, 0])
        assert jnp.allclose(out[:, 1], jnp.array([4.0 - 2 * jnp.pi, -4.0 + 2 * jnp.pi]))
