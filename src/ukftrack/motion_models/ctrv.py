"""Constant turn rate and velocity (CTRV) motion model.

The object moves at constant speed ``v`` along a circular arc with
constant turn rate ``yaw_rate`` between updates. Over an interval ``dt``
the deterministic part advances

- position along the arc ``v / yaw_rate * [sin(yaw + yaw_rate*dt) - sin(yaw),
  cos(yaw) - cos(yaw + yaw_rate*dt)]``, or along a straight line
  ``v * dt * [cos(yaw), sin(yaw)]`` when ``|yaw_rate| <= 1e-3``;
- heading by ``yaw_rate * dt``;

and leaves speed and turn rate unchanged. The longitudinal acceleration
noise ``nu_a`` and yaw acceleration noise ``nu_yawdd`` carried in the last
two components of an augmented state enter as

- ``0.5 * nu_a * dt**2 * [cos(yaw), sin(yaw)]`` on position,
- ``nu_a * dt`` on speed,
- ``0.5 * nu_yawdd * dt**2`` on heading,
- ``nu_yawdd * dt`` on turn rate.

The branch on the turn rate is a ``jnp.where`` so the model stays
traceable under ``jax.jit`` and ``jax.vmap``.
"""

from __future__ import annotations

import jax
import jax.numpy as jnp
from jax import Array
from jax.typing import ArrayLike

from ukftrack.config import get_dtype
from ukftrack.constants import YAW_RATE_EPSILON


def ctrv_transition(point: ArrayLike, dt: ArrayLike) -> Array:
    """Propagate one augmented CTRV state over ``dt`` seconds.

    Args:
        point: Augmented state ``[px, py, v, yaw, yaw_rate, nu_a, nu_yawdd]``
            of shape ``(7,)``.
        dt: Elapsed time [s]. ``dt = 0`` returns the first five components
            unchanged.

    Returns:
        jax.Array: Propagated state ``[px, py, v, yaw, yaw_rate]`` of
            shape ``(5,)``.

    Examples:
        ```python
        import jax.numpy as jnp
        from ukftrack.motion_models import ctrv_transition

        point = jnp.array([0.0, 0.0, 1.0, 0.0, 0.0, 0.0, 0.0])
        ctrv_transition(point, 2.0)  # [2, 0, 1, 0, 0]
        ```
    """
    dtype = get_dtype()
    point = jnp.asarray(point, dtype=dtype)
    dt = jnp.asarray(dt, dtype=dtype)

    px, py, v, yaw, yaw_rate, nu_a, nu_yawdd = (point[i] for i in range(7))

    turning = jnp.abs(yaw_rate) > YAW_RATE_EPSILON
    # Keep the unused branch finite so jnp.where never selects through a NaN
    safe_rate = jnp.where(turning, yaw_rate, 1.0)
    yaw_end = yaw + yaw_rate * dt

    px_arc = px + v / safe_rate * (jnp.sin(yaw_end) - jnp.sin(yaw))
    py_arc = py + v / safe_rate * (jnp.cos(yaw) - jnp.cos(yaw_end))
    px_line = px + v * dt * jnp.cos(yaw)
    py_line = py + v * dt * jnp.sin(yaw)

    half_dt2 = 0.5 * dt * dt

    px_p = jnp.where(turning, px_arc, px_line) + half_dt2 * nu_a * jnp.cos(yaw)
    py_p = jnp.where(turning, py_arc, py_line) + half_dt2 * nu_a * jnp.sin(yaw)
    v_p = v + nu_a * dt
    yaw_p = yaw_end + half_dt2 * nu_yawdd
    yaw_rate_p = yaw_rate + nu_yawdd * dt

    return jnp.stack([px_p, py_p, v_p, yaw_p, yaw_rate_p])


def ctrv_propagate(points: ArrayLike, dt: ArrayLike) -> Array:
    """Propagate a stack of augmented sigma points with :func:`ctrv_transition`.

    Args:
        points: Augmented sigma points of shape ``(k, 7)``.
        dt: Elapsed time [s], shared by all points.

    Returns:
        jax.Array: Propagated states of shape ``(k, 5)``.
    """
    return jax.vmap(ctrv_transition, in_axes=(0, None))(jnp.asarray(points), dt)
