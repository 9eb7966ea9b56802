"""Range/bearing/range-rate sensor measurement model.

A radar-like sensor at the origin reports

- range ``rho = sqrt(px**2 + py**2)``,
- bearing ``phi = atan2(py, px)`` in ``(-pi, pi]``,
- range rate ``rho_dot = (px * v * cos(yaw) + py * v * sin(yaw)) / rho``.

The range rate is undefined for an object at the sensor itself. Its
denominator is floored at ``RANGE_EPSILON``; since the numerator scales
with the range, the floored value stays bounded by the speed and tends
to zero as the object approaches the origin.

The bearing is component :data:`~ukftrack.constants.BEARING_INDEX` and
must be wrapped in every difference.
"""

from __future__ import annotations

import jax.numpy as jnp
from jax import Array
from jax.typing import ArrayLike

from ukftrack.config import get_dtype
from ukftrack.constants import (
    RANGE_EPSILON,
    STD_RADAR_BEARING,
    STD_RADAR_RANGE,
    STD_RADAR_RANGE_RATE,
)


def range_bearing_measurement(state: ArrayLike) -> Array:
    """Project a CTRV state into range/bearing/range-rate space.

    Args:
        state: State ``[px, py, v, yaw, ...]`` of shape ``(n,)`` with
            ``n >= 4``.

    Returns:
        jax.Array: Measurement ``[rho, phi, rho_dot]`` of shape ``(3,)``.

    Examples:
        ```python
        import jax.numpy as jnp
        from ukftrack.measurements import range_bearing_measurement

        z = range_bearing_measurement(jnp.array([3.0, 4.0, 1.0, 0.0, 0.0]))
        # [5.0, 0.927, 0.6]
        ```
    """
    dtype = get_dtype()
    state = jnp.asarray(state, dtype=dtype)
    px, py, v, yaw = state[0], state[1], state[2], state[3]

    rho = jnp.sqrt(px * px + py * py)
    phi = jnp.arctan2(py, px)
    vx = v * jnp.cos(yaw)
    vy = v * jnp.sin(yaw)
    rho_dot = (px * vx + py * vy) / jnp.maximum(rho, RANGE_EPSILON)

    return jnp.stack([rho, phi, rho_dot])


def range_bearing_noise(
    std_range: float = STD_RADAR_RANGE,
    std_bearing: float = STD_RADAR_BEARING,
    std_range_rate: float = STD_RADAR_RANGE_RATE,
) -> Array:
    """Construct the range/bearing sensor noise covariance.

    Args:
        std_range: Range standard deviation [m]. Default: 0.3.
        std_bearing: Bearing standard deviation [rad]. Default: 0.03.
        std_range_rate: Range-rate standard deviation [m/s]. Default: 0.3.

    Returns:
        jax.Array: Diagonal covariance of shape ``(3, 3)``.
    """
    dtype = get_dtype()
    variances = jnp.array(
        [std_range**2, std_bearing**2, std_range_rate**2], dtype=dtype
    )
    return jnp.diag(variances)
