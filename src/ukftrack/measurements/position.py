"""Position sensor measurement model.

A lidar-like sensor reports the object's Cartesian position ``[px, py]``
directly, so the measurement model is a linear projection of the first
two state components and needs no angle handling.
"""

from __future__ import annotations

import jax.numpy as jnp
from jax import Array
from jax.typing import ArrayLike

from ukftrack.config import get_dtype
from ukftrack.constants import STD_LASER_PX, STD_LASER_PY


def position_measurement(state: ArrayLike) -> Array:
    """Extract the position from a CTRV state vector.

    Args:
        state: State vector of shape ``(n,)`` with ``n >= 2``.

    Returns:
        jax.Array: Position ``[px, py]`` of shape ``(2,)``.

    Examples:
        ```python
        import jax.numpy as jnp
        from ukftrack.measurements import position_measurement

        z = position_measurement(jnp.array([5.0, 3.0, 0.2, 0.0, 0.0]))  # [5, 3]
        ```
    """
    dtype = get_dtype()
    state = jnp.asarray(state, dtype=dtype)
    return state[:2]


def position_noise(
    std_px: float = STD_LASER_PX,
    std_py: float = STD_LASER_PY,
) -> Array:
    """Construct the position sensor noise covariance.

    Args:
        std_px: Standard deviation along x [m]. Default: 0.15.
        std_py: Standard deviation along y [m]. Default: 0.15.

    Returns:
        jax.Array: Diagonal covariance of shape ``(2, 2)``.
    """
    dtype = get_dtype()
    return jnp.diag(jnp.array([std_px**2, std_py**2], dtype=dtype))
