"""Track initialization from a single observation.

The first accepted observation fixes the filter's mean and covariance;
no prediction or update happens on that call. Components the sensor
observes directly start with small variances, unobserved ones with large
variances.
"""

from __future__ import annotations

import jax.numpy as jnp
from jax.typing import ArrayLike

from ukftrack.config import get_dtype
from ukftrack.constants import INITIAL_SPEED
from ukftrack.estimation._types import FilterState


def initialize_from_position(z: ArrayLike) -> FilterState:
    """Start a track from a position measurement ``[px, py]``.

    Speed is seeded with a small non-zero value, heading and turn rate
    with zero.

    Args:
        z: Position measurement of shape ``(2,)``.

    Returns:
        FilterState: ``x = [px, py, 0.2, 0, 0]`` and
            ``P = diag(0.01, 0.01, 1, 1, 1)``.
    """
    dtype = get_dtype()
    z = jnp.asarray(z, dtype=dtype)
    x = jnp.array([z[0], z[1], INITIAL_SPEED, 0.0, 0.0], dtype=dtype)
    P = jnp.diag(jnp.array([0.01, 0.01, 1.0, 1.0, 1.0], dtype=dtype))
    return FilterState(x=x, P=P)


def initialize_from_range_bearing(z: ArrayLike) -> FilterState:
    """Start a track from a range/bearing measurement ``[rho, phi, rho_dot]``.

    Position is the polar-to-Cartesian conversion, speed is the range
    rate and heading is the bearing, i.e. the object is assumed to move
    radially.

    Args:
        z: Range/bearing measurement of shape ``(3,)``.

    Returns:
        FilterState: ``x = [rho cos(phi), rho sin(phi), rho_dot, phi, 0]``
            and ``P = diag(0.01, 0.01, 0.01, 0.09, 0.09)``.
    """
    dtype = get_dtype()
    z = jnp.asarray(z, dtype=dtype)
    rho, phi, rho_dot = z[0], z[1], z[2]
    x = jnp.stack(
        [
            rho * jnp.cos(phi),
            rho * jnp.sin(phi),
            rho_dot,
            phi,
            jnp.zeros((), dtype=dtype),
        ]
    )
    P = jnp.diag(jnp.array([0.01, 0.01, 0.01, 0.09, 0.09], dtype=dtype))
    return FilterState(x=x, P=P)
