"""Angle normalization helpers.

Headings and bearings are compared modulo ``2*pi``. These helpers map
angles and angle differences into the half-open interval ``(-pi, pi]``
using ``jnp.mod`` so they stay JAX-traceable and work element-wise on
arrays of any shape.
"""

from __future__ import annotations

import jax.numpy as jnp
from jax import Array
from jax.typing import ArrayLike

from ukftrack.constants import PI, TWO_PI


def wrap_angle(angle: ArrayLike) -> Array:
    """Wrap an angle into ``(-pi, pi]``.

    Args:
        angle (ArrayLike): Angle in radians, scalar or array.

    Returns:
        Angle of the same shape in ``(-pi, pi]``.

    Examples:
        ```python
        import jax.numpy as jnp
        from ukftrack.utils import wrap_angle
        wrap_angle(3.5)   # 3.5 - 2*pi
        wrap_angle(-jnp.pi)  # jnp.pi
        ```
    """
    return PI - jnp.mod(PI - jnp.asarray(angle), TWO_PI)


def angle_difference(a: ArrayLike, b: ArrayLike) -> Array:
    """Return ``a - b`` wrapped into ``(-pi, pi]``.

    Args:
        a (ArrayLike): Minuend angle in radians.
        b (ArrayLike): Subtrahend angle in radians.

    Returns:
        Shortest signed rotation from *b* to *a*.
    """
    return wrap_angle(jnp.asarray(a) - jnp.asarray(b))


def wrap_component(vectors: Array, index: int | None) -> Array:
    """Wrap one angular component of a vector or a stack of vectors.

    Args:
        vectors (Array): Array of shape ``(..., m)``.
        index (int | None): Component along the last axis holding an
            angle. ``None`` returns *vectors* unchanged.

    Returns:
        Array of the same shape with component *index* in ``(-pi, pi]``.
    """
    if index is None:
        return vectors
    return vectors.at[..., index].set(wrap_angle(vectors[..., index]))
