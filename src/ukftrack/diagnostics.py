"""Filter consistency and accuracy diagnostics.

The normalized innovation squared (NIS) of a consistent filter follows a
chi-squared distribution with as many degrees of freedom as the
measurement has components. Counting how often it exceeds the 95 %
quantile is a quick check of the process noise tuning: far more than 5 %
means the filter is overconfident, far fewer means it is too cautious.

Accuracy against ground truth is reported as the per-component root mean
square error of ``[px, py, vx, vy]``.
"""

from __future__ import annotations

import jax.numpy as jnp
from jax import Array
from jax.typing import ArrayLike

from ukftrack.config import get_dtype

# 95 % quantiles of the chi-squared distribution by degrees of freedom
_CHI2_95: dict[int, float] = {
    1: 3.841,
    2: 5.991,
    3: 7.815,
    4: 9.488,
    5: 11.070,
}


def nis_threshold(dof: int) -> float:
    """Return the 95 % chi-squared bound for a NIS with *dof* degrees of freedom.

    Args:
        dof: Measurement dimension, 1 to 5.

    Returns:
        float: 5.991 for a position measurement, 7.815 for a
            range/bearing measurement.

    Raises:
        ValueError: If *dof* is outside the tabulated range.
    """
    if dof not in _CHI2_95:
        raise ValueError(f"No NIS threshold tabulated for {dof} degrees of freedom")
    return _CHI2_95[dof]


def nis_exceedance_rate(nis_values: ArrayLike, dof: int) -> float:
    """Fraction of NIS values above the 95 % bound.

    Args:
        nis_values: NIS values of one sensor.
        dof: Measurement dimension of that sensor.

    Returns:
        float: Fraction in ``[0, 1]``; ``0.0`` for an empty input.
    """
    nis_values = jnp.asarray(nis_values, dtype=get_dtype())
    if nis_values.size == 0:
        return 0.0
    return float(jnp.mean(nis_values > nis_threshold(dof)))


def state_to_cartesian(x: ArrayLike) -> Array:
    """Convert CTRV states to ``[px, py, vx, vy]``.

    Args:
        x: State ``[px, py, v, yaw, yaw_rate]`` of shape ``(..., 5)``.

    Returns:
        jax.Array: Cartesian position and velocity of shape ``(..., 4)``.
    """
    x = jnp.asarray(x, dtype=get_dtype())
    v, yaw = x[..., 2], x[..., 3]
    return jnp.stack([x[..., 0], x[..., 1], v * jnp.cos(yaw), v * jnp.sin(yaw)], axis=-1)


def rmse(estimates: ArrayLike, ground_truth: ArrayLike) -> Array:
    """Per-component root mean square error.

    Args:
        estimates: Estimates of shape ``(n, k)``.
        ground_truth: Ground truth of shape ``(n, k)``.

    Returns:
        jax.Array: RMSE of shape ``(k,)``.

    Raises:
        ValueError: If the inputs are empty or their shapes differ.
    """
    dtype = get_dtype()
    estimates = jnp.asarray(estimates, dtype=dtype)
    ground_truth = jnp.asarray(ground_truth, dtype=dtype)
    if estimates.shape != ground_truth.shape:
        raise ValueError(
            f"Estimate shape {estimates.shape} does not match ground truth shape {ground_truth.shape}"
        )
    if estimates.shape[0] == 0:
        raise ValueError("Cannot compute RMSE of an empty sequence")
    return jnp.sqrt(jnp.mean((estimates - ground_truth) ** 2, axis=0))
