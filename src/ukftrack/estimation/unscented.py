"""Weighted recombination of sigma points.

The unscented transform turns a set of transformed sigma points back into
a mean and covariance. The same two rules serve the prediction step and
both measurement updates:

- mean: ``sum_i w_i * X_i``
- covariance: ``sum_i w_i * d_i d_i^T`` with ``d_i = X_i - mean``

An optional angle index names the component of ``d_i`` that is a heading
or bearing; it is wrapped into ``(-pi, pi]`` before the outer product.
The mean of that component is taken as ``X_0 + sum_i w_i * wrap(X_i - X_0)``
about the centre point, so points straddling the ``+-pi`` cut average to
an angle near the cut instead of near zero. It is not wrapped itself.
"""

from __future__ import annotations

import jax.numpy as jnp
from jax import Array

from ukftrack.utils import wrap_angle, wrap_component


def sigma_deviations(
    points: Array,
    mean: Array,
    angle_index: int | None = None,
) -> Array:
    """Deviation of every sigma point from a mean.

    Args:
        points: Sigma points of shape ``(k, n)``.
        mean: Mean of shape ``(n,)``.
        angle_index: Component wrapped into ``(-pi, pi]``, or ``None``.

    Returns:
        jax.Array: Deviations of shape ``(k, n)``.
    """
    return wrap_component(points - mean[None, :], angle_index)


def unscented_mean_covariance(
    points: Array,
    weights: Array,
    angle_index: int | None = None,
) -> tuple[Array, Array]:
    """Recombine sigma points into a weighted mean and covariance.

    Args:
        points: Transformed sigma points of shape ``(k, n)``.
        weights: Sigma point weights of shape ``(k,)``.
        angle_index: Component of the deviations wrapped into
            ``(-pi, pi]``, or ``None`` when no component is angular.

    Returns:
        A tuple ``(mean, cov)`` of shapes ``(n,)`` and ``(n, n)``.

    Examples:
        ```python
        import jax.numpy as jnp
        from ukftrack.estimation import (
            generate_sigma_points, sigma_weights, unscented_mean_covariance,
        )

        points, _ = generate_sigma_points(jnp.ones(7), jnp.eye(7))
        mean, cov = unscented_mean_covariance(points, sigma_weights())
        # mean ~ ones(7), cov ~ eye(7)
        ```
    """
    mean = jnp.einsum("i,ij->j", weights, points)
    if angle_index is not None:
        centre = points[0, angle_index]
        offsets = wrap_angle(points[:, angle_index] - centre)
        mean = mean.at[angle_index].set(centre + jnp.dot(weights, offsets))
    diff = sigma_deviations(points, mean, angle_index)
    cov = jnp.einsum("i,ij,ik->jk", weights, diff, diff)
    return mean, cov


def cross_covariance(
    x_points: Array,
    x_mean: Array,
    z_points: Array,
    z_mean: Array,
    weights: Array,
    x_angle_index: int | None = None,
    z_angle_index: int | None = None,
) -> Array:
    """Weighted cross-covariance between state and measurement sigma points.

    Args:
        x_points: State sigma points of shape ``(k, n)``.
        x_mean: State mean of shape ``(n,)``.
        z_points: Measurement sigma points of shape ``(k, m)``, row ``i``
            being the projection of ``x_points[i]``.
        z_mean: Predicted measurement of shape ``(m,)``.
        weights: Sigma point weights of shape ``(k,)``.
        x_angle_index: Angular state component, or ``None``.
        z_angle_index: Angular measurement component, or ``None``.

    Returns:
        jax.Array: Cross-covariance ``T`` of shape ``(n, m)``.
    """
    x_diff = sigma_deviations(x_points, x_mean, x_angle_index)
    z_diff = sigma_deviations(z_points, z_mean, z_angle_index)
    return jnp.einsum("i,ij,ik->jk", weights, x_diff, z_diff)
