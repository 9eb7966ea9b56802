"""Shared utility functions for ukftrack.

Provides angle normalization helpers used wherever a heading or bearing
takes part in a difference.
"""

from ukftrack.utils._angle import angle_difference, wrap_angle, wrap_component

__all__ = [
    "angle_difference",
    "wrap_angle",
    "wrap_component",
]
