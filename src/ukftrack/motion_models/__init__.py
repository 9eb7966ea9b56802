"""Motion models for the tracking filter.

Available models:

- :func:`ctrv_transition` -- Constant turn rate and velocity model applied
  to one augmented state
- :func:`ctrv_propagate` -- The same model vectorized over sigma points
"""

from ukftrack.motion_models.ctrv import ctrv_propagate, ctrv_transition

__all__ = [
    "ctrv_propagate",
    "ctrv_transition",
]
