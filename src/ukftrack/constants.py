"""
The `constants` module defines the fixed dimensions, thresholds and sensor
noise values used by the unscented tracking filter.
"""

from jax.numpy import pi as PI

# Mathematical Constants
"""
Full turn in radians. Units: *rad*
"""
TWO_PI = 2.0 * PI

# Dimensions

"""
Dimension of the CTRV state vector ``[px, py, v, yaw, yaw_rate]``.
"""
N_X = 5

"""
Dimension of the augmented state (state plus longitudinal and yaw
acceleration noise).
"""
N_AUG = N_X + 2

"""
Number of sigma points generated from the augmented state, ``2 * N_AUG + 1``.
"""
N_SIGMA = 2 * N_AUG + 1

"""
Sigma point spreading parameter, ``3 - N_AUG``.
"""
LAMBDA = 3.0 - N_AUG

"""
Dimension of a position sensor measurement ``[px, py]``.
"""
N_Z_POSITION = 2

"""
Dimension of a range/bearing sensor measurement ``[rho, phi, rho_dot]``.
"""
N_Z_RANGE_BEARING = 3

# State Indices

"""
Index of the heading angle within the state vector.
"""
YAW_INDEX = 3

"""
Index of the bearing angle within a range/bearing measurement.
"""
BEARING_INDEX = 1

# Thresholds

"""
Turn rates with magnitude at or below this value are propagated with the
straight-line motion equations. Units: *rad/s*
"""
YAW_RATE_EPSILON = 1e-3

"""
Lower bound on the range used as the range-rate denominator. Units: *m*
"""
RANGE_EPSILON = 1e-6

# Process Noise

"""
Default longitudinal acceleration noise standard deviation. Units: *m/s^2*
"""
STD_A = 1.0

"""
Default yaw acceleration noise standard deviation. Units: *rad/s^2*
"""
STD_YAWDD = 1.0

# Sensor Noise (manufacturer values, not to be tuned)

"""
Position sensor noise standard deviation along x. Units: *m*
"""
STD_LASER_PX = 0.15

"""
Position sensor noise standard deviation along y. Units: *m*
"""
STD_LASER_PY = 0.15

"""
Range/bearing sensor range noise standard deviation. Units: *m*
"""
STD_RADAR_RANGE = 0.3

"""
Range/bearing sensor bearing noise standard deviation. Units: *rad*
"""
STD_RADAR_BEARING = 0.03

"""
Range/bearing sensor range-rate noise standard deviation. Units: *m/s*
"""
STD_RADAR_RANGE_RATE = 0.3

# Diagnostics

"""
Number of most recent NIS values the tracker keeps per sensor.
"""
NIS_HISTORY_SIZE = 1000

# Initialization

"""
Speed assumed when a track is started from a position-only measurement.
Units: *m/s*
"""
INITIAL_SPEED = 0.2

# Time Constants

"""
Seconds per microsecond, the default timestamp unit of sensor logs. Units: *s/us*
"""
US2S = 1.0e-6
