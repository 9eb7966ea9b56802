"""Exception types raised by the tracking filter.

Both are fatal for the call that raises them: the filter cannot recover a
coherent belief once its configuration or numerical assumptions are
violated, so nothing is retried internally.
"""


class ConfigurationError(ValueError):
    """Invalid tracker configuration or a measurement of the wrong shape."""


class NumericalSingularityError(RuntimeError):
    """A covariance that must be positive definite is not.

    Raised when the augmented state covariance has no Cholesky factor
    during sigma point generation, or when the innovation covariance of a
    measurement update cannot be inverted.
    """
