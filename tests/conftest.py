import jax.numpy as jnp
import pytest

from ukftrack.config import set_dtype


@pytest.fixture(autouse=True)
def _ensure_float64():
    """Run every test in float64.

    Exact comparisons on means and covariances assume double precision.
    test_config.py overrides this with its own float32 fixture.
    """
    set_dtype(jnp.float64)
