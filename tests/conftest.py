"""
pytest configuration and shared fixtures.

The float and integer samples are the reference datasets of the GNU
Scientific Library statistics test suite; expected values for them are
quoted from that suite.
"""

import pytest
import numpy as np


@pytest.fixture
def rng():
    """Seeded random number generator for reproducible tests."""
    return np.random.default_rng(42)


@pytest.fixture
def sample_a():
    """14-point float sample A."""
    return np.array([
        0.0421, 0.0941, 0.1064, 0.0242, 0.1331, 0.0773, 0.0243,
        0.0815, 0.1186, 0.0356, 0.0728, 0.0999, 0.0614, 0.0479,
    ])


@pytest.fixture
def sample_b():
    """14-point float sample B, paired with A."""
    return np.array([
        0.1081, 0.0986, 0.1566, 0.1961, 0.1125, 0.1942, 0.1079,
        0.1021, 0.1583, 0.1673, 0.1675, 0.1856, 0.1688, 0.1512,
    ])


@pytest.fixture
def weights_w():
    """Weights for sample A; five entries are zero."""
    return np.array([
        0.000, 0.000, 0.000, 3.000, 0.0000, 1.000, 1.000,
        1.000, 0.000, 0.5000, 7.000, 5.000, 4.000, 0.123,
    ])


@pytest.fixture
def int_a():
    """20-point integer sample."""
    return np.array(
        [17, 18, 16, 18, 12, 20, 18, 20, 20, 22, 20, 10, 8, 12, 16, 16, 18, 20, 18, 21],
        dtype=np.int32,
    )


@pytest.fixture
def int_b():
    """20-point integer sample, paired with int_a."""
    return np.array(
        [19, 20, 22, 24, 10, 25, 20, 22, 21, 23, 20, 10, 12, 14, 12, 20, 22, 24, 23, 17],
        dtype=np.int32,
    )
