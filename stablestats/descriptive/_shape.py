"""
Shape statistics: skewness, excess kurtosis, lag-1 autocorrelation.

Each statistic is a running average of a standardized power,
``avg_i = avg_{i-1} + (z_i**k - avg_{i-1}) / i`` with
``z_i = (x_i - mean) / sd``, built on the mean and sample sd from
_central. Callers that already hold the mean and sd pass them in.
"""

from __future__ import annotations

import numpy as np
from numpy.typing import ArrayLike, NDArray

from stablestats.core.validation import check_array, check_min_samples
from stablestats.descriptive._central import _mean, _variance, _bessel


def _standardized_moment(
    x: NDArray[np.float64], mean: float, sd: float, power: int,
) -> np.float64:
    avg = np.float64(0.0)
    with np.errstate(all='ignore'):
        for i, xi in enumerate(x):
            z = (xi - mean) / np.float64(sd)
            avg += (z ** power - avg) / (i + 1)
    return avg


def _sample_sd(x: NDArray[np.float64], mean: float) -> np.float64:
    return np.sqrt(_bessel(_variance(x, mean), len(x)))


# --- Skewness ---

def skew(data: ArrayLike) -> float:
    """Skewness: third standardized moment about the sample mean and sd."""
    x = check_array(data, 'data')
    m = _mean(x)
    return float(_standardized_moment(x, m, _sample_sd(x, m), 3))


def skew_mean_sd(data: ArrayLike, mean: float, sd: float) -> float:
    """Skewness with a caller-supplied mean and standard deviation."""
    return float(_standardized_moment(check_array(data, 'data'), mean, sd, 3))


# --- Kurtosis ---

def kurtosis(data: ArrayLike) -> float:
    """Excess kurtosis (zero for a Gaussian)."""
    x = check_array(data, 'data')
    m = _mean(x)
    return float(_standardized_moment(x, m, _sample_sd(x, m), 4) - 3.0)


def kurtosis_main_sd(data: ArrayLike, mean: float, sd: float) -> float:
    """
    Excess kurtosis with a caller-supplied mean and standard deviation.

    The running fourth standardized moment minus 3.
    """
    return float(_standardized_moment(check_array(data, 'data'), mean, sd, 4) - 3.0)


# --- Lag-1 autocorrelation ---

def lag1autocorrelation(data: ArrayLike) -> float:
    """Lag-1 autocorrelation about the sample mean."""
    x = check_array(data, 'data')
    check_min_samples(x, 1, 'data')
    return float(_lag1(x, _mean(x)))


def lag1autocorrelation_mean(data: ArrayLike, mean: float) -> float:
    """
    Lag-1 autocorrelation about a caller-supplied mean.

    Running averages of the lagged cross product ``q`` and the squared
    deviation ``v`` are kept side by side; the coefficient is ``q / v``.
    A single observation gives 0/v, a constant series NaN.
    """
    x = check_array(data, 'data')
    check_min_samples(x, 1, 'data')
    return float(_lag1(x, mean))


def _lag1(x: NDArray[np.float64], mean: float) -> np.float64:
    q = np.float64(0.0)
    with np.errstate(all='ignore'):
        v = (x[0] - mean) * (x[0] - mean)
        for i in range(1, len(x)):
            delta0 = x[i - 1] - mean
            delta1 = x[i] - mean
            q += (delta0 * delta1 - q) / (i + 1)
            v += (delta1 * delta1 - v) / (i + 1)
        return q / v
