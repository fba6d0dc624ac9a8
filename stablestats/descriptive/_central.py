"""
Central tendency and dispersion.

Every statistic is accumulated with a running-average recurrence

    a_i = a_{i-1} + (t_i - a_{i-1}) / i

instead of a running sum, so no large intermediate sum is ever formed.
The private kernels (_mean, _variance, ...) operate on arrays already
coerced by check_array; the public functions coerce and delegate. The
other descriptive modules build on the kernels directly.

Accumulators are numpy float64 scalars and every kernel runs under
``np.errstate(all='ignore')``: division by zero and overflow yield
Inf/NaN, never a warning or an exception.
"""

from __future__ import annotations

import numpy as np
from numpy.typing import ArrayLike, NDArray

from stablestats.core.validation import check_array


# --- Kernels ---

def _mean(x: NDArray[np.float64]) -> np.float64:
    m = np.float64(0.0)
    with np.errstate(all='ignore'):
        for i, xi in enumerate(x):
            m += (xi - m) / (i + 1)
    return m


def _variance(x: NDArray[np.float64], mean: float) -> np.float64:
    """Mean squared deviation about ``mean`` (no Bessel correction)."""
    v = np.float64(0.0)
    with np.errstate(all='ignore'):
        for i, xi in enumerate(x):
            delta = xi - mean
            v += (delta * delta - v) / (i + 1)
    return v


def _bessel(v: np.float64, n: int) -> np.float64:
    """Rescale a mean squared deviation by n/(n-1)."""
    with np.errstate(all='ignore'):
        return v * np.float64(n) / np.float64(n - 1)


def _tss(x: NDArray[np.float64], mean: float) -> np.float64:
    res = np.float64(0.0)
    with np.errstate(all='ignore'):
        for xi in x:
            delta = xi - mean
            res += delta * delta
    return res


# --- Mean ---

def mean(data: ArrayLike) -> float:
    """
    Arithmetic mean by the running-mean recurrence.

    ``m_i = m_{i-1} + (x_i - m_{i-1}) / i``, starting from 0. Empty input
    returns 0.0 (the recurrence's starting value).
    """
    return float(_mean(check_array(data, 'data')))


# --- Absolute deviation ---

def absdev(data: ArrayLike) -> float:
    """Mean absolute deviation about the sample mean."""
    x = check_array(data, 'data')
    return float(_absdev(x, _mean(x)))


def absdev_mean(data: ArrayLike, mean: float) -> float:
    """Mean absolute deviation about a caller-supplied mean."""
    return float(_absdev(check_array(data, 'data'), mean))


def _absdev(x: NDArray[np.float64], mean: float) -> np.float64:
    total = np.float64(0.0)
    with np.errstate(all='ignore'):
        for xi in x:
            total += abs(xi - mean)
        return total / np.float64(len(x))


# --- Variance / standard deviation ---

def variance_with_fixed_mean(data: ArrayLike, mean: float) -> float:
    """
    Variance about a known (population) mean.

    The recurrence result is returned as is, without Bessel's correction,
    because ``mean`` is not estimated from ``data``.
    """
    return float(_variance(check_array(data, 'data'), mean))


def sd_with_fixed_mean(data: ArrayLike, mean: float) -> float:
    """Square root of variance_with_fixed_mean()."""
    return float(np.sqrt(_variance(check_array(data, 'data'), mean)))


def variance_mean(data: ArrayLike, mean: float) -> float:
    """
    Sample variance about a mean estimated from the same data.

    Rescaled by n/(n-1); a single observation yields NaN.
    """
    x = check_array(data, 'data')
    return float(_bessel(_variance(x, mean), len(x)))


def sd_mean(data: ArrayLike, mean: float) -> float:
    """Square root of variance_mean()."""
    x = check_array(data, 'data')
    return float(np.sqrt(_bessel(_variance(x, mean), len(x))))


def variance(data: ArrayLike) -> float:
    """Sample variance (Bessel-corrected)."""
    x = check_array(data, 'data')
    return float(_bessel(_variance(x, _mean(x)), len(x)))


def sd(data: ArrayLike) -> float:
    """Sample standard deviation (Bessel-corrected)."""
    x = check_array(data, 'data')
    return float(np.sqrt(_bessel(_variance(x, _mean(x)), len(x))))


# --- Total sum of squares ---

def tss_mean(data: ArrayLike, mean: float) -> float:
    """Sum of squared deviations about ``mean`` (not normalized)."""
    return float(_tss(check_array(data, 'data'), mean))


def tss(data: ArrayLike) -> float:
    """Sum of squared deviations about the sample mean."""
    x = check_array(data, 'data')
    return float(_tss(x, _mean(x)))
