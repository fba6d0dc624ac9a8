"""
Two-sample association: covariance, Pearson correlation, pooled
variance and the pooled two-sample t statistic.
"""

from __future__ import annotations

import numpy as np
from numpy.typing import ArrayLike, NDArray

from stablestats.core.validation import (
    check_array, check_consistent_length, check_min_samples,
)
from stablestats.descriptive._central import _mean, _variance, _bessel


def _paired(data1: ArrayLike, data2: ArrayLike) -> tuple[NDArray, NDArray]:
    x = check_array(data1, 'data1')
    y = check_array(data2, 'data2')
    check_consistent_length(x, y, names=('data1', 'data2'))
    return x, y


# --- Covariance ---

def _covariance(
    x: NDArray[np.float64], y: NDArray[np.float64], mean1: float, mean2: float,
) -> np.float64:
    res = np.float64(0.0)
    with np.errstate(all='ignore'):
        for i in range(len(x)):
            delta1 = x[i] - mean1
            delta2 = y[i] - mean2
            res += (delta1 * delta2 - res) / (i + 1)
    return res


def covariance_mean(
    data1: ArrayLike, data2: ArrayLike, mean1: float, mean2: float,
) -> float:
    """Sample covariance (n-1) about caller-supplied means."""
    x, y = _paired(data1, data2)
    return float(_bessel(_covariance(x, y, mean1, mean2), len(x)))


def covariance(data1: ArrayLike, data2: ArrayLike) -> float:
    """Sample covariance (n-1) of two paired samples."""
    x, y = _paired(data1, data2)
    return float(_bessel(_covariance(x, y, _mean(x), _mean(y)), len(x)))


# --- Correlation ---

def correlation(data1: ArrayLike, data2: ArrayLike) -> float:
    """
    Pearson correlation in a single pass.

    Uses the recurrence of B. P. Welford, "Note on a Method for
    Calculating Corrected Sums of Squares and Products", Technometrics,
    Vol 4, No 3, 1962:

        S_n = S_{n-1} + ((n-1)/n) * (x_n - mu_x_{n-1}) * (y_n - mu_y_{n-1})

    applied to the x, y and cross sums. The first pair seeds the running
    means. Returns NaN when either sample is constant.
    """
    x, y = _paired(data1, data2)
    check_min_samples(x, 1, 'data1')

    sum_xsq = np.float64(0.0)
    sum_ysq = np.float64(0.0)
    sum_cross = np.float64(0.0)

    mean_x = x[0]
    mean_y = y[0]

    with np.errstate(all='ignore'):
        for i in range(1, len(x)):
            ratio = i / (i + 1.0)
            delta_x = x[i] - mean_x
            delta_y = y[i] - mean_y
            sum_xsq += delta_x * delta_x * ratio
            sum_ysq += delta_y * delta_y * ratio
            sum_cross += delta_x * delta_y * ratio
            mean_x += delta_x / (i + 1)
            mean_y += delta_y / (i + 1)

        return float(sum_cross / (np.sqrt(sum_xsq) * np.sqrt(sum_ysq)))


# --- Pooled variance / t-test ---

def _p_variance(x: NDArray[np.float64], y: NDArray[np.float64]) -> np.float64:
    n1 = len(x)
    n2 = len(y)
    var1 = _bessel(_variance(x, _mean(x)), n1)
    var2 = _bessel(_variance(y, _mean(y)), n2)
    with np.errstate(all='ignore'):
        return ((n1 - 1) * var1 + (n2 - 1) * var2) / np.float64(n1 + n2 - 2)


def p_variance(data1: ArrayLike, data2: ArrayLike) -> float:
    """
    Pooled variance of two independent samples.

    ``((n1-1)*var1 + (n2-1)*var2) / (n1+n2-2)``; the samples may differ
    in length.
    """
    x = check_array(data1, 'data1')
    y = check_array(data2, 'data2')
    return float(_p_variance(x, y))


def t_test(data1: ArrayLike, data2: ArrayLike) -> float:
    """
    Two-sample t statistic for independent samples with equal variances.

    Tests whether the difference between the sample means differs from
    zero: ``(mean1 - mean2) / sqrt(pv * (1/n1 + 1/n2))`` where ``pv`` is
    the pooled variance.
    """
    x = check_array(data1, 'data1')
    y = check_array(data2, 'data2')
    return float(_t_statistic(x, y))


def _t_statistic(x: NDArray[np.float64], y: NDArray[np.float64]) -> np.float64:
    n1 = np.float64(len(x))
    n2 = np.float64(len(y))
    pv = _p_variance(x, y)
    with np.errstate(all='ignore'):
        return (_mean(x) - _mean(y)) / np.sqrt(pv * ((1.0 / n1) + (1.0 / n2)))
