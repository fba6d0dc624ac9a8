"""
Weighted descriptive statistics.

Mirrors _central and _shape with the running count replaced by the
running total weight ``W_i`` of the observations included so far:

    a_i = a_{i-1} + (t_i - a_{i-1}) * (w_i / W_i)

An observation whose weight is not strictly positive (zero, negative or
NaN) is skipped by every accumulation. It is not an error.

The weight vector comes FIRST in every signature: ``w_mean(w, data)``.
"""

from __future__ import annotations

import numpy as np
from numpy.typing import ArrayLike, NDArray

from stablestats.core.validation import check_array, check_consistent_length


def _weighted(w: ArrayLike, data: ArrayLike) -> tuple[NDArray, NDArray]:
    wa = check_array(w, 'w')
    x = check_array(data, 'data')
    check_consistent_length(wa, x, names=('w', 'data'))
    return wa, x


def _running(
    w: NDArray[np.float64], x: NDArray[np.float64], term=None,
) -> np.float64:
    """
    Weight-normalized running average of ``term(x_i)``, or of ``x_i``.

    ``term`` is only evaluated for positively weighted observations.
    """
    avg = np.float64(0.0)
    weight = np.float64(0.0)
    with np.errstate(all='ignore'):
        for wi, xi in zip(w, x):
            if wi > 0.0:
                t = xi if term is None else term(xi)
                weight += wi
                avg += (t - avg) * (wi / weight)
    return avg


# --- Mean ---

def _w_mean(w: NDArray[np.float64], x: NDArray[np.float64]) -> np.float64:
    return _running(w, x)


def w_mean(w: ArrayLike, data: ArrayLike) -> float:
    """
    Weighted arithmetic mean.

    ``wm_i = wm_{i-1} + (x_i - wm_{i-1}) * (w_i / W_i)``. With no positive
    weight the result is 0.0.
    """
    wa, x = _weighted(w, data)
    return float(_w_mean(wa, x))


# --- Absolute deviation ---

def _w_absdev(
    w: NDArray[np.float64], x: NDArray[np.float64], wmean: float,
) -> np.float64:
    return _running(w, x, lambda xi: abs(xi - wmean))


def w_absdev(w: ArrayLike, data: ArrayLike) -> float:
    wa, x = _weighted(w, data)
    return float(_w_absdev(wa, x, _w_mean(wa, x)))


def w_absdev_mean(w: ArrayLike, data: ArrayLike, wmean: float) -> float:
    """Weighted absolute deviation about a caller-supplied weighted mean."""
    wa, x = _weighted(w, data)
    return float(_w_absdev(wa, x, wmean))


# --- Variance / standard deviation ---

def _w_variance(
    w: NDArray[np.float64], x: NDArray[np.float64], wmean: float,
) -> np.float64:
    """Weighted mean squared deviation about ``wmean``, unscaled."""
    return _running(w, x, lambda xi: (xi - wmean) * (xi - wmean))


def _factor(w: NDArray[np.float64]) -> np.float64:
    """
    Effective-sample-size correction ``a**2 / (a**2 - b)``.

    ``a`` and ``b`` are the sum and the sum of squares of the positive
    weights. Equal weights reduce this to n/(n-1).
    """
    a = np.float64(0.0)
    b = np.float64(0.0)
    with np.errstate(all='ignore'):
        for wi in w:
            if wi > 0.0:
                a += wi
                b += wi * wi
        return (a * a) / ((a * a) - b)


def w_variance_with_fixed_mean(w: ArrayLike, data: ArrayLike, wmean: float) -> float:
    """Weighted variance about a known mean, without correction."""
    wa, x = _weighted(w, data)
    return float(_w_variance(wa, x, wmean))


def wsd_with_fixed_mean(w: ArrayLike, data: ArrayLike, wmean: float) -> float:
    wa, x = _weighted(w, data)
    return float(np.sqrt(_w_variance(wa, x, wmean)))


def _w_variance_mean(
    w: NDArray[np.float64], x: NDArray[np.float64], wmean: float,
) -> np.float64:
    with np.errstate(all='ignore'):
        return _factor(w) * _w_variance(w, x, wmean)


def w_variance_mean(w: ArrayLike, data: ArrayLike, wmean: float) -> float:
    """
    Weighted sample variance about an estimated weighted mean.

    The raw weighted second moment scaled by the effective-sample-size
    factor. A single positively weighted observation yields NaN.
    """
    wa, x = _weighted(w, data)
    return float(_w_variance_mean(wa, x, wmean))


def w_sd_mean(w: ArrayLike, data: ArrayLike, wmean: float) -> float:
    wa, x = _weighted(w, data)
    return float(np.sqrt(_w_variance_mean(wa, x, wmean)))


def w_variance(w: ArrayLike, data: ArrayLike) -> float:
    wa, x = _weighted(w, data)
    return float(_w_variance_mean(wa, x, _w_mean(wa, x)))


def w_sd(w: ArrayLike, data: ArrayLike) -> float:
    wa, x = _weighted(w, data)
    return float(np.sqrt(_w_variance_mean(wa, x, _w_mean(wa, x))))


# --- Skewness / kurtosis ---

def _w_standardized_moment(
    w: NDArray[np.float64], x: NDArray[np.float64],
    wmean: float, wsd: float, power: int,
) -> np.float64:
    sd = np.float64(wsd)
    return _running(w, x, lambda xi: ((xi - wmean) / sd) ** power)


def w_skew(w: ArrayLike, data: ArrayLike) -> float:
    wa, x = _weighted(w, data)
    wm = _w_mean(wa, x)
    wsd = np.sqrt(_w_variance_mean(wa, x, wm))
    return float(_w_standardized_moment(wa, x, wm, wsd, 3))


def w_skew_mean_sd(w: ArrayLike, data: ArrayLike, wmean: float, wsd: float) -> float:
    """Weighted skewness with caller-supplied weighted mean and sd."""
    wa, x = _weighted(w, data)
    return float(_w_standardized_moment(wa, x, wmean, wsd, 3))


def w_kurtosis(w: ArrayLike, data: ArrayLike) -> float:
    wa, x = _weighted(w, data)
    wm = _w_mean(wa, x)
    wsd = np.sqrt(_w_variance_mean(wa, x, wm))
    return float(_w_standardized_moment(wa, x, wm, wsd, 4) - 3.0)


def w_kurtosis_mean_sd(w: ArrayLike, data: ArrayLike, wmean: float, wsd: float) -> float:
    """Weighted excess kurtosis with caller-supplied weighted mean and sd."""
    wa, x = _weighted(w, data)
    return float(_w_standardized_moment(wa, x, wmean, wsd, 4) - 3.0)


# --- Total sum of squares ---

def _w_tss(w: NDArray[np.float64], x: NDArray[np.float64], wmean: float) -> np.float64:
    res = np.float64(0.0)
    with np.errstate(all='ignore'):
        for wi, xi in zip(w, x):
            if wi > 0.0:
                delta = xi - wmean
                res += wi * delta * delta
    return res


def w_tss_mean(w: ArrayLike, data: ArrayLike, wmean: float) -> float:
    """Weighted sum of squared deviations about ``wmean``."""
    wa, x = _weighted(w, data)
    return float(_w_tss(wa, x, wmean))


def w_tss(w: ArrayLike, data: ArrayLike) -> float:
    wa, x = _weighted(w, data)
    return float(_w_tss(wa, x, _w_mean(wa, x)))
