"""
Order statistics: extrema with their positions, median and quantiles.

NaN policy for the extrema: the first NaN encountered becomes the
reported extremum, with its own index, and the scan stops there. Since
every comparison against NaN is false, this needs an explicit isnan
check per element.

median_from_sorted_data() and quantile_from_sorted_data() trust the
caller: the data must already be sorted ascending and is not checked.
"""

from __future__ import annotations

import math

import numpy as np
from numpy.typing import ArrayLike, NDArray

from stablestats.core.exceptions import ValidationError
from stablestats.core.validation import check_array, check_min_samples


def _nonempty(data: ArrayLike) -> NDArray[np.float64]:
    x = check_array(data, 'data')
    check_min_samples(x, 1, 'data')
    return x


def max(data: ArrayLike) -> tuple[float, int]:
    """
    First largest member and its position.

    Returns:
        (value, index); (nan, i) if data[i] is the first NaN.
    """
    x = _nonempty(data).tolist()
    largest = x[0]
    largest_index = 0

    for i, xi in enumerate(x):
        if math.isnan(xi):
            return xi, i
        if xi > largest:
            largest = xi
            largest_index = i

    return largest, largest_index


def min(data: ArrayLike) -> tuple[float, int]:
    """
    First smallest member and its position.

    Returns:
        (value, index); (nan, i) if data[i] is the first NaN.
    """
    x = _nonempty(data).tolist()
    smallest = x[0]
    smallest_index = 0

    for i, xi in enumerate(x):
        if math.isnan(xi):
            return xi, i
        if xi < smallest:
            smallest = xi
            smallest_index = i

    return smallest, smallest_index


def minmax(data: ArrayLike) -> tuple[float, int, float, int]:
    """
    First smallest and largest members and their positions in one pass.

    Returns:
        (min, min_index, max, max_index). On the first NaN, both extrema
        and both indices are set to that element and the scan stops.
    """
    x = _nonempty(data).tolist()
    smallest = largest = x[0]
    smallest_index = largest_index = 0

    for i, xi in enumerate(x):
        if math.isnan(xi):
            smallest = largest = xi
            smallest_index = largest_index = i
            break
        if xi < smallest:
            smallest = xi
            smallest_index = i
        if xi > largest:
            largest = xi
            largest_index = i

    return smallest, smallest_index, largest, largest_index


def median_from_sorted_data(sorted_data: ArrayLike) -> float:
    """
    Median of data sorted in ascending order.

    Even length averages the two middle elements. Empty input returns
    0.0. The sort order is NOT verified.
    """
    x = check_array(sorted_data, 'sorted_data')
    n = len(x)
    if n == 0:
        return 0.0

    lhs = (n - 1) // 2
    rhs = n // 2

    if lhs == rhs:
        return float(x[lhs])
    with np.errstate(all='ignore'):
        return float((x[lhs] + x[rhs]) / 2.0)


def quantile_from_sorted_data(sorted_data: ArrayLike, f: float) -> float:
    """
    Quantile of data sorted in ascending order, by linear interpolation.

    The position ``f * (n - 1)`` is split into an integer part ``lhs``
    and a fraction ``delta``; the result is
    ``(1 - delta) * x[lhs] + delta * x[lhs + 1]``, or ``x[lhs]`` at the
    top of the range. Empty input returns 0.0. Neither the sort order
    nor the range of ``f`` is verified, but an ``f`` whose integer
    position falls before the first or past the last element raises
    instead of wrapping around.

    Also called the percent point function or inverse cumulative
    distribution function.
    """
    x = check_array(sorted_data, 'sorted_data')
    n = len(x)
    if n == 0:
        return 0.0

    index = f * (n - 1)
    lhs = int(index)
    delta = index - lhs

    if lhs < 0 or lhs > n - 1:
        raise ValidationError(
            f"f: quantile position {index:g} lies outside the data "
            f"(0 to {n - 1}) for f={f!r}"
        )

    if lhs == n - 1:
        return float(x[lhs])
    with np.errstate(all='ignore'):
        return float((1.0 - delta) * x[lhs] + delta * x[lhs + 1])
