"""
Input coercion and validation for StableStats.

check_array() is the numeric coercion layer: every public operation runs
its inputs through it once, so the algorithms are written against
float64 semantics only. Any signed/unsigned integer or floating dtype is
accepted and widened (or narrowed) to float64; integers beyond 2**53 in
magnitude lose precision, which is accepted.

The remaining validators follow the "fail fast, fail loud" principle and
each checks ONE thing, naming the offending parameter in the message.
"""

from typing import Any

import numpy as np
from numpy.typing import ArrayLike, NDArray

from stablestats.core.exceptions import ValidationError, DimensionError


def check_array(
    array: ArrayLike,
    name: str,
) -> NDArray[np.float64]:
    """
    Convert input to a one-dimensional float64 array.

    Accepts lists, tuples, numpy arrays of any integer or floating dtype,
    and objects exposing ``to_numpy()`` or ``values`` (pandas Series).
    The caller's data is never modified; a new array is returned whenever
    a conversion is needed.

    Args:
        array: Input to convert
        name: Parameter name for error messages

    Returns:
        1D numpy.ndarray of dtype float64

    Raises:
        ValidationError: If input is non-numeric, boolean or complex
        DimensionError: If input is not one-dimensional
    """
    if hasattr(array, 'to_numpy'):
        array = array.to_numpy()
    elif hasattr(array, 'values') and not isinstance(array, dict):
        array = array.values

    try:
        result = np.asarray(array)
    except (ValueError, TypeError) as e:
        raise ValidationError(f"{name}: cannot convert to array: {e}") from e

    if result.dtype == object:
        raise ValidationError(
            f"{name}: converted to object dtype, indicating mixed types or non-numeric data"
        )

    # Empty sequences come back as float64 from asarray([])
    if not (np.issubdtype(result.dtype, np.integer)
            or np.issubdtype(result.dtype, np.floating)):
        raise ValidationError(
            f"{name}: dtype {result.dtype} is not an integer or floating type"
        )

    check_1d(result, name)

    return np.ascontiguousarray(result, dtype=np.float64)


def check_1d(array: NDArray[Any], name: str) -> None:
    """
    Verify array is 1-dimensional.

    Raises:
        DimensionError: If array is not 1D
    """
    if array.ndim != 1:
        raise DimensionError(
            f"{name}: expected 1D array, got {array.ndim}D with shape {array.shape}"
        )


def check_consistent_length(
    *arrays: NDArray[Any],
    names: tuple[str, ...]
) -> None:
    """
    Verify all arrays have the same length.

    Args:
        *arrays: Arrays to check
        names: Parameter names for error messages (must match number of arrays)

    Raises:
        ValueError: If number of names doesn't match number of arrays
        DimensionError: If arrays have inconsistent lengths
    """
    if len(arrays) != len(names):
        raise ValueError(
            f"Number of arrays ({len(arrays)}) must match number of names ({len(names)})"
        )

    if len(arrays) < 2:
        return

    lengths = [arr.shape[0] for arr in arrays]
    if len(set(lengths)) > 1:
        details = ", ".join(f"{name}={length}" for name, length in zip(names, lengths))
        raise DimensionError(f"Inconsistent lengths: {details}")


def check_min_samples(array: NDArray[Any], min_samples: int, name: str) -> None:
    """
    Verify array has at least the minimum number of samples.

    Raises:
        ValidationError: If array has fewer than min_samples
    """
    n = array.shape[0]
    if n < min_samples:
        raise ValidationError(
            f"{name}: requires at least {min_samples} samples, got {n}"
        )


def check_probabilities(probs: ArrayLike, name: str) -> NDArray[np.float64]:
    """
    Convert quantile probabilities to float64 and verify they lie in [0, 1].

    Raises:
        ValidationError: If any probability is NaN or outside [0, 1]
    """
    result = check_array(probs, name)
    bad = np.isnan(result) | (result < 0.0) | (result > 1.0)
    if np.any(bad):
        raise ValidationError(
            f"{name}: probabilities must lie in [0, 1], got {result[bad].tolist()}"
        )
    return result
