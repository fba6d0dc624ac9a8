"""
Tests for input coercion and validation utilities.

Validates every function in core/validation.py:
    - check_array: conversion to 1D float64, dtype acceptance/rejection
    - check_1d: dimensionality
    - check_consistent_length: paired length matching
    - check_min_samples: minimum sample count
    - check_probabilities: quantile probabilities in [0, 1]
"""

import numpy as np
import pytest

from stablestats.core.exceptions import DimensionError, ValidationError
from stablestats.core.validation import (
    check_1d,
    check_array,
    check_consistent_length,
    check_min_samples,
    check_probabilities,
)


# ═══════════════════════════════════════════════════════════════════════
# check_array
# ═══════════════════════════════════════════════════════════════════════


class TestCheckArray:
    """check_array is the numeric coercion layer."""

    def test_list_to_float64(self):
        result = check_array([1, 2, 3], "X")
        assert isinstance(result, np.ndarray)
        assert result.dtype == np.float64
        np.testing.assert_array_equal(result, [1.0, 2.0, 3.0])

    @pytest.mark.parametrize("dtype", [
        np.int8, np.int16, np.int32, np.int64,
        np.uint8, np.uint16, np.uint32, np.uint64,
        np.float16, np.float32, np.float64,
    ])
    def test_every_fixed_width_dtype_accepted(self, dtype):
        arr = np.array([1, 2, 3], dtype=dtype)
        result = check_array(arr, "X")
        assert result.dtype == np.float64
        np.testing.assert_array_equal(result, [1.0, 2.0, 3.0])

    def test_float64_not_copied(self):
        arr = np.array([1.0, 2.0, 3.0])
        assert check_array(arr, "X") is arr

    def test_input_not_mutated(self):
        arr = np.array([3, 1, 2], dtype=np.int64)
        check_array(arr, "X")
        np.testing.assert_array_equal(arr, [3, 1, 2])
        assert arr.dtype == np.int64

    def test_large_integer_widened(self):
        """Integers beyond 2**53 are accepted with rounding."""
        arr = np.array([2**60], dtype=np.int64)
        result = check_array(arr, "X")
        assert result[0] == float(2**60)

    def test_tuple_accepted(self):
        np.testing.assert_array_equal(check_array((1.5, 2.5), "X"), [1.5, 2.5])

    def test_to_numpy_object_accepted(self):
        class Column:
            def to_numpy(self):
                return np.array([4, 5, 6])

        np.testing.assert_array_equal(check_array(Column(), "X"), [4.0, 5.0, 6.0])

    def test_empty_array(self):
        result = check_array([], "X")
        assert isinstance(result, np.ndarray)
        assert len(result) == 0

    def test_nan_preserved(self):
        result = check_array([1.0, np.nan], "X")
        assert np.isnan(result[1])

    def test_rejects_mixed_types(self):
        """Mixed types produce object dtype → ValidationError."""
        with pytest.raises(ValidationError, match="object dtype"):
            check_array([None, 1, 2.0], "X")

    def test_rejects_strings(self):
        with pytest.raises(ValidationError, match="not an integer or floating type"):
            check_array(["a", "b", "c"], "X")

    def test_rejects_bool(self):
        with pytest.raises(ValidationError, match="bool"):
            check_array([True, False], "X")

    def test_rejects_complex(self):
        with pytest.raises(ValidationError, match="complex"):
            check_array([1 + 2j, 3 + 0j], "X")

    def test_rejects_2d(self):
        with pytest.raises(DimensionError, match="expected 1D.*got 2D"):
            check_array([[1, 2], [3, 4]], "X")

    def test_rejects_scalar(self):
        with pytest.raises(DimensionError, match="got 0D"):
            check_array(5.0, "X")

    def test_error_message_includes_name(self):
        with pytest.raises(ValidationError, match="my_var"):
            check_array(["a", "b"], "my_var")


# ═══════════════════════════════════════════════════════════════════════
# check_1d
# ═══════════════════════════════════════════════════════════════════════


class TestCheck1d:

    def test_1d_passes(self):
        check_1d(np.array([1.0, 2.0]), "X")

    def test_error_includes_shape(self):
        with pytest.raises(DimensionError, match=r"shape \(3, 2\)"):
            check_1d(np.ones((3, 2)), "X")


# ═══════════════════════════════════════════════════════════════════════
# check_consistent_length
# ═══════════════════════════════════════════════════════════════════════


class TestCheckConsistentLength:

    def test_same_length_passes(self):
        check_consistent_length(
            np.ones(3), np.ones(3), names=("w", "data")
        )

    def test_mismatch_raises_with_details(self):
        with pytest.raises(DimensionError, match="w=3, data=4"):
            check_consistent_length(
                np.ones(3), np.ones(4), names=("w", "data")
            )

    def test_single_array_passes(self):
        check_consistent_length(np.ones(3), names=("data",))

    def test_names_count_mismatch(self):
        with pytest.raises(ValueError, match="must match"):
            check_consistent_length(np.ones(3), np.ones(3), names=("a",))


# ═══════════════════════════════════════════════════════════════════════
# check_min_samples
# ═══════════════════════════════════════════════════════════════════════


class TestCheckMinSamples:

    def test_enough_passes(self):
        check_min_samples(np.ones(2), 2, "X")

    def test_too_few_raises(self):
        with pytest.raises(ValidationError, match="at least 1 samples, got 0"):
            check_min_samples(np.array([]), 1, "X")


# ═══════════════════════════════════════════════════════════════════════
# check_probabilities
# ═══════════════════════════════════════════════════════════════════════


class TestCheckProbabilities:

    def test_valid_probs(self):
        result = check_probabilities([0, 0.5, 1], "probs")
        np.testing.assert_array_equal(result, [0.0, 0.5, 1.0])

    @pytest.mark.parametrize("bad", [-0.1, 1.5, np.nan])
    def test_out_of_range_rejected(self, bad):
        with pytest.raises(ValidationError, match="probs"):
            check_probabilities([0.5, bad], "probs")
