"""
Exception hierarchy for StableStats.

All exceptions inherit from StableStatsError to allow catching any
library-specific error.

Only structural problems with the input (wrong dtype, wrong shape,
mismatched lengths) are exceptions. Numeric edge cases such as division
by zero or NaN contamination are not: they surface as IEEE-754 Inf/NaN
in the returned value.
"""


class StableStatsError(Exception):
    """Base exception for all StableStats errors."""
    pass


class ValidationError(StableStatsError):
    """
    Input validation failed.

    Raised when user-provided inputs cannot be read as numeric data or
    violate a structural precondition (e.g. empty input to an operation
    that reads the first element).
    """
    pass


class DimensionError(ValidationError):
    """
    Array dimensions are incorrect or inconsistent.

    Raised when an input is not one-dimensional or when two sequences
    that are paired element-wise have different lengths.
    """
    pass
