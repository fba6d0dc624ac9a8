"""
Core infrastructure for StableStats.

Key components:
    result: Generic Result[P] envelope
    exceptions: Exception hierarchy
    validation: Numeric coercion and input validators
    compute: Timing and tolerance tiers
"""

from stablestats.core.result import Result
from stablestats.core.exceptions import (
    StableStatsError,
    ValidationError,
    DimensionError,
)

__all__ = [
    # Result
    "Result",
    # Exceptions
    "StableStatsError",
    "ValidationError",
    "DimensionError",
]
