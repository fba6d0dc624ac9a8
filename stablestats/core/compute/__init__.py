"""
Shared compute infrastructure for StableStats.

Submodules:
    timing: Execution timing utilities
    tolerances: Numerical comparison tolerance tiers
"""

from stablestats.core.compute.timing import Timer, timed
from stablestats.core.compute.tolerances import (
    ToleranceTier,
    CPU_FP64,
    CPU_FP64_ILL_CONDITIONED,
    select_tolerance,
)

__all__ = [
    # Timing
    "Timer",
    "timed",
    # Tolerances
    "ToleranceTier",
    "CPU_FP64",
    "CPU_FP64_ILL_CONDITIONED",
    "select_tolerance",
]
