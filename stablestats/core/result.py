"""
Generic result container for StableStats aggregate computations.

The scalar functions in stablestats.descriptive return plain floats. The
aggregate solvers (summarize, compare) wrap their many outputs in this
envelope so that timing, warnings and provenance travel with the numbers.

Design decisions:
    - Generic over parameter payload P for type safety
    - info dict for flexible metadata (use policy, counts, method)
    - timing is optional (don't burden unit tests)
    - Immutable (frozen=True) for reproducibility
"""

import platform
from dataclasses import dataclass, field
from typing import TypeVar, Generic, Any

import numpy as np

P = TypeVar('P')  # Parameter payload type


def _default_provenance() -> dict[str, str]:
    """Library and runtime versions that produced a result."""
    from stablestats import __version__

    return {
        'stablestats_version': __version__,
        'numpy_version': np.__version__,
        'python_version': platform.python_version(),
    }


@dataclass(frozen=True)
class Result(Generic[P]):
    """
    Immutable result envelope for statistical computations.

    Type Parameters:
        P: The domain-specific parameter payload type

    Attributes:
        params: Domain-specific values (means, variances, quantiles, ...)
        info: Structured metadata (use policy, observation counts)
        timing: Execution timing breakdown, or None if not measured
        backend_name: Identifier of the code path that produced this result
        warnings: Non-fatal issues encountered during computation
        provenance: Versions and algorithm tags for reproducibility

    Examples:
        >>> Result(
        ...     params=SummaryParams(n=14, mean=0.0728, ...),
        ...     info={'use': 'everything', 'n_used': 14},
        ...     timing={'total_seconds': 0.001},
        ...     backend_name='recurrence',
        ... )
    """
    params: P
    info: dict[str, Any]
    timing: dict[str, float] | None
    backend_name: str
    warnings: tuple[str, ...] = field(default_factory=tuple)
    provenance: dict[str, Any] = field(default_factory=_default_provenance)

    def has_warning(self, substring: str) -> bool:
        """Check if any warning contains the given substring."""
        return any(substring in w for w in self.warnings)
