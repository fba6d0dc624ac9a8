"""
StableStats: numerically stable descriptive statistics for Python.

One-pass recurrence formulas (running means, Welford covariance and
correlation, weight-normalized moments) instead of naive sums, with
explicit IEEE-754 handling for order statistics.

Submodules:
    descriptive: Central tendency, dispersion, shape, association,
                 weighted and order statistics
    core: Exceptions, input coercion, result envelope
"""

__version__ = "0.1.0"

from stablestats import descriptive

__all__ = [
    "__version__",
    "descriptive",
]
