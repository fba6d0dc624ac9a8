"""
Descriptive statistics module.

Numerically stable one-pass statistics over in-memory numeric sequences.
Every scalar function takes array-likes of any integer or floating
dtype and returns a Python float (extrema also return positions).

Public API:
    mean, absdev, variance, sd, tss        - central tendency and dispersion
    skew, kurtosis, lag1autocorrelation     - shape
    covariance, correlation, p_variance,
    t_test                                  - two-sample association
    w_mean, w_variance, w_sd, ...           - weighted counterparts
    max, min, minmax, median_from_sorted_data,
    quantile_from_sorted_data               - order statistics
    summarize(data), compare(x, y)          - everything at once

Functions suffixed ``_mean`` / ``_mean_sd`` / ``_with_fixed_mean`` take a
previously computed mean (and sd) so it is not recomputed.
"""

from stablestats.descriptive._central import (
    mean,
    absdev,
    absdev_mean,
    variance_with_fixed_mean,
    sd_with_fixed_mean,
    variance_mean,
    sd_mean,
    variance,
    sd,
    tss_mean,
    tss,
)
from stablestats.descriptive._shape import (
    skew,
    skew_mean_sd,
    kurtosis,
    kurtosis_main_sd,
    lag1autocorrelation,
    lag1autocorrelation_mean,
)
from stablestats.descriptive._association import (
    covariance_mean,
    covariance,
    correlation,
    p_variance,
    t_test,
)
from stablestats.descriptive._weighted import (
    w_mean,
    w_absdev,
    w_absdev_mean,
    w_variance_with_fixed_mean,
    wsd_with_fixed_mean,
    w_variance_mean,
    w_sd_mean,
    w_variance,
    w_sd,
    w_skew,
    w_skew_mean_sd,
    w_kurtosis,
    w_kurtosis_mean_sd,
    w_tss_mean,
    w_tss,
)
from stablestats.descriptive._order import (
    max,
    min,
    minmax,
    median_from_sorted_data,
    quantile_from_sorted_data,
)
from stablestats.descriptive.design import SampleDesign
from stablestats.descriptive.solution import (
    SummaryParams,
    SummarySolution,
    ComparisonParams,
    ComparisonSolution,
)
from stablestats.descriptive.solvers import summarize, compare

__all__ = [
    # Central tendency and dispersion
    "mean",
    "absdev",
    "absdev_mean",
    "variance_with_fixed_mean",
    "sd_with_fixed_mean",
    "variance_mean",
    "sd_mean",
    "variance",
    "sd",
    "tss_mean",
    "tss",
    # Shape
    "skew",
    "skew_mean_sd",
    "kurtosis",
    "kurtosis_main_sd",
    "lag1autocorrelation",
    "lag1autocorrelation_mean",
    # Two-sample
    "covariance_mean",
    "covariance",
    "correlation",
    "p_variance",
    "t_test",
    # Weighted
    "w_mean",
    "w_absdev",
    "w_absdev_mean",
    "w_variance_with_fixed_mean",
    "wsd_with_fixed_mean",
    "w_variance_mean",
    "w_sd_mean",
    "w_variance",
    "w_sd",
    "w_skew",
    "w_skew_mean_sd",
    "w_kurtosis",
    "w_kurtosis_mean_sd",
    "w_tss_mean",
    "w_tss",
    # Order statistics
    "max",
    "min",
    "minmax",
    "median_from_sorted_data",
    "quantile_from_sorted_data",
    # Aggregates
    "summarize",
    "compare",
    "SampleDesign",
    "SummaryParams",
    "SummarySolution",
    "ComparisonParams",
    "ComparisonSolution",
]
