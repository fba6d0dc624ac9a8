"""
Descriptive statistics solution types.

Contains the parameter payloads and the user-facing solution wrappers
returned by summarize() and compare().
"""

from __future__ import annotations

from dataclasses import dataclass
from typing import Any, TYPE_CHECKING
import numpy as np
from numpy.typing import NDArray

from stablestats.core.result import Result

if TYPE_CHECKING:
    from stablestats.descriptive.design import SampleDesign


@dataclass(frozen=True)
class SummaryParams:
    """
    Parameter payload for a one-sample summary.

    Weighted fields are None unless the design carries weights.
    """
    n: int
    n_used: int
    mean: float
    variance: float
    sd: float
    absdev: float
    tss: float
    skewness: float
    kurtosis: float
    lag1_autocorrelation: float
    min: float
    min_index: int
    max: float
    max_index: int
    median: float

    # Quantiles: shape (n_probs,)
    quantiles: NDArray[np.floating[Any]]
    quantile_probs: NDArray[np.floating[Any]]

    w_mean: float | None = None
    w_variance: float | None = None
    w_sd: float | None = None
    w_absdev: float | None = None
    w_tss: float | None = None
    w_skewness: float | None = None
    w_kurtosis: float | None = None


@dataclass
class SummarySolution:
    """
    User-facing one-sample summary.

    Wraps Result[SummaryParams] and provides convenient accessors.
    """
    _result: Result[SummaryParams]
    _design: 'SampleDesign'

    @property
    def params(self) -> SummaryParams:
        return self._result.params

    @property
    def n(self) -> int:
        """Number of observations in the design."""
        return self._result.params.n

    @property
    def n_used(self) -> int:
        """Number of observations after the missing data policy."""
        return self._result.params.n_used

    @property
    def mean(self) -> float:
        return self._result.params.mean

    @property
    def variance(self) -> float:
        """Sample variance (Bessel-corrected, n-1)."""
        return self._result.params.variance

    @property
    def sd(self) -> float:
        return self._result.params.sd

    @property
    def absdev(self) -> float:
        return self._result.params.absdev

    @property
    def tss(self) -> float:
        return self._result.params.tss

    @property
    def skewness(self) -> float:
        return self._result.params.skewness

    @property
    def kurtosis(self) -> float:
        """Excess kurtosis (zero for a Gaussian)."""
        return self._result.params.kurtosis

    @property
    def lag1_autocorrelation(self) -> float:
        return self._result.params.lag1_autocorrelation

    @property
    def min(self) -> float:
        return self._result.params.min

    @property
    def max(self) -> float:
        return self._result.params.max

    @property
    def median(self) -> float:
        return self._result.params.median

    @property
    def quantiles(self) -> NDArray[np.floating[Any]]:
        """Quantile values, shape (n_probs,)."""
        return self._result.params.quantiles

    @property
    def quantile_probs(self) -> NDArray[np.floating[Any]]:
        return self._result.params.quantile_probs

    @property
    def w_mean(self) -> float | None:
        return self._result.params.w_mean

    @property
    def w_variance(self) -> float | None:
        return self._result.params.w_variance

    @property
    def w_sd(self) -> float | None:
        return self._result.params.w_sd

    # --- Metadata ---

    @property
    def name(self) -> str | None:
        return self._design.name

    @property
    def info(self) -> dict[str, Any]:
        return self._result.info

    @property
    def timing(self) -> dict[str, float] | None:
        return self._result.timing

    @property
    def backend_name(self) -> str:
        return self._result.backend_name

    @property
    def warnings(self) -> tuple[str, ...]:
        return self._result.warnings

    def summary(self) -> str:
        """Two-column text table of every computed statistic."""
        p = self._result.params
        rows: list[tuple[str, str]] = [
            ("n", str(p.n)),
            ("n used", str(p.n_used)),
            ("Mean", f"{p.mean:.6g}"),
            ("Variance", f"{p.variance:.6g}"),
            ("Std. dev.", f"{p.sd:.6g}"),
            ("Abs. dev.", f"{p.absdev:.6g}"),
            ("TSS", f"{p.tss:.6g}"),
            ("Skewness", f"{p.skewness:.6g}"),
            ("Kurtosis", f"{p.kurtosis:.6g}"),
            ("Lag-1 autocor.", f"{p.lag1_autocorrelation:.6g}"),
            ("Min.", f"{p.min:.6g} [{p.min_index}]"),
            ("Median", f"{p.median:.6g}"),
            ("Max.", f"{p.max:.6g} [{p.max_index}]"),
        ]
        for prob, q in zip(p.quantile_probs, p.quantiles):
            rows.append((f"{100 * prob:g}%", f"{q:.6g}"))

        if p.w_mean is not None:
            rows.extend([
                ("W. mean", f"{p.w_mean:.6g}"),
                ("W. variance", f"{p.w_variance:.6g}"),
                ("W. std. dev.", f"{p.w_sd:.6g}"),
                ("W. abs. dev.", f"{p.w_absdev:.6g}"),
                ("W. TSS", f"{p.w_tss:.6g}"),
                ("W. skewness", f"{p.w_skewness:.6g}"),
                ("W. kurtosis", f"{p.w_kurtosis:.6g}"),
            ])

        label_width = max(len(label) for label, _ in rows)
        lines = []
        if self.name is not None:
            lines.append(self.name)
        for label, value in rows:
            lines.append(f"{label.ljust(label_width)}  {value}")
        for w in self.warnings:
            lines.append(f"Warning: {w}")
        return "\n".join(lines)

    def __repr__(self) -> str:
        weighted = ", weighted" if self._result.params.w_mean is not None else ""
        return (
            f"SummarySolution(n={self.n}, n_used={self.n_used}, "
            f"mean={self.mean:.6g}, sd={self.sd:.6g}{weighted})"
        )


@dataclass(frozen=True)
class ComparisonParams:
    """
    Parameter payload for a two-sample comparison.

    covariance and correlation are None when the samples differ in length.
    """
    n1: int
    n2: int
    mean1: float
    mean2: float
    pooled_variance: float
    statistic: float
    df: float
    p_value: float
    alternative: str
    covariance: float | None = None
    correlation: float | None = None


@dataclass
class ComparisonSolution:
    """
    User-facing two-sample comparison.

    Wraps Result[ComparisonParams].
    """
    _result: Result[ComparisonParams]
    _designs: tuple['SampleDesign', 'SampleDesign']

    @property
    def params(self) -> ComparisonParams:
        return self._result.params

    @property
    def statistic(self) -> float:
        """Pooled two-sample t statistic."""
        return self._result.params.statistic

    @property
    def df(self) -> float:
        return self._result.params.df

    @property
    def p_value(self) -> float:
        return self._result.params.p_value

    @property
    def pooled_variance(self) -> float:
        return self._result.params.pooled_variance

    @property
    def covariance(self) -> float | None:
        return self._result.params.covariance

    @property
    def correlation(self) -> float | None:
        """Pearson correlation, or None for samples of unequal length."""
        return self._result.params.correlation

    @property
    def info(self) -> dict[str, Any]:
        return self._result.info

    @property
    def timing(self) -> dict[str, float] | None:
        return self._result.timing

    @property
    def warnings(self) -> tuple[str, ...]:
        return self._result.warnings

    def summary(self) -> str:
        """t.test-style text block."""
        p = self._result.params
        lines = [
            "",
            "\tTwo Sample t-test (pooled variance)",
            "",
            f"t = {p.statistic:.4f}, df = {p.df:g}, p-value = {p.p_value:.4g}",
            f"alternative hypothesis: true difference in means is "
            f"{_ALTERNATIVE_TEXT[p.alternative]} 0",
            "sample estimates:",
            f"mean of x = {p.mean1:.6g}, mean of y = {p.mean2:.6g}",
            f"pooled variance = {p.pooled_variance:.6g}",
        ]
        if p.correlation is not None:
            lines.append(
                f"covariance = {p.covariance:.6g}, correlation = {p.correlation:.6g}"
            )
        for w in self.warnings:
            lines.append(f"Warning: {w}")
        return "\n".join(lines)

    def __repr__(self) -> str:
        p = self._result.params
        return (
            f"ComparisonSolution(n1={p.n1}, n2={p.n2}, "
            f"t={p.statistic:.6g}, p_value={p.p_value:.4g})"
        )


_ALTERNATIVE_TEXT = {
    'two.sided': 'not equal to',
    'less': 'less than',
    'greater': 'greater than',
}
