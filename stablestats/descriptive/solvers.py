"""
Aggregate entry points for descriptive statistics.

summarize() computes every one-sample statistic at once and compare()
every two-sample one. Both reuse the mean and standard deviation they
compute instead of re-deriving them for each dependent statistic, and
both are thin orchestration over the scalar functions.
"""

from __future__ import annotations

from typing import Literal
import numpy as np
from numpy.typing import ArrayLike
from scipy import stats as sp_stats

from stablestats.core.compute.timing import Timer
from stablestats.core.exceptions import ValidationError
from stablestats.core.result import Result
from stablestats.core.validation import check_min_samples, check_probabilities
from stablestats.descriptive.design import SampleDesign
from stablestats.descriptive.solution import (
    SummaryParams, SummarySolution, ComparisonParams, ComparisonSolution,
)
from stablestats.descriptive._missing import apply_use_policy
from stablestats.descriptive._central import (
    _mean, _variance, _bessel, _absdev, _tss,
)
from stablestats.descriptive._shape import _standardized_moment, _lag1
from stablestats.descriptive._association import (
    _covariance, _p_variance, _t_statistic, correlation,
)
from stablestats.descriptive._weighted import (
    _w_mean, _w_absdev, _w_variance_mean, _w_standardized_moment, _w_tss,
)
from stablestats.descriptive._order import (
    minmax, median_from_sorted_data, quantile_from_sorted_data,
)


UseMethod = Literal['everything', 'complete.obs']
Alternative = Literal['two.sided', 'less', 'greater']

DEFAULT_PROBS = (0.0, 0.25, 0.5, 0.75, 1.0)


def _ensure_design(
    data: ArrayLike | SampleDesign,
    weights: ArrayLike | None = None,
) -> SampleDesign:
    """Convert raw array to SampleDesign if needed."""
    if isinstance(data, SampleDesign):
        if weights is not None:
            raise ValidationError(
                "weights: pass weights to SampleDesign.from_array(), not "
                "alongside an existing SampleDesign"
            )
        return data
    return SampleDesign.from_array(data, weights=weights)


def summarize(
    data: ArrayLike | SampleDesign,
    *,
    weights: ArrayLike | None = None,
    probs: ArrayLike | None = None,
    use: UseMethod = 'everything',
) -> SummarySolution:
    """
    Compute every one-sample descriptive statistic.

    Computes: mean, sample variance and sd, absolute deviation, total
    sum of squares, skewness, excess kurtosis, lag-1 autocorrelation,
    min and max with their positions, median and quantiles; plus the
    weighted mean, variance, sd, absolute deviation, sum of squares,
    skewness and kurtosis when weights are given.

    Parameters
    ----------
    data : array-like or SampleDesign
        1D observations.
    weights : array-like, optional
        1D weights, same length as ``data``. Non-positive weights
        exclude their observation from the weighted statistics.
    probs : array-like, optional
        Quantile probabilities in [0, 1]. Default (0, 0.25, 0.5, 0.75, 1).
    use : str
        'everything' (propagate NaN) or 'complete.obs' (drop NaN
        observations first). min_index and max_index refer to positions
        after the policy is applied.

    Returns
    -------
    SummarySolution
    """
    design = _ensure_design(data, weights)
    check_min_samples(design.data, 1, 'data')
    q_probs = check_probabilities(
        DEFAULT_PROBS if probs is None else probs, 'probs'
    )

    timer = Timer()
    timer.start()
    warnings_list: list[str] = []

    with timer.section('missing_data'):
        x, w, n_complete = apply_use_policy(design.data, design.weights, use)
    n = len(x)

    with timer.section('moments'):
        m = _mean(x)
        var = _bessel(_variance(x, m), n)
        s = np.sqrt(var)
        absdev = _absdev(x, m)
        tss = _tss(x, m)
        skewness = _standardized_moment(x, m, s, 3)
        kurtosis = _standardized_moment(x, m, s, 4) - 3.0
        lag1 = _lag1(x, m)

    with timer.section('order'):
        mn, mn_index, mx, mx_index = minmax(x)
        if np.any(np.isnan(x)):
            # Sorted position is meaningless once NaN is present
            median = np.nan
            quantiles = np.full(len(q_probs), np.nan)
        else:
            sorted_x = np.sort(x)
            median = median_from_sorted_data(sorted_x)
            quantiles = np.array(
                [quantile_from_sorted_data(sorted_x, f) for f in q_probs],
                dtype=np.float64,
            )

    weighted: dict[str, float] = {}
    if w is not None:
        with timer.section('weighted'):
            wm = _w_mean(w, x)
            wvar = _w_variance_mean(w, x, wm)
            wsd = np.sqrt(wvar)
            weighted = {
                'w_mean': float(wm),
                'w_variance': float(wvar),
                'w_sd': float(wsd),
                'w_absdev': float(_w_absdev(w, x, wm)),
                'w_tss': float(_w_tss(w, x, wm)),
                'w_skewness': float(_w_standardized_moment(w, x, wm, wsd, 3)),
                'w_kurtosis': float(_w_standardized_moment(w, x, wm, wsd, 4) - 3.0),
            }
        n_positive = int(np.sum(w > 0.0))
        if n_positive == 0:
            warnings_list.append("no positive weights: weighted statistics are undefined")
        elif n_positive == 1:
            warnings_list.append(
                "only one positive weight: weighted variance is undefined"
            )

    timer.stop()

    if n < 2:
        warnings_list.append(
            "fewer than 2 observations: variance, sd, skewness and kurtosis are undefined"
        )
    elif s == 0.0:
        warnings_list.append("data are essentially constant")
    n_nan = int(np.sum(np.isnan(x)))
    if n_nan:
        warnings_list.append(
            f"{n_nan} observation(s) contain NaN; results propagate NaN"
        )
    n_nan_weights = int(np.sum(np.isnan(w))) if w is not None else 0
    if n_nan_weights:
        warnings_list.append(
            f"{n_nan_weights} weight(s) are NaN; those observations are "
            f"excluded from the weighted statistics"
        )

    params = SummaryParams(
        n=design.n,
        n_used=n,
        mean=float(m),
        variance=float(var),
        sd=float(s),
        absdev=float(absdev),
        tss=float(tss),
        skewness=float(skewness),
        kurtosis=float(kurtosis),
        lag1_autocorrelation=float(lag1),
        min=mn,
        min_index=mn_index,
        max=mx,
        max_index=mx_index,
        median=float(median),
        quantiles=quantiles,
        quantile_probs=q_probs,
        **weighted,
    )

    result = Result(
        params=params,
        info={
            'use': use,
            'n_complete': n_complete,
            'weighted': w is not None,
            'method': 'recurrence',
        },
        timing=timer.result(),
        backend_name='recurrence',
        warnings=tuple(warnings_list),
    )
    return SummarySolution(_result=result, _design=design)


def compare(
    x: ArrayLike | SampleDesign,
    y: ArrayLike | SampleDesign,
    *,
    alternative: Alternative = 'two.sided',
) -> ComparisonSolution:
    """
    Compare two independent samples.

    Computes both means, the pooled variance, the pooled two-sample t
    statistic with ``df = n1 + n2 - 2`` and its p-value from the Student
    t distribution. When the samples have equal length, the covariance
    and Pearson correlation of the pairs are computed as well.

    Parameters
    ----------
    x, y : array-like or SampleDesign
        1D observations. Weights on a SampleDesign are ignored.
    alternative : str
        'two.sided', 'less' or 'greater'.

    Returns
    -------
    ComparisonSolution
    """
    if alternative not in ('two.sided', 'less', 'greater'):
        raise ValidationError(
            f"alternative must be 'two.sided', 'less', or 'greater', "
            f"got {alternative!r}"
        )

    dx = _ensure_design(x)
    dy = _ensure_design(y)
    check_min_samples(dx.data, 1, 'x')
    check_min_samples(dy.data, 1, 'y')
    a, b = dx.data, dy.data

    timer = Timer()
    timer.start()
    warnings_list: list[str] = []

    with timer.section('t_test'):
        n1, n2 = len(a), len(b)
        mean1, mean2 = _mean(a), _mean(b)
        pv = _p_variance(a, b)
        t_stat = float(_t_statistic(a, b))
        df = float(n1 + n2 - 2)
        p_value = _t_pvalue(t_stat, df, alternative)

    cov = cor = None
    if n1 == n2:
        with timer.section('association'):
            cov = float(_bessel(_covariance(a, b, mean1, mean2), n1))
            cor = correlation(a, b)

    timer.stop()

    if df <= 0:
        warnings_list.append("not enough observations: need n1 + n2 >= 3")
    elif pv == 0.0:
        warnings_list.append("data are essentially constant")

    params = ComparisonParams(
        n1=n1,
        n2=n2,
        mean1=float(mean1),
        mean2=float(mean2),
        pooled_variance=float(pv),
        statistic=t_stat,
        df=df,
        p_value=p_value,
        alternative=alternative,
        covariance=cov,
        correlation=cor,
    )

    result = Result(
        params=params,
        info={'alternative': alternative, 'paired_stats': n1 == n2},
        timing=timer.result(),
        backend_name='recurrence',
        warnings=tuple(warnings_list),
    )
    return ComparisonSolution(_result=result, _designs=(dx, dy))


def _t_pvalue(t_stat: float, df: float, alternative: str) -> float:
    """Compute p-value from t distribution."""
    if np.isnan(t_stat) or np.isnan(df) or df <= 0:
        return np.nan
    if alternative == "two.sided":
        return float(2.0 * sp_stats.t.sf(abs(t_stat), df))
    elif alternative == "less":
        return float(sp_stats.t.cdf(t_stat, df))
    else:  # greater
        return float(sp_stats.t.sf(t_stat, df))
