"""
Missing data handling for the aggregate solvers.

The scalar functions always propagate NaN. summarize() lets the caller
choose instead:
- 'everything': keep every observation, NaN propagates (default)
- 'complete.obs': drop observations that are NaN, or whose weight is NaN
"""

from __future__ import annotations

import numpy as np
from numpy.typing import NDArray

from stablestats.core.exceptions import ValidationError


USE_POLICIES = ('everything', 'complete.obs')


def apply_use_policy(
    data: NDArray,
    weights: NDArray | None,
    use: str,
) -> tuple[NDArray, NDArray | None, int]:
    """
    Apply a missing data policy to an observation vector.

    Parameters
    ----------
    data : NDArray
        1D observations, may contain NaN.
    weights : NDArray or None
        1D weights parallel to ``data``.
    use : str
        'everything' or 'complete.obs'.

    Returns
    -------
    clean_data : NDArray
        ``data`` unchanged for 'everything'; NaN observations removed
        for 'complete.obs'.
    clean_weights : NDArray or None
        ``weights`` filtered with the same mask.
    n_complete : int
        Number of observations (and weights) without NaN.
    """
    complete_mask = ~np.isnan(data)
    if weights is not None:
        complete_mask &= ~np.isnan(weights)
    n_complete = int(np.sum(complete_mask))

    if use == 'everything':
        return data, weights, n_complete

    elif use == 'complete.obs':
        if n_complete < 1:
            raise ValidationError(
                "No complete observations (all values are NaN)."
            )
        clean_weights = weights[complete_mask] if weights is not None else None
        return data[complete_mask], clean_weights, n_complete

    else:
        raise ValidationError(
            f"Invalid use= parameter: {use!r}. "
            f"Must be 'everything' or 'complete.obs'."
        )
