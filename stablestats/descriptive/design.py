"""
SampleDesign: data wrapper for the aggregate solvers.

Holds a validated observation vector and an optional parallel weight
vector, immutable after construction.
"""

from __future__ import annotations

from dataclasses import dataclass
import numpy as np
from numpy.typing import ArrayLike, NDArray

from stablestats.core.validation import check_array, check_consistent_length


@dataclass(frozen=True)
class SampleDesign:
    """
    Design for one sample of observations.

    Construction:
        SampleDesign.from_array(data)
        SampleDesign.from_array(data, weights=w)
    """
    _data: NDArray[np.float64]
    _weights: NDArray[np.float64] | None
    _name: str | None

    @classmethod
    def from_array(
        cls,
        data: ArrayLike,
        *,
        weights: ArrayLike | None = None,
    ) -> SampleDesign:
        """
        Build SampleDesign from array-like data.

        Parameters
        ----------
        data : array-like
            1D observations of any integer or floating dtype, or a
            pandas Series (its name is kept).
        weights : array-like, optional
            1D weights, same length as ``data``.
        """
        name = getattr(data, 'name', None)
        x = check_array(data, 'data')

        w = None
        if weights is not None:
            w = check_array(weights, 'weights')
            check_consistent_length(x, w, names=('data', 'weights'))

        return cls(
            _data=x,
            _weights=w,
            _name=str(name) if name is not None else None,
        )

    @property
    def data(self) -> NDArray[np.float64]:
        """Observations, may contain NaN."""
        return self._data

    @property
    def weights(self) -> NDArray[np.float64] | None:
        """Weights, or None for an unweighted sample."""
        return self._weights

    @property
    def name(self) -> str | None:
        return self._name

    @property
    def n(self) -> int:
        """Number of observations."""
        return len(self._data)

    @property
    def is_weighted(self) -> bool:
        return self._weights is not None

    @property
    def n_missing(self) -> int:
        """Number of NaN observations."""
        return int(np.sum(np.isnan(self._data)))

    def __repr__(self) -> str:
        missing = f", missing={self.n_missing}" if self.n_missing else ""
        weighted = ", weighted" if self.is_weighted else ""
        return f"SampleDesign(n={self.n}{missing}{weighted})"
