"""
SampleDesign: data wrapper for descriptive statistics.

Wraps a 1D sample and provides validation and metadata for the
descriptive statistics pipeline. The wrapped array is a private,
read-only copy, so nothing downstream can alias or mutate caller data.
"""

from __future__ import annotations

from dataclasses import dataclass
from typing import Any
import numpy as np
from numpy.typing import ArrayLike, NDArray

from pydescriptive.core.validation import check_array, check_1d


@dataclass(frozen=True)
class SampleDesign:
    """
    Design for descriptive statistics.

    Wraps a sample of n >= 0 observations that may contain NaN. Empty
    samples are valid: every statistic over them is NaN. Immutable after
    construction.

    Construction:
        SampleDesign.from_array(x)
        SampleDesign.from_array(series)   # pandas Series, keeps its name
    """
    _data: NDArray[np.floating[Any]]
    _n: int
    _name: str | None

    @classmethod
    def from_array(cls, data: ArrayLike, *, name: str | None = None) -> SampleDesign:
        """
        Build SampleDesign from array-like data.

        Parameters
        ----------
        data : array-like
            1D sample. Can be a list, tuple, numpy array, pandas Series,
            or any array-like with a .values attribute.
        name : str, optional
            Label for the sample. Defaults to the Series name, if any.
        """
        if hasattr(data, 'values') and not isinstance(data, np.ndarray):
            if name is None and getattr(data, 'name', None) is not None:
                name = str(data.name)
            data = data.values

        data_array = check_array(data, 'x')
        check_1d(data_array, 'x')
        data_array.flags.writeable = False

        return cls(_data=data_array, _n=int(data_array.shape[0]), _name=name)

    @property
    def data(self) -> NDArray[np.floating[Any]]:
        """Read-only sample values, shape (n,), may contain NaN."""
        return self._data

    @property
    def n(self) -> int:
        """Number of observations."""
        return self._n

    @property
    def name(self) -> str | None:
        """Sample label, or None if not available."""
        return self._name

    @property
    def n_missing(self) -> int:
        """Number of NaN observations."""
        return int(np.sum(np.isnan(self._data)))

    @property
    def has_missing(self) -> bool:
        """Whether the sample contains any NaN."""
        return bool(np.any(np.isnan(self._data)))

    def __repr__(self) -> str:
        label = f"{self._name!r}, " if self._name is not None else ""
        missing = f", missing={self.n_missing}" if self.has_missing else ""
        return f"SampleDesign({label}n={self._n}{missing})"
