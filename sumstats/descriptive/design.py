"""
ObservationDesign: data wrapper for descriptive statistics.

Wraps a 1-D sequence of observations and provides validation and
metadata for the descriptive statistics pipeline.
"""

from __future__ import annotations

from dataclasses import dataclass
from typing import Any
import numpy as np
from numpy.typing import ArrayLike, NDArray

from sumstats.core.policy import POLICY_STRICT, DEFAULT_POLICY, check_policy
from sumstats.core.validation import check_array, check_1d, check_finite


@dataclass(frozen=True)
class ObservationDesign:
    """
    Design for descriptive statistics.

    Holds a float64 vector of n observations. Immutable after construction.
    Under the strict policy the observations must be finite; under the
    permissive policy NaN and Inf are kept and propagate through every
    statistic.

    Construction:
        ObservationDesign.from_array(x)
        ObservationDesign.from_array(x, policy='permissive')
    """
    _data: NDArray[np.floating[Any]]
    _n: int
    _policy: str

    @classmethod
    def from_array(
        cls,
        data: ArrayLike,
        *,
        policy: str = DEFAULT_POLICY,
        name: str = 'x',
    ) -> ObservationDesign:
        """
        Build ObservationDesign from array-like data.

        Parameters
        ----------
        data : array-like
            1-D observations: list, tuple, numpy array, or anything with a
            .values attribute (pandas Series).
        policy : str
            'strict' or 'permissive'.
        name : str
            Parameter name used in error messages.
        """
        check_policy(policy)
        arr = check_array(data, name)
        check_1d(arr, name)
        if policy == POLICY_STRICT:
            check_finite(arr, name)

        # Private copy so later mutation of the caller's buffer cannot leak in
        arr = np.array(arr, dtype=np.float64, copy=True)
        arr.setflags(write=False)

        return cls(_data=arr, _n=int(arr.shape[0]), _policy=policy)

    @property
    def data(self) -> NDArray[np.floating[Any]]:
        """Observation vector (n,), read-only."""
        return self._data

    @property
    def n(self) -> int:
        """Number of observations."""
        return self._n

    @property
    def policy(self) -> str:
        """Policy the design was validated under."""
        return self._policy

    def __repr__(self) -> str:
        return f"ObservationDesign(n={self._n}, policy={self._policy!r})"
