"""
Summary value objects built from raw observations.

SampleStatistics and PopulationStatistics bundle a mean, a standard
deviation and the observation count. Both are constructed through the
shared GetStatistics contract:

    SampleStatistics.from_array(x)
    PopulationStatistics.from_array(x)

The ``standard_error`` field of both types holds the standard deviation
of the observations, not the standard error of the mean. The name is kept
for compatibility with existing consumers; the standard error of the mean
is available as ``standard_error_of_mean``.
"""

from __future__ import annotations

from dataclasses import dataclass
from typing import ClassVar, Protocol, runtime_checkable
import numpy as np
from numpy.typing import ArrayLike

from sumstats.core.policy import Policy, DEFAULT_POLICY
from sumstats.descriptive.design import ObservationDesign
from sumstats.descriptive.solvers import compute_statistics
from sumstats.descriptive._common import (
    DeviationKind, Sample, Population, STAT_MEAN,
)


@runtime_checkable
class GetStatistics(Protocol):
    """Construction contract shared by the summary value objects."""

    @classmethod
    def from_array(
        cls,
        x: ArrayLike | ObservationDesign,
        *,
        policy: Policy = DEFAULT_POLICY,
    ) -> GetStatistics:
        ...


def _summarize(
    x: ArrayLike | ObservationDesign,
    kind: type[DeviationKind],
    policy: str,
) -> tuple[float, float, int]:
    # stacklevel 4: compute_statistics -> _summarize -> from_array -> caller
    params = compute_statistics(
        x, (STAT_MEAN, kind.statistic), policy=policy, stacklevel=4,
    )
    return params.mean, getattr(params, kind.statistic), params.n


def _sem(sd: float, n: int) -> float:
    with np.errstate(divide='ignore', invalid='ignore'):
        return float(np.float64(sd) / np.sqrt(np.float64(n)))


@dataclass(frozen=True)
class SampleStatistics:
    """
    Summary of one sample.

    Attributes
    ----------
    sample_mean : float
        Arithmetic mean of the observations.
    standard_error : float
        Sample (n - 1) standard deviation of the observations.
    n : int
        Number of observations.
    """
    sample_mean: float
    standard_error: float
    n: int

    kind: ClassVar[type[Sample]] = Sample

    @classmethod
    def from_array(
        cls,
        x: ArrayLike | ObservationDesign,
        *,
        policy: Policy = DEFAULT_POLICY,
    ) -> SampleStatistics:
        """
        Summarize raw observations.

        Parameters
        ----------
        x : array-like or ObservationDesign
            1-D observations. At least two under the strict policy.
        policy : str
            'strict' or 'permissive'.
        """
        center, spread, n = _summarize(x, cls.kind, policy)
        return cls(sample_mean=center, standard_error=spread, n=n)

    @property
    def standard_error_of_mean(self) -> float:
        """standard_error / sqrt(n)."""
        return _sem(self.standard_error, self.n)


@dataclass(frozen=True)
class PopulationStatistics:
    """
    Summary of a whole population.

    Attributes
    ----------
    population_mean : float
        Arithmetic mean of the observations.
    standard_error : float
        Population (n) standard deviation of the observations.
    n : int
        Number of observations.
    """
    population_mean: float
    standard_error: float
    n: int

    kind: ClassVar[type[Population]] = Population

    @classmethod
    def from_array(
        cls,
        x: ArrayLike | ObservationDesign,
        *,
        policy: Policy = DEFAULT_POLICY,
    ) -> PopulationStatistics:
        """
        Summarize raw observations.

        Parameters
        ----------
        x : array-like or ObservationDesign
            1-D observations. At least one under the strict policy.
        policy : str
            'strict' or 'permissive'.
        """
        center, spread, n = _summarize(x, cls.kind, policy)
        return cls(population_mean=center, standard_error=spread, n=n)

    @property
    def standard_error_of_mean(self) -> float:
        """standard_error / sqrt(n)."""
        return _sem(self.standard_error, self.n)
