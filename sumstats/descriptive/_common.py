"""
Common types for descriptive statistics.

Defines the DescriptiveParams payload produced by the backends, the
statistic keys a backend can be asked to compute, and the deviation
kinds (Sample, Population) that carry each deviation's divisor offset and
minimum observation count.
"""

from __future__ import annotations

from dataclasses import dataclass
from typing import ClassVar, TYPE_CHECKING

from sumstats.core.policy import Policy, DEFAULT_POLICY

if TYPE_CHECKING:
    from numpy.typing import ArrayLike
    from sumstats.descriptive.design import ObservationDesign


STAT_MEAN = 'mean'
STAT_SAMPLE_SD = 'sample_sd'
STAT_POPULATION_SD = 'population_sd'

VALID_STATISTICS = (STAT_MEAN, STAT_SAMPLE_SD, STAT_POPULATION_SD)


class DeviationKind:
    """
    Base for the deviation kinds.

    Attributes:
        statistic: Backend key of the deviation
        label: Human-readable name for messages
        ddof: Divisor is n - ddof
        min_observations: Smallest n with a defined result
    """
    statistic: ClassVar[str]
    label: ClassVar[str]
    ddof: ClassVar[int]
    min_observations: ClassVar[int]

    @classmethod
    def standard_deviation(
        cls,
        x: ArrayLike | ObservationDesign,
        *,
        policy: Policy = DEFAULT_POLICY,
    ) -> float:
        from sumstats.descriptive.solvers import compute_statistics
        params = compute_statistics(
            x, (cls.statistic,), policy=policy, stacklevel=3,
        )
        return getattr(params, cls.statistic)


class Sample(DeviationKind):
    """Observations drawn from a larger population (divisor n - 1)."""
    statistic = STAT_SAMPLE_SD
    label = 'sample standard deviation'
    ddof = 1
    min_observations = 2


class Population(DeviationKind):
    """Observations covering the whole population (divisor n)."""
    statistic = STAT_POPULATION_SD
    label = 'population standard deviation'
    ddof = 0
    min_observations = 1


DEVIATION_KINDS = (Sample, Population)

MEAN_MIN_OBSERVATIONS = 1


def required_observations(statistic: str) -> int:
    """Smallest n for which `statistic` is defined."""
    for kind in DEVIATION_KINDS:
        if kind.statistic == statistic:
            return kind.min_observations
    return MEAN_MIN_OBSERVATIONS


def statistic_label(statistic: str) -> str:
    """Human-readable name for error and warning messages."""
    for kind in DEVIATION_KINDS:
        if kind.statistic == statistic:
            return kind.label
    return 'mean'


@dataclass(frozen=True)
class DescriptiveParams:
    """
    Parameter payload for descriptive statistics.

    Fields not requested from the backend are None.
    """
    n: int
    mean: float | None = None
    sample_sd: float | None = None
    population_sd: float | None = None
