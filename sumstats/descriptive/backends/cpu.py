"""
CPU reference backend for descriptive statistics.

Naive two-pass algorithm: the mean first, then the sum of squared
deviations from it. No compensated summation.
"""

from __future__ import annotations

from typing import Any
import numpy as np
from numpy.typing import NDArray

from sumstats.core.result import Result
from sumstats.core.compute.timing import Timer
from sumstats.core.exceptions import ValidationError
from sumstats.descriptive.design import ObservationDesign
from sumstats.descriptive._common import (
    DescriptiveParams, VALID_STATISTICS, DEVIATION_KINDS, STAT_MEAN,
)


def two_pass_mean(x: NDArray[np.floating[Any]]) -> float:
    """Sum divided by count. nan for an empty vector."""
    with np.errstate(divide='ignore', invalid='ignore'):
        return float(np.sum(x) / np.float64(x.shape[0]))


def two_pass_sd(x: NDArray[np.floating[Any]], ddof: int) -> float:
    """
    Standard deviation with divisor n - ddof.

    ddof=1 gives the Bessel-corrected sample deviation, ddof=0 the
    population deviation. n - ddof == 0 yields nan.
    """
    n = x.shape[0]
    if n == 0:
        return float('nan')

    center = two_pass_mean(x)
    with np.errstate(divide='ignore', invalid='ignore'):
        sum_sq = np.sum(np.square(x - center))
        return float(np.sqrt(sum_sq / np.float64(n - ddof)))


class CPUDescriptiveBackend:
    """CPU reference backend for descriptive statistics."""

    @property
    def name(self) -> str:
        return 'cpu_two_pass'

    def solve(
        self,
        design: ObservationDesign,
        *,
        compute: set[str],
    ) -> Result[DescriptiveParams]:
        """
        Compute requested descriptive statistics.

        Parameters
        ----------
        design : ObservationDesign
        compute : set of str
            Which statistics to compute: 'mean', 'sample_sd',
            'population_sd'.
        """
        unknown = set(compute) - set(VALID_STATISTICS)
        if unknown:
            raise ValidationError(
                f"Unknown statistics requested: {sorted(unknown)}. "
                f"Valid: {list(VALID_STATISTICS)}"
            )

        timer = Timer()
        timer.start()

        x = design.data
        values: dict[str, float] = {}

        if STAT_MEAN in compute:
            with timer.section('mean'):
                values[STAT_MEAN] = two_pass_mean(x)

        for kind in DEVIATION_KINDS:
            if kind.statistic in compute:
                with timer.section(kind.statistic):
                    values[kind.statistic] = two_pass_sd(x, ddof=kind.ddof)

        timer.stop()

        return Result(
            params=DescriptiveParams(n=design.n, **values),
            info={'policy': design.policy, 'computed': sorted(compute)},
            timing=timer.result(),
            backend_name=self.name,
        )
