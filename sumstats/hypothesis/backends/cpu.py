"""
CPU reference backend for hypothesis tests.
"""

from __future__ import annotations

from sumstats.core.result import Result
from sumstats.core.compute.timing import Timer
from sumstats.hypothesis._common import TTestParams
from sumstats.hypothesis.design import TwoSampleDesign
from sumstats.hypothesis.backends._t_test import t_two_sample


class CPUHypothesisBackend:
    """CPU reference backend for hypothesis tests."""

    @property
    def name(self) -> str:
        return 'cpu_two_sample_t'

    def solve(self, design: TwoSampleDesign) -> Result[TTestParams]:
        timer = Timer()
        timer.start()

        with timer.section('t_two_sample'):
            params, warnings_list = t_two_sample(design)

        timer.stop()

        return Result(
            params=params,
            info={
                'method': 'Two Sample t-statistic',
                'formula': design.formula,
                'policy': design.policy,
                'p_value': 'placeholder',
            },
            timing=timer.result(),
            backend_name=self.name,
            warnings=tuple(warnings_list),
        )
