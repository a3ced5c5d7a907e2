"""
Hypothesis testing module.

Public API:
    two_samp_t_test(samp_1, samp_2)  - t-statistic from two SampleStatistics
"""

from sumstats.hypothesis.solvers import two_samp_t_test
from sumstats.hypothesis.design import TwoSampleDesign
from sumstats.hypothesis._common import (
    TTestParams, PLACEHOLDER_P_VALUE, FORMULA_ORIGINAL, FORMULA_WELCH,
)
from sumstats.hypothesis.solution import TTestResult

__all__ = [
    "two_samp_t_test",
    "TwoSampleDesign",
    "TTestParams",
    "TTestResult",
    "PLACEHOLDER_P_VALUE",
    "FORMULA_ORIGINAL",
    "FORMULA_WELCH",
]
