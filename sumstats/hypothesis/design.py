"""
TwoSampleDesign: validated inputs for the two-sample t-statistic.
"""

from __future__ import annotations

from dataclasses import dataclass

from sumstats.core.exceptions import ValidationError
from sumstats.core.policy import DEFAULT_POLICY, check_policy
from sumstats.core.validation import check_choice
from sumstats.descriptive.statistics import SampleStatistics
from sumstats.hypothesis._common import FORMULA_ORIGINAL, VALID_FORMULAS


@dataclass(frozen=True)
class TwoSampleDesign:
    """
    Two already-summarized samples plus the test options.

    The t-statistic is computed from summaries only; raw observations
    must be summarized with SampleStatistics.from_array() first.
    """
    samp_1: SampleStatistics
    samp_2: SampleStatistics
    formula: str
    policy: str

    @classmethod
    def for_t_test(
        cls,
        samp_1: SampleStatistics,
        samp_2: SampleStatistics,
        *,
        formula: str = FORMULA_ORIGINAL,
        policy: str = DEFAULT_POLICY,
    ) -> TwoSampleDesign:
        for name, samp in (('samp_1', samp_1), ('samp_2', samp_2)):
            if not isinstance(samp, SampleStatistics):
                raise ValidationError(
                    f"{name}: expected SampleStatistics, got {type(samp).__name__}. "
                    f"Summarize raw data with SampleStatistics.from_array() first."
                )
        check_choice(formula, VALID_FORMULAS, 'formula')
        check_policy(policy)
        return cls(samp_1=samp_1, samp_2=samp_2, formula=formula, policy=policy)

    def __repr__(self) -> str:
        return (
            f"TwoSampleDesign(n1={self.samp_1.n}, n2={self.samp_2.n}, "
            f"formula={self.formula!r}, policy={self.policy!r})"
        )
