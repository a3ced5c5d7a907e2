"""
Solver dispatch for hypothesis tests.

Provides two_samp_t_test().
"""

from __future__ import annotations

from sumstats.core.policy import Policy, DEFAULT_POLICY
from sumstats.descriptive.statistics import SampleStatistics
from sumstats.hypothesis._common import Formula, FORMULA_ORIGINAL
from sumstats.hypothesis.design import TwoSampleDesign
from sumstats.hypothesis.solution import TTestResult
from sumstats.hypothesis.backends.cpu import CPUHypothesisBackend


def two_samp_t_test(
    samp_1: SampleStatistics | TwoSampleDesign,
    samp_2: SampleStatistics | None = None,
    *,
    formula: Formula = FORMULA_ORIGINAL,
    policy: Policy = DEFAULT_POLICY,
) -> TTestResult:
    """
    Two-sample t-statistic from summary statistics.

    t = (mean_1 - mean_2) / sqrt(pooled_term), where pooled_term is
    sd_1/n_1 + sd_2/n_2 for formula='original' and
    sd_1^2/n_1 + sd_2^2/n_2 for formula='welch'.

    Parameters
    ----------
    samp_1, samp_2 : SampleStatistics
        Summaries of the two samples, built with
        SampleStatistics.from_array(). A pre-built TwoSampleDesign may be
        passed as samp_1 instead.
    formula : str
        'original' (default) or 'welch'.
    policy : str
        'strict' (default) raises InsufficientDataError for an empty
        sample and NumericalError for a zero or non-finite pooled term.
        'permissive' returns nan/inf and records a warning.

    Returns
    -------
    TTestResult
        t and a placeholder p_value (0.05). The p-value is not derived
        from the t-distribution; see TTestResult.p_value_is_placeholder.

    Examples
    --------
    >>> a = SampleStatistics.from_array([1.0, 5.5, 7.7, 8.9])
    >>> two_samp_t_test(a, a).t
    0.0
    """
    if isinstance(samp_1, TwoSampleDesign):
        design = samp_1
    else:
        design = TwoSampleDesign.for_t_test(
            samp_1, samp_2, formula=formula, policy=policy,
        )

    result = CPUHypothesisBackend().solve(design)
    return TTestResult(_result=result, _design=design)
