"""
Common types for hypothesis testing.

Defines TTestParams, the formula choices for the pooled term and the
placeholder p-value.
"""

from __future__ import annotations

from dataclasses import dataclass
from typing import Literal


Formula = Literal['original', 'welch']

# sd_1 / n_1 + sd_2 / n_2 (standard deviations over counts)
FORMULA_ORIGINAL = 'original'

# sd_1^2 / n_1 + sd_2^2 / n_2 (variances over counts)
FORMULA_WELCH = 'welch'

VALID_FORMULAS = (FORMULA_ORIGINAL, FORMULA_WELCH)

# TODO: replace with the Student's t CDF once the t-distribution lands
PLACEHOLDER_P_VALUE = 0.05

PLACEHOLDER_WARNING = (
    "p_value is a placeholder (0.05), not computed from the t-distribution"
)


@dataclass(frozen=True)
class TTestParams:
    """
    Parameter payload for the two-sample t-statistic.

    Attributes
    ----------
    t : float
        mean_delta / sqrt(pooled_term). nan or inf under the permissive
        policy when pooled_term is zero or non-finite.
    p_value : float
        Always PLACEHOLDER_P_VALUE; see p_value_is_placeholder.
    mean_delta : float
        sample_mean of the first sample minus that of the second.
    pooled_term : float
        Quantity under the square root in the denominator.
    formula : str
        'original' or 'welch'.
    p_value_is_placeholder : bool
        True while p_value is not derived from the t-distribution.
    """
    t: float
    p_value: float
    mean_delta: float
    pooled_term: float
    formula: str
    p_value_is_placeholder: bool = True
