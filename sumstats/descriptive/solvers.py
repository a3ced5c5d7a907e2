"""
Solver dispatch for descriptive statistics.

Provides mean(), sample_standard_deviation() and
population_standard_deviation(). Each accepts raw observations or an
ObservationDesign and returns a plain float. compute_statistics() runs
several statistics in one backend pass and is what the summary value
objects use.
"""

from __future__ import annotations

import warnings
from typing import Iterable
from numpy.typing import ArrayLike

from sumstats.core.policy import Policy, POLICY_STRICT, DEFAULT_POLICY, check_policy
from sumstats.core.validation import check_min_observations, check_finite
from sumstats.descriptive.design import ObservationDesign
from sumstats.descriptive.backends.cpu import CPUDescriptiveBackend
from sumstats.descriptive._common import (
    DescriptiveParams, VALID_STATISTICS, required_observations, statistic_label,
    STAT_MEAN, Sample, Population,
)


def _ensure_design(
    data: ArrayLike | ObservationDesign,
    policy: str,
) -> ObservationDesign:
    """Convert raw array to ObservationDesign if needed."""
    if isinstance(data, ObservationDesign):
        return data
    return ObservationDesign.from_array(data, policy=policy)


def compute_statistics(
    data: ArrayLike | ObservationDesign,
    statistics: Iterable[str],
    *,
    policy: Policy = DEFAULT_POLICY,
    stacklevel: int = 2,
) -> DescriptiveParams:
    """
    Validate against the policy and compute statistics in one backend pass.

    Parameters
    ----------
    data : array-like or ObservationDesign
        1-D observations.
    statistics : iterable of str
        Keys among 'mean', 'sample_sd', 'population_sd'.
    policy : str
        'strict' or 'permissive'.
    stacklevel : int
        Passed to warnings.warn for undefined results, counted from this
        function. 2 reports the direct caller.
    """
    check_policy(policy)
    design = _ensure_design(data, policy)
    compute = set(statistics)
    ordered = [s for s in VALID_STATISTICS if s in compute]

    if policy == POLICY_STRICT:
        check_finite(design.data, 'x')
        for stat in ordered:
            check_min_observations(
                design.data, required_observations(stat), statistic_label(stat), 'x',
            )

    params = CPUDescriptiveBackend().solve(design, compute=compute).params

    for stat in ordered:
        required = required_observations(stat)
        if design.n < required:
            warnings.warn(
                f"{statistic_label(stat)} is undefined for {design.n} observation"
                f"{'s' if design.n != 1 else ''} (needs {required}); "
                f"returning {getattr(params, stat)}",
                RuntimeWarning,
                stacklevel=stacklevel,
            )

    return params


def mean(
    x: ArrayLike | ObservationDesign,
    *,
    policy: Policy = DEFAULT_POLICY,
) -> float:
    """
    Arithmetic mean: sum of the observations divided by their count.

    Parameters
    ----------
    x : array-like or ObservationDesign
        1-D observations, at least one.
    policy : str
        'strict' raises InsufficientDataError on empty input,
        'permissive' returns nan and emits a RuntimeWarning.

    Returns
    -------
    float

    Examples
    --------
    >>> mean([1.0, 3.0])
    2.0
    """
    return compute_statistics(x, (STAT_MEAN,), policy=policy, stacklevel=3).mean


def sample_standard_deviation(
    x: ArrayLike | ObservationDesign,
    *,
    policy: Policy = DEFAULT_POLICY,
) -> float:
    """
    Bessel-corrected standard deviation, sqrt(sum((x - mean)^2) / (n - 1)).

    Parameters
    ----------
    x : array-like or ObservationDesign
        1-D observations, at least two.
    policy : str
        'strict' raises InsufficientDataError for n < 2,
        'permissive' returns nan and emits a RuntimeWarning.

    Returns
    -------
    float
    """
    return compute_statistics(
        x, (Sample.statistic,), policy=policy, stacklevel=3,
    ).sample_sd


def population_standard_deviation(
    x: ArrayLike | ObservationDesign,
    *,
    policy: Policy = DEFAULT_POLICY,
) -> float:
    """
    Uncorrected standard deviation, sqrt(sum((x - mean)^2) / n).

    Parameters
    ----------
    x : array-like or ObservationDesign
        1-D observations, at least one.
    policy : str
        'strict' raises InsufficientDataError on empty input,
        'permissive' returns nan and emits a RuntimeWarning.

    Returns
    -------
    float
    """
    return compute_statistics(
        x, (Population.statistic,), policy=policy, stacklevel=3,
    ).population_sd
