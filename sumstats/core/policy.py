"""
Numeric policy constants for sumstats.

This module is the SINGLE SOURCE OF TRUTH for policy strings.
Import from here, never use raw strings.

A policy decides what happens when a statistic is undefined for its input
(an empty sequence for mean(), a single observation for the sample
standard deviation, a zero pooled term in the t-statistic):

    'strict'      raise InsufficientDataError / NumericalError (default)
    'permissive'  return the IEEE-754 result (nan or inf) and warn

Usage:
    from sumstats.core.policy import POLICY_STRICT, check_policy

    check_policy(policy)
    if policy == POLICY_STRICT:
        check_min_observations(x, 2, 'sample standard deviation', 'x')
"""

from typing import Literal

from sumstats.core.validation import check_choice

Policy = Literal['strict', 'permissive']

# Undersized or undefined inputs raise
POLICY_STRICT = 'strict'

# Undersized or undefined inputs propagate nan/inf
POLICY_PERMISSIVE = 'permissive'

ALL_POLICIES = (POLICY_STRICT, POLICY_PERMISSIVE)

DEFAULT_POLICY: Policy = POLICY_STRICT


def check_policy(policy: str) -> None:
    """Raise ValidationError for an unknown policy string."""
    check_choice(policy, ALL_POLICIES, 'policy')


__all__ = [
    'Policy',
    'POLICY_STRICT',
    'POLICY_PERMISSIVE',
    'ALL_POLICIES',
    'DEFAULT_POLICY',
    'check_policy',
]
