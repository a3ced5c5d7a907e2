"""
Core infrastructure for sumstats.

Shared abstractions used by the descriptive and hypothesis submodules.

Key components:
    result: Generic Result[P] envelope
    exceptions: Exception hierarchy
    validation: Input validators
    policy: Strict / permissive handling of undefined statistics
    compute: Timing utilities
"""

from sumstats.core.result import Result
from sumstats.core.exceptions import (
    SumStatsError,
    ValidationError,
    DimensionError,
    InsufficientDataError,
    NumericalError,
)
from sumstats.core.policy import (
    Policy,
    POLICY_STRICT,
    POLICY_PERMISSIVE,
    DEFAULT_POLICY,
)

__all__ = [
    # Result
    "Result",
    # Exceptions
    "SumStatsError",
    "ValidationError",
    "DimensionError",
    "InsufficientDataError",
    "NumericalError",
    # Policy
    "Policy",
    "POLICY_STRICT",
    "POLICY_PERMISSIVE",
    "DEFAULT_POLICY",
]
