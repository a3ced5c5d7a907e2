"""
Exception hierarchy for sumstats.

All exceptions inherit from SumStatsError so callers can catch any
library-specific error with a single clause.

Design principles:
    - Exceptions carry diagnostic information as attributes
    - Error messages state the actual value and what was required
"""


class SumStatsError(Exception):
    """Base exception for all sumstats errors."""
    pass


class ValidationError(SumStatsError):
    """
    Input validation failed.

    Raised when user-provided inputs (observations, option strings,
    argument types) fail validation checks.
    """
    pass


class DimensionError(ValidationError):
    """
    Observations are not a 1-D sequence.
    """
    pass


class InsufficientDataError(ValidationError):
    """
    Fewer observations than the statistic requires.

    Raised under the strict policy, e.g. for an empty sequence passed to
    mean() or a single observation passed to sample_standard_deviation().

    Attributes:
        statistic: Name of the statistic being computed
        n: Number of observations supplied
        required: Minimum number of observations the statistic needs
    """

    def __init__(
        self,
        message: str,
        statistic: str | None = None,
        n: int | None = None,
        required: int | None = None,
    ):
        super().__init__(message)
        self.statistic = statistic
        self.n = n
        self.required = required


class NumericalError(SumStatsError):
    """
    Computation produced an undefined value.

    Raised under the strict policy when a quantity the result depends on
    is zero or non-finite (e.g. a zero pooled term in the t-statistic).

    Attributes:
        quantity: Name of the offending intermediate quantity
        value: Its value, if available
    """

    def __init__(
        self,
        message: str,
        quantity: str | None = None,
        value: float | None = None,
    ):
        super().__init__(message)
        self.quantity = quantity
        self.value = value
