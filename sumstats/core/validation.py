"""
Input validation utilities for sumstats.

These validators follow the "fail fast, fail loud" principle. They raise
immediately with clear error messages rather than silently correcting
or making assumptions about user intent.

Design principles:
    - No silent type coercion (except np.asarray on array-likes)
    - Clear, actionable error messages with actual values
    - Each function validates ONE thing
    - Parameter names included in all error messages
"""

import numpy as np
from numpy.typing import ArrayLike, NDArray
from typing import Any, Iterable

from sumstats.core.exceptions import (
    ValidationError, DimensionError, InsufficientDataError,
)


def check_array(
    array: ArrayLike,
    name: str,
) -> NDArray[np.floating[Any]]:
    """
    Validate and convert input to a float numpy array.

    Accepts any array-like (including objects exposing ``.values`` such as
    a pandas Series) and converts to numpy. Rejects inputs that result in
    object dtype or a non-numeric dtype.

    Args:
        array: Input to validate
        name: Parameter name for error messages

    Returns:
        numpy.ndarray with floating dtype

    Raises:
        ValidationError: If input cannot be converted to numeric array
    """
    if hasattr(array, 'values') and not isinstance(array, dict):
        array = array.values

    try:
        result = np.asarray(array)
    except (ValueError, TypeError) as e:
        raise ValidationError(f"{name}: cannot convert to array: {e}") from e

    if result.dtype == object:
        raise ValidationError(
            f"{name}: converted to object dtype, indicating mixed types or non-numeric data"
        )

    # Strings, bytes, datetimes, complex
    if not (np.issubdtype(result.dtype, np.integer)
            or np.issubdtype(result.dtype, np.floating)
            or result.dtype == np.bool_):
        raise ValidationError(
            f"{name}: non-numeric dtype {result.dtype}, expected real numbers"
        )

    if result.dtype != np.float64:
        result = result.astype(np.float64)

    return result


def check_finite(array: NDArray[np.floating[Any]], name: str) -> None:
    """
    Verify array contains no NaN or Inf values.

    Raises:
        ValidationError: If array contains non-finite values
    """
    if not np.all(np.isfinite(array)):
        n_nan = int(np.sum(np.isnan(array)))
        n_inf = int(np.sum(np.isinf(array)))
        raise ValidationError(
            f"{name}: contains non-finite values ({n_nan} NaN, {n_inf} Inf)"
        )


def check_1d(array: NDArray[np.floating[Any]], name: str) -> None:
    """
    Verify array is 1-dimensional.

    Raises:
        DimensionError: If array is not 1D
    """
    if array.ndim != 1:
        raise DimensionError(
            f"{name}: expected 1D array, got {array.ndim}D with shape {array.shape}"
        )


def check_min_observations(
    array: NDArray[np.floating[Any]],
    required: int,
    statistic: str,
    name: str,
) -> None:
    """
    Verify a 1-D array holds enough observations for a statistic.

    Args:
        array: 1D array to check
        required: Minimum number of observations
        statistic: Statistic name, recorded on the exception
        name: Parameter name for error messages

    Raises:
        InsufficientDataError: If array has fewer than `required` elements
    """
    n = array.shape[0]
    if n < required:
        raise InsufficientDataError(
            f"{name}: {statistic} requires at least {required} "
            f"observation{'s' if required != 1 else ''}, got {n}",
            statistic=statistic,
            n=n,
            required=required,
        )


def check_choice(value: Any, choices: Iterable[str], name: str) -> None:
    """
    Verify an option string is one of the allowed values.

    Raises:
        ValidationError: If value is not in choices
    """
    choices = tuple(choices)
    if value not in choices:
        allowed = ", ".join(repr(c) for c in choices)
        raise ValidationError(
            f"Unknown {name}: {value!r}. Must be one of {allowed}."
        )
