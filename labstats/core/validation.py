"""
Input validation utilities for LabStats.

These validators follow the "fail fast, fail loud" principle. They raise
immediately with clear error messages rather than silently correcting
or making assumptions about user intent.

Design principles:
    - No silent type coercion (except np.asarray on array-likes)
    - Clear, actionable error messages with actual values
    - Each function validates ONE thing
    - Parameter names included in all error messages
"""

from typing import Any, Sequence

import numpy as np
from numpy.typing import ArrayLike, NDArray

from labstats.core.exceptions import (
    ValidationError,
    DimensionError,
    InsufficientDataError,
    MismatchedLengthError,
)


def check_array(
    array: ArrayLike,
    name: str,
) -> NDArray[np.floating[Any]]:
    """
    Validate and convert input to a float64 numpy array.

    Rejects inputs that result in object dtype (indicating mixed types or
    non-numeric data) and non-numeric dtypes.

    Args:
        array: Input to validate
        name: Parameter name for error messages

    Returns:
        numpy.ndarray with floating dtype

    Raises:
        ValidationError: If input cannot be converted to numeric array
    """
    try:
        result = np.asarray(array)
    except (ValueError, TypeError) as e:
        raise ValidationError(f"{name}: cannot convert to array: {e}") from e

    if result.dtype == object:
        raise ValidationError(
            f"{name}: converted to object dtype, indicating mixed types or non-numeric data"
        )

    if result.size == 0:
        return np.zeros(0, dtype=np.float64)

    if not np.issubdtype(result.dtype, np.number):
        raise ValidationError(
            f"{name}: non-numeric dtype {result.dtype}, expected numeric data"
        )

    return result.astype(np.float64)


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


def check_equal_length(
    *arrays: NDArray[np.floating[Any]],
    names: tuple[str, ...],
) -> None:
    """
    Verify index-aligned samples have the same length.

    Args:
        *arrays: Arrays to check
        names: Parameter names for error messages (must match number of arrays)

    Raises:
        ValueError: If number of names doesn't match number of arrays
        MismatchedLengthError: If arrays have different lengths
    """
    if len(arrays) != len(names):
        raise ValueError(
            f"Number of arrays ({len(arrays)}) must match number of names ({len(names)})"
        )

    lengths = tuple(len(arr) for arr in arrays)
    if len(set(lengths)) > 1:
        details = ", ".join(f"{name}={length}" for name, length in zip(names, lengths))
        raise MismatchedLengthError(
            f"Paired samples must have equal length: {details}",
            lengths=lengths,
        )


def check_min_samples(n: int, min_samples: int, name: str) -> None:
    """
    Verify a sample has at least the minimum number of observations.

    Raises:
        InsufficientDataError: If n < min_samples
    """
    if n < min_samples:
        raise InsufficientDataError(
            f"{name}: requires at least {min_samples} observations, got {n}",
            required=min_samples,
            actual=n,
            what='observations',
        )


def check_min_groups(groups: Sequence[Any], min_groups: int, analysis: str) -> None:
    """
    Verify enough groups were supplied for an analysis.

    Raises:
        InsufficientDataError: If len(groups) < min_groups
    """
    k = len(groups)
    if k < min_groups:
        raise InsufficientDataError(
            f"{analysis}: requires at least {min_groups} groups, got {k}",
            required=min_groups,
            actual=k,
            what='groups',
        )
