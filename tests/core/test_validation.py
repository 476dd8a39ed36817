"""
Tests for input validation utilities.

Validates every function in core/validation.py:
    - check_array: conversion, dtype coercion, object rejection
    - check_finite: NaN/Inf detection
    - check_1d: dimensionality
    - check_equal_length: paired length matching
    - check_min_samples / check_min_groups: minimum counts
"""

import numpy as np
import pytest

from labstats.core.exceptions import (
    DimensionError,
    InsufficientDataError,
    MismatchedLengthError,
    ValidationError,
)
from labstats.core.validation import (
    check_1d,
    check_array,
    check_equal_length,
    check_finite,
    check_min_groups,
    check_min_samples,
)


# ═══════════════════════════════════════════════════════════════════════
# check_array
# ═══════════════════════════════════════════════════════════════════════


class TestCheckArray:

    def test_list_to_float_array(self):
        result = check_array([1, 2, 3], "x")
        assert np.issubdtype(result.dtype, np.floating)
        np.testing.assert_array_equal(result, [1.0, 2.0, 3.0])

    def test_empty_is_allowed(self):
        result = check_array([], "x")
        assert result.shape == (0,)

    def test_object_dtype_rejected(self):
        with pytest.raises(ValidationError, match="object dtype"):
            check_array([1, "a", None], "x")

    def test_string_dtype_rejected(self):
        with pytest.raises(ValidationError, match="non-numeric"):
            check_array(["a", "b"], "x")


class TestCheckFinite:

    def test_finite_passes(self):
        check_finite(np.array([1.0, 2.0]), "x")

    def test_nan_rejected(self):
        with pytest.raises(ValidationError, match="1 NaN"):
            check_finite(np.array([1.0, np.nan]), "x")

    def test_inf_rejected(self):
        with pytest.raises(ValidationError, match="1 Inf"):
            check_finite(np.array([np.inf, 1.0]), "x")


class TestCheck1d:

    def test_2d_rejected(self):
        with pytest.raises(DimensionError):
            check_1d(np.ones((2, 2)), "x")


# ═══════════════════════════════════════════════════════════════════════
# Lengths and counts
# ═══════════════════════════════════════════════════════════════════════


class TestCheckEqualLength:

    def test_equal_passes(self):
        check_equal_length(np.ones(3), np.ones(3), names=("a", "b"))

    def test_unequal_raises_with_lengths(self):
        with pytest.raises(MismatchedLengthError) as exc_info:
            check_equal_length(np.ones(3), np.ones(4), names=("a", "b"))
        assert exc_info.value.lengths == (3, 4)
        assert "a=3" in str(exc_info.value)

    def test_names_count_must_match(self):
        with pytest.raises(ValueError):
            check_equal_length(np.ones(3), np.ones(3), names=("a",))


class TestMinimumCounts:

    def test_min_samples(self):
        check_min_samples(2, 2, "x")
        with pytest.raises(InsufficientDataError) as exc_info:
            check_min_samples(1, 2, "x")
        assert exc_info.value.required == 2
        assert exc_info.value.actual == 1
        assert exc_info.value.what == 'observations'

    def test_min_groups(self):
        with pytest.raises(InsufficientDataError) as exc_info:
            check_min_groups([1, 2], 3, "ANOVA")
        assert exc_info.value.what == 'groups'
        assert "at least 3 groups" in str(exc_info.value)
