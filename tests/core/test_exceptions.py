"""
Tests for the LabStats exception hierarchy.

Validates:
    - Inheritance chain (all exceptions catchable via LabStatsError)
    - Diagnostic attributes on InsufficientDataError,
      MismatchedLengthError, IncompleteDesignError
    - Default attribute values
"""

import pytest

from labstats.core.exceptions import (
    DimensionError,
    IncompleteDesignError,
    InsufficientDataError,
    LabStatsError,
    MismatchedLengthError,
    NumericalError,
    ValidationError,
)


# ═══════════════════════════════════════════════════════════════════════
# Inheritance hierarchy
# ═══════════════════════════════════════════════════════════════════════


class TestInheritance:
    """Every exception is catchable via LabStatsError."""

    @pytest.mark.parametrize("exc", [
        ValidationError,
        DimensionError,
        InsufficientDataError,
        MismatchedLengthError,
        IncompleteDesignError,
        NumericalError,
    ])
    def test_catchable_as_base(self, exc):
        with pytest.raises(LabStatsError):
            raise exc("boom")

    def test_insufficient_data_is_validation_error(self):
        with pytest.raises(ValidationError):
            raise InsufficientDataError("too few groups")

    def test_mismatched_length_is_dimension_error(self):
        with pytest.raises(DimensionError):
            raise MismatchedLengthError("unequal")

    def test_incomplete_design_is_validation_error(self):
        with pytest.raises(ValidationError):
            raise IncompleteDesignError("missing cell")

    def test_numerical_error_is_not_validation_error(self):
        assert not issubclass(NumericalError, ValidationError)


# ═══════════════════════════════════════════════════════════════════════
# Diagnostic attributes
# ═══════════════════════════════════════════════════════════════════════


class TestAttributes:

    def test_insufficient_data_attributes(self):
        e = InsufficientDataError("need 3 groups", required=3, actual=2, what='groups')
        assert e.required == 3
        assert e.actual == 2
        assert e.what == 'groups'
        assert str(e) == "need 3 groups"

    def test_insufficient_data_defaults(self):
        e = InsufficientDataError("msg")
        assert e.required is None
        assert e.actual is None
        assert e.what is None

    def test_mismatched_length_attributes(self):
        e = MismatchedLengthError("unequal", lengths=(3, 4))
        assert e.lengths == (3, 4)

    def test_incomplete_design_attributes(self):
        e = IncompleteDesignError("missing", missing_cells=(("a2", 24.0),))
        assert e.missing_cells == (("a2", 24.0),)

    def test_incomplete_design_default(self):
        assert IncompleteDesignError("missing").missing_cells == ()
