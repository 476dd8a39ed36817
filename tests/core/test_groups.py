"""
Tests for the input data model.

Validates:
    - SampleGroup statistics (n, mean, var, sd, median, sum_sq)
    - Read-only values and validation on construction
    - Summary-mean (aggregated) groups
    - FactorialCell and XYSeries construction
"""

import numpy as np
import pytest

from labstats.core.exceptions import DimensionError, ValidationError
from labstats.core.groups import (
    FactorialCell,
    SampleGroup,
    XYSeries,
    aggregated_warning,
    any_aggregated,
    as_group,
)


class TestSampleGroup:

    def test_statistics(self):
        g = SampleGroup("ctrl", [2, 4, 4, 4, 5, 5, 7, 9])
        assert g.n == 8
        assert g.mean == pytest.approx(5.0)
        assert g.sum_sq == pytest.approx(32.0)
        assert g.var == pytest.approx(32.0 / 7)
        assert g.sd == pytest.approx(np.sqrt(32.0 / 7))
        assert g.median == pytest.approx(4.5)

    def test_single_value_has_zero_variance(self):
        g = SampleGroup("one", [3.0])
        assert g.var == 0.0
        assert g.sd == 0.0

    def test_empty_group(self):
        g = SampleGroup("empty", [])
        assert g.n == 0
        assert np.isnan(g.mean)
        assert g.var == 0.0

    def test_values_are_read_only(self):
        g = SampleGroup("ctrl", [1, 2, 3])
        with pytest.raises(ValueError):
            g.values[0] = 10.0

    def test_caller_array_not_shared(self):
        raw = np.array([1.0, 2.0, 3.0])
        g = SampleGroup("ctrl", raw)
        raw[0] = 100.0
        assert g.values[0] == 1.0

    def test_non_finite_rejected(self):
        with pytest.raises(ValidationError):
            SampleGroup("bad", [1.0, np.nan])

    def test_2d_rejected(self):
        with pytest.raises(DimensionError):
            SampleGroup("bad", [[1, 2], [3, 4]])

    def test_name_coerced_to_str(self):
        assert SampleGroup(24, [1, 2]).name == "24"


class TestAggregated:

    def test_from_summary(self):
        g = SampleGroup.from_summary("drug", mean=14.2)
        assert g.aggregated
        assert g.n == 1
        assert g.mean == pytest.approx(14.2)

    def test_any_aggregated(self):
        groups = [SampleGroup("a", [1, 2]), SampleGroup.from_summary("b", 3.0)]
        assert any_aggregated(groups) == ("b",)

    def test_warning_names_groups(self):
        msg = aggregated_warning(("b", "c"))
        assert "'b'" in msg and "'c'" in msg
        assert "single observation" in msg


class TestOtherInputs:

    def test_factorial_cell_from_values(self):
        cell = FactorialCell.from_values("WT", 24.0, [3.1, 2.9])
        assert cell.factor_a == "WT"
        assert cell.factor_b == 24.0
        assert cell.group.n == 2
        assert cell.group.name == "WT @ 24.0"

    def test_xy_series_uses_shorter_length(self):
        s = XYSeries("s", [1, 2, 3, 4], [1, 2, 3])
        assert s.n == 3

    def test_as_group(self):
        g = SampleGroup("a", [1, 2])
        assert as_group(g, "x") is g
        wrapped = as_group([1, 2, 3], "x")
        assert wrapped.name == "x"
        assert wrapped.n == 3
