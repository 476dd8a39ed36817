"""
Tests for Levene's test (median-centred, Brown-Forsythe variant).
"""

import numpy as np
import pytest
from scipy import stats as sp_stats

from labstats.core import SampleGroup
from labstats.anova import levene_test


class TestLevene:

    def test_equal_spread_shifted_means(self, shifted_groups):
        res = levene_test(shifted_groups)
        assert res.p_value > 0.05
        assert res.equal_variances

    def test_matches_scipy_median_center(self, unequal_spread_groups):
        res = levene_test(unequal_spread_groups)
        ref = sp_stats.levene(*[g.values for g in unequal_spread_groups], center='median')
        assert res.f_value == pytest.approx(ref.statistic, rel=1e-9)
        assert res.p_value == pytest.approx(ref.pvalue, rel=1e-6)
        assert not res.equal_variances

    def test_degrees_of_freedom(self, unequal_spread_groups):
        res = levene_test(unequal_spread_groups)
        assert res.df_between == 2
        assert res.df_within == 15
        assert res.center == 'median'

    def test_group_variances_reported(self, shifted_groups):
        res = levene_test(shifted_groups)
        assert res.group_vars == {"A": 1.0, "B": 1.0, "C": 1.0}

    def test_empty_group_gives_nan(self):
        res = levene_test([SampleGroup("a", [1, 2, 3]), SampleGroup("b", [])])
        assert np.isnan(res.f_value)
        assert np.isnan(res.p_value)
        assert res.equal_variances
        assert any("not computable" in w for w in res.warnings)

    def test_single_group_gives_nan(self):
        res = levene_test([SampleGroup("a", [1, 2, 3])])
        assert np.isnan(res.p_value)

    def test_summary(self, shifted_groups):
        assert "Center: median" in levene_test(shifted_groups).summary()
