"""
Tests for var_test(): F-test for equality of two variances.
"""

import numpy as np
import pytest
from scipy import stats as sp_stats

from labstats.hypothesis import var_test


class TestVarTest:

    def test_larger_over_smaller(self):
        res = var_test([1, 2, 3, 4, 5], [2, 4, 6, 8, 10])
        assert res.statistic == pytest.approx(4.0)
        assert res.parameter == {"num df": 4.0, "denom df": 4.0}
        assert res.p_value == pytest.approx(2 * sp_stats.f.sf(4.0, 4, 4), rel=1e-7)

    def test_order_does_not_matter(self):
        a, b = [1, 2, 3, 4, 5], [2, 4, 6, 8, 10, 12, 14]
        assert var_test(a, b).p_value == pytest.approx(var_test(b, a).p_value)

    def test_df_follow_numerator(self):
        res = var_test([1, 2, 3], [2, 4, 6, 8, 10, 12])
        assert res.parameter == {"num df": 5.0, "denom df": 2.0}

    def test_p_capped_at_one(self):
        res = var_test([1, 2, 3], [4, 5, 6])
        assert res.statistic == pytest.approx(1.0)
        assert res.p_value == 1.0

    def test_both_constant(self):
        res = var_test([5, 5, 5], [2, 2, 2])
        assert res.statistic == 1.0
        assert res.p_value == 1.0

    def test_second_constant(self):
        res = var_test([1, 2, 3], [5, 5, 5])
        assert np.isinf(res.statistic)
        assert res.p_value == 0.0

    def test_first_constant(self):
        res = var_test([5, 5, 5], [1, 2, 3])
        assert res.statistic == 0.0
        assert res.p_value == 0.0

    def test_method_name(self):
        assert var_test([1, 2, 3], [1, 3, 5]).method == "F test to compare two variances"
