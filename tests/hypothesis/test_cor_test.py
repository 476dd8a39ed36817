"""
Tests for cor_test(): Pearson and Spearman.
"""

import pytest
from scipy import stats as sp_stats

from labstats.core.exceptions import InsufficientDataError, MismatchedLengthError, ValidationError
from labstats.hypothesis import cor_test

X = [1, 2, 3, 4, 5, 6]
Y = [2, 1, 4, 3, 7, 8]


class TestPearson:

    def test_matches_scipy(self):
        res = cor_test(X, Y)
        ref = sp_stats.pearsonr(X, Y)
        assert res.statistic == pytest.approx(ref[0], rel=1e-10)
        assert res.p_value == pytest.approx(ref[1], rel=1e-6)
        assert res.parameter == {"df": 4.0}

    def test_perfect_line(self):
        res = cor_test([1, 2, 3, 4, 5], [5, 7, 9, 11, 13])
        assert res.statistic == pytest.approx(1.0)
        assert res.p_value == 0.0

    def test_zero_variance(self):
        res = cor_test([1, 2, 3, 4], [3, 3, 3, 3])
        assert res.statistic == 0.0
        assert res.p_value == 1.0


class TestSpearman:

    def test_matches_scipy_with_ties(self):
        y = [1, 2, 2, 3, 5, 4]
        res = cor_test(X, y, method="spearman")
        ref = sp_stats.spearmanr(X, y)
        assert res.statistic_name == "rho"
        assert res.statistic == pytest.approx(ref[0], rel=1e-10)
        assert res.p_value == pytest.approx(ref[1], rel=1e-6)


class TestValidation:

    def test_unequal_lengths(self):
        with pytest.raises(MismatchedLengthError):
            cor_test([1, 2, 3], [1, 2, 3, 4])

    def test_too_few(self):
        with pytest.raises(InsufficientDataError):
            cor_test([1, 2], [1, 2])

    def test_unknown_method(self):
        with pytest.raises(ValidationError):
            cor_test(X, Y, method="kendall")
