"""
Tests for post-hoc comparisons: Tukey HSD and Games-Howell.

Validates:
    - Tukey q = |t| * sqrt(2) for two equal-size groups
    - Tukey p-value is the F mapping of q^2 / 2
    - Games-Howell matches the Welch t-test pair by pair
    - Selection restricts pairs; empty results are not errors
    - anova_posthoc picks the method that fits the ANOVA
"""

import numpy as np
import pytest

from labstats.core import SampleGroup
from labstats.core.exceptions import ValidationError
from labstats.anova import (
    anova_auto,
    anova_oneway,
    anova_posthoc,
    games_howell,
    tukey_hsd,
    welch_anova,
)
from labstats.hypothesis import t_test
from labstats.special import f_sf


class TestTukey:

    def test_two_groups_q_is_scaled_t(self):
        a = SampleGroup("a", [1, 2, 3, 4])
        b = SampleGroup("b", [3, 5, 4, 7])
        res = tukey_hsd([a, b])
        t = t_test(a, b, var_equal=True)
        comp = res.comparisons[0]
        assert comp.statistic == pytest.approx(abs(t.statistic) * np.sqrt(2), rel=1e-10)
        # With k = 2 the F mapping reduces to the pooled t-test
        assert comp.p_value == pytest.approx(t.p_value, rel=1e-8)

    def test_p_is_f_mapping(self, separated_groups):
        res = tukey_hsd(separated_groups)
        for c in res.comparisons:
            assert c.p_value == pytest.approx(f_sf(c.statistic ** 2 / 2, 2, 6))

    def test_pairs_and_signs(self, separated_groups):
        res = tukey_hsd(separated_groups)
        assert [(c.group1, c.group2) for c in res.comparisons] == [
            ("A", "B"), ("A", "C"), ("B", "C"),
        ]
        ab = res.get("A", "B")
        assert ab.diff == pytest.approx(11.0 - 76.0 / 3)
        assert ab.statistic > 0
        assert ab.df is None
        assert res.df_error == 6
        assert res.mse == pytest.approx((2.0 + 28.0 / 3) / 6)

    def test_get_either_order(self, separated_groups):
        res = tukey_hsd(separated_groups)
        assert res.get("B", "A") is res.get("A", "B")
        with pytest.raises(KeyError):
            res.get("A", "Z")

    def test_selection(self, separated_groups):
        res = tukey_hsd(separated_groups, selected=["C"])
        assert [(c.group1, c.group2) for c in res.comparisons] == [("A", "C"), ("B", "C")]
        assert res.selected == ("C",)

    def test_no_error_df_gives_empty(self):
        res = tukey_hsd([SampleGroup("a", [1.0]), SampleGroup("b", [2.0])])
        assert len(res) == 0
        assert any("no pairwise comparisons" in w for w in res.warnings)
        assert res.empty_reason.startswith("no error degrees of freedom")

    def test_selection_matching_nothing(self, separated_groups):
        res = tukey_hsd(separated_groups, selected=["Z"])
        assert len(res) == 0
        assert any("no pair includes a selected group" in w for w in res.warnings)

    def test_approximation_flagged(self, separated_groups):
        res = tukey_hsd(separated_groups)
        assert any("studentized range" in w for w in res.warnings)
        assert "approximation" in res.summary()


class TestGamesHowell:

    def test_matches_welch_pairwise(self, unequal_spread_groups):
        res = games_howell(unequal_spread_groups)
        groups = {g.name: g for g in unequal_spread_groups}
        for c in res.comparisons:
            t = t_test(groups[c.group1], groups[c.group2])
            assert c.statistic == pytest.approx(abs(t.statistic), rel=1e-10)
            assert c.df == pytest.approx(t.df, rel=1e-10)
            assert c.p_value == pytest.approx(t.p_value, rel=1e-10)

    def test_small_groups_skipped(self):
        res = games_howell([
            SampleGroup("a", [1, 2, 3]),
            SampleGroup("b", [4.0]),
            SampleGroup("c", [5, 6, 8]),
        ])
        assert [(c.group1, c.group2) for c in res.comparisons] == [("a", "c")]
        assert res.empty_reason is None

    def test_all_pairs_too_small(self):
        res = games_howell([
            SampleGroup("a", [1.0]),
            SampleGroup("b", [4.0]),
            SampleGroup("c", [5, 6, 8]),
        ])
        assert len(res) == 0
        assert res.empty_reason == "every pair has a group with fewer than 2 values"

    def test_summary_lists_pairs(self, unequal_spread_groups):
        text = games_howell(unequal_spread_groups).summary()
        assert "Games-Howell" in text
        assert "A vs B" in text


class TestAnovaPosthoc:

    def test_standard_anova_gets_tukey(self, separated_groups):
        assert anova_posthoc(anova_oneway(separated_groups)).method == 'tukey'

    def test_welch_anova_gets_games_howell(self, unequal_spread_groups):
        assert anova_posthoc(welch_anova(unequal_spread_groups)).method == 'games-howell'

    def test_auto_follows_path(self, unequal_spread_groups):
        res = anova_posthoc(anova_auto(unequal_spread_groups), selected=["A"])
        assert res.method == 'games-howell'
        assert len(res) == 2

    def test_rejects_other_results(self):
        with pytest.raises(ValidationError):
            anova_posthoc(object())
