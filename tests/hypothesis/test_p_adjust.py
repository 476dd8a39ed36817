"""
Tests for p_adjust(): Bonferroni and Benjamini-Hochberg.
"""

import numpy as np
import pytest
from numpy.testing import assert_allclose

from labstats.core.exceptions import ValidationError
from labstats.hypothesis import p_adjust


class TestPAdjust:

    def test_bonferroni(self):
        assert_allclose(p_adjust([0.01, 0.02, 0.5], "bonferroni"), [0.03, 0.06, 1.0])

    def test_bh(self):
        # p.adjust(c(0.01, 0.04, 0.03, 0.005), "BH")
        assert_allclose(p_adjust([0.01, 0.04, 0.03, 0.005], "BH"), [0.02, 0.04, 0.04, 0.02])

    def test_fdr_alias(self):
        p = [0.01, 0.04, 0.03]
        assert_allclose(p_adjust(p, "fdr"), p_adjust(p, "BH"))

    def test_bh_monotone_in_sorted_order(self, rng):
        p = rng.uniform(0, 0.2, 25)
        adjusted = p_adjust(p, "BH")
        order = np.argsort(p)
        assert np.all(np.diff(adjusted[order]) >= 0)
        assert np.all(adjusted >= p)
        assert np.all(adjusted <= 1.0)

    def test_nan_preserved(self):
        res = p_adjust([0.01, np.nan, 0.04], "bonferroni")
        assert np.isnan(res[1])
        assert_allclose(res[[0, 2]], [0.02, 0.08])

    def test_none(self):
        assert_allclose(p_adjust([0.2, 0.3], "none"), [0.2, 0.3])

    def test_empty(self):
        assert p_adjust([]).shape == (0,)

    def test_unknown_method(self):
        with pytest.raises(ValidationError):
            p_adjust([0.1], "holm")
