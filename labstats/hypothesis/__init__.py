"""
Hypothesis testing module.

Public API:
    t_test(g1, g2)            - Student / Welch / paired t-test, optional
                                automatic variance selection
    var_test(g1, g2)          - F-test to compare two variances
    pairwise_t_tests(groups)  - t-test every pair of groups
    cor_test(x, y)            - Pearson or Spearman correlation test
    adjust_tail(p, t, alt)    - Two-sided p-value to one-tailed
    p_adjust(p)               - Multiple testing correction (BH, Bonferroni)
"""

from labstats.hypothesis.solvers import (
    t_test, var_test, cor_test, pairwise_t_tests,
)
from labstats.hypothesis._p_adjust import p_adjust
from labstats.hypothesis._common import HTestParams, adjust_tail
from labstats.hypothesis.design import HypothesisDesign
from labstats.hypothesis.solution import (
    HTestSolution,
    PairwiseEntry,
    PairwiseTTestSolution,
)

__all__ = [
    "t_test",
    "var_test",
    "cor_test",
    "pairwise_t_tests",
    "adjust_tail",
    "p_adjust",
    "HypothesisDesign",
    "HTestParams",
    "HTestSolution",
    "PairwiseEntry",
    "PairwiseTTestSolution",
]
