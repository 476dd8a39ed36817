"""
Solver dispatch for hypothesis tests.

Provides t_test(), var_test(), cor_test() and pairwise_t_tests().

Also re-exports p_adjust() for convenience.
"""

from __future__ import annotations

from itertools import combinations
from typing import Literal, Sequence

from numpy.typing import ArrayLike

from labstats.core.compute.tolerances import ALPHA
from labstats.core.groups import SampleGroup, as_group, any_aggregated, aggregated_warning
from labstats.core.validation import check_min_groups
from labstats.hypothesis.design import HypothesisDesign
from labstats.hypothesis.solution import (
    HTestSolution,
    PairwiseEntry,
    PairwiseTTestSolution,
)
from labstats.hypothesis.backends.cpu import CPUHypothesisBackend
from labstats.hypothesis._p_adjust import p_adjust  # re-export

Alternative = Literal["two.sided", "less", "greater"]


def t_test(
    g1: SampleGroup | ArrayLike | HypothesisDesign,
    g2: SampleGroup | ArrayLike | None = None,
    *,
    var_equal: bool = False,
    paired: bool = False,
    auto_variance: bool = False,
    alternative: Alternative = "two.sided",
) -> HTestSolution:
    """
    Two-sample t-test: Welch, Student (pooled) or paired.

    Parameters
    ----------
    g1, g2 : SampleGroup or array-like
        The two samples; each needs at least 2 observations. May also
        pass a pre-built HypothesisDesign as g1.
    var_equal : bool
        If True, use the pooled-variance (Student's) test. Ignored when
        auto_variance is set.
    paired : bool
        If True, perform a paired t-test on per-index differences.
        g1 and g2 must have the same length.
    auto_variance : bool
        If True, run var_test() first and use Student's test when its
        p-value exceeds 0.05, Welch's test otherwise. The F-test is
        reported in extras['variance_test'].
    alternative : str
        "two.sided" (default), "less", or "greater".

    Notes
    -----
    With auto_variance and var_equal both off, independent samples
    always get Welch's test. This is a policy choice, not a
    consequence of the data.

    Returns
    -------
    HTestSolution

    Raises
    ------
    InsufficientDataError
        If either sample has fewer than 2 observations.
    MismatchedLengthError
        If paired is True and the samples differ in length.
    """
    if isinstance(g1, HypothesisDesign):
        design = g1
    else:
        g1 = as_group(g1, "x")
        g2 = as_group(g2, "y")
        variance_test = None
        if auto_variance and not paired:
            vt = var_test(g1, g2)
            variance_test = (vt.statistic, vt.p_value)
            var_equal = vt.p_value > ALPHA
        design = HypothesisDesign.for_t_test(
            g1, g2,
            paired=paired,
            var_equal=var_equal,
            alternative=alternative,
            variance_test=variance_test,
        )

    result = CPUHypothesisBackend().solve(design)
    return HTestSolution(_result=result, _design=design)


def var_test(
    g1: SampleGroup | ArrayLike | HypothesisDesign,
    g2: SampleGroup | ArrayLike | None = None,
) -> HTestSolution:
    """
    F-test to compare two variances.

    F is the larger sample variance over the smaller one; the two-sided
    p-value is min(1, 2 * P(F' >= F)). Both variances ~0 gives F = 1,
    p = 1; only one ~0 gives F = inf (or 0) and p = 0.

    Parameters
    ----------
    g1, g2 : SampleGroup or array-like
        The two samples; each needs at least 2 observations.

    Returns
    -------
    HTestSolution
    """
    if isinstance(g1, HypothesisDesign):
        design = g1
    else:
        design = HypothesisDesign.for_var_test(g1, g2)

    result = CPUHypothesisBackend().solve(design)
    return HTestSolution(_result=result, _design=design)


def cor_test(
    x: ArrayLike | HypothesisDesign,
    y: ArrayLike | None = None,
    *,
    method: Literal["pearson", "spearman"] = "pearson",
) -> HTestSolution:
    """
    Test for association between paired samples.

    Parameters
    ----------
    x, y : array-like
        Paired observations of equal length, n >= 3.
    method : str
        "pearson" (default) or "spearman" (Pearson on average ranks).

    Returns
    -------
    HTestSolution
        statistic is r (or rho); extras['t'] holds the t statistic.
        Zero variance in either sample gives r = 0, p = 1.
    """
    if isinstance(x, HypothesisDesign):
        design = x
    else:
        design = HypothesisDesign.for_cor_test(x, y, method=method)

    result = CPUHypothesisBackend().solve(design)
    return HTestSolution(_result=result, _design=design)


def pairwise_t_tests(
    groups: Sequence[SampleGroup],
    *,
    var_equal: bool = False,
    paired: bool = False,
    auto_variance: bool = False,
    alternative: Alternative = "two.sided",
) -> PairwiseTTestSolution:
    """
    t-test every unordered pair of groups.

    Groups with fewer than 2 values are left out and noted in the
    warnings. In paired mode a pair of unequal length does not abort
    the run; it is kept as a skipped entry carrying the reason.

    Parameters
    ----------
    groups : sequence of SampleGroup
        At least 2 groups.
    var_equal, paired, auto_variance, alternative
        Passed to t_test() for every pair.

    Returns
    -------
    PairwiseTTestSolution
    """
    check_min_groups(groups, 2, "pairwise t-tests")

    warnings_list: list[str] = []
    usable = []
    for g in groups:
        if g.n < 2:
            warnings_list.append(f"{g.name!r} skipped: fewer than 2 values")
        else:
            usable.append(g)

    entries = []
    for g1, g2 in combinations(usable, 2):
        if paired and g1.n != g2.n:
            entries.append(PairwiseEntry(
                g1, g2, skipped_reason="N≠N (paired requires equal N)",
            ))
            continue
        sol = t_test(
            g1, g2,
            var_equal=var_equal,
            paired=paired,
            auto_variance=auto_variance,
            alternative=alternative,
        )
        entries.append(PairwiseEntry(g1, g2, solution=sol))

    aggregated = any_aggregated(groups)
    if aggregated:
        warnings_list.append(aggregated_warning(aggregated))

    return PairwiseTTestSolution(
        entries=tuple(entries),
        warnings=tuple(warnings_list),
    )
