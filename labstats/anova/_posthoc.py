"""
Post-hoc pairwise comparison tests.

Tukey HSD:
    Pooled MSE from all groups. The p-value maps q onto the F distribution,
    p = P(F(k-1, N-k) >= q^2 / 2). This is an approximation of the
    studentized range distribution, not the exact distribution.

Games-Howell:
    Welch standard error and Welch-Satterthwaite df per pair, two-tailed
    t p-value. Used when group variances differ.

Welch pairwise:
    Welch t-tests between pooled factor levels (two-way ANOVA main
    effects). Unlike the other two, the statistic keeps its sign.

Pairs are restricted to those where at least one member is in
`selected`; an empty selection means all pairs. The label order is
always the input order, and diff = mean(group1) - mean(group2).
"""

from itertools import combinations
from typing import Sequence

import numpy as np

from labstats.core.compute.tolerances import EPS
from labstats.core.groups import SampleGroup
from labstats.special import f_sf, t_two_tailed_p
from labstats.hypothesis import t_test
from labstats.hypothesis.backends._t_test import welch_df
from labstats.anova._common import PostHocComparison, PostHocParams


def _pairs(groups: Sequence[SampleGroup], selected: frozenset[str]):
    for g1, g2 in combinations(groups, 2):
        if not selected or g1.name in selected or g2.name in selected:
            yield g1, g2


def _empty_reason(pairs: list, k: int) -> str | None:
    if k < 2:
        return "fewer than 2 groups"
    if not pairs:
        return "no pair includes a selected group"
    return None


def tukey_hsd_impl(
    groups: Sequence[SampleGroup],
    selected: frozenset[str] = frozenset(),
) -> PostHocParams:
    """
    Tukey's Honestly Significant Difference test.

    Args:
        groups: All groups of the ANOVA (k and N come from all of them)
        selected: Names to restrict the comparisons to

    Returns:
        PostHocParams; no comparisons when k < 2 or N <= k
    """
    k = len(groups)
    n_total = sum(g.n for g in groups)

    if k < 2 or n_total <= k:
        return PostHocParams(
            method='tukey',
            comparisons=(),
            selected=tuple(sorted(selected)),
            mse=None,
            df_error=None,
            empty_reason=(
                _empty_reason([], k) if k < 2
                else "no error degrees of freedom (N <= number of groups)"
            ),
        )

    df_error = n_total - k
    mse = sum(g.sum_sq for g in groups) / df_error

    pairs = list(_pairs(groups, selected))
    comparisons: list[PostHocComparison] = []
    for g1, g2 in pairs:
        diff = g1.mean - g2.mean
        se = float(np.sqrt(mse * (1.0 / g1.n + 1.0 / g2.n) / 2.0))
        q_stat = abs(diff) / se if se > EPS else 0.0
        p_val = f_sf(q_stat * q_stat / 2.0, k - 1, df_error)

        comparisons.append(PostHocComparison(
            group1=g1.name,
            group2=g2.name,
            diff=diff,
            se=se,
            statistic=q_stat,
            df=None,
            p_value=p_val,
        ))

    return PostHocParams(
        method='tukey',
        comparisons=tuple(comparisons),
        selected=tuple(sorted(selected)),
        mse=mse,
        df_error=df_error,
        empty_reason=_empty_reason(pairs, k),
    )


def games_howell_impl(
    groups: Sequence[SampleGroup],
    selected: frozenset[str] = frozenset(),
) -> PostHocParams:
    """
    Games-Howell pairwise comparisons for unequal variances.

    Pairs where either group has fewer than 2 observations are skipped.

    Args:
        groups: All groups of the ANOVA
        selected: Names to restrict the comparisons to

    Returns:
        PostHocParams
    """
    pairs = list(_pairs(groups, selected))
    comparisons: list[PostHocComparison] = []

    for g1, g2 in pairs:
        if g1.n < 2 or g2.n < 2:
            continue

        v1, v2 = g1.var, g2.var
        diff = g1.mean - g2.mean
        se = float(np.sqrt(v1 / g1.n + v2 / g2.n))
        t_stat = abs(diff) / se if se > EPS else 0.0
        df = welch_df(v1, g1.n, v2, g2.n)

        comparisons.append(PostHocComparison(
            group1=g1.name,
            group2=g2.name,
            diff=diff,
            se=se,
            statistic=t_stat,
            df=df,
            p_value=t_two_tailed_p(t_stat, df),
        ))

    return PostHocParams(
        method='games-howell',
        comparisons=tuple(comparisons),
        selected=tuple(sorted(selected)),
        mse=None,
        df_error=None,
        empty_reason=(
            _empty_reason(pairs, len(groups))
            or (None if comparisons else "every pair has a group with fewer than 2 values")
        ),
    )


def welch_pairwise_impl(groups: Sequence[SampleGroup]) -> PostHocParams:
    """
    Welch t-test for every pair of groups.

    Args:
        groups: Groups with n >= 2 each

    Returns:
        PostHocParams with signed t statistics
    """
    comparisons: list[PostHocComparison] = []

    for g1, g2 in combinations(groups, 2):
        sol = t_test(g1, g2)
        comparisons.append(PostHocComparison(
            group1=g1.name,
            group2=g2.name,
            diff=g1.mean - g2.mean,
            se=sol.extras['se'],
            statistic=sol.statistic,
            df=sol.df,
            p_value=sol.p_value,
        ))

    return PostHocParams(
        method='welch',
        comparisons=tuple(comparisons),
        selected=(),
        mse=None,
        df_error=None,
    )
