"""
Levene's test for homogeneity of variances.

Algorithm: replace every value by its absolute deviation from its group's
median (the Brown-Forsythe variant), then run a standard one-way ANOVA on
the deviations.
"""

from typing import Sequence

import numpy as np

from labstats.core.groups import SampleGroup
from labstats.anova._common import LeveneParams
from labstats.anova._oneway import oneway_impl


def levene_test_impl(groups: Sequence[SampleGroup]) -> LeveneParams:
    """
    Compute the median-centred Levene test.

    Fewer than 2 groups, or any empty group, gives F = p = NaN rather
    than an error; callers treat NaN as "no evidence against equal
    variances".

    Args:
        groups: Groups to compare

    Returns:
        LeveneParams with F statistic, p-value, and degrees of freedom
    """
    k = len(groups)
    group_vars = {g.name: g.var for g in groups}

    if k < 2 or any(g.n == 0 for g in groups):
        return LeveneParams(
            f_value=float('nan'),
            p_value=float('nan'),
            df_between=max(k - 1, 0),
            df_within=max(sum(g.n for g in groups) - k, 0),
            center='median',
            group_vars=group_vars,
        )

    deviations = [
        SampleGroup(g.name, np.abs(g.values - np.median(g.values)))
        for g in groups
    ]
    anova = oneway_impl(deviations)

    return LeveneParams(
        f_value=anova.f_value,
        p_value=anova.p_value,
        df_between=anova.df_between,
        df_within=anova.df_within,
        center='median',
        group_vars=group_vars,
    )
