"""
One-way ANOVA computations.

Standard (equal-variance) ANOVA partitions the total sum of squares into
between- and within-group parts. Welch's ANOVA weights each group mean by
n_i / var_i and corrects the denominator degrees of freedom, so it stays
valid when group variances differ.
"""

from typing import Sequence

import numpy as np

from labstats.core.compute.tolerances import EPS, ZERO_VARIANCE_WEIGHT
from labstats.core.groups import SampleGroup
from labstats.special import f_sf
from labstats.anova._common import (
    AnovaTableRow,
    GroupSummary,
    OneWayParams,
    WelchAnovaParams,
)


def group_summaries(groups: Sequence[SampleGroup]) -> tuple[GroupSummary, ...]:
    return tuple(GroupSummary(g.name, g.n, g.mean, g.sd) for g in groups)


def oneway_impl(groups: Sequence[SampleGroup]) -> OneWayParams:
    """
    Standard one-way ANOVA.

    F is 0 when MS_within is ~0 (every group constant).

    Args:
        groups: At least 2 non-empty groups

    Returns:
        OneWayParams with Between Groups / Within Groups / Total rows
    """
    all_values = np.concatenate([g.values for g in groups])
    grand_mean = float(np.mean(all_values))
    k = len(groups)
    n_total = len(all_values)

    ss_between = float(sum(g.n * (g.mean - grand_mean) ** 2 for g in groups))
    ss_within = float(sum(g.sum_sq for g in groups))
    ss_total = float(np.sum((all_values - grand_mean) ** 2))

    df_between = k - 1
    df_within = n_total - k

    ms_between = ss_between / df_between if df_between > 0 else 0.0
    ms_within = ss_within / df_within if df_within > 0 else 0.0
    f_val = ms_between / ms_within if ms_within > EPS else 0.0
    p_val = f_sf(f_val, df_between, df_within)

    table = (
        AnovaTableRow('Between Groups', df_between, ss_between, ms_between, f_val, p_val),
        AnovaTableRow('Within Groups', df_within, ss_within, ms_within, None, None),
        AnovaTableRow('Total', df_between + df_within, ss_total, None, None, None),
    )

    return OneWayParams(
        table=table,
        n_obs=n_total,
        n_groups=k,
        grand_mean=grand_mean,
        f_value=f_val,
        p_value=p_val,
        df_between=df_between,
        df_within=df_within,
        ms_within=ms_within,
        groups=group_summaries(groups),
    )


def welch_anova_impl(groups: Sequence[SampleGroup]) -> WelchAnovaParams:
    """
    Welch's one-way ANOVA for unequal variances.

    A group with variance ~0 gets weight n_i * 1e10 instead of an
    infinite n_i / var_i. The p-value is taken at the rounded df.

    Args:
        groups: At least 2 groups, each with n >= 2

    Returns:
        WelchAnovaParams
    """
    k = len(groups)
    ns = np.array([g.n for g in groups], dtype=np.float64)
    means = np.array([g.mean for g in groups])
    variances = np.array([g.var for g in groups])

    weights = np.where(
        variances > EPS,
        ns / np.where(variances > EPS, variances, 1.0),
        ns * ZERO_VARIANCE_WEIGHT,
    )
    sum_w = float(np.sum(weights))
    grand_mean = float(np.sum(weights * means) / sum_w)

    numerator = float(np.sum(weights * (means - grand_mean) ** 2)) / (k - 1)

    lam = float(np.sum((1.0 - weights / sum_w) ** 2 / (ns - 1)))
    lam *= 3.0 / (k * k - 1)

    denominator = 1.0 + 2.0 * (k - 2) * lam / (k * k - 1)
    f_val = numerator / denominator

    df1 = float(k - 1)
    df2 = 1.0 / lam
    p_val = f_sf(f_val, round(df1), round(df2))

    return WelchAnovaParams(
        f_value=f_val,
        df1=df1,
        df2=df2,
        p_value=p_val,
        weighted_grand_mean=grand_mean,
        weights={g.name: float(w) for g, w in zip(groups, weights)},
        groups=group_summaries(groups),
    )
