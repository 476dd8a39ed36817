"""
F-test for equality of two variances.

The statistic is always the larger sample variance over the smaller one,
so F >= 1 and the two-sided p-value is twice the upper tail, capped at 1.
"""

from __future__ import annotations

from typing import TYPE_CHECKING

from labstats.core.compute.tolerances import EPS
from labstats.core.groups import aggregated_warning
from labstats.special import f_sf
from labstats.hypothesis._common import HTestParams

if TYPE_CHECKING:
    from labstats.hypothesis.design import HypothesisDesign


def var_test(design: HypothesisDesign) -> tuple[HTestParams, list[str]]:
    """F-test for equality of two variances (larger over smaller)."""
    g1, g2 = design.g1, design.g2
    warnings_list: list[str] = []

    v1, v2 = g1.var, g2.var

    if v1 < EPS and v2 < EPS:
        warnings_list.append("both samples have zero variance")
        f_stat, p_value = 1.0, 1.0
        df1, df2 = g1.n - 1, g2.n - 1
    elif v2 < EPS:
        f_stat, p_value = float('inf'), 0.0
        df1, df2 = g1.n - 1, g2.n - 1
    elif v1 < EPS:
        f_stat, p_value = 0.0, 0.0
        df1, df2 = g1.n - 1, g2.n - 1
    else:
        if v1 >= v2:
            f_stat = v1 / v2
            df1, df2 = g1.n - 1, g2.n - 1
        else:
            f_stat = v2 / v1
            df1, df2 = g2.n - 1, g1.n - 1
        p_value = min(1.0, 2.0 * f_sf(f_stat, df1, df2))

    if design.aggregated:
        warnings_list.append(aggregated_warning(design.aggregated))

    return HTestParams(
        statistic=float(f_stat),
        statistic_name="F",
        parameter={"num df": float(df1), "denom df": float(df2)},
        p_value=float(p_value),
        estimate={"variance of x": v1, "variance of y": v2},
        alternative="two.sided",
        method="F test to compare two variances",
        data_name=design.data_name,
    ), warnings_list
