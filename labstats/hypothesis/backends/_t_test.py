"""
Two-sample t-tests: Student (pooled), Welch and paired.

All three compute a two-sided p-value from |t| and then adjust it for
the requested alternative.
"""

from __future__ import annotations

from typing import TYPE_CHECKING

import numpy as np

from labstats.core.compute.tolerances import EPS
from labstats.core.groups import aggregated_warning
from labstats.special import t_two_tailed_p
from labstats.hypothesis._common import HTestParams, adjust_tail

if TYPE_CHECKING:
    from labstats.hypothesis.design import HypothesisDesign


def welch_df(v1: float, n1: int, v2: float, n2: int) -> float:
    """
    Welch-Satterthwaite degrees of freedom.

    Falls back to n1 + n2 - 2 when the denominator vanishes (both
    variances zero).
    """
    a = v1 / n1
    b = v2 / n2
    den = a * a / (n1 - 1) + b * b / (n2 - 1)
    if den <= 0:
        return float(n1 + n2 - 2)
    return (a + b) ** 2 / den


def t_two_sample(design: HypothesisDesign) -> tuple[HTestParams, list[str]]:
    """Two-sample t-test: Welch (default) or pooled."""
    g1, g2 = design.g1, design.g2
    alternative = design.alternative
    warnings_list: list[str] = []

    n1, n2 = g1.n, g2.n
    mean1, mean2 = g1.mean, g2.mean

    if design.var_equal:
        # Pooled (Student's) t-test
        df = float(n1 + n2 - 2)
        pooled = (g1.sum_sq + g2.sum_sq) / df
        se = float(np.sqrt(pooled * (1.0 / n1 + 1.0 / n2)))
        variant = "Student"
        method = "Two Sample t-test"
    else:
        v1, v2 = g1.var, g2.var
        se = float(np.sqrt(v1 / n1 + v2 / n2))
        df = welch_df(v1, n1, v2, n2) if se >= EPS else float(n1 + n2 - 2)
        variant = "Welch"
        method = "Welch Two Sample t-test"

    if se < EPS:
        warnings_list.append("data are essentially constant")
        t_stat = 0.0
        p_two = 1.0
    else:
        t_stat = float((mean1 - mean2) / se)
        p_two = t_two_tailed_p(abs(t_stat), df)

    if design.aggregated:
        warnings_list.append(aggregated_warning(design.aggregated))

    return HTestParams(
        statistic=t_stat,
        statistic_name="t",
        parameter={"df": df},
        p_value=adjust_tail(p_two, t_stat, alternative),
        estimate={"mean of x": mean1, "mean of y": mean2},
        alternative=alternative,
        method=method,
        data_name=design.data_name,
        extras=_extras(design, variant, p_two, se),
    ), warnings_list


def t_paired(design: HypothesisDesign) -> tuple[HTestParams, list[str]]:
    """Paired t-test: one-sample t-test on the per-index differences."""
    g1, g2 = design.g1, design.g2
    alternative = design.alternative
    warnings_list: list[str] = []

    d = g1.values - g2.values
    n = len(d)
    mean_d = float(np.mean(d))
    sd_d = float(np.std(d, ddof=1))
    se = sd_d / np.sqrt(n)
    df = float(n - 1)

    if se < EPS:
        warnings_list.append("differences are essentially constant")
        t_stat = 0.0
        p_two = 1.0
    else:
        t_stat = float(mean_d / se)
        p_two = t_two_tailed_p(abs(t_stat), df)

    if design.aggregated:
        warnings_list.append(aggregated_warning(design.aggregated))

    return HTestParams(
        statistic=t_stat,
        statistic_name="t",
        parameter={"df": df},
        p_value=adjust_tail(p_two, t_stat, alternative),
        estimate={"mean difference": mean_d},
        alternative=alternative,
        method="Paired t-test",
        data_name=design.data_name,
        extras=_extras(design, "Paired", p_two, float(se)),
    ), warnings_list


def _extras(design: HypothesisDesign, variant: str, p_two: float, se: float) -> dict:
    extras = {
        'variant': variant,
        'p_two_sided': p_two,
        'se': se,
    }
    if design.variance_test is not None:
        f, p = design.variance_test
        extras['variance_test'] = {'statistic': f, 'p_value': p}
    return extras
