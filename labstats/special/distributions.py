"""
Tail probabilities of the t and F distributions.

Both reduce to the regularized incomplete beta function.
"""

from __future__ import annotations

import math

from labstats.special.functions import incomplete_beta


def t_two_tailed_p(t: float, df: float) -> float:
    """
    Two-tailed p-value P(|T| >= |t|) for Student's t with df degrees of freedom.

    Args:
        t: Test statistic (sign ignored)
        df: Degrees of freedom; df < 1 yields 1.0

    Returns:
        p-value in [0, 1]. t == 0 yields exactly 1.0.
    """
    t, df = float(t), float(df)
    if math.isnan(t) or math.isnan(df):
        return float('nan')
    if df < 1.0 or t == 0.0:
        return 1.0
    if math.isinf(t):
        return 0.0
    return incomplete_beta(df / 2.0, 0.5, df / (df + t * t))


def f_sf(f: float, df1: float, df2: float) -> float:
    """
    Upper-tail probability P(F >= f) of the F distribution.

    Non-increasing in f for fixed degrees of freedom. Fractional df are
    accepted.

    Args:
        f: F statistic; f < 0 yields 1.0
        df1: Numerator degrees of freedom; < 1 yields 1.0
        df2: Denominator degrees of freedom; < 1 yields 1.0

    Returns:
        p-value in [0, 1]
    """
    f, df1, df2 = float(f), float(df1), float(df2)
    if math.isnan(f) or math.isnan(df1) or math.isnan(df2):
        return float('nan')
    if f < 0.0 or df1 < 1.0 or df2 < 1.0:
        return 1.0
    if math.isinf(f):
        return 0.0
    return incomplete_beta(df2 / 2.0, df1 / 2.0, df2 / (df2 + df1 * f))
