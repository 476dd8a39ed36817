"""
Two-sided 95% critical values of Student's t.

A short lookup table stands in for the inverse t distribution. Values
are exact at df = 1 to 5, 10, 20 and 30; any other df takes the value
tabulated for the top of its bucket, so intervals inside a bucket come out
slightly narrow. Callers that need an exact quantile should invert
labstats.special.t_two_tailed_p numerically.
"""

from __future__ import annotations

# (upper df bound, critical value), searched in order
_TABLE: tuple[tuple[int, float], ...] = (
    (1, 12.706),
    (2, 4.303),
    (3, 3.182),
    (4, 2.776),
    (5, 2.571),
    (10, 2.228),
    (20, 2.086),
    (30, 2.042),
)

_LARGE_SAMPLE = 1.96


def t_critical(df: int) -> float:
    """
    Critical value t such that P(|T| > t) = 0.05 for df degrees of freedom.

    df <= 0 and df > 30 both fall back to the normal value 1.96.
    """
    if df <= 0:
        return _LARGE_SAMPLE
    for upper, value in _TABLE:
        if df <= upper:
            return value
    return _LARGE_SAMPLE
