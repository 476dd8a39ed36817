"""
Special functions for LabStats.

Everything needed to turn a t or F statistic into a p-value, computed
in-package with no external statistics library:

    log_gamma: ln Gamma(x) via the Lanczos series
    incomplete_beta: regularized incomplete beta I_x(a, b)
    t_two_tailed_p: two-tailed p-value of Student's t distribution
    f_sf: upper-tail probability of the F distribution

Usage:
    from labstats.special import t_two_tailed_p, f_sf

    p = t_two_tailed_p(2.31, df=8)
    p = f_sf(4.7, df1=2, df2=12)
"""

from labstats.special.functions import log_gamma, incomplete_beta
from labstats.special.distributions import t_two_tailed_p, f_sf

__all__ = [
    "log_gamma",
    "incomplete_beta",
    "t_two_tailed_p",
    "f_sf",
]
