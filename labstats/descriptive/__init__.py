"""
Descriptive statistics module.

Per-group summaries with a 95% confidence interval for the mean.

Public API:
    describe(group)         - N, mean, SD, SEM, min, max, median, 95% CI
    describe_groups(groups) - One table row per non-empty group
    t_critical(df)          - Two-sided 95% t critical value (fixed table)
"""

from labstats.descriptive.solution import DescriptiveParams, DescriptiveSolution
from labstats.descriptive.solvers import describe, describe_groups
from labstats.descriptive._tcrit import t_critical

__all__ = [
    "describe",
    "describe_groups",
    "t_critical",
    "DescriptiveParams",
    "DescriptiveSolution",
]
