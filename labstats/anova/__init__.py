"""
Analysis of Variance (ANOVA) module.

Public API:
    levene_test(groups)       - Brown-Forsythe test of equal variances
    anova_oneway(groups)      - Standard one-way ANOVA
    welch_anova(groups)       - Welch's ANOVA for unequal variances
    anova_auto(groups)        - Levene-selected one-way ANOVA with post-hoc
    tukey_hsd(groups)         - Tukey HSD (F approximation of q)
    games_howell(groups)      - Games-Howell pairwise comparisons
    anova_posthoc(result)     - Post-hoc matching a one-way result
    anova_twoway(cells)       - Two-factor ANOVA, SS Type I/II/III
"""

from labstats.anova.solvers import (
    levene_test,
    anova_oneway,
    welch_anova,
    anova_auto,
    tukey_hsd,
    games_howell,
    anova_posthoc,
    anova_twoway,
)
from labstats.anova.design import AnovaDesign
from labstats.anova.solution import (
    AnovaSolution,
    WelchAnovaSolution,
    LeveneSolution,
    PostHocSolution,
    OneWayAutoSolution,
    TwoWaySolution,
)

__all__ = [
    "levene_test",
    "anova_oneway",
    "welch_anova",
    "anova_auto",
    "tukey_hsd",
    "games_howell",
    "anova_posthoc",
    "anova_twoway",
    "AnovaDesign",
    "AnovaSolution",
    "WelchAnovaSolution",
    "LeveneSolution",
    "PostHocSolution",
    "OneWayAutoSolution",
    "TwoWaySolution",
]
