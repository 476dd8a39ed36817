"""
LabStats: statistics engine for bench-lab experiment data.

Takes grouped replicate measurements and returns result tables for the
analyses a lab chart needs: descriptive summaries, t-tests, one-way and
two-way ANOVA with post-hoc comparisons, and straight-line regression.
All p-values come from the special functions in labstats.special.

Submodules:
    special: Log-gamma, incomplete beta, t and F tail probabilities
    descriptive: Per-group summaries and 95% confidence intervals
    hypothesis: t-tests, variance F-test, correlation, p-value adjustment
    anova: One-way (standard/Welch/auto), post-hoc, two-way ANOVA
    regression: Least-squares lines with slope test
    analysis: AnalysisRequest and run_analysis()
"""

__version__ = "0.1.0"

from labstats import special
from labstats import descriptive
from labstats import hypothesis
from labstats import anova
from labstats import regression
from labstats import analysis
from labstats.core import SampleGroup, FactorialCell, XYSeries, ResultTable
from labstats.analysis import (
    AnalysisKind,
    AnalysisOptions,
    AnalysisRequest,
    run_analysis,
)

__all__ = [
    "__version__",
    "special",
    "descriptive",
    "hypothesis",
    "anova",
    "regression",
    "analysis",
    "SampleGroup",
    "FactorialCell",
    "XYSeries",
    "ResultTable",
    "AnalysisKind",
    "AnalysisOptions",
    "AnalysisRequest",
    "run_analysis",
]
