"""
Single entry point that runs an AnalysisRequest and returns its table.
"""

from labstats.core.table import ResultTable
from labstats.descriptive import describe_groups
from labstats.hypothesis import pairwise_t_tests
from labstats.anova import anova_auto, anova_twoway
from labstats.regression import fit_lines
from labstats.analysis.request import AnalysisKind, AnalysisRequest


def run_analysis(request: AnalysisRequest) -> ResultTable:
    """
    Run one analysis.

    Args:
        request: What to run, on which inputs, with which options

    Returns:
        ResultTable ready for display or CSV export

    Raises:
        LabStatsError subclasses for invalid or insufficient input; a
        failed analysis never returns a partial table
    """
    kind = request.kind
    opts = request.options

    if kind is AnalysisKind.DESCRIPTIVE:
        return describe_groups(request.groups)

    if kind is AnalysisKind.T_TEST:
        return pairwise_t_tests(
            request.groups,
            paired=opts.paired,
            auto_variance=opts.auto_variance_detection,
            alternative=opts.alternative,
        ).to_table()

    if kind is AnalysisKind.ANOVA_ONEWAY:
        return anova_auto(
            request.groups,
            post_hoc=opts.post_hoc,
            post_hoc_groups=opts.post_hoc_groups,
        ).to_table()

    if kind is AnalysisKind.ANOVA_TWOWAY:
        return anova_twoway(
            request.cells,
            include_interaction=opts.include_interaction,
            ss_type=opts.ss_type_number,
        ).to_table()

    if kind is AnalysisKind.REGRESSION:
        return fit_lines(request.series)

    raise ValueError(f"Unhandled analysis kind {kind!r}")
