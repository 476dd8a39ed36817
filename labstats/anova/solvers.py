"""
ANOVA solver dispatch.

Public API:
    levene_test(groups) -> LeveneSolution
    anova_oneway(groups) -> AnovaSolution
    welch_anova(groups) -> WelchAnovaSolution
    anova_auto(groups, ...) -> OneWayAutoSolution
    tukey_hsd(groups, ...) -> PostHocSolution
    games_howell(groups, ...) -> PostHocSolution
    anova_posthoc(result, ...) -> PostHocSolution
    anova_twoway(cells, ...) -> TwoWaySolution
"""

import warnings
from typing import Iterable, Sequence

from labstats.core.result import Result
from labstats.core.exceptions import ValidationError, InsufficientDataError
from labstats.core.groups import SampleGroup, FactorialCell, aggregated_warning
from labstats.core.compute.timing import Timer, timed
from labstats.anova._common import OneWayAutoParams
from labstats.anova._levene import levene_test_impl
from labstats.anova._oneway import oneway_impl, welch_anova_impl, group_summaries
from labstats.anova._posthoc import tukey_hsd_impl, games_howell_impl
from labstats.anova._twoway import twoway_impl
from labstats.anova.design import AnovaDesign
from labstats.anova.solution import (
    AnovaSolution,
    WelchAnovaSolution,
    LeveneSolution,
    PostHocSolution,
    OneWayAutoSolution,
    TwoWaySolution,
    equal_variances,
)


TUKEY_NOTE = "Tukey p-values use the F approximation of the studentized range"


def _design_warnings(design: AnovaDesign) -> list[str]:
    aggregated = design.aggregated
    return [aggregated_warning(aggregated)] if aggregated else []


def _selection(design: AnovaDesign, selected: Iterable[str]) -> tuple[frozenset[str], list[str]]:
    """Normalize a post-hoc selection and report names that match no group."""
    chosen = frozenset(str(s) for s in selected)
    unknown = sorted(chosen - set(design.names))
    notes = []
    if unknown:
        notes.append(f"post-hoc selection names not found: {unknown}")
    return chosen, notes


def levene_test(groups: Sequence[SampleGroup]) -> LeveneSolution:
    """
    Levene's test for homogeneity of variances (median-centred).

    Args:
        groups: Groups to compare

    Returns:
        LeveneSolution; F and p are NaN when fewer than 2 groups are given
        or any group is empty

    Examples:
        >>> lev = levene_test([a, b, c])
        >>> lev.equal_variances
    """
    groups = tuple(groups)
    with timed() as timer:
        params = levene_test_impl(groups)

    warnings_list = []
    if params.p_value != params.p_value:
        warnings_list.append("Levene's test not computable (fewer than 2 groups or an empty group)")
    aggregated = tuple(g.name for g in groups if g.aggregated)
    if aggregated:
        warnings_list.append(aggregated_warning(aggregated))

    result = Result(
        params=params,
        info={'center': 'median', 'n_groups': len(groups)},
        timing=timer.result(),
        backend_name='cpu',
        warnings=tuple(warnings_list),
    )
    return LeveneSolution(_result=result)


def anova_oneway(groups: Sequence[SampleGroup]) -> AnovaSolution:
    """
    Standard one-way Analysis of Variance.

    Tests whether the means of two or more groups are equal, assuming a
    common variance.

    Args:
        groups: At least 2 non-empty SampleGroups with distinct names

    Returns:
        AnovaSolution with Between Groups / Within Groups / Total rows

    Raises:
        InsufficientDataError: Fewer than 2 groups, or an empty group

    Examples:
        >>> result = anova_oneway([ctrl, low, high])
        >>> print(result.summary())
    """
    design = AnovaDesign.for_oneway(groups)

    with timed() as timer:
        params = oneway_impl(design.groups)

    result = Result(
        params=params,
        info={'design_type': 'oneway'},
        timing=timer.result(),
        backend_name='cpu',
        warnings=tuple(_design_warnings(design)),
    )
    return AnovaSolution(_result=result, _design=design)


def welch_anova(groups: Sequence[SampleGroup]) -> WelchAnovaSolution:
    """
    Welch's one-way ANOVA for unequal variances.

    Args:
        groups: At least 2 SampleGroups, each with n >= 2

    Returns:
        WelchAnovaSolution

    Raises:
        InsufficientDataError: Too few groups, or a group with n < 2
    """
    design = AnovaDesign.for_oneway(groups, analysis="Welch's ANOVA")
    _require_variance(design.groups, "Welch's ANOVA")

    with timed() as timer:
        params = welch_anova_impl(design.groups)

    result = Result(
        params=params,
        info={'design_type': 'oneway', 'df2_rounded': round(params.df2)},
        timing=timer.result(),
        backend_name='cpu',
        warnings=tuple(_design_warnings(design)),
    )
    return WelchAnovaSolution(_result=result, _design=design)


def anova_auto(
    groups: Sequence[SampleGroup],
    *,
    post_hoc: bool = False,
    post_hoc_groups: Iterable[str] = (),
) -> OneWayAutoSolution:
    """
    One-way ANOVA with the variance assumption chosen by Levene's test.

    Levene p > 0.05 (or not computable) runs the standard ANOVA and, if
    requested, Tukey's HSD. Otherwise Welch's ANOVA and Games-Howell.

    Args:
        groups: At least 3 non-empty SampleGroups
        post_hoc: Whether to compute pairwise comparisons
        post_hoc_groups: Restrict comparisons to pairs touching these
            names; empty means all pairs

    Returns:
        OneWayAutoSolution

    Raises:
        InsufficientDataError: Fewer than 3 groups, an empty group, or
            (Welch path) a group with n < 2
    """
    design = AnovaDesign.for_oneway(groups, min_groups=3, analysis="ANOVA")
    warnings_list = _design_warnings(design)

    timer = Timer()
    timer.start()

    with timer.section('levene'):
        levene = levene_test_impl(design.groups)
    if levene.p_value != levene.p_value:
        warnings_list.append("Levene's test not computable: standard ANOVA used")

    standard = welch = None
    if equal_variances(levene):
        path = 'standard'
        with timer.section('anova'):
            standard = oneway_impl(design.groups)
        p_value = standard.p_value
    else:
        path = 'welch'
        _require_variance(design.groups, "Welch's ANOVA")
        with timer.section('anova'):
            welch = welch_anova_impl(design.groups)
        p_value = welch.p_value

    posthoc = None
    if post_hoc:
        selected, notes = _selection(design, post_hoc_groups)
        warnings_list.extend(notes)
        with timer.section('posthoc'):
            if path == 'standard':
                posthoc = tukey_hsd_impl(design.groups, selected)
            else:
                posthoc = games_howell_impl(design.groups, selected)
        if not posthoc.comparisons:
            warnings_list.append(
                f"no pairwise comparisons could be formed: {posthoc.empty_reason}"
            )
        elif posthoc.method == 'tukey':
            warnings_list.append(TUKEY_NOTE)

    timer.stop()

    params = OneWayAutoParams(
        path=path,
        levene=levene,
        standard=standard,
        welch=welch,
        p_value=p_value,
        groups=group_summaries(design.groups),
        posthoc=posthoc,
    )
    result = Result(
        params=params,
        info={'path': path, 'levene_p': levene.p_value},
        timing=timer.result(),
        backend_name='cpu',
        warnings=tuple(warnings_list),
    )
    return OneWayAutoSolution(_result=result, _design=design)


def tukey_hsd(
    groups: Sequence[SampleGroup],
    selected: Iterable[str] = (),
) -> PostHocSolution:
    """
    Tukey's Honestly Significant Difference test.

    The p-value maps q^2/2 onto F(k-1, N-k), an approximation of the
    studentized range distribution.

    Args:
        groups: All groups of the ANOVA (at least 2)
        selected: Restrict to pairs touching these names; empty = all

    Returns:
        PostHocSolution (empty when N <= k)
    """
    design = AnovaDesign.for_oneway(groups, analysis="Tukey HSD")
    return _run_posthoc(design, 'tukey', selected)


def games_howell(
    groups: Sequence[SampleGroup],
    selected: Iterable[str] = (),
) -> PostHocSolution:
    """
    Games-Howell pairwise comparisons (unequal variances).

    Args:
        groups: All groups of the ANOVA (at least 2)
        selected: Restrict to pairs touching these names; empty = all

    Returns:
        PostHocSolution; pairs with n < 2 on either side are left out
    """
    design = AnovaDesign.for_oneway(groups, analysis="Games-Howell")
    return _run_posthoc(design, 'games-howell', selected)


def anova_posthoc(
    anova_result: AnovaSolution | WelchAnovaSolution | OneWayAutoSolution,
    *,
    selected: Iterable[str] = (),
) -> PostHocSolution:
    """
    Post-hoc pairwise comparisons following a one-way ANOVA.

    Tukey's HSD follows the standard ANOVA, Games-Howell follows Welch's.

    Args:
        anova_result: Result from anova_oneway(), welch_anova() or anova_auto()
        selected: Restrict to pairs touching these names; empty = all

    Returns:
        PostHocSolution

    Examples:
        >>> res = anova_oneway([a, b, c])
        >>> print(anova_posthoc(res).summary())
    """
    if isinstance(anova_result, AnovaSolution):
        method = 'tukey'
    elif isinstance(anova_result, WelchAnovaSolution):
        method = 'games-howell'
    elif isinstance(anova_result, OneWayAutoSolution):
        method = 'tukey' if anova_result.path == 'standard' else 'games-howell'
    else:
        raise ValidationError(
            f"anova_posthoc: expected a one-way ANOVA solution, "
            f"got {type(anova_result).__name__}"
        )
    return _run_posthoc(anova_result._design, method, selected)


def _run_posthoc(design: AnovaDesign, method: str, selected: Iterable[str]) -> PostHocSolution:
    chosen, notes = _selection(design, selected)
    warnings_list = _design_warnings(design) + notes

    with timed() as timer:
        if method == 'tukey':
            params = tukey_hsd_impl(design.groups, chosen)
        else:
            params = games_howell_impl(design.groups, chosen)

    if not params.comparisons:
        warnings_list.append(
            f"no pairwise comparisons could be formed: {params.empty_reason}"
        )
    elif method == 'tukey':
        warnings_list.append(TUKEY_NOTE)

    result = Result(
        params=params,
        info={'method': method, 'n_groups': len(design.groups)},
        timing=timer.result(),
        backend_name='cpu',
        warnings=tuple(warnings_list),
    )
    return PostHocSolution(_result=result)


def anova_twoway(
    cells: Sequence[FactorialCell],
    *,
    include_interaction: bool = True,
    ss_type: int = 3,
) -> TwoWaySolution:
    """
    Two-factor ANOVA on a complete A x B grid.

    Args:
        cells: One FactorialCell per combination of levels; level order
            follows first appearance
        include_interaction: Fit the A x B term (default True)
        ss_type: 1 (sequential), 2 (hierarchical) or 3 (marginal, default).
            Unbalanced designs always use Type III; a UserWarning is
            issued when that overrides the request.

    Returns:
        TwoWaySolution with table rows A, B, A:B, Error, Total and the
        post-hoc section

    Raises:
        ValidationError: Invalid ss_type or duplicate cell
        InsufficientDataError: Fewer than 2 levels of either factor
        IncompleteDesignError: A combination is missing or empty

    Examples:
        >>> res = anova_twoway(cells, ss_type=2)
        >>> res.p_interaction
    """
    if ss_type not in (1, 2, 3):
        raise ValidationError(f"ss_type must be 1, 2, or 3, got {ss_type}")

    design = AnovaDesign.for_twoway(cells)
    warnings_list = _design_warnings(design)

    if not design.balanced and ss_type != 3:
        msg = (
            f"Unbalanced design (cell sizes differ): Type III sums of squares "
            f"used instead of the requested Type {ss_type}"
        )
        warnings.warn(msg, UserWarning, stacklevel=2)
        warnings_list.append(msg)

    with timed() as timer:
        params = twoway_impl(design, ss_type=ss_type, include_interaction=include_interaction)

    result = Result(
        params=params,
        info={
            'design_type': 'twoway',
            'n_levels_a': len(design.levels_a),
            'n_levels_b': len(design.levels_b),
        },
        timing=timer.result(),
        backend_name='cpu',
        warnings=tuple(warnings_list),
    )
    return TwoWaySolution(_result=result, _design=design)


def _require_variance(groups: Sequence[SampleGroup], analysis: str) -> None:
    for g in groups:
        if g.n < 2:
            raise InsufficientDataError(
                f"{analysis}: group {g.name!r} requires at least 2 observations, got {g.n}",
                required=2,
                actual=g.n,
                what='observations',
            )
