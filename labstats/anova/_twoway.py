"""
Two-factor (A x B) ANOVA with selectable sum-of-squares type.

After the table, a post-hoc section is computed: simple main effects when
the interaction is included and significant, otherwise pairwise Welch
t-tests among the levels of each significant main effect (pooled over
the other factor).
"""

from labstats.core.compute.tolerances import EPS, ALPHA
from labstats.special import f_sf
from labstats.anova._common import (
    AnovaTableRow,
    SimpleEffect,
    TwoWayParams,
    TwoWayPostHoc,
)
from labstats.anova._oneway import oneway_impl
from labstats.anova._posthoc import welch_pairwise_impl
from labstats.anova._ss import twoway_means, compute_twoway_ss
from labstats.anova.design import AnovaDesign


def twoway_impl(
    design: AnovaDesign,
    *,
    ss_type: int,
    include_interaction: bool,
) -> TwoWayParams:
    """
    Compute the two-way ANOVA table and its post-hoc section.

    Args:
        design: Complete two-way design from AnovaDesign.for_twoway
        ss_type: Requested type (1, 2 or 3); 3 is used if unbalanced
        include_interaction: Whether to fit the A x B term

    Returns:
        TwoWayParams
    """
    balanced = design.balanced
    applied = ss_type if balanced else 3

    means = twoway_means(design)
    ss = compute_twoway_ss(design, means, applied, include_interaction)

    a = len(design.levels_a)
    b = len(design.levels_b)
    n_total = design.n

    df_a = a - 1
    df_b = b - 1
    df_ab = df_a * df_b if include_interaction else 0
    df_error = max(1, n_total - (a * b if include_interaction else a + b - 1))
    df_total = n_total - 1

    ms_a = ss.ss_a / df_a
    ms_b = ss.ss_b / df_b
    ms_ab = ss.ss_ab / df_ab if df_ab > 0 else 0.0
    ms_error = ss.ss_error / df_error

    def _f(ms: float) -> float:
        return ms / ms_error if ms_error > EPS else 0.0

    f_a, f_b, f_ab = _f(ms_a), _f(ms_b), _f(ms_ab)
    p_a = f_sf(f_a, df_a, df_error)
    p_b = f_sf(f_b, df_b, df_error)
    p_ab = f_sf(f_ab, df_ab, df_error) if include_interaction else 1.0

    rows = [
        AnovaTableRow('A', df_a, ss.ss_a, ms_a, f_a, p_a),
        AnovaTableRow('B', df_b, ss.ss_b, ms_b, f_b, p_b),
    ]
    if include_interaction:
        rows.append(AnovaTableRow('A:B', df_ab, ss.ss_ab, ms_ab, f_ab, p_ab))
    rows.append(AnovaTableRow('Error', df_error, ss.ss_error, ms_error, None, None))
    rows.append(AnovaTableRow('Total', df_total, ss.ss_total, None, None, None))

    if include_interaction and p_ab < ALPHA:
        posthoc = _simple_effects(design)
    else:
        posthoc = TwoWayPostHoc(
            kind='main_effects',
            pairwise_a=_pairwise(design, 'A') if p_a < ALPHA else None,
            pairwise_b=_pairwise(design, 'B') if p_b < ALPHA else None,
        )

    return TwoWayParams(
        table=tuple(rows),
        ss_type=applied,
        ss_type_requested=ss_type,
        balanced=balanced,
        include_interaction=include_interaction,
        levels_a=design.levels_a,
        levels_b=design.levels_b,
        n_obs=n_total,
        grand_mean=means.grand,
        means_a=means.a,
        means_b=means.b,
        cell_means=means.cells,
        cell_sizes=means.n_cells,
        posthoc=posthoc,
    )


def _simple_effects(design: AnovaDesign) -> TwoWayPostHoc:
    effects = []
    # Effect of A at each level of B
    for b in design.levels_b:
        res = oneway_impl([design.cell(a, b) for a in design.levels_a])
        effects.append(SimpleEffect('A', b, res.f_value, res.p_value,
                                    res.df_between, res.df_within))
    # Effect of B at each level of A
    for a in design.levels_a:
        res = oneway_impl([design.cell(a, b) for b in design.levels_b])
        effects.append(SimpleEffect('B', a, res.f_value, res.p_value,
                                    res.df_between, res.df_within))
    return TwoWayPostHoc(kind='simple_effects', simple_effects=tuple(effects))


def _pairwise(design: AnovaDesign, factor: str):
    if factor == 'A':
        pooled = [design.pooled_a(a) for a in design.levels_a]
    else:
        pooled = [design.pooled_b(b) for b in design.levels_b]
    return welch_pairwise_impl(pooled).comparisons
