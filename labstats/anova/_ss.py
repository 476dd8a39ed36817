"""
Sum-of-squares decomposition for the two-factor design.

All three types share SS_error (within cells) and SS_total (around the
grand mean) and differ in how the factor effects are attributed:

    Type III (marginal):     SS_A, SS_B from marginal means weighted by
                             level size; SS_AB from cell deviations from
                             the additive model.
    Type I (sequential):     SS_A as Type III; SS_B is the remainder
                             SS_total - SS_A - SS_error (- SS_AB).
    Type II (hierarchical):  SS_A, SS_B as Type III; SS_AB is the
                             remainder, clamped at 0.

Type III is applied whenever cell sizes differ, regardless of the type
requested.
"""

from dataclasses import dataclass
from typing import Any

import numpy as np

from labstats.anova.design import AnovaDesign


SS_TYPE_NAMES = {
    1: "Type I (Sequential)",
    2: "Type II (Hierarchical)",
    3: "Type III (Marginal)",
}


@dataclass(frozen=True)
class TwoWayMeans:
    """Grand, marginal and cell means of a complete two-factor grid."""
    grand: float
    a: dict[Any, float]
    b: dict[Any, float]
    cells: dict[tuple[Any, Any], float]
    n_a: dict[Any, int]
    n_b: dict[Any, int]
    n_cells: dict[tuple[Any, Any], int]


@dataclass(frozen=True)
class TwoWaySS:
    ss_a: float
    ss_b: float
    ss_ab: float
    ss_error: float
    ss_total: float


def twoway_means(design: AnovaDesign) -> TwoWayMeans:
    all_values = np.concatenate([g.values for g in design.groups])
    cells = {key: g.mean for key, g in design.cells.items()}
    n_cells = {key: g.n for key, g in design.cells.items()}

    a_means: dict[Any, float] = {}
    n_a: dict[Any, int] = {}
    for a in design.levels_a:
        pooled = design.pooled_a(a)
        a_means[a], n_a[a] = pooled.mean, pooled.n

    b_means: dict[Any, float] = {}
    n_b: dict[Any, int] = {}
    for b in design.levels_b:
        pooled = design.pooled_b(b)
        b_means[b], n_b[b] = pooled.mean, pooled.n

    return TwoWayMeans(
        grand=float(np.mean(all_values)),
        a=a_means,
        b=b_means,
        cells=cells,
        n_a=n_a,
        n_b=n_b,
        n_cells=n_cells,
    )


def _ss_main(means: dict[Any, float], sizes: dict[Any, int], grand: float) -> float:
    return float(sum(sizes[lv] * (means[lv] - grand) ** 2 for lv in means))


def _ss_interaction(design: AnovaDesign, m: TwoWayMeans) -> float:
    total = 0.0
    for a in design.levels_a:
        for b in design.levels_b:
            dev = m.cells[(a, b)] - m.a[a] - m.b[b] + m.grand
            total += m.n_cells[(a, b)] * dev ** 2
    return float(total)


def compute_twoway_ss(
    design: AnovaDesign,
    means: TwoWayMeans,
    ss_type: int,
    include_interaction: bool,
) -> TwoWaySS:
    """
    Decompose the total sum of squares.

    Args:
        design: Complete two-way design
        means: Output of twoway_means(design)
        ss_type: 1, 2 or 3, already forced to 3 for unbalanced designs
        include_interaction: Whether to fit the A x B term

    Returns:
        TwoWaySS (ss_ab is 0 when the interaction is excluded)
    """
    all_values = np.concatenate([g.values for g in design.groups])
    ss_total = float(np.sum((all_values - means.grand) ** 2))
    ss_error = float(sum(g.sum_sq for g in design.groups))

    ss_a = _ss_main(means.a, means.n_a, means.grand)
    ss_ab = 0.0

    if ss_type == 1:
        if include_interaction:
            ss_ab = _ss_interaction(design, means)
        ss_b = ss_total - ss_a - ss_ab - ss_error
    elif ss_type == 2:
        ss_b = _ss_main(means.b, means.n_b, means.grand)
        if include_interaction:
            ss_ab = max(0.0, ss_total - ss_a - ss_b - ss_error)
    else:
        ss_b = _ss_main(means.b, means.n_b, means.grand)
        if include_interaction:
            ss_ab = _ss_interaction(design, means)

    return TwoWaySS(
        ss_a=ss_a,
        ss_b=ss_b,
        ss_ab=ss_ab,
        ss_error=ss_error,
        ss_total=ss_total,
    )
