"""
Common data types for ANOVA.

Contains the frozen parameter payloads that go inside Result[P] envelopes.
Each payload is a pure data container: no methods, no computation.
"""

from dataclasses import dataclass
from typing import Any


@dataclass(frozen=True)
class AnovaTableRow:
    """One row of an ANOVA table (one term, error/within, or total)."""
    term: str
    df: int
    sum_sq: float
    mean_sq: float | None    # None for Total row
    f_value: float | None    # None for Within/Error and Total rows
    p_value: float | None    # None for Within/Error and Total rows


@dataclass(frozen=True)
class GroupSummary:
    """Size, mean and SD of one group, as listed under an ANOVA table."""
    name: str
    n: int
    mean: float
    sd: float


@dataclass(frozen=True)
class OneWayParams:
    """
    Parameter payload for the standard one-way ANOVA.

    table rows are Between Groups, Within Groups, Total.
    """
    table: tuple[AnovaTableRow, ...]
    n_obs: int
    n_groups: int
    grand_mean: float
    f_value: float
    p_value: float
    df_between: int
    df_within: int
    ms_within: float
    groups: tuple[GroupSummary, ...]


@dataclass(frozen=True)
class WelchAnovaParams:
    """Parameter payload for Welch's heteroscedastic one-way ANOVA."""
    f_value: float
    df1: float
    df2: float
    p_value: float
    weighted_grand_mean: float
    weights: dict[str, float]      # group -> n_i / var_i
    groups: tuple[GroupSummary, ...]


@dataclass(frozen=True)
class LeveneParams:
    """Parameter payload for the Brown-Forsythe (median-centred) Levene test."""
    f_value: float
    p_value: float
    df_between: int
    df_within: int
    center: str                    # always 'median'
    group_vars: dict[str, float]   # group -> variance


@dataclass(frozen=True)
class PostHocComparison:
    """One pairwise comparison; diff is mean(group1) - mean(group2)."""
    group1: str
    group2: str
    diff: float
    se: float
    statistic: float               # q (Tukey) or t (Games-Howell, Welch)
    df: float | None               # None for Tukey
    p_value: float


@dataclass(frozen=True)
class PostHocParams:
    """Parameter payload for post-hoc tests."""
    method: str                    # 'tukey', 'games-howell', 'welch'
    comparisons: tuple[PostHocComparison, ...]
    selected: tuple[str, ...]      # restriction set; empty = all pairs
    mse: float | None              # Tukey only
    df_error: int | None           # Tukey only
    empty_reason: str | None = None  # why comparisons is empty, if it is


@dataclass(frozen=True)
class OneWayAutoParams:
    """
    Parameter payload for the Levene-driven one-way ANOVA.

    Exactly one of `standard` and `welch` is set, matching `path`.
    """
    path: str                      # 'standard' or 'welch'
    levene: LeveneParams
    standard: OneWayParams | None
    welch: WelchAnovaParams | None
    p_value: float                 # omnibus p of the chosen path
    groups: tuple[GroupSummary, ...]
    posthoc: PostHocParams | None


@dataclass(frozen=True)
class SimpleEffect:
    """One-way ANOVA of one factor at a fixed level of the other."""
    factor: str                    # 'A' or 'B': the factor being tested
    at_level: Any                  # level of the other factor
    f_value: float
    p_value: float
    df_between: int
    df_within: int


@dataclass(frozen=True)
class TwoWayPostHoc:
    """
    Post-hoc section of a two-way ANOVA.

    kind is 'simple_effects' when the interaction is significant, else
    'main_effects' (pairwise Welch tests for each significant factor;
    None for a factor that was not significant).
    """
    kind: str
    simple_effects: tuple[SimpleEffect, ...] = ()
    pairwise_a: tuple[PostHocComparison, ...] | None = None
    pairwise_b: tuple[PostHocComparison, ...] | None = None


@dataclass(frozen=True)
class TwoWayParams:
    """
    Parameter payload for the two-factor ANOVA.

    table rows are A, B, A:B (if included), Error, Total.
    """
    table: tuple[AnovaTableRow, ...]
    ss_type: int                               # 1, 2, or 3 (as applied)
    ss_type_requested: int
    balanced: bool
    include_interaction: bool
    levels_a: tuple[Any, ...]
    levels_b: tuple[Any, ...]
    n_obs: int
    grand_mean: float
    means_a: dict[Any, float]
    means_b: dict[Any, float]
    cell_means: dict[tuple[Any, Any], float]
    cell_sizes: dict[tuple[Any, Any], int]
    posthoc: TwoWayPostHoc
