"""
User-facing ANOVA solution types.

Each solution wraps a Result[Params] and provides convenient accessors,
formatted summary output, and (for the full analyses) a ResultTable in
the layout shown to end users: header notes, the ANOVA table, group or
cell summaries and post-hoc rows, all in one Source/SS/df/MS/F/p/Sig grid.
"""

from dataclasses import dataclass
from typing import Any

from labstats.core.result import Result
from labstats.core.table import (
    ResultTable,
    TableBuilder,
    format_p_value,
    significance_stars,
    fmt,
)
from labstats.anova._common import (
    AnovaTableRow,
    GroupSummary,
    LeveneParams,
    OneWayAutoParams,
    OneWayParams,
    PostHocComparison,
    PostHocParams,
    SimpleEffect,
    TwoWayParams,
    WelchAnovaParams,
)
from labstats.anova._ss import SS_TYPE_NAMES
from labstats.anova.design import AnovaDesign, level_label


ANOVA_COLUMNS = ("Source", "SS", "df", "MS", "F", "p-value", "Sig.")

CAUTION_NOTE = (
    "Note: ANOVA p ≥ 0.05; post-hoc results should be interpreted with caution."
)
def no_comparisons_note(reason: str | None) -> str:
    """Table note for a post-hoc section without comparisons."""
    return f"  No comparisons ({reason or 'nothing to compare'})"

_POSTHOC_TITLES = {
    'tukey': "Post-hoc: Tukey's HSD (equal variances)",
    'games-howell': "Post-hoc: Games-Howell (unequal variances)",
    'welch': "Post-hoc: pairwise Welch t-tests",
}


class _ResultAccessors:
    """Metadata accessors shared by every ANOVA solution."""
    _result: Result

    @property
    def info(self) -> dict[str, Any]:
        return self._result.info

    @property
    def timing(self) -> dict[str, float] | None:
        return self._result.timing

    @property
    def backend_name(self) -> str:
        return self._result.backend_name

    @property
    def warnings(self) -> tuple[str, ...]:
        return self._result.warnings


# =====================================================================
# AnovaSolution  (standard one-way)
# =====================================================================


@dataclass
class AnovaSolution(_ResultAccessors):
    """
    User-facing result for the standard one-way ANOVA.

    Produced by anova_oneway().
    """
    _result: Result[OneWayParams]
    _design: AnovaDesign

    @property
    def table(self) -> tuple[AnovaTableRow, ...]:
        """ANOVA table (Between Groups, Within Groups, Total)."""
        return self._result.params.table

    @property
    def f_value(self) -> float:
        return self._result.params.f_value

    @property
    def p_value(self) -> float:
        return self._result.params.p_value

    @property
    def df_between(self) -> int:
        return self._result.params.df_between

    @property
    def df_within(self) -> int:
        return self._result.params.df_within

    @property
    def ms_within(self) -> float:
        return self._result.params.ms_within

    @property
    def n_obs(self) -> int:
        return self._result.params.n_obs

    @property
    def grand_mean(self) -> float:
        return self._result.params.grand_mean

    @property
    def groups(self) -> tuple[GroupSummary, ...]:
        return self._result.params.groups

    def summary(self) -> str:
        """Generate ANOVA summary table."""
        lines = [
            "One-Way Analysis of Variance",
            "=" * 72,
            f"Observations: {self.n_obs}, groups: {len(self.groups)}",
            "",
        ]
        lines.extend(_table_lines(self.table))
        lines.extend(f"Warning: {w}" for w in self.warnings)
        return "\n".join(lines)

    def __repr__(self) -> str:
        return (
            f"AnovaSolution(F={self.f_value:.4f}, p={self.p_value:.4g}, "
            f"k={len(self.groups)}, n={self.n_obs})"
        )


# =====================================================================
# WelchAnovaSolution
# =====================================================================


@dataclass
class WelchAnovaSolution(_ResultAccessors):
    """
    User-facing result for Welch's one-way ANOVA.

    Produced by welch_anova().
    """
    _result: Result[WelchAnovaParams]
    _design: AnovaDesign

    @property
    def f_value(self) -> float:
        return self._result.params.f_value

    @property
    def df1(self) -> float:
        return self._result.params.df1

    @property
    def df2(self) -> float:
        return self._result.params.df2

    @property
    def p_value(self) -> float:
        return self._result.params.p_value

    @property
    def weights(self) -> dict[str, float]:
        return self._result.params.weights

    @property
    def groups(self) -> tuple[GroupSummary, ...]:
        return self._result.params.groups

    def summary(self) -> str:
        lines = [
            "Welch's One-Way ANOVA (unequal variances)",
            "=" * 50,
            f"F({self.df1:.1f}, {self.df2:.2f}) = {self.f_value:.4f}, "
            f"p = {format_p_value(self.p_value)}",
        ]
        lines.extend(f"Warning: {w}" for w in self.warnings)
        return "\n".join(lines)

    def __repr__(self) -> str:
        return (
            f"WelchAnovaSolution(F={self.f_value:.4f}, df1={self.df1:.1f}, "
            f"df2={self.df2:.2f}, p={self.p_value:.4g})"
        )


# =====================================================================
# LeveneSolution
# =====================================================================


@dataclass
class LeveneSolution(_ResultAccessors):
    """
    User-facing result for Levene's test.

    Produced by levene_test().
    """
    _result: Result[LeveneParams]

    @property
    def f_value(self) -> float:
        return self._result.params.f_value

    @property
    def p_value(self) -> float:
        return self._result.params.p_value

    @property
    def df_between(self) -> int:
        return self._result.params.df_between

    @property
    def df_within(self) -> int:
        return self._result.params.df_within

    @property
    def center(self) -> str:
        return self._result.params.center

    @property
    def group_vars(self) -> dict[str, float]:
        return self._result.params.group_vars

    @property
    def equal_variances(self) -> bool:
        """True when p > 0.05 or the test could not be computed."""
        return equal_variances(self._result.params)

    def summary(self) -> str:
        lines = [
            "Brown-Forsythe Test for Homogeneity of Variances",
            "=" * 50,
            f"F({self.df_between}, {self.df_within}) = {fmt(self.f_value)}, "
            f"p = {format_p_value(self.p_value)}",
            "",
            f"Center: {self.center}",
        ]
        return "\n".join(lines)

    def __repr__(self) -> str:
        return (
            f"LeveneSolution(F={self.f_value:.4f}, "
            f"p={self.p_value:.4g}, center={self.center!r})"
        )


# =====================================================================
# PostHocSolution
# =====================================================================


@dataclass
class PostHocSolution(_ResultAccessors):
    """
    User-facing result for post-hoc comparisons.

    Produced by tukey_hsd(), games_howell() and anova_posthoc().
    """
    _result: Result[PostHocParams]

    @property
    def method(self) -> str:
        return self._result.params.method

    @property
    def comparisons(self) -> tuple[PostHocComparison, ...]:
        return self._result.params.comparisons

    @property
    def selected(self) -> tuple[str, ...]:
        return self._result.params.selected

    @property
    def mse(self) -> float | None:
        return self._result.params.mse

    @property
    def df_error(self) -> int | None:
        return self._result.params.df_error

    @property
    def empty_reason(self) -> str | None:
        """Why no comparisons were formed; None when there are some."""
        return self._result.params.empty_reason

    def __len__(self) -> int:
        return len(self.comparisons)

    def get(self, group1: str, group2: str) -> PostHocComparison:
        """Comparison between two named groups, in either order."""
        for c in self.comparisons:
            if {c.group1, c.group2} == {group1, group2}:
                return c
        raise KeyError(f"No comparison {group1!r} vs {group2!r}")

    def summary(self) -> str:
        title = _POSTHOC_TITLES.get(self.method, self.method)
        stat = "q" if self.method == 'tukey' else "t"
        lines = [
            title,
            "=" * 72,
            f"{'Comparison':<25} {'diff':>10} {'SE':>10} {stat:>10} {'df':>8} {'p':>10}",
            "-" * 72,
        ]
        for c in self.comparisons:
            label = f"{c.group1} vs {c.group2}"
            df = fmt(c.df, 1) if c.df is not None else ""
            lines.append(
                f"{label:<25} {c.diff:>10.4f} {c.se:>10.4f} "
                f"{c.statistic:>10.4f} {df:>8} {format_p_value(c.p_value):>10} "
                f"{significance_stars(c.p_value)}"
            )
        if not self.comparisons:
            lines.append("(no comparisons)")
        lines.append("-" * 72)
        if self.method == 'tukey':
            lines.append("p-values use the F approximation q^2/2 ~ F(k-1, N-k)")
        return "\n".join(lines)

    def __repr__(self) -> str:
        return (
            f"PostHocSolution(method={self.method!r}, "
            f"n_comparisons={len(self.comparisons)})"
        )


# =====================================================================
# OneWayAutoSolution  (Levene-selected path)
# =====================================================================


@dataclass
class OneWayAutoSolution(_ResultAccessors):
    """
    User-facing result for the Levene-driven one-way ANOVA.

    Produced by anova_auto(). Levene p > 0.05 (or NaN) takes the standard
    path with Tukey post-hoc; otherwise Welch's ANOVA with Games-Howell.
    """
    _result: Result[OneWayAutoParams]
    _design: AnovaDesign

    @property
    def path(self) -> str:
        """'standard' or 'welch'."""
        return self._result.params.path

    @property
    def anova_type(self) -> str:
        return "Standard One-Way ANOVA" if self.path == 'standard' else "Welch's ANOVA"

    @property
    def levene(self) -> LeveneParams:
        return self._result.params.levene

    @property
    def standard(self) -> OneWayParams | None:
        return self._result.params.standard

    @property
    def welch(self) -> WelchAnovaParams | None:
        return self._result.params.welch

    @property
    def table(self) -> tuple[AnovaTableRow, ...]:
        """Standard ANOVA table; empty on the Welch path."""
        std = self._result.params.standard
        return std.table if std is not None else ()

    @property
    def f_value(self) -> float:
        p = self._result.params
        return p.standard.f_value if p.standard is not None else p.welch.f_value

    @property
    def p_value(self) -> float:
        return self._result.params.p_value

    @property
    def groups(self) -> tuple[GroupSummary, ...]:
        return self._result.params.groups

    @property
    def posthoc(self) -> PostHocParams | None:
        return self._result.params.posthoc

    @property
    def caution(self) -> bool:
        """True when post-hoc results accompany a non-significant omnibus test."""
        return self.posthoc is not None and self.p_value >= 0.05

    def to_table(self, title: str = "One-Way ANOVA") -> ResultTable:
        p = self._result.params
        builder = TableBuilder(title, ANOVA_COLUMNS)

        verdict = "Equal variances assumed" if p.path == 'standard' else "Unequal variances"
        builder.note(f"ANOVA Type: {self.anova_type}")
        builder.note(
            f"Levene's Test: F={fmt(p.levene.f_value, 3)}, "
            f"p={format_p_value(p.levene.p_value)} ({verdict})"
        )
        builder.blank()

        if p.standard is not None:
            _add_anova_rows(builder, p.standard.table)
        else:
            w = p.welch
            builder.add(
                "Welch's F", "-", f"{w.df1:.1f}, {w.df2:.1f}", "-",
                fmt(w.f_value), format_p_value(w.p_value), significance_stars(w.p_value),
            )

        builder.blank()
        builder.note("Group Summary:")
        for g in p.groups:
            builder.add(f"  {g.name}", f"N={g.n}", "", f"Mean={g.mean:.4f}", f"SD={g.sd:.4f}")

        if p.posthoc is not None:
            builder.blank()
            if self.caution:
                builder.note(CAUTION_NOTE)
                builder.blank()
            _add_posthoc_rows(builder, p.posthoc)

        builder.extend_warnings(self.warnings)
        return builder.build()

    def summary(self) -> str:
        return self.to_table().to_text()

    def __repr__(self) -> str:
        return (
            f"OneWayAutoSolution(path={self.path!r}, F={self.f_value:.4f}, "
            f"p={self.p_value:.4g})"
        )


# =====================================================================
# TwoWaySolution
# =====================================================================


@dataclass
class TwoWaySolution(_ResultAccessors):
    """
    User-facing result for the two-factor ANOVA.

    Produced by anova_twoway().
    """
    _result: Result[TwoWayParams]
    _design: AnovaDesign

    @property
    def table(self) -> tuple[AnovaTableRow, ...]:
        """ANOVA table rows A, B, A:B (if fitted), Error, Total."""
        return self._result.params.table

    def row(self, term: str) -> AnovaTableRow:
        for r in self.table:
            if r.term == term:
                return r
        raise KeyError(f"No term {term!r}. Available: {[r.term for r in self.table]}")

    @property
    def ss_type(self) -> int:
        """Sum-of-squares type actually applied."""
        return self._result.params.ss_type

    @property
    def ss_type_requested(self) -> int:
        return self._result.params.ss_type_requested

    @property
    def ss_type_forced(self) -> bool:
        """True when an unbalanced design overrode the requested type."""
        p = self._result.params
        return p.ss_type != p.ss_type_requested

    @property
    def balanced(self) -> bool:
        return self._result.params.balanced

    @property
    def include_interaction(self) -> bool:
        return self._result.params.include_interaction

    @property
    def p_a(self) -> float:
        return self.row('A').p_value

    @property
    def p_b(self) -> float:
        return self.row('B').p_value

    @property
    def p_interaction(self) -> float:
        """Interaction p-value; 1.0 when the interaction is not fitted."""
        if not self.include_interaction:
            return 1.0
        return self.row('A:B').p_value

    @property
    def ss_interaction(self) -> float:
        if not self.include_interaction:
            return 0.0
        return self.row('A:B').sum_sq

    @property
    def grand_mean(self) -> float:
        return self._result.params.grand_mean

    @property
    def cell_means(self) -> dict[tuple[Any, Any], float]:
        return self._result.params.cell_means

    @property
    def posthoc_kind(self) -> str:
        return self._result.params.posthoc.kind

    @property
    def simple_effects(self) -> tuple[SimpleEffect, ...]:
        return self._result.params.posthoc.simple_effects

    @property
    def pairwise_a(self) -> tuple[PostHocComparison, ...] | None:
        return self._result.params.posthoc.pairwise_a

    @property
    def pairwise_b(self) -> tuple[PostHocComparison, ...] | None:
        return self._result.params.posthoc.pairwise_b

    def to_table(
        self,
        title: str = "Two-Way ANOVA",
        *,
        factor_a: str = "Series",
        factor_b: str = "X Value",
    ) -> ResultTable:
        p = self._result.params
        builder = TableBuilder(title, ANOVA_COLUMNS)

        ss_name = SS_TYPE_NAMES[p.ss_type]
        if self.ss_type_forced:
            ss_name += " (forced: unbalanced design)"
        builder.note(f"Sum of Squares: {ss_name}")
        builder.note(f"Design: {'Balanced' if p.balanced else 'Unbalanced'}")
        builder.blank()

        labels = {
            'A': f"{factor_a} (Factor A)",
            'B': f"{factor_b} (Factor B)",
            'A:B': "Interaction (A×B)",
        }
        _add_anova_rows(builder, p.table, labels)

        builder.blank()
        post = p.posthoc
        if post.kind == 'simple_effects':
            builder.note("Post-hoc: Simple Main Effects (Interaction p < 0.05)")
            builder.blank()
            builder.note(f"Effect of {factor_a} at each {factor_b}:")
            for e in post.simple_effects:
                if e.factor == 'A':
                    _add_simple_effect(builder, e)
            builder.blank()
            builder.note(f"Effect of {factor_b} at each {factor_a}:")
            for e in post.simple_effects:
                if e.factor == 'B':
                    _add_simple_effect(builder, e)
        else:
            builder.note("Post-hoc: Main Effects Tests (Interaction p ≥ 0.05 or excluded)")
            for key, comps in (('A', post.pairwise_a), ('B', post.pairwise_b)):
                if comps is None:
                    continue
                name = factor_a if key == 'A' else factor_b
                builder.blank()
                builder.note(f"Pairwise comparisons for Factor {key} ({name}):")
                for c in comps:
                    builder.add(
                        f"  {c.group1} vs {c.group2}", f"Δ={c.diff:.4f}", fmt(c.df, 1), "",
                        fmt(c.statistic), format_p_value(c.p_value), significance_stars(c.p_value),
                    )

        builder.blank()
        builder.note("Cell Means:")
        for a in p.levels_a:
            cells = "  ".join(
                f"{level_label(b)}→{p.cell_means[(a, b)]:.3f}" for b in p.levels_b
            )
            builder.note(f"  {level_label(a)}: {cells}")

        builder.extend_warnings(self.warnings)
        return builder.build()

    def summary(self) -> str:
        return self.to_table().to_text()

    def __repr__(self) -> str:
        terms = [r.term for r in self.table if r.f_value is not None]
        return (
            f"TwoWaySolution(type={self.ss_type}, "
            f"balanced={self.balanced}, terms={terms})"
        )


# =====================================================================
# Helpers
# =====================================================================


def equal_variances(levene: LeveneParams) -> bool:
    """Levene p > 0.05, or NaN (test not computable), selects the standard path."""
    p = levene.p_value
    return p != p or p > 0.05


def _table_lines(table: tuple[AnovaTableRow, ...]) -> list[str]:
    lines = [
        f"{'Source':<20} {'Df':>6} {'Sum Sq':>14} {'Mean Sq':>14} {'F value':>10} {'Pr(>F)':>10}",
        "-" * 72,
    ]
    for row in table:
        ms = f"{row.mean_sq:>14.4f}" if row.mean_sq is not None else " " * 14
        line = f"{row.term:<20} {row.df:>6} {row.sum_sq:>14.4f} {ms}"
        if row.f_value is not None:
            line += (
                f" {row.f_value:>10.4f} {format_p_value(row.p_value):>10} "
                f"{significance_stars(row.p_value)}"
            )
        lines.append(line.rstrip())
    lines.append("-" * 72)
    lines.append("Signif. codes:  0 '***' 0.001 '**' 0.01 '*' 0.05 'ns' 1")
    return lines


def _add_anova_rows(
    builder: TableBuilder,
    table: tuple[AnovaTableRow, ...],
    labels: dict[str, str] | None = None,
) -> None:
    labels = labels or {}
    for r in table:
        if r.f_value is not None:
            builder.add(
                labels.get(r.term, r.term), fmt(r.sum_sq), str(r.df), fmt(r.mean_sq), fmt(r.f_value),
                format_p_value(r.p_value), significance_stars(r.p_value),
            )
        elif r.mean_sq is not None:
            builder.add(r.term, fmt(r.sum_sq), str(r.df), fmt(r.mean_sq), "-", "-", "-")
        else:
            builder.add(r.term, fmt(r.sum_sq), str(r.df), "-", "-", "-", "-")


def _add_posthoc_rows(builder: TableBuilder, posthoc: PostHocParams) -> None:
    builder.note(_POSTHOC_TITLES[posthoc.method])
    if posthoc.method == 'tukey':
        builder.add("Comparison", "Mean Diff", "", "SE", "q", "p-value", "Sig.")
    else:
        builder.add("Comparison", "Mean Diff", "df", "SE", "t", "p-value", "Sig.")

    if not posthoc.comparisons:
        builder.note(no_comparisons_note(posthoc.empty_reason))
        return

    for c in posthoc.comparisons:
        builder.add(
            f"  {c.group1} vs {c.group2}",
            fmt(c.diff),
            fmt(c.df, 1) if c.df is not None else "",
            fmt(c.se),
            fmt(c.statistic),
            format_p_value(c.p_value),
            significance_stars(c.p_value),
        )


def _add_simple_effect(builder: TableBuilder, e: SimpleEffect) -> None:
    builder.add(
        f"  {level_label(e.at_level)}", "", f"{e.df_between}, {e.df_within}", "",
        fmt(e.f_value), format_p_value(e.p_value), significance_stars(e.p_value),
    )
