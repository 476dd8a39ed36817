"""
ANOVA design object.

Wraps validated groups (one-way) or a validated factorial grid (two-way).
Factory methods handle the two layouts.
"""

from dataclasses import dataclass
from typing import Any, Sequence

import numpy as np

from labstats.core.exceptions import (
    ValidationError,
    InsufficientDataError,
    IncompleteDesignError,
)
from labstats.core.groups import SampleGroup, FactorialCell
from labstats.core.validation import check_min_groups


def level_label(level: Any) -> str:
    """Display label for a factor level (24.0 -> '24')."""
    if isinstance(level, (float, np.floating)):
        return f"{float(level):g}"
    return str(level)


@dataclass(frozen=True)
class AnovaDesign:
    """
    Validated data container for ANOVA.

    Created via factory methods, not directly.
    """
    groups: tuple[SampleGroup, ...]
    design_type: str   # 'oneway', 'twoway'
    levels_a: tuple[Any, ...] = ()
    levels_b: tuple[Any, ...] = ()
    cells: dict[tuple[Any, Any], SampleGroup] | None = None

    @property
    def n(self) -> int:
        return sum(g.n for g in self.groups)

    @property
    def names(self) -> tuple[str, ...]:
        return tuple(g.name for g in self.groups)

    @property
    def aggregated(self) -> tuple[str, ...]:
        return tuple(g.name for g in self.groups if g.aggregated)

    @property
    def balanced(self) -> bool:
        """True when every group (cell) has the same size."""
        return len({g.n for g in self.groups}) == 1

    def cell(self, a: Any, b: Any) -> SampleGroup:
        return self.cells[(a, b)]

    def pooled_a(self, a: Any) -> SampleGroup:
        """All observations at level a of factor A, across B."""
        return SampleGroup(
            level_label(a),
            np.concatenate([self.cells[(a, b)].values for b in self.levels_b]),
        )

    def pooled_b(self, b: Any) -> SampleGroup:
        """All observations at level b of factor B, across A."""
        return SampleGroup(
            level_label(b),
            np.concatenate([self.cells[(a, b)].values for a in self.levels_a]),
        )

    @staticmethod
    def for_oneway(
        groups: Sequence[SampleGroup],
        *,
        min_groups: int = 2,
        analysis: str = "one-way ANOVA",
    ) -> 'AnovaDesign':
        """
        Create design for one-way ANOVA.

        Args:
            groups: One SampleGroup per level, in display order
            min_groups: Fewest groups the analysis accepts
            analysis: Analysis name for error messages

        Returns:
            AnovaDesign for one-way ANOVA

        Raises:
            InsufficientDataError: Too few groups, or an empty group
            ValidationError: Duplicate group names
        """
        groups = tuple(groups)
        check_min_groups(groups, min_groups, analysis)

        names = [g.name for g in groups]
        if len(set(names)) != len(names):
            dupes = sorted({n for n in names if names.count(n) > 1})
            raise ValidationError(f"{analysis}: duplicate group names {dupes}")

        for g in groups:
            if g.n == 0:
                raise InsufficientDataError(
                    f"{analysis}: group {g.name!r} has no observations",
                    required=1,
                    actual=0,
                    what='observations',
                )

        return AnovaDesign(groups=groups, design_type='oneway')

    @staticmethod
    def for_twoway(cells: Sequence[FactorialCell]) -> 'AnovaDesign':
        """
        Create design for two-way ANOVA.

        Level order is the order of first appearance in `cells`.

        Args:
            cells: One FactorialCell per (A, B) combination

        Returns:
            AnovaDesign for two-way ANOVA

        Raises:
            InsufficientDataError: Fewer than 2 levels of either factor
            IncompleteDesignError: A combination is missing or empty
            ValidationError: A combination appears twice, or two levels of
                one factor share a display label (e.g. 1.0 and "1")
        """
        levels_a: list[Any] = []
        levels_b: list[Any] = []
        grid: dict[tuple[Any, Any], SampleGroup] = {}

        for c in cells:
            if c.factor_a not in levels_a:
                levels_a.append(c.factor_a)
            if c.factor_b not in levels_b:
                levels_b.append(c.factor_b)
            key = (c.factor_a, c.factor_b)
            if key in grid:
                raise ValidationError(
                    f"two-way ANOVA: duplicate cell "
                    f"({c.factor_a!r}, {level_label(c.factor_b)})"
                )
            grid[key] = c.group

        for what, levels in (("factor A", levels_a), ("factor B", levels_b)):
            if len(levels) < 2:
                raise InsufficientDataError(
                    f"two-way ANOVA: {what} requires at least 2 levels, "
                    f"got {len(levels)}",
                    required=2,
                    actual=len(levels),
                    what='levels',
                )
            labels = [level_label(lv) for lv in levels]
            clashes = sorted({lb for lb in labels if labels.count(lb) > 1})
            if clashes:
                raise ValidationError(
                    f"two-way ANOVA: {what} has distinct levels that display "
                    f"the same ({clashes}); use one type per factor"
                )

        missing = tuple(
            (a, b)
            for a in levels_a
            for b in levels_b
            if (a, b) not in grid or grid[(a, b)].n == 0
        )
        if missing:
            listed = ", ".join(f"{a} @ {level_label(b)}" for a, b in missing)
            raise IncompleteDesignError(
                f"two-way ANOVA requires data at every combination; "
                f"missing: {listed}",
                missing_cells=missing,
            )

        ordered = tuple(grid[(a, b)] for a in levels_a for b in levels_b)
        return AnovaDesign(
            groups=ordered,
            design_type='twoway',
            levels_a=tuple(levels_a),
            levels_b=tuple(levels_b),
            cells=grid,
        )
