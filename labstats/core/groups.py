"""
Input data model for LabStats.

SampleGroup is the "I have replicates" abstraction: one named, comparable
unit (a series, a bar's replicates, or one cell of a factorial grid). It
doesn't know which analysis will consume it.

Usage:
    from labstats.core import SampleGroup, FactorialCell, XYSeries

    ctrl = SampleGroup("control", [10.1, 12.0, 11.3])
    drug = SampleGroup.from_summary("drug", mean=14.2)   # no raw replicates
    cell = FactorialCell("WT", 24.0, SampleGroup("WT@24h", [3.1, 2.9, 3.4]))
    line = XYSeries("standard curve", x=[0, 1, 2, 4], y=[0.02, 0.21, 0.39, 0.80])
"""

from __future__ import annotations

from dataclasses import dataclass
from typing import Any

import numpy as np
from numpy.typing import ArrayLike, NDArray

from labstats.core.validation import check_array, check_finite, check_1d


def _frozen_array(values: ArrayLike, name: str) -> NDArray[np.floating[Any]]:
    """Validate to a 1D finite float64 array and mark it read-only."""
    arr = check_array(values, name)
    check_1d(arr, name)
    check_finite(arr, name)
    arr = arr.copy()
    arr.flags.writeable = False
    return arr


@dataclass(frozen=True, eq=False)
class SampleGroup:
    """
    One named sample of raw replicate values.

    `values` is a read-only float64 array; it is never mutated after
    construction. Variance and SD are defined as 0 when n < 2.

    Attributes:
        name: Label used in result tables
        values: Replicate observations, in caller order
        aggregated: True when the group stands in for a summary mean
            rather than raw replicates (see from_summary)
    """
    name: str
    values: NDArray[np.floating[Any]]
    aggregated: bool = False

    def __post_init__(self):
        object.__setattr__(self, 'name', str(self.name))
        object.__setattr__(self, 'values', _frozen_array(self.values, self.name))

    @classmethod
    def from_summary(cls, name: str, mean: float) -> SampleGroup:
        """
        Build a group from an aggregate mean when no replicates exist.

        The mean is treated as a single effective observation. Every
        analysis that consumes such a group flags it in its warnings.
        """
        return cls(name=name, values=np.array([float(mean)]), aggregated=True)

    @property
    def n(self) -> int:
        return int(self.values.shape[0])

    @property
    def mean(self) -> float:
        if self.n == 0:
            return float('nan')
        return float(np.mean(self.values))

    @property
    def sum_sq(self) -> float:
        """Sum of squared deviations from the group mean."""
        if self.n == 0:
            return 0.0
        return float(np.sum((self.values - self.mean) ** 2))

    @property
    def var(self) -> float:
        """Sample variance (denominator n - 1); 0 when n < 2."""
        if self.n < 2:
            return 0.0
        return self.sum_sq / (self.n - 1)

    @property
    def sd(self) -> float:
        return float(np.sqrt(self.var))

    @property
    def median(self) -> float:
        if self.n == 0:
            return float('nan')
        return float(np.median(self.values))

    def __len__(self) -> int:
        return self.n

    def __repr__(self) -> str:
        flag = ", aggregated" if self.aggregated else ""
        return f"SampleGroup({self.name!r}, n={self.n}{flag})"


@dataclass(frozen=True, eq=False)
class FactorialCell:
    """
    One cell of a two-factor design.

    Attributes:
        factor_a: Level of factor A (e.g. series name)
        factor_b: Level of factor B (e.g. x value or condition label)
        group: Replicates observed at (factor_a, factor_b)
    """
    factor_a: str
    factor_b: float | str
    group: SampleGroup

    @classmethod
    def from_values(cls, factor_a: str, factor_b: float | str, values: ArrayLike) -> FactorialCell:
        return cls(
            factor_a=factor_a,
            factor_b=factor_b,
            group=SampleGroup(f"{factor_a} @ {factor_b}", values),
        )


@dataclass(frozen=True, eq=False)
class XYSeries:
    """
    Paired x/y observations for a single series (regression input).

    Lengths may differ; consumers use the first min(len(x), len(y)) pairs.
    """
    name: str
    x: NDArray[np.floating[Any]]
    y: NDArray[np.floating[Any]]

    def __post_init__(self):
        object.__setattr__(self, 'x', _frozen_array(self.x, f"{self.name}.x"))
        object.__setattr__(self, 'y', _frozen_array(self.y, f"{self.name}.y"))

    @property
    def n(self) -> int:
        return int(min(self.x.shape[0], self.y.shape[0]))


def any_aggregated(groups) -> tuple[str, ...]:
    """Names of groups that carry summary means instead of replicates."""
    return tuple(g.name for g in groups if g.aggregated)


def aggregated_warning(names: tuple[str, ...]) -> str:
    """Standard warning text for the degraded summary-mean mode."""
    listed = ", ".join(repr(n) for n in names)
    return (
        f"no raw replicates for {listed}: each mean treated as a single "
        f"observation; variance-based results are not reliable"
    )


def as_group(data: SampleGroup | ArrayLike, name: str) -> SampleGroup:
    """Pass SampleGroups through; wrap raw arrays under the given name."""
    if isinstance(data, SampleGroup):
        return data
    return SampleGroup(name, data)
