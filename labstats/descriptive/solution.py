"""
Descriptive statistics solution types.

Contains the parameter payload and user-facing solution wrapper.
"""

from __future__ import annotations

from dataclasses import dataclass
from typing import Any, TYPE_CHECKING

from labstats.core.result import Result
from labstats.core.table import fmt

if TYPE_CHECKING:
    from labstats.core.groups import SampleGroup


@dataclass(frozen=True)
class DescriptiveParams:
    """
    Parameter payload for one group's descriptive statistics.

    sd uses the n - 1 denominator and is 0 when n < 2.
    """
    name: str
    n: int
    mean: float
    sd: float
    sem: float
    min: float
    max: float
    median: float
    ci95: tuple[float, float]


@dataclass
class DescriptiveSolution:
    """
    User-facing descriptive statistics results.

    Wraps Result[DescriptiveParams] and provides convenient accessors.
    """
    _result: Result[DescriptiveParams]
    _group: 'SampleGroup'

    @property
    def name(self) -> str:
        return self._result.params.name

    @property
    def n(self) -> int:
        return self._result.params.n

    @property
    def mean(self) -> float:
        return self._result.params.mean

    @property
    def sd(self) -> float:
        """Sample standard deviation (n - 1 denominator)."""
        return self._result.params.sd

    @property
    def sem(self) -> float:
        """Standard error of the mean, sd / sqrt(n)."""
        return self._result.params.sem

    @property
    def min(self) -> float:
        return self._result.params.min

    @property
    def max(self) -> float:
        return self._result.params.max

    @property
    def median(self) -> float:
        return self._result.params.median

    @property
    def ci95(self) -> tuple[float, float]:
        """(lower, upper) 95% confidence interval for the mean."""
        return self._result.params.ci95

    # --- Metadata ---

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

    def row(self) -> tuple[Any, ...]:
        """Values for one describe_groups() table row."""
        p = self._result.params
        lo, hi = p.ci95
        return (
            p.name, p.n, fmt(p.mean), fmt(p.sd), fmt(p.sem),
            fmt(p.min), fmt(p.max), fmt(p.median),
            f"[{lo:.3f}, {hi:.3f}]",
        )

    def summary(self) -> str:
        p = self._result.params
        lo, hi = p.ci95
        lines = [
            f"Descriptive statistics: {p.name}",
            f"  N      = {p.n}",
            f"  Mean   = {p.mean:.4f}",
            f"  SD     = {p.sd:.4f}",
            f"  SEM    = {p.sem:.4f}",
            f"  Min    = {p.min:.4f}",
            f"  Max    = {p.max:.4f}",
            f"  Median = {p.median:.4f}",
            f"  95% CI = [{lo:.3f}, {hi:.3f}]",
        ]
        for w in self.warnings:
            lines.append(f"Warning: {w}")
        return "\n".join(lines)

    def __repr__(self) -> str:
        p = self._result.params
        return (
            f"DescriptiveSolution(name={p.name!r}, n={p.n}, "
            f"mean={p.mean:.4g}, sd={p.sd:.4g})"
        )
