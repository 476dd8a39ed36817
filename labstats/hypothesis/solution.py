"""
Hypothesis test solution types.

HTestSolution wraps Result[HTestParams] and provides an htest-style
print format plus the single-row table form used by pairwise t-tests.
PairwiseTTestSolution collects every pair of an all-pairs run,
including pairs that could not be tested.
"""

from __future__ import annotations

from dataclasses import dataclass
from typing import Any, TYPE_CHECKING

import numpy as np

from labstats.core.result import Result
from labstats.core.table import (
    ResultTable,
    TableBuilder,
    format_p_value,
    significance_stars,
    fmt,
)
from labstats.hypothesis._common import HTestParams, TAIL_LABELS

if TYPE_CHECKING:
    from labstats.core.groups import SampleGroup
    from labstats.hypothesis.design import HypothesisDesign


T_TEST_COLUMNS = (
    "Group 1", "N₁", "Mean₁", "SD₁",
    "Group 2", "N₂", "Mean₂", "SD₂",
    "Test Type", "t", "df", "p-value", "Sig.",
)


@dataclass
class HTestSolution:
    """
    User-facing hypothesis test results.

    Wraps Result[HTestParams]. All standard htest fields are available
    as properties.
    """
    _result: Result[HTestParams]
    _design: 'HypothesisDesign | None'

    # --- Standard htest fields ---

    @property
    def statistic(self) -> float:
        """Test statistic value."""
        return self._result.params.statistic

    @property
    def statistic_name(self) -> str:
        """Name of the test statistic (e.g. 't', 'F')."""
        return self._result.params.statistic_name

    @property
    def parameter(self) -> dict[str, float] | None:
        """Distribution parameters (e.g. {'df': 9})."""
        return self._result.params.parameter

    @property
    def df(self) -> float | None:
        """Degrees of freedom for t and correlation tests."""
        p = self._result.params.parameter
        return p.get('df') if p else None

    @property
    def p_value(self) -> float:
        """p-value for the requested alternative."""
        return self._result.params.p_value

    @property
    def estimate(self) -> dict[str, float] | None:
        """Point estimate(s)."""
        return self._result.params.estimate

    @property
    def alternative(self) -> str:
        """Alternative hypothesis direction."""
        return self._result.params.alternative

    @property
    def method(self) -> str:
        """Human-readable method name."""
        return self._result.params.method

    @property
    def data_name(self) -> str:
        """Description of the data."""
        return self._result.params.data_name

    # --- Test-specific extras ---

    @property
    def extras(self) -> dict[str, Any] | None:
        """Test-specific additional outputs."""
        return self._result.params.extras

    @property
    def variant(self) -> str | None:
        """For t-tests: 'Student', 'Welch' or 'Paired'."""
        e = self._result.params.extras
        return e.get('variant') if e else None

    @property
    def p_two_sided(self) -> float:
        """Two-sided p-value before any tail adjustment."""
        e = self._result.params.extras
        if e and 'p_two_sided' in e:
            return e['p_two_sided']
        return self._result.params.p_value

    @property
    def variance_test(self) -> dict[str, float] | None:
        """For auto-variance t-tests: the F-test that picked the variant."""
        e = self._result.params.extras
        return e.get('variance_test') if e else None

    @property
    def test_label(self) -> str:
        """
        Short label for result tables.

        E.g. "Welch, 2-tail" or "Student (F-test p=0.412, equal var), 1-tail(>)".
        """
        label = self.variant or self.method
        vt = self.variance_test
        if vt is not None:
            verdict = "equal var" if vt['p_value'] > 0.05 else "unequal var"
            label += f" (F-test p={vt['p_value']:.3f}, {verdict})"
        return f"{label}, {TAIL_LABELS[self.alternative]}"

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

    # --- Formatting ---

    def summary(self) -> str:
        """
        Format as an htest-style printout.

        Produces output like:
            Welch Two Sample t-test

        data:  control and treated
        t = -4.1231, df = 7.8127, p-value = 0.003467
        alternative hypothesis: true difference in means is not equal to 0
        sample estimates:
             mean of x      mean of y
              11.00000       25.33333
        """
        p = self._result.params
        lines = []

        lines.append(f"\t{p.method}")
        lines.append("")
        lines.append(f"data:  {p.data_name}")

        parts = [f"{p.statistic_name} = {_format_number(p.statistic)}"]
        if p.parameter is not None:
            for name, val in p.parameter.items():
                parts.append(f"{name} = {val:.5g}")
        parts.append(f"p-value = {format_p_value(p.p_value)}")
        lines.append(", ".join(parts))

        null_name = {
            "t": "difference in means",
            "F": "ratio of variances",
        }.get(p.statistic_name, "correlation")
        null_value = 1 if p.statistic_name == "F" else 0
        if p.alternative == "two.sided":
            relation = "is not equal to"
        elif p.alternative == "less":
            relation = "is less than"
        else:
            relation = "is greater than"
        lines.append(f"alternative hypothesis: true {null_name} {relation} {null_value}")

        if p.estimate is not None:
            lines.append("sample estimates:")
            names = list(p.estimate.keys())
            vals = list(p.estimate.values())
            lines.append(" ".join(f"{n:>14s}" for n in names))
            lines.append(" ".join(f"{v:14.7g}" for v in vals))

        for w in self.warnings:
            lines.append(f"Warning: {w}")

        lines.append("")
        return "\n".join(lines)

    def table_row(self) -> tuple[Any, ...]:
        """Values for one T_TEST_COLUMNS row (two-sample tests only)."""
        g1, g2 = self._design.g1, self._design.g2
        return (
            *_group_cells(g1, g2),
            self.test_label,
            fmt(self.statistic),
            fmt(self.df, 1),
            format_p_value(self.p_value),
            significance_stars(self.p_value),
        )

    def __repr__(self) -> str:
        p = self._result.params
        return (
            f"HTestSolution(method={p.method!r}, "
            f"{p.statistic_name}={p.statistic:.4g}, p_value={p.p_value:.4g})"
        )


@dataclass(frozen=True)
class PairwiseEntry:
    """
    One pair of an all-pairs t-test run.

    Exactly one of `solution` and `skipped_reason` is set.
    """
    group1: 'SampleGroup'
    group2: 'SampleGroup'
    solution: HTestSolution | None = None
    skipped_reason: str | None = None

    @property
    def comparison(self) -> str:
        return f"{self.group1.name} vs {self.group2.name}"

    @property
    def skipped(self) -> bool:
        return self.solution is None


@dataclass
class PairwiseTTestSolution:
    """Every unordered pair of groups, in input order."""
    entries: tuple[PairwiseEntry, ...]
    warnings: tuple[str, ...] = ()

    def __len__(self) -> int:
        return len(self.entries)

    def __iter__(self):
        return iter(self.entries)

    @property
    def tested(self) -> tuple[PairwiseEntry, ...]:
        return tuple(e for e in self.entries if not e.skipped)

    @property
    def skipped(self) -> tuple[PairwiseEntry, ...]:
        return tuple(e for e in self.entries if e.skipped)

    @property
    def p_values(self) -> np.ndarray:
        """p-values of the tested pairs, in entry order."""
        return np.array([e.solution.p_value for e in self.tested], dtype=np.float64)

    def to_table(self, title: str = "t-test") -> ResultTable:
        builder = TableBuilder(title, T_TEST_COLUMNS)
        for e in self.entries:
            if e.skipped:
                builder.add(
                    *_group_cells(e.group1, e.group2),
                    "N/A", "-", "-", e.skipped_reason, "-",
                )
            else:
                builder.add(*e.solution.table_row())
                builder.extend_warnings(e.solution.warnings)
        builder.extend_warnings(self.warnings)
        return builder.build()

    def __repr__(self) -> str:
        return (
            f"PairwiseTTestSolution(tested={len(self.tested)}, "
            f"skipped={len(self.skipped)})"
        )


def _group_cells(g1: 'SampleGroup', g2: 'SampleGroup') -> tuple[Any, ...]:
    return (
        g1.name, g1.n, fmt(g1.mean), fmt(g1.sd),
        g2.name, g2.n, fmt(g2.mean), fmt(g2.sd),
    )


def _format_number(x: float) -> str:
    """Format a number, handling infinity."""
    if np.isinf(x):
        return "-Inf" if x < 0 else "Inf"
    return f"{x:.5g}"
