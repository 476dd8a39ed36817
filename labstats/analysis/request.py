"""
Analysis request objects.

An AnalysisRequest names one analysis (AnalysisKind) and carries its
inputs and options. It is independent of any UI: whatever collects the
user's choices builds a request and hands it to run_analysis().
"""

from __future__ import annotations

from dataclasses import dataclass, field
from enum import Enum
from typing import Iterable

from labstats.core.exceptions import ValidationError
from labstats.core.groups import SampleGroup, FactorialCell, XYSeries


class AnalysisKind(Enum):
    """Analyses the engine can run."""
    DESCRIPTIVE = "descriptive"
    T_TEST = "t_test"
    ANOVA_ONEWAY = "anova_oneway"
    ANOVA_TWOWAY = "anova_twoway"
    REGRESSION = "regression"


_TAILS = {
    "two": "two.sided",
    "greater": "greater",
    "less": "less",
}

_SS_TYPES = {"I": 1, "II": 2, "III": 3}


@dataclass(frozen=True)
class AnalysisOptions:
    """
    Options recognized by the analysis entry points.

    Attributes:
        auto_variance_detection: t-test chooses Student or Welch from an
            F-test of the variances (otherwise Welch)
        paired: Paired t-test on index-aligned groups
        tail: "two", "greater" or "less"
        include_interaction: Fit the A x B term in two-way ANOVA
        ss_type: "I", "II" or "III" (two-way ANOVA)
        post_hoc: Compute post-hoc comparisons after one-way ANOVA
        post_hoc_groups: Restrict post-hoc pairs to those touching these
            names; empty means all pairs
    """
    auto_variance_detection: bool = False
    paired: bool = False
    tail: str = "two"
    include_interaction: bool = True
    ss_type: str = "III"
    post_hoc: bool = False
    post_hoc_groups: frozenset[str] = field(default_factory=frozenset)

    def __post_init__(self):
        if self.tail not in _TAILS:
            raise ValidationError(
                f"tail: must be one of {sorted(_TAILS)}, got {self.tail!r}"
            )
        if self.ss_type not in _SS_TYPES:
            raise ValidationError(
                f"ss_type: must be one of {list(_SS_TYPES)}, got {self.ss_type!r}"
            )
        if isinstance(self.post_hoc_groups, str):
            raise ValidationError("post_hoc_groups: expected a collection of names, got a string")
        object.__setattr__(
            self, 'post_hoc_groups', frozenset(str(g) for g in self.post_hoc_groups)
        )

    @property
    def alternative(self) -> str:
        """Tail in hypothesis-test terms ('two.sided', 'greater', 'less')."""
        return _TAILS[self.tail]

    @property
    def ss_type_number(self) -> int:
        return _SS_TYPES[self.ss_type]


@dataclass(frozen=True)
class AnalysisRequest:
    """
    One analysis to run.

    Which input is required depends on kind: `groups` for DESCRIPTIVE,
    T_TEST and ANOVA_ONEWAY, `cells` for ANOVA_TWOWAY, `series` for
    REGRESSION.

    Examples:
        >>> req = AnalysisRequest(
        ...     AnalysisKind.ANOVA_ONEWAY,
        ...     groups=[ctrl, low, high],
        ...     options=AnalysisOptions(post_hoc=True),
        ... )
        >>> table = run_analysis(req)
    """
    kind: AnalysisKind
    groups: tuple[SampleGroup, ...] = ()
    cells: tuple[FactorialCell, ...] = ()
    series: tuple[XYSeries, ...] = ()
    options: AnalysisOptions = field(default_factory=AnalysisOptions)

    def __post_init__(self):
        if not isinstance(self.kind, AnalysisKind):
            try:
                object.__setattr__(self, 'kind', AnalysisKind(self.kind))
            except ValueError as e:
                raise ValidationError(f"kind: unknown analysis {self.kind!r}") from e
        for name in ('groups', 'cells', 'series'):
            object.__setattr__(self, name, tuple(getattr(self, name)))

        required = self.input_name
        if not getattr(self, required):
            raise ValidationError(
                f"{self.kind.value}: requires '{required}' to be non-empty"
            )

    @property
    def input_name(self) -> str:
        """Name of the input field this kind consumes."""
        if self.kind is AnalysisKind.ANOVA_TWOWAY:
            return 'cells'
        if self.kind is AnalysisKind.REGRESSION:
            return 'series'
        return 'groups'

    @classmethod
    def for_groups(
        cls,
        kind: AnalysisKind,
        groups: Iterable[SampleGroup],
        **options,
    ) -> AnalysisRequest:
        """Build a group-based request with options given as keywords."""
        return cls(kind, groups=tuple(groups), options=AnalysisOptions(**options))
