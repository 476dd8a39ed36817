"""
Solver functions for descriptive statistics.

Provides describe() for a single group and describe_groups() for the
tabular form used by the analysis runner.
"""

from __future__ import annotations

from typing import Sequence

import numpy as np

from labstats.core.result import Result
from labstats.core.groups import SampleGroup, any_aggregated, aggregated_warning
from labstats.core.table import ResultTable, TableBuilder
from labstats.core.compute.timing import Timer
from labstats.core.validation import check_min_samples
from labstats.descriptive._tcrit import t_critical
from labstats.descriptive.solution import DescriptiveParams, DescriptiveSolution


DESCRIPTIVE_COLUMNS = (
    "Group", "N", "Mean", "SD", "SEM", "Min", "Max", "Median", "95% CI",
)


def describe(group: SampleGroup) -> DescriptiveSolution:
    """
    Summarize one group.

    Args:
        group: Sample to summarize; must contain at least one value

    Returns:
        DescriptiveSolution with n, mean, sd, sem, min, max, median, ci95

    Raises:
        InsufficientDataError: If the group is empty
    """
    check_min_samples(group.n, 1, group.name)

    timer = Timer()
    timer.start()

    n = group.n
    mean = group.mean
    sd = group.sd
    sem = sd / np.sqrt(n)
    half_width = t_critical(n - 1) * sem

    params = DescriptiveParams(
        name=group.name,
        n=n,
        mean=mean,
        sd=sd,
        sem=float(sem),
        min=float(np.min(group.values)),
        max=float(np.max(group.values)),
        median=group.median,
        ci95=(float(mean - half_width), float(mean + half_width)),
    )

    timer.stop()

    warnings_list = []
    if group.aggregated:
        warnings_list.append(aggregated_warning((group.name,)))

    result = Result(
        params=params,
        info={'t_critical': t_critical(n - 1)},
        timing=timer.result(),
        backend_name='cpu_descriptive',
        warnings=tuple(warnings_list),
    )
    return DescriptiveSolution(_result=result, _group=group)


def describe_groups(
    groups: Sequence[SampleGroup],
    *,
    title: str = "Descriptive Statistics",
) -> ResultTable:
    """
    Describe every non-empty group as one table row.

    Empty groups are left out of the table and listed in its warnings.
    """
    builder = TableBuilder(title, DESCRIPTIVE_COLUMNS)
    for g in groups:
        if g.n == 0:
            builder.warn(f"{g.name!r} skipped: no values")
            continue
        builder.add(*describe(g).row())

    aggregated = any_aggregated(groups)
    if aggregated:
        builder.warn(aggregated_warning(aggregated))
    return builder.build()
