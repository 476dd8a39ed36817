"""
Solver dispatch for regression.

This module provides fit_line() for a single series and fit_lines() for
the tabular form used by the analysis runner.
"""

from __future__ import annotations

from typing import Sequence

from numpy.typing import ArrayLike

from labstats.core.groups import XYSeries
from labstats.core.table import ResultTable, TableBuilder
from labstats.regression.design import LineDesign
from labstats.regression.solution import LineSolution
from labstats.regression.backends.cpu import CPULineBackend


REGRESSION_COLUMNS = (
    "Series", "N", "R²", "Pearson r", "Slope", "Intercept",
    "SE(slope)", "t-value", "p-value", "Sig.",
)


def fit_line(
    x: XYSeries | ArrayLike,
    y: ArrayLike | None = None,
    *,
    name: str = "series",
) -> LineSolution | None:
    """
    Fit a straight line by ordinary least squares.

    Args:
        x: An XYSeries, or the x values (then y is required)
        y: The y values when x is an array
        name: Series label when fitting raw arrays

    Returns:
        LineSolution, or None when the line is undefined (fewer than 2
        usable points, or x values without spread). A skipped series is
        not an error.

    Example:
        >>> sol = fit_line([1, 2, 3, 4, 5], [5, 7, 9, 11, 13])
        >>> sol.slope, sol.intercept
        (2.0, 3.0)
    """
    if isinstance(x, XYSeries):
        design = LineDesign.from_series(x)
    else:
        if y is None:
            raise TypeError("fit_line: y is required when x is not an XYSeries")
        design = LineDesign.from_arrays(x, y, name=name)

    if design.skip_reason() is not None:
        return None

    result = CPULineBackend().solve(design)
    return LineSolution(_result=result, _design=design)


def fit_lines(
    series: Sequence[XYSeries],
    *,
    title: str = "Linear Regression",
) -> ResultTable:
    """
    Fit one line per series and tabulate the results.

    Series whose line is undefined are left out of the rows and named in
    the table warnings.

    Args:
        series: XYSeries to fit, in display order
        title: Table title

    Returns:
        ResultTable with REGRESSION_COLUMNS
    """
    builder = TableBuilder(title, REGRESSION_COLUMNS)

    for s in series:
        design = LineDesign.from_series(s)
        reason = design.skip_reason()
        if reason is not None:
            builder.warn(reason)
            continue
        sol = LineSolution(_result=CPULineBackend().solve(design), _design=design)
        builder.add(*sol.row())
        builder.extend_warnings(f"{s.name!r}: {w}" for w in sol.warnings)

    return builder.build()
