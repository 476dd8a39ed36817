"""
Simple linear regression module.

Public API:
    fit_line(series)     - Least-squares line with slope t-test
    fit_lines(series)    - One line per series, as a ResultTable
"""

from labstats.regression.solvers import fit_line, fit_lines, REGRESSION_COLUMNS
from labstats.regression.design import LineDesign
from labstats.regression.solution import LineParams, LineSolution

__all__ = [
    "fit_line",
    "fit_lines",
    "REGRESSION_COLUMNS",
    "LineDesign",
    "LineParams",
    "LineSolution",
]
