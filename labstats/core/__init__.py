"""
Core infrastructure for LabStats.

This module provides shared abstractions and utilities used by all
domain-specific submodules (descriptive, hypothesis, anova, regression).

Key components:
    groups: SampleGroup, FactorialCell, XYSeries input model
    result: Generic Result[P] envelope
    table: ResultTable output contract and formatting helpers
    exceptions: Exception hierarchy
    validation: Input validators
    compute: Timing and numerical tolerances
"""

from labstats.core.result import Result
from labstats.core.groups import SampleGroup, FactorialCell, XYSeries
from labstats.core.table import ResultTable, format_p_value, significance_stars
from labstats.core.exceptions import (
    LabStatsError,
    ValidationError,
    DimensionError,
    InsufficientDataError,
    MismatchedLengthError,
    IncompleteDesignError,
    NumericalError,
)

__all__ = [
    # Data model
    "SampleGroup",
    "FactorialCell",
    "XYSeries",
    # Result
    "Result",
    "ResultTable",
    "format_p_value",
    "significance_stars",
    # Exceptions
    "LabStatsError",
    "ValidationError",
    "DimensionError",
    "InsufficientDataError",
    "MismatchedLengthError",
    "IncompleteDesignError",
    "NumericalError",
]
