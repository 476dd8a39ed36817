"""
Analysis requests and the run_analysis() entry point.

Public API:
    AnalysisKind        - Which analysis to run
    AnalysisOptions     - Validated option set
    AnalysisRequest     - Kind + inputs + options
    run_analysis(req)   - Run a request, return a ResultTable
"""

from labstats.analysis.request import AnalysisKind, AnalysisOptions, AnalysisRequest
from labstats.analysis.runner import run_analysis

__all__ = [
    "AnalysisKind",
    "AnalysisOptions",
    "AnalysisRequest",
    "run_analysis",
]
