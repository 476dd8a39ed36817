"""
Shared compute infrastructure for LabStats.

IMPORTANT: This is NOT where domain-specific statistics live. Those go in
their own subpackages. This module contains shared NUMERIC infrastructure.

Submodules:
    timing: Execution timing utilities
    tolerances: Epsilon floors and convergence settings
"""

from labstats.core.compute.timing import Timer, timed
from labstats.core.compute.tolerances import EPS, ALPHA

__all__ = [
    "Timer",
    "timed",
    "EPS",
    "ALPHA",
]
