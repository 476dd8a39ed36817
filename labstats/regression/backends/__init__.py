"""
Regression backends.

Available backends:
    CPULineBackend: Closed-form least squares for a single straight line
"""

from labstats.regression.backends.cpu import CPULineBackend

__all__ = [
    "CPULineBackend",
]
