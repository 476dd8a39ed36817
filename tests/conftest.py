"""
pytest configuration and shared fixtures.
"""

import pytest
import numpy as np

from labstats.core import SampleGroup, FactorialCell, XYSeries


@pytest.fixture
def rng():
    """Seeded random number generator for reproducible tests."""
    return np.random.default_rng(42)


@pytest.fixture
def separated_groups():
    """Three groups with well-separated means and similar spread."""
    return [
        SampleGroup("A", [10, 12, 11]),
        SampleGroup("B", [25, 27, 24]),
        SampleGroup("C", [18, 20, 17]),
    ]


@pytest.fixture
def shifted_groups():
    """Three groups with identical spread and shifted means."""
    return [
        SampleGroup("A", [1, 2, 3]),
        SampleGroup("B", [4, 5, 6]),
        SampleGroup("C", [7, 8, 9]),
    ]


@pytest.fixture
def exact_line():
    """Points on y = 2x + 3."""
    return XYSeries("line", [1, 2, 3, 4, 5], [5, 7, 9, 11, 13])


@pytest.fixture
def additive_cells():
    """
    Balanced 2x2 design with additive cell means (no interaction).

    Cell means: a1/b1=10, a1/b2=20, a2/b1=15, a2/b2=25.
    """
    return [
        FactorialCell.from_values("a1", "b1", [9, 10, 11]),
        FactorialCell.from_values("a1", "b2", [19, 20, 21]),
        FactorialCell.from_values("a2", "b1", [14, 15, 16]),
        FactorialCell.from_values("a2", "b2", [24, 25, 26]),
    ]
