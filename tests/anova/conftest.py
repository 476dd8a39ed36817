"""
Shared fixtures for ANOVA tests.

Provides reusable datasets for one-way, post-hoc and two-way scenarios.
"""

import pytest

from labstats.core import SampleGroup, FactorialCell


# =====================================================================
# One-way fixtures
# =====================================================================


@pytest.fixture
def unequal_spread_groups():
    """Three groups whose spreads differ by two orders of magnitude."""
    return [
        SampleGroup("A", [10, 10.1, 9.9, 10, 10.05, 9.95]),
        SampleGroup("B", [0, 20, 5, 15, 30, -10]),
        SampleGroup("C", [50, 50.2, 49.8, 50.1, 49.9, 50]),
    ]


@pytest.fixture
def overlapping_groups():
    """Three groups with equal spread and nearly equal means."""
    return [
        SampleGroup("A", [1, 2, 3]),
        SampleGroup("B", [2, 3, 4]),
        SampleGroup("C", [1.5, 2.5, 3.5]),
    ]


# =====================================================================
# Two-way fixtures
# =====================================================================


@pytest.fixture
def crossed_cells():
    """
    Balanced 2x2 design with a pure crossover interaction.

    Cell means: a1/b1=10, a1/b2=20, a2/b1=20, a2/b2=10, so both marginal
    effects are zero.
    """
    return [
        FactorialCell.from_values("a1", 1.0, [9, 10, 11]),
        FactorialCell.from_values("a1", 2.0, [19, 20, 21]),
        FactorialCell.from_values("a2", 1.0, [19, 20, 21]),
        FactorialCell.from_values("a2", 2.0, [9, 10, 11]),
    ]


@pytest.fixture
def unbalanced_cells():
    """2x3 design where one cell has an extra observation."""
    return [
        FactorialCell.from_values("WT", 0.0, [1.0, 1.2, 0.9]),
        FactorialCell.from_values("WT", 6.0, [2.1, 2.3, 1.9]),
        FactorialCell.from_values("WT", 24.0, [3.2, 3.0, 3.4, 3.1]),
        FactorialCell.from_values("KO", 0.0, [1.1, 0.9, 1.0]),
        FactorialCell.from_values("KO", 6.0, [1.4, 1.6, 1.5]),
        FactorialCell.from_values("KO", 24.0, [1.9, 2.2, 2.0]),
    ]
