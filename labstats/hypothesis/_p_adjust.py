"""
Family-wise and false-discovery-rate correction for a set of p-values.

Meant for the p-values of an all-pairs t-test run
(PairwiseTTestSolution.p_values), where k groups give k(k-1)/2 tests.
Plain function; no Design/Backend pipeline.
"""

from __future__ import annotations

import numpy as np
from numpy.typing import NDArray, ArrayLike

from labstats.core.exceptions import ValidationError
from labstats.core.validation import check_array, check_1d

VALID_METHODS = ("bonferroni", "BH", "fdr", "none")


def p_adjust(
    p: ArrayLike,
    method: str = "BH",
) -> NDArray[np.floating]:
    """
    Adjust p-values for multiple comparisons.

    Parameters
    ----------
    p : array-like
        1D vector of p-values in [0, 1]; NaN marks a test that was not run.
    method : str
        "BH" (default, Benjamini-Hochberg step-up), "fdr" (same as "BH"),
        "bonferroni", or "none".

    Returns
    -------
    ndarray
        Adjusted p-values in input order, capped at 1. NaN entries stay NaN
        and do not count towards the family size.
    """
    if method not in VALID_METHODS:
        raise ValidationError(
            f"method must be one of {VALID_METHODS}, got {method!r}"
        )

    values = check_array(p, "p")
    check_1d(values, "p")
    adjusted = values.copy()

    tested = ~np.isnan(values)
    m = int(tested.sum())
    if method == "none" or m == 0:
        return adjusted

    family = values[tested]
    if method == "bonferroni":
        corrected = family * m
    else:
        corrected = _step_up(family)

    adjusted[tested] = np.minimum(corrected, 1.0)
    return adjusted


def _step_up(family: NDArray) -> NDArray:
    """BH: p_(i) * m / i, then a running minimum from the largest p down."""
    m = family.shape[0]
    ascending = np.argsort(family, kind="stable")
    rank = np.arange(1, m + 1, dtype=np.float64)

    scaled = family[ascending] * m / rank
    monotone = np.minimum.accumulate(scaled[::-1])[::-1]

    out = np.empty(m, dtype=np.float64)
    out[ascending] = monotone
    return out
