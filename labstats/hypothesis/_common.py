"""
Common types for hypothesis testing.

Defines HTestParams, the alternative-hypothesis names and the one-tailed
p-value adjustment shared by every t-based test.
"""

from __future__ import annotations

from dataclasses import dataclass
from typing import Any


VALID_ALTERNATIVES = ("two.sided", "less", "greater")

# Short suffixes used in table "Test Type" labels
TAIL_LABELS = {
    "two.sided": "2-tail",
    "greater": "1-tail(>)",
    "less": "1-tail(<)",
}


@dataclass(frozen=True)
class HTestParams:
    """
    Parameter payload for hypothesis tests.

    Every hypothesis test returns this same structure; test-specific
    extras go in the `extras` dict.

    Attributes
    ----------
    statistic : float
        Test statistic value.
    statistic_name : str
        Name of the test statistic ("t", "F", "r", "rho").
    parameter : dict or None
        Distribution parameters, e.g. {"df": 9} or {"num df": 4, "denom df": 8}.
    p_value : float
        p-value of the test for the requested alternative, in [0, 1].
    estimate : dict or None
        Point estimate(s), e.g. {"mean of x": 5.1, "mean of y": 3.2}.
    alternative : str
        "two.sided", "less", or "greater".
    method : str
        Human-readable method name, e.g. "Welch Two Sample t-test".
    data_name : str
        Description of the data, e.g. "control and treated".
    extras : dict or None
        Test-specific additional outputs (two-sided p-value, variance
        F-test used for auto selection, ...).
    """
    statistic: float
    statistic_name: str
    parameter: dict[str, float] | None
    p_value: float
    estimate: dict[str, float] | None
    alternative: str
    method: str
    data_name: str
    extras: dict[str, Any] | None = None


def adjust_tail(p_two_sided: float, statistic: float, alternative: str) -> float:
    """
    Convert a two-sided p-value into the p-value for `alternative`.

    When the statistic points in the claimed direction the one-tailed
    p-value is half the two-sided one, otherwise it is 1 - p/2.

    Parameters
    ----------
    p_two_sided : float
        Two-sided p-value.
    statistic : float
        Signed test statistic.
    alternative : str
        "two.sided", "greater" or "less".

    Returns
    -------
    float
        Adjusted p-value.
    """
    if alternative == "two.sided":
        return p_two_sided
    if alternative == "greater":
        return p_two_sided / 2.0 if statistic > 0 else 1.0 - p_two_sided / 2.0
    if alternative == "less":
        return p_two_sided / 2.0 if statistic < 0 else 1.0 - p_two_sided / 2.0
    raise ValueError(
        f"alternative must be one of {VALID_ALTERNATIVES}, got {alternative!r}"
    )
