"""
Numerical floors shared by every engine.

Near-zero variances, standard errors and sums of squares are compared
against these thresholds rather than exact zero, so that degenerate inputs
(constant groups, x values that never change) are handled locally instead
of propagating inf/NaN into the result table.
"""

from dataclasses import dataclass


@dataclass(frozen=True)
class ToleranceTier:
    """Tolerance specification for numerical comparison."""
    rtol: float
    atol: float
    name: str
    description: str


# Below this a variance, standard error, MS or Sxx counts as zero.
EPS = 1e-10

# Continued-fraction settings for the incomplete beta function.
BETACF_MAX_ITER = 100
BETACF_TOL = 1e-10
BETACF_FLOOR = 1e-10

# Weight multiplier substituted for n/var when a group variance is ~0
# in Welch's ANOVA.
ZERO_VARIANCE_WEIGHT = 1e10

# Variance-homogeneity and post-hoc decision threshold.
ALPHA = 0.05

# Agreement expected between the in-package special functions and a
# reference implementation.
SPECIAL_FUNCTIONS = ToleranceTier(
    rtol=1e-7,
    atol=1e-9,
    name='special_functions',
    description='Lanczos log-gamma / Lentz incomplete beta vs reference',
)
