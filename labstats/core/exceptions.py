"""
Exception hierarchy for LabStats.

All exceptions inherit from LabStatsError to allow catching any
library-specific error. Domain-specific exceptions should inherit from
the appropriate base class here.

Design principles:
    - Exceptions carry diagnostic information as attributes
    - Error messages are actionable with actual vs expected values
    - Never catch and re-raise with less information
"""


class LabStatsError(Exception):
    """Base exception for all LabStats errors."""
    pass


class ValidationError(LabStatsError):
    """
    Input validation failed.

    Raised when user-provided inputs fail validation checks.
    """
    pass


class DimensionError(ValidationError):
    """
    Array dimensions are incorrect or inconsistent.

    Raised when array shapes don't match expected dimensions or
    when multiple arrays have inconsistent shapes.
    """
    pass


class InsufficientDataError(ValidationError):
    """
    Not enough groups, levels or observations for the requested analysis.

    Raised for fewer than 2 groups in a comparison, fewer than 3 groups in
    a one-way ANOVA, fewer than 2 levels per factor in a two-way design, or
    a group with n < 2 where the test needs a variance.

    Attributes:
        required: Minimum count the analysis needs
        actual: Count that was supplied
        what: What was being counted ('groups', 'observations', ...)
    """

    def __init__(
        self,
        message: str,
        required: int | None = None,
        actual: int | None = None,
        what: str | None = None,
    ):
        super().__init__(message)
        self.required = required
        self.actual = actual
        self.what = what


class MismatchedLengthError(DimensionError):
    """
    Paired samples have different lengths.

    Attributes:
        lengths: Lengths of the offending samples, in argument order
    """

    def __init__(self, message: str, lengths: tuple[int, ...] | None = None):
        super().__init__(message)
        self.lengths = lengths


class IncompleteDesignError(ValidationError):
    """
    Factorial design is missing one or more factor-level combinations.

    Attributes:
        missing_cells: (factor_a, factor_b) pairs with no observations
    """

    def __init__(
        self,
        message: str,
        missing_cells: tuple[tuple[str, object], ...] = (),
    ):
        super().__init__(message)
        self.missing_cells = missing_cells


class NumericalError(LabStatsError):
    """
    Numerical computation failed.

    Raised when a special function evaluation does not yield a finite value.
    """
    pass
