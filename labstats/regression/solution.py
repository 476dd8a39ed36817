"""
Regression solution types.

Contains the parameter payload and user-facing solution wrapper.
"""

from dataclasses import dataclass
from typing import Any, TYPE_CHECKING

from labstats.core.result import Result
from labstats.core.table import fmt, format_p_value, significance_stars

if TYPE_CHECKING:
    from labstats.regression.design import LineDesign


@dataclass(frozen=True)
class LineParams:
    """
    Parameter payload for a simple linear regression.

    This is the immutable data computed by backends.
    """
    slope: float
    intercept: float
    r_squared: float
    pearson_r: float
    se_slope: float
    t_value: float
    p_value: float
    df: int
    rss: float
    n: int


@dataclass
class LineSolution:
    """
    User-facing results of fitting a straight line.

    The slope test is t = slope / SE(slope) on n - 2 degrees of freedom.
    """
    _result: Result[LineParams]
    _design: 'LineDesign'

    @property
    def name(self) -> str:
        return self._design.name

    @property
    def slope(self) -> float:
        return self._result.params.slope

    @property
    def intercept(self) -> float:
        return self._result.params.intercept

    @property
    def r_squared(self) -> float:
        return self._result.params.r_squared

    @property
    def pearson_r(self) -> float:
        return self._result.params.pearson_r

    @property
    def se_slope(self) -> float:
        return self._result.params.se_slope

    @property
    def t_value(self) -> float:
        return self._result.params.t_value

    @property
    def p_value(self) -> float:
        return self._result.params.p_value

    @property
    def df(self) -> int:
        return self._result.params.df

    @property
    def rss(self) -> float:
        return self._result.params.rss

    @property
    def n(self) -> int:
        return self._result.params.n

    def predict(self, x: float) -> float:
        return self.slope * x + self.intercept

    @property
    def info(self) -> dict[str, Any]:
        return self._result.info

    @property
    def timing(self) -> dict[str, float] | None:
        return self._result.timing

    @property
    def backend_name(self) -> str:
        return self._result.backend_name

    @property
    def warnings(self) -> tuple[str, ...]:
        return self._result.warnings

    def row(self) -> tuple[Any, ...]:
        """Cells in fit_lines() column order."""
        return (
            self.name,
            self.n,
            f"{self.r_squared:.4f}",
            f"{self.pearson_r:.4f}",
            f"{self.slope:.4f}",
            f"{self.intercept:.4f}",
            f"{self.se_slope:.4f}",
            fmt(self.t_value, 3),
            format_p_value(self.p_value),
            significance_stars(self.p_value),
        )

    def summary(self) -> str:
        """Generate a short regression report."""
        lines = [
            f"Linear Regression: {self.name}",
            "=" * 60,
            f"Observations: {self.n}",
            f"y = {self.slope:.6f} * x + {self.intercept:.6f}",
            f"R-squared: {self.r_squared:.6f}",
            f"Pearson r: {self.pearson_r:.6f}",
            "",
            f"{'':<10} {'Estimate':>14} {'Std.Error':>12} {'t value':>10} {'Pr(>|t|)':>10}",
            "-" * 60,
            f"{'slope':<10} {self.slope:14.6f} {self.se_slope:12.6f} "
            f"{fmt(self.t_value, 3):>10} {format_p_value(self.p_value):>10}",
            "-" * 60,
            f"Residual SS: {self.rss:.6f} on {self.df} DF",
        ]
        return "\n".join(lines)

    def __repr__(self) -> str:
        return (
            f"LineSolution(name={self.name!r}, n={self.n}, "
            f"slope={self.slope:.4f}, r_squared={self.r_squared:.4f})"
        )
