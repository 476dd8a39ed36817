"""
Regression Design.

LineDesign wraps one XYSeries and extracts the usable x/y pairs. It knows
it is fitting a straight line; XYSeries doesn't.
"""

from __future__ import annotations

from dataclasses import dataclass
from typing import Any

import numpy as np
from numpy.typing import ArrayLike, NDArray

from labstats.core.compute.tolerances import EPS
from labstats.core.groups import XYSeries


@dataclass(frozen=True)
class LineDesign:
    """
    Simple linear regression specification (y = slope * x + intercept).

    Only the first min(len(x), len(y)) pairs are used. Immutable after
    construction.

    Construction:
        LineDesign.from_series(series)
        LineDesign.from_arrays(x, y, name='standard curve')
    """
    _x: NDArray[np.floating[Any]]
    _y: NDArray[np.floating[Any]]
    _name: str

    @classmethod
    def from_series(cls, series: XYSeries) -> LineDesign:
        n = series.n
        return cls(_x=series.x[:n], _y=series.y[:n], _name=series.name)

    @classmethod
    def from_arrays(cls, x: ArrayLike, y: ArrayLike, *, name: str = "series") -> LineDesign:
        return cls.from_series(XYSeries(name, x, y))

    @property
    def x(self) -> NDArray[np.floating[Any]]:
        return self._x

    @property
    def y(self) -> NDArray[np.floating[Any]]:
        return self._y

    @property
    def name(self) -> str:
        return self._name

    @property
    def n(self) -> int:
        return int(self._x.shape[0])

    @property
    def sxx(self) -> float:
        """Sum of squared deviations of x from its mean."""
        if self.n == 0:
            return 0.0
        return float(np.sum((self._x - np.mean(self._x)) ** 2))

    def skip_reason(self) -> str | None:
        """Why no line can be fitted, or None when the fit is defined."""
        if self.n < 2:
            return f"{self._name!r} skipped: fewer than 2 points"
        if self.sxx <= EPS:
            return f"{self._name!r} skipped: x values have no spread"
        return None
