"""
HypothesisDesign: tagged union for hypothesis test inputs.

Uses factory classmethods per test type. The `test_type` field identifies
which fields are populated. Immutable after construction.
"""

from __future__ import annotations

from dataclasses import dataclass
from typing import Any

import numpy as np
from numpy.typing import NDArray, ArrayLike

from labstats.core.exceptions import ValidationError
from labstats.core.groups import SampleGroup, as_group
from labstats.core.validation import (
    check_array,
    check_1d,
    check_finite,
    check_equal_length,
    check_min_samples,
)
from labstats.hypothesis._common import VALID_ALTERNATIVES

VALID_COR_METHODS = ("pearson", "spearman")


def _validate_alternative(alternative: str) -> str:
    """Validate and return alternative hypothesis string."""
    if alternative not in VALID_ALTERNATIVES:
        raise ValidationError(
            f"alternative must be one of {VALID_ALTERNATIVES}, got {alternative!r}"
        )
    return alternative


def _to_float64_1d(x: ArrayLike, name: str) -> NDArray[np.floating[Any]]:
    arr = check_array(x, name)
    check_1d(arr, name)
    check_finite(arr, name)
    return arr


@dataclass(frozen=True)
class HypothesisDesign:
    """
    Design for hypothesis tests.

    Uses a tagged-union approach: the `test_type` field identifies which
    fields are populated. Factory classmethods validate inputs.

    Do not construct directly; use factory classmethods.
    """
    test_type: str

    # Two-sample inputs
    _g1: SampleGroup | None = None
    _g2: SampleGroup | None = None

    # Correlation inputs
    _x: NDArray[np.floating[Any]] | None = None
    _y: NDArray[np.floating[Any]] | None = None
    _cor_method: str = "pearson"

    # Test configuration
    _alternative: str = "two.sided"
    _var_equal: bool = False

    # Variance F-test that chose Student vs Welch, as (F, p)
    _variance_test: tuple[float, float] | None = None

    # Metadata
    _data_name: str = ""

    # --- Properties ---

    @property
    def g1(self) -> SampleGroup | None:
        return self._g1

    @property
    def g2(self) -> SampleGroup | None:
        return self._g2

    @property
    def x(self) -> NDArray[np.floating[Any]] | None:
        return self._x

    @property
    def y(self) -> NDArray[np.floating[Any]] | None:
        return self._y

    @property
    def cor_method(self) -> str:
        return self._cor_method

    @property
    def alternative(self) -> str:
        return self._alternative

    @property
    def var_equal(self) -> bool:
        return self._var_equal

    @property
    def variance_test(self) -> tuple[float, float] | None:
        return self._variance_test

    @property
    def data_name(self) -> str:
        return self._data_name

    @property
    def aggregated(self) -> tuple[str, ...]:
        """Names of input groups built from summary means."""
        return tuple(g.name for g in (self._g1, self._g2) if g is not None and g.aggregated)

    # --- Factory classmethods ---

    @classmethod
    def for_t_test(
        cls,
        g1: SampleGroup | ArrayLike,
        g2: SampleGroup | ArrayLike,
        *,
        paired: bool = False,
        var_equal: bool = False,
        alternative: str = "two.sided",
        variance_test: tuple[float, float] | None = None,
    ) -> HypothesisDesign:
        """Build design for t_test()."""
        alternative = _validate_alternative(alternative)
        g1 = as_group(g1, "x")
        g2 = as_group(g2, "y")

        if paired:
            check_equal_length(g1.values, g2.values, names=(g1.name, g2.name))
        check_min_samples(g1.n, 2, g1.name)
        check_min_samples(g2.n, 2, g2.name)

        return cls(
            test_type="t_paired" if paired else "t_two_sample",
            _g1=g1,
            _g2=g2,
            _var_equal=var_equal,
            _alternative=alternative,
            _variance_test=variance_test,
            _data_name=f"{g1.name} and {g2.name}",
        )

    @classmethod
    def for_var_test(
        cls,
        g1: SampleGroup | ArrayLike,
        g2: SampleGroup | ArrayLike,
    ) -> HypothesisDesign:
        """Build design for var_test()."""
        g1 = as_group(g1, "x")
        g2 = as_group(g2, "y")
        check_min_samples(g1.n, 2, g1.name)
        check_min_samples(g2.n, 2, g2.name)
        return cls(
            test_type="var_test",
            _g1=g1,
            _g2=g2,
            _data_name=f"{g1.name} and {g2.name}",
        )

    @classmethod
    def for_cor_test(
        cls,
        x: ArrayLike,
        y: ArrayLike,
        *,
        method: str = "pearson",
    ) -> HypothesisDesign:
        """Build design for cor_test()."""
        if method not in VALID_COR_METHODS:
            raise ValidationError(
                f"method must be one of {VALID_COR_METHODS}, got {method!r}"
            )
        x_arr = _to_float64_1d(x, "x")
        y_arr = _to_float64_1d(y, "y")
        check_equal_length(x_arr, y_arr, names=("x", "y"))
        check_min_samples(len(x_arr), 3, "x")
        return cls(
            test_type="cor_test",
            _x=x_arr,
            _y=y_arr,
            _cor_method=method,
            _data_name="x and y",
        )
