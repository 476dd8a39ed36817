"""
CPU backend for hypothesis tests.

Dispatches to test-specific submodules based on design.test_type.
"""

from __future__ import annotations

from labstats.core.result import Result
from labstats.core.compute.timing import Timer
from labstats.hypothesis._common import HTestParams
from labstats.hypothesis.design import HypothesisDesign


class CPUHypothesisBackend:
    """CPU backend for hypothesis tests."""

    @property
    def name(self) -> str:
        return 'cpu_hypothesis'

    def solve(self, design: HypothesisDesign) -> Result[HTestParams]:
        """Dispatch to test-specific implementation based on design.test_type."""
        timer = Timer()
        timer.start()

        test_type = design.test_type

        with timer.section(test_type):
            if test_type == "t_two_sample":
                from labstats.hypothesis.backends._t_test import t_two_sample
                params, warnings_list = t_two_sample(design)
            elif test_type == "t_paired":
                from labstats.hypothesis.backends._t_test import t_paired
                params, warnings_list = t_paired(design)
            elif test_type == "var_test":
                from labstats.hypothesis.backends._var_test import var_test
                params, warnings_list = var_test(design)
            elif test_type == "cor_test":
                from labstats.hypothesis.backends._cor_test import cor_test
                params, warnings_list = cor_test(design)
            else:
                raise ValueError(f"Unknown test_type: {test_type!r}")

        timer.stop()

        return Result(
            params=params,
            info={'test_type': test_type},
            timing=timer.result(),
            backend_name=self.name,
            warnings=tuple(warnings_list),
        )
