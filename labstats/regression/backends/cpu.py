"""
CPU backend for simple linear regression.

Closed-form least squares from the centred sums Sxx, Syy and Sxy.
"""

import numpy as np

from labstats.core.result import Result
from labstats.core.compute.timing import Timer
from labstats.core.compute.tolerances import EPS
from labstats.special import t_two_tailed_p
from labstats.regression.design import LineDesign
from labstats.regression.solution import LineParams


class CPULineBackend:
    """
    CPU backend for LineDesign -> LineParams.

    The design must already have n >= 2 and Sxx > 0 (see
    LineDesign.skip_reason).
    """

    @property
    def name(self) -> str:
        return 'cpu_ols'

    def solve(self, design: LineDesign) -> Result[LineParams]:
        """
        Fit y = slope * x + intercept.

        Algorithm:
            1. Centre x and y; form Sxx, Syy, Sxy
            2. slope = Sxy / Sxx, intercept = mean(y) - slope * mean(x)
            3. MSE = RSS / (n - 2), SE(slope) = sqrt(MSE / Sxx)
            4. t = slope / SE, two-tailed p on n - 2 df (t = +-inf for an
               exact fit with a nonzero slope; 0 when the slope is also 0)

        Args:
            design: Line design with a defined fit

        Returns:
            Result containing LineParams
        """
        timer = Timer()
        timer.start()

        x, y, n = design.x, design.y, design.n
        warnings_list = []

        with timer.section('fit'):
            x_mean = float(np.mean(x))
            y_mean = float(np.mean(y))
            dx = x - x_mean
            dy = y - y_mean
            sxx = float(np.dot(dx, dx))
            syy = float(np.dot(dy, dy))
            sxy = float(np.dot(dx, dy))

            slope = sxy / sxx
            intercept = y_mean - slope * x_mean

            if syy > EPS:
                r_squared = sxy * sxy / (sxx * syy)
                pearson_r = sxy / float(np.sqrt(sxx * syy))
            else:
                r_squared = 0.0
                pearson_r = 0.0
                warnings_list.append("y values are constant: R-squared reported as 0")

        with timer.section('slope_test'):
            residuals = y - (slope * x + intercept)
            rss = float(np.dot(residuals, residuals))
            df = n - 2
            mse = rss / df if df > 0 else 0.0
            se_slope = float(np.sqrt(mse / sxx))
            if se_slope > EPS:
                t_value = slope / se_slope
            elif abs(slope) > EPS and df > 0:
                # residuals vanish: every point lies on the line
                t_value = float(np.copysign(np.inf, slope))
                warnings_list.append("perfect fit: residual SS is 0, slope test p reported as 0")
            else:
                t_value = 0.0
            p_value = t_two_tailed_p(abs(t_value), df)

        if df < 1:
            warnings_list.append("only 2 points: slope test has no residual degrees of freedom")

        timer.stop()

        params = LineParams(
            slope=slope,
            intercept=intercept,
            r_squared=r_squared,
            pearson_r=pearson_r,
            se_slope=se_slope,
            t_value=t_value,
            p_value=p_value,
            df=df,
            rss=rss,
            n=n,
        )

        return Result(
            params=params,
            info={'method': 'ols', 'sxx': sxx, 'syy': syy, 'sxy': sxy},
            timing=timer.result(),
            backend_name=self.name,
            warnings=tuple(warnings_list),
        )
