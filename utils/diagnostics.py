"""Numerical consistency checks for continuous distributions.

These are the checks a new distribution has to pass before its numbers
can be trusted:

* the density is non-negative and the CDF non-decreasing on a grid,
* the CDF agrees with the running trapezoid integral of the density,
* sample moments of the sampler agree with the analytic moments.

Results are returned as frozen dataclasses; nothing here raises on a
failed check, callers decide what to do with ``report.ok``.
"""

from __future__ import annotations

import math
from dataclasses import dataclass
from typing import Protocol

import torch

from distributions.traits import Continuous, ContinuousCDF, Distribution, Sampleable
from math_ops.rng import RandomSource


# ---------------------------------------------------------------------------
#  PDF / CDF consistency
# ---------------------------------------------------------------------------

@dataclass(frozen=True)
class ConsistencyReport:
    n_grid: int
    min_pdf: float
    cdf_monotone: bool
    max_integral_error: float   # max |∫pdf − (cdf(x) − cdf(x_min))| over the grid
    total_mass: float           # ∫pdf over [x_min, x_max]
    tol: float

    @property
    def ok(self) -> bool:
        return (
            self.min_pdf >= 0.0
            and self.cdf_monotone
            and self.max_integral_error < self.tol
        )


class _ContinuousWithCDF(Continuous, ContinuousCDF, Protocol):
    pass


def check_continuous_distribution(
    dist: _ContinuousWithCDF,
    x_min: float,
    x_max: float,
    n_grid: int = 20_001,
    tol: float = 1e-5,
) -> ConsistencyReport:
    """Compare the CDF with the integrated PDF on ``[x_min, x_max]``.

    Parameters
    ----------
    dist : Continuous & ContinuousCDF
        Distribution under test.  Its PDF must be finite on the grid.
    x_min, x_max : float
        Integration range.
    n_grid : int
        Number of grid points (trapezoid rule, so the error shrinks as
        ``1 / n_grid**2``).
    tol : float
        Largest acceptable absolute deviation.
    """
    grid = torch.linspace(x_min, x_max, n_grid, dtype=torch.float64)
    xs = grid.tolist()
    pdf = torch.tensor([dist.pdf(x) for x in xs], dtype=torch.float64)
    cdf = torch.tensor([dist.cdf(x) for x in xs], dtype=torch.float64)

    # Running trapezoid integral, starting at 0 on the first grid point.
    h = grid[1:] - grid[:-1]
    steps = 0.5 * h * (pdf[1:] + pdf[:-1])
    running = torch.cat([torch.zeros(1, dtype=torch.float64), torch.cumsum(steps, 0)])

    err = (running - (cdf - cdf[0])).abs()

    return ConsistencyReport(
        n_grid=n_grid,
        min_pdf=pdf.min().item(),
        cdf_monotone=bool((cdf[1:] >= cdf[:-1]).all()),
        max_integral_error=err.max().item(),
        total_mass=running[-1].item(),
        tol=tol,
    )


# ---------------------------------------------------------------------------
#  Sampler moments
# ---------------------------------------------------------------------------

@dataclass(frozen=True)
class MomentReport:
    n_samples: int
    sample_mean: float
    sample_variance: float
    mean: float
    variance: float

    @property
    def mean_z_score(self) -> float:
        """Deviation of the sample mean in units of its standard error."""
        stderr = math.sqrt(self.variance / self.n_samples)
        if stderr == 0.0:
            return 0.0 if self.sample_mean == self.mean else math.inf
        return (self.sample_mean - self.mean) / stderr


class _SampleableWithMoments(Sampleable, Distribution, Protocol):
    pass


def check_sample_moments(
    dist: _SampleableWithMoments,
    rng: RandomSource,
    n_samples: int = 100_000,
) -> MomentReport:
    """Draw *n_samples* variates and compare their moments with the analytic ones."""
    draws = torch.tensor(
        [dist.sample(rng) for _ in range(n_samples)], dtype=torch.float64
    )
    return MomentReport(
        n_samples=n_samples,
        sample_mean=draws.mean().item(),
        sample_variance=draws.var().item(),
        mean=dist.mean(),
        variance=dist.variance(),
    )
