"""Hydra-configurable consistency check for the Gamma distribution.

Builds Gamma(shape, rate), checks the CDF against the integrated PDF on
a grid and compares sampler moments with the analytic ones.

Usage
-----
    python check_gamma.py                      # Gamma(3, 1) defaults
    python check_gamma.py shape=0.5 rate=2     # override via CLI
    python check_gamma.py n_samples=1000000    # tighter moment check
    python check_gamma.py --cfg job            # print resolved config
"""

from __future__ import annotations

import logging
import sys
from dataclasses import dataclass

import hydra
from hydra.core.config_store import ConfigStore
from omegaconf import DictConfig, OmegaConf

from distributions.gamma import BadParameters, GammaDistribution
from math_ops.rng import TorchRandomSource
from utils.diagnostics import check_continuous_distribution, check_sample_moments

log = logging.getLogger(__name__)


# ---------------------------------------------------------------------------
#  Hydra structured config
# ---------------------------------------------------------------------------

@dataclass
class CheckConfig:
    # Distribution
    shape: float = 3.0
    rate: float = 1.0

    # PDF/CDF grid
    x_min: float = 0.0
    x_max: float = 20.0
    n_grid: int = 20_001
    integral_tol: float = 1e-5

    # Sampler
    n_samples: int = 100_000
    seed: int = 42
    mean_tol_sigmas: float = 5.0        # |z| of the sample mean above this fails


# ---------------------------------------------------------------------------
#  Check
# ---------------------------------------------------------------------------

def run_check(cfg: CheckConfig) -> bool:
    """Run both checks, log a summary and return ``True`` if all passed."""
    try:
        dist = GammaDistribution(cfg.shape, cfg.rate)
    except BadParameters as exc:
        log.error(f"cannot build distribution: {exc}")
        return False

    log.info(
        f"Gamma(shape={dist.shape:g}, rate={dist.rate:g}) | "
        f"mean {dist.mean():.6g} | var {dist.variance():.6g} | "
        f"skew {dist.skewness():.6g} | mode {dist.mode():.6g} | "
        f"entropy {dist.entropy():.6g}"
    )

    # ---- PDF / CDF -----------------------------------------------------
    consistency = check_continuous_distribution(
        dist, cfg.x_min, cfg.x_max, n_grid=cfg.n_grid, tol=cfg.integral_tol,
    )
    log.info(
        f"pdf/cdf on [{cfg.x_min:g}, {cfg.x_max:g}] ({consistency.n_grid} pts) | "
        f"min pdf {consistency.min_pdf:.3g} | "
        f"cdf monotone {consistency.cdf_monotone} | "
        f"max |∫pdf − Δcdf| {consistency.max_integral_error:.3e} | "
        f"mass {consistency.total_mass:.6f}"
    )
    if not consistency.ok:
        log.warning("pdf/cdf consistency check FAILED")

    # ---- Sampler -------------------------------------------------------
    rng = TorchRandomSource(seed=cfg.seed)
    moments = check_sample_moments(dist, rng, n_samples=cfg.n_samples)
    z = moments.mean_z_score
    moments_ok = abs(z) <= cfg.mean_tol_sigmas
    log.info(
        f"sampler ({moments.n_samples} draws, seed {cfg.seed}) | "
        f"mean {moments.sample_mean:.6g} vs {moments.mean:.6g} (z={z:+.2f}) | "
        f"var {moments.sample_variance:.6g} vs {moments.variance:.6g}"
    )
    if not moments_ok:
        log.warning(f"sample mean deviates by {z:+.2f}σ (limit {cfg.mean_tol_sigmas:g}σ)")

    return consistency.ok and moments_ok


# ---------------------------------------------------------------------------
#  Hydra entry-point
# ---------------------------------------------------------------------------

cs = ConfigStore.instance()
cs.store(name="check", node=CheckConfig)


@hydra.main(config_path=None, config_name="check", version_base="1.3")
def main(cfg: DictConfig) -> None:
    check_cfg: CheckConfig = OmegaConf.to_object(cfg)  # type: ignore[assignment]
    if not run_check(check_cfg):
        sys.exit(1)


if __name__ == "__main__":
    main()
