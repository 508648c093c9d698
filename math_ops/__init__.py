"""Numerical building blocks for the distributions.

Scalar special functions (Gamma, digamma, regularized incomplete gamma)
with IEEE overflow semantics, ULP-based float comparison, and the
entropy sources consumed by the samplers.
"""

from .special import gamma, ln_gamma, digamma, gamma_lr
from .prec import ulps_eq, almost_eq
from .rng import RandomSource, TorchRandomSource

__all__ = [
    "gamma",
    "ln_gamma",
    "digamma",
    "gamma_lr",
    "ulps_eq",
    "almost_eq",
    "RandomSource",
    "TorchRandomSource",
]
