"""Univariate probability distributions.

Each distribution is an immutable value validated at construction and
implements the capability protocols in :mod:`distributions.traits`.
"""

from .gamma import BadParameters, GammaDistribution, sample_unchecked
from .traits import (
    Continuous,
    ContinuousCDF,
    Distribution,
    Max,
    Min,
    Mode,
    Sampleable,
)

__all__ = [
    "BadParameters",
    "GammaDistribution",
    "sample_unchecked",
    "Continuous",
    "ContinuousCDF",
    "Distribution",
    "Max",
    "Min",
    "Mode",
    "Sampleable",
]
