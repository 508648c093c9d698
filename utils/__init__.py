"""Utility functions (numerical diagnostics)."""

from .diagnostics import (
    ConsistencyReport,
    MomentReport,
    check_continuous_distribution,
    check_sample_moments,
)

__all__ = [
    "ConsistencyReport",
    "MomentReport",
    "check_continuous_distribution",
    "check_sample_moments",
]
