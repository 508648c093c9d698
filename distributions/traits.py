"""Capability protocols shared by the distributions.

A distribution advertises what it can compute by implementing these
structural interfaces; there is no common base class.  Code that only
needs, say, a CDF should ask for :class:`ContinuousCDF` rather than a
concrete distribution type.
"""

from __future__ import annotations

from typing import Protocol, runtime_checkable

from math_ops.rng import RandomSource


@runtime_checkable
class Min(Protocol):
    def min(self) -> float:
        """Smallest value of the support."""
        ...


@runtime_checkable
class Max(Protocol):
    def max(self) -> float:
        """Largest value of the support."""
        ...


@runtime_checkable
class Distribution(Protocol):
    """Summary statistics."""

    def mean(self) -> float: ...

    def variance(self) -> float: ...

    def std_dev(self) -> float: ...

    def entropy(self) -> float: ...

    def skewness(self) -> float: ...


@runtime_checkable
class Mode(Protocol):
    def mode(self) -> float: ...


@runtime_checkable
class Continuous(Protocol):
    """Densities of a continuous distribution."""

    def pdf(self, x: float) -> float: ...

    def ln_pdf(self, x: float) -> float: ...


@runtime_checkable
class ContinuousCDF(Min, Max, Protocol):
    def cdf(self, x: float) -> float: ...


@runtime_checkable
class Sampleable(Protocol):
    def sample(self, rng: RandomSource) -> float: ...
