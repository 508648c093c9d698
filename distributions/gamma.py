"""Gamma distribution with shape :math:`\\alpha` and rate :math:`\\beta`.

.. math::
    f(x) = \\frac{\\beta^\\alpha}{\\Gamma(\\alpha)} x^{\\alpha-1} e^{-\\beta x},
    \\qquad x \\ge 0

Parameters are validated once, at construction; afterwards every method
is a pure function of ``(shape, rate)`` and the query point.  None of the
methods raise.  Degenerate inputs (infinite rate, infinite ``x``) come
back as ``0``, ``1``, ``±inf`` or ``nan`` following IEEE arithmetic.

Usage
-----
>>> g = GammaDistribution(3.0, 1.0)
>>> g.mean()
3.0
>>> round(g.pdf(2.0), 12)
0.270670566473

References
----------
* Marsaglia & Tsang, "A Simple Method for Generating Gamma Variables",
  ACM TOMS 26(3), 2000, pp. 363-372.
"""

from __future__ import annotations

import logging
import math
from dataclasses import dataclass

from math_ops import special
from math_ops.prec import ulps_eq
from math_ops.rng import RandomSource

log = logging.getLogger(__name__)

# Above this shape the direct density formula loses precision
# (rate^shape and x^(shape-1) overflow before the division by Gamma(shape)).
LN_PDF_SHAPE_THRESHOLD = 160.0

# Rejections in a single sampler call before it is worth a debug line.
_REJECTION_LOG_THRESHOLD = 64


class BadParameters(ValueError):
    """Raised when a distribution is built from invalid parameters."""

    def __init__(self, shape: float, rate: float):
        self.shape = shape
        self.rate = rate
        super().__init__(
            f"invalid Gamma parameters: shape={shape!r}, rate={rate!r} "
            "(both must be positive and not NaN)"
        )


# ---------------------------------------------------------------------------
#  Distribution
# ---------------------------------------------------------------------------

@dataclass(frozen=True)
class GammaDistribution:
    """Gamma(shape, rate) as an immutable value.

    Parameters
    ----------
    shape : float
        Shape :math:`\\alpha > 0`.  May be ``inf``.
    rate : float
        Rate :math:`\\beta > 0` (inverse scale).  May be ``inf``, in which
        case the distribution collapses to a point mass.

    Raises
    ------
    BadParameters
        If either parameter is NaN, zero or negative.
    """

    shape: float
    rate: float

    def __post_init__(self) -> None:
        if math.isnan(self.shape) or math.isnan(self.rate):
            log.debug("rejected NaN parameter: shape=%r rate=%r", self.shape, self.rate)
            raise BadParameters(self.shape, self.rate)
        if self.shape <= 0.0 or self.rate <= 0.0:
            log.debug("rejected non-positive parameter: shape=%r rate=%r", self.shape, self.rate)
            raise BadParameters(self.shape, self.rate)

    # ---- Support -----------------------------------------------------------

    def min(self) -> float:
        return 0.0

    def max(self) -> float:
        return math.inf

    # ---- Moments -----------------------------------------------------------

    def mean(self) -> float:
        """α / β"""
        return self.shape / self.rate

    def variance(self) -> float:
        """α / β²"""
        return self.shape / (self.rate * self.rate)

    def std_dev(self) -> float:
        return special.sqrt(self.variance())

    def entropy(self) -> float:
        """α − ln β + ln Γ(α) + (1 − α) ψ(α)"""
        return (
            self.shape
            - special.ln(self.rate)
            + special.ln_gamma(self.shape)
            + (1.0 - self.shape) * special.digamma(self.shape)
        )

    def skewness(self) -> float:
        """2 / √α, independent of the rate."""
        return 2.0 / special.sqrt(self.shape)

    def mode(self) -> float:
        """(α − 1) / β.  Negative for α < 1, returned as is."""
        return (self.shape - 1.0) / self.rate

    # ---- Densities -----------------------------------------------------------

    def pdf(self, x: float) -> float:
        """Probability density at *x*.

        ``nan`` when ``shape`` or ``rate`` is infinite and no special case
        applies (e.g. ``Gamma(10, inf).pdf(1.0)``): the closed form is an
        indeterminate ``inf * 0`` there.
        """
        if x < 0.0:
            return 0.0
        if ulps_eq(self.shape, 1.0):
            # Exponential(rate).
            return self.rate * special.exp(-self.rate * x)
        if self.shape > LN_PDF_SHAPE_THRESHOLD:
            return special.exp(self.ln_pdf(x))
        if math.isinf(x):
            return 0.0
        return (
            special.powf(self.rate, self.shape)
            * special.powf(x, self.shape - 1.0)
            * special.exp(-self.rate * x)
            / special.gamma(self.shape)
        )

    def ln_pdf(self, x: float) -> float:
        """Natural log of :meth:`pdf`, computed directly in log space."""
        if x < 0.0:
            return -math.inf
        if ulps_eq(self.shape, 1.0):
            return special.ln(self.rate) - self.rate * x
        if math.isinf(x):
            return -math.inf
        return (
            self.shape * special.ln(self.rate)
            + (self.shape - 1.0) * special.ln(x)
            - self.rate * x
            - special.ln_gamma(self.shape)
        )

    def cdf(self, x: float) -> float:
        """P(X <= x) = P(α, β·x), the regularized lower incomplete gamma."""
        if x <= 0.0:
            return 0.0
        if ulps_eq(x, self.shape) and math.isinf(self.rate):
            return 1.0
        if math.isinf(self.rate):
            return 0.0
        if math.isinf(x):
            return 1.0
        return special.gamma_lr(self.shape, x * self.rate)

    # ---- Sampling -----------------------------------------------------------

    def sample(self, rng: RandomSource) -> float:
        """One variate, see :func:`sample_unchecked`."""
        return sample_unchecked(rng, self.shape, self.rate)


# ---------------------------------------------------------------------------
#  Marsaglia-Tsang sampler
# ---------------------------------------------------------------------------

def sample_unchecked(rng: RandomSource, shape: float, rate: float) -> float:
    """Draw one Gamma(shape, rate) variate with the Marsaglia-Tsang method.

    The parameters are *not* validated; pass ``shape > 0`` and
    ``rate > 0``.  For ``shape < 1`` the variate is drawn with shape
    ``shape + 1`` and scaled by ``U^(1/shape)``.

    The rejection loop has no iteration cap.  It terminates with
    probability one (acceptance rate is above 0.95 for every shape), but
    callers that need a hard latency bound must impose it themselves.

    Parameters
    ----------
    rng : RandomSource
        Entropy source, used exclusively by this call.
    shape, rate : float
        Distribution parameters.

    Returns
    -------
    float
        A non-negative Gamma variate.
    """
    a = shape
    afix = 1.0
    if shape < 1.0:
        a = shape + 1.0
        afix = rng.uniform() ** (1.0 / shape)

    d = a - 1.0 / 3.0
    c = 1.0 / math.sqrt(9.0 * d)

    rejections = 0
    while True:
        # Draw until the cubic transform is defined.
        while True:
            x = rng.standard_normal()
            v = 1.0 + c * x
            if v > 0.0:
                break

        v = v * v * v
        x = x * x
        u = rng.uniform()
        # Squeeze first, the log test only runs in the rare tail.
        if u < 1.0 - 0.0331 * x * x or special.ln(u) < 0.5 * x + d * (1.0 - v + special.ln(v)):
            if rejections >= _REJECTION_LOG_THRESHOLD:
                log.debug(
                    "Gamma sampler accepted after %d rejections (shape=%r, rate=%r)",
                    rejections, shape, rate,
                )
            return afix * d * v / rate
        rejections += 1
