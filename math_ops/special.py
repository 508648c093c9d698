"""Scalar special functions on IEEE-754 doubles.

Thin wrappers around :mod:`torch.special` evaluated on 0-d ``float64``
tensors.  Every function takes and returns a plain Python ``float``.

Unlike :mod:`math`, nothing here raises: overflow gives ``±inf``,
``ln(0)`` gives ``-inf`` and ``ln`` of a negative number gives ``nan``.
The distribution code relies on that, degenerate parameters are reported
through the returned value rather than through exceptions.

Functions
---------
gamma, ln_gamma, digamma
    :math:`\\Gamma(x)`, :math:`\\ln\\Gamma(x)` and :math:`\\psi(x)`.
gamma_lr
    Regularized lower incomplete gamma :math:`P(a, x)`.
exp, ln, powf, sqrt
    Elementary functions with the same non-raising behaviour.
"""

from __future__ import annotations

import torch
from torch import Tensor


def _t(x: float) -> Tensor:
    return torch.tensor(x, dtype=torch.float64)


# ---------------------------------------------------------------------------
#  Gamma family
# ---------------------------------------------------------------------------

def ln_gamma(x: float) -> float:
    """:math:`\\ln\\Gamma(x)` for ``x > 0``."""
    return torch.special.gammaln(_t(x)).item()


def gamma(x: float) -> float:
    """:math:`\\Gamma(x)` for ``x > 0``.

    Computed as ``exp(ln_gamma(x))``; overflows to ``inf`` once
    :math:`\\Gamma(x)` leaves the double range (x > ~171.6).
    """
    return torch.exp(torch.special.gammaln(_t(x))).item()


def digamma(x: float) -> float:
    """:math:`\\psi(x) = d/dx \\ln\\Gamma(x)` for ``x > 0``."""
    return torch.special.digamma(_t(x)).item()


def gamma_lr(a: float, x: float) -> float:
    r"""Regularized lower incomplete gamma :math:`P(a, x)`.

    .. math::
        P(a, x) = \frac{1}{\Gamma(a)} \int_0^x t^{a-1} e^{-t}\, dt

    Valid for ``a > 0`` and ``x >= 0``; the result lies in ``[0, 1]``.
    """
    return torch.special.gammainc(_t(a), _t(x)).item()


# ---------------------------------------------------------------------------
#  Elementary functions
# ---------------------------------------------------------------------------

def exp(x: float) -> float:
    return torch.exp(_t(x)).item()


def ln(x: float) -> float:
    return torch.log(_t(x)).item()


def powf(base: float, exponent: float) -> float:
    """``base ** exponent`` with IEEE overflow (``1e10 ** 100 == inf``)."""
    return torch.pow(_t(base), _t(exponent)).item()


def sqrt(x: float) -> float:
    return torch.sqrt(_t(x)).item()
