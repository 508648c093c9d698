"""Floating-point near-equality.

Two flavours are provided:

* :func:`ulps_eq` compares the *bit patterns* of two doubles and accepts
  values that are a few representable steps apart.  Branch conditions of
  the distributions (``shape ≈ 1``, ``x ≈ shape``) use it so that values
  produced by slightly lossy upstream arithmetic still take the special
  branch.
* :func:`almost_eq` is a plain absolute-tolerance check, mostly useful in
  tests.
"""

from __future__ import annotations

import math
import struct

# Machine epsilon for IEEE-754 binary64.
F64_EPSILON = 2.220446049250313e-16
DEFAULT_MAX_ULPS = 4


def _ordered_bits(x: float) -> int:
    """Map a double to an integer that is monotone in the value."""
    (bits,) = struct.unpack("<q", struct.pack("<d", x))
    # Negative doubles have the sign bit set; flip them so ordering holds.
    return bits if bits >= 0 else -(bits & 0x7FFFFFFFFFFFFFFF)


def ulps_distance(a: float, b: float) -> int:
    """Number of representable doubles between *a* and *b*.

    Both arguments must be finite and not NaN.
    """
    return abs(_ordered_bits(a) - _ordered_bits(b))


def ulps_eq(
    a: float,
    b: float,
    epsilon: float = F64_EPSILON,
    max_ulps: int = DEFAULT_MAX_ULPS,
) -> bool:
    """Approximate equality in units-in-the-last-place.

    Parameters
    ----------
    a, b : float
        Values to compare.
    epsilon : float
        Absolute difference below which the values are always equal.
        Catches values straddling zero.
    max_ulps : int
        Largest allowed distance between the bit patterns.

    Returns
    -------
    bool
        ``True`` for exactly equal values (including equal infinities),
        ``False`` if either value is NaN or only one is infinite.
    """
    if a == b:
        return True
    if math.isnan(a) or math.isnan(b) or math.isinf(a) or math.isinf(b):
        return False
    if abs(a - b) <= epsilon:
        return True
    if math.copysign(1.0, a) != math.copysign(1.0, b):
        return False
    return ulps_distance(a, b) <= max_ulps


def almost_eq(a: float, b: float, acc: float) -> bool:
    """``|a - b| < acc``; two infinities compare equal only if identical."""
    if math.isinf(a) and math.isinf(b):
        return a == b
    return abs(a - b) < acc
