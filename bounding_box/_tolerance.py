"""
Tolerant floating-point comparison shared by every ``approx_*`` predicate.

Two floats are *approximately equal* when either
    ├─ their absolute difference is within ``epsilon``, or
    └─ they have the same sign and lie at most ``max_ulps`` representable
       doubles apart.
The ordered variants (``approx_le`` / ``approx_ge``) turn an exact edge
comparison into a fuzzy one: ``a <= b`` *or* ``a ≈ b``.
"""

from __future__ import annotations
import math
from typing import Optional, Tuple

import numpy as np

from ._settings import get_settings


def resolve_tolerances(epsilon: Optional[float] = None, max_ulps: Optional[int] = None) -> Tuple[float, int]:
    """Fill in missing tolerances from the environment-driven settings."""
    settings = get_settings()
    if epsilon is None:
        epsilon = settings.EPSILON
    if max_ulps is None:
        max_ulps = settings.MAX_ULPS
    if epsilon < 0 or max_ulps < 0:
        raise ValueError(f"Tolerances must be non-negative, got epsilon={epsilon!r}, max_ulps={max_ulps!r}")
    return epsilon, max_ulps


def ulps_distance(a: float, b: float) -> int:
    """Number of representable doubles between *a* and *b* (same sign only)."""
    ia = int(np.float64(a).view(np.int64))
    ib = int(np.float64(b).view(np.int64))
    return abs(ia - ib)


def approx_eq(a: float, b: float, epsilon: Optional[float] = None, max_ulps: Optional[int] = None) -> bool:
    if a == b:
        return True
    if math.isnan(a) or math.isnan(b):
        return False
    epsilon, max_ulps = resolve_tolerances(epsilon, max_ulps)
    if abs(a - b) <= epsilon:
        return True
    if math.copysign(1.0, a) != math.copysign(1.0, b):
        return False
    return ulps_distance(a, b) <= max_ulps


def approx_le(a: float, b: float, epsilon: Optional[float] = None, max_ulps: Optional[int] = None) -> bool:
    return a <= b or approx_eq(a, b, epsilon, max_ulps)


def approx_ge(a: float, b: float, epsilon: Optional[float] = None, max_ulps: Optional[int] = None) -> bool:
    return a >= b or approx_eq(a, b, epsilon, max_ulps)
