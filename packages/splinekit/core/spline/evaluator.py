"""Spline evaluation.

Locates the segment owning an abscissa by binary search over segment starts
and evaluates its cubic.
"""

from __future__ import annotations

from bisect import bisect_right
from collections.abc import Sequence

import numpy as np

from splinekit.core.spline.errors import OutOfDomainError
from splinekit.core.spline.models import SplineCurve


def find_segment(curve: SplineCurve, x: float) -> int:
    """Return the index of the segment whose interval contains x.

    A node shared by two segments belongs to the right-hand one, except
    ``x_max`` which belongs to the last segment.

    Raises:
        OutOfDomainError: If the curve is empty or x lies outside its domain.
    """
    domain = curve.domain
    if domain is None or not (domain[0] <= x <= domain[1]):
        raise OutOfDomainError(x, domain)

    starts = curve.starts
    return min(bisect_right(starts, x) - 1, len(starts) - 1)


def evaluate(curve: SplineCurve, x: float) -> float:
    """Evaluate the curve at x.

    Args:
        curve: Curve produced by ``build``.
        x: Abscissa in ``[curve.x_min, curve.x_max]``.

    Returns:
        Interpolated ordinate.

    Raises:
        OutOfDomainError: If the curve is empty or x lies outside its domain.

    Example:
        >>> from splinekit.core.spline.builder import build
        >>> evaluate(build([(0, 0), (1, 1), (2, 0)]), 1.0)
        1.0
    """
    return curve.segments[find_segment(curve, x)].value(x)


def evaluate_many(curve: SplineCurve, xs: Sequence[float] | np.ndarray) -> np.ndarray:
    """Vectorised evaluation at many abscissas.

    Uses the same segment ownership rule as ``find_segment``.

    Raises:
        OutOfDomainError: If any abscissa lies outside the domain (the first
            offending value is reported).
    """
    x = np.asarray(xs, dtype=np.float64)
    domain = curve.domain
    if domain is None:
        if x.size == 0:
            return np.empty(0, dtype=np.float64)
        raise OutOfDomainError(float(x.flat[0]), None)

    outside = (x < domain[0]) | (x > domain[1]) | np.isnan(x)
    if outside.any():
        raise OutOfDomainError(float(x[outside].flat[0]), domain)

    starts = np.array(curve.starts, dtype=np.float64)
    coeffs = np.array([[seg.a, seg.b, seg.c, seg.d] for seg in curve.segments], dtype=np.float64)

    idx = np.searchsorted(starts, x, side="right") - 1
    idx = np.clip(idx, 0, len(starts) - 1)

    t = x - starts[idx]
    a, b, c, d = coeffs[idx].T
    result: np.ndarray = a + b * t + c * t * t + d * t * t * t
    return result
