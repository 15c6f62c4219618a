"""Natural cubic spline construction.

Builds the tridiagonal system for the node second derivatives, solves it and
converts the solution into per-segment polynomial coefficients.
"""

from __future__ import annotations

from collections.abc import Iterable, Sequence
import math

import numpy as np

from splinekit.core.spline.errors import DegenerateInputError, NumericOverflowError
from splinekit.core.spline.models import ControlPoint, Segment, SplineCurve
from splinekit.core.spline.solver import solve_tridiagonal

PointLike = ControlPoint | tuple[float, float]


def _coerce(point: PointLike) -> ControlPoint:
    if isinstance(point, ControlPoint):
        return point
    x, y = point
    return ControlPoint(x=x, y=y)


def sort_points(points: Iterable[PointLike]) -> list[ControlPoint]:
    """Return control points sorted by x (stable for equal x)."""
    return sorted((_coerce(p) for p in points), key=lambda p: p.x)


def _steps(xs: Sequence[float]) -> list[float]:
    """Return the x steps between adjacent nodes, rejecting zero and overflowed steps."""
    steps = []
    for left, right in zip(xs, xs[1:], strict=False):
        h = right - left
        if h == 0.0:
            raise DegenerateInputError(left)
        if not math.isfinite(h):
            raise NumericOverflowError(left)
        steps.append(h)
    return steps


def _segment(x1: float, x2: float, a: float, b: float, c: float, d: float) -> Segment:
    if not all(math.isfinite(v) for v in (b, c, d)):
        raise NumericOverflowError(x1)
    return Segment(x1=x1, x2=x2, a=a, b=b, c=c, d=d)


def natural_second_derivatives(xs: Sequence[float], ys: Sequence[float]) -> np.ndarray:
    """Compute node second derivatives of the natural cubic spline.

    Args:
        xs: Strictly increasing abscissas (at least 3).
        ys: Ordinates, same length as xs.

    Returns:
        Array ``m`` of second derivatives with ``m[0] == m[-1] == 0``.

    Raises:
        ValueError: If fewer than 3 nodes or lengths differ.
        DegenerateInputError: If two adjacent abscissas coincide.
        NumericOverflowError: If a step or a right-hand side overflows.
    """
    n = len(xs)
    if n != len(ys):
        raise ValueError(f"xs and ys must have equal length, got {n} and {len(ys)}")
    if n < 3:
        raise ValueError("natural_second_derivatives requires at least 3 nodes")
    h = _steps(xs)

    a = np.zeros(n, dtype=np.float64)
    b = np.zeros(n, dtype=np.float64)
    c = np.zeros(n, dtype=np.float64)
    d = np.zeros(n, dtype=np.float64)

    # Natural boundary rows: m[0] = m[n-1] = 0
    b[0] = 1.0
    b[n - 1] = 1.0

    for i in range(1, n - 1):
        a[i] = h[i - 1]
        b[i] = 2.0 * (h[i - 1] + h[i])
        c[i] = h[i]
        d[i] = 6.0 * ((ys[i + 1] - ys[i]) / h[i] - (ys[i] - ys[i - 1]) / h[i - 1])
        if not (math.isfinite(b[i]) and math.isfinite(d[i])):
            raise NumericOverflowError(xs[i - 1])

    return solve_tridiagonal(a, b, c, d)


def build(points: Iterable[PointLike]) -> SplineCurve:
    """Build the natural cubic spline through a set of control points.

    Points are sorted by x first. Fewer than two points yield an empty curve;
    exactly two yield a single linear segment.

    Args:
        points: Control points, as ControlPoint instances or (x, y) pairs.
            A PointSet can be passed directly.

    Returns:
        SplineCurve with one segment per consecutive pair of points.

    Raises:
        DegenerateInputError: If two points share an abscissa.
        NumericOverflowError: If the points are spread or packed so that a
            step or coefficient is not representable as a finite float.

    Example:
        >>> curve = build([(0, 0), (1, 1), (2, 0)])
        >>> len(curve)
        2
    """
    nodes = sort_points(points)
    n = len(nodes)

    if n < 2:
        return SplineCurve.empty()

    xs = [p.x for p in nodes]
    ys = [p.y for p in nodes]
    h = _steps(xs)

    if n == 2:
        slope = (ys[1] - ys[0]) / h[0]
        return SplineCurve(segments=(_segment(xs[0], xs[1], ys[0], slope, 0.0, 0.0),))

    m = natural_second_derivatives(xs, ys)

    segments: list[Segment] = []
    with np.errstate(over="ignore", invalid="ignore"):
        for i in range(n - 1):
            segments.append(
                _segment(
                    xs[i],
                    xs[i + 1],
                    ys[i],
                    float((ys[i + 1] - ys[i]) / h[i] - h[i] * (2.0 * m[i] + m[i + 1]) / 6.0),
                    float(m[i] / 2.0),
                    float((m[i + 1] - m[i]) / (6.0 * h[i])),
                )
            )

    return SplineCurve(segments=tuple(segments))
