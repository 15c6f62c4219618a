"""Control point ownership: ordered point set with stable handles."""

from splinekit.core.points.models import (
    Bounds,
    DuplicateAbscissaError,
    PointHandle,
    PointOutOfBoundsError,
    PointPlacement,
    PointSetError,
    UnknownPointError,
)
from splinekit.core.points.point_set import PointSet

__all__ = [
    "Bounds",
    "DuplicateAbscissaError",
    "PointHandle",
    "PointOutOfBoundsError",
    "PointPlacement",
    "PointSet",
    "PointSetError",
    "UnknownPointError",
]
