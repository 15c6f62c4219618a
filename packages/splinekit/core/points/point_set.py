"""Owned, x-ordered collection of control points with stable handles."""

from __future__ import annotations

from collections.abc import Iterator
import logging

from splinekit.core.points.models import (
    Bounds,
    DuplicateAbscissaError,
    PointHandle,
    PointOutOfBoundsError,
    PointPlacement,
    UnknownPointError,
)
from splinekit.core.spline.models import ControlPoint
from splinekit.core.utils.math import distance

logger = logging.getLogger(__name__)


class PointSet:
    """Control points kept sorted by x, each addressed by a PointHandle.

    Every insert or move re-sorts the set and reports the affected point's
    new ordinal index. Indices shift on every mutation, so callers should
    hold on to handles. Equal abscissas (only possible with
    ``reject_duplicate_x=False``) keep their relative order.

    Failed mutations leave the set unchanged.

    Args:
        bounds: Optional rectangle points must stay inside.
        reject_duplicate_x: Reject mutations that would make two points share x.

    Example:
        >>> points = PointSet()
        >>> first = points.insert(2.0, 1.0)
        >>> points.insert(1.0, 0.0).index
        0
        >>> points.index_of(first.handle)
        1
    """

    def __init__(self, bounds: Bounds | None = None, reject_duplicate_x: bool = True) -> None:
        self.bounds = bounds
        self.reject_duplicate_x = reject_duplicate_x
        self._entries: list[tuple[PointHandle, ControlPoint]] = []
        self._next_id = 0

    # ------------------------------------------------------------------
    # Mutations
    # ------------------------------------------------------------------

    def insert(self, x: float, y: float) -> PointPlacement:
        """Add a point and return its handle and sorted position.

        Raises:
            PointOutOfBoundsError: If the point lies outside ``bounds``.
            DuplicateAbscissaError: If another point already has this x.
            pydantic.ValidationError: If a coordinate is not finite.
        """
        point = self._validate(x, y, exclude=None)

        handle = PointHandle(id=self._next_id)
        self._next_id += 1

        self._entries.append((handle, point))
        self._resort()

        placement = PointPlacement(handle=handle, index=self.index_of(handle))
        logger.debug("Inserted %s at (%s, %s), index %d", handle, x, y, placement.index)
        return placement

    def move(self, handle: PointHandle, x: float, y: float) -> PointPlacement:
        """Move an existing point and return its new sorted position.

        Raises:
            UnknownPointError: If the handle is not in the set.
            PointOutOfBoundsError: If the target lies outside ``bounds``.
            DuplicateAbscissaError: If another point already has this x.
        """
        position = self._position(handle)
        point = self._validate(x, y, exclude=handle)

        self._entries[position] = (handle, point)
        self._resort()

        placement = PointPlacement(handle=handle, index=self.index_of(handle))
        logger.debug("Moved %s to (%s, %s), index %d -> %d", handle, x, y, position, placement.index)
        return placement

    def remove(self, handle: PointHandle) -> int:
        """Remove a point and return the index it occupied.

        Raises:
            UnknownPointError: If the handle is not in the set.
        """
        position = self._position(handle)
        del self._entries[position]
        logger.debug("Removed %s from index %d", handle, position)
        return position

    def clear(self) -> None:
        """Remove every point. Handles are never reissued."""
        self._entries.clear()

    # ------------------------------------------------------------------
    # Queries
    # ------------------------------------------------------------------

    def get(self, handle: PointHandle) -> ControlPoint:
        return self._entries[self._position(handle)][1]

    def index_of(self, handle: PointHandle) -> int:
        return self._position(handle)

    def handle_at(self, index: int) -> PointHandle:
        """Handle of the point at ``index`` in x order.

        Raises:
            IndexError: If index is out of range.
        """
        return self._entries[index][0]

    def handles(self) -> tuple[PointHandle, ...]:
        return tuple(handle for handle, _ in self._entries)

    def points(self) -> tuple[ControlPoint, ...]:
        return tuple(point for _, point in self._entries)

    def find_near(self, x: float, y: float, radius: float) -> PointHandle | None:
        """Return the first point (in x order) within ``radius`` of (x, y)."""
        for handle, point in self._entries:
            if distance(point.x, point.y, x, y) <= radius:
                return handle
        return None

    def __len__(self) -> int:
        return len(self._entries)

    def __iter__(self) -> Iterator[ControlPoint]:
        return iter(self.points())

    def __contains__(self, handle: object) -> bool:
        return any(h == handle for h, _ in self._entries)

    def __repr__(self) -> str:
        body = ", ".join(f"{h}=({p.x}, {p.y})" for h, p in self._entries)
        return f"PointSet([{body}])"

    # ------------------------------------------------------------------
    # Internals
    # ------------------------------------------------------------------

    def _position(self, handle: PointHandle) -> int:
        for i, (h, _) in enumerate(self._entries):
            if h == handle:
                return i
        raise UnknownPointError(handle)

    def _validate(self, x: float, y: float, exclude: PointHandle | None) -> ControlPoint:
        point = ControlPoint(x=x, y=y)

        if self.bounds is not None and not self.bounds.contains(point.x, point.y):
            raise PointOutOfBoundsError(point.x, point.y, self.bounds)

        if self.reject_duplicate_x:
            for h, other in self._entries:
                if h != exclude and other.x == point.x:
                    raise DuplicateAbscissaError(
                        point.x, f"Point {h} already has abscissa x={point.x!r}"
                    )

        return point

    def _resort(self) -> None:
        self._entries.sort(key=lambda entry: entry[1].x)
