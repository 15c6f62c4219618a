"""Interactive editing session over a point set.

SplineEditor is the state a front end drives: it owns the point set, the
current selection and the curve built from the points. Every mutation
rebuilds the curve from scratch and keeps the selection pointing at the same
point, whatever index it moved to.
"""

from __future__ import annotations

import logging

from splinekit.core.config.models import EditorConfig
from splinekit.core.points import PointHandle, PointPlacement, PointSet
from splinekit.core.spline.builder import build
from splinekit.core.spline.errors import SplineError
from splinekit.core.spline.evaluator import evaluate
from splinekit.core.spline.models import ControlPoint, SplineCurve
from splinekit.core.spline.sampling import Sample, SamplingConfig, sample_curve

logger = logging.getLogger(__name__)

PointRow = tuple[int, float, float]


class SplineEditor:
    """Point set plus selection plus the curve built from it.

    Mutations that the point set rejects, or that leave the points unbuildable
    (shared abscissas when duplicates are allowed, or coordinates whose spline
    overflows float64), raise and leave the editor untouched.

    Args:
        config: Editing behaviour (hit radius, bounds, duplicate policy).
        sampling: Polyline density used by ``polyline``.

    Example:
        >>> editor = SplineEditor()
        >>> for x, y in [(0, 0), (1, 1), (2, 0)]:
        ...     _ = editor.insert(x, y)
        >>> editor.evaluate(1.0)
        1.0
    """

    def __init__(
        self,
        config: EditorConfig | None = None,
        sampling: SamplingConfig | None = None,
    ) -> None:
        self.config = config or EditorConfig()
        self.sampling = sampling or SamplingConfig()
        self.points = PointSet(
            bounds=self.config.bounds,
            reject_duplicate_x=self.config.reject_duplicate_x,
        )
        self._selected: PointHandle | None = None
        self._curve = SplineCurve.empty()

    # ------------------------------------------------------------------
    # Mutations
    # ------------------------------------------------------------------

    def insert(self, x: float, y: float) -> PointPlacement:
        """Add a point, select it and rebuild."""
        placement = self.points.insert(x, y)
        try:
            self._rebuild()
        except SplineError:
            self.points.remove(placement.handle)
            raise
        self._selected = placement.handle
        return placement

    def move(self, handle: PointHandle, x: float, y: float) -> PointPlacement:
        """Move a point, select it and rebuild."""
        previous = self.points.get(handle)
        placement = self.points.move(handle, x, y)
        try:
            self._rebuild()
        except SplineError:
            self.points.move(handle, previous.x, previous.y)
            raise
        self._selected = placement.handle
        return placement

    def move_selected(self, x: float, y: float) -> PointPlacement:
        """Move the selected point.

        Raises:
            LookupError: If nothing is selected.
        """
        if self._selected is None:
            raise LookupError("No point is selected")
        return self.move(self._selected, x, y)

    def remove(self, handle: PointHandle) -> int:
        """Remove a point, drop the selection and rebuild.

        Returns:
            Index the removed point occupied.
        """
        index = self.points.remove(handle)
        self._selected = None
        self._rebuild()
        return index

    def clear(self) -> None:
        self.points.clear()
        self._selected = None
        self._rebuild()

    # ------------------------------------------------------------------
    # Selection
    # ------------------------------------------------------------------

    @property
    def selected(self) -> PointHandle | None:
        return self._selected

    @property
    def selected_index(self) -> int | None:
        if self._selected is None:
            return None
        return self.points.index_of(self._selected)

    @property
    def selected_point(self) -> ControlPoint | None:
        if self._selected is None:
            return None
        return self.points.get(self._selected)

    def select(self, handle: PointHandle | None) -> None:
        """Select a point by handle, or clear the selection with None.

        Raises:
            UnknownPointError: If the handle is not in the point set.
        """
        if handle is not None:
            self.points.index_of(handle)
        self._selected = handle

    def select_index(self, index: int) -> PointHandle:
        """Select the point currently at ``index`` in x order."""
        handle = self.points.handle_at(index)
        self._selected = handle
        return handle

    def select_at(self, x: float, y: float) -> PointHandle | None:
        """Select the point within ``hit_radius`` of (x, y), if any.

        A miss leaves the current selection unchanged.
        """
        handle = self.points.find_near(x, y, self.config.hit_radius)
        if handle is not None:
            self._selected = handle
        return handle

    # ------------------------------------------------------------------
    # Curve access
    # ------------------------------------------------------------------

    @property
    def curve(self) -> SplineCurve:
        return self._curve

    def evaluate(self, x: float) -> float:
        return evaluate(self._curve, x)

    def polyline(self) -> list[Sample]:
        """Rendering polyline for the current curve (empty below two points)."""
        return sample_curve(self._curve, self.sampling)

    def rows(self) -> list[PointRow]:
        """``(index, x, y)`` per point in x order, for table views."""
        return [(i, p.x, p.y) for i, p in enumerate(self.points.points())]

    def _rebuild(self) -> None:
        self._curve = build(self.points)
        logger.debug("Rebuilt curve: %d points, %d segments", len(self.points), len(self._curve))
