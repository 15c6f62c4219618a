"""Tests for PointSet ordering, handles and validation."""

from __future__ import annotations

from pydantic import ValidationError
import pytest

from splinekit.core.points import (
    Bounds,
    DuplicateAbscissaError,
    PointHandle,
    PointOutOfBoundsError,
    PointSet,
    PointSetError,
    UnknownPointError,
)
from splinekit.core.spline.errors import DegenerateInputError
from splinekit.core.spline.models import ControlPoint


@pytest.fixture
def point_set() -> PointSet:
    return PointSet()


class TestInsert:
    """Tests for PointSet.insert."""

    def test_reports_sorted_index(self, point_set: PointSet) -> None:
        """Each insert reports where the point landed after sorting."""
        assert point_set.insert(5.0, 0.0).index == 0
        assert point_set.insert(1.0, 0.0).index == 0
        assert point_set.insert(3.0, 0.0).index == 1
        assert point_set.insert(9.0, 0.0).index == 3

    def test_keeps_points_sorted(self, point_set: PointSet) -> None:
        for x in (4.0, 2.0, 8.0, 6.0):
            point_set.insert(x, x * 10)
        assert [p.x for p in point_set] == [2.0, 4.0, 6.0, 8.0]

    def test_handles_are_unique(self, point_set: PointSet) -> None:
        first = point_set.insert(1.0, 1.0).handle
        second = point_set.insert(2.0, 1.0).handle
        assert first != second

    def test_handle_survives_resort(self, point_set: PointSet) -> None:
        """A handle keeps pointing at its point while indices shift."""
        handle = point_set.insert(5.0, 7.0).handle
        point_set.insert(1.0, 0.0)
        point_set.insert(2.0, 0.0)

        assert point_set.index_of(handle) == 2
        assert point_set.get(handle) == ControlPoint(x=5.0, y=7.0)

    def test_rejects_duplicate_x(self, point_set: PointSet) -> None:
        """A second point at the same x is rejected and nothing changes."""
        point_set.insert(5.0, 1.0)

        with pytest.raises(DuplicateAbscissaError) as exc_info:
            point_set.insert(5.0, 3.0)

        assert exc_info.value.x == 5.0
        assert len(point_set) == 1

    def test_duplicate_error_is_degenerate_input(self, point_set: PointSet) -> None:
        """Callers handling DegenerateInputError also catch point set duplicates."""
        point_set.insert(5.0, 1.0)
        with pytest.raises(DegenerateInputError):
            point_set.insert(5.0, 2.0)
        with pytest.raises(PointSetError):
            point_set.insert(5.0, 2.0)

    def test_allows_duplicates_when_configured(self) -> None:
        """Ties keep insertion order when duplicates are allowed."""
        point_set = PointSet(reject_duplicate_x=False)
        point_set.insert(5.0, 1.0)
        placement = point_set.insert(5.0, 2.0)

        assert placement.index == 1
        assert [p.y for p in point_set] == [1.0, 2.0]

    def test_rejects_non_finite(self, point_set: PointSet) -> None:
        with pytest.raises(ValidationError):
            point_set.insert(float("nan"), 0.0)
        assert len(point_set) == 0


class TestBounds:
    """Tests for bounds enforcement."""

    @pytest.fixture
    def bounded(self) -> PointSet:
        return PointSet(bounds=Bounds(x_max=800.0, y_max=600.0))

    def test_inside_is_accepted(self, bounded: PointSet) -> None:
        bounded.insert(0.0, 0.0)
        bounded.insert(800.0, 600.0)
        assert len(bounded) == 2

    @pytest.mark.parametrize(("x", "y"), [(-1.0, 10.0), (801.0, 10.0), (10.0, -0.5), (10.0, 601.0)])
    def test_outside_is_rejected(self, bounded: PointSet, x: float, y: float) -> None:
        with pytest.raises(PointOutOfBoundsError):
            bounded.insert(x, y)
        assert len(bounded) == 0

    def test_move_outside_leaves_point(self, bounded: PointSet) -> None:
        handle = bounded.insert(10.0, 10.0).handle
        with pytest.raises(PointOutOfBoundsError):
            bounded.move(handle, 900.0, 10.0)
        assert bounded.get(handle) == ControlPoint(x=10.0, y=10.0)

    def test_invalid_bounds(self) -> None:
        with pytest.raises(ValidationError):
            Bounds(x_min=10.0, x_max=0.0, y_max=1.0)


class TestMove:
    """Tests for PointSet.move."""

    def test_move_reports_new_index(self, point_set: PointSet) -> None:
        """Moving past neighbours re-sorts and reports the new position."""
        handle = point_set.insert(1.0, 0.0).handle
        point_set.insert(2.0, 0.0)
        point_set.insert(3.0, 0.0)

        placement = point_set.move(handle, 10.0, 5.0)

        assert placement.handle == handle
        assert placement.index == 2
        assert [p.x for p in point_set] == [2.0, 3.0, 10.0]

    def test_move_keeping_x(self, point_set: PointSet) -> None:
        """A point never collides with its own abscissa."""
        handle = point_set.insert(4.0, 0.0).handle
        placement = point_set.move(handle, 4.0, 9.0)
        assert placement.index == 0
        assert point_set.get(handle).y == 9.0

    def test_move_onto_other_x_rejected(self, point_set: PointSet) -> None:
        handle = point_set.insert(1.0, 0.0).handle
        point_set.insert(2.0, 0.0)

        with pytest.raises(DuplicateAbscissaError):
            point_set.move(handle, 2.0, 4.0)

        assert point_set.get(handle) == ControlPoint(x=1.0, y=0.0)

    def test_move_unknown_handle(self, point_set: PointSet) -> None:
        with pytest.raises(UnknownPointError):
            point_set.move(PointHandle(id=42), 0.0, 0.0)


class TestRemove:
    """Tests for PointSet.remove and clear."""

    def test_remove_reports_index(self, point_set: PointSet) -> None:
        point_set.insert(1.0, 0.0)
        handle = point_set.insert(2.0, 0.0).handle
        point_set.insert(3.0, 0.0)

        assert point_set.remove(handle) == 1
        assert [p.x for p in point_set] == [1.0, 3.0]

    def test_removed_handle_is_stale(self, point_set: PointSet) -> None:
        handle = point_set.insert(1.0, 0.0).handle
        point_set.remove(handle)

        assert handle not in point_set
        with pytest.raises(UnknownPointError):
            point_set.remove(handle)

    def test_unknown_point_error_is_key_error(self, point_set: PointSet) -> None:
        with pytest.raises(KeyError):
            point_set.get(PointHandle(id=0))

    def test_clear_never_reuses_handles(self, point_set: PointSet) -> None:
        first = point_set.insert(1.0, 0.0).handle
        point_set.clear()
        second = point_set.insert(1.0, 0.0).handle

        assert len(point_set) == 1
        assert first != second
        assert first not in point_set


class TestQueries:
    """Tests for lookups and hit testing."""

    def test_handle_at(self, point_set: PointSet) -> None:
        late = point_set.insert(9.0, 0.0).handle
        early = point_set.insert(1.0, 0.0).handle
        assert point_set.handle_at(0) == early
        assert point_set.handle_at(1) == late
        assert point_set.handles() == (early, late)

    def test_handle_at_out_of_range(self, point_set: PointSet) -> None:
        with pytest.raises(IndexError):
            point_set.handle_at(0)

    def test_points_tuple(self, point_set: PointSet) -> None:
        point_set.insert(2.0, 1.0)
        point_set.insert(1.0, 3.0)
        assert point_set.points() == (ControlPoint(x=1.0, y=3.0), ControlPoint(x=2.0, y=1.0))

    def test_find_near_hit(self, point_set: PointSet) -> None:
        handle = point_set.insert(100.0, 100.0).handle
        assert point_set.find_near(105.0, 104.0, radius=12.0) == handle

    def test_find_near_miss(self, point_set: PointSet) -> None:
        point_set.insert(100.0, 100.0)
        assert point_set.find_near(120.0, 100.0, radius=12.0) is None

    def test_find_near_prefers_lowest_x(self, point_set: PointSet) -> None:
        """Overlapping hit areas resolve to the first point in x order."""
        right = point_set.insert(106.0, 100.0).handle
        left = point_set.insert(100.0, 100.0).handle
        assert point_set.find_near(103.0, 100.0, radius=12.0) == left
        assert right in point_set

    def test_repr_lists_handles(self, point_set: PointSet) -> None:
        point_set.insert(1.0, 2.0)
        assert repr(point_set) == "PointSet([P0=(1.0, 2.0)])"
