"""Point set value types and exceptions."""

from __future__ import annotations

from pydantic import BaseModel, ConfigDict, Field, model_validator

from splinekit.core.spline.errors import DegenerateInputError


class PointHandle(BaseModel):
    """Opaque, stable identity of a point inside a PointSet.

    Handles survive re-sorting; ordinal indices do not.
    """

    model_config = ConfigDict(extra="forbid", frozen=True)

    id: int = Field(..., ge=0)

    def __str__(self) -> str:
        return f"P{self.id}"


class PointPlacement(BaseModel):
    """Result of an insert or move: the point's handle and its new index."""

    model_config = ConfigDict(extra="forbid", frozen=True)

    handle: PointHandle
    index: int = Field(..., ge=0)


class Bounds(BaseModel):
    """Axis-aligned rectangle that control points must stay inside.

    Example:
        >>> bounds = Bounds(x_max=800.0, y_max=600.0)
        >>> bounds.contains(10.0, 20.0)
        True
    """

    model_config = ConfigDict(extra="forbid", frozen=True)

    x_min: float = 0.0
    x_max: float
    y_min: float = 0.0
    y_max: float

    @model_validator(mode="after")
    def _validate_extent(self) -> Bounds:
        """Validate that the rectangle is well formed."""
        if self.x_min > self.x_max or self.y_min > self.y_max:
            raise ValueError("Bounds minimum must not exceed maximum")
        return self

    def contains(self, x: float, y: float) -> bool:
        return self.x_min <= x <= self.x_max and self.y_min <= y <= self.y_max


# ---------------------------------------------------------------------------
# Exceptions
# ---------------------------------------------------------------------------


class PointSetError(Exception):
    """Base exception for point set mutations."""


class UnknownPointError(PointSetError, KeyError):
    """Raised when a handle does not belong to the point set."""

    def __init__(self, handle: PointHandle) -> None:
        self.handle = handle
        super().__init__(f"Unknown point handle: {handle}")

    def __str__(self) -> str:
        return str(self.args[0])


class PointOutOfBoundsError(PointSetError):
    """Raised when a point would be placed outside the configured bounds."""

    def __init__(self, x: float, y: float, bounds: Bounds) -> None:
        self.x = x
        self.y = y
        self.bounds = bounds
        super().__init__(
            f"Point ({x}, {y}) is outside bounds "
            f"[{bounds.x_min}, {bounds.x_max}] x [{bounds.y_min}, {bounds.y_max}]"
        )


class DuplicateAbscissaError(DegenerateInputError, PointSetError):
    """Raised when a mutation would give two points the same x."""
