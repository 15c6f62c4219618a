"""Spline schema models.

This module defines the value types shared by the builder and evaluator:
- ControlPoint: A single interpolation node (x, y)
- Segment: One cubic piece valid over [x1, x2]
- SplineCurve: An ordered, gap-free sequence of segments

All models are immutable and validate on construction.
"""

from __future__ import annotations

from pydantic import BaseModel, ConfigDict, Field, PrivateAttr, model_validator


class ControlPoint(BaseModel):
    """A single interpolation node.

    Both coordinates must be finite. This model is immutable (frozen=True).

    Attributes:
        x: Abscissa.
        y: Ordinate.

    Example:
        >>> point = ControlPoint(x=1.0, y=2.5)
        >>> point.x
        1.0
    """

    model_config = ConfigDict(extra="forbid", frozen=True)

    x: float = Field(..., allow_inf_nan=False, description="Abscissa")
    y: float = Field(..., allow_inf_nan=False, description="Ordinate")

    @classmethod
    def of(cls, x: float, y: float) -> ControlPoint:
        """Positional constructor shorthand."""
        return cls(x=x, y=y)


class Segment(BaseModel):
    """One cubic piece of a spline.

    Represents ``S(t) = a + b*t + c*t**2 + d*t**3`` with ``t = x - x1``,
    valid only for ``x`` in ``[x1, x2]``.

    Example:
        >>> seg = Segment(x1=0.0, x2=2.0, a=1.0, b=0.5, c=0.0, d=0.0)
        >>> seg.value(2.0)
        2.0
    """

    model_config = ConfigDict(extra="forbid", frozen=True)

    x1: float
    x2: float
    a: float
    b: float
    c: float
    d: float

    @model_validator(mode="after")
    def _validate_interval(self) -> Segment:
        """Validate that the interval is non-empty."""
        if not self.x1 < self.x2:
            raise ValueError(f"Segment requires x1 < x2, got [{self.x1}, {self.x2}]")
        return self

    def contains(self, x: float) -> bool:
        return self.x1 <= x <= self.x2

    def value(self, x: float) -> float:
        """Evaluate the polynomial at x (no domain check)."""
        t = x - self.x1
        return self.a + self.b * t + self.c * t * t + self.d * t * t * t

    def derivative(self, x: float) -> float:
        """First derivative at x."""
        t = x - self.x1
        return self.b + 2.0 * self.c * t + 3.0 * self.d * t * t

    def second_derivative(self, x: float) -> float:
        """Second derivative at x."""
        t = x - self.x1
        return 2.0 * self.c + 6.0 * self.d * t


class SplineCurve(BaseModel):
    """Ordered sequence of segments covering ``[x_min, x_max]``.

    An empty curve is the "nothing to draw yet" state produced for fewer than
    two control points. Adjacent segments must share their boundary:
    ``segments[i].x2 == segments[i + 1].x1``.

    Attributes:
        segments: Tuple of segments ordered by x1.
    """

    model_config = ConfigDict(extra="forbid", frozen=True)

    segments: tuple[Segment, ...] = ()

    _starts: tuple[float, ...] = PrivateAttr(default=())

    @model_validator(mode="after")
    def _validate_contiguous(self) -> SplineCurve:
        """Validate that segments tile the domain without gaps or overlaps."""
        for left, right in zip(self.segments, self.segments[1:], strict=False):
            if left.x2 != right.x1:
                raise ValueError(
                    f"Segments must be contiguous: x2={left.x2} does not meet x1={right.x1}"
                )
        return self

    def model_post_init(self, __context: object) -> None:
        """Cache segment starts for binary search."""
        self._starts = tuple(seg.x1 for seg in self.segments)

    @classmethod
    def empty(cls) -> SplineCurve:
        return cls()

    @property
    def is_empty(self) -> bool:
        return not self.segments

    @property
    def x_min(self) -> float:
        if not self.segments:
            raise ValueError("Empty curve has no domain")
        return self.segments[0].x1

    @property
    def x_max(self) -> float:
        if not self.segments:
            raise ValueError("Empty curve has no domain")
        return self.segments[-1].x2

    @property
    def domain(self) -> tuple[float, float] | None:
        """``(x_min, x_max)``, or None for an empty curve."""
        if not self.segments:
            return None
        return (self.segments[0].x1, self.segments[-1].x2)

    @property
    def starts(self) -> tuple[float, ...]:
        """Left end of each segment, in order."""
        return self._starts

    @property
    def knots(self) -> list[float]:
        """Segment boundaries, i.e. the sorted control point abscissas."""
        if not self.segments:
            return []
        return [seg.x1 for seg in self.segments] + [self.segments[-1].x2]

    def __len__(self) -> int:
        return len(self.segments)
