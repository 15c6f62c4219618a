"""Curve sampling for rendering.

Turns a SplineCurve into a dense polyline. How densely to sample is a
rendering policy, so it is configurable rather than part of the curve.
"""

from __future__ import annotations

import math

from pydantic import BaseModel, ConfigDict, Field

from splinekit.core.spline.evaluator import evaluate
from splinekit.core.spline.models import Segment, SplineCurve
from splinekit.core.utils.math import clamp, lerp

Sample = tuple[float, float]


class SamplingConfig(BaseModel):
    """Per-segment sampling density.

    Each segment gets ``max(min_steps, floor(width / step_width))`` samples,
    so long segments are sampled roughly every ``step_width`` units.
    """

    model_config = ConfigDict(extra="forbid", frozen=True)

    min_steps: int = Field(default=30, ge=1, description="Minimum samples per segment")
    step_width: float = Field(default=5.0, gt=0.0, description="Target x distance between samples")


def segment_steps(segment: Segment, config: SamplingConfig | None = None) -> int:
    """Number of samples to take along a segment.

    Example:
        >>> seg = Segment(x1=0.0, x2=500.0, a=0.0, b=0.0, c=0.0, d=0.0)
        >>> segment_steps(seg)
        100
    """
    config = config or SamplingConfig()
    return max(config.min_steps, math.floor((segment.x2 - segment.x1) / config.step_width))


def sample_segment(segment: Segment, steps: int) -> list[Sample]:
    """Sample a segment at ``x1 + (x2 - x1) * i / steps`` for ``i = 1..steps``.

    The segment start is excluded so consecutive segments chain without
    repeating the shared node.

    Raises:
        ValueError: If steps < 1.
    """
    if steps < 1:
        raise ValueError("steps must be >= 1")

    samples: list[Sample] = []
    for i in range(1, steps + 1):
        x = lerp(segment.x1, segment.x2, i / steps)
        samples.append((x, segment.value(x)))
    return samples


def sample_curve(curve: SplineCurve, config: SamplingConfig | None = None) -> list[Sample]:
    """Sample a whole curve into a polyline.

    Starts at ``(x_min, S(x_min))`` and appends every segment's samples.
    An empty curve yields an empty polyline.
    """
    if curve.is_empty:
        return []

    first = curve.segments[0]
    polyline: list[Sample] = [(first.x1, first.a)]
    for segment in curve.segments:
        polyline.extend(sample_segment(segment, segment_steps(segment, config)))
    return polyline


def sample_uniform(curve: SplineCurve, count: int) -> list[Sample]:
    """Sample ``count`` evenly spaced points across the full domain, inclusive.

    An empty curve yields an empty list.

    Raises:
        ValueError: If count < 2.
    """
    if count < 2:
        raise ValueError("count must be >= 2")
    if curve.is_empty:
        return []

    x_min, x_max = curve.x_min, curve.x_max
    samples: list[Sample] = []
    for i in range(count):
        # Rounding in lerp must not push the last sample past x_max
        x = clamp(lerp(x_min, x_max, i / (count - 1)), x_min, x_max)
        samples.append((x, evaluate(curve, x)))
    return samples
