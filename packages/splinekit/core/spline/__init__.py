"""Natural cubic spline construction and evaluation."""

from splinekit.core.spline.builder import build, natural_second_derivatives, sort_points
from splinekit.core.spline.errors import (
    DegenerateInputError,
    NumericOverflowError,
    OutOfDomainError,
    SingularSystemError,
    SplineError,
)
from splinekit.core.spline.evaluator import evaluate, evaluate_many, find_segment
from splinekit.core.spline.models import ControlPoint, Segment, SplineCurve
from splinekit.core.spline.sampling import (
    SamplingConfig,
    sample_curve,
    sample_segment,
    sample_uniform,
    segment_steps,
)
from splinekit.core.spline.solver import solve_tridiagonal

__all__ = [
    "ControlPoint",
    "DegenerateInputError",
    "NumericOverflowError",
    "OutOfDomainError",
    "SamplingConfig",
    "Segment",
    "SingularSystemError",
    "SplineCurve",
    "SplineError",
    "build",
    "evaluate",
    "evaluate_many",
    "find_segment",
    "natural_second_derivatives",
    "sample_curve",
    "sample_segment",
    "sample_uniform",
    "segment_steps",
    "solve_tridiagonal",
    "sort_points",
]
