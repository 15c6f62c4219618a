"""Shared utilities for SplineKit."""

from splinekit.core.utils.logging import configure_logging, get_logger
from splinekit.core.utils.math import clamp, distance, lerp

__all__ = [
    "clamp",
    "configure_logging",
    "distance",
    "get_logger",
    "lerp",
]
