"""Configuration models for SplineKit."""

from __future__ import annotations

from pydantic import BaseModel, ConfigDict, Field

from splinekit.core.points.models import Bounds
from splinekit.core.spline.sampling import SamplingConfig


class LoggingConfig(BaseModel):
    """Logging configuration."""

    level: str = Field(default="INFO", pattern="^(DEBUG|INFO|WARNING|ERROR|CRITICAL)$")
    format: str = "%(asctime)s - %(name)s - %(levelname)s - %(message)s"
    structured: bool = Field(default=False, description="Emit one JSON object per record")
    filename: str | None = Field(default=None, description="Log file path (stderr when unset)")


class EditorConfig(BaseModel):
    """Interactive editing behaviour.

    Example:
        >>> config = EditorConfig(bounds=Bounds(x_max=800, y_max=600))
        >>> config.hit_radius
        12.0
    """

    model_config = ConfigDict(frozen=True)

    hit_radius: float = Field(
        default=12.0, gt=0.0, description="Pick distance for selecting a point by position"
    )

    bounds: Bounds | None = Field(
        default=None, description="Rectangle control points must stay inside (unbounded if None)"
    )

    reject_duplicate_x: bool = Field(
        default=True, description="Reject edits that give two points the same abscissa"
    )


class AppConfig(BaseModel):
    """Application-level configuration."""

    model_config = ConfigDict(extra="forbid")

    logging: LoggingConfig = Field(default_factory=LoggingConfig)
    sampling: SamplingConfig = Field(default_factory=SamplingConfig)
    editor: EditorConfig = Field(default_factory=EditorConfig)
