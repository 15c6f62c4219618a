"""Configuration management for SplineKit."""

from splinekit.core.config.loader import (
    configure_logging,
    detect_format,
    load_app_config,
    load_config,
    load_points,
)
from splinekit.core.config.models import AppConfig, EditorConfig, LoggingConfig

__all__ = [
    # Loaders
    "configure_logging",
    "detect_format",
    "load_app_config",
    "load_config",
    "load_points",
    # Models
    "AppConfig",
    "EditorConfig",
    "LoggingConfig",
]
