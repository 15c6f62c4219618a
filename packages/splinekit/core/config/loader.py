"""Configuration loading utilities with JSON and YAML support."""

from __future__ import annotations

import json
import logging
from pathlib import Path
from typing import Any

from pydantic import ValidationError
import yaml

from splinekit.core.config.models import AppConfig
from splinekit.core.spline.models import ControlPoint
from splinekit.core.utils.logging import configure_logging as _configure_logging

logger = logging.getLogger(__name__)


def detect_format(file_path: Path | str) -> str:
    """Detect config file format from extension.

    Args:
        file_path: Path to config file

    Returns:
        Format string: "json" or "yaml"

    Raises:
        ValueError: If format cannot be determined

    Example:
        >>> detect_format("config.json")
        'json'
        >>> detect_format("config.yml")
        'yaml'
    """
    suffix = Path(file_path).suffix.lower()

    if suffix == ".json":
        return "json"
    elif suffix in [".yaml", ".yml"]:
        return "yaml"
    else:
        raise ValueError(f"Unsupported config format: {suffix}")


def load_config(path: str | Path) -> Any:
    """Load and return the raw contents of a JSON or YAML file.

    Args:
        path: Path to file (.json, .yaml, or .yml)

    Returns:
        Parsed document (empty YAML files yield an empty dict)

    Raises:
        FileNotFoundError: If the file does not exist
        ValueError: If format is not supported or file content is invalid
    """
    path = Path(path)

    if not path.exists():
        raise FileNotFoundError(f"Config file does not exist: {path}")

    fmt = detect_format(path)

    if fmt == "json":
        try:
            with path.open("r", encoding="utf-8") as f:
                return json.load(f)
        except json.JSONDecodeError as e:
            raise ValueError(f"Invalid JSON in {path}: {e}") from e

    try:
        with path.open("r", encoding="utf-8") as f:
            content = yaml.safe_load(f)
            # safe_load returns None for empty files
            return content if content is not None else {}
    except yaml.YAMLError as e:
        raise ValueError(f"Invalid YAML in {path}: {e}") from e


def load_app_config(path: str | Path | None = None) -> AppConfig:
    """Load and validate application configuration.

    Args:
        path: Path to app config file. When None or missing, defaults are used.

    Returns:
        Validated AppConfig instance with defaults for missing values

    Raises:
        ValidationError: If config is invalid
    """
    if path is None or not Path(path).exists():
        if path is not None:
            logger.warning("Config file %s not found, using defaults", path)
        return AppConfig()

    raw_config = load_config(path)
    config = AppConfig.model_validate(raw_config)
    logger.debug("Loaded app config from %s", path)
    return config


def load_points(path: str | Path) -> list[ControlPoint]:
    """Load control points from a JSON or YAML file.

    Accepted layouts: a list of ``{x, y}`` mappings, a list of ``[x, y]``
    pairs, or a mapping with either list under a ``points`` key.

    Args:
        path: Path to points file (.json, .yaml, or .yml)

    Returns:
        Control points in file order (not sorted).

    Raises:
        FileNotFoundError: If the file does not exist
        ValueError: If the layout is not recognised or a point is invalid

    Example:
        >>> points = load_points("points.yaml")
    """
    raw = load_config(path)
    if isinstance(raw, dict):
        if "points" not in raw:
            raise ValueError(f"Expected a 'points' list in {path}")
        raw = raw["points"]
    if not isinstance(raw, list):
        raise ValueError(f"Expected a list of points in {path}, got {type(raw).__name__}")

    points: list[ControlPoint] = []
    for i, item in enumerate(raw):
        try:
            if isinstance(item, dict):
                points.append(ControlPoint.model_validate(item))
            elif isinstance(item, (list, tuple)) and len(item) == 2:
                points.append(ControlPoint(x=item[0], y=item[1]))
            else:
                raise ValueError(f"Point {i} in {path} must be {{x, y}} or [x, y], got {item!r}")
        except ValidationError as e:
            raise ValueError(f"Invalid point {i} in {path}: {e}") from e

    logger.debug("Loaded %d points from %s", len(points), path)
    return points


def configure_logging(config: AppConfig | None = None) -> None:
    """Configure Python logging from app config.

    Args:
        config: AppConfig instance (defaults if None)
    """
    if config is None:
        config = AppConfig()

    _configure_logging(
        level=config.logging.level,
        format_string=config.logging.format,
        filename=config.logging.filename,
        structured=config.logging.structured,
    )
