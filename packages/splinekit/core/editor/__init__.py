"""Interactive editing session."""

from splinekit.core.editor.session import PointRow, SplineEditor

__all__ = [
    "PointRow",
    "SplineEditor",
]
