"""Interpolate between SVG paths with different numbers of points."""

from pathmorph.engine.interpolator import PathInterpolator, interpolate_path
from pathmorph.errors import (
    ArgumentCountError,
    InterpolationError,
    MalformedArgumentError,
    PathError,
    UnknownCommandError,
)

__version__ = "0.1.0"

__all__ = [
    "ArgumentCountError",
    "InterpolationError",
    "MalformedArgumentError",
    "PathError",
    "PathInterpolator",
    "UnknownCommandError",
    "interpolate_path",
]
