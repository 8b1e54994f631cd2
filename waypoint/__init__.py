"""waypoint: progress-keyed paths with linear interpolation.

waypoint stores anchor positions along a path, each tagged with a scalar
progress value, and reconstructs any intermediate position by piecewise
linear interpolation between the bracketing anchors.

Primary API:
    Vector - 2-D/3-D float vector with tolerant structural equality
    Path - progress -> Vector store with interpolated lookup
    FloatProgression, FloatRange - lazy float sequences for progress values
    load_path() - Build a Path from a YAML document

Example:
    from waypoint import Path, Vector, float_range

    path = Path(length=10)
    path[0] = Vector(0, 0, 0)
    path[10] = Vector(10, 10, 10)

    path.at(5)                              # Vector(5, 5, 5)
    positions = path.sample(float_range(0, 10, 0.5))
"""

from __future__ import annotations

from waypoint import cli, logging
from waypoint._version import __version__
from waypoint.dsl.loader import load_path
from waypoint.exceptions import (
    InconsistentDataError,
    InvalidProgressionError,
    WaypointError,
)
from waypoint.model.path import Path
from waypoint.model.vector import Vector, vectors_equal
from waypoint.ranges.progression import (
    FloatProgression,
    FloatRange,
    down_to,
    float_range,
)

__all__ = [
    # Version
    "__version__",
    # Model
    "Vector",
    "Path",
    "vectors_equal",
    # Ranges
    "FloatProgression",
    "FloatRange",
    "float_range",
    "down_to",
    # Errors
    "WaypointError",
    "InconsistentDataError",
    "InvalidProgressionError",
    # Loading
    "load_path",
    # Utilities
    "cli",
    "logging",
]
