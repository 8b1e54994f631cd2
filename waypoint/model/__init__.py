"""Path model package.

Defines the `Vector` value type and the progress-keyed `Path` built on it.
"""

from waypoint.model.path import Path
from waypoint.model.vector import Vector, components_equal, vectors_equal

__all__ = [
    "Path",
    "Vector",
    "components_equal",
    "vectors_equal",
]
