"""Type aliases used across waypoint."""

from waypoint.types.base import Number, Progress

__all__ = ["Number", "Progress"]
