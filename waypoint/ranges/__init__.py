"""Float progressions and ranges used to generate progress values."""

from waypoint.ranges.progression import (
    FloatProgression,
    FloatProgressionIterator,
    FloatRange,
    down_to,
    float_range,
)

__all__ = [
    "FloatProgression",
    "FloatProgressionIterator",
    "FloatRange",
    "down_to",
    "float_range",
]
