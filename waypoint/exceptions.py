"""Exception types raised by waypoint."""

from __future__ import annotations


class WaypointError(Exception):
    """Base class for waypoint errors."""


class InconsistentDataError(WaypointError, LookupError):
    """Stored path data cannot answer a query.

    Raised when no pair of anchors brackets the requested progress, which
    includes a path holding fewer than two points.
    """


class InvalidProgressionError(WaypointError, ValueError):
    """A float progression was given a zero step."""
