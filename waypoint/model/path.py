"""Progress-keyed anchor store with piecewise linear interpolation.

A `Path` maps progress values (floats) to `Vector` positions. Looking up an
arbitrary progress finds the bracketing anchors (largest key not above the
query, smallest key not below it) and blends their positions with
`Vector.lerp`. Queries outside the stored key range are not extrapolated;
they raise `InconsistentDataError`.

Keys are kept in a sorted index next to the mapping, so bracketing is a pair
of binary searches and never depends on insertion order.
"""

from __future__ import annotations

import math
from bisect import bisect_left, bisect_right, insort
from dataclasses import dataclass, field
from typing import TYPE_CHECKING, Any, Dict, Iterable, Iterator, List, Optional, Set, Tuple

import numpy as np

from waypoint.config import SAMPLING_CONFIG
from waypoint.exceptions import InconsistentDataError
from waypoint.logging import get_logger
from waypoint.model.vector import Vector
from waypoint.ranges.progression import FloatProgression
from waypoint.types.base import Number, Progress

if TYPE_CHECKING:
    import numpy.typing as npt

logger = get_logger(__name__)


@dataclass(eq=False)
class Path:
    """Path defined by anchor positions at given progress values.

    Insert at least two points before querying.

    Attributes:
        length: Total length of the path. Informational only; progress keys
            are not checked against it (useful e.g. for the speed of objects
            following the path).
    """

    length: float
    _points: Dict[Progress, Vector] = field(
        init=False, default_factory=dict, repr=False
    )
    _keys: List[Progress] = field(init=False, default_factory=list, repr=False)

    def __post_init__(self) -> None:
        self.length = float(self.length)

    def insert(self, progress: Number, position: Vector) -> None:
        """Store ``position`` at ``progress``, replacing any existing anchor there.

        Args:
            progress: Progress key, normally within [0, length] (not checked).
            position: Position at ``progress``.

        Raises:
            ValueError: If ``progress`` is NaN.
            TypeError: If ``position`` is not a `Vector`.
        """
        if not isinstance(position, Vector):
            raise TypeError(
                f"position must be a Vector, got {type(position).__name__}"
            )
        key = float(progress)
        if math.isnan(key):
            raise ValueError("progress must not be NaN")

        if key in self._points:
            logger.debug("Overwriting anchor at progress %s with %r", key, position)
        else:
            insort(self._keys, key)
            logger.debug("Adding anchor at progress %s: %r", key, position)
        self._points[key] = position

    def __setitem__(self, progress: Number, position: Vector) -> None:
        self.insert(progress, position)

    def all_points(self) -> Set[Vector]:
        """Return the distinct stored positions."""
        return set(self._points.values())

    def keys(self) -> List[Progress]:
        """Return stored progress keys in ascending order."""
        return list(self._keys)

    def _nearest_before(self, progress: float) -> Optional[Progress]:
        idx = bisect_right(self._keys, progress)
        return self._keys[idx - 1] if idx > 0 else None

    def _nearest_after(self, progress: float) -> Optional[Progress]:
        idx = bisect_left(self._keys, progress)
        return self._keys[idx] if idx < len(self._keys) else None

    def at(self, progress: Number) -> Vector:
        """Return the position at ``progress``.

        Args:
            progress: Progress to look up, between the first and last stored keys.

        Returns:
            The stored position when ``progress`` hits an anchor (or both
            bracketing anchors hold equal positions), otherwise the linear
            interpolation between the bracketing anchors.

        Raises:
            InconsistentDataError: If fewer than two anchors are stored or no
                anchor lies on one side of ``progress``.
        """
        if len(self._points) < 2:
            logger.debug(
                "Lookup at %s on path with %d point(s)", progress, len(self._points)
            )
            raise InconsistentDataError(
                f"At least two points are required, path has {len(self._points)}"
            )

        progress = float(progress)
        if math.isnan(progress):
            raise InconsistentDataError("Cannot bracket a NaN progress")
        before = self._nearest_before(progress)
        after = self._nearest_after(progress)
        if before is None or after is None:
            logger.debug(
                "No bracketing points for progress %s (keys %s..%s)",
                progress,
                self._keys[0],
                self._keys[-1],
            )
            raise InconsistentDataError(
                f"No suitable points found around progress {progress}"
            )

        left = self._points[before]
        right = self._points[after]
        if before == after or left == right:
            return left

        return left.lerp(right, (progress - before) / (after - before))

    def __getitem__(self, progress: Number) -> Vector:
        return self.at(progress)

    def sample(self, progresses: Iterable[Number]) -> npt.NDArray[np.float64]:
        """Look up every progress value and stack the positions.

        Args:
            progresses: Progress values, typically a `FloatProgression`.

        Returns:
            Array of shape ``(n, 3)`` with one row per progress value.

        Raises:
            InconsistentDataError: If any value cannot be bracketed.
        """
        rows = [tuple(self.at(p)) for p in progresses]
        return np.array(rows, dtype=np.float64).reshape(len(rows), 3)

    def progression(
        self, step: Optional[Number] = None, samples: Optional[int] = None
    ) -> FloatProgression:
        """Return a progression from the first to the last stored key.

        The step is ``step`` when given, otherwise resolved from ``samples``
        through the sampling configuration.

        Raises:
            InconsistentDataError: If fewer than two anchors are stored.
            ValueError: If ``step`` is smaller in magnitude than ``min_step``.
        """
        if len(self._keys) < 2:
            raise InconsistentDataError(
                f"At least two points are required, path has {len(self._keys)}"
            )
        first, last = self._keys[0], self._keys[-1]
        if step is None:
            step = SAMPLING_CONFIG.resolve_step(last - first, samples)
        else:
            step = SAMPLING_CONFIG.check_step(step)
        return FloatProgression(first, last, step)

    def sample_uniform(
        self, step: Optional[Number] = None, samples: Optional[int] = None
    ) -> npt.NDArray[np.float64]:
        """Sample the whole stored progress range at regular steps."""
        return self.sample(self.progression(step=step, samples=samples))

    def __len__(self) -> int:
        return len(self._points)

    def __contains__(self, progress: Any) -> bool:
        try:
            return float(progress) in self._points
        except (TypeError, ValueError):
            return False

    def __iter__(self) -> Iterator[Tuple[Progress, Vector]]:
        """Iterate over ``(progress, position)`` anchors in ascending progress."""
        for key in self._keys:
            yield key, self._points[key]

    def __eq__(self, other: Any) -> bool:
        if not isinstance(other, Path):
            return NotImplemented
        return self.length == other.length and self._points == other._points
