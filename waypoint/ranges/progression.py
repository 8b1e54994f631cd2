"""Float progressions and closed float ranges.

A `FloatProgression` is a lazy, restartable sequence of floats from ``first``
towards ``last`` in increments of ``step``. Each call to ``iter()`` starts a
fresh `FloatProgressionIterator`; the iterator's ``step`` may be changed while
iterating to refine or coarsen the sampling on the fly.

`FloatRange` is a progression that also answers closed-interval membership
(``value in FloatRange(0, 10)``) independent of its step.
"""

from __future__ import annotations

import math
from typing import Any, Iterator

from waypoint.exceptions import InvalidProgressionError
from waypoint.logging import get_logger
from waypoint.types.base import Number

logger = get_logger(__name__)


def _check_step(step: float) -> float:
    step = float(step)
    if step == 0.0 or math.isnan(step):
        raise InvalidProgressionError(f"Step must be non-zero, got {step}")
    return step


class FloatProgressionIterator(Iterator[float]):
    """Iterator over a `FloatProgression` with a writable step.

    The cursor starts at ``first``. Each value is produced, then the cursor
    advances by the current ``step`` unless that would pass ``last`` in the
    direction of travel, in which case the produced value was the final one.
    """

    def __init__(self, first: float, last: float, step: float) -> None:
        self._step = _check_step(step)
        self._next = float(first)
        self._final = float(last)
        self._has_next = (
            self._next <= self._final if self._step > 0 else self._next >= self._final
        )

    @property
    def step(self) -> float:
        return self._step

    @step.setter
    def step(self, value: Number) -> None:
        self._step = _check_step(value)

    def __iter__(self) -> "FloatProgressionIterator":
        return self

    def __next__(self) -> float:
        if not self._has_next:
            raise StopIteration
        value = self._next
        advanced = value + self._step
        if self._step > 0:
            passed = advanced > self._final
        else:
            passed = advanced < self._final
        if passed:
            self._has_next = False
        elif advanced == value:
            # Step is below the float resolution at this magnitude
            logger.warning(
                "Progression step %r cannot advance past %r; stopping early",
                self._step,
                value,
            )
            self._has_next = False
        else:
            self._next = advanced
        return value


class FloatProgression:
    """Progression of floats from ``first`` to ``last`` with a signed ``step``.

    Args:
        first: First element produced.
        last: Bound the progression never passes. It is produced only when
            reached exactly by whole steps.
        step: Non-zero increment. Negative values walk downwards.

    Raises:
        InvalidProgressionError: If ``step`` is zero or NaN.
    """

    def __init__(self, first: Number, last: Number, step: Number = 1.0) -> None:
        self._step = _check_step(step)
        self._first = float(first)
        self._last = float(last)

    @classmethod
    def from_closed_range(
        cls, range_start: Number, range_end: Number, step: Number
    ) -> "FloatProgression":
        """Create a progression over a closed range; use a negative step to go down."""
        return cls(range_start, range_end, step)

    @property
    def first(self) -> float:
        return self._first

    @property
    def last(self) -> float:
        return self._last

    @property
    def step(self) -> float:
        return self._step

    def with_step(self, step: Number) -> "FloatProgression":
        """Return a new progression over the same bounds with step size ``|step|``.

        The sign of the new step follows this progression's direction. Any
        iterator already running over this progression is unaffected.
        """
        magnitude = abs(_check_step(step))
        return type(self)(self._first, self._last, math.copysign(magnitude, self._step))

    def __iter__(self) -> FloatProgressionIterator:
        return FloatProgressionIterator(self._first, self._last, self._step)

    def is_empty(self) -> bool:
        """Return True if no value can be produced in the current direction."""
        if self._step > 0:
            return self._first > self._last
        return self._first < self._last

    def __eq__(self, other: Any) -> bool:
        if self is other:
            return True
        if type(other) is not type(self):
            return NotImplemented
        return (self._first, self._last, self._step) == (
            other._first,
            other._last,
            other._step,
        )

    def __hash__(self) -> int:
        return hash((type(self).__name__, self._first, self._last, self._step))

    def __repr__(self) -> str:
        return (
            f"{type(self).__name__}(first={self._first!r}, "
            f"last={self._last!r}, step={self._step!r})"
        )

    def __str__(self) -> str:
        if self._step > 0:
            return f"{self._first}..{self._last} step {self._step}"
        return f"{self._first} downTo {self._last} step {-self._step}"


class FloatRange(FloatProgression):
    """Closed range of floats ``[start, end_inclusive]`` that can also be iterated.

    Membership ignores the step: ``5.1 in FloatRange(0, 10)`` is True.
    """

    EMPTY: "FloatRange"

    def __init__(
        self, start: Number, end_inclusive: Number, step: Number = 1.0
    ) -> None:
        super().__init__(start, end_inclusive, step)

    @property
    def start(self) -> float:
        return self._first

    @property
    def end_inclusive(self) -> float:
        return self._last

    def contains(self, value: Number) -> bool:
        return self._first <= value <= self._last

    def __contains__(self, value: Any) -> bool:
        try:
            return self.contains(value)
        except TypeError:
            return False

    def is_empty(self) -> bool:
        return self._first > self._last

    def __str__(self) -> str:
        return f"{self._first}..{self._last}"


FloatRange.EMPTY = FloatRange(1.0, 0.0)


def float_range(start: Number, end: Number, step: Number = 1.0) -> FloatRange:
    """Return the ascending range ``start..end``; empty when ``start > end``."""
    return FloatRange(start, end, step)


def down_to(start: Number, end: Number, step: Number = 1.0) -> FloatProgression:
    """Return a progression walking down from ``start`` to ``end`` by ``|step|``."""
    return FloatProgression(start, end, -abs(_check_step(step)))
