"""Tests for FloatProgression and FloatRange."""

import math

import pytest

from waypoint.exceptions import InvalidProgressionError
from waypoint.ranges.progression import (
    FloatProgression,
    FloatRange,
    down_to,
    float_range,
)


def test_range_step_quarter_yields_41_values():
    values = list(float_range(0, 10, 0.25))
    assert len(values) == 41
    expected = 0.0
    for value in values:
        assert value == expected
        expected += 0.25
    assert values[0] == 0.0
    assert values[-1] == 10.0


def test_progression_is_restartable():
    progression = FloatRange(0, 10, 0.25)
    assert list(progression) == list(progression)


def test_progression_is_lazy():
    it = iter(FloatProgression(0, 1e12, 1))
    assert next(it) == 0.0
    assert next(it) == 1.0


def test_last_is_not_passed():
    assert list(FloatProgression(0, 1, 0.3)) == pytest.approx([0.0, 0.3, 0.6, 0.9])


def test_negative_step_walks_down():
    assert list(FloatProgression(3, 0, -1)) == [3.0, 2.0, 1.0, 0.0]
    assert list(down_to(1, -1, 0.5)) == [1.0, 0.5, 0.0, -0.5, -1.0]


def test_negative_range_positive_step():
    assert list(FloatProgression(-3, -1, 1)) == [-3.0, -2.0, -1.0]


def test_single_value_when_first_equals_last():
    assert list(FloatProgression(2, 2, 0.5)) == [2.0]


def test_direction_mismatch_is_empty():
    up = FloatProgression(5, 0, 1)
    down = FloatProgression(0, 5, -1)
    assert up.is_empty() and list(up) == []
    assert down.is_empty() and list(down) == []
    assert not FloatProgression(0, 5, 1).is_empty()
    assert not FloatProgression(5, 0, -1).is_empty()


@pytest.mark.parametrize("step", [0, 0.0, -0.0, math.nan])
def test_zero_step_is_rejected(step):
    with pytest.raises(InvalidProgressionError):
        FloatProgression(0, 10, step)
    with pytest.raises(ValueError):
        FloatRange(0, 10, step)


def test_with_step_keeps_direction():
    up = FloatProgression(0, 1, 0.5)
    assert up.with_step(0.25).step == 0.25
    assert up.with_step(-0.25).step == 0.25

    down = FloatProgression(1, 0, -0.5)
    assert down.with_step(0.25).step == -0.25
    assert list(down.with_step(0.25)) == [1.0, 0.75, 0.5, 0.25, 0.0]

    with pytest.raises(InvalidProgressionError):
        up.with_step(0)


def test_with_step_does_not_disturb_running_iterator():
    progression = FloatProgression(0, 4, 1)
    it = iter(progression)
    assert next(it) == 0.0
    finer = progression.with_step(0.5)
    assert list(it) == [1.0, 2.0, 3.0, 4.0]
    assert progression.step == 1.0
    assert len(list(finer)) == 9


def test_with_step_preserves_range_type():
    stepped = FloatRange(0, 10).with_step(2)
    assert isinstance(stepped, FloatRange)
    assert 5 in stepped


def test_iterator_step_can_change_mid_iteration():
    it = iter(FloatProgression(0, 10, 5))
    assert next(it) == 0.0
    it.step = 1
    assert list(it) == [5.0, 6.0, 7.0, 8.0, 9.0, 10.0]
    with pytest.raises(InvalidProgressionError):
        it.step = 0


def test_unresolvable_step_stops():
    values = list(FloatProgression(1e20, 2e20, 1))
    assert values == [1e20]


def test_from_closed_range():
    assert FloatProgression.from_closed_range(0, 2, 1) == FloatProgression(0, 2, 1)


def test_range_contains_closed_interval():
    r = FloatRange(0, 10)
    assert r.contains(5)
    assert 0 in r and 10 in r
    assert not r.contains(-1)
    assert 11 not in r
    assert "5" not in r


def test_range_contains_ignores_step():
    assert 0.3 in FloatRange(0, 10, 5)


def test_range_aliases():
    r = FloatRange(1.5, 3)
    assert (r.start, r.end_inclusive) == (r.first, r.last) == (1.5, 3.0)
    assert r.step == 1.0


def test_empty_range():
    assert FloatRange.EMPTY.is_empty()
    assert list(FloatRange.EMPTY) == []
    assert 0.5 not in FloatRange.EMPTY
    assert not FloatRange(0, 0).is_empty()


def test_equality_and_hash():
    assert FloatProgression(0, 1, 0.5) == FloatProgression(0.0, 1.0, 0.5)
    assert FloatProgression(0, 1, 0.5) != FloatProgression(0, 1, 0.25)
    assert FloatRange(0, 1) != FloatProgression(0, 1)
    assert len({FloatRange(0, 1), FloatRange(0.0, 1.0)}) == 1


def test_string_forms():
    assert str(FloatProgression(0, 10, 0.25)) == "0.0..10.0 step 0.25"
    assert str(FloatProgression(10, 0, -2)) == "10.0 downTo 0.0 step 2.0"
    assert str(FloatRange(0, 10)) == "0.0..10.0"
    assert repr(FloatRange(0, 1, 0.5)) == "FloatRange(first=0.0, last=1.0, step=0.5)"
