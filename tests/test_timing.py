"""Tests for DAS/ARR auto-repeat."""

from __future__ import annotations

from src.game.timing import LEFT, RIGHT, ShiftRepeat

DAS = 170
ARR = 30


def test_no_direction_no_steps():
    shift = ShiftRepeat()
    assert shift.update(1000, DAS, ARR, 12) == 0


def test_repeat_starts_after_das_then_every_arr():
    shift = ShiftRepeat()
    shift.press(RIGHT)
    assert shift.update(100, DAS, ARR, 12) == 0
    assert shift.update(70, DAS, ARR, 12) == 1
    assert shift.update(29, DAS, ARR, 12) == 0
    assert shift.update(1, DAS, ARR, 12) == 1


def test_long_frame_yields_several_steps():
    shift = ShiftRepeat()
    shift.press(LEFT)
    assert shift.update(290, DAS, ARR, 12) == -5


def test_zero_arr_slides_instantly():
    shift = ShiftRepeat()
    shift.press(RIGHT)
    assert shift.update(DAS, DAS, 0, 12) == 12


def test_release_falls_back_to_other_held_direction():
    shift = ShiftRepeat()
    shift.press(LEFT)
    shift.update(100, DAS, ARR, 12)
    shift.press(RIGHT)
    assert shift.direction == RIGHT
    shift.release(RIGHT)
    assert shift.direction == LEFT
    assert shift.held_ms == 0
    shift.release(LEFT)
    assert shift.direction == 0


def test_releasing_inactive_direction_keeps_charge():
    shift = ShiftRepeat()
    shift.press(RIGHT)
    shift.update(100, DAS, ARR, 12)
    shift.release(LEFT)
    assert shift.direction == RIGHT
    assert shift.held_ms == 100


def test_clear():
    shift = ShiftRepeat()
    shift.press(RIGHT)
    shift.clear()
    assert shift.update(500, DAS, ARR, 12) == 0
