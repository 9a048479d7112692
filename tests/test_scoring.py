"""Tests for line-clear scoring and level progression."""

from __future__ import annotations

from src.game.scoring import Scoring


def test_single_and_tetris_at_level_zero():
    scoring = Scoring()
    assert scoring.award(1) == 40
    scoring.reset()
    assert scoring.award(4) == 1200
    assert scoring.lines == 4


def test_level_multiplier():
    scoring = Scoring(lines=10, level=1)
    assert scoring.award(1) == 80
    assert scoring.level == 1


def test_level_is_lines_div_ten():
    scoring = Scoring()
    for _ in range(3):
        scoring.award(4)
    assert scoring.lines == 12
    assert scoring.level == 1


def test_no_clear_no_points():
    scoring = Scoring()
    assert scoring.award(0) == 0
    assert scoring.snapshot() == {"score": 0, "lines": 0, "level": 0, "highscore": 0}


def test_highscore_tracks_best_and_survives_reset():
    scoring = Scoring(highscore=100)
    scoring.award(2)
    assert not scoring.beat_highscore()
    scoring.award(2)
    assert scoring.beat_highscore()
    assert scoring.highscore == 200
    scoring.reset()
    assert scoring.score == 0
    assert scoring.highscore == 200
