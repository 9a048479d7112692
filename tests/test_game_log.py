"""Tests for the CSV game log."""

from __future__ import annotations

import csv

from src.game_log import GameLog


def test_rows_are_appended_with_header(tmp_path):
    path = tmp_path / "games.csv"
    log = GameLog(path)
    log.write({"game": 1, "score": 40, "lines": 1, "level": 0, "highscore": 40, "duration_s": 12.5})
    log.write({"game": 2, "score": 0, "lines": 0, "level": 0, "highscore": 40, "duration_s": 3.0})
    log.shutdown()

    with open(path, newline="", encoding="utf-8") as f:
        rows = list(csv.DictReader(f))
    assert [row["score"] for row in rows] == ["40", "0"]

    log = GameLog(path)
    log.write({"game": 3, "score": 100, "lines": 2, "level": 0, "highscore": 100, "duration_s": 8.0})
    log.shutdown()
    with open(path, newline="", encoding="utf-8") as f:
        rows = list(csv.DictReader(f))
    assert len(rows) == 3
