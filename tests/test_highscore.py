"""Tests for highscore persistence."""

from __future__ import annotations

from src.highscore import HighscoreStore


def test_missing_file_loads_zero(tmp_path):
    assert HighscoreStore(tmp_path / "none.yaml").load() == 0


def test_save_then_load(tmp_path):
    store = HighscoreStore(tmp_path / "nested" / "best.yaml")
    store.save(1234)
    assert HighscoreStore(store.path).load() == 1234


def test_corrupt_files_load_zero(tmp_path):
    path = tmp_path / "best.yaml"
    path.write_text("highscore: [unclosed\n", encoding="utf-8")
    assert HighscoreStore(path).load() == 0
    path.write_text("just some text\n", encoding="utf-8")
    assert HighscoreStore(path).load() == 0
    path.write_text("highscore: lots\n", encoding="utf-8")
    assert HighscoreStore(path).load() == 0


def test_unwritable_location_is_reported_not_raised(tmp_path, capsys):
    blocker = tmp_path / "not_a_dir"
    blocker.write_text("", encoding="utf-8")
    store = HighscoreStore(blocker / "best.yaml")

    assert store.save(900) is False
    assert "Could not save highscore" in capsys.readouterr().out
    assert store.load() == 0


def test_save_reports_success(tmp_path):
    assert HighscoreStore(tmp_path / "best.yaml").save(10) is True
