"""Tests for GameConfig normalization and the per-cell time budget."""

from __future__ import annotations

import pytest

from src.game.config import MIN_GRAVITY, GameConfig


def test_defaults():
    config = GameConfig()
    assert (config.board_width, config.board_height) == (12, 20)
    assert config.lock_delay_ms == 500
    assert config.cell_ms() == pytest.approx(1000.0)


def test_malformed_values_are_clamped():
    config = GameConfig(
        board_width=1,
        board_height=0,
        gravity=-3,
        soft_drop_multiplier=0,
        das_ms=-5,
        arr_ms=-1,
        lock_delay_ms=-10,
        queue_size=0,
        game_over_delay_ms=-1,
    )
    assert config.board_width == 4
    assert config.board_height == 4
    assert config.gravity == MIN_GRAVITY
    assert config.soft_drop_multiplier == 1.0
    assert config.das_ms == 0
    assert config.arr_ms == 0
    assert config.lock_delay_ms == 0
    assert config.queue_size == 1
    assert config.game_over_delay_ms == 0


def test_cell_ms_survives_live_edits():
    config = GameConfig()
    config.gravity = 0
    assert config.cell_ms() == pytest.approx(1000.0 / MIN_GRAVITY)


def test_cell_ms_level_and_soft_drop():
    config = GameConfig(gravity=1.0, level_gravity_step=0.2, soft_drop_multiplier=20)
    assert config.cell_ms(level=5) == pytest.approx(500.0)
    assert config.cell_ms(soft_drop=True) == pytest.approx(50.0)


def test_from_dict_ignores_unrelated_keys():
    config = GameConfig.from_dict({"gravity": 2.5, "cell_size": 30, "fps": 60, "seed": 4})
    assert config.gravity == 2.5
    assert config.seed == 4
