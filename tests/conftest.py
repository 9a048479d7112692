"""Shared fixtures for the game tests."""

from __future__ import annotations

import random

import pytest

from src.game.config import GameConfig
from src.game.tetris import TetrisGame


@pytest.fixture
def make_game():
    """Factory for seeded games that record every audio cue they emit."""

    def _make(seed: int = 7, **overrides) -> TetrisGame:
        cues: list[str] = []
        game = TetrisGame(
            GameConfig(**overrides),
            rng=random.Random(seed),
            on_cue=cues.append,
        )
        game.cues = cues  # type: ignore[attr-defined]
        return game

    return _make
