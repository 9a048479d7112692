"""
Manual play mode.

The outer loop is thin: it turns pygame key edges into InputEvents, feeds
the frame time to TetrisGame.advance(), and asks the renderer to draw.
All DAS/ARR, gravity, and lock-delay timing lives in the game itself.
"""

from __future__ import annotations

import pathlib
from typing import Any

try:
    import pygame
except ImportError:
    pygame = None  # type: ignore[assignment]

from src.audio import SoundBoard
from src.game.config import GameConfig
from src.game.tetris import InputEvent, TetrisGame
from src.game_log import GameLog
from src.highscore import HighscoreStore
from src.renderer import TetrisRenderer


# ── Keyboard mapping for manual play ─────────────────────────────────────
# Arrow keys for movement, Up/X and Z for rotation, Space for hard drop,
# C / Shift for hold, P pause, R restart
KEYDOWN_MAP: dict[int, InputEvent] = {}
KEYUP_MAP: dict[int, InputEvent] = {}
if pygame is not None:
    KEYDOWN_MAP = {
        pygame.K_LEFT: InputEvent.MOVE_LEFT_START,
        pygame.K_RIGHT: InputEvent.MOVE_RIGHT_START,
        pygame.K_DOWN: InputEvent.SOFT_DROP_START,
        pygame.K_UP: InputEvent.ROTATE_CW,
        pygame.K_x: InputEvent.ROTATE_CW,
        pygame.K_z: InputEvent.ROTATE_CCW,
        pygame.K_SPACE: InputEvent.HARD_DROP,
        pygame.K_c: InputEvent.HOLD,
        pygame.K_LSHIFT: InputEvent.HOLD,
        pygame.K_RSHIFT: InputEvent.HOLD,
        pygame.K_p: InputEvent.PAUSE_TOGGLE,
        pygame.K_r: InputEvent.RESET,
    }
    KEYUP_MAP = {
        pygame.K_LEFT: InputEvent.MOVE_LEFT_STOP,
        pygame.K_RIGHT: InputEvent.MOVE_RIGHT_STOP,
        pygame.K_DOWN: InputEvent.SOFT_DROP_STOP,
    }


def play_manual(
    config: dict[str, Any],
    highscore_path: str | pathlib.Path | None = None,
    log_path: str | pathlib.Path | None = None,
) -> None:
    """Run the game in manual (human) play mode.

    The player uses keyboard controls:
      - Left/Right arrow: move piece (hold for auto-repeat)
      - Down arrow: soft drop
      - Space: hard drop
      - Up arrow / X: rotate clockwise
      - Z: rotate counter-clockwise
      - C / Shift: hold piece
      - P: pause, R: restart
      - Escape / close window: quit

    Args:
        config: Config dict loaded from settings.yaml.
        highscore_path: YAML file holding the best score (overrides config).
        log_path: Optional CSV file; one row is appended per finished game.
    """
    if pygame is None:
        raise ImportError("pygame is required for play mode. Install it: pip install pygame")

    reduced = bool(config.get("reduced_effects", False))
    fps = config.get("reduced_fps", 30) if reduced else config.get("fps", 60)
    cell_size = config.get("cell_size", 30)
    highscore_path = highscore_path or config.get("highscore_file", "highscore.yaml")

    store = HighscoreStore(highscore_path)
    sounds = SoundBoard(enabled=bool(config.get("sound", True)))
    game = TetrisGame(
        GameConfig.from_dict(config),
        on_cue=sounds.play,
        highscore=store.load(),
        on_highscore=store.save,
    )
    renderer = TetrisRenderer(
        game,
        cell_size=cell_size,
        glow=bool(config.get("neon_glow", True)) and not reduced,
        preview_count=game.config.queue_size,
    )
    # Force renderer init before event loop (pygame must be initialized for event.get())
    renderer.draw()
    game_log = GameLog(log_path) if log_path else None

    clock = pygame.time.Clock()
    games_played = 0
    game_start_ms = pygame.time.get_ticks()
    was_over = False
    running = True

    while running:
        for event in pygame.event.get():
            if event.type == pygame.QUIT:
                running = False
                break
            elif event.type == pygame.KEYDOWN:
                if event.key == pygame.K_ESCAPE:
                    running = False
                    break
                if event.key in KEYDOWN_MAP:
                    game.handle(KEYDOWN_MAP[event.key])
                    if event.key == pygame.K_r:
                        game_start_ms = pygame.time.get_ticks()
            elif event.type == pygame.KEYUP:
                if event.key in KEYUP_MAP:
                    game.handle(KEYUP_MAP[event.key])

        if not running:
            break

        dt = clock.tick(fps)
        game.advance(dt)

        if game.game_over and not was_over:
            games_played += 1
            duration_s = (pygame.time.get_ticks() - game_start_ms) / 1000.0
            print(
                f"Game {games_played} | Score: {game.score} | Lines: {game.lines}"
                f" | Level: {game.level} | Best: {game.highscore}"
            )
            if game_log is not None:
                game_log.write({"game": games_played, **game.scoring.snapshot(),
                                "duration_s": round(duration_s, 1)})
        elif was_over and not game.game_over:
            game_start_ms = pygame.time.get_ticks()
        was_over = game.game_over

        renderer.draw()

    if game_log is not None:
        game_log.shutdown()
    renderer.close()
