"""
Gameplay tunables.

Values come from config/settings.yaml (see main.load_config) and are
normalized on construction: anything that would break the timing math
(non-positive gravity, negative delays, a board smaller than a piece) is
clamped to a safe minimum instead of raising.
"""

from __future__ import annotations

import dataclasses
from dataclasses import dataclass
from typing import Any

# Slowest gravity accepted, in cells per second
MIN_GRAVITY = 0.05

# Smallest board that still fits the 4x4 I piece
MIN_BOARD_SIZE = 4


@dataclass
class GameConfig:
    """Simulation tunables. Timing fields are re-read every frame.

    Attributes:
        board_width: Columns on the playfield.
        board_height: Rows on the playfield.
        gravity: Base fall speed in cells per second.
        level_gravity_step: Extra cells per second added per level.
        soft_drop_multiplier: Gravity speed-up while soft drop is held.
        das_ms: Delayed auto shift before horizontal repeat starts.
        arr_ms: Auto repeat interval (0 = slide to the wall instantly).
        lock_delay_ms: Grace time on the ground before a piece locks.
        queue_size: Number of upcoming pieces kept in the lookahead queue.
        game_over_delay_ms: How long the frozen board is shown before reset.
        seed: Optional seed for the bag randomizer.
    """

    board_width: int = 12
    board_height: int = 20
    gravity: float = 1.0
    level_gravity_step: float = 0.2
    soft_drop_multiplier: float = 20.0
    das_ms: float = 170.0
    arr_ms: float = 30.0
    lock_delay_ms: float = 500.0
    queue_size: int = 5
    game_over_delay_ms: float = 1200.0
    seed: int | None = None

    def __post_init__(self) -> None:
        self.board_width = max(MIN_BOARD_SIZE, int(self.board_width))
        self.board_height = max(MIN_BOARD_SIZE, int(self.board_height))
        self.gravity = max(MIN_GRAVITY, float(self.gravity))
        self.level_gravity_step = max(0.0, float(self.level_gravity_step))
        self.soft_drop_multiplier = max(1.0, float(self.soft_drop_multiplier))
        self.das_ms = max(0.0, float(self.das_ms))
        self.arr_ms = max(0.0, float(self.arr_ms))
        self.lock_delay_ms = max(0.0, float(self.lock_delay_ms))
        self.queue_size = max(1, int(self.queue_size))
        self.game_over_delay_ms = max(0.0, float(self.game_over_delay_ms))

    @classmethod
    def from_dict(cls, config: dict[str, Any]) -> "GameConfig":
        """Build a GameConfig from a loaded YAML dict, ignoring unrelated keys.

        Args:
            config: Flat dict of settings (renderer keys may be mixed in).

        Returns:
            A normalized GameConfig.
        """
        names = {field.name for field in dataclasses.fields(cls)}
        return cls(**{key: value for key, value in config.items() if key in names})

    def cell_ms(self, level: int = 0, soft_drop: bool = False) -> float:
        """Return the time budget for the piece to fall one cell.

        Gravity is clamped again here because the fields may be edited
        while a game is running.

        Args:
            level: Current level; each level adds level_gravity_step.
            soft_drop: Whether the soft-drop input is held.

        Returns:
            Milliseconds per cell.
        """
        rate = max(MIN_GRAVITY, self.gravity) + level * max(0.0, self.level_gravity_step)
        if soft_drop:
            rate *= max(1.0, self.soft_drop_multiplier)
        return 1000.0 / rate
