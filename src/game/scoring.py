"""
Line-clear scoring, level progression, and highscore tracking.

Uses NES-style scoring: points for a clear are the base value for the
number of rows times (level + 1). The level goes up every 10 lines.
"""

from __future__ import annotations

from dataclasses import dataclass
from typing import Any

# Index = rows cleared in one sweep (0-4)
LINE_SCORES: tuple[int, ...] = (0, 40, 100, 300, 1200)

LINES_PER_LEVEL = 10


@dataclass
class Scoring:
    """Score state for one game plus the best score seen across games.

    Attributes:
        score: Points this game.
        lines: Rows cleared this game.
        level: lines // LINES_PER_LEVEL.
        highscore: Highest score observed, carried over resets.
    """

    score: int = 0
    lines: int = 0
    level: int = 0
    highscore: int = 0

    def award(self, cleared: int) -> int:
        """Apply a sweep result.

        Args:
            cleared: Rows removed by the sweep.

        Returns:
            Points earned (0 when nothing was cleared).
        """
        if cleared <= 0:
            return 0
        base = LINE_SCORES[min(cleared, len(LINE_SCORES) - 1)]
        points = base * (self.level + 1)
        self.score += points
        self.lines += cleared
        self.level = self.lines // LINES_PER_LEVEL
        return points

    def beat_highscore(self) -> bool:
        """Raise the highscore if the current score passed it."""
        if self.score > self.highscore:
            self.highscore = self.score
            return True
        return False

    def reset(self) -> None:
        self.score = 0
        self.lines = 0
        self.level = 0

    def snapshot(self) -> dict[str, Any]:
        return {
            "score": self.score,
            "lines": self.lines,
            "level": self.level,
            "highscore": self.highscore,
        }
