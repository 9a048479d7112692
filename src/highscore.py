"""
Highscore persistence: a single integer kept in a small YAML file.
"""

from __future__ import annotations

import pathlib

import yaml


class HighscoreStore:
    """Loads and saves the best score across sessions.

    Attributes:
        path: Location of the YAML file ({"highscore": <int>}).
    """

    def __init__(self, path: str | pathlib.Path) -> None:
        self.path = pathlib.Path(path)

    def load(self) -> int:
        """Return the stored highscore, or 0 if the file is missing or unreadable."""
        if not self.path.exists():
            return 0
        try:
            with open(self.path, "r", encoding="utf-8") as f:
                data = yaml.safe_load(f)
        except (OSError, yaml.YAMLError) as e:
            print(f"Ignoring unreadable highscore file {self.path}: {e}")
            return 0
        if not isinstance(data, dict):
            return 0
        try:
            return max(0, int(data.get("highscore", 0)))
        except (TypeError, ValueError):
            return 0

    def save(self, score: int) -> bool:
        """Write a new highscore, creating the parent directory if needed.

        Write failures are printed and swallowed so a read-only location
        never interrupts a running game.

        Returns:
            True if the file was written.
        """
        try:
            self.path.parent.mkdir(parents=True, exist_ok=True)
            with open(self.path, "w", encoding="utf-8") as f:
                yaml.safe_dump({"highscore": int(score)}, f)
        except OSError as e:
            print(f"Could not save highscore to {self.path}: {e}")
            return False
        return True
