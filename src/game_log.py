"""
CSV log of finished games, written off the render thread.
"""

from __future__ import annotations

import csv
import pathlib
import queue as queue_mod
import threading

GAME_LOG_FIELDNAMES = [
    "game",
    "score",
    "lines",
    "level",
    "highscore",
    "duration_s",
]


class GameLog:
    """Thread-backed CSV logger that appends one row per finished game."""

    def __init__(self, path: str | pathlib.Path, fieldnames: list[str] | None = None) -> None:
        self._path = pathlib.Path(path)
        self._fieldnames = fieldnames or GAME_LOG_FIELDNAMES
        self._queue: queue_mod.Queue = queue_mod.Queue()
        self._thread = threading.Thread(target=self._writer, daemon=True)
        self._thread.start()

    def _writer(self) -> None:
        header_written = self._path.exists() and self._path.stat().st_size > 0
        while True:
            row = self._queue.get()
            if row is None:
                break
            try:
                self._path.parent.mkdir(parents=True, exist_ok=True)
                with open(self._path, "a", newline="", encoding="utf-8") as f:
                    w = csv.DictWriter(f, fieldnames=self._fieldnames, extrasaction="ignore")
                    if not header_written:
                        w.writeheader()
                        header_written = True
                    w.writerow(row)
                    f.flush()
            except OSError as e:
                print(f"GameLog error: {e}", flush=True)

    def write(self, row: dict) -> None:
        self._queue.put_nowait(row)

    def shutdown(self) -> None:
        self._queue.put(None)
        self._thread.join(timeout=5)
