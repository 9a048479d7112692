"""
7-bag randomizer and the lookahead queue fed by it.

The bag is a shuffled permutation of all seven piece kinds. It is drained
in order and reshuffled only once exhausted, so each aligned run of seven
draws contains every kind exactly once.
"""

from __future__ import annotations

import collections
import random

from src.game.pieces import PIECE_NAMES


class SevenBag:
    """Shuffle-then-drain piece generator.

    Attributes:
        rng: Random source used for shuffling (injectable for tests).
    """

    def __init__(self, rng: random.Random | None = None) -> None:
        self.rng = rng if rng is not None else random.Random()
        self._bag: list[str] = []
        self._index: int = 0

    def next(self) -> str:
        """Return the next piece kind, reshuffling when the bag runs out."""
        if not self._bag or self._index >= len(self._bag):
            self._refill()
        kind = self._bag[self._index]
        self._index += 1
        return kind

    def reset(self) -> None:
        """Discard the current bag; the next draw starts a fresh one."""
        self._bag = []
        self._index = 0

    def _refill(self) -> None:
        bag = list(PIECE_NAMES)
        self.rng.shuffle(bag)  # Fisher-Yates
        self._bag = bag
        self._index = 0


class PieceQueue:
    """Lookahead queue of upcoming piece kinds with a fixed minimum length.

    Attributes:
        bag: The randomizer the queue draws from.
        size: Minimum number of kinds kept in the queue.
    """

    def __init__(self, bag: SevenBag, size: int = 5) -> None:
        self.bag = bag
        self.size = size
        self._queue: collections.deque[str] = collections.deque()

    def fill(self) -> None:
        """Draw from the bag until the queue holds at least `size` kinds."""
        while len(self._queue) < self.size:
            self._queue.append(self.bag.next())

    def take(self) -> str:
        """Consume the front kind and top the queue back up.

        Returns:
            The piece kind that should spawn next.
        """
        self.fill()
        kind = self._queue.popleft()
        self.fill()
        return kind

    def peek(self, count: int | None = None) -> list[str]:
        """Return up to `count` upcoming kinds without consuming them."""
        items = list(self._queue)
        return items if count is None else items[:count]

    def clear(self) -> None:
        self._queue.clear()

    def __len__(self) -> int:
        return len(self._queue)
