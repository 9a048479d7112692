"""
The active (falling) piece and its board-relative moves.

All legality checks go through Board.collide. A failed move or rotation
leaves the piece exactly as it was.
"""

from __future__ import annotations

from dataclasses import dataclass

import numpy as np

from src.game.board import Board
from src.game.pieces import PIECE_BY_NAME, create_piece, rotate

# Horizontal offsets tried after a rotation, in order
KICK_OFFSETS: tuple[int, ...] = (0, 1, -1, 2, -2)

# Pieces appear this many rows above the visible top edge
SPAWN_MARGIN = 1


@dataclass
class ActivePiece:
    """Mutable state of the piece currently under player control.

    Attributes:
        kind: Piece letter (I, O, T, S, Z, J, L).
        shape: Square shape matrix with the piece id in filled cells.
        x: Column of the shape's top-left corner.
        y: Row of the shape's top-left corner (negative while above the board).
        grounded: True while a surface is directly below the piece.
        lock_ms: Time spent grounded since the last lock-delay reset.
    """

    kind: str
    shape: np.ndarray
    x: int
    y: int
    grounded: bool = False
    lock_ms: float = 0.0

    @classmethod
    def spawn(cls, kind: str, board_width: int) -> "ActivePiece":
        """Create a fresh piece centered horizontally above the board."""
        shape = create_piece(kind)
        x = board_width // 2 - shape.shape[1] // 2
        return cls(kind=kind, shape=shape, x=x, y=-SPAWN_MARGIN)

    @property
    def piece_id(self) -> int:
        return PIECE_BY_NAME[self.kind]["id"]

    def reset_lock(self) -> None:
        """Give the player a fresh lock-delay window."""
        self.lock_ms = 0.0
        self.grounded = False

    def collides(self, board: Board) -> bool:
        return board.collide(self.x, self.y, self.shape)

    def can_fall(self, board: Board) -> bool:
        return not board.collide(self.x, self.y + 1, self.shape)

    def move(self, board: Board, dx: int) -> bool:
        """Shift the piece one step horizontally.

        Args:
            board: Board used for the collision test.
            dx: -1 for left, +1 for right.

        Returns:
            True if the piece moved (lock delay is reset), False if blocked.
        """
        self.x += dx
        if board.collide(self.x, self.y, self.shape):
            self.x -= dx
            return False
        self.reset_lock()
        return True

    def step_down(self, board: Board) -> bool:
        """Move one row down; roll back and report False on contact."""
        self.y += 1
        if board.collide(self.x, self.y, self.shape):
            self.y -= 1
            return False
        return True

    def rotate(self, board: Board, direction: int) -> bool:
        """Rotate in place, trying small horizontal kicks if the turn is blocked.

        The offsets in KICK_OFFSETS are tried at the current row. The first
        free placement is kept. If every offset collides, the shape and
        position are restored.

        Args:
            board: Board used for the collision tests.
            direction: CW (positive) or CCW (negative).

        Returns:
            True if the rotation was applied, False if it was rejected.
        """
        original_shape = self.shape.copy()
        original_x = self.x
        rotate(self.shape, direction)
        for offset in KICK_OFFSETS:
            if not board.collide(original_x + offset, self.y, self.shape):
                self.x = original_x + offset
                self.reset_lock()
                return True
        self.shape[:] = original_shape
        self.x = original_x
        return False

    def drop_distance(self, board: Board) -> int:
        return board.drop_distance(self.x, self.y, self.shape)

    def cells(self) -> list[tuple[int, int]]:
        """Return the (column, row) board coordinates of every filled cell."""
        rows, cols = np.nonzero(self.shape)
        return [(self.x + int(c), self.y + int(r)) for r, c in zip(rows, cols)]
