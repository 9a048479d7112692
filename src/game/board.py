"""
Board logic for the 12x20 playfield.

The board is a 2D numpy array (height x width) of int8 values:
  - 0 = empty cell
  - 1-7 = piece type ID (used for coloring)

There is no hidden buffer zone. Pieces spawn partly above row 0, and cells
above the top edge are treated as free space.
"""

from __future__ import annotations

import numpy as np


class Board:
    """Tetris board with collision detection, merging, and line sweeping.

    Attributes:
        width: Number of columns (default 12).
        height: Number of rows (default 20).
        grid: 2D numpy array of shape (height, width), dtype int8.
    """

    def __init__(self, width: int = 12, height: int = 20) -> None:
        """Initialize an empty board.

        Args:
            width: Number of columns.
            height: Number of rows.
        """
        self.width = width
        self.height = height
        self.grid = np.zeros((self.height, self.width), dtype=np.int8)

    def collide(self, x: int, y: int, shape: np.ndarray) -> bool:
        """Check whether a shape placed at (x, y) overlaps walls, floor, or blocks.

        A filled cell collides if it is:
          - Left of column 0 or right of the last column.
          - On or below the bottom edge (row >= height).
          - On a non-empty board cell (only rows >= 0 are checked).

        Cells above the top edge never collide.

        Args:
            x: Column offset of the shape's top-left corner.
            y: Row offset of the shape's top-left corner.
            shape: Square shape matrix; nonzero cells are filled.

        Returns:
            True if the placement is illegal, False otherwise.
        """
        rows, cols = shape.shape
        for r in range(rows):
            for c in range(cols):
                if shape[r, c] == 0:
                    continue
                board_row = y + r
                board_col = x + c
                if board_col < 0 or board_col >= self.width:
                    return True
                if board_row >= self.height:
                    return True
                if board_row >= 0 and self.grid[board_row, board_col] != 0:
                    return True
        return False

    def merge(self, x: int, y: int, shape: np.ndarray, piece_id: int) -> None:
        """Write a piece into the board at the given position.

        Does NOT check validity first. Filled cells that fall outside the
        board are skipped.

        Args:
            x: Column offset of the shape's top-left corner.
            y: Row offset of the shape's top-left corner.
            shape: Shape matrix; nonzero cells are filled.
            piece_id: Value written into each covered board cell.
        """
        rows, cols = shape.shape
        for r in range(rows):
            for c in range(cols):
                if shape[r, c] == 0:
                    continue
                board_row = y + r
                board_col = x + c
                if 0 <= board_row < self.height and 0 <= board_col < self.width:
                    self.grid[board_row, board_col] = piece_id

    def sweep(self) -> int:
        """Remove full rows bottom-up and drop everything above them.

        After a row is removed, an empty row is inserted at the top and the
        same index is checked again, since the row that shifted into it may
        also be full.

        Returns:
            The number of rows cleared.
        """
        cleared = 0
        row = self.height - 1
        while row >= 0:
            if np.all(self.grid[row] != 0):
                self.grid[1:row + 1] = self.grid[0:row].copy()
                self.grid[0] = 0
                cleared += 1
            else:
                row -= 1
        return cleared

    def drop_distance(self, x: int, y: int, shape: np.ndarray) -> int:
        """Return how many rows a shape can fall from (x, y) before it collides.

        Used for both hard drop and the ghost preview.
        """
        distance = 0
        while not self.collide(x, y + distance + 1, shape):
            distance += 1
        return distance

    def get_grid(self) -> np.ndarray:
        """Return a copy of the board grid.

        Returns:
            A numpy array of shape (height, width), dtype int8.
        """
        return self.grid.copy()

    def is_empty(self) -> bool:
        return not self.grid.any()

    def reset(self) -> None:
        """Clear the entire board, setting all cells to 0."""
        self.grid = np.zeros((self.height, self.width), dtype=np.int8)
