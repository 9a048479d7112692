"""
Tetromino catalog and in-place matrix rotation.

Each piece is described by a single square spawn matrix. Rotation is not
table driven: a spawned copy is rotated in place by transposing the matrix
and then flipping it, so every template must be square (the I piece uses
a 4x4 box, O a 2x2 box, the rest 3x3).

Coordinate convention:
  - Row 0 of a matrix is the top of the piece; rows grow downward.
  - Column 0 is the left edge; columns grow rightward.
"""

from __future__ import annotations

import numpy as np

# =============================================================================
# Piece Colors — standard Tetris guideline colors (RGB)
# =============================================================================

COLOR_CYAN   = (0, 255, 255)    # I
COLOR_YELLOW = (255, 255, 0)    # O
COLOR_PURPLE = (128, 0, 128)    # T
COLOR_GREEN  = (0, 255, 0)      # S
COLOR_RED    = (255, 0, 0)      # Z
COLOR_BLUE   = (0, 0, 255)      # J
COLOR_ORANGE = (255, 165, 0)    # L


def _template(rows: list[list[int]]) -> np.ndarray:
    """Build a read-only int8 template so shared shapes cannot be mutated."""
    matrix = np.array(rows, dtype=np.int8)
    matrix.setflags(write=False)
    return matrix


# =============================================================================
# Tetromino Definitions
# =============================================================================
# 1 marks a filled cell. The spawned copy gets the piece id stamped in.

I_PIECE: dict = {
    "id": 1,
    "name": "I",
    "color": COLOR_CYAN,
    "shape": _template([
        [0, 0, 0, 0],
        [1, 1, 1, 1],
        [0, 0, 0, 0],
        [0, 0, 0, 0],
    ]),
}

O_PIECE: dict = {
    "id": 2,
    "name": "O",
    "color": COLOR_YELLOW,
    "shape": _template([
        [1, 1],
        [1, 1],
    ]),
}

T_PIECE: dict = {
    "id": 3,
    "name": "T",
    "color": COLOR_PURPLE,
    "shape": _template([
        [0, 1, 0],
        [1, 1, 1],
        [0, 0, 0],
    ]),
}

S_PIECE: dict = {
    "id": 4,
    "name": "S",
    "color": COLOR_GREEN,
    "shape": _template([
        [0, 1, 1],
        [1, 1, 0],
        [0, 0, 0],
    ]),
}

Z_PIECE: dict = {
    "id": 5,
    "name": "Z",
    "color": COLOR_RED,
    "shape": _template([
        [1, 1, 0],
        [0, 1, 1],
        [0, 0, 0],
    ]),
}

J_PIECE: dict = {
    "id": 6,
    "name": "J",
    "color": COLOR_BLUE,
    "shape": _template([
        [1, 0, 0],
        [1, 1, 1],
        [0, 0, 0],
    ]),
}

L_PIECE: dict = {
    "id": 7,
    "name": "L",
    "color": COLOR_ORANGE,
    "shape": _template([
        [0, 0, 1],
        [1, 1, 1],
        [0, 0, 0],
    ]),
}

# =============================================================================
# Ordered list of all piece types and the two lookup tables
# =============================================================================

PIECE_TYPES: list[dict] = [I_PIECE, O_PIECE, T_PIECE, S_PIECE, Z_PIECE, J_PIECE, L_PIECE]

PIECE_NAMES: tuple[str, ...] = tuple(piece["name"] for piece in PIECE_TYPES)

PIECE_BY_NAME: dict[str, dict] = {piece["name"]: piece for piece in PIECE_TYPES}
PIECE_BY_ID: dict[int, dict] = {piece["id"]: piece for piece in PIECE_TYPES}

# Rotation directions
CW = 1
CCW = -1


def create_piece(kind: str) -> np.ndarray:
    """Return a fresh, writable shape matrix for a piece kind.

    Occupied cells hold the kind's id rather than 1, so merging the shape
    into the board can copy values directly.

    Args:
        kind: Piece letter, one of PIECE_NAMES.

    Returns:
        Square int8 numpy array owned by the caller.

    Raises:
        KeyError: If kind is not a known piece letter.
    """
    piece = PIECE_BY_NAME[kind]
    return piece["shape"] * np.int8(piece["id"])


def rotate(shape: np.ndarray, direction: int) -> None:
    """Rotate a square shape matrix 90 degrees in place.

    The matrix is transposed, then each row is reversed for a clockwise
    turn or the row order is reversed for a counter-clockwise turn.

    Args:
        shape: Square numpy array, modified in place.
        direction: CW (positive) or CCW (negative).

    Raises:
        ValueError: If the matrix is not square.
    """
    rows, cols = shape.shape
    if rows != cols:
        raise ValueError(f"Cannot rotate a non-square {rows}x{cols} shape")
    shape[:] = shape.T.copy()
    if direction > 0:
        shape[:] = shape[:, ::-1].copy()
    else:
        shape[:] = shape[::-1].copy()


def lowest_row(shape: np.ndarray) -> int:
    """Return the index of the lowest matrix row holding a filled cell."""
    filled_rows = np.flatnonzero(shape.any(axis=1))
    return int(filled_rows[-1])
