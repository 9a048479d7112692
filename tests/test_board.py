"""Tests for Board collision, merge, and sweep."""

from __future__ import annotations

import numpy as np

from src.game.board import Board
from src.game.pieces import create_piece


def test_collide_walls_and_floor():
    board = Board()
    t = create_piece("T")
    assert not board.collide(4, 5, t)
    assert board.collide(-1, 5, t)
    assert not board.collide(9, 5, t)
    assert board.collide(10, 5, t)
    # T's bottom matrix row is empty, so y=18 still fits on a 20-row board
    assert not board.collide(4, 18, t)
    assert board.collide(4, 19, t)


def test_cells_above_the_top_never_collide():
    board = Board()
    board.grid[0, :] = 3
    t = create_piece("T")
    assert not board.collide(4, -2, t)
    assert board.collide(4, -1, t)


def test_collide_with_filled_cell():
    board = Board()
    board.grid[10, 5] = 3
    t = create_piece("T")
    assert board.collide(4, 9, t)
    assert not board.collide(7, 9, t)


def test_merge_writes_piece_id_and_clips_above_top():
    board = Board()
    board.merge(4, -1, create_piece("I"), 1)
    assert list(board.grid[0, 4:8]) == [1, 1, 1, 1]
    assert int(np.count_nonzero(board.grid)) == 4

    board.reset()
    board.merge(0, -2, create_piece("O"), 2)
    assert board.is_empty()


def test_sweep_removes_rows_and_keeps_order():
    board = Board(width=4, height=8)
    partial = {
        0: [5, 0, 0, 0],
        1: [0, 6, 0, 0],
        3: [0, 0, 0, 4],
        4: [0, 0, 3, 0],
        6: [0, 2, 0, 0],
        7: [1, 0, 0, 0],
    }
    for row, values in partial.items():
        board.grid[row] = values
    board.grid[2] = [1, 2, 3, 4]
    board.grid[5] = [7, 7, 7, 7]

    assert board.sweep() == 2

    expected = np.zeros((8, 4), dtype=np.int8)
    for new_row, old_row in enumerate([0, 1, 3, 4, 6, 7], start=2):
        expected[new_row] = partial[old_row]
    assert np.array_equal(board.grid, expected)


def test_sweep_rechecks_the_same_row():
    board = Board(width=4, height=6)
    board.grid[4] = 1
    board.grid[5] = 2
    board.grid[3] = [1, 0, 1, 0]
    assert board.sweep() == 2
    assert list(board.grid[5]) == [1, 0, 1, 0]
    assert not board.grid[:5].any()


def test_sweep_without_full_rows():
    board = Board()
    board.grid[19, :-1] = 4
    assert board.sweep() == 0
    assert int(np.count_nonzero(board.grid)) == 11


def test_drop_distance():
    board = Board()
    o = create_piece("O")
    assert board.drop_distance(0, 0, o) == 18
    board.grid[10, 0] = 1
    assert board.drop_distance(0, 0, o) == 8
