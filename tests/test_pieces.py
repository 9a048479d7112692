"""Tests for the piece catalog and in-place rotation."""

from __future__ import annotations

import numpy as np
import pytest

from src.game.pieces import (
    CCW,
    CW,
    PIECE_BY_ID,
    PIECE_BY_NAME,
    PIECE_NAMES,
    PIECE_TYPES,
    create_piece,
    lowest_row,
    rotate,
)


def test_catalog_tables_agree():
    assert len(PIECE_TYPES) == 7
    assert sorted(PIECE_BY_ID) == [1, 2, 3, 4, 5, 6, 7]
    for piece in PIECE_TYPES:
        assert PIECE_BY_NAME[piece["name"]] is piece
        assert PIECE_BY_ID[piece["id"]] is piece
        rows, cols = piece["shape"].shape
        assert rows == cols
        assert int(np.count_nonzero(piece["shape"])) == 4


def test_create_piece_returns_stamped_copy():
    shape = create_piece("T")
    assert set(np.unique(shape)) == {0, 3}
    shape[0, 0] = 9
    assert PIECE_BY_NAME["T"]["shape"][0, 0] == 0


def test_templates_are_read_only():
    with pytest.raises(ValueError):
        PIECE_BY_NAME["O"]["shape"][0, 0] = 5


def test_unknown_kind():
    with pytest.raises(KeyError):
        create_piece("X")


def test_rotate_t_clockwise_and_counter_clockwise():
    cw = create_piece("T")
    rotate(cw, CW)
    assert np.array_equal(cw != 0, [[0, 1, 0], [0, 1, 1], [0, 1, 0]])

    ccw = create_piece("T")
    rotate(ccw, CCW)
    assert np.array_equal(ccw != 0, [[0, 1, 0], [1, 1, 0], [0, 1, 0]])


@pytest.mark.parametrize("kind", PIECE_NAMES)
@pytest.mark.parametrize("direction", [CW, CCW])
def test_four_rotations_restore_shape(kind, direction):
    shape = create_piece(kind)
    original = shape.copy()
    for _ in range(4):
        rotate(shape, direction)
    assert np.array_equal(shape, original)


def test_rotate_rejects_non_square():
    with pytest.raises(ValueError):
        rotate(np.zeros((2, 3), dtype=np.int8), CW)


def test_lowest_row():
    assert lowest_row(create_piece("I")) == 1
    assert lowest_row(create_piece("O")) == 1
    assert lowest_row(create_piece("J")) == 1
