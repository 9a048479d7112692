"""Tests for the 7-bag randomizer and the lookahead queue."""

from __future__ import annotations

import random

from src.game.pieces import PIECE_NAMES
from src.game.randomizer import PieceQueue, SevenBag


def test_seven_draws_are_a_permutation():
    bag = SevenBag(random.Random(1))
    draws = [bag.next() for _ in range(7)]
    assert sorted(draws) == sorted(PIECE_NAMES)


def test_fourteen_draws_are_two_permutations():
    bag = SevenBag(random.Random(2))
    draws = [bag.next() for _ in range(14)]
    assert sorted(draws[:7]) == sorted(PIECE_NAMES)
    assert sorted(draws[7:]) == sorted(PIECE_NAMES)


def test_long_run_stays_aligned():
    bag = SevenBag(random.Random(3))
    draws = [bag.next() for _ in range(70)]
    for start in range(0, 70, 7):
        assert len(set(draws[start:start + 7])) == 7


def test_same_seed_same_sequence():
    a = SevenBag(random.Random(99))
    b = SevenBag(random.Random(99))
    assert [a.next() for _ in range(21)] == [b.next() for _ in range(21)]


def test_reset_starts_a_fresh_bag():
    bag = SevenBag(random.Random(4))
    for _ in range(3):
        bag.next()
    bag.reset()
    assert sorted(bag.next() for _ in range(7)) == sorted(PIECE_NAMES)


def test_queue_length_restored_after_take():
    queue = PieceQueue(SevenBag(random.Random(5)), size=5)
    for _ in range(20):
        queue.take()
        assert len(queue) == 5


def test_queue_take_returns_front_in_bag_order():
    queue = PieceQueue(SevenBag(random.Random(6)), size=3)
    reference = SevenBag(random.Random(6))
    expected = [reference.next() for _ in range(10)]
    taken = [queue.take() for _ in range(7)]
    assert taken == expected[:7]
    assert queue.peek() == expected[7:10]


def test_queue_peek_and_clear():
    queue = PieceQueue(SevenBag(random.Random(7)), size=4)
    queue.fill()
    assert len(queue.peek(2)) == 2
    queue.clear()
    assert len(queue) == 0
