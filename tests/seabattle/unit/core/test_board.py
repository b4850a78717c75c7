import random

import pytest

from seabattle.game.core.board import Board
from seabattle.game.core.models import CellMark, Position


def test_board_validity_and_out_of_range_sentinel() -> None:
    board = Board()
    assert board.size == 10
    assert board.is_valid(Position(0, 0))
    assert board.is_valid(Position(9, 9))
    assert not board.is_valid(Position(10, 0))
    assert not board.is_valid(Position(0, -1))
    assert board.get_value(Position(-1, 3)) is None
    assert board.get_value(Position(3, 3)) is CellMark.UNKNOWN


def test_set_value_ignores_out_of_range_and_marks_cells() -> None:
    board = Board(4)
    board.set_value(Position(4, 0), CellMark.MISS)
    assert board.free_count() == 16

    board.set_values([Position(1, 0), Position(0, 1), Position(-1, -1)], CellMark.SHOT)
    assert board.get_value(Position(1, 0)) is CellMark.SHOT
    assert board.get_value(Position(0, 1)) is CellMark.SHOT
    assert not board.is_free(Position(1, 0))
    assert board.is_free(Position(0, 0))
    assert not board.is_free(Position(7, 7))
    assert board.free_count() == 14


def test_free_positions_are_row_major() -> None:
    board = Board(2)
    board.set_value(Position(1, 0), CellMark.MISS)
    assert board.free_positions() == [Position(0, 0), Position(0, 1), Position(1, 1)]


def test_random_free_position_only_returns_free_cells(seeded_rng: random.Random) -> None:
    board = Board(3)
    free = {Position(2, 1), Position(0, 2)}
    for y in range(3):
        for x in range(3):
            if Position(x, y) not in free:
                board.set_value(Position(x, y), CellMark.MISS)

    picks = {board.get_random_free_position(seeded_rng) for _ in range(50)}
    assert picks == free


def test_random_free_position_on_full_board_is_none(seeded_rng: random.Random) -> None:
    board = Board(2)
    board.set_values(board.free_positions(), CellMark.KILLED)
    assert board.get_random_free_position(seeded_rng) is None


def test_board_rejects_non_positive_size() -> None:
    with pytest.raises(ValueError):
        Board(0)
