"""Board state representation and mutation helpers."""

from __future__ import annotations

import random
from collections.abc import Iterable

import numpy as np

from seabattle.game.core.models import BOARD_SIZE, CellMark, Position


class Board:
    """Numpy-backed grid of cell marks with no game semantics."""

    __slots__ = ("_size", "_marks")

    def __init__(self, size: int = BOARD_SIZE) -> None:
        if size <= 0:
            raise ValueError(f"Board size must be positive, got {size}.")
        self._size = size
        self._marks = np.zeros((size, size), dtype=np.int8)

    @property
    def size(self) -> int:
        return self._size

    def is_valid(self, position: Position) -> bool:
        """Return whether the position lies on the board."""
        return 0 <= position.x < self._size and 0 <= position.y < self._size

    def get_value(self, position: Position) -> CellMark | None:
        """Return the cell mark, or None when the position is off the board."""
        if not self.is_valid(position):
            return None
        return CellMark(int(self._marks[position.y, position.x]))

    def set_value(self, position: Position, mark: CellMark) -> None:
        if not self.is_valid(position):
            return
        self._marks[position.y, position.x] = int(mark)

    def set_values(self, positions: Iterable[Position], mark: CellMark) -> None:
        for position in positions:
            self.set_value(position, mark)

    def is_free(self, position: Position) -> bool:
        """Return whether the position is on the board and still unmarked."""
        return self.get_value(position) is CellMark.UNKNOWN

    def free_positions(self) -> list[Position]:
        """Return every unmarked cell in row-major order."""
        return [self._position(int(index)) for index in self._free_indexes()]

    def free_count(self) -> int:
        return int(self._free_indexes().size)

    def get_random_free_position(self, rng: random.Random) -> Position | None:
        """Pick uniformly among the currently unmarked cells."""
        free = self._free_indexes()
        if free.size == 0:
            return None
        return self._position(int(free[rng.randrange(free.size)]))

    def _free_indexes(self) -> np.ndarray:
        return np.flatnonzero(self._marks == CellMark.UNKNOWN)

    def _position(self, index: int) -> Position:
        return Position(x=index % self._size, y=index // self._size)
