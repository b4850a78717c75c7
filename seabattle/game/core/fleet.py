"""Randomized fleet placement with non-touching ships."""

from __future__ import annotations

import logging
import random
from collections.abc import Sequence

from seabattle.game.core.board import Board
from seabattle.game.core.errors import PlacementError
from seabattle.game.core.models import (
    BOARD_SIZE,
    DEFAULT_FLEET,
    CellMark,
    Orientation,
    Position,
    ShipType,
)
from seabattle.game.core.ship import Ship

logger = logging.getLogger(__name__)

PLACEMENT_ATTEMPTS = 200
PLACEMENT_RESTARTS = 100


def random_fleet(
    rng: random.Random,
    size: int = BOARD_SIZE,
    kit: Sequence[ShipType] = DEFAULT_FLEET,
    *,
    attempts: int = PLACEMENT_ATTEMPTS,
    restarts: int = PLACEMENT_RESTARTS,
) -> list[Ship]:
    """Place every ship of the kit so that no two ships touch, diagonals included.

    Each ship gets at most `attempts` anchors; a fleet that cannot be completed
    is discarded and rebuilt from an empty board, at most `restarts` times.
    """
    for restart in range(max(1, restarts)):
        ships = _generate_non_touching_fleet(rng, size, kit, attempts)
        if ships is not None:
            if restart:
                logger.debug("random_fleet placed after restarts=%d", restart)
            return ships
    raise PlacementError(
        f"Random ship placement failed (board {size}x{size}, {len(kit)} ships, "
        f"{restarts} restarts of {attempts} attempts)"
    )


def _generate_non_touching_fleet(
    rng: random.Random,
    size: int,
    kit: Sequence[ShipType],
    attempts: int,
) -> list[Ship] | None:
    scratch = Board(size)
    ships: list[Ship] = []
    for ship_type in kit:
        orientation = rng.choice((Orientation.HORIZONTAL, Orientation.VERTICAL))
        ship = Ship(Position(size, size), orientation, ship_type.size, ship_type)
        if not place_ship_randomly(scratch, ship, rng, attempts):
            return None
        scratch.set_values(ship.footprint, CellMark.MISS)
        ships.append(ship)
    return ships


def place_ship_randomly(board: Board, ship: Ship, rng: random.Random, attempts: int) -> bool:
    """Move the ship onto free cells of the scratch board; False when out of tries."""
    for _ in range(attempts):
        anchor = board.get_random_free_position(rng)
        if anchor is None:
            return False
        ship.position = anchor
        if _fits(board, ship):
            return True
        ship.orientation = ship.orientation.flipped
        if _fits(board, ship):
            return True
    return False


def _fits(board: Board, ship: Ship) -> bool:
    return all(board.is_free(cell) for cell in ship.deck_positions)
