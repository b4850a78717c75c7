from __future__ import annotations

import logging
import random

import pytest

from seabattle.game.core.models import Orientation, Position, ShipSpec, ShipType, spec_for
from seabattle.game.core.rules import Game
from seabattle.game.core.ship import Ship
from seabattle.game.infra.logging import LoggingConfig, configure_logging

FIRST = 101
SECOND = 202


def make_valid_fleet() -> list[ShipSpec]:
    """Standard ten-ship kit packed into the top five rows, no ships touching."""
    horizontal = Orientation.HORIZONTAL
    return [
        spec_for(ShipType.HUGE, Position(0, 0), horizontal),
        spec_for(ShipType.LARGE, Position(5, 0), horizontal),
        spec_for(ShipType.LARGE, Position(0, 2), horizontal),
        spec_for(ShipType.MEDIUM, Position(4, 2), horizontal),
        spec_for(ShipType.MEDIUM, Position(7, 2), horizontal),
        spec_for(ShipType.MEDIUM, Position(0, 4), horizontal),
        spec_for(ShipType.SMALL, Position(3, 4), horizontal),
        spec_for(ShipType.SMALL, Position(5, 4), horizontal),
        spec_for(ShipType.SMALL, Position(7, 4), horizontal),
        spec_for(ShipType.SMALL, Position(9, 4), horizontal),
    ]


@pytest.fixture
def valid_fleet() -> list[ShipSpec]:
    return make_valid_fleet()


@pytest.fixture
def fleet_cells(valid_fleet: list[ShipSpec]) -> list[list[Position]]:
    """Deck cells of the valid fleet, one list per ship."""
    return [list(Ship.from_spec(spec).deck_positions) for spec in valid_fleet]


@pytest.fixture
def seeded_rng() -> random.Random:
    return random.Random(1337)


@pytest.fixture
def game_factory():
    def _make(
        first_fleet: list[ShipSpec] | None = None,
        second_fleet: list[ShipSpec] | None = None,
        *,
        seed: int = 1337,
        board_size: int = 10,
    ) -> Game:
        game = Game(FIRST, board_size=board_size, rng=random.Random(seed))
        game.add_player(SECOND)
        game.add_ships(FIRST, first_fleet if first_fleet is not None else make_valid_fleet())
        game.add_ships(SECOND, second_fleet if second_fleet is not None else make_valid_fleet())
        return game

    return _make


@pytest.fixture
def started_game(game_factory) -> Game:
    return game_factory()


@pytest.fixture
def restore_root_logging():
    root = logging.getLogger()
    level = root.level
    yield root
    configure_logging(LoggingConfig())
    root.handlers.clear()
    root.setLevel(level)
