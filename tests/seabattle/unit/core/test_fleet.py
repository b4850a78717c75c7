import random

import pytest

from seabattle.game.core.board import Board
from seabattle.game.core.errors import PlacementError
from seabattle.game.core.fleet import place_ship_randomly, random_fleet
from seabattle.game.core.models import DEFAULT_FLEET, CellMark, Orientation, Position, ShipType
from seabattle.game.core.ship import Ship


def _in_bounds(cell: Position, size: int = 10) -> bool:
    return 0 <= cell.x < size and 0 <= cell.y < size


@pytest.mark.parametrize("seed", range(25))
def test_random_fleet_places_standard_kit_without_touching(seed: int) -> None:
    ships = random_fleet(random.Random(seed))

    assert [ship.ship_type for ship in ships] == list(DEFAULT_FLEET)
    for ship in ships:
        assert all(_in_bounds(cell) for cell in ship.deck_positions)
        assert ship.length == ship.ship_type.size
        assert not ship.killed

    for i, ship in enumerate(ships):
        for other in ships[i + 1 :]:
            assert not set(ship.deck_positions) & set(other.footprint)
            assert not set(other.deck_positions) & set(ship.footprint)


def test_random_fleet_is_reproducible_for_a_seed() -> None:
    first = [ship.to_spec() for ship in random_fleet(random.Random(42))]
    second = [ship.to_spec() for ship in random_fleet(random.Random(42))]
    assert first == second


def test_random_fleet_raises_when_kit_cannot_fit() -> None:
    with pytest.raises(PlacementError):
        random_fleet(random.Random(1), size=2, kit=(ShipType.HUGE,), attempts=5, restarts=3)


def test_place_ship_randomly_flips_orientation_to_fit() -> None:
    board = Board(4)
    for y in range(4):
        board.set_values([Position(x, y) for x in range(1, 4)], CellMark.MISS)
    ship = Ship(Position(4, 4), Orientation.HORIZONTAL, 4)

    assert place_ship_randomly(board, ship, random.Random(3), attempts=200)
    assert ship.position == Position(0, 0)
    assert ship.orientation is Orientation.VERTICAL


def test_place_ship_randomly_fails_on_full_board() -> None:
    board = Board(3)
    board.set_values(board.free_positions(), CellMark.MISS)
    ship = Ship(Position(0, 0), Orientation.HORIZONTAL, 1)
    assert not place_ship_randomly(board, ship, random.Random(3), attempts=10)
