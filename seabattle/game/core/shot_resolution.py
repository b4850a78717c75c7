"""Shot outcome evaluation (miss/shot/killed/rejected)."""

from __future__ import annotations

from collections.abc import Sequence
from dataclasses import dataclass

from seabattle.game.core.board import Board
from seabattle.game.core.models import AttackResult, AttackStatus, CellMark, Position
from seabattle.game.core.ship import Ship


@dataclass(frozen=True, slots=True)
class ShotOutcome:
    """Resolved shot: overall status plus one result per revealed cell.

    `status` is None when the target was off the board or already marked.
    """

    status: AttackStatus | None
    results: tuple[AttackResult, ...] = ()
    ship: Ship | None = None

    @property
    def rejected(self) -> bool:
        return self.status is None


REJECTED = ShotOutcome(status=None)


def resolve_shot(board: Board, ships: Sequence[Ship], position: Position, attacker: int) -> ShotOutcome:
    """Apply one shot to the defender's board and fleet."""
    if not board.is_free(position):
        return REJECTED

    damaged = _damaged_ship(ships, position)
    if damaged is None:
        board.set_value(position, CellMark.MISS)
        return ShotOutcome(
            status=AttackStatus.MISS,
            results=(AttackResult(position, attacker, AttackStatus.MISS),),
        )

    if not damaged.killed:
        board.set_value(position, CellMark.SHOT)
        return ShotOutcome(
            status=AttackStatus.SHOT,
            results=(AttackResult(position, attacker, AttackStatus.SHOT),),
            ship=damaged,
        )

    deck = [cell for cell in damaged.deck_positions if board.is_valid(cell)]
    around = [cell for cell in damaged.around_positions if board.is_valid(cell)]
    board.set_values(deck, CellMark.KILLED)
    board.set_values(around, CellMark.MISS)
    results = [AttackResult(cell, attacker, AttackStatus.KILLED) for cell in deck]
    results.extend(AttackResult(cell, attacker, AttackStatus.MISS) for cell in around)
    return ShotOutcome(status=AttackStatus.KILLED, results=tuple(results), ship=damaged)


def _damaged_ship(ships: Sequence[Ship], position: Position) -> Ship | None:
    for ship in ships:
        if ship.get_shot(position):
            return ship
    return None
