"""Game aggregate: roster, fleets, turn order and win detection."""

from __future__ import annotations

import logging
import random
from collections.abc import Sequence
from dataclasses import dataclass, field

from seabattle.game.core.board import Board
from seabattle.game.core.errors import (
    AttackError,
    GameError,
    GameFinishedError,
    InvalidPlayerError,
)
from seabattle.game.core.fleet import PLACEMENT_ATTEMPTS, PLACEMENT_RESTARTS, random_fleet
from seabattle.game.core.models import (
    BOARD_SIZE,
    BOT_ID,
    DEFAULT_FLEET,
    MAX_GAME_ID,
    AttackResult,
    AttackStatus,
    CellMark,
    Position,
    ShipSpec,
)
from seabattle.game.core.ship import Ship
from seabattle.game.core.shot_resolution import resolve_shot
from seabattle.game.core.state_machine import GameState, ensure_transition
from seabattle.game.infra.config import EngineSettings

logger = logging.getLogger(__name__)


@dataclass(slots=True)
class PlayerSlot:
    """One roster seat with the fleet and board the player submitted."""

    player_id: int
    ships: list[Ship] = field(default_factory=list)
    board: Board | None = None

    @property
    def has_fleet(self) -> bool:
        return self.board is not None

    @property
    def defeated(self) -> bool:
        return self.has_fleet and all(ship.killed for ship in self.ships)


class Game:
    """Rules engine for one two-player match.

    Calls for a single game must be serialized by the caller. Stale or
    out-of-turn requests are absorbed as empty results; misuse that points to a
    caller bug raises a `GameError` subclass.
    """

    def __init__(
        self,
        first_player_id: int,
        *,
        board_size: int = BOARD_SIZE,
        rng: random.Random | None = None,
        placement_attempts: int = PLACEMENT_ATTEMPTS,
        placement_restarts: int = PLACEMENT_RESTARTS,
    ) -> None:
        if board_size <= 0:
            raise ValueError(f"Board size must be positive, got {board_size}.")
        self._rng = rng if rng is not None else random.Random()
        self._id = self._rng.randrange(MAX_GAME_ID)
        self._board_size = board_size
        self._placement_attempts = placement_attempts
        self._placement_restarts = placement_restarts
        self._slots: list[PlayerSlot] = [PlayerSlot(first_player_id)]
        self._current_player = first_player_id
        self._winner: int | None = None
        self._state = GameState.ROOM_OPENED
        logger.info("game_created game_id=%s player=%s", self._id, first_player_id)

    @property
    def id(self) -> int:
        return self._id

    @property
    def state(self) -> GameState:
        return self._state

    @property
    def board_size(self) -> int:
        return self._board_size

    @property
    def players(self) -> tuple[int, ...]:
        return tuple(slot.player_id for slot in self._slots)

    @property
    def is_pvp(self) -> bool:
        return BOT_ID not in self.players

    @property
    def current_player(self) -> int:
        return self._current_player

    @property
    def winner(self) -> int | None:
        return self._winner

    def is_player(self, player_id: int) -> bool:
        return any(slot.player_id == player_id for slot in self._slots)

    def enemy_of(self, player_id: int) -> int | None:
        """Return the other roster member, or None while the room is half empty."""
        slot = self._enemy_slot(player_id)
        return slot.player_id if slot is not None else None

    def add_player(self, player_id: int) -> bool:
        """Seat a second player; return False when the room cannot take them."""
        if not self._can_join(player_id):
            return False
        self._slots.append(PlayerSlot(player_id))
        self._set_state(GameState.GAME_CREATED)
        logger.info("player_joined game_id=%s player=%s", self._id, player_id)
        return True

    def add_bot(self) -> bool:
        """Seat the bot opponent with a randomly placed fleet."""
        if not self._can_join(BOT_ID):
            return False
        ships = self._random_ships(BOT_ID)
        self.add_player(BOT_ID)
        slot = self._slot(BOT_ID)
        slot.board = Board(self._board_size)
        slot.ships = ships
        return True

    def add_ships(self, player_id: int, ship_specs: Sequence[ShipSpec]) -> None:
        """Register a player's fleet; the game starts once both fleets are in."""
        self._guard_player(player_id, "add_ships")
        if self._state is not GameState.GAME_CREATED:
            return
        slot = self._slot(player_id)
        ships = [Ship.from_spec(spec) for spec in ship_specs]
        slot.board = Board(self._board_size)
        slot.ships = ships
        logger.debug("ships_added game_id=%s player=%s count=%d", self._id, player_id, len(slot.ships))
        if not all(item.has_fleet for item in self._slots):
            return
        self._current_player = self._rng.choice(self.players)
        self._set_state(GameState.GAME_STARTED)
        logger.info("game_started game_id=%s first_turn=%s", self._id, self._current_player)

    def add_random_ships(self, player_id: int) -> None:
        """Register a randomly placed standard fleet for the player."""
        self._guard_player(player_id, "add_random_ships")
        if self._state is not GameState.GAME_CREATED:
            return
        self.add_ships(player_id, [ship.to_spec() for ship in self._random_ships(player_id)])

    def player_ships(self, player_id: int) -> list[ShipSpec]:
        """Return the player's fleet as submitted, or an empty list."""
        slot = self._find_slot(player_id)
        if slot is None:
            return []
        return [ship.to_spec() for ship in slot.ships]

    def cell_mark(self, player_id: int, position: Position) -> CellMark | None:
        """Return the mark on the player's own board, None when off board or no fleet."""
        slot = self._find_slot(player_id)
        if slot is None or slot.board is None:
            return None
        return slot.board.get_value(position)

    def get_random_attack_position(self, player_id: int) -> Position | None:
        """Pick a random unresolved cell on the opponent's board."""
        enemy = self._enemy_slot(player_id)
        if enemy is None or enemy.board is None:
            return None
        return enemy.board.get_random_free_position(self._rng)

    def attack(self, player_id: int, position: Position | None = None) -> list[AttackResult]:
        """Resolve an attack by the turn holder; stale requests yield no results."""
        if self._state is not GameState.GAME_STARTED or player_id != self._current_player:
            return []
        enemy = self._enemy_slot(player_id)
        if enemy is None or enemy.board is None:
            return []

        if position is None:
            position = enemy.board.get_random_free_position(self._rng)
            if position is None:
                raise self._misuse(AttackError, "Random attack failed", player_id)

        outcome = resolve_shot(enemy.board, enemy.ships, position, player_id)
        if outcome.rejected:
            return []
        logger.debug(
            "attack game_id=%s player=%s x=%d y=%d status=%s",
            self._id,
            player_id,
            position.x,
            position.y,
            outcome.status,
        )

        if outcome.status is AttackStatus.MISS:
            self._current_player = enemy.player_id
        elif outcome.status is AttackStatus.KILLED and enemy.defeated:
            self._finish(winner=player_id)
        return list(outcome.results)

    def surrender(self, player_id: int) -> int | None:
        """Forfeit for player_id; return the winner, or None without an opponent."""
        self._guard_player(player_id, "surrender")
        enemy = self._enemy_slot(player_id)
        if enemy is None:
            return None
        self._finish(winner=enemy.player_id)
        return enemy.player_id

    def _finish(self, *, winner: int) -> None:
        self._set_state(GameState.GAME_FINISHED)
        self._winner = winner
        logger.info("game_finished game_id=%s winner=%s", self._id, winner)

    def _can_join(self, player_id: int) -> bool:
        return (
            self._state is GameState.ROOM_OPENED
            and len(self._slots) < 2
            and not self.is_player(player_id)
        )

    def _set_state(self, target: GameState) -> None:
        self._state = ensure_transition(self._state, target)

    def _guard_player(self, player_id: int, action: str) -> None:
        if self._state is GameState.GAME_FINISHED:
            raise self._misuse(GameFinishedError, f"Game already finished ({action})", player_id)
        if not self.is_player(player_id):
            raise self._misuse(InvalidPlayerError, f"Invalid player ({action})", player_id)

    def _misuse(self, error_type: type[GameError], message: str, player_id: int) -> GameError:
        logger.warning("%s (game %s, player %s)", message, self._id, player_id)
        return error_type(f"{message} (game {self._id}, player {player_id})")

    def _random_ships(self, player_id: int) -> list[Ship]:
        try:
            return random_fleet(
                self._rng,
                self._board_size,
                DEFAULT_FLEET,
                attempts=self._placement_attempts,
                restarts=self._placement_restarts,
            )
        except GameError:
            logger.warning("random_placement_failed game_id=%s player=%s", self._id, player_id)
            raise

    def _find_slot(self, player_id: int) -> PlayerSlot | None:
        for slot in self._slots:
            if slot.player_id == player_id:
                return slot
        return None

    def _slot(self, player_id: int) -> PlayerSlot:
        slot = self._find_slot(player_id)
        if slot is None:
            raise self._misuse(InvalidPlayerError, "Invalid player", player_id)
        return slot

    def _enemy_slot(self, player_id: int) -> PlayerSlot | None:
        if not self.is_player(player_id):
            return None
        for slot in self._slots:
            if slot.player_id != player_id:
                return slot
        return None


def new_game(
    first_player_id: int,
    *,
    settings: EngineSettings | None = None,
    rng: random.Random | None = None,
) -> Game:
    """Create a game configured from engine settings."""
    settings = settings if settings is not None else EngineSettings()
    return Game(
        first_player_id,
        board_size=settings.board_size,
        rng=rng,
        placement_attempts=settings.placement_attempts,
        placement_restarts=settings.placement_restarts,
    )
