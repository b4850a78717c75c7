"""Game lifecycle states and their allowed transitions."""

from __future__ import annotations

from enum import Enum, auto

from seabattle.game.core.errors import GameStateError


class GameState(Enum):
    """Lifecycle of a single game."""

    ROOM_OPENED = auto()
    GAME_CREATED = auto()
    GAME_STARTED = auto()
    GAME_FINISHED = auto()


ALLOWED_TRANSITIONS: dict[GameState, frozenset[GameState]] = {
    GameState.ROOM_OPENED: frozenset({GameState.GAME_CREATED}),
    GameState.GAME_CREATED: frozenset({GameState.GAME_STARTED, GameState.GAME_FINISHED}),
    GameState.GAME_STARTED: frozenset({GameState.GAME_FINISHED}),
    GameState.GAME_FINISHED: frozenset(),
}


def can_transition(source: GameState, target: GameState) -> bool:
    return target in ALLOWED_TRANSITIONS[source]


def ensure_transition(source: GameState, target: GameState) -> GameState:
    """Return target if the move is allowed, otherwise raise GameStateError."""
    if not can_transition(source, target):
        raise GameStateError(f"Illegal game state transition {source.name} -> {target.name}")
    return target
