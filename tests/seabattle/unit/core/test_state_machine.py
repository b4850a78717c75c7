import pytest

from seabattle.game.core.errors import GameStateError
from seabattle.game.core.state_machine import GameState, can_transition, ensure_transition


def test_forward_transitions_are_allowed() -> None:
    assert ensure_transition(GameState.ROOM_OPENED, GameState.GAME_CREATED) is GameState.GAME_CREATED
    assert can_transition(GameState.GAME_CREATED, GameState.GAME_STARTED)
    assert can_transition(GameState.GAME_CREATED, GameState.GAME_FINISHED)
    assert can_transition(GameState.GAME_STARTED, GameState.GAME_FINISHED)


@pytest.mark.parametrize(
    ("source", "target"),
    [
        (GameState.ROOM_OPENED, GameState.GAME_STARTED),
        (GameState.ROOM_OPENED, GameState.GAME_FINISHED),
        (GameState.GAME_STARTED, GameState.GAME_CREATED),
        (GameState.GAME_FINISHED, GameState.GAME_STARTED),
        (GameState.GAME_FINISHED, GameState.GAME_FINISHED),
    ],
)
def test_illegal_transitions_raise(source: GameState, target: GameState) -> None:
    assert not can_transition(source, target)
    with pytest.raises(GameStateError):
        ensure_transition(source, target)
