"""Engine exception types raised on caller misuse."""

from __future__ import annotations


class GameError(RuntimeError):
    """Base class for errors the engine reports to its caller."""


class GameFinishedError(GameError):
    """Raised when placement or surrender targets a finished game."""


class InvalidPlayerError(GameError):
    """Raised when a player outside the roster acts on a game."""


class PlacementError(GameError):
    """Raised when randomized fleet placement runs out of attempts."""


class AttackError(GameError):
    """Raised when a random attack has no free cell to target."""


class GameStateError(GameError):
    """Raised on a state change outside the allowed transition table."""
