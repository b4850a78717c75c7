"""Random bot opponent driven by the caller's scheduler."""

from __future__ import annotations

import logging
import random
from dataclasses import dataclass

from seabattle.game.core.models import BOT_ID, AttackResult, Position
from seabattle.game.core.rules import Game
from seabattle.game.core.state_machine import GameState
from seabattle.game.infra.config import BOT_MAX_DELAY_MS, BOT_MIN_DELAY_MS, EngineSettings

logger = logging.getLogger(__name__)


@dataclass(frozen=True, slots=True)
class BotMove:
    """A planned bot attack and how long the caller should wait before it."""

    delay_seconds: float
    position: Position


class RandomBot:
    """Bot that fires at uniformly random unresolved cells."""

    def __init__(
        self,
        rng: random.Random,
        *,
        min_delay_ms: int = BOT_MIN_DELAY_MS,
        max_delay_ms: int = BOT_MAX_DELAY_MS,
        player_id: int = BOT_ID,
    ) -> None:
        if min_delay_ms < 0 or max_delay_ms < min_delay_ms:
            raise ValueError(f"Invalid bot delay range {min_delay_ms}..{max_delay_ms} ms.")
        self._rng = rng
        self._min_delay_ms = min_delay_ms
        self._max_delay_ms = max_delay_ms
        self._player_id = player_id

    @classmethod
    def from_settings(
        cls, settings: EngineSettings, rng: random.Random, *, player_id: int = BOT_ID
    ) -> RandomBot:
        return cls(
            rng,
            min_delay_ms=settings.bot_min_delay_ms,
            max_delay_ms=settings.bot_max_delay_ms,
            player_id=player_id,
        )

    @property
    def player_id(self) -> int:
        return self._player_id

    def think_delay(self) -> float:
        """Seconds the caller should wait before issuing the bot's move."""
        return self._rng.uniform(self._min_delay_ms, self._max_delay_ms) / 1000.0

    def is_my_turn(self, game: Game) -> bool:
        return game.state is GameState.GAME_STARTED and game.current_player == self._player_id

    def plan_move(self, game: Game) -> BotMove | None:
        """Return the next move, or None when the bot is not on turn."""
        if not self.is_my_turn(game):
            return None
        position = game.get_random_attack_position(self._player_id)
        if position is None:
            return None
        return BotMove(delay_seconds=self.think_delay(), position=position)

    def play_turn(self, game: Game) -> list[AttackResult]:
        """Fire one shot at a random cell; empty when the bot is not on turn."""
        move = self.plan_move(game)
        if move is None:
            return []
        results = game.attack(self._player_id, move.position)
        logger.debug(
            "bot_attack game_id=%s bot=%s x=%d y=%d results=%d",
            game.id,
            self._player_id,
            move.position.x,
            move.position.y,
            len(results),
        )
        return results
