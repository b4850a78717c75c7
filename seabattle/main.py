"""Bot-vs-bot self-play entry point."""

from __future__ import annotations

import argparse
import logging
import random
from collections.abc import Sequence

from seabattle.game.ai.bot import RandomBot
from seabattle.game.core.rules import new_game
from seabattle.game.core.state_machine import GameState
from seabattle.game.infra.config import EngineSettings, load_default_env_files, load_settings
from seabattle.game.infra.logging import setup_logging

logger = logging.getLogger(__name__)

FIRST_BOT_ID = 1
SECOND_BOT_ID = 2
MAX_TURNS = 10_000


def play_selfplay_game(settings: EngineSettings, rng: random.Random) -> int | None:
    """Play one full game between two random bots and return the winner id."""
    game = new_game(FIRST_BOT_ID, settings=settings, rng=rng)
    game.add_player(SECOND_BOT_ID)
    game.add_random_ships(FIRST_BOT_ID)
    game.add_random_ships(SECOND_BOT_ID)
    bots = {
        bot_id: RandomBot.from_settings(settings, rng, player_id=bot_id)
        for bot_id in (FIRST_BOT_ID, SECOND_BOT_ID)
    }

    turns = 0
    while game.state is GameState.GAME_STARTED and turns < MAX_TURNS:
        bots[game.current_player].play_turn(game)
        turns += 1
    logger.info("selfplay_finished game_id=%s winner=%s turns=%d", game.id, game.winner, turns)
    return game.winner


def main(argv: Sequence[str] | None = None) -> int:
    """Run a single self-play match and return the process exit code."""
    parser = argparse.ArgumentParser(description="Play a bot-vs-bot SeaBattle game.")
    parser.add_argument("--seed", type=int, default=None, help="random seed for reproducible games")
    args = parser.parse_args(argv)

    load_default_env_files()
    setup_logging()
    winner = play_selfplay_game(load_settings(), random.Random(args.seed))
    logger.info("selfplay_winner winner=%s", winner)
    return 0


if __name__ == "__main__":
    raise SystemExit(main())
