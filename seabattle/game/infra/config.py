"""Engine configuration and env loading."""

from __future__ import annotations

import os
from collections.abc import Sequence
from dataclasses import dataclass
from pathlib import Path

from seabattle.game.core.fleet import PLACEMENT_ATTEMPTS, PLACEMENT_RESTARTS
from seabattle.game.core.models import BOARD_SIZE

BOT_MIN_DELAY_MS = 750
BOT_MAX_DELAY_MS = 1500


@dataclass(frozen=True, slots=True)
class EngineSettings:
    """Immutable engine tunables."""

    board_size: int = BOARD_SIZE
    bot_min_delay_ms: int = BOT_MIN_DELAY_MS
    bot_max_delay_ms: int = BOT_MAX_DELAY_MS
    placement_attempts: int = PLACEMENT_ATTEMPTS
    placement_restarts: int = PLACEMENT_RESTARTS


def load_settings() -> EngineSettings:
    """Load engine settings from env vars, falling back to defaults."""
    board_size = _int("SEABATTLE_BOARD_SIZE", BOARD_SIZE)
    min_delay = max(0, _int("SEABATTLE_BOT_MIN_DELAY_MS", BOT_MIN_DELAY_MS))
    max_delay = max(min_delay, _int("SEABATTLE_BOT_MAX_DELAY_MS", BOT_MAX_DELAY_MS))
    return EngineSettings(
        board_size=board_size if board_size > 0 else BOARD_SIZE,
        bot_min_delay_ms=min_delay,
        bot_max_delay_ms=max_delay,
        placement_attempts=max(1, _int("SEABATTLE_PLACEMENT_ATTEMPTS", PLACEMENT_ATTEMPTS)),
        placement_restarts=max(1, _int("SEABATTLE_PLACEMENT_RESTARTS", PLACEMENT_RESTARTS)),
    )


def load_env_file(path: str = ".env", *, override_existing: bool = True) -> None:
    """Load KEY=VALUE pairs from an env file into process environment.

    By default, values from the env file overwrite existing environment variables.
    """
    env_path = Path(path)
    if not env_path.exists():
        return

    for raw_line in env_path.read_text(encoding="utf-8").splitlines():
        line = raw_line.strip()
        if not line or line.startswith("#"):
            continue
        if "=" not in line:
            continue

        key, value = line.split("=", 1)
        key = key.strip()
        value = value.strip()
        if not key:
            continue

        if len(value) >= 2 and value[0] == value[-1] and value[0] in {"'", '"'}:
            value = value[1:-1]

        if override_existing or key not in os.environ:
            os.environ[key] = value


def load_default_env_files(
    *, override_existing: bool = True, paths: Sequence[str] | None = None
) -> None:
    """Load env files with optional local overrides.

    Precedence is left-to-right because later loads may overwrite previous values.
    Default order: .env, then .env.local.
    """
    to_load = tuple(paths) if paths is not None else (".env", ".env.local")
    for path in to_load:
        load_env_file(path, override_existing=override_existing)


def _int(name: str, default: int) -> int:
    raw = os.getenv(name)
    if raw is None:
        return default
    try:
        return int(raw)
    except ValueError:
        return default
