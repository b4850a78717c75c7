import json
import logging

import pytest

from seabattle.game.infra.logging import (
    JsonFormatter,
    LoggingConfig,
    build_logging_config,
    configure_logging,
)


pytestmark = pytest.mark.usefixtures("restore_root_logging")


def test_json_formatter_includes_fields_and_message() -> None:
    logger = logging.getLogger("test.json.formatter")
    record = logger.makeRecord(
        name=logger.name,
        level=logging.INFO,
        fn=__file__,
        lno=1,
        msg="hello %s",
        args=("world",),
        exc_info=None,
        extra={"custom": 1},
    )
    payload = json.loads(JsonFormatter().format(record))
    assert payload["msg"] == "hello world"
    assert payload["level"] == "INFO"
    assert payload["fields"]["custom"] == 1


def test_build_logging_config_reads_env(monkeypatch, tmp_path) -> None:
    monkeypatch.setenv("SEABATTLE_LOG_LEVEL", "debug")
    monkeypatch.setenv("LOG_FORMAT", "JSON")
    monkeypatch.setenv("SEABATTLE_LOG_DIR", str(tmp_path))
    config = build_logging_config()
    assert config.level_name == "DEBUG"
    assert config.console_format == "json"
    assert config.file_path is not None
    assert config.file_path.startswith(str(tmp_path))
    assert config.file_path.endswith(".jsonl")


def test_configure_logging_console_only_sets_level() -> None:
    configure_logging(LoggingConfig(level_name="WARNING", console_format="text"))
    root = logging.getLogger()
    assert root.level == logging.WARNING
    assert len(root.handlers) == 1


def test_configure_logging_writes_json_lines_file(tmp_path) -> None:
    log_file = tmp_path / "logs" / "run.jsonl"
    configure_logging(LoggingConfig(level_name="DEBUG", file_path=str(log_file)))
    logging.getLogger("test.logging.file").info("hello", extra={"game_id": 9})
    # Reconfiguring stops the queue listener, which flushes pending records.
    configure_logging(LoggingConfig())

    lines = log_file.read_text(encoding="utf-8").splitlines()
    entries = [json.loads(line) for line in lines]
    assert any(entry["msg"] == "hello" and entry["fields"]["game_id"] == 9 for entry in entries)
