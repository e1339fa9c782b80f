import json
import sys

import pytest
from loguru import logger
from pydantic import ValidationError

from cmdhistory.core.bootstrap import HistoryBuilder
from cmdhistory.core.config import ConfigManager, HistoryOptions
from cmdhistory.core.commands.history import HistoryEngine
from cmdhistory.core.logging import setup_logging
from cmdhistory.text import TextBuffer, InsertText


@pytest.fixture
def config(tmp_path):
    path = tmp_path / "config.json"
    path.write_text(json.dumps({
        "general": {"debug_mode": False, "log_dir": str(tmp_path / "logs")},
        "history": {"max_history": 4},
    }), encoding="utf-8")
    return ConfigManager(str(path))


@pytest.fixture
def restore_logger():
    yield
    logger.remove()
    logger.add(sys.stderr)


def test_builder_defaults_to_unbounded(buffer):
    history = HistoryBuilder(buffer).build()
    assert isinstance(history, HistoryEngine)
    assert history.target is buffer
    assert history.max_history is None


def test_builder_reads_config(buffer, config):
    history = HistoryBuilder(buffer).with_config(config).build()
    assert history.max_history == 4


def test_explicit_capacity_wins_over_config(buffer, config):
    builder = HistoryBuilder(buffer).with_config(config)
    assert builder.with_max_history(10).build().max_history == 10
    assert builder.unbounded().build().max_history is None


def test_builder_rejects_invalid_capacity(buffer):
    with pytest.raises(ValidationError):
        HistoryBuilder(buffer).with_max_history(0).build()


def test_builder_options_are_frozen(buffer):
    options = HistoryBuilder(buffer).with_max_history(3).options()
    assert options == HistoryOptions(max_history=3)


def test_each_build_is_independent(buffer):
    builder = HistoryBuilder(buffer)
    first = builder.build()
    second = builder.build()

    first.execute(InsertText("x"))

    assert first is not second
    assert second.can_undo is False


def test_builder_with_logging_uses_config(tmp_path, config, restore_logger):
    HistoryBuilder(TextBuffer()).with_config(config).with_logging().build()
    logger.complete()
    assert any((tmp_path / "logs").iterdir())


def test_setup_logging_without_file_sink(tmp_path, monkeypatch, restore_logger):
    monkeypatch.chdir(tmp_path)
    setup_logging(debug_mode=False, log_dir=None)
    assert list(tmp_path.iterdir()) == []


def test_setup_logging_creates_log_dir(tmp_path, restore_logger):
    log_dir = tmp_path / "nested" / "logs"
    setup_logging(log_dir=str(log_dir))
    assert log_dir.is_dir()
