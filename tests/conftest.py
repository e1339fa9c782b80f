import pytest
from loguru import logger

from cmdhistory.core.commands.history import HistoryEngine
from cmdhistory.core.config import HistoryOptions
from cmdhistory.text import TextBuffer


@pytest.fixture
def caplog(caplog):
    """Route loguru records into pytest's caplog."""
    handler_id = logger.add(caplog.handler, format="{message}", level=0)
    yield caplog
    logger.remove(handler_id)


class Recorder:
    """Target that keeps the names of applied operations, oldest first."""
    def __init__(self):
        self.applied = []


@pytest.fixture
def recorder():
    return Recorder()


@pytest.fixture
def history(recorder):
    return HistoryEngine(recorder)


@pytest.fixture
def buffer():
    return TextBuffer()


@pytest.fixture
def text_history(buffer):
    return HistoryEngine(buffer, HistoryOptions())
