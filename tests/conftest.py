"""Shared fixtures"""

import pytest

import analog
from analog import LogLevel, Registry, SinkAppender


@pytest.fixture(autouse=True)
def reset_default_registry():
    """Every test starts and ends with a freshly reset default registry."""
    analog.reset()
    yield
    analog.reset()


@pytest.fixture
def default_appender():
    return SinkAppender.memory()


@pytest.fixture
def registry(default_appender):
    """Isolated registry whose default appender collects into memory."""
    return Registry(default_appender=default_appender)


class RecordingAppender:
    """Minimal third-party appender: records every call it receives."""

    def __init__(self):
        self.calls = []

    def write(self, logger, level, *parts):
        self.calls.append((logger.name, level, parts))


@pytest.fixture
def recorder():
    return RecordingAppender()


LEVEL_METHODS = [
    (LogLevel.TRACE, "trace"),
    (LogLevel.DEBUG, "debug"),
    (LogLevel.INFO, "info"),
    (LogLevel.WARN, "warn"),
    (LogLevel.ERROR, "error"),
    (LogLevel.FATAL, "fatal"),
]
