"""End-to-end level filtering through configure()"""

import pytest

import analog
from analog import LogLevel, SinkAppender

from conftest import LEVEL_METHODS

# (logger name, level, expected enabled flags trace..fatal)
LEVEL_CASES = [
    ("", LogLevel.ALL, [True, True, True, True, True, True]),
    ("trace", LogLevel.TRACE, [True, True, True, True, True, True]),
    ("debug", LogLevel.DEBUG, [False, True, True, True, True, True]),
    ("info", LogLevel.INFO, [False, False, True, True, True, True]),
    ("warn", LogLevel.WARN, [False, False, False, True, True, True]),
    ("error", LogLevel.ERROR, [False, False, False, False, True, True]),
    ("fatal", LogLevel.FATAL, [False, False, False, False, False, True]),
    ("none", LogLevel.NONE, [False, False, False, False, False, False]),
]


@pytest.fixture
def appenders():
    all_appender = SinkAppender.memory()
    error_appender = SinkAppender.memory(level=LogLevel.ERROR)
    analog.configure({
        "appenders": [
            {"name": "all", "appender": all_appender},
            {"name": "error", "appender": error_appender},
        ],
        "loggers": [{"name": "", "level": LogLevel.ALL, "appenders": ["all", "error"]}]
        + [{"name": name, "level": level} for name, level, _ in LEVEL_CASES[1:]],
    })
    return all_appender, error_appender


def log_all_levels(logger):
    tag = logger.level.label.lower()
    for _, method in LEVEL_METHODS:
        getattr(logger, method)(lambda method=method: f"{tag} {method}")


class TestLevels:
    """Each configured logger filters at its own level."""

    def test_setup(self, appenders):
        all_appender, error_appender = appenders
        root = analog.get_logger()
        assert root.name == ""
        assert root.level == LogLevel.ALL
        assert root.appenders == [all_appender, error_appender]
        for name, level, _ in LEVEL_CASES[1:]:
            logger = analog.get_logger(name)
            assert logger.level == level
            assert logger.appenders == [all_appender, error_appender]

    @pytest.mark.parametrize("name,level,enabled", LEVEL_CASES)
    def test_enabled_flags(self, appenders, name, level, enabled):
        logger = analog.get_logger(name)
        flags = [
            logger.is_trace_enabled,
            logger.is_debug_enabled,
            logger.is_info_enabled,
            logger.is_warn_enabled,
            logger.is_error_enabled,
            logger.is_fatal_enabled,
        ]
        assert flags == enabled
        assert [logger.is_enabled(lvl) for lvl, _ in LEVEL_METHODS] == enabled
        assert logger.is_off == (level == LogLevel.NONE)

    @pytest.mark.parametrize("name,level,enabled", LEVEL_CASES)
    def test_output(self, appenders, name, level, enabled):
        all_appender, error_appender = appenders
        logger = analog.get_logger(name)
        log_all_levels(logger)

        tag = level.label.lower()
        prefix = f" [{name}]" if name else ""
        expected = [
            f"Z] [{lvl.label}]{prefix} {tag} {method}"
            for (lvl, method), on in zip(LEVEL_METHODS, enabled) if on
        ]
        buffer = all_appender.sink.buffer
        assert len(buffer) == len(expected)
        for line, suffix in zip(buffer, expected):
            assert line.endswith(suffix)

        error_expected = [s for s in expected if "[Error]" in s or "[Fatal]" in s]
        error_buffer = error_appender.sink.buffer
        assert len(error_buffer) == len(error_expected)
        for line, suffix in zip(error_buffer, error_expected):
            assert line.endswith(suffix)

    def test_root_scenario(self, appenders):
        all_appender, error_appender = appenders
        log_all_levels(analog.get_logger())

        assert len(all_appender.sink.buffer) == 6
        assert all_appender.sink.buffer[0].endswith("Z] [Trace] all trace")
        assert all_appender.sink.buffer[5].endswith("Z] [Fatal] all fatal")
        assert len(error_appender.sink.buffer) == 2
        assert error_appender.sink.buffer[0].endswith("Z] [Error] all error")
        assert error_appender.sink.buffer[1].endswith("Z] [Fatal] all fatal")
