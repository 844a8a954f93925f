"""Tests for declarative configuration"""

import pytest

from analog import AnalogConfig, AppenderConfig, LoggerConfig, LogLevel, SinkAppender


class TestConfigDataclasses:
    """Validation in __post_init__."""

    def test_logger_config_coerces_level(self):
        assert LoggerConfig(name="x", level="warn").level is LogLevel.WARN
        assert LoggerConfig(name="x", level=2).level is LogLevel.DEBUG

    def test_logger_config_defaults(self):
        config = LoggerConfig(name="x", level=LogLevel.INFO)
        assert config.appenders == []

    def test_logger_config_invalid_level(self):
        with pytest.raises(ValueError):
            LoggerConfig(name="x", level="loud")

    def test_logger_config_invalid_appender(self):
        with pytest.raises(TypeError):
            LoggerConfig(name="x", level=LogLevel.INFO, appenders=[42])

    def test_appender_config_requires_write(self):
        with pytest.raises(TypeError):
            AppenderConfig(name="x", appender=object())

    def test_from_dict_requires_loggers(self):
        with pytest.raises(ValueError):
            AnalogConfig.from_dict({"appenders": []})

    def test_from_dict(self):
        mem = SinkAppender.memory()
        config = AnalogConfig.from_dict({
            "appenders": [{"name": "mem", "appender": mem}],
            "loggers": [{"name": "", "level": "info", "appenders": ["mem"]}],
        })
        assert config.appenders == [AppenderConfig(name="mem", appender=mem)]
        assert config.loggers == [LoggerConfig(name="", level=LogLevel.INFO, appenders=["mem"])]

    def test_to_dict_round_trip(self):
        config = AnalogConfig(loggers=[LoggerConfig(name="db", level=LogLevel.ERROR)])
        data = config.to_dict()
        assert data["loggers"][0]["level"] == "Error"
        assert AnalogConfig.from_dict(data) == config


class TestConfigure:
    """Registry.configure resolution rules."""

    def test_named_and_inline_appenders(self, registry):
        named = SinkAppender.memory()
        inline = SinkAppender.memory()
        registry.configure({
            "appenders": [{"name": "named", "appender": named}],
            "loggers": [{"name": "x", "level": LogLevel.INFO, "appenders": ["named", inline]}],
        })
        assert registry.get_appender("named") is named
        assert registry.get_logger("x").appenders == [named, inline]

    def test_without_root_uses_default_appender(self, registry, default_appender):
        registry.configure({"loggers": [{"name": "x", "level": LogLevel.WARN}]})
        logger = registry.get_logger("x")
        assert logger.level == LogLevel.WARN
        assert logger.appenders == [default_appender]
        assert registry.root is None

    def test_later_entries_inherit_root_appenders(self, registry):
        mem = SinkAppender.memory()
        registry.configure(AnalogConfig(loggers=[
            LoggerConfig(name="", level=LogLevel.DEBUG, appenders=[mem]),
            LoggerConfig(name="child", level=LogLevel.ERROR),
        ]))
        assert registry.root.level == LogLevel.DEBUG
        assert registry.get_logger("child").appenders == [mem]
        assert registry.get_logger("child").level == LogLevel.ERROR

    def test_entry_order_matters(self, registry, default_appender):
        mem = SinkAppender.memory()
        registry.configure({"loggers": [
            {"name": "early", "level": LogLevel.INFO},
            {"name": "", "level": LogLevel.INFO, "appenders": [mem]},
            {"name": "late", "level": LogLevel.INFO},
        ]})
        assert registry.get_logger("early").appenders == [default_appender]
        assert registry.get_logger("late").appenders == [mem]

    def test_configure_overwrites_existing_logger(self, registry):
        before = registry.get_logger("x", LogLevel.DEBUG)
        registry.configure({"loggers": [{"name": "x", "level": LogLevel.FATAL}]})
        after = registry.get_logger("x")
        assert after is not before
        assert after.level == LogLevel.FATAL

    def test_unknown_appender_name(self, registry):
        with pytest.raises(ValueError):
            registry.configure({"loggers": [{"name": "x", "level": LogLevel.INFO, "appenders": ["nope"]}]})

    def test_unknown_appender_leaves_registry_unchanged(self, registry):
        mem = SinkAppender.memory()
        with pytest.raises(ValueError):
            registry.configure({
                "appenders": [{"name": "mem", "appender": mem}],
                "loggers": [
                    {"name": "", "level": LogLevel.INFO, "appenders": ["mem"]},
                    {"name": "x", "level": LogLevel.INFO, "appenders": ["typo"]},
                ],
            })
        assert registry.get_appender_names() == [""]
        assert registry.get_logger_names() == []
        assert registry.root is None

    def test_name_from_same_config_resolves(self, registry):
        mem = SinkAppender.memory()
        registry.configure({
            "appenders": [{"name": "mem", "appender": mem}],
            "loggers": [{"name": "x", "level": LogLevel.INFO, "appenders": ["mem"]}],
        })
        assert registry.get_logger("x").appenders == [mem]
