"""Logger builder pattern"""

from typing import List, Optional, Union

from analog.appenders.base_appender import Appender
from analog.core.log_level import LogLevel
from analog.core.logger import Logger
from analog.core.registry import Registry, get_registry


class LoggerBuilder:
    """
    Builder for registered loggers.

    Unset fields fall back to the registry defaults: the root logger's
    level and the appender registered under "".

    Example:
        logger = (LoggerBuilder()
            .with_name("db")
            .with_level(LogLevel.DEBUG)
            .with_appender_name("errors")
            .build())
    """

    def __init__(self, registry: Optional[Registry] = None):
        self._registry = registry or get_registry()
        self._name = ""
        self._level: Optional[LogLevel] = None
        self._appenders: List[Union[str, Appender]] = []

    def with_name(self, name: str) -> "LoggerBuilder":
        """Set logger name."""
        self._name = name
        return self

    def with_level(self, level: LogLevel) -> "LoggerBuilder":
        """Set threshold."""
        self._level = LogLevel.coerce(level)
        return self

    def with_appender(self, appender: Appender) -> "LoggerBuilder":
        """Add an appender instance."""
        self._appenders.append(appender)
        return self

    def with_appender_name(self, name: str) -> "LoggerBuilder":
        """Add an appender registered under ``name``; resolved at build time."""
        self._appenders.append(name)
        return self

    def build(self) -> Logger:
        """
        Build, register and return the logger.

        Raises:
            ValueError: If an appender name is not registered
        """
        appenders = []
        for ref in self._appenders:
            if isinstance(ref, str):
                appender = self._registry.get_appender(ref)
                if appender is None:
                    raise ValueError(f"Unknown appender: '{ref}'")
                appenders.append(appender)
            else:
                appenders.append(ref)
        return self._registry.add_logger(self._name, self._level, appenders)
