"""
Declarative configuration

Mirrors the mapping accepted by ``configure``::

    {
        "appenders": [{"name": "errors", "appender": appender}],
        "loggers": [{"name": "", "level": "info", "appenders": ["errors"]}],
    }
"""

from dataclasses import dataclass, field
from typing import Any, Dict, List, Mapping, Union

from analog.core.log_level import LogLevel


def _is_appender(value: Any) -> bool:
    return callable(getattr(value, "write", None))


@dataclass
class AppenderConfig:
    """A named appender to register."""

    name: str
    appender: Any

    def __post_init__(self):
        """Validate configuration after initialization."""
        if not isinstance(self.name, str):
            raise TypeError("appender name must be a string")
        if not _is_appender(self.appender):
            raise TypeError(f"appender '{self.name}' does not provide write()")


@dataclass
class LoggerConfig:
    """
    A named logger to create.

    Attributes:
        name: Logger name, "" for the root logger
        level: Threshold (LogLevel, rank or level name)
        appenders: Appender names and/or appender instances. Empty means
                   inherit the root logger's appenders.
    """

    name: str
    level: LogLevel
    appenders: List[Union[str, Any]] = field(default_factory=list)

    def __post_init__(self):
        """Validate configuration after initialization."""
        if not isinstance(self.name, str):
            raise TypeError("logger name must be a string")
        self.level = LogLevel.coerce(self.level)
        self.appenders = list(self.appenders or [])
        for ref in self.appenders:
            if not isinstance(ref, str) and not _is_appender(ref):
                raise TypeError(f"logger '{self.name}' has invalid appender {ref!r}")


@dataclass
class AnalogConfig:
    """Complete configuration: named appenders, then loggers in order."""

    loggers: List[LoggerConfig]
    appenders: List[AppenderConfig] = field(default_factory=list)

    @classmethod
    def from_dict(cls, data: Mapping[str, Any]) -> "AnalogConfig":
        """
        Build configuration from a plain mapping.

        Raises:
            ValueError: If the loggers section is missing
        """
        if "loggers" not in data:
            raise ValueError("configuration requires a 'loggers' section")

        appenders = [
            entry if isinstance(entry, AppenderConfig) else AppenderConfig(**entry)
            for entry in data.get("appenders") or []
        ]
        loggers = [
            entry if isinstance(entry, LoggerConfig) else LoggerConfig(**entry)
            for entry in data["loggers"]
        ]
        return cls(loggers=loggers, appenders=appenders)

    def to_dict(self) -> Dict[str, Any]:
        """
        Convert to the mapping shape accepted by ``from_dict``.

        Levels are written as display names.
        """
        return {
            "appenders": [
                {"name": a.name, "appender": a.appender} for a in self.appenders
            ],
            "loggers": [
                {"name": l.name, "level": l.level.label, "appenders": list(l.appenders)}
                for l in self.loggers
            ],
        }
