"""
Logger - named dispatch point for log calls

A call passes two gates: the logger's own threshold, then the threshold
of every appender it fans out to.
"""

from __future__ import annotations

from typing import TYPE_CHECKING, Any, Iterable, List, Optional

from analog.core.log_level import LogLevel
from analog.core.message import materialize

if TYPE_CHECKING:
    from analog.appenders.base_appender import Appender
    from analog.core.registry import Registry


class Logger:
    """
    Named logger with a fixed threshold and an append-only appender list.

    Prefer ``Registry.get_logger`` or ``analog.get_logger`` over direct
    construction; a logger built directly is not registered anywhere.
    """

    def __init__(
        self,
        name: str,
        level: Optional[LogLevel] = None,
        appenders: Optional[Iterable[Appender]] = None,
        registry: Optional[Registry] = None
    ):
        """
        Create a logger.

        Args:
            name: Logger name, "" for the root logger
            level: Threshold. Defaults to the registry root logger's level,
                   which bootstraps the root logger if it does not exist.
            appenders: Initial appenders. Defaults to the registry appender
                       registered under "".
            registry: Registry used to resolve defaults (default: the
                      process-wide registry)
        """
        if not isinstance(name, str):
            raise TypeError("name must be a string")
        self._name = name

        appender_list = list(appenders) if appenders else []
        if level is None or not appender_list:
            if registry is None:
                from analog.core.registry import get_registry
                registry = get_registry()

        if level is None:
            self._level = registry.get_logger().level
        else:
            self._level = LogLevel.coerce(level)

        if not appender_list:
            default = registry.get_appender("")
            if default is not None:
                appender_list.append(default)
        self._appenders: List[Appender] = appender_list

    @property
    def name(self) -> str:
        return self._name

    @property
    def level(self) -> LogLevel:
        return self._level

    @property
    def appenders(self) -> List[Appender]:
        """Copy of the appender list, in dispatch order."""
        return list(self._appenders)

    def add_appender(self, *appenders: Appender) -> None:
        """Attach more appenders after the existing ones."""
        for appender in appenders:
            if not callable(getattr(appender, "write", None)):
                raise TypeError(f"Not an appender: {appender!r}")
        self._appenders.extend(appenders)

    def is_enabled(self, level: LogLevel) -> bool:
        """Check whether this logger passes events at ``level``."""
        return self._level <= level

    @property
    def is_all_enabled(self) -> bool:
        return self.is_enabled(LogLevel.ALL)

    @property
    def is_trace_enabled(self) -> bool:
        return self.is_enabled(LogLevel.TRACE)

    @property
    def is_debug_enabled(self) -> bool:
        return self.is_enabled(LogLevel.DEBUG)

    @property
    def is_info_enabled(self) -> bool:
        return self.is_enabled(LogLevel.INFO)

    @property
    def is_warn_enabled(self) -> bool:
        return self.is_enabled(LogLevel.WARN)

    @property
    def is_error_enabled(self) -> bool:
        return self.is_enabled(LogLevel.ERROR)

    @property
    def is_fatal_enabled(self) -> bool:
        return self.is_enabled(LogLevel.FATAL)

    @property
    def is_off(self) -> bool:
        """True when the threshold suppresses every event."""
        return self._level >= LogLevel.NONE

    def log(self, level: LogLevel, *parts: Any) -> None:
        """
        Log a message.

        Deferred parts (zero-argument callables) are evaluated only when
        the logger's threshold admits ``level``, once, before fan-out.

        Raises:
            ValueError: If level is not an event level (ALL, NONE or
                        outside the enumeration)
        """
        level = LogLevel.coerce(level)
        if level.is_sentinel:
            raise ValueError(f"Cannot log at sentinel level {level.label}")
        if not self.is_enabled(level):
            return

        values = materialize(parts)
        for appender in self._appenders:
            appender.write(self, level, *values)

    def trace(self, *parts: Any) -> None:
        """Log trace message."""
        self.log(LogLevel.TRACE, *parts)

    def debug(self, *parts: Any) -> None:
        """Log debug message."""
        self.log(LogLevel.DEBUG, *parts)

    def info(self, *parts: Any) -> None:
        """Log info message."""
        self.log(LogLevel.INFO, *parts)

    def warn(self, *parts: Any) -> None:
        """Log warning message."""
        self.log(LogLevel.WARN, *parts)

    def error(self, *parts: Any) -> None:
        """Log error message."""
        self.log(LogLevel.ERROR, *parts)

    def fatal(self, *parts: Any) -> None:
        """Log fatal message."""
        self.log(LogLevel.FATAL, *parts)

    def __repr__(self) -> str:
        return f"Logger(name={self._name!r}, level={self._level.label}, appenders={len(self._appenders)})"
