"""
Appender capability and the sink-backed appender

An appender receives events a logger has already accepted, re-filters
them against its own threshold, formats them and hands the result to a
sink.
"""

from __future__ import annotations

from typing import TYPE_CHECKING, Any, Optional, Protocol, Tuple, runtime_checkable

from analog.core.log_level import LogLevel
from analog.formatters.base_formatter import BaseFormatter
from analog.formatters.default_formatter import DEFAULT_FORMATTER
from analog.appenders.console_sink import ConsoleSink
from analog.appenders.file_sink import FileSink
from analog.appenders.memory_sink import MemorySink

if TYPE_CHECKING:
    from analog.core.logger import Logger


@runtime_checkable
class Appender(Protocol):
    """Anything a logger can fan an event out to."""

    def write(self, logger: Logger, level: LogLevel, *parts: Any) -> None:
        ...


@runtime_checkable
class Sink(Protocol):
    """Final destination of a formatted message."""

    def write_message(self, message: str, level: LogLevel, parts: Tuple[Any, ...]) -> None:
        ...


class SinkAppender:
    """
    Appender with its own threshold and formatter, writing to a sink.

    Threshold and formatter are independent keyword arguments; whichever
    is left out takes its default (ALL, the shared default formatter).

    Example:
        memory = SinkAppender.memory(level=LogLevel.ERROR)
        logger.add_appender(memory)
        ...
        memory.sink.buffer
    """

    def __init__(
        self,
        sink: Sink,
        level: LogLevel = LogLevel.ALL,
        formatter: Optional[BaseFormatter] = None
    ):
        """
        Initialize sink appender.

        Args:
            sink: Object with write_message(message, level, parts)
            level: Minimum level this appender writes (default: ALL)
            formatter: Formatter (default: shared DefaultFormatter)
        """
        if not callable(getattr(sink, "write_message", None)):
            raise TypeError("sink must provide write_message(message, level, parts)")
        self._sink = sink
        self._level = LogLevel.coerce(level)
        self._formatter = formatter if formatter is not None else DEFAULT_FORMATTER

    @classmethod
    def console(
        cls,
        level: LogLevel = LogLevel.ALL,
        formatter: Optional[BaseFormatter] = None,
        **sink_options: Any
    ) -> "SinkAppender":
        """Create an appender writing to stdout/stderr (see ConsoleSink)."""
        return cls(ConsoleSink(**sink_options), level=level, formatter=formatter)

    @classmethod
    def memory(
        cls,
        level: LogLevel = LogLevel.ALL,
        formatter: Optional[BaseFormatter] = None
    ) -> "SinkAppender":
        """Create an appender collecting messages in a MemorySink."""
        return cls(MemorySink(), level=level, formatter=formatter)

    @classmethod
    def file(
        cls,
        filepath: str,
        level: LogLevel = LogLevel.ALL,
        formatter: Optional[BaseFormatter] = None,
        **sink_options: Any
    ) -> "SinkAppender":
        """Create an appender appending to a file (see FileSink)."""
        return cls(FileSink(filepath, **sink_options), level=level, formatter=formatter)

    @property
    def sink(self) -> Sink:
        return self._sink

    @property
    def level(self) -> LogLevel:
        return self._level

    @property
    def formatter(self) -> BaseFormatter:
        return self._formatter

    def is_enabled(self, level: LogLevel) -> bool:
        """Check whether an event at ``level`` passes this appender."""
        return self._level <= level

    def write(self, logger: Logger, level: LogLevel, *parts: Any) -> None:
        """
        Format and deliver an event if it passes this appender's threshold.

        Nothing is formatted for rejected events.
        """
        if not self.is_enabled(level):
            return
        message = self._formatter.format(logger, level, *parts)
        self._sink.write_message(message, level, parts)

    def __repr__(self) -> str:
        """String representation."""
        return f"SinkAppender(sink={self._sink!r}, level={self._level.label})"
