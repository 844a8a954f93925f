"""Appenders module - event sinks with their own threshold and formatter"""

from analog.appenders.base_appender import Appender, Sink, SinkAppender
from analog.appenders.console_sink import ConsoleSink
from analog.appenders.file_sink import FileSink
from analog.appenders.memory_sink import MemorySink

__all__ = ["Appender", "Sink", "SinkAppender", "ConsoleSink", "FileSink", "MemorySink"]
