"""
BSD 3-Clause License

Copyright (c) 2021, 🍀☀🌕🌥 🌊
All rights reserved.

analog - A lightweight, embeddable logging facility with named loggers,
pluggable appenders and formatters
"""

__version__ = "1.0.0"
__author__ = "kcenon"
__email__ = "kcenon@naver.com"

from analog.core.log_level import LogLevel
from analog.core.message import LiteralPart, DeferredPart
from analog.core.logger import Logger
from analog.core.logger_builder import LoggerBuilder
from analog.core.logger_config import AnalogConfig, AppenderConfig, LoggerConfig
from analog.core.registry import (
    Registry,
    get_registry,
    get_logger,
    configure,
    get_appender,
    add_appender,
    reset,
)
from analog.appenders import Appender, SinkAppender, ConsoleSink, MemorySink, FileSink
from analog.formatters import BaseFormatter, DefaultFormatter

# Import submodules (not all classes by default)
from analog import appenders
from analog import formatters

__all__ = [
    "LogLevel",
    "LiteralPart",
    "DeferredPart",
    "Logger",
    "LoggerBuilder",
    "AnalogConfig",
    "AppenderConfig",
    "LoggerConfig",
    "Registry",
    "get_registry",
    "get_logger",
    "configure",
    "get_appender",
    "add_appender",
    "reset",
    "Appender",
    "SinkAppender",
    "ConsoleSink",
    "MemorySink",
    "FileSink",
    "BaseFormatter",
    "DefaultFormatter",
    "appenders",
    "formatters",
]
