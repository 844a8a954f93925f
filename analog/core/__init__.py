"""
Core module for analog

This module contains the fundamental classes:
- Logger: Named logger, dispatch point for log calls
- Registry: Named logger and appender lookup
- LoggerBuilder: Builder pattern for logger construction
- LogLevel: Log level enumeration
- AnalogConfig, LoggerConfig, AppenderConfig: Declarative configuration
"""

from analog.core.log_level import LogLevel
from analog.core.message import LiteralPart, DeferredPart
from analog.core.logger import Logger
from analog.core.logger_config import AnalogConfig, AppenderConfig, LoggerConfig
from analog.core.registry import Registry
from analog.core.logger_builder import LoggerBuilder

__all__ = [
    "LogLevel",
    "LiteralPart",
    "DeferredPart",
    "Logger",
    "AnalogConfig",
    "AppenderConfig",
    "LoggerConfig",
    "Registry",
    "LoggerBuilder",
]
