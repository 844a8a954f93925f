"""
Log level enumeration

Levels are ordered by declaration position; ALL and NONE are sentinel
thresholds and are never used as the level of an event.
"""

from enum import IntEnum
from typing import Dict, Union


class LogLevel(IntEnum):
    """
    Severity scale, from most inclusive to least inclusive.

    A threshold T admits an event at level L when ``T <= L``.
    """

    ALL = 0         # Threshold only: admits everything
    TRACE = 1       # Most verbose, detailed tracing
    DEBUG = 2       # Debug information
    INFO = 3        # Informational messages
    WARN = 4        # Warning messages
    ERROR = 5       # Error messages
    FATAL = 6       # Fatal errors
    NONE = 7        # Threshold only: admits nothing

    def __str__(self) -> str:
        """String representation of log level."""
        return self.label

    @property
    def label(self) -> str:
        """Display name used in formatted output, e.g. ``Trace``."""
        return LEVEL_NAMES[self]

    @property
    def is_sentinel(self) -> bool:
        """True for the ALL and NONE endpoints."""
        return self in (LogLevel.ALL, LogLevel.NONE)

    @classmethod
    def from_string(cls, level_str: str) -> "LogLevel":
        """
        Convert string to LogLevel.

        Args:
            level_str: Level name (case-insensitive)

        Returns:
            LogLevel enum value

        Raises:
            ValueError: If level_str is not valid
        """
        level = LEVEL_FROM_NAME.get(level_str.strip().upper())
        if level is None:
            raise ValueError(f"Invalid log level: {level_str}")
        return level

    @classmethod
    def coerce(cls, value: Union["LogLevel", int, str]) -> "LogLevel":
        """
        Convert a level, rank or level name to LogLevel.

        Raises:
            ValueError: If the value is outside the enumeration
        """
        if isinstance(value, LogLevel):
            return value
        if isinstance(value, str):
            return cls.from_string(value)
        if isinstance(value, bool) or not isinstance(value, int):
            raise ValueError(f"Invalid log level: {value!r}")
        try:
            return cls(value)
        except ValueError:
            raise ValueError(f"Invalid log level: {value!r}") from None

    @property
    def color_code(self) -> str:
        """
        Get ANSI color code for this level.

        Returns:
            ANSI escape sequence
        """
        colors = {
            LogLevel.TRACE: "\033[37m",     # White
            LogLevel.DEBUG: "\033[36m",     # Cyan
            LogLevel.INFO: "\033[32m",      # Green
            LogLevel.WARN: "\033[33m",      # Yellow
            LogLevel.ERROR: "\033[31m",     # Red
            LogLevel.FATAL: "\033[35m",     # Magenta
        }
        return colors.get(self, "\033[0m")

    @property
    def reset_code(self) -> str:
        """ANSI reset code."""
        return "\033[0m"


# Mapping from log level to display names
LEVEL_NAMES: Dict[LogLevel, str] = {
    LogLevel.ALL: "All",
    LogLevel.TRACE: "Trace",
    LogLevel.DEBUG: "Debug",
    LogLevel.INFO: "Info",
    LogLevel.WARN: "Warn",
    LogLevel.ERROR: "Error",
    LogLevel.FATAL: "Fatal",
    LogLevel.NONE: "None",
}

# Reverse mapping, keyed by upper-case name
LEVEL_FROM_NAME: Dict[str, LogLevel] = {v.upper(): k for k, v in LEVEL_NAMES.items()}
