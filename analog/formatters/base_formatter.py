"""
Base formatter interface
"""

from __future__ import annotations

from abc import ABC, abstractmethod
from typing import TYPE_CHECKING, Any

from analog.core.log_level import LogLevel

if TYPE_CHECKING:
    from analog.core.logger import Logger


class BaseFormatter(ABC):
    """
    Abstract base class for log formatters.

    Formatters turn a logger, an event level and the materialized message
    parts into a single display string. They hold no per-event state.
    """

    @abstractmethod
    def format(self, logger: Logger, level: LogLevel, *parts: Any) -> str:
        """
        Format one event into a string.

        Args:
            logger: The logger the event was dispatched from
            level: Level of the event
            *parts: Materialized message parts, in call order

        Returns:
            Formatted string representation of the event
        """
        pass

    def __call__(self, logger: Logger, level: LogLevel, *parts: Any) -> str:
        """Allow formatters to be callable."""
        return self.format(logger, level, *parts)
