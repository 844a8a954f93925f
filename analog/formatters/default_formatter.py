"""
Default formatter

Produces ``[<timestamp>] [<Level>] [<logger>] part part ...``
"""

from __future__ import annotations

import json
from datetime import datetime, timezone
from typing import TYPE_CHECKING, Any

from analog.core.log_level import LogLevel
from analog.formatters.base_formatter import BaseFormatter

if TYPE_CHECKING:
    from analog.core.logger import Logger


class DefaultFormatter(BaseFormatter):
    """
    Writes a UTC timestamp, the level name and the message parts.

    The logger name is included in brackets unless it is empty (the root
    logger). String parts are written verbatim; anything else is JSON
    encoded, falling back to ``str()`` for objects JSON cannot represent.
    Encoding errors such as circular references propagate to the caller.
    """

    def format(self, logger: Logger, level: LogLevel, *parts: Any) -> str:
        """
        Format an event in the default layout.

        Args:
            logger: Source logger
            level: Event level
            *parts: Materialized message parts

        Returns:
            Formatted string
        """
        name = f" [{logger.name}]" if logger.name else ""
        return f"[{self.timestamp()}] [{level.label}]{name}{self.get_message(*parts)}"

    @staticmethod
    def timestamp() -> str:
        """ISO-8601 UTC timestamp with millisecond precision, ``Z`` suffixed."""
        now = datetime.now(timezone.utc)
        return now.isoformat(timespec="milliseconds").replace("+00:00", "Z")

    def get_message(self, *parts: Any) -> str:
        """Join parts, each preceded by a single space."""
        return "".join(" " + self.render_part(part) for part in parts)

    @staticmethod
    def render_part(part: Any) -> str:
        if isinstance(part, str):
            return part
        return json.dumps(part, default=str, separators=(",", ":"), ensure_ascii=False)

    def __repr__(self) -> str:
        """String representation."""
        return "DefaultFormatter()"


# Shared by every appender constructed without a formatter
DEFAULT_FORMATTER = DefaultFormatter()
