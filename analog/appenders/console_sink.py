"""Console sink with optional ANSI colors"""

import sys
from typing import Any, Optional, TextIO, Tuple

from analog.core.log_level import LogLevel


class ConsoleSink:
    """
    Write messages to the console.

    ERROR and FATAL go to standard error when it exists, everything else
    to standard output. Passing ``stream`` sends all levels to one stream.
    """

    def __init__(self, colored: bool = False, stream: Optional[TextIO] = None):
        """
        Initialize console sink.

        Args:
            colored: Wrap messages in ANSI color codes per level
            stream: Single output stream (default: stdout/stderr by level)
        """
        self.colored = colored
        self.stream = stream

    def _select_stream(self, level: LogLevel) -> TextIO:
        if self.stream is not None:
            return self.stream
        # Looked up per write so redirection of sys.stdout/sys.stderr applies
        if level >= LogLevel.ERROR and sys.stderr is not None:
            return sys.stderr
        return sys.stdout

    def write_message(self, message: str, level: LogLevel, parts: Tuple[Any, ...]) -> None:
        """Write one formatted message and flush."""
        if self.colored:
            message = f"{level.color_code}{message}{level.reset_code}"

        stream = self._select_stream(level)
        stream.write(message + "\n")
        stream.flush()

    def __repr__(self) -> str:
        return f"ConsoleSink(colored={self.colored})"
