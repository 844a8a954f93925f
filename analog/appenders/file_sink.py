"""File sink"""

from pathlib import Path
from typing import Any, Optional, TextIO, Tuple

from analog.core.log_level import LogLevel


class FileSink:
    """
    Append messages to a file, one per line.

    The file is opened on construction. Use the sink as a context manager,
    or call close(), to release the handle.

    Example:
        with FileSink("logs/app.log") as sink:
            appender = SinkAppender(sink, level=LogLevel.WARN)
            ...
    """

    def __init__(
        self,
        filepath: str,
        mode: str = "a",
        encoding: str = "utf-8",
        flush_each: bool = True
    ):
        """
        Initialize file sink.

        Args:
            filepath: Path to log file; missing parent directories are created
            mode: File open mode (default: 'a' for append)
            encoding: File encoding (default: 'utf-8')
            flush_each: Flush after every message
        """
        self.filepath = Path(filepath)
        self.mode = mode
        self.encoding = encoding
        self.flush_each = flush_each
        self._handle: Optional[TextIO] = None
        self.open()

    @property
    def closed(self) -> bool:
        return self._handle is None

    def open(self) -> None:
        """(Re)open the file; a no-op while it is already open."""
        if self._handle is not None:
            return
        self.filepath.parent.mkdir(parents=True, exist_ok=True)
        self._handle = self.filepath.open(self.mode, encoding=self.encoding)

    def write_message(self, message: str, level: LogLevel, parts: Tuple[Any, ...]) -> None:
        """
        Write message to file.

        Raises:
            ValueError: If the sink has been closed
        """
        if self._handle is None:
            raise ValueError(f"FileSink for {self.filepath} is closed")
        self._handle.write(message + "\n")
        if self.flush_each:
            self._handle.flush()

    def flush(self) -> None:
        if self._handle is not None:
            self._handle.flush()

    def close(self) -> None:
        """Close the file; safe to call more than once."""
        handle, self._handle = self._handle, None
        if handle is not None:
            handle.close()

    def __enter__(self) -> "FileSink":
        return self

    def __exit__(self, exc_type, exc_value, traceback) -> None:
        self.close()

    def __repr__(self) -> str:
        return f"FileSink({str(self.filepath)!r}, closed={self.closed})"
