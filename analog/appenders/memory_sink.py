"""In-memory sink"""

from typing import Any, List, Tuple

from analog.core.log_level import LogLevel


class MemorySink:
    """Collect formatted messages in a list, in write order."""

    def __init__(self):
        self._buffer: List[str] = []

    @property
    def buffer(self) -> List[str]:
        """Copy of the collected messages."""
        return list(self._buffer)

    def reset(self) -> None:
        """Clear the buffer."""
        self._buffer.clear()

    def write_message(self, message: str, level: LogLevel, parts: Tuple[Any, ...]) -> None:
        self._buffer.append(message)

    def __len__(self) -> int:
        return len(self._buffer)

    def __repr__(self) -> str:
        return f"MemorySink(size={len(self._buffer)})"
