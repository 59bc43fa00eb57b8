"""Bounded command history."""

from __future__ import annotations

from collections import deque
from collections.abc import Iterator

MAX_HISTORY = 100
MAX_COMMAND_LENGTH = 1024


class History:
    """Remembers the most recent commands. Once full, the oldest entry is dropped."""

    def __init__(self, capacity: int = MAX_HISTORY) -> None:
        if capacity <= 0:
            raise ValueError("history capacity must be positive")
        self._commands: deque[str] = deque(maxlen=capacity)

    @property
    def capacity(self) -> int:
        """Largest number of commands kept."""
        return self._commands.maxlen or 0

    def add(self, command: str | None) -> None:
        """Record a command. Empty commands are ignored."""
        if not command:
            return
        self._commands.append(command)

    def render(self) -> str:
        """Return the numbered listing, oldest first, one command per line."""
        return "".join(
            f"{number:4d}  {command}\n"
            for number, command in enumerate(self._commands, start=1)
        )

    def __iter__(self) -> Iterator[str]:
        return iter(self._commands)

    def __len__(self) -> int:
        return len(self._commands)