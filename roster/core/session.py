"""Undo history for the current session."""
import logging
from collections import deque
from typing import Any, Protocol

from roster.core.config import settings
from roster.core.errors import require_non_null

logger = logging.getLogger(__name__)


class UndoableCommand(Protocol):
    """A command that can reverse its own effect on the model."""

    def undo(self, model: Any) -> Any:
        ...


class CommandHistory:
    """Most recent reversible commands, newest last.

    Holds at most ``capacity`` commands; recording a new one past that
    limit drops the oldest.
    """

    def __init__(self, capacity: int | None = None):
        capacity = capacity if capacity is not None else settings.undo_history_size
        if capacity < 1:
            raise ValueError(f"History capacity must be at least 1, got {capacity}")
        self._commands: deque[UndoableCommand] = deque(maxlen=capacity)

    @property
    def capacity(self) -> int:
        return self._commands.maxlen

    def push(self, command: UndoableCommand) -> None:
        require_non_null(command)
        self._commands.append(command)
        logger.debug(f"Recorded command for undo: {command!r}")

    def peek(self) -> UndoableCommand | None:
        return self._commands[-1] if self._commands else None

    def pop(self) -> UndoableCommand | None:
        """Remove and return the most recent command, or None if empty."""
        return self._commands.pop() if self._commands else None

    def clear(self) -> None:
        self._commands.clear()

    def __len__(self) -> int:
        return len(self._commands)
