from __future__ import annotations

import logging
from abc import ABC, abstractmethod
from typing import List, Optional

logger = logging.getLogger(__name__)

__all__ = [
    "Command",
    "TextBuffer",
    "TypeCommand",
    "DeleteCommand",
    "EditorInvoker",
]


# ==========================
# Module: text_editor_command
# Purpose: Encapsulate editor actions as Commands that can undo themselves,
#          sequenced by an invoker that keeps a LIFO history.
# ==========================


class Command(ABC):
    """
    Base interface for executable actions with undo support.

    :param description: Human-readable description of the command.
    """

    def __init__(self, description: str) -> None:
        self._description = description

    @property
    def description(self) -> str:
        """
        Returns a short, human-readable description of the command.

        :return: Command description string.
        """
        return self._description

    @abstractmethod
    def execute(self) -> None:
        """
        Executes the command.
        """

    @abstractmethod
    def undo(self) -> None:
        """
        Reverts the effects of execute().
        """


class TextBuffer:
    """
    Text receiver that only grows at the end or shrinks from the end.

    :param text: Initial content.
    """

    def __init__(self, text: str = "") -> None:
        self._text = text

    def append(self, text: str) -> None:
        """
        Appends `text` to the end of the buffer.

        :param text: Text to append (empty string is a no-op).
        """
        self._text += text

    def truncate(self, count: int) -> str:
        """
        Removes the last `count` characters, clamping to an empty buffer.

        :param count: Number of characters to remove.
        :return: The removed substring.
        """
        removed = self.tail(count)
        if removed:
            self._text = self._text[: len(self._text) - len(removed)]
        return removed

    def tail(self, count: int) -> str:
        """
        Returns up to `count` trailing characters without mutating.

        :param count: Number of characters to read.
        :return: The trailing substring (possibly the whole buffer).
        """
        if count <= 0:
            return ""
        return self._text[-count:]

    def read(self) -> str:
        """
        :return: Snapshot of the current content.
        """
        return self._text

    def __len__(self) -> int:
        return len(self._text)

    def __repr__(self) -> str:
        return f"TextBuffer({self._text!r})"


class TypeCommand(Command):
    """
    Types text at the end of the buffer.
    """

    def __init__(self, buffer: TextBuffer, text: str) -> None:
        super().__init__(description=f"Type '{text}'")
        self._buffer = buffer
        self._text = text

    @property
    def inserted_text(self) -> str:
        return self._text

    def execute(self) -> None:
        """Append the text."""
        self._buffer.append(self._text)

    def undo(self) -> None:
        """Drop exactly as many characters as were typed."""
        self._buffer.truncate(len(self._text))


class DeleteCommand(Command):
    """
    Deletes the last `count` characters of the buffer.

    Undo restores what was actually removed, which is shorter than `count`
    when the buffer held fewer characters.
    """

    def __init__(self, buffer: TextBuffer, count: int) -> None:
        super().__init__(description=f"Delete {count} chars")
        self._buffer = buffer
        self._count = max(0, count)
        self._removed: str = ""

    @property
    def removed(self) -> str:
        return self._removed

    def execute(self) -> None:
        """Snapshot the trailing text, then truncate."""
        self._removed = self._buffer.tail(self._count)
        self._buffer.truncate(self._count)

    def undo(self) -> None:
        """Re-append the removed text."""
        self._buffer.append(self._removed)


class EditorInvoker:
    """
    Executes commands and keeps an undo history (no redo).

    :param history_limit: Optional cap on retained history; oldest entries are dropped first.
    :param log: Logger used to report invoker events; defaults to the module logger.
    """

    def __init__(self, history_limit: Optional[int] = None, log: Optional[logging.Logger] = None) -> None:
        self._history: List[Command] = []
        self._history_limit = None if history_limit is None else max(1, history_limit)
        self._log = log or logger

    @property
    def history_size(self) -> int:
        """
        :return: Number of commands that can still be undone.
        """
        return len(self._history)

    def run(self, cmd: Command) -> None:
        """
        Executes a command and records it for undo.

        If `execute()` raises, the exception propagates and nothing is recorded.

        :param cmd: Command to execute.
        """
        cmd.execute()
        self._history.append(cmd)
        if self._history_limit is not None and len(self._history) > self._history_limit:
            dropped = self._history.pop(0)
            self._log.debug("History limit reached, dropped: %s", dropped.description)
        self._log.debug("Executed: %s", cmd.description)

    def undo_last(self) -> bool:
        """
        Undoes the most recent command that has not been undone yet.

        :return: True if a command was undone; False when the history is empty.
        """
        if not self._history:
            self._log.info("Nothing to undo")
            return False
        cmd = self._history.pop()
        cmd.undo()
        self._log.debug("Undone: %s", cmd.description)
        return True
