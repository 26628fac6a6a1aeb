from __future__ import annotations

import logging
from dataclasses import dataclass
from typing import List, Optional

logger = logging.getLogger(__name__)

__all__ = [
    "PlayerMemento",
    "Player",
    "GameHistory",
]


# ==========================
# Module: game_player
# Purpose: Save and restore a player's progress without exposing its internals.
# ==========================


@dataclass(frozen=True, slots=True)
class PlayerMemento:
    """
    Immutable snapshot of a player's progress.

    :param level: Level number.
    :param task: Current task.
    :param score: Current score.
    """
    level: int
    task: str
    score: int


class Player:
    """
    Originator whose state can be captured in a memento.
    """

    def __init__(self) -> None:
        self._level = 1
        self._task = "Tutorial"
        self._score = 0

    def status(self) -> str:
        """
        :return: One-line description of the current state.
        """
        return f"Level: {self._level}, Task: {self._task}, Score: {self._score}"

    def play(self, level: int, task: str, score: int) -> None:
        self._level = level
        self._task = task
        self._score = score
        logger.info("Player played: Level=%s, Task=%s, Score=%s", level, task, score)

    def save(self) -> PlayerMemento:
        return PlayerMemento(self._level, self._task, self._score)

    def restore(self, memento: PlayerMemento) -> None:
        self._level = memento.level
        self._task = memento.task
        self._score = memento.score
        logger.info("Player state restored!")


class GameHistory:
    """
    Caretaker storing mementos in LIFO order.
    """

    def __init__(self) -> None:
        self._history: List[PlayerMemento] = []

    def push(self, memento: PlayerMemento) -> None:
        self._history.append(memento)

    def pop(self) -> Optional[PlayerMemento]:
        """
        :return: The most recent memento, or None if the history is empty.
        """
        if not self._history:
            return None
        return self._history.pop()

    def __len__(self) -> int:
        return len(self._history)
