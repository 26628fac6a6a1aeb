"""
mediator/chatroom.py: Mediator pattern with a chatroom.

Users never talk to each other directly. They hand messages to the
Chatroom, which decides whether to deliver privately or broadcast.
"""

from __future__ import annotations

import logging
from abc import ABC, abstractmethod
from dataclasses import dataclass
from typing import Dict, List, Optional

logger = logging.getLogger(__name__)


@dataclass(frozen=True, slots=True)
class Message:
    """
    A delivered chat message.

    :param sender: Name of the user who sent it.
    :param text: Message body.
    :param private: True for direct messages, False for broadcasts.
    """
    sender: str
    text: str
    private: bool = False


class Mediator(ABC):
    """Coordinates communication between registered users."""

    @abstractmethod
    def register(self, user: "User") -> None:
        raise NotImplementedError

    @abstractmethod
    def send(self, message: str, sender: "User", to: Optional["User"] = None) -> int:
        raise NotImplementedError


class Chatroom(Mediator):
    """
    Concrete mediator keeping users by name.
    """

    def __init__(self) -> None:
        self._users: Dict[str, User] = {}

    @property
    def members(self) -> List[str]:
        return list(self._users)

    def register(self, user: "User") -> None:
        """
        Adds a user and points it at this chatroom.

        :param user: User to register; a later user with the same name replaces the earlier one.
        """
        self._users[user.name] = user
        user.chatroom = self
        logger.debug("Registered %s", user.name)

    def send(self, message: str, sender: "User", to: Optional["User"] = None) -> int:
        """
        Delivers a message.

        :param message: Message body.
        :param sender: Originating user.
        :param to: Recipient for a private message; None broadcasts to everyone but the sender.
        :return: Number of users the message was delivered to.
        """
        if to is not None:
            to.receive(Message(sender.name, message, private=True))
            return 1

        delivered = 0
        for user in self._users.values():
            if user is not sender:
                user.receive(Message(sender.name, message))
                delivered += 1
        return delivered


class User:
    """
    Chat participant that talks only through its mediator.

    :param name: Display name.
    """

    def __init__(self, name: str) -> None:
        self.name = name
        self.chatroom: Optional[Mediator] = None
        self.inbox: List[Message] = []

    def send(self, message: str, to: Optional["User"] = None) -> bool:
        """
        :return: False if the user is not registered in a chatroom.
        """
        if self.chatroom is None:
            logger.warning("%s is not registered in a chatroom!", self.name)
            return False
        logger.info('%s sends: "%s"', self.name, message)
        self.chatroom.send(message, self, to)
        return True

    def receive(self, message: Message) -> None:
        self.inbox.append(message)
        logger.info('%s received a message from %s: "%s"', self.name, message.sender, message.text)
