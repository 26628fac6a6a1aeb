from __future__ import annotations

from typing import Iterable, List, Optional


class FriendIterator:
    """
    Walks a friend list one entry at a time without exposing the list.

    Supports both the explicit `has_next()` / `next()` protocol and Python iteration.
    """

    def __init__(self, friends: List[str]) -> None:
        self._friends = friends
        self._position = 0

    def has_next(self) -> bool:
        return self._position < len(self._friends)

    def next(self) -> Optional[str]:
        """
        :return: The next friend, or None when there are no more.
        """
        if not self.has_next():
            return None
        friend = self._friends[self._position]
        self._position += 1
        return friend

    def __iter__(self) -> "FriendIterator":
        return self

    def __next__(self) -> str:
        if not self.has_next():
            raise StopIteration
        return self.next()


class SocialNetwork:
    """
    Collection of a user's friends.

    :param friends: Initial friends, kept in the given order.
    """

    def __init__(self, friends: Iterable[str] = ()) -> None:
        self._friends: List[str] = list(friends)

    def add_friend(self, name: str) -> None:
        self._friends.append(name)

    def create_iterator(self) -> FriendIterator:
        return FriendIterator(self._friends)

    def __iter__(self) -> FriendIterator:
        return self.create_iterator()

    def __len__(self) -> int:
        return len(self._friends)
