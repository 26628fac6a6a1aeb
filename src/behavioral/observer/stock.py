"""
Observer (Behavioral): stock price tracker.

A Stock notifies every subscribed observer whenever its price is set.
"""

from __future__ import annotations

import logging
from abc import ABC, abstractmethod
from typing import List

logger = logging.getLogger(__name__)


class Observer(ABC):
    """Receives price updates from a subject."""

    @abstractmethod
    def update(self, price: float) -> None:
        raise NotImplementedError


class Subject(ABC):
    """
    Keeps the list of observers and notifies them in subscription order.
    """

    def __init__(self) -> None:
        self._observers: List[Observer] = []

    def subscribe(self, observer: Observer) -> None:
        self._observers.append(observer)

    def unsubscribe(self, observer: Observer) -> None:
        """Removes every subscription of `observer`; unknown observers are ignored."""
        self._observers = [obs for obs in self._observers if obs is not observer]

    def notify(self) -> None:
        state = self.get_state()
        for observer in list(self._observers):
            observer.update(state)

    @abstractmethod
    def get_state(self) -> float:
        raise NotImplementedError


class Stock(Subject):
    """
    Concrete subject holding a price.

    :param price: Initial price; setting it later notifies observers.
    """

    def __init__(self, price: float) -> None:
        super().__init__()
        self._price = price

    @property
    def price(self) -> float:
        return self._price

    @price.setter
    def price(self, new_price: float) -> None:
        logger.info("Stock price updated: %s", new_price)
        self._price = new_price
        self.notify()

    def get_state(self) -> float:
        return self._price


class RecordingObserver(Observer, ABC):
    """
    Observer that formats each update and keeps the resulting messages.
    """

    def __init__(self) -> None:
        self.messages: List[str] = []

    def update(self, price: float) -> None:
        message = self.format(price)
        self.messages.append(message)
        logger.info("%s", message)

    @abstractmethod
    def format(self, price: float) -> str:
        raise NotImplementedError


class TraderApp(RecordingObserver):
    def format(self, price: float) -> str:
        return f"TraderApp: Received stock price update: {price}"


class Dashboard(RecordingObserver):
    def format(self, price: float) -> str:
        return f"Dashboard: Stock price is now {price}"


class EmailNotifier(RecordingObserver):
    def format(self, price: float) -> str:
        return f"EmailNotifier: Sending email alert - new stock price: {price}"
