"""
State (Behavioral): traffic light.

The TrafficLight delegates both its behavior and its transitions to the
current state object: Red -> Green -> Yellow -> Red.
"""

from __future__ import annotations

import logging
from abc import ABC, abstractmethod

logger = logging.getLogger(__name__)


class TrafficLightState(ABC):
    """Interface for a traffic light state."""

    name: str = ""

    @abstractmethod
    def action(self) -> str:
        """
        :return: Instruction drivers get in this state.
        """
        raise NotImplementedError

    @abstractmethod
    def next(self, light: "TrafficLight") -> None:
        """
        Moves `light` to the state that follows this one.

        :param light: Context whose state is replaced.
        """
        raise NotImplementedError


class RedState(TrafficLightState):
    name = "Red"

    def action(self) -> str:
        return "Red -> Stop cars!"

    def next(self, light: "TrafficLight") -> None:
        light.set_state(GreenState())


class YellowState(TrafficLightState):
    name = "Yellow"

    def action(self) -> str:
        return "Yellow -> Get ready!"

    def next(self, light: "TrafficLight") -> None:
        light.set_state(RedState())


class GreenState(TrafficLightState):
    name = "Green"

    def action(self) -> str:
        return "Green -> Go!"

    def next(self, light: "TrafficLight") -> None:
        light.set_state(YellowState())


class TrafficLight:
    """
    Context object.

    :param initial_state: State to start in.
    """

    def __init__(self, initial_state: TrafficLightState) -> None:
        self._state = initial_state

    @property
    def state(self) -> TrafficLightState:
        return self._state

    def set_state(self, state: TrafficLightState) -> None:
        logger.info("-> Changing state to %s", state.name)
        self._state = state

    def action(self) -> str:
        instruction = self._state.action()
        logger.info("%s", instruction)
        return instruction

    def next(self) -> None:
        self._state.next(self)
