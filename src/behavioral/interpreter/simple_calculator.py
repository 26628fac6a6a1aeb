"""
Interpreter (Behavioral): a tiny calculator language.

Sentences look like ``ADD 5 3``: an operation name followed by two operands.
Each operation maps to an Expression whose `interpret()` computes the value.
"""

from __future__ import annotations

import logging
from abc import ABC, abstractmethod
from typing import Callable, Dict, Optional, Union

logger = logging.getLogger(__name__)

Number = Union[int, float]

__all__ = [
    "InterpreterError",
    "UnknownOperationError",
    "MalformedCommandError",
    "Expression",
    "AddExpression",
    "SubtractExpression",
    "MultiplyExpression",
    "CalculatorInterpreter",
]


class InterpreterError(ValueError):
    """
    Base error for sentences the calculator cannot understand.
    """


class UnknownOperationError(InterpreterError):
    """
    Raised when the operation name is not part of the language.

    :param operation: The offending operation name.
    """

    def __init__(self, operation: str) -> None:
        super().__init__(f"Unknown operation: {operation}")
        self.operation = operation


class MalformedCommandError(InterpreterError):
    """
    Raised when operands are missing or are not numbers.
    """


class Expression(ABC):
    """Interface for every expression of the language."""

    @abstractmethod
    def interpret(self) -> Number:
        raise NotImplementedError


class BinaryExpression(Expression, ABC):
    def __init__(self, a: Number, b: Number) -> None:
        self.a = a
        self.b = b

    def __repr__(self) -> str:
        return f"{type(self).__name__}({self.a!r}, {self.b!r})"


class AddExpression(BinaryExpression):
    def interpret(self) -> Number:
        return self.a + self.b


class SubtractExpression(BinaryExpression):
    def interpret(self) -> Number:
        return self.a - self.b


class MultiplyExpression(BinaryExpression):
    def interpret(self) -> Number:
        return self.a * self.b


def _to_number(token: str) -> Number:
    try:
        return int(token)
    except ValueError:
        pass
    try:
        return float(token)
    except ValueError as exc:
        raise MalformedCommandError(f"Operand is not a number: {token!r}") from exc


class CalculatorInterpreter:
    """
    Parses command strings into expressions and evaluates them.

    New operations are registered in `operations` without touching the parser.
    """

    operations: Dict[str, Callable[[Number, Number], Expression]] = {
        "ADD": AddExpression,
        "SUBTRACT": SubtractExpression,
        "MULTIPLY": MultiplyExpression,
    }

    def parse(self, command: str) -> Expression:
        """
        Turns a sentence into an expression.

        :param command: Sentence such as "ADD 5 3"; the operation is case-insensitive.
        :return: Expression ready to interpret.
        :raises UnknownOperationError: If the operation is not registered.
        :raises MalformedCommandError: If operands are missing or not numeric.
        """
        parts = command.split()
        if not parts:
            raise MalformedCommandError("Empty command")
        operation = parts[0].upper()
        factory = self.operations.get(operation)
        if factory is None:
            raise UnknownOperationError(operation)
        if len(parts) != 3:
            raise MalformedCommandError(f"{operation} expects two operands, got {len(parts) - 1}")
        return factory(_to_number(parts[1]), _to_number(parts[2]))

    def execute(self, command: str) -> Optional[Number]:
        """
        Parses and evaluates a sentence.

        :param command: Sentence to evaluate.
        :return: The result, or None if the sentence could not be understood.
        """
        try:
            expression = self.parse(command)
        except InterpreterError as exc:
            logger.warning("%s", exc)
            return None
        result = expression.interpret()
        logger.info("%s = %s", command, result)
        return result
