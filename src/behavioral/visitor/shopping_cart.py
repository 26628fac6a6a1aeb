"""
visitor/shopping_cart.py: Visitor pattern over shopping cart items.

Items only know how to `accept` a visitor; pricing rules live in the
visitor, so new operations (discounts, shipping) need no item changes.
Prices are coerced to Decimal; only the cart total is rounded to cents.
"""

from __future__ import annotations

import logging
from abc import ABC, abstractmethod
from dataclasses import dataclass
from decimal import ROUND_HALF_UP, Decimal
from typing import List, Union

logger = logging.getLogger(__name__)

CENTS = Decimal("0.01")
ELECTRONICS_TAX_RATE = Decimal("0.10")


Price = Union[Decimal, int, float, str]


def as_decimal(value: Price) -> Decimal:
    """Coerces a price to Decimal, going through str so floats keep their written value."""
    if isinstance(value, Decimal):
        return value
    return Decimal(str(value))


def to_money(value: Price) -> Decimal:
    """Rounds a value to whole cents."""
    return as_decimal(value).quantize(CENTS, rounding=ROUND_HALF_UP)


# ------------------------------- Visitor -------------------------------- #
class CartVisitor(ABC):
    """One operation over every item type."""

    @abstractmethod
    def visit_book(self, book: "Book") -> Decimal:
        raise NotImplementedError

    @abstractmethod
    def visit_fruit(self, fruit: "Fruit") -> Decimal:
        raise NotImplementedError

    @abstractmethod
    def visit_electronics(self, electronics: "Electronics") -> Decimal:
        raise NotImplementedError


# -------------------------------- Items --------------------------------- #
class Item(ABC):
    """Element of the cart structure."""

    name: str
    price: Decimal

    @abstractmethod
    def accept(self, visitor: CartVisitor) -> Decimal:
        raise NotImplementedError


@dataclass(slots=True)
class Book(Item):
    """
    :param name: Title.
    :param price: Unit price.
    """
    name: str
    price: Decimal

    def __post_init__(self) -> None:
        self.price = as_decimal(self.price)

    def accept(self, visitor: CartVisitor) -> Decimal:
        return visitor.visit_book(self)


@dataclass(slots=True)
class Fruit(Item):
    """
    :param name: Fruit name.
    :param price: Price per unit.
    :param quantity: Units bought.
    """
    name: str
    price: Decimal
    quantity: int = 1

    def __post_init__(self) -> None:
        self.price = as_decimal(self.price)

    def accept(self, visitor: CartVisitor) -> Decimal:
        return visitor.visit_fruit(self)


@dataclass(slots=True)
class Electronics(Item):
    """
    :param name: Product name.
    :param price: Price before tax.
    """
    name: str
    price: Decimal

    def __post_init__(self) -> None:
        self.price = as_decimal(self.price)

    def accept(self, visitor: CartVisitor) -> Decimal:
        return visitor.visit_electronics(self)


# --------------------------- Concrete Visitor --------------------------- #
class PriceCalculator(CartVisitor):
    """
    Prices each item: books as-is, fruit by quantity, electronics with 10% tax.
    """

    def visit_book(self, book: Book) -> Decimal:
        total = book.price
        logger.info("Book: %s, price: $%s", book.name, to_money(total))
        return total

    def visit_fruit(self, fruit: Fruit) -> Decimal:
        total = fruit.price * fruit.quantity
        logger.info("Fruit: %s, quantity: %s, total: $%s", fruit.name, fruit.quantity, to_money(total))
        return total

    def visit_electronics(self, electronics: Electronics) -> Decimal:
        total = electronics.price * (1 + ELECTRONICS_TAX_RATE)
        logger.info("Electronics: %s, price with tax: $%s", electronics.name, to_money(total))
        return total


# -------------------------------- Cart ---------------------------------- #
class ShoppingCart:
    """Holds items and runs visitors over them."""

    def __init__(self) -> None:
        self._items: List[Item] = []

    def add_item(self, item: Item) -> None:
        self._items.append(item)

    def calculate_total(self, visitor: CartVisitor) -> Decimal:
        """
        :param visitor: Operation applied to every item.
        :return: Sum of the visitor's results, rounded to cents.
        """
        total = to_money(sum((item.accept(visitor) for item in self._items), Decimal("0")))
        logger.info("Total Price: $%s", total)
        return total

    def __len__(self) -> int:
        return len(self._items)
