from __future__ import annotations

import logging
from abc import ABC, abstractmethod
from dataclasses import dataclass
from decimal import Decimal
from typing import Optional, Union

logger = logging.getLogger(__name__)

Amount = Union[int, Decimal]

__all__ = [
    "PaymentReceipt",
    "PaymentStrategy",
    "CreditCardPayment",
    "PayPalPayment",
    "BitcoinPayment",
    "PaymentProcessor",
]


# ==========================
# Module: payment
# Purpose: Interchangeable payment algorithms selected at runtime.
# ==========================


@dataclass(frozen=True, slots=True)
class PaymentReceipt:
    """
    Record of a completed payment.

    :param amount: Amount paid.
    :param method: Name of the payment method.
    :param account: Card number, e-mail or wallet the payment used.
    """
    amount: Amount
    method: str
    account: str

    def __str__(self) -> str:
        return f"Paid ${self.amount} using {self.method}: {self.account}"


class PaymentStrategy(ABC):
    """
    Contract shared by every payment algorithm.
    """

    method = ""

    @abstractmethod
    def account(self) -> str:
        """
        :return: Identifier of the account being charged.
        """

    def pay(self, amount: Amount) -> PaymentReceipt:
        """
        Charges `amount`.

        :param amount: Amount to pay.
        :return: Receipt of the payment.
        """
        receipt = PaymentReceipt(amount=amount, method=self.method, account=self.account())
        logger.info("%s", receipt)
        return receipt


class CreditCardPayment(PaymentStrategy):
    method = "Credit Card"

    def __init__(self, card_number: str) -> None:
        self._card_number = card_number

    def account(self) -> str:
        return self._card_number


class PayPalPayment(PaymentStrategy):
    method = "PayPal account"

    def __init__(self, email: str) -> None:
        self._email = email

    def account(self) -> str:
        return self._email


class BitcoinPayment(PaymentStrategy):
    method = "Bitcoin wallet"

    def __init__(self, wallet_address: str) -> None:
        self._wallet_address = wallet_address

    def account(self) -> str:
        return self._wallet_address


class PaymentProcessor:
    """
    Context delegating payments to the selected strategy.

    :param strategy: Optional initial strategy.
    """

    def __init__(self, strategy: Optional[PaymentStrategy] = None) -> None:
        self._strategy = strategy

    def set_payment_strategy(self, strategy: PaymentStrategy) -> None:
        self._strategy = strategy

    def pay(self, amount: Amount) -> Optional[PaymentReceipt]:
        """
        :return: Receipt, or None when no payment method was selected.
        """
        if self._strategy is None:
            logger.warning("Please select a payment method first!")
            return None
        return self._strategy.pay(amount)
