"""Payment methods: cash and card."""

from __future__ import annotations

from abc import abstractmethod
from typing import TextIO

from .products import _Describable, _fmt


class Payment(_Describable):
    """A payment of a given amount."""

    def __init__(self, payment_id: int, amount: float) -> None:
        self.payment_id = payment_id
        self.amount = amount

    @abstractmethod
    def pay(self, file: TextIO | None = None) -> None:
        """Process the payment, reporting progress to ``file``."""

    @abstractmethod
    def describe(self) -> str:
        """Return the multi-line description of this payment."""

    def _header(self, title: str) -> list[str]:
        return [
            "",
            title,
            f"Payment id : {self.payment_id}",
            f"Amount is {_fmt(self.amount)}",
        ]

    def display(self, file: TextIO | None = None) -> None:
        """Write the description to ``file`` (standard output by default)."""
        self._write(file)


class CashPayment(Payment):
    """Payment in cash."""

    def pay(self, file: TextIO | None = None) -> None:
        self._emit(
            self._block(
                "", " Processing Cash Payment...", f"Amount is {_fmt(self.amount)}"
            ),
            file,
        )

    def describe(self) -> str:
        return self._block(*self._header(" ===== CashPayment ======"))


class CardPayment(Payment):
    """Payment by card; the card number must have 16 characters."""

    def __init__(self, payment_id: int, amount: float, card_number: str) -> None:
        super().__init__(payment_id, amount)
        self.card_number = card_number

    def _card_number_valid(self) -> bool:
        return len(self.card_number) == 16

    def pay(self, file: TextIO | None = None) -> None:
        if self._card_number_valid():
            outcome = [" CardNum is valid ", "", f" Amount is {_fmt(self.amount)}"]
        else:
            outcome = [" CardNum is invalid "]
        self._emit(
            self._block("", " Processing Card Payment...", "", *outcome), file
        )

    def describe(self) -> str:
        return self._block(
            *self._header(" ====Card Payment===="),
            "",
            f" CardNum is {self.card_number}",
        )