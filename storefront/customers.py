"""Customers and the discounts they receive."""

from __future__ import annotations

from abc import abstractmethod
from typing import TextIO

from .products import _Describable, _fmt


class Customer(_Describable):
    """A shop customer identified by id, name and phone."""

    def __init__(self, customer_id: int, name: str, phone: str) -> None:
        self.customer_id = customer_id
        self.name = name
        self.phone = phone

    @abstractmethod
    def get_discount(self, total_price: float) -> float:
        """Return the discount figure for an order of ``total_price``."""

    @abstractmethod
    def describe(self) -> str:
        """Return the multi-line description of this customer."""

    def _render(self, heading: str, *extra: str) -> str:
        return self._block(
            heading,
            f"ID : {self.customer_id}",
            f"Name : {self.name}",
            f"Phone : {self.phone}",
            *extra,
        )

    def display_info(self, file: TextIO | None = None) -> None:
        """Write the description to ``file`` (standard output by default)."""
        self._write(file)


class RegularCustomer(Customer):
    """A customer without a negotiated rate."""

    def get_discount(self, total_price: float) -> float:
        return total_price

    def describe(self) -> str:
        return self._render("Regular Customer")


class PremiumCustomer(Customer):
    """A customer with a fixed discount rate."""

    def __init__(
        self, customer_id: int, name: str, phone: str, discount_rate: float
    ) -> None:
        super().__init__(customer_id, name, phone)
        self.discount_rate = discount_rate

    def get_discount(self, total_price: float) -> float:
        return total_price * self.discount_rate

    def describe(self) -> str:
        return self._render(
            "Premium Customer", f"Discount Rate : {_fmt(self.discount_rate)}"
        )