"""Catalogue products: books, electronic devices and office supplies."""

from __future__ import annotations

import weakref
from abc import ABC, abstractmethod
from dataclasses import dataclass
from typing import TextIO


def _fmt(value: float) -> str:
    """Format a number the way a default-precision stream would."""
    return f"{value:g}"


class _Describable(ABC):
    """Something with a multi-line text description that can be written out."""

    @abstractmethod
    def describe(self) -> str:
        """Return the multi-line description."""

    @staticmethod
    def _block(*lines: str) -> str:
        return "\n".join(lines) + "\n"

    @staticmethod
    def _emit(text: str, file: TextIO | None = None) -> None:
        print(text, end="", file=file)

    def _write(self, file: TextIO | None = None) -> None:
        self._emit(self.describe(), file)


class _Census:
    """Tracks how many products are currently alive."""

    live = 0

    @classmethod
    def enrol(cls, product: "Product") -> None:
        cls.live += 1
        weakref.finalize(product, cls.release)

    @classmethod
    def release(cls) -> None:
        cls.live -= 1


_NON_NEGATIVE = {
    "price": "Price cannot be negative",
    "quantity": "Quantity cannot be negative",
}


@dataclass(eq=False)
class Product(_Describable):
    """An item held in stock with an id, name, unit price and quantity."""

    product_id: int = 0
    name: str = ""
    price: float = 0.0
    quantity: int = 0

    def __post_init__(self) -> None:
        _Census.enrol(self)

    def __setattr__(self, key: str, value: object) -> None:
        message = _NON_NEGATIVE.get(key)
        # Only assignments after construction are checked.
        if message and key in self.__dict__ and value < 0:  # type: ignore[operator]
            raise ValueError(message)
        super().__setattr__(key, value)

    def _add_stock(self, qty: int) -> None:
        object.__setattr__(self, "quantity", self.quantity + qty)

    def update_quantity(self, qty: int) -> None:
        """Add restocked units; a negative amount is rejected."""
        if qty < 0:
            raise ValueError("Cannot update with negative quantity")
        self._add_stock(qty)

    def _render(self, heading: str, *extra: str) -> str:
        return self._block(
            heading,
            f"ID: {self.product_id}",
            f"Name: {self.name}",
            f"Price: {_fmt(self.price)} EGP",
            f"Quantity: {self.quantity}",
            *extra,
        )

    @abstractmethod
    def describe(self) -> str:
        """Return the multi-line description of this product."""

    def display(self, file: TextIO | None = None) -> None:
        """Write the description to ``file`` (standard output by default)."""
        self._write(file)

    def __add__(self, qty: int) -> "Product":
        self._add_stock(qty)
        return self

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, Product):
            return NotImplemented
        return self.product_id == other.product_id

    def __hash__(self) -> int:
        return hash(self.product_id)

    def __str__(self) -> str:
        return (
            f"ID: {self.product_id} | Name: {self.name} | "
            f"Price: {_fmt(self.price)} | Quantity: {self.quantity}"
        )


@dataclass(eq=False)
class Book(Product):
    """A book with an author and a page count."""

    author: str = ""
    pages: int = 0

    def describe(self) -> str:
        return self._render(
            "=== BOOK ===", f"Author: {self.author}", f"Pages: {self.pages}"
        )


@dataclass(eq=False)
class ElectronicDevice(Product):
    """An electronic device with a brand and a warranty period."""

    brand: str = ""
    warranty_months: int = 0

    def describe(self) -> str:
        return self._render(
            "=== ELECTRONIC DEVICE ===",
            f"Brand: {self.brand}",
            f"Warranty: {self.warranty_months} months",
        )


@dataclass(eq=False)
class OfficeSupply(Product):
    """An office supply with a category and a material."""

    category: str = ""
    material: str = ""

    def describe(self) -> str:
        return self._render(
            "=== OFFICE SUPPLY ===",
            f"Category: {self.category}",
            f"Material: {self.material}",
        )


def compare_price(first: Product, second: Product) -> bool:
    """Return True when ``first`` is strictly more expensive than ``second``."""
    return first.price > second.price


def total_products() -> int:
    """Return the number of products currently alive."""
    return _Census.live