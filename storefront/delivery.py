"""Delivery options for an order."""

from __future__ import annotations

from abc import abstractmethod
from typing import TextIO

from .products import _Describable, _fmt


class Delivery(_Describable):
    """A way of getting an order to the customer, with its fee."""

    def __init__(
        self, delivery_id: int, driver_name: str, address: str, fee: float
    ) -> None:
        self.delivery_id = delivery_id
        self.driver_name = driver_name
        self.address = address
        self.fee = fee

    @abstractmethod
    def describe(self) -> str:
        """Return the multi-line description of this delivery."""

    def display_info(self, file: TextIO | None = None) -> None:
        """Write the description to ``file`` (standard output by default)."""
        self._write(file)


class HomeDelivery(Delivery):
    """Delivery by a driver to the customer's address."""

    def describe(self) -> str:
        return self._block(
            "",
            "=====Home delivery info======",
            f"ID: {self.delivery_id}",
            f"Address: {self.address}",
            f"Driver name: {self.driver_name}",
            f"Fee: {_fmt(self.fee)}",
        )


class PickupDelivery(Delivery):
    """Collection at the store, free of charge."""

    def __init__(self, delivery_id: int) -> None:
        super().__init__(delivery_id, "No Driver", "Store Pickup", 0)

    def describe(self) -> str:
        return self._block(
            "", "=====Pickup delivery info======", f"ID: {self.delivery_id}"
        )