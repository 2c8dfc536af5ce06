"""Order lines and orders with totals, discount and invoice."""

from __future__ import annotations

import io
from typing import TextIO

from storefront.customers import Customer
from storefront.delivery import Delivery
from storefront.payments import Payment
from storefront.products import Product

DISCOUNT_RATE = 0.1


def _fmt(value: float) -> str:
    return f"{value:g}"


class OrderItem:
    """A quantity of one product within an order."""

    def __init__(self, product: Product | None, quantity: int) -> None:
        if quantity <= 0:
            raise ValueError("Quantity must be greater than 0")
        if product is None:
            raise ValueError("Product is missing")
        if quantity > product.quantity:
            raise ValueError("Quantity exceeds the quantity in stock")
        self.product = product
        self._quantity = quantity
        self.unit_price_at_purchase = product.price

    @property
    def quantity(self) -> int:
        return self._quantity

    @quantity.setter
    def quantity(self, value: int) -> None:
        if value <= 0:
            raise ValueError("Quantity must be greater than 0")
        self._quantity = value

    @property
    def total_price(self) -> float:
        """The product's price times the ordered quantity."""
        return self.product.price * self._quantity

    def describe(self) -> str:
        """Return the one-line description of this item."""
        return (
            f"Product : {self.product.name} | Quantity : {self._quantity} "
            f"| Total Price : {_fmt(self.total_price)}EGP\n"
        )

    def display(self, file: TextIO | None = None) -> None:
        """Write the description to ``file`` (standard output by default)."""
        print(self.describe(), end="", file=file)


class Order:
    """A customer's order of several items, with delivery and payment."""

    def __init__(self, order_id: int, customer: Customer | None) -> None:
        if customer is None:
            raise ValueError("Customer is missing")
        self.order_id = order_id
        self.customer = customer
        self.order_date = ""
        self.status = ""
        self.delivery: Delivery | None = None
        self._payment: Payment | None = None
        self.items: list[OrderItem] = []

    @property
    def payment(self) -> Payment | None:
        return self._payment

    @payment.setter
    def payment(self, value: Payment | None) -> None:
        if value is None:
            raise ValueError("Payment is missing")
        self._payment = value

    def add_item(self, product: Product, quantity: int) -> OrderItem:
        """Add ``quantity`` units of ``product``, taking them out of stock."""
        item = OrderItem(product, quantity)
        product.quantity = product.quantity - quantity
        self.items.append(item)
        return item

    def subtotal(self) -> float:
        """Sum of all item totals."""
        return sum((item.total_price for item in self.items), 0.0)

    def discount(self) -> float:
        """A flat tenth of the subtotal."""
        if self.customer is None:
            return 0.0
        return self.subtotal() * DISCOUNT_RATE

    def total_price(self) -> float:
        """Subtotal less discount plus the delivery fee, if any."""
        fee = self.delivery.fee if self.delivery is not None else 0.0
        return self.subtotal() - self.discount() + fee

    def invoice(self) -> str:
        """Return the full invoice text."""
        out = io.StringIO()
        out.write("\n====== INVOICE ======\n")
        out.write(f"Customer: {self.customer.name}\n")
        out.write("\nItems\n")
        for item in self.items:
            item.display(file=out)
        out.write(f"\nSubtotal: {_fmt(self.subtotal())}\n")
        out.write(f"Discount: {_fmt(self.discount())}\n")
        if self.delivery is not None:
            out.write(f"Delivery Fee: {_fmt(self.delivery.fee)}EGP\n")
        else:
            out.write("Delivery: Pickup (0 EGP) \n")
        out.write(f"Final total: {_fmt(self.total_price())}EGP\n")
        if self._payment is not None:
            out.write("Payment Method: ")
            self._payment.pay(file=out)
        out.write("======================\n")
        return out.getvalue()

    def print_invoice(self, file: TextIO | None = None) -> None:
        """Write the invoice to ``file`` (standard output by default)."""
        print(self.invoice(), end="", file=file)