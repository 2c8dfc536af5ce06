"""Products, customers, payments, delivery and invoiced orders for a small shop."""

__version__ = "0.1.0"