# storefront

A small library for a shop's sales counter: a product catalogue with stock
levels, customers, payment methods, delivery options, and orders that produce
a text invoice.

## Installation

```
pip install .
```

To run the test suite:

```
pip install ".[test]"
pytest
```

## What is in it

### `storefront.products`

`Product` is an abstract dataclass with `product_id`, `name`, `price` and
`quantity`. Its kinds are:

- `Book` (adds `author`, `pages`)
- `ElectronicDevice` (adds `brand`, `warranty_months`)
- `OfficeSupply` (adds `category`, `material`)

Behaviour:

- Assigning a negative `price` or `quantity` to an existing product raises
  `ValueError`. Values given to the constructor are not checked.
- `update_quantity(qty)` adds restocked units; a negative `qty` raises
  `ValueError`.
- `product + 5` adds five to the stock and returns the same product (no check
  on the sign).
- Two products are equal when their `product_id` values match.
- `str(product)` gives a one-line summary; `describe()` gives the multi-line
  description and `display(file=None)` writes it out.
- `compare_price(first, second)` is `True` when `first` is strictly more
  expensive than `second`.
- `total_products()` returns the number of product objects currently alive;
  it drops again when a product is garbage-collected.

### `storefront.customers`

`RegularCustomer(customer_id, name, phone)` and
`PremiumCustomer(customer_id, name, phone, discount_rate)`, each with
`get_discount(total_price)`, `describe()` and `display_info(file=None)`.
`PremiumCustomer.get_discount` returns `total_price * discount_rate`;
`RegularCustomer.get_discount` returns `total_price` unchanged.

### `storefront.delivery`

`HomeDelivery(delivery_id, driver_name, address, fee)` and
`PickupDelivery(delivery_id)`, a store pickup with a fee of 0. Both have
`fee`, `describe()` and `display_info(file=None)`.

### `storefront.payments`

`CashPayment(payment_id, amount)` and
`CardPayment(payment_id, amount, card_number)`. `pay(file=None)` writes a
processing report; for a card it states whether the card number is valid,
which it is when it has exactly 16 characters. No exception is raised for an
invalid card. `describe()` and `display(file=None)` give the payment details.

### `storefront.orders`

- `OrderItem(product, quantity)` raises `ValueError` if the quantity is zero
  or less, the product is `None`, or the quantity exceeds the product's stock.
  It has `total_price`, `describe()` and `display(file=None)`.
- `Order(order_id, customer)` raises `ValueError` if the customer is `None`.
  `add_item(product, quantity)` builds an `OrderItem`, takes the quantity out
  of the product's stock and returns the item. `delivery` may be set freely;
  setting `payment` to `None` raises `ValueError`.
- `subtotal()` is the sum of the item totals, `discount()` is a flat 10 % of
  the subtotal for every customer, and `total_price()` is the subtotal less
  the discount plus the delivery fee, if any.
- `invoice()` returns the invoice text; `print_invoice(file=None)` writes it.
  Without a delivery the invoice shows a free store pickup; with a payment it
  ends with that payment's processing report.

## Example

```python
from storefront.customers import RegularCustomer
from storefront.delivery import HomeDelivery
from storefront.orders import Order
from storefront.payments import CashPayment
from storefront.products import Book, OfficeSupply

novel = Book(1, "The Long Road", 250.0, 10, "A. Writer", 320)
pens = OfficeSupply(2, "Gel pens", 15.0, 100, "Writing", "Plastic")

customer = RegularCustomer(7, "Mona", "unlisted")
order = Order(1001, customer)
order.add_item(novel, 2)   # stock of the book drops to 8
order.add_item(pens, 4)

order.delivery = HomeDelivery(3, "Karim", "12 Nile Street", 30.0)
order.payment = CashPayment(55, order.total_price())

print(order.subtotal())     # 560.0
print(order.discount())     # 56.0
print(order.total_price())  # 534.0
order.print_invoice()
```

Adding more of a product than is in stock, or a quantity of zero or less,
raises `ValueError` and leaves both the order and the stock unchanged.

## What it does not do

This is a library only: there is no command-line program, and nothing is
stored. Products, customers and orders live in memory and are gone when the
program ends. Payments are not charged anywhere; `pay()` only writes a report.