import io

import pytest

from storefront.customers import Customer, PremiumCustomer, RegularCustomer


def test_customer_is_abstract():
    with pytest.raises(TypeError):
        Customer(1, "a", "b")


@pytest.mark.parametrize(
    "customer, total, expected",
    [
        (RegularCustomer(1, "Mona", "555-0100"), 250.0, 250.0),
        (PremiumCustomer(2, "Ali", "555-0101", 0.5), 200.0, 100.0),
        (PremiumCustomer(2, "Ali", "555-0101", 0.5), 0.0, 0.0),
    ],
)
def test_get_discount(customer, total, expected):
    assert customer.get_discount(total) == expected


def test_accessors():
    customer = RegularCustomer(1, "Mona", "555-0100")
    assert (customer.customer_id, customer.name, customer.phone) == (
        1,
        "Mona",
        "555-0100",
    )


def test_regular_describe():
    customer = RegularCustomer(1, "Mona", "555-0100")
    assert customer.describe().splitlines() == [
        "Regular Customer",
        "ID : 1",
        "Name : Mona",
        "Phone : 555-0100",
    ]


def test_premium_display_info():
    customer = PremiumCustomer(2, "Ali", "555-0101", 0.25)
    out = io.StringIO()
    customer.display_info(out)
    assert out.getvalue() == customer.describe()
    lines = out.getvalue().splitlines()
    assert lines[0] == "Premium Customer"
    assert lines[-1] == "Discount Rate : 0.25"