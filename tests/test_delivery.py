import io

import pytest

from storefront.delivery import Delivery, HomeDelivery, PickupDelivery


def test_delivery_is_abstract():
    with pytest.raises(TypeError):
        Delivery(1, "a", "b", 1.0)


def test_home_delivery_fee():
    delivery = HomeDelivery(1, "Omar", "12 Nile St", 50.0)
    assert delivery.fee == 50.0
    assert delivery.driver_name == "Omar"
    assert delivery.address == "12 Nile St"


def test_pickup_defaults():
    pickup = PickupDelivery(4)
    assert pickup.fee == 0
    assert pickup.driver_name == "No Driver"
    assert pickup.address == "Store Pickup"
    assert pickup.delivery_id == 4


def test_home_describe():
    delivery = HomeDelivery(1, "Omar", "12 Nile St", 50.0)
    assert delivery.describe().splitlines() == [
        "",
        "=====Home delivery info======",
        "ID: 1",
        "Address: 12 Nile St",
        "Driver name: Omar",
        "Fee: 50",
    ]


def test_pickup_display_info():
    pickup = PickupDelivery(4)
    out = io.StringIO()
    pickup.display_info(out)
    assert out.getvalue() == "\n=====Pickup delivery info======\nID: 4\n"