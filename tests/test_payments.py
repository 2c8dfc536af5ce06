import io

import pytest

from storefront.payments import CardPayment, CashPayment, Payment

VALID_CARD = "A" * 16
SHORT_CARD = "A" * 5


def test_payment_is_abstract():
    with pytest.raises(TypeError):
        Payment(1, 10.0)


def test_cash_pay_output():
    out = io.StringIO()
    CashPayment(1, 250.0).pay(out)
    assert out.getvalue() == "\n Processing Cash Payment...\nAmount is 250\n"


def test_cash_display():
    payment = CashPayment(3, 99.5)
    out = io.StringIO()
    payment.display(out)
    assert out.getvalue() == payment.describe()
    assert "Payment id : 3" in out.getvalue().splitlines()
    assert "Amount is 99.5" in out.getvalue().splitlines()


def test_card_pay_valid_number():
    out = io.StringIO()
    CardPayment(2, 40.0, VALID_CARD).pay(out)
    text = out.getvalue()
    assert text.startswith("\n Processing Card Payment...\n")
    assert "CardNum is valid" in text
    assert "Amount is 40" in text


def test_card_pay_invalid_number():
    out = io.StringIO()
    CardPayment(2, 40.0, SHORT_CARD).pay(out)
    text = out.getvalue()
    assert "CardNum is invalid" in text
    assert "Amount is" not in text


def test_card_describe():
    payment = CardPayment(5, 12.0, VALID_CARD)
    lines = payment.describe().splitlines()
    assert "Payment id : 5" in lines
    assert f" CardNum is {VALID_CARD}" in lines