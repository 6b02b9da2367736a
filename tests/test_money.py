from decimal import Decimal

import pytest

from jewellery_store.domain.errors import (
    InsufficientStockError,
    ItemUnavailableError,
    JewelleryStoreError,
    TotalMismatchError,
)
from jewellery_store.utils.money import money_equal, to_decimal, to_money


@pytest.mark.parametrize(
    "value,expected",
    [
        (199.99, "199.99"),
        ("99.5", "99.50"),
        (10, "10.00"),
        (Decimal("0.005"), "0.01"),
        (0.1 + 0.2, "0.30"),
    ],
)
def test_to_money(value, expected):
    assert str(to_money(value)) == expected


def test_money_equal_tolerance():
    assert money_equal("499.48", 499.48)
    assert money_equal("499.48", "499.49")
    assert not money_equal("499.48", "499.50")
    assert not money_equal("499.48", 100)
    assert not money_equal("499.48", 499.494)
    assert not money_equal("499.48", "499.4901")


def test_to_decimal_keeps_extra_places():
    assert to_decimal(499.494) == Decimal("499.494")
    assert to_decimal(Decimal("1.005")) == Decimal("1.005")


def test_error_messages_and_details():
    err = InsufficientStockError(7, available=2, requested=5, item_name="Pearl Studs")

    assert isinstance(err, JewelleryStoreError)
    assert str(err) == "Insufficient stock for Pearl Studs. Available: 2, requested: 5"
    assert err.details == {"item_id": 7, "available": 2, "requested": 5}
    assert "InsufficientStockError" in repr(err)


def test_unavailable_wording():
    assert str(ItemUnavailableError(3)) == "Jewellery item with ID 3 is not available"
    assert str(ItemUnavailableError(3, "Opal Pendant", already_in_cart=True)) == "Opal Pendant is no longer available"


def test_total_mismatch_message():
    err = TotalMismatchError(expected=to_money("499.48"), provided=to_money(100))
    assert str(err) == "Total amount mismatch. Expected: 499.48, provided: 100.00"
