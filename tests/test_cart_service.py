"""
Tests for CartService: add (merge + stock checks), get, update, remove, clear.
"""

import pytest
from sqlalchemy import select

from jewellery_store.data.models import CartItemModel
from jewellery_store.domain.errors import (
    InsufficientStockError,
    ItemUnavailableError,
    JewelleryItemNotFoundError,
)
from jewellery_store.domain.schemas import AddToCartIn, UpdateCartItemIn
from jewellery_store.services.cart_service import CartService

SESSION = "session-abc"


@pytest.fixture
def service(db):
    return CartService(db)


def cart_rows(db, session_id=SESSION):
    return db.execute(
        select(CartItemModel).where(CartItemModel.session_id == session_id)
    ).scalars().all()


class TestAddToCart:

    def test_add_new_row(self, service, db, make_item):
        item = make_item(stock_quantity=5)

        row = service.add_to_cart(AddToCartIn(session_id=SESSION, jewellery_item_id=item.id, quantity=2))

        assert row.id is not None
        assert row.session_id == SESSION
        assert row.jewellery_item_id == item.id
        assert row.quantity == 2
        assert len(cart_rows(db)) == 1

    def test_adding_same_item_merges_quantity(self, service, db, make_item):
        item = make_item(stock_quantity=5)

        first = service.add_to_cart(AddToCartIn(session_id=SESSION, jewellery_item_id=item.id, quantity=2))
        second = service.add_to_cart(AddToCartIn(session_id=SESSION, jewellery_item_id=item.id, quantity=3))

        assert second.id == first.id
        assert second.quantity == 5
        rows = cart_rows(db)
        assert len(rows) == 1
        assert rows[0].quantity == 5

    def test_merge_over_stock_fails_without_write(self, service, db, make_item):
        item = make_item(stock_quantity=5)
        service.add_to_cart(AddToCartIn(session_id=SESSION, jewellery_item_id=item.id, quantity=4))

        with pytest.raises(InsufficientStockError, match="Insufficient stock") as exc_info:
            service.add_to_cart(AddToCartIn(session_id=SESSION, jewellery_item_id=item.id, quantity=2))

        assert exc_info.value.available == 5
        assert exc_info.value.requested == 6
        assert "Available: 5" in str(exc_info.value)
        assert cart_rows(db)[0].quantity == 4

    def test_new_row_over_stock_fails(self, service, db, make_item):
        item = make_item(stock_quantity=1)

        with pytest.raises(InsufficientStockError, match="requested: 3"):
            service.add_to_cart(AddToCartIn(session_id=SESSION, jewellery_item_id=item.id, quantity=3))

        assert cart_rows(db) == []

    def test_missing_item(self, service):
        with pytest.raises(JewelleryItemNotFoundError, match="not found"):
            service.add_to_cart(AddToCartIn(session_id=SESSION, jewellery_item_id=999, quantity=1))

    def test_inactive_item(self, service, db, make_item):
        item = make_item(is_active=False)

        with pytest.raises(ItemUnavailableError, match="not available"):
            service.add_to_cart(AddToCartIn(session_id=SESSION, jewellery_item_id=item.id, quantity=1))

        assert cart_rows(db) == []

    def test_same_item_in_different_sessions_is_separate(self, service, db, make_item):
        item = make_item(stock_quantity=5)

        service.add_to_cart(AddToCartIn(session_id="one", jewellery_item_id=item.id, quantity=3))
        service.add_to_cart(AddToCartIn(session_id="two", jewellery_item_id=item.id, quantity=3))

        assert len(cart_rows(db, "one")) == 1
        assert len(cart_rows(db, "two")) == 1


class TestGetCart:

    def test_empty_session(self, service):
        cart = service.get_cart("nobody")

        assert cart.items == []
        assert cart.total_amount == 0

    def test_cart_with_items_and_total(self, service, make_item, make_cart_row):
        ring = make_item(name="Gold Ring", price="199.99")
        necklace = make_item(name="Silver Necklace", price="99.50")
        make_cart_row(SESSION, ring, 2)
        make_cart_row(SESSION, necklace, 1)

        cart = service.get_cart(SESSION)

        assert len(cart.items) == 2
        assert cart.total_amount == pytest.approx(499.48)
        first = cart.items[0]
        assert first.quantity == 2
        assert first.jewellery_item.name == "Gold Ring"
        assert first.jewellery_item.price == 199.99

    def test_cart_uses_live_price(self, service, db, make_item, make_cart_row):
        ring = make_item(price="100.00")
        make_cart_row(SESSION, ring, 1)

        ring.price = 150
        db.commit()

        assert service.get_cart(SESSION).total_amount == 150.0

    def test_only_requested_session(self, service, make_item, make_cart_row):
        ring = make_item()
        make_cart_row(SESSION, ring, 1)
        make_cart_row("other", ring, 3)

        cart = service.get_cart(SESSION)

        assert len(cart.items) == 1
        assert cart.items[0].quantity == 1


class TestUpdateCartItem:

    def test_update_quantity(self, service, make_item, make_cart_row):
        ring = make_item(stock_quantity=5)
        row = make_cart_row(SESSION, ring, 1)

        updated = service.update_cart_item(UpdateCartItemIn(id=row.id, quantity=4))

        assert updated.quantity == 4

    def test_missing_row_returns_none(self, service):
        assert service.update_cart_item(UpdateCartItemIn(id=999, quantity=1)) is None

    def test_over_stock(self, service, db, make_item, make_cart_row):
        ring = make_item(stock_quantity=2)
        row = make_cart_row(SESSION, ring, 1)

        with pytest.raises(InsufficientStockError, match="Insufficient stock"):
            service.update_cart_item(UpdateCartItemIn(id=row.id, quantity=3))

        assert cart_rows(db)[0].quantity == 1

    def test_inactive_item(self, service, db, make_item, make_cart_row):
        ring = make_item(stock_quantity=5)
        row = make_cart_row(SESSION, ring, 1)
        ring.is_active = False
        db.commit()

        with pytest.raises(ItemUnavailableError, match="no longer available"):
            service.update_cart_item(UpdateCartItemIn(id=row.id, quantity=2))

    def test_idle_row_is_not_rechecked_until_touched(self, service, db, make_item, make_cart_row):
        ring = make_item(stock_quantity=5)
        make_cart_row(SESSION, ring, 4)

        ring.stock_quantity = 1
        db.commit()

        cart = service.get_cart(SESSION)
        assert cart.items[0].quantity == 4


class TestRemoveAndClear:

    def test_remove_existing_row_only(self, service, db, make_item, make_cart_row):
        ring = make_item()
        necklace = make_item(name="Necklace")
        target = make_cart_row(SESSION, ring, 1)
        make_cart_row(SESSION, necklace, 1)
        make_cart_row("other", ring, 1)
        target_id = target.id

        assert service.remove_from_cart(target_id) is True

        assert [r.jewellery_item_id for r in cart_rows(db)] == [necklace.id]
        assert len(cart_rows(db, "other")) == 1

    def test_remove_missing_returns_false(self, service):
        assert service.remove_from_cart(424242) is False

    def test_clear_session(self, service, db, make_item, make_cart_row):
        ring = make_item()
        make_cart_row(SESSION, ring, 1)
        make_cart_row(SESSION, make_item(name="Other"), 2)
        make_cart_row("keep", ring, 1)

        assert service.clear_cart(SESSION) is True

        assert cart_rows(db) == []
        assert len(cart_rows(db, "keep")) == 1

    def test_clear_empty_session_still_succeeds(self, service):
        assert service.clear_cart("never-used") is True
