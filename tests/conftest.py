"""
Pytest configuration and fixtures.

Every test gets its own in-memory SQLite database with all tables created, and a
Session bound to it that is handed to the services exactly as a host process would.
"""

import pytest
from sqlalchemy.pool import StaticPool

from jewellery_store.data.database import create_store_engine, create_tables, make_session_factory
from jewellery_store.data.models import (
    CartItemModel,
    CustomerModel,
    JewelleryItemModel,
)
from jewellery_store.utils.money import to_money


# ============================================================================
# Database Fixtures
# ============================================================================

@pytest.fixture
def engine():
    """In-memory SQLite engine shared across connections of one test."""
    engine = create_store_engine("sqlite://", poolclass=StaticPool)
    create_tables(engine)
    yield engine
    engine.dispose()


@pytest.fixture
def db(engine):
    session = make_session_factory(engine)()
    yield session
    session.close()


# ============================================================================
# Data Factories
# ============================================================================

@pytest.fixture
def make_item(db):
    """Insert a jewellery item directly, bypassing the service."""

    def _make_item(
        name="Gold Ring",
        price="199.99",
        stock_quantity=10,
        is_active=True,
        materials="18k Gold",
        description="Beautiful gold ring",
        image_url=None,
    ):
        item = JewelleryItemModel(
            name=name,
            materials=materials,
            description=description,
            price=to_money(price),
            image_url=image_url,
            stock_quantity=stock_quantity,
            is_active=is_active,
        )
        db.add(item)
        db.commit()
        return item

    return _make_item


@pytest.fixture
def make_customer(db):
    def _make_customer(email="test@example.com", first_name="John", last_name="Doe", phone=None):
        customer = CustomerModel(
            email=email,
            first_name=first_name,
            last_name=last_name,
            phone=phone,
        )
        db.add(customer)
        db.commit()
        return customer

    return _make_customer


@pytest.fixture
def make_cart_row(db):
    def _make_cart_row(session_id, item, quantity):
        row = CartItemModel(session_id=session_id, jewellery_item_id=item.id, quantity=quantity)
        db.add(row)
        db.commit()
        return row

    return _make_cart_row
