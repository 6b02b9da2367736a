from sqlalchemy.orm import Session

from jewellery_store.data.models.cart_item import CartItemModel
from jewellery_store.domain.errors import (
    InsufficientStockError,
    ItemUnavailableError,
    JewelleryItemNotFoundError,
)
from jewellery_store.domain.schemas import (
    AddToCartIn,
    CartItemOut,
    CartLineOut,
    CartOut,
    UpdateCartItemIn,
)
from jewellery_store.repos.cart_repo import CartRepo
from jewellery_store.repos.jewellery_item_repo import JewelleryItemRepo
from jewellery_store.utils.logging import get_logger
from jewellery_store.utils.money import ZERO, to_money

logger = get_logger(__name__)


class CartService:
    """
    Session-scoped cart.

    commands (add, update, remove, clear) re-check stock and the active flag at write time
    query (get) reads live catalog prices

    Rows already in a cart are not re-validated when stock later drops; that is caught
    on the next update or when the order is placed.
    """

    def __init__(self, db: Session):
        self.db = db
        self.repo = CartRepo(db)
        self.item_repo = JewelleryItemRepo(db)

    # query
    def get_cart(self, session_id: str) -> CartOut:
        try:
            lines = self.repo.get_cart_lines(session_id)
            total = sum(
                (to_money(line.jewellery_item.price) * line.quantity for line in lines),
                ZERO,
            )
            return CartOut(
                items=[CartLineOut.model_validate(line) for line in lines],
                total_amount=total,
            )
        except Exception as e:
            logger.error(f"Get cart failed: {e}")
            raise

    # commands
    def add_to_cart(self, payload: AddToCartIn) -> CartItemOut:
        try:
            item = self.item_repo.get_item(payload.jewellery_item_id)

            if not item:
                raise JewelleryItemNotFoundError(payload.jewellery_item_id)

            if not item.is_active:
                raise ItemUnavailableError(item.id)

            # one row per (session, item): merge into the existing row if there is one
            existing_item = self.repo.get_session_item(payload.session_id, item.id)

            if existing_item:
                new_quantity = existing_item.quantity + payload.quantity
                if new_quantity > item.stock_quantity:
                    raise InsufficientStockError(item.id, item.stock_quantity, new_quantity)

                logger.info(
                    f"Item {item.id} already in cart {payload.session_id}, raising quantity "
                    f"from {existing_item.quantity} to {new_quantity}"
                )
                existing_item.quantity = new_quantity
                cart_item = existing_item
            else:
                if payload.quantity > item.stock_quantity:
                    raise InsufficientStockError(item.id, item.stock_quantity, payload.quantity)

                logger.info(f"Adding item {item.id} x{payload.quantity} to cart {payload.session_id}")
                cart_item = self.repo.add_cart_item(
                    CartItemModel(
                        session_id=payload.session_id,
                        jewellery_item_id=item.id,
                        quantity=payload.quantity,
                    )
                )

            self.db.commit()
            return CartItemOut.model_validate(cart_item)

        except Exception as e:
            self.db.rollback()
            logger.error(f"Add to cart failed: {e}")
            raise

    def update_cart_item(self, payload: UpdateCartItemIn) -> CartItemOut | None:
        try:
            cart_item = self.repo.get_cart_item(payload.id)
            if not cart_item:
                return None

            item = cart_item.jewellery_item

            if payload.quantity > item.stock_quantity:
                raise InsufficientStockError(item.id, item.stock_quantity, payload.quantity)

            if not item.is_active:
                raise ItemUnavailableError(item.id, already_in_cart=True)

            cart_item.quantity = payload.quantity
            self.db.commit()

            logger.info(f"Cart row {cart_item.id} set to quantity {payload.quantity}")
            return CartItemOut.model_validate(cart_item)

        except Exception as e:
            self.db.rollback()
            logger.error(f"Cart item update failed: {e}")
            raise

    def remove_from_cart(self, cart_item_id: int) -> bool:
        try:
            removed = self.repo.delete_cart_item(cart_item_id) > 0
            self.db.commit()

            if removed:
                logger.info(f"Removed cart row {cart_item_id}")
            return removed

        except Exception as e:
            self.db.rollback()
            logger.error(f"Remove from cart failed: {e}")
            raise

    def clear_cart(self, session_id: str) -> bool:
        """Empty a session's cart. Succeeds even when there was nothing to delete."""
        try:
            removed = self.repo.clear_session(session_id)
            self.db.commit()

            logger.info(f"Cleared cart {session_id} ({removed} rows)")
            return True

        except Exception as e:
            self.db.rollback()
            logger.error(f"Clear cart failed: {e}")
            raise
