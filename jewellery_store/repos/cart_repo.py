# jewellery_store/repos/cart_repo.py
from sqlalchemy import select, delete
from sqlalchemy.orm import Session, contains_eager

from jewellery_store.data.models.cart_item import CartItemModel


class CartRepo:
    def __init__(self, db: Session):
        self.db = db

    def get_cart_item(self, cart_item_id: int) -> CartItemModel | None:
        return self.db.get(CartItemModel, cart_item_id)

    def get_session_item(self, session_id: str, jewellery_item_id: int) -> CartItemModel | None:
        return self.db.execute(
            select(CartItemModel)
            .where(
                CartItemModel.session_id == session_id,
                CartItemModel.jewellery_item_id == jewellery_item_id,
            )
            .order_by(CartItemModel.id)
            .limit(1)
        ).scalar_one_or_none()

    def get_cart_lines(self, session_id: str, lock: bool = False) -> list[CartItemModel]:
        """Cart rows for a session with their catalog item loaded, oldest first."""
        stmt = (
            select(CartItemModel)
            .join(CartItemModel.jewellery_item)
            .options(contains_eager(CartItemModel.jewellery_item))
            .where(CartItemModel.session_id == session_id)
            .order_by(CartItemModel.id)
        )
        if lock:
            stmt = stmt.with_for_update()
        return list(self.db.execute(stmt).scalars().all())

    def add_cart_item(self, item: CartItemModel) -> CartItemModel:
        self.db.add(item)
        self.db.flush()
        self.db.refresh(item)
        return item

    def delete_cart_item(self, cart_item_id: int) -> int:
        result = self.db.execute(
            delete(CartItemModel).where(CartItemModel.id == cart_item_id)
        )
        return result.rowcount

    def clear_session(self, session_id: str) -> int:
        result = self.db.execute(
            delete(CartItemModel).where(CartItemModel.session_id == session_id)
        )
        return result.rowcount
