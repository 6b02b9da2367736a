# jewellery_store/repos/order_repo.py
from sqlalchemy import select
from sqlalchemy.orm import Session, joinedload, selectinload

from jewellery_store.data.models.order import OrderModel
from jewellery_store.data.models.order_item import OrderItemModel


def _with_details(stmt):
    return stmt.options(
        joinedload(OrderModel.customer),
        selectinload(OrderModel.order_items).joinedload(OrderItemModel.jewellery_item),
    )


class OrderRepo:
    def __init__(self, db: Session):
        self.db = db

    def create_order(self, order: OrderModel) -> OrderModel:
        self.db.add(order)
        self.db.flush()
        return order

    def add_order_item(self, item: OrderItemModel) -> OrderItemModel:
        self.db.add(item)
        self.db.flush()
        return item

    def get_order(self, order_id: int) -> OrderModel | None:
        return self.db.get(OrderModel, order_id)

    def get_order_with_details(self, order_id: int) -> OrderModel | None:
        return self.db.execute(
            _with_details(select(OrderModel)).where(OrderModel.id == order_id)
        ).unique().scalar_one_or_none()

    def list_orders(
        self,
        offset: int,
        limit: int,
        customer_id: int | None = None,
    ) -> list[OrderModel]:
        """A page of whole orders; line items are loaded for every order on the page."""
        stmt = _with_details(select(OrderModel))
        if customer_id is not None:
            stmt = stmt.where(OrderModel.customer_id == customer_id)
        stmt = (
            stmt.order_by(OrderModel.created_at.desc(), OrderModel.id.desc())
            .offset(offset)
            .limit(limit)
        )
        return list(self.db.execute(stmt).unique().scalars().all())
