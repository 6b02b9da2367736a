# jewellery_store/repos/jewellery_item_repo.py
from sqlalchemy import select, update
from sqlalchemy.orm import Session

from jewellery_store.data.models.jewellery_item import JewelleryItemModel
from jewellery_store.utils.time import utcnow


class JewelleryItemRepo:
    def __init__(self, db: Session):
        self.db = db

    def get_item(self, item_id: int) -> JewelleryItemModel | None:
        return self.db.get(JewelleryItemModel, item_id)

    def list_items(self, offset: int, limit: int, active_only: bool) -> list[JewelleryItemModel]:
        stmt = select(JewelleryItemModel)
        if active_only:
            stmt = stmt.where(JewelleryItemModel.is_active.is_(True))
        stmt = (
            stmt.order_by(JewelleryItemModel.created_at.desc(), JewelleryItemModel.id.desc())
            .offset(offset)
            .limit(limit)
        )
        return list(self.db.execute(stmt).scalars().all())

    def create_item(self, item: JewelleryItemModel) -> JewelleryItemModel:
        self.db.add(item)
        self.db.flush()
        self.db.refresh(item)
        return item

    def decrement_stock(self, item_id: int, quantity: int) -> int:
        # evaluated in the database so concurrent orders never overwrite each other
        result = self.db.execute(
            update(JewelleryItemModel)
            .where(JewelleryItemModel.id == item_id)
            .values(
                stock_quantity=JewelleryItemModel.stock_quantity - quantity,
                updated_at=utcnow(),
            )
        )
        return result.rowcount
