# jewellery_store/services/jewellery_service.py
from sqlalchemy.orm import Session

from jewellery_store.data.models.jewellery_item import JewelleryItemModel
from jewellery_store.domain.schemas import (
    JewelleryItemCreate,
    JewelleryItemOut,
    JewelleryItemUpdate,
    PaginationIn,
)
from jewellery_store.repos.jewellery_item_repo import JewelleryItemRepo
from jewellery_store.utils.logging import get_logger
from jewellery_store.utils.money import to_money
from jewellery_store.utils.time import utcnow

logger = get_logger(__name__)

# columns that may be set back to NULL by a partial update
_NULLABLE_FIELDS = {"image_url"}


class JewelleryService:
    """
    Catalog use cases for jewellery items.

    Items are never hard-deleted: delete_item only flips is_active, so historical
    order lines keep a valid reference.
    """

    def __init__(self, db: Session):
        self.db = db
        self.repo = JewelleryItemRepo(db)

    def create_item(self, payload: JewelleryItemCreate) -> JewelleryItemOut:
        try:
            item = self.repo.create_item(
                JewelleryItemModel(
                    name=payload.name,
                    materials=payload.materials,
                    description=payload.description,
                    price=to_money(payload.price),
                    image_url=payload.image_url,
                    stock_quantity=payload.stock_quantity,
                    is_active=True,
                )
            )
            self.db.commit()

            logger.info(f"Created jewellery item {item.id} '{item.name}' (stock {item.stock_quantity})")
            return JewelleryItemOut.model_validate(item)

        except Exception as e:
            self.db.rollback()
            logger.error(f"Jewellery item creation failed: {e}")
            raise

    def get_item(self, item_id: int) -> JewelleryItemOut | None:
        try:
            item = self.repo.get_item(item_id)
            if not item:
                return None
            return JewelleryItemOut.model_validate(item)
        except Exception as e:
            logger.error(f"Get jewellery item failed: {e}")
            raise

    def list_active_items(self, pagination: PaginationIn | None = None) -> list[JewelleryItemOut]:
        return self._list(pagination, active_only=True)

    def list_all_items(self, pagination: PaginationIn | None = None) -> list[JewelleryItemOut]:
        return self._list(pagination, active_only=False)

    def _list(self, pagination: PaginationIn | None, active_only: bool) -> list[JewelleryItemOut]:
        page = pagination or PaginationIn()
        try:
            items = self.repo.list_items(page.offset, page.limit, active_only=active_only)
            return [JewelleryItemOut.model_validate(i) for i in items]
        except Exception as e:
            scope = "active" if active_only else "all"
            logger.error(f"Failed to fetch {scope} jewellery items: {e}")
            raise

    def update_item(self, payload: JewelleryItemUpdate) -> JewelleryItemOut | None:
        """Apply only the fields present in the payload; updated_at is always refreshed."""
        try:
            item = self.repo.get_item(payload.id)
            if not item:
                return None

            changes = payload.model_dump(exclude_unset=True, exclude={"id"})
            for field, value in changes.items():
                if value is None and field not in _NULLABLE_FIELDS:
                    continue
                if field == "price":
                    value = to_money(value)
                setattr(item, field, value)

            item.updated_at = utcnow()
            self.db.commit()

            logger.info(f"Updated jewellery item {item.id}: {sorted(changes)}")
            return JewelleryItemOut.model_validate(item)

        except Exception as e:
            self.db.rollback()
            logger.error(f"Jewellery item update failed: {e}")
            raise

    def delete_item(self, item_id: int) -> bool:
        """Soft delete. Deleting an already inactive item still returns True."""
        try:
            item = self.repo.get_item(item_id)
            if not item:
                return False

            item.is_active = False
            item.updated_at = utcnow()
            self.db.commit()

            logger.info(f"Deactivated jewellery item {item_id}")
            return True

        except Exception as e:
            self.db.rollback()
            logger.error(f"Jewellery item deletion failed: {e}")
            raise
