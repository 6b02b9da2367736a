from sqlalchemy import Column, Integer, ForeignKey, Numeric, DateTime
from sqlalchemy.orm import relationship

from jewellery_store.data.database import Base
from jewellery_store.utils.time import utcnow


class OrderItemModel(Base):
    __tablename__ = "order_items"

    id = Column(Integer, primary_key=True)
    order_id = Column(Integer, ForeignKey("orders.id"), nullable=False, index=True)
    jewellery_item_id = Column(Integer, ForeignKey("jewellery_items.id"), nullable=False)

    quantity = Column(Integer, nullable=False)
    # copied from the catalog when the order is placed
    price_per_item = Column(Numeric(10, 2), nullable=False)
    created_at = Column(DateTime(timezone=True), nullable=False, default=utcnow)

    order = relationship("OrderModel", back_populates="order_items")
    jewellery_item = relationship("JewelleryItemModel", back_populates="order_items")
