from sqlalchemy import Column, Integer, ForeignKey, Text, DateTime
from sqlalchemy.orm import relationship

from jewellery_store.data.database import Base
from jewellery_store.utils.time import utcnow


class CartItemModel(Base):
    __tablename__ = "cart_items"

    id = Column(Integer, primary_key=True)
    # opaque client token, not a foreign key
    session_id = Column(Text, nullable=False, index=True)
    jewellery_item_id = Column(Integer, ForeignKey("jewellery_items.id"), nullable=False)

    quantity = Column(Integer, nullable=False)
    created_at = Column(DateTime(timezone=True), nullable=False, default=utcnow)

    jewellery_item = relationship("JewelleryItemModel", back_populates="cart_items")
