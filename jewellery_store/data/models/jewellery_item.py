from sqlalchemy import Column, Integer, String, Text, Numeric, Boolean, DateTime
from sqlalchemy.orm import relationship

from jewellery_store.data.database import Base
from jewellery_store.utils.time import utcnow


class JewelleryItemModel(Base):
    __tablename__ = "jewellery_items"

    id = Column(Integer, primary_key=True)
    name = Column(Text, nullable=False)
    materials = Column(Text, nullable=False)
    description = Column(Text, nullable=False)
    price = Column(Numeric(10, 2), nullable=False)
    image_url = Column(String, nullable=True)
    stock_quantity = Column(Integer, nullable=False)
    is_active = Column(Boolean, nullable=False, default=True)

    created_at = Column(DateTime(timezone=True), nullable=False, default=utcnow)
    updated_at = Column(DateTime(timezone=True), nullable=False, default=utcnow)

    cart_items = relationship("CartItemModel", back_populates="jewellery_item")
    order_items = relationship("OrderItemModel", back_populates="jewellery_item")
