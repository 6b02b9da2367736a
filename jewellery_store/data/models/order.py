from sqlalchemy import Column, Integer, ForeignKey, Text, DateTime, Numeric, Enum
from sqlalchemy.orm import relationship

from jewellery_store.data.database import Base
from jewellery_store.utils.time import utcnow
from jewellery_store.domain.enums import OrderStatus


class OrderModel(Base):
    __tablename__ = "orders"

    id = Column(Integer, primary_key=True)
    customer_id = Column(Integer, ForeignKey("customers.id"), nullable=False, index=True)

    total_amount = Column(Numeric(10, 2), nullable=False)
    status = Column(
        Enum(OrderStatus, name="order_status", values_callable=lambda e: [m.value for m in e]),
        nullable=False,
        default=OrderStatus.PENDING,
    )
    shipping_address = Column(Text, nullable=False)
    billing_address = Column(Text, nullable=False)
    payment_status = Column(Text, nullable=False, default="pending")
    payment_method = Column(Text, nullable=True)

    created_at = Column(DateTime(timezone=True), nullable=False, default=utcnow)
    updated_at = Column(DateTime(timezone=True), nullable=False, default=utcnow)

    customer = relationship("CustomerModel", back_populates="orders")
    order_items = relationship(
        "OrderItemModel",
        back_populates="order",
        order_by="OrderItemModel.id",
    )
