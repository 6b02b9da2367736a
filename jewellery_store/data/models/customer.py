from sqlalchemy import Column, Integer, Text, DateTime
from sqlalchemy.orm import relationship

from jewellery_store.data.database import Base
from jewellery_store.utils.time import utcnow


class CustomerModel(Base):
    __tablename__ = "customers"

    id = Column(Integer, primary_key=True)
    email = Column(Text, nullable=False, unique=True)
    first_name = Column(Text, nullable=False)
    last_name = Column(Text, nullable=False)
    phone = Column(Text, nullable=True)
    created_at = Column(DateTime(timezone=True), nullable=False, default=utcnow)

    orders = relationship("OrderModel", back_populates="customer")
