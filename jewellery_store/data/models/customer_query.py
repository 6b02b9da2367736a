from sqlalchemy import Column, Integer, Text, DateTime, Enum

from jewellery_store.data.database import Base
from jewellery_store.utils.time import utcnow
from jewellery_store.domain.enums import QueryStatus


class CustomerQueryModel(Base):
    __tablename__ = "customer_queries"

    id = Column(Integer, primary_key=True)
    name = Column(Text, nullable=False)
    email = Column(Text, nullable=False)
    subject = Column(Text, nullable=False)
    message = Column(Text, nullable=False)
    status = Column(
        Enum(QueryStatus, name="query_status", values_callable=lambda e: [m.value for m in e]),
        nullable=False,
        default=QueryStatus.NEW,
    )

    created_at = Column(DateTime(timezone=True), nullable=False, default=utcnow)
    updated_at = Column(DateTime(timezone=True), nullable=False, default=utcnow)
