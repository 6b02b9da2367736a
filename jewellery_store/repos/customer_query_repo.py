# jewellery_store/repos/customer_query_repo.py
from sqlalchemy import select
from sqlalchemy.orm import Session

from jewellery_store.data.models.customer_query import CustomerQueryModel


class CustomerQueryRepo:
    def __init__(self, db: Session):
        self.db = db

    def get_query(self, query_id: int) -> CustomerQueryModel | None:
        return self.db.get(CustomerQueryModel, query_id)

    def list_queries(self, offset: int, limit: int) -> list[CustomerQueryModel]:
        return list(
            self.db.execute(
                select(CustomerQueryModel)
                .order_by(CustomerQueryModel.created_at.desc(), CustomerQueryModel.id.desc())
                .offset(offset)
                .limit(limit)
            ).scalars().all()
        )

    def create_query(self, query: CustomerQueryModel) -> CustomerQueryModel:
        self.db.add(query)
        self.db.flush()
        self.db.refresh(query)
        return query
