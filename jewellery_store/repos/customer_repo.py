# jewellery_store/repos/customer_repo.py
from sqlalchemy import select
from sqlalchemy.orm import Session

from jewellery_store.data.models.customer import CustomerModel


class CustomerRepo:
    def __init__(self, db: Session):
        self.db = db

    def get_customer(self, customer_id: int) -> CustomerModel | None:
        return self.db.get(CustomerModel, customer_id)

    def get_by_email(self, email: str) -> CustomerModel | None:
        return self.db.execute(
            select(CustomerModel).where(CustomerModel.email == email)
        ).scalar_one_or_none()

    def list_customers(self, offset: int, limit: int) -> list[CustomerModel]:
        return list(
            self.db.execute(
                select(CustomerModel)
                .order_by(CustomerModel.created_at.desc(), CustomerModel.id.desc())
                .offset(offset)
                .limit(limit)
            ).scalars().all()
        )

    def create_customer(self, customer: CustomerModel) -> CustomerModel:
        self.db.add(customer)
        self.db.flush()
        self.db.refresh(customer)
        return customer
