from sqlalchemy.orm import Session

from jewellery_store.data.models.customer import CustomerModel
from jewellery_store.domain.errors import DuplicateEmailError
from jewellery_store.domain.schemas import CustomerCreate, CustomerOut, PaginationIn
from jewellery_store.repos.customer_repo import CustomerRepo
from jewellery_store.utils.logging import get_logger

logger = get_logger(__name__)


class CustomerService:
    def __init__(self, db: Session):
        self.db = db
        self.repo = CustomerRepo(db)

    def create_customer(self, payload: CustomerCreate) -> CustomerOut:
        try:
            # the unique constraint on customers.email still guards concurrent inserts
            if self.repo.get_by_email(payload.email):
                raise DuplicateEmailError(payload.email)

            customer = self.repo.create_customer(
                CustomerModel(
                    email=payload.email,
                    first_name=payload.first_name,
                    last_name=payload.last_name,
                    phone=payload.phone,
                )
            )
            self.db.commit()

            logger.info(f"Created customer {customer.id}")
            return CustomerOut.model_validate(customer)

        except Exception as e:
            self.db.rollback()
            logger.error(f"Customer creation failed: {e}")
            raise

    def list_customers(self, pagination: PaginationIn | None = None) -> list[CustomerOut]:
        page = pagination or PaginationIn()
        try:
            customers = self.repo.list_customers(page.offset, page.limit)
            return [CustomerOut.model_validate(c) for c in customers]
        except Exception as e:
            logger.error(f"Get customers failed: {e}")
            raise
