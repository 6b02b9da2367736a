from sqlalchemy.orm import Session

from jewellery_store.data.models.customer_query import CustomerQueryModel
from jewellery_store.domain.enums import QueryStatus
from jewellery_store.domain.schemas import (
    CustomerQueryCreate,
    CustomerQueryOut,
    CustomerQueryUpdate,
    PaginationIn,
)
from jewellery_store.repos.customer_query_repo import CustomerQueryRepo
from jewellery_store.utils.logging import get_logger
from jewellery_store.utils.time import utcnow

logger = get_logger(__name__)


class CustomerQueryService:
    """Support inquiries sent through the storefront contact form."""

    def __init__(self, db: Session):
        self.db = db
        self.repo = CustomerQueryRepo(db)

    def create_query(self, payload: CustomerQueryCreate) -> CustomerQueryOut:
        try:
            query = self.repo.create_query(
                CustomerQueryModel(
                    name=payload.name,
                    email=payload.email,
                    subject=payload.subject,
                    message=payload.message,
                    status=QueryStatus.NEW,
                )
            )
            self.db.commit()

            logger.info(f"Customer query {query.id} received: {query.subject}")
            return CustomerQueryOut.model_validate(query)

        except Exception as e:
            self.db.rollback()
            logger.error(f"Customer query creation failed: {e}")
            raise

    def list_queries(self, pagination: PaginationIn | None = None) -> list[CustomerQueryOut]:
        page = pagination or PaginationIn()
        try:
            queries = self.repo.list_queries(page.offset, page.limit)
            return [CustomerQueryOut.model_validate(q) for q in queries]
        except Exception as e:
            logger.error(f"Customer queries fetch failed: {e}")
            raise

    def update_query(self, payload: CustomerQueryUpdate) -> CustomerQueryOut | None:
        try:
            query = self.repo.get_query(payload.id)
            if not query:
                return None

            query.status = payload.status
            query.updated_at = utcnow()
            self.db.commit()

            logger.info(f"Customer query {query.id} -> {payload.status.value}")
            return CustomerQueryOut.model_validate(query)

        except Exception as e:
            self.db.rollback()
            logger.error(f"Customer query update failed: {e}")
            raise
