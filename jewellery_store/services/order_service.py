# jewellery_store/services/order_service.py
from sqlalchemy.orm import Session

from jewellery_store.data.models.order import OrderModel
from jewellery_store.data.models.order_item import OrderItemModel
from jewellery_store.domain.enums import OrderStatus
from jewellery_store.domain.errors import (
    CartEmptyError,
    CustomerNotFoundError,
    InsufficientStockError,
    ItemUnavailableError,
    TotalMismatchError,
)
from jewellery_store.domain.schemas import (
    OrderCreate,
    OrderOut,
    OrderUpdate,
    OrderWithItemsOut,
    PaginationIn,
)
from jewellery_store.repos.cart_repo import CartRepo
from jewellery_store.repos.customer_repo import CustomerRepo
from jewellery_store.repos.jewellery_item_repo import JewelleryItemRepo
from jewellery_store.repos.order_repo import OrderRepo
from jewellery_store.utils.logging import get_logger
from jewellery_store.utils.money import CENT, ZERO, money_equal, to_decimal, to_money
from jewellery_store.utils.time import utcnow

logger = get_logger(__name__)

TOTAL_TOLERANCE = CENT


class OrderService:
    """
    Order placement and order administration.

    create_order is the only multi-table write in the store. Everything it does happens
    inside the caller's session and is committed once at the end, so a failure at any
    step leaves no order, no line items, no stock change and the cart intact.
    """

    def __init__(self, db: Session):
        self.db = db
        self.repo = OrderRepo(db)
        self.cart_repo = CartRepo(db)
        self.customer_repo = CustomerRepo(db)
        self.item_repo = JewelleryItemRepo(db)

    def create_order(self, payload: OrderCreate, session_id: str) -> OrderOut:
        """
        Use case: place an order from the session cart.

        1. customer must exist
        2. cart must not be empty (catalog rows are locked FOR UPDATE where supported)
        3. every line must be active and within stock
        4. client total must match the recomputed total within 0.01
        5-8. insert order + line items (prices copied), decrement stock, clear cart
        """
        try:
            customer = self.customer_repo.get_customer(payload.customer_id)
            if not customer:
                raise CustomerNotFoundError(payload.customer_id)

            lines = self.cart_repo.get_cart_lines(session_id, lock=True)
            if not lines:
                raise CartEmptyError(session_id)

            for line in lines:
                item = line.jewellery_item
                if not item.is_active:
                    raise ItemUnavailableError(item.id, item.name, already_in_cart=True)
                if line.quantity > item.stock_quantity:
                    raise InsufficientStockError(
                        item.id, item.stock_quantity, line.quantity, item_name=item.name
                    )

            total = sum(
                (to_money(line.jewellery_item.price) * line.quantity for line in lines),
                ZERO,
            )
            provided = to_decimal(payload.total_amount)
            if not money_equal(total, provided, TOTAL_TOLERANCE):
                raise TotalMismatchError(expected=total, provided=provided)

            order = self.repo.create_order(
                OrderModel(
                    customer_id=customer.id,
                    total_amount=total,
                    status=OrderStatus.PENDING,
                    shipping_address=payload.shipping_address,
                    billing_address=payload.billing_address,
                    payment_status="pending",
                    payment_method=payload.payment_method,
                )
            )

            for line in lines:
                self.repo.add_order_item(
                    OrderItemModel(
                        order_id=order.id,
                        jewellery_item_id=line.jewellery_item_id,
                        quantity=line.quantity,
                        price_per_item=to_money(line.jewellery_item.price),
                    )
                )

            for line in lines:
                self.item_repo.decrement_stock(line.jewellery_item_id, line.quantity)

            self.cart_repo.clear_session(session_id)

            self.db.commit()

            logger.info(
                f"Order {order.id} created for customer {customer.id} from cart {session_id}: "
                f"{len(lines)} lines, total {total}"
            )
            return OrderOut.model_validate(order)

        except Exception as e:
            self.db.rollback()
            logger.error(f"Order creation failed: {e}")
            raise

    def get_order(self, order_id: int) -> OrderWithItemsOut | None:
        try:
            order = self.repo.get_order_with_details(order_id)
            if not order:
                return None
            return OrderWithItemsOut.model_validate(order)
        except Exception as e:
            logger.error(f"Get order failed: {e}")
            raise

    def list_orders(self, pagination: PaginationIn | None = None) -> list[OrderWithItemsOut]:
        page = pagination or PaginationIn()
        try:
            orders = self.repo.list_orders(page.offset, page.limit)
            return [OrderWithItemsOut.model_validate(o) for o in orders]
        except Exception as e:
            logger.error(f"Get orders failed: {e}")
            raise

    def list_customer_orders(
        self,
        customer_id: int,
        pagination: PaginationIn | None = None,
    ) -> list[OrderWithItemsOut]:
        page = pagination or PaginationIn()
        try:
            orders = self.repo.list_orders(page.offset, page.limit, customer_id=customer_id)
            return [OrderWithItemsOut.model_validate(o) for o in orders]
        except Exception as e:
            logger.error(f"Get customer orders failed: {e}")
            raise

    def update_order(self, payload: OrderUpdate) -> OrderOut | None:
        """Any status may follow any other; only supplied fields change."""
        try:
            order = self.repo.get_order(payload.id)
            if not order:
                return None

            changes = payload.model_dump(exclude_unset=True, exclude={"id"})
            if changes.get("status") is not None:
                order.status = changes["status"]
            if changes.get("payment_status") is not None:
                order.payment_status = changes["payment_status"]
            if "payment_method" in changes:
                order.payment_method = changes["payment_method"]

            order.updated_at = utcnow()
            self.db.commit()

            logger.info(f"Updated order {order.id}: {sorted(changes)}")
            return OrderOut.model_validate(order)

        except Exception as e:
            self.db.rollback()
            logger.error(f"Order update failed: {e}")
            raise
