# import every model so SQLAlchemy registers it on Base.metadata

from jewellery_store.data.models.jewellery_item import JewelleryItemModel
from jewellery_store.data.models.customer import CustomerModel
from jewellery_store.data.models.order import OrderModel
from jewellery_store.data.models.order_item import OrderItemModel
from jewellery_store.data.models.cart_item import CartItemModel
from jewellery_store.data.models.customer_query import CustomerQueryModel

__all__ = [
    "JewelleryItemModel",
    "CustomerModel",
    "OrderModel",
    "OrderItemModel",
    "CartItemModel",
    "CustomerQueryModel",
]
