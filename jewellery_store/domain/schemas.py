# jewellery_store/domain/schemas.py
from pydantic import BaseModel, Field, ConfigDict, EmailStr
from typing import List, Optional
from datetime import datetime

from jewellery_store.domain.enums import OrderStatus, QueryStatus


class PaginationIn(BaseModel):
    """Page/limit pair accepted by every list operation."""

    page: int = Field(1, ge=1, description="Page number, starting at 1")
    limit: int = Field(10, ge=1, le=100, description="Rows per page (1-100)")

    @property
    def offset(self) -> int:
        return (self.page - 1) * self.limit


# jewellery items

class JewelleryItemCreate(BaseModel):
    """Schema for creating a jewellery item."""

    name: str = Field(..., min_length=1, description="Name is required")
    materials: str = Field(..., min_length=1, description="Materials are required")
    description: str = Field(..., min_length=1, description="Description is required")
    price: float = Field(..., gt=0, description="Price must be positive")
    image_url: Optional[str] = None
    stock_quantity: int = Field(..., ge=0, description="Stock quantity must be non-negative")


class JewelleryItemUpdate(BaseModel):
    """
    Partial update. Only fields the caller actually sent are applied, so an explicit
    image_url=None clears the image while an omitted image_url leaves it alone.
    """

    id: int
    name: Optional[str] = Field(None, min_length=1)
    materials: Optional[str] = Field(None, min_length=1)
    description: Optional[str] = Field(None, min_length=1)
    price: Optional[float] = Field(None, gt=0)
    image_url: Optional[str] = None
    stock_quantity: Optional[int] = Field(None, ge=0)
    is_active: Optional[bool] = None


class JewelleryItemOut(BaseModel):
    id: int
    name: str
    materials: str
    description: str
    price: float
    image_url: Optional[str] = None
    stock_quantity: int
    is_active: bool
    created_at: datetime
    updated_at: datetime

    model_config = ConfigDict(from_attributes=True)


# customers

class CustomerCreate(BaseModel):
    """Schema for creating a customer."""

    email: EmailStr
    first_name: str = Field(..., min_length=1, description="First name is required")
    last_name: str = Field(..., min_length=1, description="Last name is required")
    phone: Optional[str] = None


class CustomerOut(BaseModel):
    id: int
    email: str
    first_name: str
    last_name: str
    phone: Optional[str] = None
    created_at: datetime

    model_config = ConfigDict(from_attributes=True)


# cart

class AddToCartIn(BaseModel):
    """Schema for adding a jewellery item to a session cart."""

    session_id: str = Field(..., min_length=1, description="Session ID is required")
    jewellery_item_id: int
    quantity: int = Field(..., gt=0, description="Quantity must be positive")


class UpdateCartItemIn(BaseModel):
    """Schema for changing the quantity of a cart row."""

    id: int
    quantity: int = Field(..., gt=0, description="Quantity must be positive")


class CartItemOut(BaseModel):
    id: int
    session_id: str
    jewellery_item_id: int
    quantity: int
    created_at: datetime

    model_config = ConfigDict(from_attributes=True)


class CartLineOut(BaseModel):
    """Cart row joined with the live catalog item."""

    id: int
    quantity: int
    jewellery_item: JewelleryItemOut

    model_config = ConfigDict(from_attributes=True)


class CartOut(BaseModel):
    items: List[CartLineOut]
    total_amount: float


# orders

class OrderCreate(BaseModel):
    """Schema for placing an order from a session cart."""

    customer_id: int
    total_amount: float = Field(..., gt=0, description="Total amount must be positive")
    shipping_address: str = Field(..., min_length=1, description="Shipping address is required")
    billing_address: str = Field(..., min_length=1, description="Billing address is required")
    payment_method: Optional[str] = None


class OrderUpdate(BaseModel):
    """Partial update of the order's status fields."""

    id: int
    status: Optional[OrderStatus] = None
    payment_status: Optional[str] = None
    payment_method: Optional[str] = None


class OrderOut(BaseModel):
    id: int
    customer_id: int
    total_amount: float
    status: OrderStatus
    shipping_address: str
    billing_address: str
    payment_status: str
    payment_method: Optional[str] = None
    created_at: datetime
    updated_at: datetime

    model_config = ConfigDict(from_attributes=True)


class OrderItemOut(BaseModel):
    id: int
    order_id: int
    jewellery_item_id: int
    quantity: int
    price_per_item: float
    created_at: datetime
    jewellery_item: JewelleryItemOut

    model_config = ConfigDict(from_attributes=True)


class OrderWithItemsOut(OrderOut):
    customer: CustomerOut
    order_items: List[OrderItemOut]


# customer queries

class CustomerQueryCreate(BaseModel):
    """Schema for a customer inquiry."""

    name: str = Field(..., min_length=1, description="Name is required")
    email: EmailStr
    subject: str = Field(..., min_length=1, description="Subject is required")
    message: str = Field(..., min_length=1, description="Message is required")


class CustomerQueryUpdate(BaseModel):
    id: int
    status: QueryStatus


class CustomerQueryOut(BaseModel):
    id: int
    name: str
    email: str
    subject: str
    message: str
    status: QueryStatus
    created_at: datetime
    updated_at: datetime

    model_config = ConfigDict(from_attributes=True)
