from datetime import datetime
from typing import Optional

from pydantic import ConfigDict, Field

from .base import InsertModel
from .product_model import Product


class InsertOrder(InsertModel):
    userId: int
    total: float = Field(..., ge=0)
    status: str = 'pending'
    paymentMethod: str
    shippingAddress: str
    billingAddress: str
    shippingMethod: str
    trackingNumber: Optional[str] = None


class Order(InsertOrder):
    model_config = ConfigDict(frozen=True)

    id: int
    createdAt: datetime

    def __repr__(self):
        return f'<Order {self.id} by User {self.userId}>'


class InsertOrderItem(InsertModel):
    orderId: int
    productId: int
    quantity: int = Field(..., ge=1)
    # Unit price charged at checkout, kept even if the product price changes later
    price: float = Field(..., ge=0)


class OrderItem(InsertOrderItem):
    model_config = ConfigDict(frozen=True)

    id: int


class OrderItemWithProduct(OrderItem):
    product: Product
