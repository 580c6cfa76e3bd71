from pydantic import ConfigDict, Field

from .base import InsertModel
from .product_model import Product


class InsertCart(InsertModel):
    userId: int
    productId: int
    quantity: int = Field(1, ge=1)


class Cart(InsertCart):
    model_config = ConfigDict(frozen=True)

    id: int


class CartWithProduct(Cart):
    product: Product
