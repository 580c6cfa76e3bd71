from pydantic import ConfigDict

from .base import InsertModel
from .product_model import Product


class InsertWishlist(InsertModel):
    userId: int
    productId: int


class Wishlist(InsertWishlist):
    model_config = ConfigDict(frozen=True)

    id: int


class WishlistWithProduct(Wishlist):
    product: Product
