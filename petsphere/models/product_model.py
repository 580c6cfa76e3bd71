from typing import Optional

from pydantic import ConfigDict, Field

from .base import InsertModel, PartialModel


class InsertProduct(InsertModel):
    name: str = Field(..., min_length=1)
    description: str = ''
    price: float = Field(..., ge=0)
    imageUrl: str = ''
    category: str = Field(..., min_length=1)  # dog, cat, fish
    subCategory: Optional[str] = None  # food, toy, accessory
    isFeatured: bool = False
    isOnSale: bool = False
    salePrice: Optional[float] = Field(None, ge=0)
    stock: int = Field(0, ge=0)
    rating: float = Field(0, ge=0, le=5)
    reviewCount: int = Field(0, ge=0)


class PartialProduct(PartialModel):
    name: Optional[str] = Field(None, min_length=1)
    description: Optional[str] = None
    price: Optional[float] = Field(None, ge=0)
    imageUrl: Optional[str] = None
    category: Optional[str] = Field(None, min_length=1)
    subCategory: Optional[str] = None
    isFeatured: Optional[bool] = None
    isOnSale: Optional[bool] = None
    salePrice: Optional[float] = Field(None, ge=0)
    stock: Optional[int] = Field(None, ge=0)
    rating: Optional[float] = Field(None, ge=0, le=5)
    reviewCount: Optional[int] = Field(None, ge=0)


class Product(InsertProduct):
    model_config = ConfigDict(frozen=True)

    id: int

    @property
    def effective_price(self):
        if self.isOnSale and self.salePrice is not None:
            return self.salePrice
        return self.price

    def __repr__(self):
        return f'<Product {self.name}>'
