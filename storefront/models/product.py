"""Product models for the storefront catalog"""

from datetime import datetime
from typing import Annotated, Optional

from pydantic import Field

from .common import APIModel, Money, ZERO


class Product(APIModel):
    """Product in the catalog"""
    id: str
    name: str
    description: str = ""
    price: Money = Field(ge=0)
    discount_price: Money = Field(default=ZERO, ge=0)  # 0 means no discount
    images: list[str] = []
    category: str = ""
    stock: int = Field(default=0, ge=0)
    tags: list[str] = []
    rating: float = Field(default=0, ge=0, le=5)
    is_new_product: bool = False
    is_featured: bool = False
    is_sale: bool = False
    created_at: datetime
    updated_at: datetime


class ProductCreateRequest(APIModel):
    """Request to create a product"""
    name: str = Field(min_length=1)
    description: str = Field(min_length=1)
    price: Money = Field(ge=0)
    discount_price: Money = Field(default=ZERO, ge=0)
    images: list[str] = []
    category: str = Field(min_length=1)
    stock: int = Field(default=0, ge=0)
    tags: list[str] = []
    is_new_product: bool = False
    is_featured: bool = False
    is_sale: bool = False


class ProductUpdateRequest(APIModel):
    """Partial update; omitted fields keep their current value"""
    name: Optional[Annotated[str, Field(min_length=1)]] = None
    description: Optional[Annotated[str, Field(min_length=1)]] = None
    price: Optional[Annotated[Money, Field(ge=0)]] = None
    discount_price: Optional[Annotated[Money, Field(ge=0)]] = None
    images: Optional[list[str]] = None
    category: Optional[Annotated[str, Field(min_length=1)]] = None
    stock: Optional[Annotated[int, Field(ge=0)]] = None
    tags: Optional[list[str]] = None
    is_new_product: Optional[bool] = None
    is_featured: Optional[bool] = None
    is_sale: Optional[bool] = None


class ProductSearchResponse(APIModel):
    """Response from product search"""
    products: list[Product]
    page: int
    pages: int
    total: int
