"""Cart models for the storefront"""

from datetime import datetime
from typing import Optional

from pydantic import Field

from .common import APIModel, Money, ZERO


class CartItem(APIModel):
    """Line item in a shopping cart; price and image are snapshots taken at add time"""
    product_id: str
    name: str
    price: Money
    image: Optional[str] = None
    quantity: int = Field(gt=0)


class Cart(APIModel):
    """Shopping cart, one per user"""
    user_id: str
    items: list[CartItem] = []
    total_price: Money = ZERO
    created_at: Optional[datetime] = None
    updated_at: Optional[datetime] = None

    @classmethod
    def empty(cls, user_id: str) -> "Cart":
        """Zero-value cart returned when the user has none stored"""
        return cls(user_id=user_id, items=[], total_price=ZERO)


class AddToCartRequest(APIModel):
    """Request to add item to cart"""
    product_id: str = Field(min_length=1)
    quantity: int = Field(default=1, ge=1)


class CartResponse(APIModel):
    """Cart API response"""
    cart: Cart
    message: Optional[str] = None
