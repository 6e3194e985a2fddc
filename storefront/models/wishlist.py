"""Wishlist models for the storefront"""

from datetime import datetime
from typing import Optional

from pydantic import Field

from .common import APIModel
from .product import Product


class Wishlist(APIModel):
    """Wishlist, one per user; products is an ordered set of product ids"""
    user_id: str
    products: list[str] = []
    created_at: Optional[datetime] = None
    updated_at: Optional[datetime] = None


class PopulatedWishlist(APIModel):
    """Wishlist with product references resolved for display"""
    user_id: Optional[str] = None
    products: list[Product] = []


class AddToWishlistRequest(APIModel):
    """Request to add a product to the wishlist"""
    product_id: str = Field(min_length=1)


class WishlistResponse(APIModel):
    wishlist: Wishlist


class PopulatedWishlistResponse(APIModel):
    wishlist: PopulatedWishlist
