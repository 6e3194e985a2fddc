# Storefront Models

from .common import APIModel, MessageResponse, Money
from .product import Product, ProductCreateRequest, ProductUpdateRequest, ProductSearchResponse
from .cart import Cart, CartItem, AddToCartRequest, CartResponse
from .wishlist import (
    Wishlist,
    PopulatedWishlist,
    AddToWishlistRequest,
    WishlistResponse,
    PopulatedWishlistResponse,
)
from .user import AuthResponse, LoginRequest, RegisterRequest, User, UserResponse

__all__ = [
    "APIModel",
    "MessageResponse",
    "Money",
    "Product",
    "ProductCreateRequest",
    "ProductUpdateRequest",
    "ProductSearchResponse",
    "Cart",
    "CartItem",
    "AddToCartRequest",
    "CartResponse",
    "Wishlist",
    "PopulatedWishlist",
    "AddToWishlistRequest",
    "WishlistResponse",
    "PopulatedWishlistResponse",
    "User",
    "UserResponse",
    "RegisterRequest",
    "LoginRequest",
    "AuthResponse",
]
