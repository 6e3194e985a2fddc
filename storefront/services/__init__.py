# Service layer

from .cart_service import CartService, get_cart_service
from .wishlist_service import WishlistService, get_wishlist_service
from .user_service import UserService, get_user_service

__all__ = [
    "CartService",
    "get_cart_service",
    "WishlistService",
    "get_wishlist_service",
    "UserService",
    "get_user_service",
]
