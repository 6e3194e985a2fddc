# Database modules

from .products import product_db, ProductDatabase
from .carts import cart_db, CartDatabase
from .wishlists import wishlist_db, WishlistDatabase
from .users import user_db, UserDatabase

__all__ = [
    "product_db",
    "ProductDatabase",
    "cart_db",
    "CartDatabase",
    "wishlist_db",
    "WishlistDatabase",
    "user_db",
    "UserDatabase",
]
