"""Wishlist reconciliation service."""

import logging

from ..database.products import ProductDatabase, product_db
from ..database.wishlists import WishlistDatabase, wishlist_db
from ..errors import ERROR_PRODUCT_NOT_FOUND, ERROR_WISHLIST_NOT_FOUND, NotFoundError, ValidationError
from ..models.wishlist import PopulatedWishlist, Wishlist

logger = logging.getLogger(__name__)


class WishlistService:
    """Keeps each user's wishlist as an ordered set of product references."""

    def __init__(self, products: ProductDatabase, wishlists: WishlistDatabase):
        self.products = products
        self.wishlists = wishlists

    def add_to_wishlist(self, user_id: str, product_id: str) -> Wishlist:
        if not product_id or not isinstance(product_id, str):
            raise ValidationError("productId is required")

        if not self.products.get_product(product_id):
            raise NotFoundError(ERROR_PRODUCT_NOT_FOUND)

        wishlist = self.wishlists.add_product(user_id, product_id)
        logger.info(f"Wishlist of user {user_id} now holds {len(wishlist.products)} products")
        return wishlist

    def remove_from_wishlist(self, user_id: str, product_id: str) -> Wishlist:
        wishlist = self.wishlists.remove_product(user_id, product_id)
        if wishlist is None:
            raise NotFoundError(ERROR_WISHLIST_NOT_FOUND)
        return wishlist

    def clear_wishlist(self, user_id: str) -> None:
        if self.wishlists.delete_wishlist(user_id):
            logger.info(f"Cleared wishlist of user {user_id}")

    def get_wishlist(self, user_id: str) -> PopulatedWishlist:
        """
        Wishlist with references joined to catalog products.

        References to products that have since left the catalog are skipped.
        Returns an empty product list when the user has no wishlist.
        """
        wishlist = self.wishlists.get_wishlist(user_id)
        if wishlist is None:
            return PopulatedWishlist(products=[])

        return PopulatedWishlist(
            user_id=wishlist.user_id,
            products=self.products.get_products(wishlist.products),
        )


def get_wishlist_service() -> WishlistService:
    """FastAPI dependency: wishlist service over the shared stores."""
    return WishlistService(products=product_db, wishlists=wishlist_db)
