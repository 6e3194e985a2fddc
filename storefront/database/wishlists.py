"""Wishlist storage for the storefront"""

import threading
from datetime import datetime, timezone
from typing import Optional

from ..models.wishlist import Wishlist


class WishlistDatabase:
    """In-memory wishlist storage, one document per user"""

    def __init__(self):
        self._lock = threading.RLock()
        self.wishlists: dict[str, Wishlist] = {}

    def reset(self) -> None:
        with self._lock:
            self.wishlists = {}

    def get_wishlist(self, user_id: str) -> Optional[Wishlist]:
        """Get a user's wishlist"""
        with self._lock:
            wishlist = self.wishlists.get(user_id)
            return wishlist.model_copy(deep=True) if wishlist else None

    def add_product(self, user_id: str, product_id: str) -> Wishlist:
        """Add a product reference, creating the wishlist if needed; duplicates are ignored"""
        with self._lock:
            now = datetime.now(timezone.utc)
            wishlist = self.wishlists.get(user_id)
            if wishlist is None:
                wishlist = Wishlist(user_id=user_id, products=[], created_at=now, updated_at=now)
                self.wishlists[user_id] = wishlist

            if product_id not in wishlist.products:
                wishlist.products.append(product_id)
                wishlist.updated_at = now

            return wishlist.model_copy(deep=True)

    def remove_product(self, user_id: str, product_id: str) -> Optional[Wishlist]:
        """Remove a product reference; returns None if the user has no wishlist"""
        with self._lock:
            wishlist = self.wishlists.get(user_id)
            if wishlist is None:
                return None

            wishlist.products = [pid for pid in wishlist.products if pid != product_id]
            wishlist.updated_at = datetime.now(timezone.utc)
            return wishlist.model_copy(deep=True)

    def delete_wishlist(self, user_id: str) -> bool:
        """Delete a wishlist"""
        with self._lock:
            return self.wishlists.pop(user_id, None) is not None


# Singleton instance
wishlist_db = WishlistDatabase()
