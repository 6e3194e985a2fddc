"""Cart storage for the storefront"""

import threading
from datetime import datetime, timezone
from typing import Optional

from ..errors import InsufficientStockError
from ..models.cart import Cart, CartItem
from ..pricing import cart_total, line_total


class CartDatabase:
    """
    In-memory cart storage, one document per user.

    Each mutation runs as a single locked read-modify-write, the way a
    document store applies a find-and-update, so concurrent requests for the
    same user cannot lose an update. Callers always receive copies.
    """

    def __init__(self):
        self._lock = threading.RLock()
        self.carts: dict[str, Cart] = {}

    def reset(self) -> None:
        with self._lock:
            self.carts = {}

    def get_cart(self, user_id: str) -> Optional[Cart]:
        """Get a user's cart"""
        with self._lock:
            cart = self.carts.get(user_id)
            return cart.model_copy(deep=True) if cart else None

    def upsert_item(self, user_id: str, item: CartItem, max_quantity: Optional[int] = None) -> Cart:
        """
        Add a line to the user's cart, creating the cart if needed.

        An existing line for the same product keeps its snapshot price and has
        its quantity increased. The total grows by the stored line price (not
        the product's current price) times the added quantity.

        When ``max_quantity`` is given, a resulting line quantity above it
        raises InsufficientStockError and leaves the cart untouched.
        """
        with self._lock:
            cart = self.carts.get(user_id)
            existing_item = None
            if cart is not None:
                existing_item = next(
                    (line for line in cart.items if line.product_id == item.product_id),
                    None,
                )

            if max_quantity is not None:
                resulting = item.quantity + (existing_item.quantity if existing_item else 0)
                if resulting > max_quantity:
                    raise InsufficientStockError(available=max_quantity, requested=resulting)

            now = datetime.now(timezone.utc)
            if cart is None:
                cart = Cart(user_id=user_id, items=[], created_at=now)
                self.carts[user_id] = cart

            if existing_item:
                existing_item.quantity += item.quantity
                added = line_total(existing_item.price, item.quantity)
            else:
                cart.items.append(item.model_copy())
                added = line_total(item.price, item.quantity)

            cart.total_price = cart.total_price + added
            cart.updated_at = now
            return cart.model_copy(deep=True)

    def remove_item(self, user_id: str, product_id: str) -> Optional[Cart]:
        """
        Remove a product's line and recompute the total from scratch.

        Returns None if the user has no cart. Removing a product that is not
        in the cart leaves the items alone but still recomputes.
        """
        with self._lock:
            cart = self.carts.get(user_id)
            if cart is None:
                return None

            cart.items = [line for line in cart.items if line.product_id != product_id]
            cart.total_price = cart_total(cart.items)
            cart.updated_at = datetime.now(timezone.utc)
            return cart.model_copy(deep=True)

    def delete_cart(self, user_id: str) -> bool:
        """Delete a cart"""
        with self._lock:
            return self.carts.pop(user_id, None) is not None


# Singleton instance
cart_db = CartDatabase()
