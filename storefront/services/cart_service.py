"""Cart reconciliation service."""

import logging

from ..core.config import get_settings
from ..database.carts import CartDatabase, cart_db
from ..database.products import ProductDatabase, product_db
from ..errors import (
    ERROR_CART_NOT_FOUND,
    ERROR_PRODUCT_NOT_FOUND,
    InsufficientStockError,
    NotFoundError,
    ValidationError,
)
from ..models.cart import Cart, CartItem
from ..pricing import effective_price

logger = logging.getLogger(__name__)


class CartService:
    """
    Adds and removes cart lines against the catalog.

    Features:
    - Price and image are snapshotted into the line when it is first added
    - Adding updates the total incrementally, removing recomputes it in full
    - Stock is checked against the requested quantity (optionally against the
      line's resulting quantity, see ``cumulative_stock_check``)
    """

    def __init__(
        self,
        products: ProductDatabase,
        carts: CartDatabase,
        cumulative_stock_check: bool = False,
    ):
        self.products = products
        self.carts = carts
        self.cumulative_stock_check = cumulative_stock_check

    def add_item(self, user_id: str, product_id: str, quantity: int = 1) -> Cart:
        """Add ``quantity`` of a product to the user's cart, creating the cart if needed."""
        if not product_id or not isinstance(product_id, str):
            raise ValidationError("productId is required")
        if isinstance(quantity, bool) or not isinstance(quantity, int) or quantity < 1:
            raise ValidationError("quantity must be a positive integer")

        product = self.products.get_product(product_id)
        if not product:
            raise NotFoundError(ERROR_PRODUCT_NOT_FOUND)

        if product.stock < quantity:
            logger.info(
                f"Rejected add of {quantity}x {product_id} for user {user_id}: "
                f"stock {product.stock}"
            )
            raise InsufficientStockError(available=product.stock, requested=quantity)

        line = CartItem(
            product_id=product.id,
            name=product.name,
            price=effective_price(product),
            image=product.images[0] if product.images else None,
            quantity=quantity,
        )

        # The cumulative limit is enforced by the store under its lock
        max_quantity = product.stock if self.cumulative_stock_check else None
        try:
            cart = self.carts.upsert_item(user_id, line, max_quantity=max_quantity)
        except InsufficientStockError as e:
            logger.info(
                f"Rejected add of {quantity}x {product_id} for user {user_id}: "
                f"stock {e.available}, line would hold {e.requested}"
            )
            raise
        logger.info(f"Added {quantity}x {product_id} to cart of user {user_id}, total={cart.total_price}")
        return cart

    def remove_item(self, user_id: str, product_id: str) -> Cart:
        """Drop a product's line; a product not in the cart is a no-op."""
        cart = self.carts.remove_item(user_id, product_id)
        if cart is None:
            raise NotFoundError(ERROR_CART_NOT_FOUND)

        logger.info(f"Removed {product_id} from cart of user {user_id}, total={cart.total_price}")
        return cart

    def clear_cart(self, user_id: str) -> None:
        """Delete the user's cart. Succeeds whether or not one existed."""
        if self.carts.delete_cart(user_id):
            logger.info(f"Cleared cart of user {user_id}")

    def get_cart(self, user_id: str) -> Cart:
        """The stored cart, or an empty one. Never creates a record."""
        cart = self.carts.get_cart(user_id)
        if cart is None:
            return Cart.empty(user_id)
        return cart


def get_cart_service() -> CartService:
    """FastAPI dependency: cart service over the shared stores."""
    return CartService(
        products=product_db,
        carts=cart_db,
        cumulative_stock_check=get_settings().cart_cumulative_stock_check,
    )
