"""Price arithmetic shared by cart mutations."""

from decimal import Decimal
from typing import Iterable

from .models.cart import CartItem
from .models.common import ZERO
from .models.product import Product


def effective_price(product: Product) -> Decimal:
    """Discount price when one is set, list price otherwise."""
    return product.discount_price if product.discount_price != 0 else product.price


def line_total(price: Decimal, quantity: int) -> Decimal:
    return price * quantity


def cart_total(items: Iterable[CartItem]) -> Decimal:
    """Full recompute of a cart's total from its line snapshots."""
    return sum((line_total(item.price, item.quantity) for item in items), ZERO)
