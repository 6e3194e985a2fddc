"""Cart API routes"""

from fastapi import APIRouter, Depends

from ..models.cart import AddToCartRequest, CartResponse
from ..models.common import MessageResponse
from ..models.user import User
from ..security.auth import require_user
from ..services.cart_service import CartService, get_cart_service

router = APIRouter(prefix="/api/cart", tags=["Cart"])


@router.post("/add-to-cart", response_model=CartResponse, status_code=201)
async def add_to_cart(
    request: AddToCartRequest,
    user: User = Depends(require_user),
    service: CartService = Depends(get_cart_service),
):
    """Add an item to the cart"""
    cart = service.add_item(user.id, request.product_id, request.quantity)
    return CartResponse(cart=cart)


@router.delete("/remove-from-cart/{product_id}", response_model=CartResponse)
async def remove_from_cart(
    product_id: str,
    user: User = Depends(require_user),
    service: CartService = Depends(get_cart_service),
):
    """Remove an item from the cart"""
    cart = service.remove_item(user.id, product_id)
    return CartResponse(cart=cart)


@router.get("/get-cart", response_model=CartResponse)
async def get_cart(
    user: User = Depends(require_user),
    service: CartService = Depends(get_cart_service),
):
    """Get the current user's cart"""
    return CartResponse(cart=service.get_cart(user.id))


@router.delete("/clear-cart", response_model=MessageResponse)
async def clear_cart(
    user: User = Depends(require_user),
    service: CartService = Depends(get_cart_service),
):
    """Delete the current user's cart"""
    service.clear_cart(user.id)
    return MessageResponse(message="Cart cleared")
