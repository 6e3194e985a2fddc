"""Wishlist API routes"""

from fastapi import APIRouter, Depends

from ..models.common import MessageResponse
from ..models.user import User
from ..models.wishlist import AddToWishlistRequest, PopulatedWishlistResponse, WishlistResponse
from ..security.auth import require_user
from ..services.wishlist_service import WishlistService, get_wishlist_service

router = APIRouter(prefix="/api/wishlist", tags=["Wishlist"])


@router.post("/add-to-wishlist", response_model=WishlistResponse)
async def add_to_wishlist(
    request: AddToWishlistRequest,
    user: User = Depends(require_user),
    service: WishlistService = Depends(get_wishlist_service),
):
    """Add a product to the wishlist"""
    wishlist = service.add_to_wishlist(user.id, request.product_id)
    return WishlistResponse(wishlist=wishlist)


@router.delete("/remove-from-wishlist/{product_id}", response_model=WishlistResponse)
async def remove_from_wishlist(
    product_id: str,
    user: User = Depends(require_user),
    service: WishlistService = Depends(get_wishlist_service),
):
    """Remove a product from the wishlist"""
    wishlist = service.remove_from_wishlist(user.id, product_id)
    return WishlistResponse(wishlist=wishlist)


@router.get("/get-wishlist", response_model=PopulatedWishlistResponse)
async def get_wishlist(
    user: User = Depends(require_user),
    service: WishlistService = Depends(get_wishlist_service),
):
    """Get the wishlist with full product records"""
    return PopulatedWishlistResponse(wishlist=service.get_wishlist(user.id))


@router.delete("/clear-wishlist", response_model=MessageResponse)
async def clear_wishlist(
    user: User = Depends(require_user),
    service: WishlistService = Depends(get_wishlist_service),
):
    """Delete the wishlist"""
    service.clear_wishlist(user.id)
    return MessageResponse(message="Wishlist cleared")
