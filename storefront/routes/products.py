"""Product API routes"""

import logging
from decimal import Decimal
from typing import Literal, Optional

from fastapi import APIRouter, Depends, Query

from ..database.products import product_db
from ..errors import ERROR_PRODUCT_NOT_FOUND, NotFoundError
from ..models.common import MessageResponse
from ..models.product import (
    Product,
    ProductCreateRequest,
    ProductSearchResponse,
    ProductUpdateRequest,
)
from ..models.user import User
from ..security.auth import require_admin

logger = logging.getLogger(__name__)

router = APIRouter(prefix="/api/products", tags=["Products"])


@router.get("", response_model=ProductSearchResponse)
async def search_products(
    keyword: Optional[str] = Query(None, description="Search name and description"),
    category: Optional[str] = Query(None, description="Filter by category"),
    price_min: Optional[Decimal] = Query(None, ge=0, alias="priceMin", description="Minimum price"),
    price_max: Optional[Decimal] = Query(None, ge=0, alias="priceMax", description="Maximum price"),
    sort_by: Literal["createdAt", "price", "name", "rating", "stock"] = Query("createdAt", alias="sortBy"),
    sort_order: Literal["asc", "desc"] = Query("desc", alias="sortOrder"),
    page: int = Query(1, ge=1),
    page_size: int = Query(10, ge=1, le=100, alias="pageSize"),
):
    """
    Search products in the catalog.

    Public; no token needed.
    """
    products, total, pages = product_db.search_products(
        keyword=keyword,
        category=category,
        price_min=price_min,
        price_max=price_max,
        sort_by=sort_by,
        sort_order=sort_order,
        page=page,
        page_size=page_size,
    )

    return ProductSearchResponse(
        products=products,
        page=page,
        pages=pages,
        total=total,
    )


@router.get("/{product_id}", response_model=Product)
async def get_product(product_id: str):
    """Get a product by ID"""
    product = product_db.get_product(product_id)
    if not product:
        raise NotFoundError(ERROR_PRODUCT_NOT_FOUND)
    return product


@router.post("", response_model=Product, status_code=201)
async def create_product(
    request: ProductCreateRequest,
    admin: User = Depends(require_admin),
):
    """Create a product (admin only)"""
    product = product_db.create_product(request)
    logger.info(f"Product {product.id} created by {admin.id}")
    return product


@router.put("/{product_id}", response_model=Product)
async def update_product(
    product_id: str,
    request: ProductUpdateRequest,
    admin: User = Depends(require_admin),
):
    """Update a product (admin only); omitted fields are left unchanged"""
    product = product_db.update_product(product_id, request)
    if not product:
        raise NotFoundError(ERROR_PRODUCT_NOT_FOUND)
    logger.info(f"Product {product_id} updated by {admin.id}")
    return product


@router.delete("/{product_id}", response_model=MessageResponse)
async def delete_product(
    product_id: str,
    admin: User = Depends(require_admin),
):
    """Delete a product (admin only)"""
    if not product_db.delete_product(product_id):
        raise NotFoundError(ERROR_PRODUCT_NOT_FOUND)
    logger.info(f"Product {product_id} removed by {admin.id}")
    return MessageResponse(message="Product removed")
