"""Product catalog storage"""

import math
import threading
import uuid
from datetime import datetime, timedelta, timezone
from decimal import Decimal
from typing import Optional

from ..models.product import Product, ProductCreateRequest, ProductUpdateRequest

SORTABLE_FIELDS = {
    "createdAt": "created_at",
    "price": "price",
    "name": "name",
    "rating": "rating",
    "stock": "stock",
}


def _seed_products() -> dict[str, Product]:
    """Demo catalog used when seeding is enabled"""
    base = datetime(2025, 1, 1, tzinfo=timezone.utc)
    rows = [
        ("prod-001", "Wireless Noise-Cancelling Headphones", "30-hour battery, adaptive noise cancellation.",
         "349.99", "299.99", "electronics", 50, ["/static/images/headphones.jpg"], 4.7),
        ("prod-002", "Mechanical Keyboard", "Hot-swappable switches, aluminium frame.",
         "129.00", "0", "electronics", 80, ["/static/images/keyboard.jpg", "/static/images/keyboard-side.jpg"], 4.5),
        ("prod-003", "Merino Wool Sweater", "Lightweight crew neck, machine washable.",
         "89.00", "69.00", "clothing", 40, ["/static/images/sweater.jpg"], 4.2),
        ("prod-004", "Trail Running Shoes", "Grippy outsole, breathable mesh upper.",
         "140.00", "0", "clothing", 25, ["/static/images/trail-shoes.jpg"], 4.4),
        ("prod-005", "Cast Iron Skillet", "Pre-seasoned 12-inch skillet.",
         "45.00", "0", "home", 120, ["/static/images/skillet.jpg"], 4.8),
        ("prod-006", "Pour-Over Coffee Set", "Glass carafe, stainless filter, gooseneck kettle.",
         "75.00", "59.00", "home", 30, [], 4.1),
        ("prod-007", "Yoga Mat", "6mm non-slip natural rubber.",
         "58.00", "0", "sports", 60, ["/static/images/yoga-mat.jpg"], 4.3),
        ("prod-008", "Insulated Water Bottle", "Keeps drinks cold for 24 hours.",
         "35.00", "0", "sports", 200, ["/static/images/bottle.jpg"], 4.6),
        ("prod-009", "The Pragmatic Programmer", "20th anniversary edition. Hardcover.",
         "49.99", "39.99", "books", 75, ["/static/images/pragmatic.jpg"], 4.9),
        ("prod-010", "Limited Edition Print", "Signed art print, numbered.",
         "250.00", "0", "home", 1, ["/static/images/print.jpg"], 5.0),
    ]

    products = {}
    for offset, (pid, name, description, price, discount, category, stock, images, rating) in enumerate(rows):
        created = base + timedelta(days=offset)
        products[pid] = Product(
            id=pid,
            name=name,
            description=description,
            price=Decimal(price),
            discount_price=Decimal(discount),
            images=images,
            category=category,
            stock=stock,
            rating=rating,
            is_sale=Decimal(discount) != 0,
            created_at=created,
            updated_at=created,
        )
    return products


class ProductDatabase:
    """In-memory product database"""

    def __init__(self, seed: bool = True):
        self._lock = threading.RLock()
        self.products: dict[str, Product] = _seed_products() if seed else {}

    def reset(self, seed: bool = True) -> None:
        """Drop all products, optionally reloading the demo catalog"""
        with self._lock:
            self.products = _seed_products() if seed else {}

    def add_product(self, product: Product) -> Product:
        """Insert or replace a product as-is"""
        with self._lock:
            self.products[product.id] = product.model_copy(deep=True)
            return product

    def get_product(self, product_id: str) -> Optional[Product]:
        """Get a product by ID"""
        with self._lock:
            product = self.products.get(product_id)
            return product.model_copy(deep=True) if product else None

    def get_products(self, product_ids: list[str]) -> list[Product]:
        """Resolve ids to products, preserving order and skipping unknown ids"""
        with self._lock:
            return [
                self.products[pid].model_copy(deep=True)
                for pid in product_ids
                if pid in self.products
            ]

    def search_products(
        self,
        keyword: Optional[str] = None,
        category: Optional[str] = None,
        price_min: Optional[Decimal] = None,
        price_max: Optional[Decimal] = None,
        sort_by: str = "createdAt",
        sort_order: str = "desc",
        page: int = 1,
        page_size: int = 10,
    ) -> tuple[list[Product], int, int]:
        """
        Search products with filters.

        Returns:
            Tuple of (page of matching products, total count, page count)
        """
        with self._lock:
            results = list(self.products.values())

        # Filter by keyword
        if keyword:
            keyword_lower = keyword.lower()
            results = [
                p for p in results
                if keyword_lower in p.name.lower() or keyword_lower in p.description.lower()
            ]

        # Filter by category
        if category:
            results = [p for p in results if p.category == category]

        # Filter by price range
        if price_min is not None:
            results = [p for p in results if p.price >= price_min]
        if price_max is not None:
            results = [p for p in results if p.price <= price_max]

        attribute = SORTABLE_FIELDS.get(sort_by, "created_at")
        results.sort(key=lambda p: getattr(p, attribute), reverse=sort_order != "asc")

        total = len(results)
        pages = math.ceil(total / page_size) if page_size else 0

        start = page_size * (page - 1)
        results = results[start : start + page_size]

        return [p.model_copy(deep=True) for p in results], total, pages

    def create_product(self, request: ProductCreateRequest) -> Product:
        """Create a product from an admin request"""
        now = datetime.now(timezone.utc)
        product = Product(
            id=uuid.uuid4().hex,
            rating=0,
            created_at=now,
            updated_at=now,
            **request.model_dump(),
        )
        with self._lock:
            self.products[product.id] = product
        return product.model_copy(deep=True)

    def update_product(self, product_id: str, request: ProductUpdateRequest) -> Optional[Product]:
        """Apply a partial update; returns None if the product does not exist"""
        changes = request.model_dump(exclude_none=True)
        with self._lock:
            product = self.products.get(product_id)
            if not product:
                return None

            updated = product.model_copy(
                update={**changes, "updated_at": datetime.now(timezone.utc)},
                deep=True,
            )
            self.products[product_id] = updated
            return updated.model_copy(deep=True)

    def delete_product(self, product_id: str) -> bool:
        """Delete a product"""
        with self._lock:
            return self.products.pop(product_id, None) is not None


# Singleton instance
product_db = ProductDatabase()
