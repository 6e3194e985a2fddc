"""
Storefront errors.

Services raise these; the handlers registered in ``storefront.main`` turn
them into ``{"message": ...}`` JSON responses with the matching status code.
"""

# Messages
ERROR_UNAUTHORIZED = "Unauthorized"
ERROR_FORBIDDEN = "Forbidden"
ERROR_PRODUCT_NOT_FOUND = "Product not found"
ERROR_CART_NOT_FOUND = "Cart not found"
ERROR_WISHLIST_NOT_FOUND = "Wishlist not found"
ERROR_INSUFFICIENT_STOCK = "Not enough stock available"
ERROR_INVALID_REQUEST = "Invalid request"
ERROR_INTERNAL = "Server error"
ERROR_USER_EXISTS = "User already exists"
ERROR_USER_NOT_FOUND = "User does not exist"
ERROR_INVALID_CREDENTIALS = "Invalid credentials"


class StorefrontError(Exception):
    """Base error; unexpected failures surface as 500"""

    status_code = 500
    default_message = ERROR_INTERNAL

    def __init__(self, message: str | None = None):
        self.message = message or self.default_message
        super().__init__(self.message)


class UnauthorizedError(StorefrontError):
    status_code = 401
    default_message = ERROR_UNAUTHORIZED


class ForbiddenError(StorefrontError):
    status_code = 403
    default_message = ERROR_FORBIDDEN


class NotFoundError(StorefrontError):
    status_code = 404
    default_message = "Not found"


class ValidationError(StorefrontError):
    status_code = 400
    default_message = ERROR_INVALID_REQUEST


class InsufficientStockError(StorefrontError):
    """Requested quantity exceeds the product's stock"""

    status_code = 400
    default_message = ERROR_INSUFFICIENT_STOCK

    def __init__(self, available: int, requested: int):
        self.available = available
        self.requested = requested
        super().__init__(f"{ERROR_INSUFFICIENT_STOCK}. Available: {available}")


class ConflictError(StorefrontError):
    status_code = 409
    default_message = "Conflict"


class ServiceUnavailableError(StorefrontError):
    status_code = 503
    default_message = "Service unavailable"
