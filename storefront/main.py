"""
Storefront Application

REST backend for a storefront: catalog, per-user carts and wishlists.
Cart and wishlist routes require a signed bearer token.
"""

import os
import logging
from contextlib import asynccontextmanager
from typing import Optional

from fastapi import FastAPI, Request
from fastapi.exceptions import RequestValidationError
from fastapi.middleware.cors import CORSMiddleware
from fastapi.responses import JSONResponse
from starlette.exceptions import HTTPException as StarletteHTTPException
from dotenv import load_dotenv

from .core.config import Settings, get_settings
from .database.products import product_db
from .errors import ERROR_INTERNAL, StorefrontError
from .routes import products_router, cart_router, wishlist_router, users_router
from .security.auth import IdentityMiddleware, get_token_signer, get_token_verifier

# Load environment variables
load_dotenv(os.path.join(os.path.dirname(__file__), "..", "config", ".env"))

logger = logging.getLogger(__name__)


def configure_logging(settings: Settings) -> None:
    logging.basicConfig(
        level=logging.DEBUG if settings.debug else getattr(logging, settings.log_level.upper(), logging.INFO),
        format="%(asctime)s - %(name)s - %(levelname)s - %(message)s",
    )


@asynccontextmanager
async def lifespan(app: FastAPI):
    """Application lifespan events"""
    logger.info("Storefront starting up...")
    logger.info(f"Catalog holds {len(product_db.products)} products")
    yield
    logger.info("Storefront shutting down...")


def _format_validation_error(exc: RequestValidationError) -> str:
    errors = exc.errors()
    if not errors:
        return "Invalid request"
    first = errors[0]
    location = ".".join(str(part) for part in first.get("loc", ()) if part != "body")
    return f"{location}: {first.get('msg')}" if location else str(first.get("msg"))


def register_exception_handlers(app: FastAPI) -> None:
    """Every error leaves the API as {"message": ...}"""

    @app.exception_handler(StorefrontError)
    async def storefront_error_handler(request: Request, exc: StorefrontError):
        return JSONResponse(status_code=exc.status_code, content={"message": exc.message})

    @app.exception_handler(StarletteHTTPException)
    async def http_error_handler(request: Request, exc: StarletteHTTPException):
        return JSONResponse(
            status_code=exc.status_code,
            content={"message": str(exc.detail)},
            headers=getattr(exc, "headers", None),
        )

    @app.exception_handler(RequestValidationError)
    async def validation_error_handler(request: Request, exc: RequestValidationError):
        return JSONResponse(status_code=400, content={"message": _format_validation_error(exc)})

    @app.exception_handler(Exception)
    async def unexpected_error_handler(request: Request, exc: Exception):
        logger.error(f"Unhandled error on {request.method} {request.url.path}: {exc}", exc_info=exc)
        return JSONResponse(status_code=500, content={"message": ERROR_INTERNAL})


def create_app(settings: Optional[Settings] = None) -> FastAPI:
    """Build the FastAPI application"""
    settings = settings or get_settings()
    configure_logging(settings)

    if not settings.seed_catalog:
        product_db.reset(seed=False)

    app = FastAPI(
        title=settings.app_name,
        description="Storefront catalog, cart and wishlist API",
        version="1.0.0",
        lifespan=lifespan,
    )

    app.add_middleware(
        CORSMiddleware,
        allow_origins=settings.cors_origins,
        allow_credentials=True,
        allow_methods=["*"],
        allow_headers=["*"],
    )

    app.add_middleware(IdentityMiddleware, verifier=get_token_verifier(settings))
    app.state.token_signer = get_token_signer(settings)

    register_exception_handlers(app)

    app.include_router(products_router)
    app.include_router(cart_router)
    app.include_router(wishlist_router)
    app.include_router(users_router)

    @app.get("/")
    async def home():
        return {
            "message": "Storefront API",
            "docs": "/docs",
            "endpoints": {
                "products": "/api/products",
                "cart": "/api/cart",
                "wishlist": "/api/wishlist",
                "users": "/api/users",
            },
        }

    @app.get("/health")
    async def health_check():
        """Health check endpoint"""
        return {"status": "healthy", "service": "storefront"}

    return app


app = create_app()


if __name__ == "__main__":
    import uvicorn

    settings = get_settings()
    uvicorn.run(
        "storefront.main:app",
        host=settings.host,
        port=settings.port,
        reload=settings.debug,
    )
