"""
FastAPI application factory.

Creates and configures the FastAPI application instance.
"""

import logging
from contextlib import asynccontextmanager
from fastapi import FastAPI
from fastapi.middleware.cors import CORSMiddleware

from shared.config import get_settings
from shared.database import get_supabase_client, ping_database, reset_client_cache
from modules.auth.routes import router as auth_router
from modules.cart.routes import address_router, router as cart_router
from modules.products.routes import router as products_router
from modules.users.routes import router as users_router
from modules.verification.routes import router as verification_router

from .dependencies import init_container, reset_container
from .errors import register_exception_handlers
from .routes import health

logger = logging.getLogger(__name__)


def configure_logging(level: str) -> None:
    logging.basicConfig(
        level=level.upper(),
        format="%(asctime)s %(levelname)s %(name)s: %(message)s",
    )


@asynccontextmanager
async def lifespan(app: FastAPI):
    """
    Application lifespan handler.

    Builds the storage client and service container on startup and
    releases them on shutdown. A missing or unreachable store aborts
    startup; the client is the same cached handle that get_container()
    falls back to.
    """
    settings = get_settings()
    configure_logging(settings.log_level)
    logger.info(f"Starting {settings.app_name} on {settings.host}:{settings.port}")

    db = get_supabase_client(settings)
    try:
        ping_database(db)
        container = init_container(db, settings)
        container.seed_admin()
    except Exception:
        logger.error("Storage is unreachable or misconfigured; aborting startup")
        reset_container()
        reset_client_cache()
        raise
    yield

    reset_container()
    reset_client_cache()
    logger.info(f"Shut down {settings.app_name}")


def create_app() -> FastAPI:
    """
    Create and configure the FastAPI application.

    Returns:
        Configured FastAPI instance
    """
    settings = get_settings()

    app = FastAPI(
        title=settings.app_name,
        description="E-commerce backend with email-verified accounts",
        version=settings.app_version,
        lifespan=lifespan,
        docs_url="/api/docs" if settings.debug else None,
        redoc_url="/api/redoc" if settings.debug else None,
    )

    # Configure CORS
    app.add_middleware(
        CORSMiddleware,
        allow_origins=settings.cors_origins,
        allow_credentials=settings.cors_allow_credentials,
        allow_methods=settings.cors_allow_methods,
        allow_headers=settings.cors_allow_headers,
    )

    register_exception_handlers(app)

    # Register routes
    app.include_router(health.router, prefix="/api", tags=["health"])
    app.include_router(verification_router, prefix="/api/auth", tags=["verification"])
    app.include_router(auth_router, prefix="/api/auth", tags=["auth"])
    app.include_router(users_router, prefix="/api/users", tags=["users"])
    app.include_router(products_router, prefix="/api/products", tags=["products"])
    app.include_router(cart_router, prefix="/api/cart", tags=["cart"])
    app.include_router(address_router, prefix="/api/addresses", tags=["addresses"])

    return app


# Application instance for uvicorn
app = create_app()
