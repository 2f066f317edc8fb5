"""
FastAPI application entry point.
"""

from contextlib import asynccontextmanager
from typing import AsyncGenerator

import structlog
from fastapi import FastAPI, Request
from fastapi.responses import JSONResponse

from product_customizer.core.config import settings
from product_customizer.core.exceptions import CustomizerError, RegistryNotInitializedError
from product_customizer.core.hooks import hooks
from product_customizer.core.logging import configure_logging
from product_customizer.core.plugins import load_from_entrypoints, taxonomy_backends
from product_customizer.services.registry import registry_provider
from product_customizer.api.routes import router as api_router
from product_customizer.api.middleware import LoggingMiddleware, RequestIdMiddleware

logger = structlog.get_logger()


@asynccontextmanager
async def lifespan(app: FastAPI) -> AsyncGenerator[None, None]:
    """Application lifespan events."""
    # Startup
    from product_customizer.implementations.register import register_backends
    register_backends()

    config = settings.customizer
    if config.taxonomy_backend == "database":
        from product_customizer.models.database import init_db
        await init_db()

    loaded = load_from_entrypoints(hooks, config.contributor_group)
    logger.info("contributors_loaded", contributors=loaded)

    taxonomy = taxonomy_backends.get(config.taxonomy_backend)
    await registry_provider.get_or_build(hooks, taxonomy, config)

    yield

    # Shutdown
    if config.taxonomy_backend == "database":
        from product_customizer.models.database import close_db
        await close_db()


def create_app() -> FastAPI:
    """Create and configure FastAPI application."""
    configure_logging(settings)

    app = FastAPI(
        title=settings.app_name,
        version=settings.app_version,
        debug=settings.debug,
        lifespan=lifespan,
        docs_url="/docs" if settings.is_development else None,
        redoc_url="/redoc" if settings.is_development else None,
    )

    # Middleware (order matters - last added is outermost)
    app.add_middleware(LoggingMiddleware)
    app.add_middleware(RequestIdMiddleware)

    # Routes
    app.include_router(api_router, prefix="/api")

    # Exception handlers
    @app.exception_handler(RegistryNotInitializedError)
    async def registry_not_initialized_handler(request: Request, exc: RegistryNotInitializedError):
        return JSONResponse(
            status_code=503,
            content={"error": "registry_not_initialized", "message": str(exc)},
        )

    @app.exception_handler(CustomizerError)
    async def customizer_error_handler(request: Request, exc: CustomizerError):
        logger.error("customizer_error", error=str(exc))
        return JSONResponse(
            status_code=500,
            content={
                "error": "customizer_error",
                "message": str(exc) if settings.debug else "An error occurred",
            },
        )

    @app.get("/health")
    async def health_check():
        """Quick health check endpoint (for load balancers)."""
        return {
            "status": "healthy" if registry_provider.is_initialized else "starting",
            "version": settings.app_version,
            "environment": settings.environment,
        }

    return app


app = create_app()


if __name__ == "__main__":
    import uvicorn

    uvicorn.run(
        "product_customizer.main:app",
        host=settings.host,
        port=settings.port,
    )
