# 📄 File: app/main.py
#
# 🧭 Purpose (Layman Explanation):
# The main control center that starts the Plant Identifier, connects the AI and the favourites
# storage, and makes sure everything is ready to handle requests from the web and mobile apps.
#
# 🧪 Purpose (Technical Summary):
# FastAPI application factory and entry point with middleware setup, router registration,
# lifespan-managed shared objects (Gemini analyzer, session registry, favourites repository)
# and exception handlers.
#
# 🔗 Dependencies:
# - FastAPI framework, uvicorn
# - app.shared.config.settings
# - app.api (middleware, v1 router)
# - plant_identification and favourites modules
#
# 🔄 Connected Modules / Calls From:
# - uvicorn server startup
# - Docker container entry point
# - Development server commands
# - tests (TestClient)

from contextlib import asynccontextmanager
from typing import AsyncGenerator

import uvicorn
from fastapi import FastAPI, Response
from fastapi.middleware.cors import CORSMiddleware
from fastapi.middleware.gzip import GZipMiddleware

from app.api.middleware import RequestLoggingMiddleware, register_exception_handlers
from app.api.v1 import API_TAGS
from app.api.v1.router import api_v1_router
from app.modules.favourites.infrastructure.storage.factory import create_favourites_repository
from app.modules.plant_identification.application.session import SessionRegistry
from app.modules.plant_identification.infrastructure.external.gemini_client import GeminiPlantAnalyzer
from app.shared.config.redis import close_redis
from app.shared.config.settings import Settings, get_settings
from app.shared.utils.logging import get_logger, setup_logging

logger = get_logger(__name__)


@asynccontextmanager
async def lifespan(app: FastAPI) -> AsyncGenerator[None, None]:
    """
    Application lifespan context manager.

    Creates the long-lived objects shared by requests and releases
    their connections on shutdown.
    """
    settings: Settings = app.state.settings
    setup_logging(
        log_level=settings.LOG_LEVEL,
        log_format=settings.LOG_FORMAT,
        log_file=settings.LOG_FILE,
    )
    logger.info("🌱 Plant Identifier API starting up...", environment=settings.ENVIRONMENT)

    app.state.plant_analyzer = GeminiPlantAnalyzer.from_settings(settings)
    app.state.session_registry = SessionRegistry(
        max_sessions=settings.SESSION_MAX_CLIENTS,
        ttl_seconds=settings.SESSION_TTL_SECONDS,
    )
    app.state.favourites_repository = create_favourites_repository(settings)

    if not settings.GOOGLE_GEMINI_API_KEY:
        logger.warning("GOOGLE_GEMINI_API_KEY is not set; identification requests will fail")

    logger.info("✅ Plant Identifier API startup complete")

    try:
        yield  # Application is running
    finally:
        logger.info("🔄 Plant Identifier API shutting down...")

        await app.state.plant_analyzer.close()
        if settings.FAVOURITES_BACKEND == "redis":
            await close_redis()

        logger.info("✅ Plant Identifier API shutdown complete")


def create_application(settings: Settings = None) -> FastAPI:
    """
    Application factory function.

    Creates and configures the FastAPI application with middleware,
    routers and exception handlers for the current environment.

    Returns:
        FastAPI: Configured FastAPI application instance
    """
    settings = settings or get_settings()

    app = FastAPI(
        title=settings.APP_NAME,
        description=settings.APP_DESCRIPTION,
        version=settings.APP_VERSION,
        docs_url="/docs" if settings.DEBUG else None,
        redoc_url="/redoc" if settings.DEBUG else None,
        openapi_url="/openapi.json" if settings.DEBUG else None,
        openapi_tags=API_TAGS,
        lifespan=lifespan,
        debug=settings.DEBUG,
    )
    app.state.settings = settings

    # =========================================================================
    # MIDDLEWARE CONFIGURATION
    # =========================================================================

    app.add_middleware(RequestLoggingMiddleware)

    app.add_middleware(
        CORSMiddleware,
        allow_origins=settings.cors_origins_list,
        allow_credentials=settings.CORS_ALLOW_CREDENTIALS,
        allow_methods=["GET", "POST", "DELETE", "OPTIONS"],
        allow_headers=["*"],
        expose_headers=["X-Request-ID", "X-Response-Time"],
    )

    app.add_middleware(GZipMiddleware, minimum_size=1000)

    # =========================================================================
    # ROUTER REGISTRATION
    # =========================================================================

    app.include_router(api_v1_router, prefix="/api/v1")

    # =========================================================================
    # EXCEPTION HANDLERS
    # =========================================================================

    register_exception_handlers(app)

    # =========================================================================
    # ROOT ENDPOINTS
    # =========================================================================

    @app.get("/", include_in_schema=False)
    async def root() -> dict:
        """Root endpoint with API information."""
        return {
            "name": settings.APP_NAME,
            "version": settings.APP_VERSION,
            "description": settings.APP_DESCRIPTION,
            "docs_url": "/docs" if settings.DEBUG else None,
            "health_check": "/api/v1/health",
            "api_base": "/api/v1",
        }

    @app.get("/favicon.ico", include_in_schema=False)
    async def favicon():
        """Favicon endpoint to prevent 404 errors."""
        return Response(status_code=204)

    return app


# Create the FastAPI application
app = create_application()


def main():
    """
    Main function for running the application in development.

    Used when running ``python -m app.main`` or the ``plant-identifier``
    script entry point.
    """
    settings = get_settings()
    uvicorn.run(
        "app.main:app",
        host=settings.HOST,
        port=settings.PORT,
        reload=settings.RELOAD and settings.is_development,
        log_level=settings.LOG_LEVEL.lower(),
        workers=1 if settings.RELOAD else settings.WORKERS,
    )


if __name__ == "__main__":
    main()
