"""
Au Pair Matching Backend - Main FastAPI Application
"""

import sys
from contextlib import asynccontextmanager
from datetime import datetime, timezone

import structlog
from fastapi import FastAPI
from fastapi.middleware.cors import CORSMiddleware

from aupair.api import create_api_router
from aupair.core.config import Settings, get_settings
from aupair.core.logging_config import configure_logging

logger = structlog.get_logger(__name__)


@asynccontextmanager
async def lifespan(app: FastAPI):
    """Application lifespan management"""
    settings = get_settings()
    logger.info("Starting Au Pair Matching API", version=app.version, environment=settings.ENVIRONMENT)

    try:
        from aupair.infrastructure.database import initialize_database

        db_manager = await initialize_database(settings)
        db_health = await db_manager.health_check()
        logger.info("Database initialized", status=db_health["status"])
    except Exception as e:
        logger.error("Failed to initialize database", error=str(e))
        if settings.is_production():
            sys.exit(1)

    yield

    logger.info("Shutting down Au Pair Matching API")
    try:
        from aupair.infrastructure.database import shutdown_database

        await shutdown_database()
        logger.info("Database shutdown completed")
    except Exception as e:
        logger.error("Cleanup error", error=str(e))


def setup_middleware(app: FastAPI, settings: Settings) -> None:
    app.add_middleware(
        CORSMiddleware,
        allow_origins=settings.get_cors_origins(),
        allow_credentials=settings.CORS_ORIGINS != "*",
        allow_methods=["*"],
        allow_headers=["*"],
    )


def create_app() -> FastAPI:
    """Create and configure FastAPI application"""
    settings = get_settings()
    configure_logging(settings.LOG_LEVEL, settings.LOG_FORMAT)

    app = FastAPI(
        title=settings.APP_NAME,
        description="Compatibility matching and booking between au pairs and host families",
        version=settings.APP_VERSION,
        docs_url="/docs" if not settings.is_production() else None,
        redoc_url="/redoc" if not settings.is_production() else None,
        openapi_url="/openapi.json" if not settings.is_production() else None,
        lifespan=lifespan,
    )

    setup_middleware(app, settings)
    app.include_router(create_api_router())

    @app.get("/health")
    async def health_check():
        """Basic health check endpoint"""
        return {
            "status": "OK",
            "version": app.version,
            "environment": settings.ENVIRONMENT,
            "timestamp": datetime.now(timezone.utc).isoformat(),
        }

    @app.get("/health/database")
    async def database_health_check():
        from aupair.infrastructure.database import get_database_manager

        return await get_database_manager().health_check()

    return app


app = create_app()


if __name__ == "__main__":
    import uvicorn

    settings = get_settings()
    uvicorn.run(
        "aupair.main:app",
        host=settings.HOST,
        port=settings.PORT,
        reload=settings.DEBUG,
    )
