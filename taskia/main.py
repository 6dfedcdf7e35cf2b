"""
FastAPI Application
===================

Main FastAPI app setup with all routes, middleware and exception handlers.
"""
import logging
from pathlib import Path
from typing import Optional

from dotenv import load_dotenv
from fastapi import FastAPI
from fastapi.middleware.cors import CORSMiddleware

from taskia import __version__
from taskia.api.error_handlers import register_exception_handlers
from taskia.api.v1 import auth_router, health_router, project_router, user_router
from taskia.core.config import Settings, get_settings
from taskia.core.logging_config import configure_logging
from taskia.di.container import get_container
from taskia.infrastructure.db.indexes import ensure_indexes
from taskia.infrastructure.db.mongo_connection import close_mongo_client

logger = logging.getLogger(__name__)


def create_application(settings: Optional[Settings] = None) -> FastAPI:
    """
    Create and configure FastAPI application.

    This function sets up the FastAPI application with:
    - Environment variable loading and logging
    - CORS middleware configuration
    - Exception handlers (validation → 400 envelope, unhandled → 500 problem)
    - API route registration under the configured prefix
    - Startup handler creating the MongoDB indexes

    Args:
        settings: Settings to use instead of the process-wide ones

    Returns:
        Configured FastAPI application instance
    """
    # Load environment variables from .env file
    env_path = Path(__file__).resolve().parent.parent / ".env"
    load_dotenv(env_path)

    settings = settings or get_settings()
    configure_logging(settings.log_level)

    application = FastAPI(
        title="TaskIA API",
        description="Users, first-access authentication and projects",
        version=__version__,
        docs_url="/docs",
        redoc_url="/redoc",
    )

    application.add_middleware(
        CORSMiddleware,
        allow_origins=settings.cors_allowed_origins,
        allow_credentials=True,
        allow_methods=["*"],
        allow_headers=["*"],
    )

    register_exception_handlers(application, settings)

    prefix = settings.api_prefix.rstrip("/")
    application.include_router(user_router, prefix=f"{prefix}/users")
    application.include_router(project_router, prefix=f"{prefix}/projects")
    application.include_router(auth_router, prefix=f"{prefix}/auth")
    application.include_router(health_router, prefix=f"{prefix}/health")

    @application.on_event("startup")
    async def startup_event():
        """Create indexes; a database that is down must not keep the API from starting."""
        container = application.dependency_overrides.get(get_container, get_container)()
        try:
            ensure_indexes(container.get("mongo_client"), container.get(Settings))
        except Exception as e:
            logger.warning(f"Could not ensure MongoDB indexes: {e}")
        logger.info(f"TaskIA API started (environment: {settings.environment})")

    @application.on_event("shutdown")
    async def shutdown_event():
        """Release the process-wide MongoDB connection."""
        close_mongo_client()
        logger.info("TaskIA API stopped")

    @application.get("/")
    async def root():
        """Root endpoint."""
        return {
            "status": "running",
            "service": "TaskIA API",
            "version": __version__,
            "docs": "/docs",
        }

    return application


# Create application instance
app = create_application()
