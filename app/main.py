# =============================================================================
# app/main.py - FastAPI Application Entry Point
# =============================================================================
# This is the main entry point for the WellnessHub API.
# It configures the FastAPI application with middleware, routers, and handlers.
#
# Usage:
#   uvicorn app.main:app --reload
#   python -m app.main
# =============================================================================

import logging
from contextlib import asynccontextmanager

from fastapi import FastAPI
from fastapi.exceptions import RequestValidationError
from fastapi.middleware.cors import CORSMiddleware
from starlette.exceptions import HTTPException as StarletteHTTPException

from app.config import Settings, settings as default_settings
from app.context import VERSION, build_context
from app.exceptions import (
    WellnessHubException,
    http_exception_handler,
    unhandled_exception_handler,
    validation_exception_handler,
    wellnesshub_exception_handler,
)
from app.routers import admin, appointments, contact, health, newsletter
from app.auth import routes as auth_routes

# Configure logging
logging.basicConfig(
    level=logging.DEBUG if default_settings.DEBUG else logging.INFO,
    format="%(asctime)s - %(name)s - %(levelname)s - %(message)s"
)
logger = logging.getLogger(__name__)


@asynccontextmanager
async def lifespan(app: FastAPI):
    """
    Application lifespan handler.

    The context itself is built in create_app() so the app is usable even
    when the lifespan isn't run (e.g. a bare TestClient).
    """
    context = app.state.context
    logger.info(f"🚀 WellnessHub API starting in {context.settings.ENVIRONMENT} mode")
    logger.info(f"📍 Health check: http://localhost:{context.settings.PORT}/api/health")

    yield

    pending = context.notification_service.pending_ids()
    if pending:
        logger.warning(f"Shutting down with {len(pending)} undelivered notification(s)")
    logger.info("Shutting down WellnessHub API")


def create_app(settings: Settings | None = None) -> FastAPI:
    """
    Create and configure the FastAPI application.

    Args:
        settings: Application settings. If None, uses the environment.

    Returns:
        Configured FastAPI application with its own, empty stores.
    """
    settings = settings or default_settings

    app = FastAPI(
        title="WellnessHub API",
        description="Appointments, contact messages and newsletter signups for WellnessHub.",
        version=VERSION,
        docs_url="/docs" if settings.DEBUG else None,
        redoc_url=None,
        lifespan=lifespan,
        openapi_tags=[
            {"name": "Auth", "description": "Login and registration"},
            {"name": "Appointments", "description": "Book appointments"},
            {"name": "Contact", "description": "Contact form"},
            {"name": "Newsletter", "description": "Newsletter signup"},
            {"name": "Admin", "description": "Protected stats and notification status"},
            {"name": "Health", "description": "API health check"},
        ],
    )
    app.state.context = build_context(settings)

    # =========================================================================
    # Middleware
    # =========================================================================

    app.add_middleware(
        CORSMiddleware,
        allow_origins=settings.cors_origins_list if settings.is_production else ["*"],
        allow_credentials=settings.is_production,
        allow_methods=["*"],
        allow_headers=["*"],
    )

    # =========================================================================
    # Exception Handlers
    # =========================================================================

    app.add_exception_handler(WellnessHubException, wellnesshub_exception_handler)
    app.add_exception_handler(StarletteHTTPException, http_exception_handler)
    app.add_exception_handler(RequestValidationError, validation_exception_handler)
    app.add_exception_handler(Exception, unhandled_exception_handler)

    # =========================================================================
    # Routers
    # =========================================================================

    app.include_router(auth_routes.router, prefix="/api/auth", tags=["Auth"])
    app.include_router(appointments.router, prefix="/api/appointments", tags=["Appointments"])
    app.include_router(contact.router, prefix="/api/contact", tags=["Contact"])
    app.include_router(newsletter.router, prefix="/api/newsletter", tags=["Newsletter"])
    app.include_router(admin.router, prefix="/api/admin", tags=["Admin"])
    app.include_router(health.router, prefix="/api", tags=["Health"])

    return app


# Application instance for uvicorn
app = create_app()


def main():
    """Run the application using uvicorn."""
    import uvicorn

    uvicorn.run(
        "app.main:app",
        host=default_settings.API_HOST,
        port=default_settings.PORT,
        reload=default_settings.DEBUG,
        log_level="debug" if default_settings.DEBUG else "info",
    )


if __name__ == "__main__":
    main()
