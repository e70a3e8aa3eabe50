"""
Application entry point.

Creates the FastAPI application and wires together:
- Routers (controller-style and REST-style forecast routes, health)
- Error handlers (centralized result and fault to HTTP mapping)
- Security middleware (headers, rate limiting)
- Logging configuration

No business logic belongs here.
"""

import logging

from fastapi import FastAPI
from slowapi.middleware import SlowAPIMiddleware

from sampleweb.core.config import Settings, settings as default_settings
from sampleweb.interfaces.health import router as health_router
from sampleweb.interfaces.weather.endpoints import router as forecast_endpoint_router
from sampleweb.interfaces.weather.router import router as weatherforecast_router
from sampleweb.shared.errors.handlers import register_error_handlers
from sampleweb.shared.logging import configure_logging
from sampleweb.shared.security.headers import SecurityHeadersMiddleware
from sampleweb.shared.security.rate_limiting import build_limiter

logger = logging.getLogger(__name__)


def create_app(settings: Settings | None = None) -> FastAPI:
    """Create and configure the FastAPI application.

    Registers routers, error handlers, and security middleware.
    This is the composition root of the application.

    Args:
        settings: Settings to run with. Defaults to the environment.

    Returns:
        A fully configured FastAPI application instance.
    """
    settings = settings or default_settings
    configure_logging(level=settings.log_level)

    app = FastAPI(
        title=settings.project_name,
        version=settings.version,
        docs_url="/docs" if settings.debug else None,
        redoc_url="/redoc" if settings.debug else None,
    )
    app.state.settings = settings

    # --- Rate Limiting ---
    app.state.limiter = build_limiter(settings)
    app.add_middleware(SlowAPIMiddleware)

    # --- Security Middleware ---
    app.add_middleware(SecurityHeadersMiddleware)

    # --- Error Handlers ---
    register_error_handlers(app)

    # --- Routers ---
    app.include_router(health_router, prefix="/api/v1")
    app.include_router(weatherforecast_router)
    app.include_router(forecast_endpoint_router)

    logger.info("%s %s ready", settings.project_name, settings.version)
    return app


app = create_app()
