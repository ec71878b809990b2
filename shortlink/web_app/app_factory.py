"""FastAPI application factory."""

from fastapi import FastAPI

from .api import api_router
from .web import web_router
from .middleware.request_id import RequestIDMiddleware
from .middleware.logging import LoggingMiddleware


def create_app(
    service_instance,
    config,
) -> FastAPI:
    """Create and configure FastAPI application.

    Args:
        service_instance: Service instance
        config: Configuration instance

    Returns:
        Configured FastAPI app
    """
    app = FastAPI(
        title="URL Shortener",
        description="Save URLs under short aliases and redirect to them",
        version="1.0.0",
        docs_url="/api/docs",
        redoc_url="/api/redoc",
    )

    # Routes reach the service and config through app state
    app.state.service = service_instance
    app.state.config = config

    # Last added runs first: request ID is assigned before logging sees the request
    app.add_middleware(LoggingMiddleware)
    app.add_middleware(RequestIDMiddleware)

    app.include_router(api_router, tags=["API"])
    # Catch-all /{alias} goes last
    app.include_router(web_router, tags=["Redirect"])

    return app
