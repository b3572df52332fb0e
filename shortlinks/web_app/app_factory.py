"""FastAPI application factory."""

from fastapi import FastAPI
from fastapi.middleware.cors import CORSMiddleware

from shortlinks import __version__
from .api import api_router
from .web import web_router
from .errors import register_exception_handlers
from .middleware.logging import LoggingMiddleware


def create_app(
    store_instance,
    service_instance,
    config,
    lifespan=None,
) -> FastAPI:
    """Create and configure FastAPI application.

    Args:
        store_instance: Record store instance
        service_instance: Service instance
        config: Configuration instance
        lifespan: Optional lifespan context manager

    Returns:
        Configured FastAPI app
    """
    app = FastAPI(
        title="URL Shortener",
        description="In-memory URL shortening service with click analytics",
        version=__version__,
        docs_url="/docs/api",
        redoc_url=None,
        openapi_url="/docs/openapi.json",
        redirect_slashes=False,
        lifespan=lifespan,
    )

    # Store instances in app state for access in routes
    app.state.store = store_instance
    app.state.service = service_instance
    app.state.config = config

    app.add_middleware(
        CORSMiddleware,
        allow_origins=["*"],
        allow_methods=["*"],
        allow_headers=["*"],
    )
    app.add_middleware(LoggingMiddleware)

    register_exception_handlers(app)

    # API first so /shorturls is never taken for a short code
    app.include_router(api_router, tags=["API"])
    app.include_router(web_router, tags=["Redirect"])

    return app
