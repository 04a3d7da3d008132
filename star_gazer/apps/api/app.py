"""FastAPI application factory."""

from __future__ import annotations

from fastapi import FastAPI

from star_gazer.apps.api.middleware import CorrelationIdMiddleware
from star_gazer.core.logging import get_logger
from star_gazer.services import ServiceContainer

logger = get_logger(__name__)


def create_app(services: ServiceContainer | None = None) -> FastAPI:
    """Build the FastAPI application with configured routers."""
    if services is None:
        raise RuntimeError("Service container must be provided when creating the app.")
    app = FastAPI(title="Star Gazer")
    app.state.services = services
    app.add_middleware(CorrelationIdMiddleware)

    # Import lazily to avoid potential circular imports when routers grow.
    from .routes import health, skill  # pylint: disable=import-outside-toplevel

    app.include_router(health.router)
    app.include_router(skill.router)
    logger.info("star gazer api ready")
    return app


__all__ = ["create_app"]
