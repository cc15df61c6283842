"""FastAPI application with lifespan and router mounting."""

from __future__ import annotations

from contextlib import asynccontextmanager
from typing import AsyncIterator

from fastapi import FastAPI

from greenroom.api.routes import health, onboarding, screens, validation
from greenroom.core.config import AppSettings
from greenroom.core.logging_config import configure_logging
from greenroom.core.protocols import ICacheBackend, ISubmissionGateway
from greenroom.persistence import create_persistence


def create_app(
    settings: AppSettings | None = None,
    *,
    gateway: ISubmissionGateway | None = None,
    cache: ICacheBackend | None = None,
) -> FastAPI:
    """Create and configure the FastAPI application.

    Backends passed in take precedence over the ones built from settings.
    """

    @asynccontextmanager
    async def lifespan(app: FastAPI) -> AsyncIterator[None]:
        app_settings = settings or AppSettings()
        configure_logging(level=app_settings.log_level)
        app.state.settings = app_settings
        app.state.gateway, app.state.cache = gateway, cache
        if gateway is None or cache is None:
            default_gateway, default_cache = create_persistence(app_settings)
            app.state.gateway = gateway or default_gateway
            app.state.cache = cache or default_cache
        yield

    app = FastAPI(
        title="Greenroom Payroll",
        version="0.1.0",
        lifespan=lifespan,
    )
    app.include_router(health.router)
    app.include_router(validation.router, prefix="/validation")
    app.include_router(onboarding.router, prefix="/onboarding")
    app.include_router(screens.router, prefix="/screens")
    return app
