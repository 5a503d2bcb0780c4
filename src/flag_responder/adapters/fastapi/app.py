"""FastAPI adapter – application factory and lifespan."""
from __future__ import annotations

from contextlib import asynccontextmanager
from typing import AsyncIterator

from fastapi import FastAPI

from flag_responder import __version__
from flag_responder.adapters.fastapi.context import AppContext
from flag_responder.adapters.fastapi.middleware import CorrelationIdMiddleware
from flag_responder.adapters.fastapi.routers import FlagsRouter, OpsRouter
from flag_responder.adapters.launchdarkly import ProviderFactory, close_client, init_client
from flag_responder.config.settings import AppSettings
from flag_responder.kernel.time import Clock
from flag_responder.observability.logging import get_logger

logger = get_logger(__name__)

ENDPOINTS = ("GET /", "GET /health", "GET /ready", "GET /features", "GET /demo/{userType}")


def create_app(
    settings: AppSettings | None = None,
    *,
    provider_factory: ProviderFactory | None = None,
    clock: Clock | None = None,
) -> FastAPI:
    """Build the service.

    The flag provider is initialized inside the lifespan, so no request is
    served until it has resolved to a ready provider or to fallback mode.
    ``provider_factory`` replaces the LaunchDarkly client construction.
    """
    settings = settings or AppSettings.from_env()

    @asynccontextmanager
    async def lifespan(app: FastAPI) -> AsyncIterator[None]:
        logger.info(
            "app.startup",
            environment=settings.environment,
            version=settings.app_version,
        )
        provider = await init_client(settings, factory=provider_factory)
        app.state.context = AppContext.create(settings, provider, clock=clock)
        logger.info(
            "app.ready",
            port=settings.port,
            fallback_mode=provider is None,
            endpoints=list(ENDPOINTS),
        )
        try:
            yield
        finally:
            logger.info("app.shutdown")
            close_client(provider)

    app = FastAPI(
        title="flag-responder",
        version=__version__,
        lifespan=lifespan,
    )
    app.add_middleware(CorrelationIdMiddleware)
    app.include_router(OpsRouter())
    app.include_router(FlagsRouter())
    return app


__all__ = ["create_app"]
