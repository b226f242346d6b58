"""
scrapco_admin.api.app

FastAPI app factory for the ScrapCo admin API.

Responsibilities:
- Build the FastAPI application and register routers/middleware/error handlers.
- Create and dispose shared infrastructure (pooled HTTP client, client factory).
- Provide a single composition root where cross-cutting concerns live.
"""

from __future__ import annotations

from collections.abc import AsyncIterator
from contextlib import asynccontextmanager

import httpx
from fastapi import FastAPI
from fastapi.middleware.cors import CORSMiddleware

from scrapco_admin import __version__
from scrapco_admin.api.errors import register_error_handlers
from scrapco_admin.api.routers.admin.router import router as admin_router
from scrapco_admin.api.routers.health import router as health_router
from scrapco_admin.credentials import CredentialResolver
from scrapco_admin.data_service.factory import ClientFactory, HttpClientFactory
from scrapco_admin.observability.logging import configure_logging, get_logger
from scrapco_admin.observability.middleware import RequestContextMiddleware
from scrapco_admin.settings import Settings

log = get_logger(__name__)


def create_app(*, settings: Settings, client_factory: ClientFactory | None = None) -> FastAPI:
    configure_logging(service_name=settings.service_name, level=settings.log_level)

    @asynccontextmanager
    async def lifespan(app: FastAPI) -> AsyncIterator[None]:
        log.info("startup", admin_portal_enabled=settings.admin_portal_enabled)
        http: httpx.AsyncClient | None = None
        if client_factory is None:
            # One pooled client for every project; handles only differ by headers.
            http = httpx.AsyncClient(timeout=settings.data_service_timeout_seconds)
            app.state.client_factory = HttpClientFactory(
                resolver=CredentialResolver(settings), http=http
            )
        try:
            yield
        finally:
            if http is not None:
                await http.aclose()
            log.info("shutdown")

    app = FastAPI(
        title="ScrapCo Admin API",
        version=__version__,
        docs_url="/docs",
        openapi_url="/openapi.json",
        lifespan=lifespan,
    )
    app.state.settings = settings
    # Tests inject a factory over in-memory fakes; production builds one on startup.
    app.state.client_factory = client_factory

    app.add_middleware(
        CORSMiddleware,
        allow_origins=settings.cors_allow_origins,
        allow_methods=["*"],
        allow_headers=["*"],
    )
    app.add_middleware(RequestContextMiddleware)
    register_error_handlers(app)

    app.include_router(health_router, tags=["health"])
    app.include_router(admin_router)

    return app


# --- Module Notes -----------------------------------------------------------
# This file is intentionally small: app composition stays here; business logic stays
# in the auth and services layers.
