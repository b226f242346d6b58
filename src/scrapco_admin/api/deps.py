"""
scrapco_admin.api.deps

FastAPI dependency wiring for the API layer.

Responsibilities:
- Provide dependency functions for settings and the data service client factory.
- Encapsulate app.state access patterns.
"""

from __future__ import annotations

from fastapi import Request

from scrapco_admin.data_service.factory import ClientFactory
from scrapco_admin.settings import Settings


def settings_dep(request: Request) -> Settings:
    # Settings are fixed by `create_app`; see `scrapco_admin.api.app`.
    return request.app.state.settings  # type: ignore[attr-defined]


def client_factory_dep(request: Request) -> ClientFactory:
    # Created on app startup (or injected by tests) in `create_app`.
    return request.app.state.client_factory  # type: ignore[attr-defined]


# --- Module Notes -----------------------------------------------------------
# Handles are built per request from the factory; nothing request-scoped is cached.
