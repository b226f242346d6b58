"""
scrapco_admin.api.routers.health

Service banner, liveness and readiness endpoints.

Responsibilities:
- Provide liveness probe (`/healthz`).
- Provide readiness probe (`/readyz`) that checks every backing-project credential
  resolves.
"""

from __future__ import annotations

from typing import Any

from fastapi import APIRouter, Depends
from starlette.responses import JSONResponse
from starlette.status import HTTP_503_SERVICE_UNAVAILABLE

from scrapco_admin.api.deps import settings_dep
from scrapco_admin.credentials import CredentialResolver
from scrapco_admin.settings import Settings

router = APIRouter()


@router.get("/")
async def banner(settings: Settings = Depends(settings_dep)) -> dict[str, Any]:
    return {"ok": True, "service": settings.service_name}


@router.get("/healthz")
async def healthz() -> dict[str, str]:
    return {"status": "ok"}


@router.get("/readyz", response_model=None)
async def readyz(settings: Settings = Depends(settings_dep)) -> dict[str, str] | JSONResponse:
    # Readiness: credential resolution is what fails first on a bad deployment.
    missing = CredentialResolver(settings).missing()
    if missing:
        return JSONResponse(
            {"status": "not_ready", "missing": missing},
            status_code=HTTP_503_SERVICE_UNAVAILABLE,
        )
    return {"status": "ready"}


# --- Module Notes -----------------------------------------------------------
# Kubernetes typically uses /healthz for liveness and /readyz for readiness gating.
