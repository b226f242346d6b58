"""
scrapco_admin.api.routers.admin.router

Admin router aggregator.

Responsibilities:
- Mount per-resource admin routers under `/api/admin`.
- Apply the admin gate once, for every route in the surface.
"""

from __future__ import annotations

from fastapi import APIRouter, Depends

from scrapco_admin.api.routers.admin.resources import (
    me,
    scrap_rates,
    scrap_types,
    site_stats,
    testimonials,
    vendors,
)
from scrapco_admin.auth.deps import require_admin

router = APIRouter(
    prefix="/api/admin",
    tags=["admin"],
    dependencies=[Depends(require_admin)],
)

router.include_router(me.router)
router.include_router(vendors.router, prefix="/vendors")
router.include_router(scrap_types.router, prefix="/scrap-types")
router.include_router(scrap_rates.router, prefix="/scrap-rates")
router.include_router(site_stats.router, prefix="/site-stats")
router.include_router(testimonials.router, prefix="/testimonials")


# --- Module Notes -----------------------------------------------------------
# Resource routers re-declare `require_admin` only when they need the Principal;
# FastAPI resolves it once per request.
