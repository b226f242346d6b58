"""
scrapco_admin.api.routers.admin.resources.scrap_types

Scrap type catalog endpoints.

Responsibilities:
- List scrap types joined with their currently active rate.
- Create and rename scrap types.
"""

from __future__ import annotations

from typing import Any

from fastapi import APIRouter, Depends
from pydantic import BaseModel
from starlette.status import HTTP_201_CREATED

from scrapco_admin.api.deps import client_factory_dep
from scrapco_admin.api.routers.admin.body import admin_body
from scrapco_admin.data_service.factory import ClientFactory
from scrapco_admin.services.scrap_types import ScrapTypeService

router = APIRouter()


class ScrapTypeBody(BaseModel):
    name: Any = None


@router.get("")
async def list_scrap_types(
    factory: ClientFactory = Depends(client_factory_dep),
) -> dict[str, Any]:
    rows = await ScrapTypeService(factory.service_client()).list_with_rates()
    return {"success": True, "scrapTypes": rows}


@router.post("", status_code=HTTP_201_CREATED)
async def create_scrap_type(
    body: ScrapTypeBody | None = Depends(admin_body(ScrapTypeBody)),
    factory: ClientFactory = Depends(client_factory_dep),
) -> dict[str, Any]:
    body = body or ScrapTypeBody()
    row = await ScrapTypeService(factory.service_client()).create(body.name)
    return {"success": True, "scrapType": row}


@router.patch("/{scrap_type_id}")
async def rename_scrap_type(
    scrap_type_id: str,
    body: ScrapTypeBody | None = Depends(admin_body(ScrapTypeBody)),
    factory: ClientFactory = Depends(client_factory_dep),
) -> dict[str, Any]:
    body = body or ScrapTypeBody()
    row = await ScrapTypeService(factory.service_client()).rename(scrap_type_id, body.name)
    return {"success": True, "scrapType": row}
