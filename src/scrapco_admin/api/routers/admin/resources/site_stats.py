from __future__ import annotations

from typing import Any

from fastapi import APIRouter, Depends
from pydantic import BaseModel, ConfigDict, Field
from starlette.status import HTTP_201_CREATED

from scrapco_admin.api.deps import client_factory_dep
from scrapco_admin.api.routers.admin.body import admin_body
from scrapco_admin.data_service.factory import ClientFactory
from scrapco_admin.services.site_content import SiteStatService

router = APIRouter()


class SiteStatBody(BaseModel):
    model_config = ConfigDict(populate_by_name=True)

    label: Any = None
    value: Any = None
    sort_order: Any = Field(default=None, alias="sortOrder")
    is_active: Any = Field(default=None, alias="isActive")


def _sent_fields(body: SiteStatBody | None) -> dict[str, Any]:
    # Only keys present in the JSON body; explicit nulls are kept.
    return body.model_dump(by_alias=True, exclude_unset=True) if body else {}


@router.get("")
async def list_site_stats(factory: ClientFactory = Depends(client_factory_dep)) -> dict[str, Any]:
    stats = await SiteStatService(factory.service_client()).list()
    return {"success": True, "stats": stats}


@router.post("", status_code=HTTP_201_CREATED)
async def create_site_stat(
    body: SiteStatBody | None = Depends(admin_body(SiteStatBody)),
    factory: ClientFactory = Depends(client_factory_dep),
) -> dict[str, Any]:
    stat = await SiteStatService(factory.service_client()).create(_sent_fields(body))
    return {"success": True, "stat": stat}


@router.patch("/{stat_id}")
async def update_site_stat(
    stat_id: str,
    body: SiteStatBody | None = Depends(admin_body(SiteStatBody)),
    factory: ClientFactory = Depends(client_factory_dep),
) -> dict[str, Any]:
    stat = await SiteStatService(factory.service_client()).update(stat_id, _sent_fields(body))
    return {"success": True, "stat": stat}
