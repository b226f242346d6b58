from __future__ import annotations

from typing import Any

from fastapi import APIRouter, Depends
from pydantic import BaseModel, ConfigDict, Field
from starlette.status import HTTP_201_CREATED

from scrapco_admin.api.deps import client_factory_dep
from scrapco_admin.api.routers.admin.body import admin_body
from scrapco_admin.data_service.factory import ClientFactory
from scrapco_admin.services.rates import RateManager, rate_view

router = APIRouter()


class ScrapRateBody(BaseModel):
    model_config = ConfigDict(populate_by_name=True)

    scrap_type_id: Any = Field(default=None, alias="scrapTypeId")
    rate_per_kg: Any = Field(default=None, alias="ratePerKg")


@router.post("", status_code=HTTP_201_CREATED)
async def set_scrap_rate(
    body: ScrapRateBody | None = Depends(admin_body(ScrapRateBody)),
    factory: ClientFactory = Depends(client_factory_dep),
) -> dict[str, Any]:
    # Replaces the active rate for the scrap type; the previous row stays as history.
    body = body or ScrapRateBody()
    row = await RateManager(factory.service_client()).set_rate(body.scrap_type_id, body.rate_per_kg)
    return {"success": True, "rate": rate_view(row)}
