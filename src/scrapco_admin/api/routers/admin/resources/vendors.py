from __future__ import annotations

from typing import Any

from fastapi import APIRouter, Depends

from scrapco_admin.api.deps import client_factory_dep
from scrapco_admin.data_service.factory import ClientFactory
from scrapco_admin.services.vendors import list_vendors

router = APIRouter()


@router.get("")
async def get_vendors(factory: ClientFactory = Depends(client_factory_dep)) -> dict[str, Any]:
    vendors = await list_vendors(factory.service_client())
    return {"success": True, "vendors": vendors}
