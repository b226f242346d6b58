from __future__ import annotations

from typing import Any

from scrapco_admin.data_service.client import DataService, Order, Row
from scrapco_admin.errors import NotFoundError, UpstreamError, ValidationError, upstream_errors
from scrapco_admin.services.rates import RateManager
from scrapco_admin.services.validation import required_text, text

TABLE = "scrap_types"
COLUMNS = "id,name"


class ScrapTypeService:
    def __init__(self, client: DataService) -> None:
        self._client = client
        self._rates = RateManager(client)

    async def list_with_rates(self) -> list[dict[str, Any]]:
        with upstream_errors():
            types = await self._client.select_rows(TABLE, columns=COLUMNS, order=(Order("name"),))
        rates = await self._rates.active_rates()

        rows = []
        for t in types or []:
            rate = rates.get(t.get("id")) or {}
            rows.append(
                {
                    "id": t.get("id"),
                    "name": t.get("name"),
                    "ratePerKg": rate.get("rate_per_kg"),
                    "effectiveFrom": rate.get("effective_from"),
                }
            )
        return rows

    async def create(self, name: Any) -> Row:
        cleaned = required_text(name, "name")
        with upstream_errors():
            inserted = await self._client.insert_rows(TABLE, [{"name": cleaned}], returning=COLUMNS)
        if not inserted:
            raise UpstreamError("scrap type insert returned no rows")
        return inserted[0]

    async def rename(self, scrap_type_id: Any, name: Any) -> Row:
        type_id = text(scrap_type_id)
        if not type_id:
            raise ValidationError("id is required")
        cleaned = required_text(name, "name")
        with upstream_errors():
            updated = await self._client.update_rows(
                TABLE, {"name": cleaned}, filters={"id": type_id}, returning=COLUMNS
            )
        if not updated:
            raise NotFoundError("scrap type not found")
        return updated[0]
