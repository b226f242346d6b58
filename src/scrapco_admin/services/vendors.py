from __future__ import annotations

from typing import Any

from scrapco_admin.data_service.client import DataService, Row
from scrapco_admin.errors import upstream_errors

TABLE = "vendor_backends"
LIST_LIMIT = 500


def _first_present(row: Row, *keys: str) -> Any:
    for key in keys:
        if row.get(key) is not None:
            return row[key]
    return None


def vendor_view(row: Row) -> dict[str, Any]:
    # Older vendor rows only carry the last reported position.
    return {
        "vendor_id": row.get("vendor_id"),
        "vendor_ref": row.get("vendor_ref"),
        "offer_url": row.get("offer_url"),
        "latitude": _first_present(row, "latitude", "last_latitude"),
        "longitude": _first_present(row, "longitude", "last_longitude"),
        "updated_at": row.get("updated_at"),
    }


async def list_vendors(client: DataService) -> list[dict[str, Any]]:
    with upstream_errors():
        rows = await client.select_rows(TABLE, columns="*", limit=LIST_LIMIT)
    return [vendor_view(r) for r in rows or []]
