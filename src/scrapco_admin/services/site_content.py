"""
scrapco_admin.services.site_content

Site content configuration: marketing stats and testimonials.

Responsibilities:
- Validate-then-persist creates with defaults (`isActive` true, optional fields null).
- Partial updates that only touch fields present in the request.
- Map stored rows to the camelCase shape returned by the API.
"""

from __future__ import annotations

from collections.abc import Mapping
from typing import Any

from scrapco_admin.data_service.client import DataService, Order, Row
from scrapco_admin.errors import NotFoundError, UpstreamError, ValidationError, upstream_errors
from scrapco_admin.services import validation as v

LIST_LIMIT = 500


class _ContentService:
    table: str
    columns: str
    not_found: str

    def __init__(self, client: DataService) -> None:
        self._client = client

    def view(self, row: Row) -> dict[str, Any]:
        raise NotImplementedError

    def new_row(self, fields: Mapping[str, Any]) -> Row:
        raise NotImplementedError

    def patch(self, fields: Mapping[str, Any]) -> Row:
        raise NotImplementedError

    async def list(self) -> list[dict[str, Any]]:
        with upstream_errors():
            rows = await self._client.select_rows(
                self.table,
                columns=self.columns,
                order=(Order("sort_order"),),
                limit=LIST_LIMIT,
            )
        return [self.view(r) for r in rows or []]

    async def create(self, fields: Mapping[str, Any]) -> dict[str, Any]:
        row = self.new_row(fields)
        with upstream_errors():
            inserted = await self._client.insert_rows(self.table, [row], returning=self.columns)
        if not inserted:
            raise UpstreamError(f"{self.table} insert returned no rows")
        return self.view(inserted[0])

    async def update(self, row_id: Any, fields: Mapping[str, Any]) -> dict[str, Any]:
        """
        `fields` holds only the keys the caller sent; absent keys are left untouched.
        """

        target = v.text(row_id)
        if not target:
            raise ValidationError("id is required")
        patch = self.patch(fields)
        if not patch:
            raise ValidationError("No fields to update")

        with upstream_errors():
            updated = await self._client.update_rows(
                self.table, patch, filters={"id": target}, returning=self.columns
            )
        if not updated:
            raise NotFoundError(self.not_found)
        return self.view(updated[0])


class SiteStatService(_ContentService):
    table = "site_stats"
    columns = "id,label,value,sort_order,is_active"
    not_found = "stat not found"

    def view(self, row: Row) -> dict[str, Any]:
        return {
            "id": row.get("id"),
            "label": row.get("label"),
            "value": row.get("value"),
            "sortOrder": row.get("sort_order"),
            "isActive": bool(row.get("is_active")),
        }

    def new_row(self, fields: Mapping[str, Any]) -> Row:
        return {
            "label": v.required_text(fields.get("label"), "label"),
            "value": v.required_text(fields.get("value"), "value"),
            "sort_order": v.sort_order(fields.get("sortOrder")),
            "is_active": v.flag(fields["isActive"]) if "isActive" in fields else True,
        }

    def patch(self, fields: Mapping[str, Any]) -> Row:
        patch: Row = {}
        if "label" in fields:
            patch["label"] = v.text(fields["label"])
        if "value" in fields:
            patch["value"] = v.text(fields["value"])
        if "sortOrder" in fields:
            patch["sort_order"] = v.sort_order(fields["sortOrder"])
        if "isActive" in fields:
            patch["is_active"] = v.flag(fields["isActive"])
        return patch


class TestimonialService(_ContentService):
    table = "testimonials"
    columns = "id,name,quote,role,rating,sort_order,is_active"
    not_found = "testimonial not found"

    def view(self, row: Row) -> dict[str, Any]:
        return {
            "id": row.get("id"),
            "name": row.get("name"),
            "quote": row.get("quote"),
            "role": row.get("role"),
            "rating": row.get("rating"),
            "sortOrder": row.get("sort_order"),
            "isActive": bool(row.get("is_active")),
        }

    def new_row(self, fields: Mapping[str, Any]) -> Row:
        return {
            "name": v.required_text(fields.get("name"), "name"),
            "quote": v.required_text(fields.get("quote"), "quote"),
            "role": v.optional_text(fields.get("role")),
            "rating": v.rating(fields.get("rating")),
            "sort_order": v.sort_order(fields.get("sortOrder")),
            "is_active": v.flag(fields["isActive"]) if "isActive" in fields else True,
        }

    def patch(self, fields: Mapping[str, Any]) -> Row:
        patch: Row = {}
        if "name" in fields:
            patch["name"] = v.text(fields["name"])
        if "quote" in fields:
            patch["quote"] = v.text(fields["quote"])
        if "role" in fields:
            patch["role"] = v.optional_text(fields["role"])
        if "rating" in fields:
            patch["rating"] = v.rating(fields["rating"])
        if "sortOrder" in fields:
            patch["sort_order"] = v.sort_order(fields["sortOrder"])
        if "isActive" in fields:
            patch["is_active"] = v.flag(fields["isActive"])
        return patch


# --- Module Notes -----------------------------------------------------------
# Public pages read these tables directly through row-level security policies that
# only expose `is_active = true` rows; this service sees every row.
